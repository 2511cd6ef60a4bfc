"""wikinav — wiki-link parsing and page-name normalization."""

__version__ = "1.0.0"
