"""Text parsing adapters."""

from wikinav.infrastructure.parsing.wiki_links import (
    LinkParser,
    find_link_at,
    is_offset_in_link,
    iter_link_occurrences,
)

__all__ = ["LinkParser", "find_link_at", "is_offset_in_link", "iter_link_occurrences"]
