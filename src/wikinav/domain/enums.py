"""Domain enumerations for wikinav."""

from __future__ import annotations

from enum import Enum


class NormalizationStrategy(str, Enum):
    """How a page name is turned into a file name.

    The value is what users write in configuration (``slug_strategy``).
    """

    PASSTHROUGH = "passthrough"
    KEBAB_CASE = "kebab-case"
    SNAKE_CASE = "snake_case"


DEFAULT_STRATEGY = NormalizationStrategy.PASSTHROUGH


class LinkErrorKind(str, Enum):
    """Discriminator carried by every link parse failure."""

    EMPTY_LINK = "empty-link"
    MALFORMED = "malformed"

