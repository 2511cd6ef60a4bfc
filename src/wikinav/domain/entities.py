"""Value objects produced while reading links out of a document.

All of them are frozen dataclasses: created once per link occurrence,
handed to the caller and never mutated.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from wikinav.domain.errors import LinkParseError


@dataclass(frozen=True)
class ParsedLink:
    """Structured form of a link interior such as ``Target#Heading|Display``."""

    page_name: str              # trimmed left-most segment, never empty
    heading: str | None = None  # set only when a ``#`` was found
    display_name: str | None = None  # set only when a ``|`` was found

    def __post_init__(self) -> None:
        if not self.page_name or not self.page_name.strip():
            raise ValueError("ParsedLink.page_name must not be empty")

    @property
    def is_alias(self) -> bool:
        return self.display_name is not None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"page_name": self.page_name, "is_alias": self.is_alias}
        if self.heading is not None:
            data["heading"] = self.heading
        if self.display_name is not None:
            data["display_name"] = self.display_name
        return data


@dataclass(frozen=True)
class LinkOccurrence:
    """A ``[[...]]`` match located in a document."""

    raw: str     # interior text, untrimmed
    start: int   # offset of the opening ``[[``
    end: int     # offset just past the closing ``]]``
    line: int    # 0-based line of ``start``
    column: int  # 0-based column of ``start``


@dataclass(frozen=True)
class ResolvedLink:
    """An occurrence that parsed cleanly and was mapped to a target."""

    occurrence: LinkOccurrence
    link: ParsedLink
    file_name: str
    target: Any


@dataclass(frozen=True)
class SkippedLink:
    """An occurrence the parser rejected."""

    occurrence: LinkOccurrence
    error: LinkParseError


@dataclass(frozen=True)
class DocumentLinks:
    """Outcome of resolving every link in one document."""

    resolved: list[ResolvedLink] = field(default_factory=list)
    skipped: list[SkippedLink] = field(default_factory=list)

    @property
    def targets(self) -> list[Any]:
        return [r.target for r in self.resolved]
