"""Wiki-link parsing for markdown content.

Handles four interior syntaxes:
- ``[[Target]]``                  — plain link
- ``[[Target#Heading]]``          — link to a heading
- ``[[Target|Display]]``          — link with display alias
- ``[[Target#Heading|Display]]``  — both

``|`` wins over ``#``: the alias split happens first, and the heading is
only looked for in the part left of the ``|``. Every split is on the
first delimiter, so later ``|`` or ``#`` stay in the right-hand text.
"""

from __future__ import annotations

import bisect
import re
from typing import Iterator

from wikinav.domain.entities import LinkOccurrence, ParsedLink
from wikinav.domain.errors import EmptyLinkError, MalformedLinkError

# Interior is everything up to the next ``]``.
_WIKI_LINK_RE = re.compile(r"\[\[([^\]]+)\]\]")

ALIAS_DELIMITER = "|"
HEADING_DELIMITER = "#"
OPEN_BRACKETS = "[["
CLOSE_BRACKETS = "]]"


class LinkParser:
    """Parse link-interior text into a ``ParsedLink``.

    Stateless; one instance can be shared freely.
    """

    def parse(self, link_text: str) -> ParsedLink:
        """Parse *link_text* (the text between ``[[`` and ``]]``).

        Raises:
            EmptyLinkError: the text is empty or whitespace only.
            MalformedLinkError: a delimiter left no page name before it.
        """
        if not link_text or not link_text.strip():
            raise EmptyLinkError("Wiki-link text cannot be empty", link_text)

        text = link_text.strip()

        if ALIAS_DELIMITER in text:
            return self._parse_alias(text, link_text)
        if HEADING_DELIMITER in text:
            page_name, heading = self._split_heading(text, link_text)
            return ParsedLink(page_name=page_name, heading=heading)
        return ParsedLink(page_name=text)

    def _parse_alias(self, text: str, link_text: str) -> ParsedLink:
        target_part, display_name = (p.strip() for p in text.split(ALIAS_DELIMITER, 1))
        if not target_part:
            raise MalformedLinkError("Invalid alias link format", link_text)

        heading: str | None = None
        page_name = target_part
        if HEADING_DELIMITER in target_part:
            page_name, heading = self._split_heading(target_part, link_text)

        return ParsedLink(page_name=page_name, heading=heading, display_name=display_name)

    @staticmethod
    def _split_heading(text: str, link_text: str) -> tuple[str, str]:
        page_name, heading = (p.strip() for p in text.split(HEADING_DELIMITER, 1))
        if not page_name:
            raise MalformedLinkError("Invalid heading link format", link_text)
        return page_name, heading


# ---------------------------------------------------------------------------
# Locating links in a document
# ---------------------------------------------------------------------------


def _line_starts(content: str) -> list[int]:
    starts = [0]
    starts.extend(m.end() for m in re.finditer(r"\n", content))
    return starts


def iter_link_occurrences(content: str) -> Iterator[LinkOccurrence]:
    """Yield every ``[[...]]`` in *content* with its offsets and position.

    Empty or whitespace-only interiors are yielded as well; rejecting them
    is the parser's job.
    """
    starts = _line_starts(content)
    for match in _WIKI_LINK_RE.finditer(content):
        line = bisect.bisect_right(starts, match.start()) - 1
        yield LinkOccurrence(
            raw=match.group(1),
            start=match.start(),
            end=match.end(),
            line=line,
            column=match.start() - starts[line],
        )


def is_offset_in_link(content: str, offset: int) -> bool:
    """True when *offset* sits between a ``[[`` and the ``]]`` closing it.

    The last ``[[`` that ends at or before the offset is paired with the
    first ``]]`` after it; the offset must not be past that ``]]``.
    Unterminated links do not count. Offsets between the two characters
    of either bracket pair are outside, the same boundary ``find_link_at``
    uses.
    """
    open_at = content.rfind(OPEN_BRACKETS, 0, offset)
    if open_at == -1:
        return False
    close_at = content.find(CLOSE_BRACKETS, open_at + len(OPEN_BRACKETS))
    return close_at != -1 and offset <= close_at


def find_link_at(content: str, offset: int) -> LinkOccurrence | None:
    """Return the link occurrence whose interior contains *offset*, if any.

    Both ends of the interior count: right after ``[[`` and right before
    ``]]``.
    """
    for occurrence in iter_link_occurrences(content):
        interior_start = occurrence.start + len(OPEN_BRACKETS)
        interior_end = occurrence.end - len(CLOSE_BRACKETS)
        if interior_start <= offset <= interior_end:
            return occurrence
        if interior_start > offset:
            break
    return None
