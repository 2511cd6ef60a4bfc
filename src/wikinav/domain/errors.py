"""Custom exceptions for wikinav."""

from __future__ import annotations

from wikinav.domain.enums import LinkErrorKind


class WikiNavError(Exception):
    """Base exception for all wikinav errors."""

    def __init__(self, message: str, details: dict | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(WikiNavError):
    """Raised when there's a configuration problem."""

    pass


class LinkParseError(WikiNavError):
    """Raised when link-interior text cannot be parsed.

    ``kind`` tells callers which failure occurred without an isinstance
    check; ``link_text`` is the raw input exactly as it was received.
    """

    kind: LinkErrorKind = LinkErrorKind.MALFORMED

    def __init__(self, message: str, link_text: str) -> None:
        super().__init__(message, details={"kind": self.kind.value, "link_text": link_text})
        self.link_text = link_text


class EmptyLinkError(LinkParseError):
    """Raised when the link text is empty or whitespace only."""

    kind = LinkErrorKind.EMPTY_LINK


class MalformedLinkError(LinkParseError):
    """Raised when a delimiter split does not yield a usable page name."""

    kind = LinkErrorKind.MALFORMED
