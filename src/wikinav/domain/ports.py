"""Port definitions (hexagonal architecture).

The resolver depends only on these Protocols. Hosts inject their own
adapter to get editor-specific objects (URIs, document links) back.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class TargetFactory(Protocol):
    """Build a navigable target from a joined location string."""

    def build(self, location: str) -> Any: ...


@runtime_checkable
class LinkTextParser(Protocol):
    """Turn link-interior text into a ``ParsedLink``."""

    def parse(self, link_text: str) -> Any: ...


@runtime_checkable
class FileNameMapper(Protocol):
    """Map a page name to a file name."""

    def to_file_name(self, page_name: str) -> str: ...
