"""Default ``TargetFactory`` adapters."""

from __future__ import annotations

from pathlib import Path


class PathTargetFactory:
    """Build ``pathlib.Path`` targets."""

    def build(self, location: str) -> Path:
        return Path(location)


class StringTargetFactory:
    """Return the joined location unchanged."""

    def build(self, location: str) -> str:
        return location
