"""Wiring: build a ready-to-use resolver from settings."""

from __future__ import annotations

from wikinav.application.resolve_links import DocumentLinkResolver
from wikinav.config.settings import Settings, get_settings
from wikinav.domain.ports import TargetFactory


def create_resolver(
    settings: Settings | None = None,
    target_factory: TargetFactory | None = None,
    workspace: str | None = None,
) -> DocumentLinkResolver:
    """Create a ``DocumentLinkResolver``; settings default to the environment."""
    return DocumentLinkResolver.from_settings(
        settings or get_settings(),
        target_factory=target_factory,
        workspace=workspace,
    )
