"""Resolve every wiki-link in a document to a navigable target.

Pipeline per occurrence:
1. Locate ``[[...]]`` occurrences in the text.
2. Parse the interior into a ``ParsedLink``.
3. Map the page name to a file name with the configured strategy.
4. Sanitize, append the note extension and join with the vault root.
5. Hand the location to the injected ``TargetFactory``.

A link that fails to parse is recorded as skipped and logged; the rest of
the document is still processed.
"""

from __future__ import annotations

from typing import Any

from wikinav.config.logging import get_logger
from wikinav.config.settings import Settings
from wikinav.domain.entities import DocumentLinks, LinkOccurrence, ResolvedLink, SkippedLink
from wikinav.domain.errors import LinkParseError
from wikinav.domain.naming import NameNormalizer, build_target_path, sanitize_file_name
from wikinav.domain.ports import FileNameMapper, LinkTextParser, TargetFactory
from wikinav.infrastructure.parsing.wiki_links import LinkParser, iter_link_occurrences
from wikinav.infrastructure.targets import StringTargetFactory

logger = get_logger(__name__)

MARKDOWN_LANGUAGE_ID = "markdown"


class DocumentLinkResolver:
    """Turn the links of a markdown document into targets."""

    def __init__(
        self,
        target_factory: TargetFactory | None = None,
        *,
        parser: LinkTextParser | None = None,
        normalizer: FileNameMapper | None = None,
        vault_root: str = "",
        note_extension: str = ".md",
        workspace: str | None = None,
    ) -> None:
        self.target_factory = target_factory or StringTargetFactory()
        self.parser = parser or LinkParser()
        self.normalizer = normalizer or NameNormalizer()
        self.vault_root = vault_root
        self.note_extension = note_extension
        self.workspace = workspace

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        target_factory: TargetFactory | None = None,
        workspace: str | None = None,
    ) -> DocumentLinkResolver:
        return cls(
            target_factory,
            normalizer=NameNormalizer(settings.slug_strategy),
            vault_root=settings.vault_root,
            note_extension=settings.note_extension,
            workspace=workspace,
        )

    def resolve(self, content: str, language_id: str = MARKDOWN_LANGUAGE_ID) -> DocumentLinks:
        """Resolve all links in *content*; non-markdown documents have none."""
        result = DocumentLinks()
        if language_id != MARKDOWN_LANGUAGE_ID:
            return result

        for occurrence in iter_link_occurrences(content):
            try:
                result.resolved.append(self._resolve_one(occurrence))
            except LinkParseError as exc:
                logger.debug(
                    "links.skipped",
                    raw=occurrence.raw,
                    kind=exc.kind.value,
                    line=occurrence.line,
                    column=occurrence.column,
                )
                result.skipped.append(SkippedLink(occurrence=occurrence, error=exc))

        logger.debug(
            "links.resolved",
            resolved=len(result.resolved),
            skipped=len(result.skipped),
        )
        return result

    def targets(self, content: str, language_id: str = MARKDOWN_LANGUAGE_ID) -> list[Any]:
        return self.resolve(content, language_id).targets

    def _resolve_one(self, occurrence: LinkOccurrence) -> ResolvedLink:
        link = self.parser.parse(occurrence.raw)
        mapped = self.normalizer.to_file_name(link.page_name)
        location = build_target_path(
            self.vault_root,
            mapped,
            self.note_extension,
            workspace=self.workspace,
        )
        return ResolvedLink(
            occurrence=occurrence,
            link=link,
            file_name=sanitize_file_name(mapped) + self.note_extension,
            target=self.target_factory.build(location),
        )
