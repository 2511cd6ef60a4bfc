"""Application settings using Pydantic Settings."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any, Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from wikinav.domain.enums import DEFAULT_STRATEGY, NormalizationStrategy
from wikinav.domain.errors import ConfigurationError
from wikinav.domain.naming import parse_strategy


class Settings(BaseSettings):
    """Settings loaded from ``WIKINAV_*`` environment variables or ``.env``."""

    model_config = SettingsConfigDict(
        env_prefix="WIKINAV_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Notes
    vault_root: str = ""
    note_extension: str = ".md"
    slug_strategy: NormalizationStrategy = DEFAULT_STRATEGY

    # Logging
    log_level: str = "INFO"
    log_format: Literal["console", "json"] = "console"

    @field_validator("slug_strategy", mode="before")
    @classmethod
    def _check_slug_strategy(cls, value: Any) -> NormalizationStrategy:
        try:
            return parse_strategy(value)
        except ConfigurationError as exc:
            # pydantic turns ValueError into a ValidationError
            raise ValueError(exc.message) from exc

    @field_validator("note_extension")
    @classmethod
    def _dot_extension(cls, value: str) -> str:
        value = value.strip()
        if value and not value.startswith("."):
            value = f".{value}"
        return value

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.upper()


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# ---------------------------------------------------------------------------
# Non-raising validation
# ---------------------------------------------------------------------------


@dataclass
class ValidationIssue:
    field: str
    message: str
    code: str | None = None


@dataclass
class ValidationReport:
    """Errors block a configuration; warnings only advise."""

    errors: list[ValidationIssue] = field(default_factory=list)
    warnings: list[ValidationIssue] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors


def validate_configuration(data: dict[str, Any]) -> ValidationReport:
    """Check a partial configuration mapping without raising.

    Only keys that are present are checked.
    """
    report = ValidationReport()

    if "slug_strategy" in data:
        try:
            parse_strategy(data["slug_strategy"])
        except ConfigurationError as exc:
            report.errors.append(ValidationIssue(
                field="slug_strategy",
                message=exc.message,
                code="INVALID_SLUG_STRATEGY",
            ))

    if "vault_root" in data and not str(data["vault_root"]).strip():
        report.warnings.append(ValidationIssue(
            field="vault_root",
            message="Vault root is empty, workspace root will be used",
        ))

    if "note_extension" in data and not str(data["note_extension"]).strip():
        report.warnings.append(ValidationIssue(
            field="note_extension",
            message="Note extension is empty, files will have no extension",
        ))

    return report
