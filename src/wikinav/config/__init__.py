"""Configuration module for wikinav."""

from wikinav.config.settings import Settings, ValidationReport, get_settings, validate_configuration

__all__ = ["Settings", "ValidationReport", "get_settings", "validate_configuration"]
