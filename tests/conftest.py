"""Shared fixtures: isolate settings, env vars and logging per test."""

from __future__ import annotations

import logging

import pytest
import structlog

from wikinav.config.settings import get_settings


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch, tmp_path):
    for name in (
        "WIKINAV_VAULT_ROOT",
        "WIKINAV_NOTE_EXTENSION",
        "WIKINAV_SLUG_STRATEGY",
        "WIKINAV_LOG_LEVEL",
        "WIKINAV_LOG_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)
    # No stray .env from the working directory.
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()

    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.reset_defaults()
    get_settings.cache_clear()
