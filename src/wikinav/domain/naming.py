"""Page-name to file-name rules as pure functions.

Nothing here touches the filesystem and nothing here raises for any
string input: every value degrades to something usable, ``untitled`` at
worst.
"""

from __future__ import annotations

import ntpath
import posixpath
import re
from typing import Callable

from wikinav.domain.enums import DEFAULT_STRATEGY, NormalizationStrategy
from wikinav.domain.errors import ConfigurationError

# ---------------------------------------------------------------------------
# Strategy lookup
# ---------------------------------------------------------------------------

STRATEGY_LOOKUP: dict[str, NormalizationStrategy] = {
    s.value: s for s in NormalizationStrategy
}


def parse_strategy(value: str | NormalizationStrategy | None) -> NormalizationStrategy:
    """Resolve a configured ``slug_strategy`` value.

    ``None`` selects ``DEFAULT_STRATEGY``; unknown strings and non-string
    values raise ``ConfigurationError``.
    """
    if value is None:
        return DEFAULT_STRATEGY
    if isinstance(value, NormalizationStrategy):
        return value
    strategy = STRATEGY_LOOKUP.get(value.strip()) if isinstance(value, str) else None
    if strategy is None:
        raise ConfigurationError(
            f"Invalid slug strategy: {value!r}",
            details={"field": "slug_strategy", "allowed": sorted(STRATEGY_LOOKUP)},
        )
    return strategy


# ---------------------------------------------------------------------------
# Strategy transforms
# ---------------------------------------------------------------------------

_SPECIAL_CHARS_RE = re.compile(r'[/:\\?*|"<>]')
_WHITESPACE_RE = re.compile(r"\s+")
_HYPHEN_RUN_RE = re.compile(r"-+")
_UNDERSCORE_RUN_RE = re.compile(r"_+")


def to_kebab_case(page_name: str) -> str:
    value = _SPECIAL_CHARS_RE.sub("-", page_name.lower())
    value = _WHITESPACE_RE.sub("-", value)
    value = _HYPHEN_RUN_RE.sub("-", value)
    return value.strip("-")


def to_snake_case(page_name: str) -> str:
    value = _SPECIAL_CHARS_RE.sub("", page_name.lower())
    value = _WHITESPACE_RE.sub("_", value)
    value = _UNDERSCORE_RUN_RE.sub("_", value)
    return value.strip("_")


def _passthrough(page_name: str) -> str:
    return page_name


TRANSFORMS: dict[NormalizationStrategy, Callable[[str], str]] = {
    NormalizationStrategy.PASSTHROUGH: _passthrough,
    NormalizationStrategy.KEBAB_CASE: to_kebab_case,
    NormalizationStrategy.SNAKE_CASE: to_snake_case,
}


class NameNormalizer:
    """Map page names to file names under a fixed strategy."""

    def __init__(self, strategy: NormalizationStrategy | str | None = DEFAULT_STRATEGY) -> None:
        self._strategy = parse_strategy(strategy)
        self._transform = TRANSFORMS[self._strategy]

    @property
    def strategy(self) -> NormalizationStrategy:
        return self._strategy

    def to_file_name(self, page_name: str) -> str:
        return self._transform(page_name)

    def __repr__(self) -> str:
        return f"NameNormalizer(strategy={self._strategy.value!r})"


# ---------------------------------------------------------------------------
# Filesystem safety
# ---------------------------------------------------------------------------

MAX_FILE_NAME_LENGTH = 255
FALLBACK_FILE_NAME = "untitled"

RESERVED_NAMES: frozenset[str] = frozenset(
    ["CON", "PRN", "AUX", "NUL"]
    + [f"COM{i}" for i in range(1, 10)]
    + [f"LPT{i}" for i in range(1, 10)]
)

_FORBIDDEN_FILE_CHARS_RE = re.compile(r'[/\\:*?"<>|]')
_CONTROL_WS_RE = re.compile(r"[\t\n\r]")
_DRIVE_LETTER_RE = re.compile(r"^[A-Za-z]:[/\\]")
_UNC_RE = re.compile(r"^\\\\[^\\]+\\")


def _clip(value: str) -> str:
    # Trailing spaces can surface again once the periods are gone.
    return value.strip().rstrip(". ")


def sanitize_file_name(name: str) -> str:
    """Make *name* safe to use as a file name on any common platform.

    Replaces path and wildcard characters with ``-``, folds whitespace,
    drops trailing periods, caps the length at 255 characters, falls back
    to ``untitled`` and prefixes reserved device names (``CON``, ``COM1``,
    ...) with ``_``.
    """
    sanitized = _FORBIDDEN_FILE_CHARS_RE.sub("-", name)
    sanitized = _WHITESPACE_RE.sub(" ", sanitized)
    sanitized = _CONTROL_WS_RE.sub("-", sanitized)
    sanitized = _clip(_clip(sanitized)[:MAX_FILE_NAME_LENGTH])

    if not sanitized:
        return FALLBACK_FILE_NAME

    base_name = sanitized.split(".", 1)[0].strip()
    if base_name.upper() in RESERVED_NAMES:
        sanitized = _clip(f"_{sanitized}"[:MAX_FILE_NAME_LENGTH])

    return sanitized


def is_absolute_path(path: str) -> bool:
    """True for POSIX roots, drive-letter paths and UNC shares."""
    if path.startswith("/"):
        return True
    if _DRIVE_LETTER_RE.match(path):
        return True
    return bool(_UNC_RE.match(path))


def build_target_path(
    root: str,
    file_name: str,
    extension: str = "",
    workspace: str | None = None,
) -> str:
    """Join a configured *root* with a sanitized *file_name* and *extension*.

    Absolute roots are used as-is. Relative roots and an empty root are
    placed under *workspace* when one is given.
    """
    name = sanitize_file_name(file_name) + extension
    root = root.strip()

    if root and is_absolute_path(root):
        joiner = posixpath if root.startswith("/") else ntpath
        return joiner.normpath(joiner.join(root, name))

    parts = [p for p in (workspace, root) if p]
    if not parts:
        return name
    return posixpath.join(*parts, name)
