"""Configuration defaults, filenames and accepted keys."""

from __future__ import annotations

from classmap.constants.discovery import DEFAULT_FILE_EXTENSIONS

CONFIG_FILENAME: str = "classmap.yaml"

DEFAULT_EXTENSIONS_CONFIG: tuple[str, ...] = DEFAULT_FILE_EXTENSIONS
DEFAULT_SCAN_POLICY: tuple[str, ...] = ("once",)

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset(
    {
        "roots",
        "exclude",
        "extensions",
        "file_pattern",
        "cache_file",
        "scan_policy",
    }
)

LIST_OF_STRINGS_KEYS: tuple[str, ...] = ("roots", "exclude", "extensions", "scan_policy")
