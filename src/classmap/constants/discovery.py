"""Constants for filesystem discovery and file filtering."""

from __future__ import annotations

DEFAULT_FILE_EXTENSIONS: tuple[str, ...] = ("inc", "php")
