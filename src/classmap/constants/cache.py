"""Constants used by the persisted class map artifact."""

from __future__ import annotations

CACHE_VERSION: int = 1
CACHE_TEMP_PREFIX: str = ".classmap-"
CACHE_TEMP_SUFFIX: str = ".tmp"

ARTIFACT_HEADER_LINES: tuple[str, ...] = (
    "classmap cache",
    "Maps normalized type names to declaring files; null marks a known-absent name.",
)
ARTIFACT_TIMESTAMP_PREFIX: str = "Generated at "
