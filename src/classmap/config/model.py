"""Config data model for class map scans."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from classmap.constants.config import DEFAULT_EXTENSIONS_CONFIG, DEFAULT_SCAN_POLICY


@dataclass(frozen=True)
class ClassMapConfig:
    """Resolved class map config; relative paths are already anchored."""

    roots: tuple[Path, ...] = ()
    exclude: tuple[Path, ...] = ()
    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS_CONFIG
    file_pattern: str | None = None
    cache_file: Path | None = None
    scan_policy: tuple[str, ...] = DEFAULT_SCAN_POLICY
