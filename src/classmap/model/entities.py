"""Value objects shared by the scanner, cache store and resolver."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from classmap.constants.discovery import DEFAULT_FILE_EXTENSIONS
from classmap.exceptions import ConfigError


class LookupStatus(Enum):
    """Three-valued outcome of a class map lookup."""

    FOUND = "found"
    KNOWN_ABSENT = "known_absent"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class Resolution:
    """Result of looking up a normalized type name."""

    name: str
    status: LookupStatus
    path: Path | None = None

    @property
    def found(self) -> bool:
        return self.status is LookupStatus.FOUND


@dataclass(frozen=True)
class ScanRoot:
    """A resolved directory registered for scanning."""

    path: Path

    @classmethod
    def from_path(cls, raw_path: Path | str) -> ScanRoot:
        """Resolve *raw_path* and require an existing directory."""
        path = Path(raw_path).expanduser()
        try:
            resolved = path.resolve(strict=True)
        except OSError as exc:
            raise ConfigError(f"Failed to open dir: {raw_path}") from exc
        if not resolved.is_dir():
            raise ConfigError(f"Failed to open dir: {raw_path}")
        return cls(resolved)

    def contains(self, candidate: Path) -> bool:
        """Return True when *candidate* lies inside this directory, by whole path segments."""
        return candidate.is_relative_to(self.path)


@dataclass(frozen=True)
class FileFilter:
    """Filename filter deciding which regular files are scanned."""

    pattern: re.Pattern[str]

    @classmethod
    def from_extensions(cls, extensions: tuple[str, ...] | list[str] | str) -> FileFilter:
        """Build a filter matching any of *extensions* (with or without a leading dot)."""
        if isinstance(extensions, str):
            extensions = (extensions,)
        cleaned = [ext.strip().lstrip(".") for ext in extensions if ext.strip().lstrip(".")]
        if not cleaned:
            raise ConfigError("At least one file extension is required")
        alternation = "|".join(re.escape(ext) for ext in cleaned)
        return cls(re.compile(rf"\.({alternation})$"))

    @classmethod
    def from_pattern(cls, regex: str) -> FileFilter:
        """Build a filter from a filename regular expression."""
        try:
            return cls(re.compile(regex))
        except re.error as exc:
            raise ConfigError(f"Invalid file pattern {regex!r}: {exc}") from exc

    @classmethod
    def default(cls) -> FileFilter:
        return cls.from_extensions(DEFAULT_FILE_EXTENSIONS)

    def matches(self, filename: str) -> bool:
        return self.pattern.search(filename) is not None
