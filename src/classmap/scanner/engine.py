"""Scan engine that aggregates declarations across registered roots."""

from __future__ import annotations

import logging
import time
from collections.abc import Sequence
from pathlib import Path

from classmap.io import read_source_text
from classmap.model import FileFilter, ScanRoot
from classmap.scanner.discovery import iter_source_files
from classmap.scanner.lexer import extract_declarations

logger = logging.getLogger(__name__)


def scan_all(
    roots: Sequence[ScanRoot],
    exclusions: Sequence[ScanRoot],
    file_filter: FileFilter,
) -> dict[str, Path]:
    """Scan every root in order and map each declared type name to its file.

    When two files declare the same name the file scanned later wins.
    Files that cannot be read are skipped.
    """
    started_at = time.perf_counter()
    classes: dict[str, Path] = {}
    scanned_files = 0
    skipped_files = 0

    for root in roots:
        for path in iter_source_files(root.path, exclusions, file_filter):
            try:
                source = read_source_text(path)
            except OSError as exc:
                skipped_files += 1
                logger.warning("Skipping unreadable file %s: %s", path, exc)
                continue

            scanned_files += 1
            declared = 0
            for name in extract_declarations(source):
                previous = classes.get(name)
                if previous is not None and previous != path:
                    logger.debug("Declaration of %s in %s overrides %s", name, path, previous)
                classes[name] = path
                declared += 1
            if declared:
                logger.debug("Found %d declaration(s) in %s", declared, path)

    logger.info(
        "Scanned %d file(s) across %d root(s): %d declaration(s) in %.3fs (%d skipped)",
        scanned_files,
        len(roots),
        len(classes),
        time.perf_counter() - started_at,
        skipped_files,
    )
    return classes


class ScanEngine:
    """Registered roots, exclusions and file filter driving full rescans.

    Roots and exclusions are append-only and validated when registered.
    """

    def __init__(self, file_filter: FileFilter | None = None) -> None:
        self._roots: list[ScanRoot] = []
        self._exclusions: list[ScanRoot] = []
        self._file_filter = file_filter or FileFilter.default()

    @property
    def roots(self) -> tuple[ScanRoot, ...]:
        return tuple(self._roots)

    @property
    def exclusions(self) -> tuple[ScanRoot, ...]:
        return tuple(self._exclusions)

    @property
    def file_filter(self) -> FileFilter:
        return self._file_filter

    def add_root(self, path: Path | str) -> ScanRoot:
        """Register a directory to scan; raises ConfigError when it is not a directory."""
        root = ScanRoot.from_path(path)
        self._roots.append(root)
        return root

    def exclude_root(self, path: Path | str) -> ScanRoot:
        """Exclude a directory (and everything below it) from scans."""
        excluded = ScanRoot.from_path(path)
        self._exclusions.append(excluded)
        return excluded

    def set_file_extensions(self, extensions: tuple[str, ...] | list[str] | str) -> None:
        self._file_filter = FileFilter.from_extensions(extensions)

    def set_file_pattern(self, regex: str) -> None:
        self._file_filter = FileFilter.from_pattern(regex)

    def scan_all(self) -> dict[str, Path]:
        return scan_all(self._roots, self._exclusions, self._file_filter)
