"""Directory walking and file filtering for declaration scans."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator, Sequence
from pathlib import Path

from classmap.model import FileFilter, ScanRoot

logger = logging.getLogger(__name__)


def iter_source_files(
    root: Path,
    exclusions: Sequence[ScanRoot],
    file_filter: FileFilter,
) -> Iterator[Path]:
    """Yield candidate files under *root* in deterministic pre-order.

    Siblings are visited in lexical order. Files whose name does not match
    *file_filter*, or whose path falls inside an excluded directory, are not
    yielded. Directories that cannot be listed are skipped.
    """

    def _walk(current: Path) -> Iterator[Path]:
        try:
            with os.scandir(current) as iterator:
                entries = sorted(iterator, key=lambda entry: entry.name)
        except OSError as exc:
            logger.debug("Skipping unreadable directory %s: %s", current, exc)
            return

        for entry in entries:
            path = current / entry.name
            try:
                if entry.is_dir(follow_symlinks=False):
                    if _is_excluded(path, exclusions):
                        logger.debug("Skipping excluded directory %s", path)
                        continue
                    yield from _walk(path)
                elif entry.is_file():
                    if not file_filter.matches(entry.name):
                        continue
                    if _is_excluded(path, exclusions):
                        continue
                    yield path
            except OSError as exc:
                logger.debug("Skipping unreadable entry %s: %s", path, exc)

    yield from _walk(root)


def _is_excluded(path: Path, exclusions: Sequence[ScanRoot]) -> bool:
    return any(excluded.contains(path) for excluded in exclusions)
