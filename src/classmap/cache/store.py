"""In-memory class map with negative caching, refresh merging and persistence."""

from __future__ import annotations

import logging
from pathlib import Path

from classmap.cache.artifact import build_payload, entries_from_payload, load_artifact, save_artifact
from classmap.model import LookupStatus, Resolution
from classmap.scanner import ScanEngine
from classmap.types import ClassMapping, PersistedCache

logger = logging.getLogger(__name__)


class ClassMapStore:
    """Owns the mapping of normalized type name to declaring file.

    Each name is in one of three states: resolved to a path, known absent
    (stored as ``None``), or unknown (not in the mapping at all).
    """

    def __init__(self, engine: ScanEngine, cache_file: Path | None = None) -> None:
        self._engine = engine
        self._cache_file = cache_file
        self._entries: ClassMapping = {}
        if cache_file is not None:
            payload = load_artifact(cache_file)
            if payload is not None:
                self.load(payload)
                logger.debug("Loaded %d class map entries from %s", len(self._entries), cache_file)

    @property
    def cache_file(self) -> Path | None:
        return self._cache_file

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def entries(self) -> ClassMapping:
        return dict(self._entries)

    def lookup(self, name: str) -> Resolution:
        """Read the current state of *name* without scanning."""
        if name not in self._entries:
            return Resolution(name=name, status=LookupStatus.UNKNOWN)
        path = self._entries[name]
        if path is None:
            return Resolution(name=name, status=LookupStatus.KNOWN_ABSENT)
        return Resolution(name=name, status=LookupStatus.FOUND, path=path)

    def refresh(self) -> None:
        """Rescan every root and merge the result over known-absent markers.

        Known-absent entries survive unless the fresh scan now declares the
        name; previously resolved paths are replaced by the scan result.
        """
        absent: ClassMapping = {name: None for name, path in self._entries.items() if path is None}
        fresh = self._engine.scan_all()
        self._entries = {**absent, **fresh}

    def mark_absent(self, name: str) -> None:
        self._entries[name] = None

    def persist(self) -> PersistedCache:
        """Return the persisted form and write it when a cache file is configured."""
        payload = build_payload(self._entries)
        if self._cache_file is not None:
            save_artifact(self._cache_file, payload)
        return payload

    def load(self, payload: PersistedCache) -> None:
        """Replace the in-memory mapping wholesale with *payload*."""
        self._entries = entries_from_payload(payload)
