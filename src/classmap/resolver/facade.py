"""Resolution entry point combining the scan engine, class map store and policy."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from pathlib import Path

from classmap.cache import ClassMapStore
from classmap.model import Resolution
from classmap.resolver.handle import LoaderHandle
from classmap.resolver.policy import ScanFlag, ScanPolicy
from classmap.scanner import ScanEngine, normalize_type_name
from classmap.types import ClassMapping

logger = logging.getLogger(__name__)


class ClassMapResolver:
    """Resolve type names to declaring files, rescanning according to policy."""

    def __init__(
        self,
        engine: ScanEngine | None = None,
        *,
        cache_file: Path | None = None,
        policy: ScanPolicy | ScanFlag | int = ScanFlag.ONCE,
    ) -> None:
        self._engine = engine or ScanEngine()
        self._store = ClassMapStore(self._engine, cache_file)
        self._policy = policy if isinstance(policy, ScanPolicy) else ScanPolicy.from_flags(policy)
        self._lock = threading.RLock()

    @property
    def engine(self) -> ScanEngine:
        return self._engine

    @property
    def store(self) -> ClassMapStore:
        return self._store

    @property
    def policy(self) -> ScanPolicy:
        return self._policy

    @property
    def cache_file(self) -> Path | None:
        return self._store.cache_file

    def add_root(self, path: Path | str) -> None:
        with self._lock:
            self._engine.add_root(path)

    def exclude_root(self, path: Path | str) -> None:
        with self._lock:
            self._engine.exclude_root(path)

    def set_file_extensions(self, extensions: tuple[str, ...] | list[str] | str) -> None:
        with self._lock:
            self._engine.set_file_extensions(extensions)

    def set_file_pattern(self, regex: str) -> None:
        with self._lock:
            self._engine.set_file_pattern(regex)

    def resolve(self, name: str) -> Resolution:
        """Look up *name*, rescanning on a miss when the policy allows it."""
        key = normalize_type_name(name)
        with self._lock:
            result = self._store.lookup(key)
            if result.found or not self._policy.should_rescan(result.status):
                return result

            logger.debug("Rescanning roots to resolve %s", key)
            self._store.refresh()
            result = self._store.lookup(key)
            if self._policy.should_mark_absent(result.status):
                self._store.mark_absent(key)
                result = self._store.lookup(key)
            try:
                if self._store.cache_file is not None:
                    self._store.persist()
            finally:
                self._policy.after_rescan()
            return result

    def class_exists(self, name: str) -> bool:
        """Return True when *name* currently resolves to a file, without scanning."""
        with self._lock:
            return self._store.lookup(normalize_type_name(name)).found

    def registered_classes(self) -> ClassMapping:
        with self._lock:
            return self._store.entries()

    def refresh(self) -> None:
        with self._lock:
            self._store.refresh()

    def generate(self) -> bool:
        """Rescan and write the artifact; returns False when no cache file is configured."""
        with self._lock:
            if self._store.cache_file is None:
                return False
            self._store.refresh()
            self._store.persist()
            return True

    def register(self, loader: Callable[[Path], object]) -> LoaderHandle:
        """Return a handle that loads each resolved file through *loader* once."""
        return LoaderHandle(self, loader)

