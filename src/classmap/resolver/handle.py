"""Loader capability handed to the host's module-loading mechanism."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING

from classmap.exceptions import ClassMapError
from classmap.scanner import normalize_type_name

if TYPE_CHECKING:
    from classmap.resolver.facade import ClassMapResolver

logger = logging.getLogger(__name__)


class LoaderHandle:
    """Resolve names through a resolver and load each resolved file exactly once.

    The handle replaces a process-wide autoload hook: the host keeps it and
    calls :meth:`load` when it meets an undefined type name.
    """

    def __init__(self, resolver: ClassMapResolver, loader: Callable[[Path], object]) -> None:
        self._resolver: ClassMapResolver | None = resolver
        self._loader = loader
        self._loaded: dict[str, Path] = {}
        self._loaded_paths: set[Path] = set()
        self._lock = threading.RLock()

    @property
    def active(self) -> bool:
        return self._resolver is not None

    @property
    def loaded(self) -> dict[str, Path]:
        return dict(self._loaded)

    def load(self, name: str) -> bool:
        """Return True when *name* resolved and its file has been loaded."""
        resolver = self._resolver
        if resolver is None:
            raise ClassMapError("Loader handle has been unregistered")

        key = normalize_type_name(name)
        with self._lock:
            if key in self._loaded:
                return True

            resolution = resolver.resolve(key)
            if not resolution.found:
                return False

            assert resolution.path is not None
            # one file may declare several types
            if resolution.path not in self._loaded_paths:
                self._loader(resolution.path)
                self._loaded_paths.add(resolution.path)
            self._loaded[key] = resolution.path
        logger.debug("Loaded %s from %s", key, resolution.path)
        return True

    def unregister(self) -> None:
        self._resolver = None
