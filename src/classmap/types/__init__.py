"""Shared type aliases for Classmap."""

from .cache import PersistedCache
from .common import ClassMapping, TypeName

__all__ = ["ClassMapping", "PersistedCache", "TypeName"]
