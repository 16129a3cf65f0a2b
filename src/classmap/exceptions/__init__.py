"""Shared exception hierarchy for Classmap."""

from __future__ import annotations

from .base import ClassMapError
from .config import ConfigError
from .persistence import PersistenceError

__all__ = ["ClassMapError", "ConfigError", "PersistenceError"]
