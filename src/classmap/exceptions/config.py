"""Configuration-related exceptions."""

from __future__ import annotations

from classmap.exceptions.base import ClassMapError


class ConfigError(ClassMapError, ValueError):
    """Raised when roots, filters or the config file are invalid."""
