"""Cache artifact exceptions."""

from __future__ import annotations

from classmap.exceptions.base import ClassMapError


class PersistenceError(ClassMapError, OSError):
    """Raised when the class map artifact cannot be parsed or written."""
