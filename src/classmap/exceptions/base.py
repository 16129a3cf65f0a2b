"""Base exception type for Classmap."""

from __future__ import annotations


class ClassMapError(Exception):
    """Base class for all errors raised by Classmap."""
