"""Core data models for Classmap."""

from .entities import FileFilter, LookupStatus, Resolution, ScanRoot

__all__ = ["FileFilter", "LookupStatus", "Resolution", "ScanRoot"]
