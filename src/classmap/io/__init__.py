"""Shared file I/O helpers."""

from .text_io import read_source_text, write_text_atomic

__all__ = ["read_source_text", "write_text_atomic"]
