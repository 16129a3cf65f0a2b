"""Typed payload of the persisted class map."""

from __future__ import annotations

from typing import TypedDict


class PersistedCache(TypedDict):
    """Top-level cache payload persisted to disk.

    ``classes`` maps a normalized type name to the declaring file, or to
    ``None`` when a rescan already confirmed the name is absent.
    """

    version: int
    classes: dict[str, str | None]
