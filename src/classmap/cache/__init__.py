"""Class map storage and the persisted cache artifact."""

from .artifact import build_payload, entries_from_payload, load_artifact, parse_artifact, render_artifact, save_artifact
from .store import ClassMapStore

__all__ = [
    "ClassMapStore",
    "build_payload",
    "entries_from_payload",
    "load_artifact",
    "parse_artifact",
    "render_artifact",
    "save_artifact",
]
