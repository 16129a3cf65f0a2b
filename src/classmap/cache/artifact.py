"""Rendering and parsing of the persisted class map artifact.

The artifact is a YAML document preceded by comment lines. Keys are sorted
so the same mapping always renders the same body; only the generation
timestamp comment differs between writes, and it is never read back.
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

import yaml

from classmap.constants.cache import (
    ARTIFACT_HEADER_LINES,
    ARTIFACT_TIMESTAMP_PREFIX,
    CACHE_TEMP_PREFIX,
    CACHE_TEMP_SUFFIX,
    CACHE_VERSION,
)
from classmap.exceptions import PersistenceError
from classmap.io import write_text_atomic
from classmap.types import ClassMapping, PersistedCache

logger = logging.getLogger(__name__)


def build_payload(entries: ClassMapping) -> PersistedCache:
    """Convert an in-memory mapping into its persisted form."""
    return {
        "version": CACHE_VERSION,
        "classes": {name: (str(path) if path is not None else None) for name, path in sorted(entries.items())},
    }


def entries_from_payload(payload: PersistedCache) -> ClassMapping:
    """Convert a persisted payload back into an in-memory mapping."""
    return {name: (Path(path) if path is not None else None) for name, path in payload["classes"].items()}


def render_artifact(payload: PersistedCache, generated_at: datetime) -> str:
    """Render *payload* as YAML with an informational header."""
    header = [*ARTIFACT_HEADER_LINES, f"{ARTIFACT_TIMESTAMP_PREFIX}{generated_at.isoformat(timespec='seconds')}"]
    body = yaml.safe_dump(
        dict(payload),
        sort_keys=True,
        default_flow_style=False,
        allow_unicode=True,
    )
    return "".join(f"# {line}\n" for line in header) + body


def parse_artifact(text: str) -> PersistedCache:
    """Parse artifact text, raising PersistenceError on malformed content."""
    try:
        raw = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise PersistenceError(f"Malformed class map artifact: {exc}") from exc

    if not isinstance(raw, dict):
        raise PersistenceError("Class map artifact must contain a mapping")
    version = raw.get("version")
    if version != CACHE_VERSION:
        raise PersistenceError(f"Unsupported class map artifact version: {version!r}")

    raw_classes = raw.get("classes")
    if raw_classes is None:
        raw_classes = {}
    if not isinstance(raw_classes, dict):
        raise PersistenceError("Class map artifact 'classes' must be a mapping")

    classes: dict[str, str | None] = {}
    for name, path in raw_classes.items():
        if not isinstance(name, str) or not (path is None or isinstance(path, str)):
            raise PersistenceError(f"Invalid class map entry: {name!r}: {path!r}")
        classes[name] = path

    return {"version": CACHE_VERSION, "classes": classes}


def load_artifact(path: Path) -> PersistedCache | None:
    """Load the artifact at *path*; return None when it is missing or unusable."""
    if not path.is_file():
        return None

    try:
        return parse_artifact(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Cannot read class map artifact %s: %s", path, exc)
    except PersistenceError as exc:
        logger.warning("Ignoring class map artifact %s: %s", path, exc)
    return None


def save_artifact(path: Path, payload: PersistedCache, *, generated_at: datetime | None = None) -> None:
    """Write the artifact atomically, wrapping I/O failures in PersistenceError."""
    content = render_artifact(payload, generated_at or datetime.now().astimezone())
    try:
        write_text_atomic(
            path=path,
            content=content,
            temp_prefix=CACHE_TEMP_PREFIX,
            temp_suffix=CACHE_TEMP_SUFFIX,
        )
    except OSError as exc:
        raise PersistenceError(f"Failed to write class map artifact {path}: {exc}") from exc
    logger.info("Wrote %d class map entries to %s", len(payload["classes"]), path)
