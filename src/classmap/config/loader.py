"""Config loading and normalization for class map scans."""

from __future__ import annotations

import difflib
from dataclasses import replace
from pathlib import Path
from typing import Any

import yaml

from classmap.config.model import ClassMapConfig
from classmap.constants.config import (
    ALLOWED_CONFIG_KEYS,
    CONFIG_FILENAME,
    DEFAULT_EXTENSIONS_CONFIG,
    DEFAULT_SCAN_POLICY,
    LIST_OF_STRINGS_KEYS,
)
from classmap.exceptions import ConfigError
from classmap.resolver import ClassMapResolver, parse_scan_flags
from classmap.scanner import ScanEngine


def load_config(root: Path, config_path: Path | None = None) -> ClassMapConfig:
    """Load and validate config from ``classmap.yaml`` or an explicit path.

    Relative paths in the file are anchored at the file's directory. When no
    file exists the workspace root itself becomes the only scan root.
    """
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return ClassMapConfig(roots=(root,))

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"Failed to read config file {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError("Config root must be a mapping")

    unknown_keys = sorted(str(key) for key in raw if key not in ALLOWED_CONFIG_KEYS)
    if unknown_keys:
        details = []
        for key in unknown_keys:
            suggestion = _suggest_key(key, ALLOWED_CONFIG_KEYS)
            details.append(f"{key} (did you mean '{suggestion}'?)" if suggestion else key)
        raise ConfigError(f"Unknown config key(s): {', '.join(details)}")

    for key in LIST_OF_STRINGS_KEYS:
        _ensure_string_list(raw.get(key), key)

    if "extensions" in raw and "file_pattern" in raw:
        raise ConfigError("extensions and file_pattern are mutually exclusive")

    file_pattern = raw.get("file_pattern")
    if file_pattern is not None and not isinstance(file_pattern, str):
        raise ConfigError("file_pattern must be a string")

    cache_file_raw = raw.get("cache_file")
    if cache_file_raw is not None and not isinstance(cache_file_raw, str):
        raise ConfigError("cache_file must be a string")

    base = path.parent
    roots = tuple(_anchor(base, item) for item in _ensure_string_list(raw.get("roots"), "roots"))
    scan_policy = tuple(_ensure_string_list(raw.get("scan_policy", list(DEFAULT_SCAN_POLICY)), "scan_policy"))
    parse_scan_flags(scan_policy)

    return ClassMapConfig(
        roots=roots or (root,),
        exclude=tuple(_anchor(base, item) for item in _ensure_string_list(raw.get("exclude"), "exclude")),
        extensions=tuple(
            _ensure_string_list(raw.get("extensions", list(DEFAULT_EXTENSIONS_CONFIG)), "extensions")
        ),
        file_pattern=file_pattern,
        cache_file=_anchor(base, cache_file_raw) if cache_file_raw else None,
        scan_policy=scan_policy,
    )


def apply_overrides(
    config: ClassMapConfig,
    *,
    roots: tuple[Path, ...] = (),
    exclude: tuple[Path, ...] = (),
    extensions: tuple[str, ...] = (),
    cache_file: Path | None = None,
    scan_policy: tuple[str, ...] = (),
) -> ClassMapConfig:
    """Layer command-line values over a loaded config."""
    if scan_policy:
        parse_scan_flags(scan_policy)
    return replace(
        config,
        roots=config.roots + tuple(path.resolve() for path in roots if path.resolve() not in config.roots),
        exclude=config.exclude + tuple(path.resolve() for path in exclude),
        extensions=extensions or config.extensions,
        file_pattern=None if extensions else config.file_pattern,
        cache_file=cache_file.resolve() if cache_file is not None else config.cache_file,
        scan_policy=scan_policy or config.scan_policy,
    )


def build_resolver(config: ClassMapConfig) -> ClassMapResolver:
    """Create a resolver with every root, exclusion and filter registered."""
    engine = ScanEngine()
    if config.file_pattern is not None:
        engine.set_file_pattern(config.file_pattern)
    else:
        engine.set_file_extensions(config.extensions)
    for root in config.roots:
        engine.add_root(root)
    for excluded in config.exclude:
        engine.exclude_root(excluded)
    return ClassMapResolver(
        engine,
        cache_file=config.cache_file,
        policy=parse_scan_flags(config.scan_policy),
    )


def _anchor(base: Path, raw_path: str) -> Path:
    path = Path(raw_path).expanduser()
    return path if path.is_absolute() else (base / path)


def _suggest_key(key: str, allowed: frozenset[str]) -> str | None:
    matches = difflib.get_close_matches(key, sorted(allowed), n=1, cutoff=0.6)
    return matches[0] if matches else None


def _ensure_string_list(value: Any, key_name: str) -> list[str]:
    """Coerce a value to a list of strings, raising ConfigError on type mismatch."""
    if value is None:
        return []
    if not isinstance(value, (list, tuple)) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{key_name} must be a list of strings")
    return list(value)
