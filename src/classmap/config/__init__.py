"""Configuration loading and resolver construction for Classmap."""

from __future__ import annotations

from classmap.config.loader import apply_overrides, build_resolver, load_config
from classmap.config.model import ClassMapConfig

__all__ = ["ClassMapConfig", "apply_overrides", "build_resolver", "load_config"]
