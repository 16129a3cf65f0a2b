"""User-facing product strings."""

from __future__ import annotations

PRODUCT_NAME: str = "classmap"
CLI_DESCRIPTION: str = (
    "Discover class, interface, trait and enum declarations across source trees "
    "and maintain a cached map from type name to declaring file."
)
