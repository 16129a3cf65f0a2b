"""Cross-module type aliases."""

from __future__ import annotations

from pathlib import Path
from typing import TypeAlias

TypeName: TypeAlias = str
ClassMapping: TypeAlias = dict[TypeName, Path | None]
