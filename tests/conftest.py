"""Shared pytest fixtures for building throwaway source trees."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import TypeAlias

import pytest

SourceWriter: TypeAlias = Callable[[Path, str], Path]


@pytest.fixture()
def write_source() -> SourceWriter:
    """Return a helper that writes *content* to *path*, creating parents."""

    def _write(path: Path, content: str) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture()
def src_root(tmp_path: Path, write_source: SourceWriter) -> Path:
    """Return a resolved ``src`` directory containing ``Foo.php`` declaring ``App\\Bar``."""
    root = (tmp_path / "src").resolve()
    write_source(root / "Foo.php", "<?php\nnamespace App;\n\nclass Bar {}\n")
    return root
