"""Tests for text IO helpers."""

from __future__ import annotations

from pathlib import Path

import pytest

from classmap.io import read_source_text, write_text_atomic


def test_write_text_atomic_replaces_content(tmp_path: Path) -> None:
    out_path = tmp_path / "nested" / "classmap.yaml"

    write_text_atomic(path=out_path, content="first\n", temp_prefix=".tmp-", temp_suffix=".yaml")
    write_text_atomic(path=out_path, content="second\n", temp_prefix=".tmp-", temp_suffix=".yaml")

    assert out_path.read_text(encoding="utf-8") == "second\n"
    assert [item.name for item in out_path.parent.iterdir()] == ["classmap.yaml"]


def test_write_text_atomic_cleans_temp_file_on_error(tmp_path: Path) -> None:
    out_path = tmp_path / "classmap.yaml"
    temp_prefix = ".tmp-"
    temp_suffix = ".yaml"

    with pytest.raises(TypeError):
        write_text_atomic(
            path=out_path,
            content=object(),  # type: ignore[arg-type]
            temp_prefix=temp_prefix,
            temp_suffix=temp_suffix,
        )

    leftovers = [
        item for item in tmp_path.iterdir() if item.name.startswith(temp_prefix) and item.name.endswith(temp_suffix)
    ]
    assert not leftovers
    assert not out_path.exists()


def test_read_source_text_tolerates_invalid_utf8(tmp_path: Path) -> None:
    path = tmp_path / "Latin.php"
    path.write_bytes(b"<?php // caf\xe9\nclass Latin {}")

    assert "class Latin {}" in read_source_text(path)
