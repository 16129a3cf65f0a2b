"""Tests for the loader handle returned by ``ClassMapResolver.register``."""

from __future__ import annotations

import threading
import time
from pathlib import Path

import pytest

from classmap.exceptions import ClassMapError
from classmap.resolver import ClassMapResolver, LoaderHandle, ScanFlag


def _resolver(root: Path) -> ClassMapResolver:
    resolver = ClassMapResolver(policy=ScanFlag.ONCE | ScanFlag.CACHE)
    resolver.add_root(root)
    return resolver


def test_loader_runs_once_per_name(src_root: Path) -> None:
    loaded: list[Path] = []
    handle = _resolver(src_root).register(loaded.append)

    assert handle.load("App\\Bar") is True
    assert handle.load("app\\bar") is True

    assert loaded == [src_root / "Foo.php"]
    assert handle.loaded == {"app\\bar": src_root / "Foo.php"}


def test_loader_runs_once_per_file(tmp_path: Path) -> None:
    root = tmp_path.resolve()
    (root / "Pair.php").write_text("<?php class First {} class Second {}", encoding="utf-8")
    loaded: list[Path] = []
    handle = _resolver(root).register(loaded.append)

    assert handle.load("first") is True
    assert handle.load("second") is True

    assert loaded == [root / "Pair.php"]


def test_unresolved_names_are_not_loaded(src_root: Path) -> None:
    loaded: list[Path] = []
    handle = _resolver(src_root).register(loaded.append)

    assert handle.load("app\\missing") is False
    assert handle.load("app\\missing") is False

    assert loaded == []


def test_unregistered_handle_refuses_to_load(src_root: Path) -> None:
    handle = _resolver(src_root).register(lambda path: None)
    handle.unregister()

    assert handle.active is False
    with pytest.raises(ClassMapError, match="unregistered"):
        handle.load("app\\bar")


def test_concurrent_loads_call_loader_once(src_root: Path) -> None:
    loaded: list[Path] = []
    workers = 8
    barrier = threading.Barrier(workers)

    def slow_loader(path: Path) -> None:
        time.sleep(0.05)
        loaded.append(path)

    handle = _resolver(src_root).register(slow_loader)
    results: list[bool] = []

    def worker() -> None:
        barrier.wait()
        results.append(handle.load("app\\bar"))

    threads = [threading.Thread(target=worker) for _ in range(workers)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert results == [True] * workers
    assert loaded == [src_root / "Foo.php"]


def test_loader_may_load_another_name_reentrantly(tmp_path: Path) -> None:
    root = tmp_path.resolve()
    (root / "Child.php").write_text("<?php class Child extends ParentType {}", encoding="utf-8")
    (root / "ParentType.php").write_text("<?php class ParentType {}", encoding="utf-8")
    loaded: list[Path] = []
    handles: list[LoaderHandle] = []

    def loader(path: Path) -> None:
        loaded.append(path)
        if path.name == "Child.php":
            handles[0].load("parenttype")

    handles.append(_resolver(root).register(loader))

    assert handles[0].load("child") is True

    assert loaded == [root / "Child.php", root / "ParentType.php"]
