"""Shared fixtures: a small directory tree and a deterministic filesystem."""

from pathlib import Path

import pytest

from statscan.cache import EntryCache
from statscan.core import Scanner
from statscan.fs import LocalFileSystem


class SortedFileSystem(LocalFileSystem):
    """Local filesystem with directory listings in name order."""

    def listdir(self, path: str) -> list[str]:
        return sorted(super().listdir(path))


@pytest.fixture
def tree(tmp_path: Path) -> Path:
    """root/{a.txt, b.md, sub/{c.txt, deep/{d.txt}}, z.txt}"""
    root = tmp_path / "root"
    root.mkdir()
    (root / "a.txt").write_text("a")
    (root / "b.md").write_text("# b")
    sub = root / "sub"
    sub.mkdir()
    (sub / "c.txt").write_text("c")
    deep = sub / "deep"
    deep.mkdir()
    (deep / "d.txt").write_text("d")
    (root / "z.txt").write_text("z")
    return root


@pytest.fixture
def scanner() -> Scanner:
    return Scanner(EntryCache(), fs=SortedFileSystem())
