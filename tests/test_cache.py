"""Tests for the entry cache."""

import os
from pathlib import Path

from statscan.cache import EntryCache


def test_put_and_get(tmp_path: Path):
    f = tmp_path / "note.md"
    f.write_text("# note")
    cache = EntryCache()
    entry = cache.put(str(f), os.stat(f), "note.md")
    assert cache.get(str(f)) is entry
    assert entry.path == "note.md"
    assert entry.full_path == str(f)
    assert entry.dir_path == str(tmp_path)
    assert entry.name == "note.md"
    assert entry.extension == "md"
    assert entry.size == 6
    assert entry.is_file()
    assert not entry.is_dir()


def test_get_missing():
    assert EntryCache().get("/nonexistent") is None


def test_extension_rules(tmp_path: Path):
    cache = EntryCache()
    st = os.stat(tmp_path)
    assert cache.put("/x/archive.tar.gz", st, "archive.tar.gz").extension == "gz"
    assert cache.put("/x/Makefile", st, "Makefile").extension == ""
    assert cache.put("/x/.bashrc", st, ".bashrc").extension == ""


def test_put_overwrites(tmp_path: Path):
    f = tmp_path / "f.txt"
    f.write_text("1")
    cache = EntryCache()
    first = cache.put(str(f), os.stat(f), "f.txt")
    f.write_text("1234")
    second = cache.put(str(f), os.stat(f), "f.txt")
    assert cache.get(str(f)) is second
    assert second is not first
    assert second.size == 4
    assert len(cache) == 1


def test_clear(tmp_path: Path):
    cache = EntryCache()
    st = os.stat(tmp_path)
    cache.put("/x/a", st, "a")
    cache.put("/x/b", st, "b")
    assert "/x/a" in cache
    assert cache.clear() == 2
    assert len(cache) == 0
    assert cache.get("/x/a") is None
