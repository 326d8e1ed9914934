"""Multi-root collection: walk each start path, dedupe, project."""

from __future__ import annotations

import os
from collections.abc import Iterable
from typing import Any, Union

from .cache import EntryCache
from .entry import Entry
from .fs import LocalFileSystem
from .walker import Decide, ScanState, lookup, lookup_sync, walk, walk_sync

StartPaths = Union[str, os.PathLike, Iterable[Union[str, os.PathLike, None]], None]


def normalize_start_paths(paths: StartPaths) -> list[str]:
    """Turn *paths* into a list of path strings.

    A single path becomes a one-element list, falsy items are dropped and
    nothing at all means the current directory.
    """
    if not paths:
        return ["."]
    if isinstance(paths, (str, os.PathLike)):
        paths = [paths]
    return [os.fspath(p) for p in paths if p]


def _add_unique(entries: Iterable[Entry], results: list[Entry], seen: set[str]) -> None:
    for entry in entries:
        if entry.full_path in seen:
            continue
        seen.add(entry.full_path)
        results.append(entry)


def collect_sync(
    start_paths: list[str],
    decide: Decide,
    state: ScanState,
    cache: EntryCache,
    fs: LocalFileSystem,
) -> list[Entry]:
    """Walk *start_paths* in order and return the deduplicated entries.

    A directory start path contributes its filtered contents; any other
    start path contributes its own entry, unfiltered.
    """
    results: list[Entry] = []
    seen: set[str] = set()
    for path in start_paths:
        if state.stopped:
            break
        root = lookup_sync(path, cache, fs)
        if root.is_dir():
            _add_unique(walk_sync(path, decide, state, cache, fs), results, seen)
        else:
            _add_unique([root], results, seen)
    return results


async def collect(
    start_paths: list[str],
    decide: Decide,
    state: ScanState,
    cache: EntryCache,
    fs: LocalFileSystem,
) -> list[Entry]:
    """Coroutine version of :func:`collect_sync`."""
    results: list[Entry] = []
    seen: set[str] = set()
    for path in start_paths:
        if state.stopped:
            break
        root = await lookup(path, cache, fs)
        if root.is_dir():
            _add_unique(await walk(path, decide, state, cache, fs), results, seen)
        else:
            _add_unique([root], results, seen)
    return results


def project(entries: list[Entry], list_of: str) -> list[Any]:
    """Reduce each entry to its *list_of* attribute, calling it if it is a method.

    Unknown attribute names project to ``None``.
    """
    values = []
    for entry in entries:
        value = getattr(entry, list_of, None)
        values.append(value() if callable(value) else value)
    return values
