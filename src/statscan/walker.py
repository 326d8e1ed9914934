"""Depth-first directory traversal.

:func:`walk_sync` and :func:`walk` run the same algorithm; the coroutine
version only adds suspension points (after each listing, after each
``stat`` and once per entry) so a large tree does not starve the event
loop.  Both return entries in listing order with each subdirectory's
results spliced in right after the subdirectory itself.
"""

from __future__ import annotations

import asyncio
import logging
import os
from collections import deque
from collections.abc import Callable
from dataclasses import dataclass

from .cache import EntryCache
from .entry import Entry
from .errors import ScanError
from .filters import FilterDecision
from .fs import LocalFileSystem

logger = logging.getLogger(__name__)

Decide = Callable[[Entry], FilterDecision]


@dataclass
class ScanState:
    """Mutable state shared by every level of one scan."""

    stopped: bool = False


def _reason(exc: OSError) -> str:
    return exc.strerror or str(exc)


def lookup_sync(path: str, cache: EntryCache, fs: LocalFileSystem) -> Entry:
    """Return the cached entry for *path*, stat-ing it on a miss."""
    full_path = fs.resolve(path)
    entry = cache.get(full_path)
    if entry is None:
        try:
            st = fs.stat(path)
        except OSError as exc:
            raise ScanError(path, "stat", _reason(exc)) from exc
        entry = cache.put(full_path, st, path)
    return entry


async def lookup(path: str, cache: EntryCache, fs: LocalFileSystem) -> Entry:
    """Awaitable :func:`lookup_sync`."""
    full_path = fs.resolve(path)
    entry = cache.get(full_path)
    if entry is None:
        try:
            st = await fs.astat(path)
        except OSError as exc:
            raise ScanError(path, "stat", _reason(exc)) from exc
        entry = cache.put(full_path, st, path)
    return entry


def _children_sync(directory: str, fs: LocalFileSystem) -> deque[str]:
    try:
        names = fs.listdir(directory)
    except OSError as exc:
        raise ScanError(directory, "list", _reason(exc)) from exc
    logger.debug("Listed %d entries in %s", len(names), directory)
    return deque(os.path.join(directory, name) for name in names)


async def _children(directory: str, fs: LocalFileSystem) -> deque[str]:
    try:
        names = await fs.alistdir(directory)
    except OSError as exc:
        raise ScanError(directory, "list", _reason(exc)) from exc
    logger.debug("Listed %d entries in %s", len(names), directory)
    return deque(os.path.join(directory, name) for name in names)


def walk_sync(
    directory: str,
    decide: Decide,
    state: ScanState,
    cache: EntryCache,
    fs: LocalFileSystem,
) -> list[Entry]:
    """Walk the contents of *directory*; the directory itself is not tested."""
    pending = _children_sync(directory, fs)
    results: list[Entry] = []
    while pending and not state.stopped:
        path = pending.popleft()
        entry = lookup_sync(path, cache, fs)
        decision = decide(entry)
        if decision.include:
            results.append(entry)
        if decision.stop:
            state.stopped = True
            break
        if decision.exit:
            pending.clear()
        if entry.is_dir() and decision.recursive:
            results.extend(walk_sync(path, decide, state, cache, fs))
    return results


async def walk(
    directory: str,
    decide: Decide,
    state: ScanState,
    cache: EntryCache,
    fs: LocalFileSystem,
) -> list[Entry]:
    """Coroutine version of :func:`walk_sync` with identical results."""
    pending = await _children(directory, fs)
    results: list[Entry] = []
    while pending and not state.stopped:
        path = pending.popleft()
        entry = await lookup(path, cache, fs)
        decision = decide(entry)
        if decision.include:
            results.append(entry)
        if decision.stop:
            state.stopped = True
            break
        if decision.exit:
            pending.clear()
        if entry.is_dir() and decision.recursive:
            results.extend(await walk(path, decide, state, cache, fs))
        await asyncio.sleep(0)
    return results
