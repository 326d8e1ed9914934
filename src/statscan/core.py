"""Scanner — public scan operations."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Mapping
from typing import Any, Union

from .cache import EntryCache, default_cache
from .collector import StartPaths, collect, collect_sync, normalize_start_paths, project
from .entry import Entry
from .filters import normalize_filter
from .fs import LocalFileSystem
from .options import ScanOptions
from .walker import Decide, ScanState

logger = logging.getLogger(__name__)

Options = Union[ScanOptions, Mapping[str, Any], None]


class Scanner:
    """Directory scanner bound to one entry cache.

    Parameters
    ----------
    cache:
        Entry cache to read and fill.  Defaults to the process-wide
        :data:`~statscan.cache.default_cache`; pass a fresh
        :class:`EntryCache` to keep this scanner's results separate.
    fs:
        Filesystem access layer (defaults to :class:`LocalFileSystem`).
    """

    def __init__(
        self,
        cache: EntryCache | None = None,
        *,
        fs: LocalFileSystem | None = None,
    ) -> None:
        self._cache = default_cache if cache is None else cache
        self._fs = fs or LocalFileSystem()

    def _prepare(
        self, start_paths: StartPaths, options: Options, overrides: dict[str, Any]
    ) -> tuple[list[str], ScanOptions, Decide]:
        opts = ScanOptions.coerce(options, **overrides)
        if opts.clear_cache:
            self._cache.clear()
        paths = normalize_start_paths(start_paths)
        return paths, opts, normalize_filter(opts.filter, opts.recursive)

    def _finish(self, entries: list[Entry], paths: list[str], opts: ScanOptions) -> list[Any]:
        logger.info("Scanned %d entries from %d start paths", len(entries), len(paths))
        if opts.list_of:
            return project(entries, opts.list_of)
        return entries

    # ------------------------------------------------------------------
    # Scanning
    # ------------------------------------------------------------------

    def scan_sync(
        self, start_paths: StartPaths = None, options: Options = None, **overrides: Any
    ) -> list[Any]:
        """Scan *start_paths*, blocking until done.

        *options* may be a :class:`ScanOptions` or a mapping; keyword
        *overrides* (``filter=``, ``recursive=``, ...) are applied on top.

        Returns
        -------
        list
            :class:`Entry` objects, or the ``list_of`` attribute of each.

        Raises
        ------
        ScanError
            If any directory listing or ``stat`` fails.
        """
        paths, opts, decide = self._prepare(start_paths, options, overrides)
        entries = collect_sync(paths, decide, ScanState(), self._cache, self._fs)
        return self._finish(entries, paths, opts)

    async def scan(
        self,
        start_paths: StartPaths = None,
        options: Options = None,
        *,
        on_complete: Callable[[list[Any]], None] | None = None,
        **overrides: Any,
    ) -> list[Any]:
        """Scan *start_paths* cooperatively on the running event loop.

        Same results as :meth:`scan_sync`.  *on_complete*, if given, is
        called once with the results; it is not called when the scan
        fails.
        """
        paths, opts, decide = self._prepare(start_paths, options, overrides)
        entries = await collect(paths, decide, ScanState(), self._cache, self._fs)
        results = self._finish(entries, paths, opts)
        if on_complete is not None:
            on_complete(results)
        return results

    def start_scan(
        self,
        start_paths: StartPaths,
        on_complete: Callable[[list[Any]], None],
        options: Options = None,
        **overrides: Any,
    ) -> asyncio.Task[list[Any]]:
        """Schedule :meth:`scan` as a task and return it.

        Must be called with an event loop running.  Failures surface
        through the returned task.
        """
        return asyncio.ensure_future(
            self.scan(start_paths, options, on_complete=on_complete, **overrides)
        )

    # ------------------------------------------------------------------
    # Utilities
    # ------------------------------------------------------------------

    @property
    def cache(self) -> EntryCache:
        return self._cache

    def clear_cache(self) -> int:
        return self._cache.clear()


_default_scanner = Scanner()


def scan_sync(
    start_paths: StartPaths = None, options: Options = None, **overrides: Any
) -> list[Any]:
    """:meth:`Scanner.scan_sync` on the process-wide cache."""
    return _default_scanner.scan_sync(start_paths, options, **overrides)


async def scan(
    start_paths: StartPaths = None,
    options: Options = None,
    *,
    on_complete: Callable[[list[Any]], None] | None = None,
    **overrides: Any,
) -> list[Any]:
    """:meth:`Scanner.scan` on the process-wide cache."""
    return await _default_scanner.scan(
        start_paths, options, on_complete=on_complete, **overrides
    )


def start_scan(
    start_paths: StartPaths,
    on_complete: Callable[[list[Any]], None],
    options: Options = None,
    **overrides: Any,
) -> asyncio.Task[list[Any]]:
    return _default_scanner.start_scan(start_paths, on_complete, options, **overrides)


def clear_cache() -> int:
    return _default_scanner.clear_cache()
