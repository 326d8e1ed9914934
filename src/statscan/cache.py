"""In-memory entry cache.

Caches :class:`~statscan.entry.Entry` objects keyed by absolute path so
repeated scans skip the ``stat`` call for paths already seen.  Nothing
is ever evicted; callers reset it with :meth:`EntryCache.clear`.
"""

from __future__ import annotations

import logging
import os

from .entry import Entry

logger = logging.getLogger(__name__)


class EntryCache:
    """Map of absolute path to :class:`Entry`, shared across scans."""

    def __init__(self) -> None:
        self._entries: dict[str, Entry] = {}

    def get(self, full_path: str) -> Entry | None:
        """Return the cached entry or ``None``."""
        return self._entries.get(full_path)

    def put(self, full_path: str, st: os.stat_result, path: str) -> Entry:
        """Build an entry from *st* and store it, replacing any previous one."""
        entry = Entry.from_stat(full_path, st, path)
        self._entries[full_path] = entry
        return entry

    def clear(self) -> int:
        """Drop every cached entry; returns how many were removed."""
        count = len(self._entries)
        self._entries.clear()
        logger.debug("Cleared %d cached entries", count)
        return count

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, full_path: object) -> bool:
        return full_path in self._entries


# Process-wide cache used by the module-level scan functions.
default_cache = EntryCache()
