"""statscan — cached, filterable directory scanning."""

from .cache import EntryCache, default_cache
from .core import Scanner, clear_cache, scan, scan_sync, start_scan
from .entry import Entry
from .errors import ScanError
from .filters import (
    BoolFilter,
    FilterDecision,
    PatternFilter,
    PredicateFilter,
    SubstringFilter,
    as_filter,
    normalize_filter,
)
from .fs import LocalFileSystem
from .options import ScanOptions

__all__ = [
    "BoolFilter",
    "Entry",
    "EntryCache",
    "FilterDecision",
    "LocalFileSystem",
    "PatternFilter",
    "PredicateFilter",
    "ScanError",
    "ScanOptions",
    "Scanner",
    "SubstringFilter",
    "as_filter",
    "clear_cache",
    "default_cache",
    "normalize_filter",
    "scan",
    "scan_sync",
    "start_scan",
]
