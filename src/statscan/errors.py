"""Errors raised by scan operations."""

from __future__ import annotations


class ScanError(Exception):
    """A filesystem access failure that aborted a scan.

    The original ``OSError`` is chained as ``__cause__``.  No partial
    result accompanies the error.
    """

    def __init__(self, path: str, operation: str, reason: str) -> None:
        super().__init__(f"cannot {operation} {path!r}: {reason}")
        self.path = path
        self.operation = operation  # "list" or "stat"
