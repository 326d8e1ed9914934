"""Entry descriptor — one filesystem path plus its stat metadata."""

from __future__ import annotations

import os
import stat as _stat
from dataclasses import dataclass


@dataclass(frozen=True)
class Entry:
    """An enriched ``os.stat_result`` for a single path."""

    path: str  # as supplied or joined during traversal
    full_path: str
    dir_path: str
    name: str
    extension: str
    stat: os.stat_result

    @classmethod
    def from_stat(cls, full_path: str, st: os.stat_result, path: str) -> Entry:
        name = os.path.basename(full_path)
        return cls(
            path=path,
            full_path=full_path,
            dir_path=os.path.dirname(full_path),
            name=name,
            extension=os.path.splitext(name)[1][1:],
            stat=st,
        )

    def is_dir(self) -> bool:
        return _stat.S_ISDIR(self.stat.st_mode)

    def is_file(self) -> bool:
        return _stat.S_ISREG(self.stat.st_mode)

    @property
    def size(self) -> int:
        return self.stat.st_size

    @property
    def mtime(self) -> float:
        return self.stat.st_mtime

    @property
    def mode(self) -> int:
        return self.stat.st_mode
