"""Host filesystem access in blocking and awaitable forms.

The awaitable forms push the blocking call onto the event loop's default
executor.  Callers await them one at a time, so a scan never has two
filesystem calls in flight.
"""

from __future__ import annotations

import asyncio
import os
from functools import partial


class LocalFileSystem:
    """The local disk, via :mod:`os`."""

    def listdir(self, path: str) -> list[str]:
        return os.listdir(path)

    def stat(self, path: str) -> os.stat_result:
        return os.stat(path)

    def resolve(self, path: str) -> str:
        return os.path.abspath(path)

    async def alistdir(self, path: str) -> list[str]:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, partial(self.listdir, path))

    async def astat(self, path: str) -> os.stat_result:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, partial(self.stat, path))
