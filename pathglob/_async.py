"""Async wrapper around a glob engine.

Every call is delegated to :func:`asyncio.to_thread`, so directory reads
never block the event loop.
"""

from __future__ import annotations

import asyncio

from ._engine import GlobEngine, make_engine
from ._fs import FileSystem


class AsyncGlobEngine:
    """Thin async facade over a synchronous :class:`GlobEngine`."""

    def __init__(
        self,
        engine: GlobEngine | None = None,
        kind: str = "auto",
        fs: FileSystem | None = None,
    ) -> None:
        self._sync = engine if engine is not None else make_engine(kind, fs)

    @property
    def engine(self) -> GlobEngine:
        return self._sync

    async def glob(self, pattern: str) -> list[str]:
        return await asyncio.to_thread(self._sync.glob, pattern)

    async def glob_in(self, directory: str, pattern: str) -> list[str]:
        return await asyncio.to_thread(self._sync.glob_in, directory, pattern)

    async def glob_many(self, patterns: list[str]) -> list[list[str]]:
        """Run independent glob calls concurrently, results in input order."""
        return list(await asyncio.gather(*(self.glob(p) for p in patterns)))
