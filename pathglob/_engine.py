"""Glob engine facade and engine selection.

Every engine shares :meth:`GlobEngine.glob`: the empty pattern, the bare
``~`` pattern, separator collapsing, tilde expansion, deduplication and
sorting happen here, so engines differ only in how :meth:`GlobEngine._match`
turns one tilde-free pattern into paths.
"""

from __future__ import annotations

import abc
import functools
import logging
import os
from collections.abc import Iterable

from ._brace import DEFAULT_MAX_PATTERNS, expand_braces
from ._fs import FileSystem, LocalFileSystem
from ._path import SEP, collapse_separators, join_path
from ._tilde import expand_tilde
from ._walker import DirectoryWalker

logger = logging.getLogger(__name__)

ENGINE_KINDS = ("auto", "reference", "native")
ENGINE_ENV_VAR = "PATHGLOB_ENGINE"


class GlobEngine(abc.ABC):
    name: str = "abstract"

    def __init__(self, fs: FileSystem | None = None) -> None:
        self._fs: FileSystem = fs if fs is not None else LocalFileSystem()

    @property
    def fs(self) -> FileSystem:
        return self._fs

    def glob(self, pattern: str) -> list[str]:
        """Return the sorted, duplicate-free list of paths matching *pattern*.

        Directories carry a trailing ``/``. Unreadable directories and
        malformed pattern fragments yield fewer matches, never an exception.
        """
        if not pattern:
            return []
        home = self._fs.home_directory()
        if pattern == "~":
            return [home.rstrip(SEP) + SEP]
        pattern = expand_tilde(collapse_separators(pattern), home)
        return sorted(set(self._match(pattern)))

    def glob_in(self, directory: str, pattern: str) -> list[str]:
        """Glob *pattern* relative to *directory*."""
        if not pattern:
            return []
        return self.glob(join_path(directory, pattern))

    @abc.abstractmethod
    def _match(self, pattern: str) -> Iterable[str]:
        """Paths matching a tilde-free pattern, in any order, duplicates allowed."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(fs={self._fs!r})"


class ReferenceGlobEngine(GlobEngine):
    """Portable engine: brace expansion plus one directory walk per alternative."""

    name = "reference"

    def __init__(
        self,
        fs: FileSystem | None = None,
        max_patterns: int = DEFAULT_MAX_PATTERNS,
    ) -> None:
        super().__init__(fs)
        if max_patterns < 1:
            raise ValueError(f"max_patterns must be >= 1, got {max_patterns}.")
        self._max_patterns = max_patterns
        self._walker = DirectoryWalker(self._fs)

    def _match(self, pattern: str) -> set[str]:
        results: set[str] = set()
        for alternative in expand_braces(pattern, self._max_patterns):
            results |= self._walker.walk(alternative)
        return results


def make_engine(kind: str = "auto", fs: FileSystem | None = None) -> GlobEngine:
    """Build a glob engine.

    *kind* is ``"reference"``, ``"native"`` or ``"auto"``; ``"auto"`` picks the
    native engine when the platform C library provides a compatible
    ``glob(3)``. The native engine reads the real filesystem, so *fs* only
    supplies its home directory.
    """
    if kind not in ENGINE_KINDS:
        raise ValueError(
            f"Invalid engine kind: {kind!r}. "
            "Expected 'auto', 'reference', or 'native'."
        )
    from ._native import NativeGlobEngine, native_available

    if kind == "auto":
        kind = "native" if native_available() else "reference"
        logger.debug("auto-selected %s glob engine", kind)
    if kind == "native":
        return NativeGlobEngine(fs)
    return ReferenceGlobEngine(fs)


@functools.lru_cache(maxsize=None)
def default_engine() -> GlobEngine:
    """Process-wide engine, chosen once from ``$PATHGLOB_ENGINE`` (default ``auto``)."""
    kind = os.environ.get(ENGINE_ENV_VAR, "auto").strip().lower() or "auto"
    return make_engine(kind)


def glob(pattern: str) -> list[str]:
    return default_engine().glob(pattern)


def glob_in(directory: str, pattern: str) -> list[str]:
    return default_engine().glob_in(directory, pattern)
