from typing import TYPE_CHECKING

from ._brace import expand_braces
from ._engine import (
    GlobEngine,
    ReferenceGlobEngine,
    default_engine,
    glob,
    glob_in,
    make_engine,
)
from ._exceptions import GlobEngineUnavailableError
from ._fs import FileSystem, LocalFileSystem
from ._matcher import SegmentMatcher, compile_segment, fnmatch, has_magic
from ._memfs import MemoryTree
from ._native import NativeGlobEngine, native_available
from ._tilde import expand_tilde
from ._typing import DirEntry
from ._walker import DirectoryWalker

if TYPE_CHECKING:
    from ._async import AsyncGlobEngine


def __getattr__(name: str):  # type: ignore[no-untyped-def]
    if name == "AsyncGlobEngine":
        from ._async import AsyncGlobEngine

        globals()["AsyncGlobEngine"] = AsyncGlobEngine
        return AsyncGlobEngine
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "glob",
    "glob_in",
    "GlobEngine",
    "ReferenceGlobEngine",
    "NativeGlobEngine",
    "AsyncGlobEngine",
    "make_engine",
    "default_engine",
    "native_available",
    "GlobEngineUnavailableError",
    "FileSystem",
    "LocalFileSystem",
    "MemoryTree",
    "DirEntry",
    "DirectoryWalker",
    "SegmentMatcher",
    "compile_segment",
    "has_magic",
    "fnmatch",
    "expand_braces",
    "expand_tilde",
]
__version__ = "0.1.0"
