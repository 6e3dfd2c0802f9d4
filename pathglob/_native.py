"""Accelerated engine: delegates matching to the C library's ``glob(3)``.

Only glibc and the Darwin libc are used; both support ``GLOB_BRACE`` and
``GLOB_TILDE``. musl and Windows fall back to the reference engine.
"""

from __future__ import annotations

import ctypes
import ctypes.util
import functools
import logging
import os
import platform
import sys

from ._engine import GlobEngine
from ._exceptions import GlobEngineUnavailableError
from ._fs import FileSystem

logger = logging.getLogger(__name__)


class _GlibcGlob(ctypes.Structure):
    _fields_ = [
        ("gl_pathc", ctypes.c_size_t),
        ("gl_pathv", ctypes.POINTER(ctypes.c_char_p)),
        ("gl_offs", ctypes.c_size_t),
        ("gl_flags", ctypes.c_int),
        ("gl_closedir", ctypes.c_void_p),
        ("gl_readdir", ctypes.c_void_p),
        ("gl_opendir", ctypes.c_void_p),
        ("gl_lstat", ctypes.c_void_p),
        ("gl_stat", ctypes.c_void_p),
    ]


class _DarwinGlob(ctypes.Structure):
    _fields_ = [
        ("gl_pathc", ctypes.c_size_t),
        ("gl_matchc", ctypes.c_int),
        ("gl_offs", ctypes.c_size_t),
        ("gl_flags", ctypes.c_int),
        ("gl_pathv", ctypes.POINTER(ctypes.c_char_p)),
        ("gl_errfunc", ctypes.c_void_p),
        ("gl_closedir", ctypes.c_void_p),
        ("gl_readdir", ctypes.c_void_p),
        ("gl_opendir", ctypes.c_void_p),
        ("gl_lstat", ctypes.c_void_p),
        ("gl_stat", ctypes.c_void_p),
    ]


# (glob_t layout, GLOB_MARK | GLOB_BRACE | GLOB_TILDE)
_GLIBC = (_GlibcGlob, (1 << 1) | (1 << 10) | (1 << 12))
_DARWIN = (_DarwinGlob, 0x0008 | 0x0080 | 0x0800)


class _LibcGlob:
    __slots__ = ("_glob", "_globfree", "_struct", "_flags")

    def __init__(self, libc: ctypes.CDLL, struct: type[ctypes.Structure], flags: int) -> None:
        self._struct = struct
        self._flags = flags
        self._glob = libc.glob
        self._glob.argtypes = [
            ctypes.c_char_p,
            ctypes.c_int,
            ctypes.c_void_p,
            ctypes.POINTER(struct),
        ]
        self._glob.restype = ctypes.c_int
        self._globfree = libc.globfree
        self._globfree.argtypes = [ctypes.POINTER(struct)]
        self._globfree.restype = None

    def __call__(self, pattern: str) -> list[str]:
        gt = self._struct()
        try:
            rc = self._glob(os.fsencode(pattern), self._flags, None, ctypes.byref(gt))
            if rc != 0:
                # GLOB_NOMATCH, GLOB_ABORTED and GLOB_NOSPACE all mean no result
                logger.debug("glob(3) returned %d for %r", rc, pattern)
                return []
            offs = gt.gl_offs
            return [os.fsdecode(gt.gl_pathv[offs + i]) for i in range(gt.gl_pathc)]
        finally:
            self._globfree(ctypes.byref(gt))


def _platform_layout() -> tuple[type[ctypes.Structure], int] | None:
    if sys.platform == "darwin":
        return _DARWIN
    if sys.platform.startswith("linux") and platform.libc_ver()[0] == "glibc":
        return _GLIBC
    return None


@functools.lru_cache(maxsize=None)
def _load() -> _LibcGlob:
    layout = _platform_layout()
    if layout is None:
        raise GlobEngineUnavailableError(
            "native", f"no compatible glob(3) on {sys.platform}"
        )
    libname = ctypes.util.find_library("c")
    try:
        libc = ctypes.CDLL(libname, use_errno=True)
        return _LibcGlob(libc, *layout)
    except (OSError, AttributeError) as exc:
        raise GlobEngineUnavailableError("native", str(exc)) from exc


def native_available() -> bool:
    try:
        _load()
    except GlobEngineUnavailableError:
        return False
    return True


class NativeGlobEngine(GlobEngine):
    """Engine backed by the platform ``glob(3)``.

    It always reads the real filesystem; the collaborator only provides the
    home directory used for ``~``.
    """

    name = "native"

    def __init__(self, fs: FileSystem | None = None) -> None:
        super().__init__(fs)
        self._libc_glob = _load()

    def _match(self, pattern: str) -> list[str]:
        return self._libc_glob(pattern)
