"""Filesystem collaborators consumed by the glob walker.

The walker never touches the operating system directly. It asks a
:class:`FileSystem` three questions (what is in this directory, does this
path exist, is it a directory) plus where the home directory is.
"""

from __future__ import annotations

import logging
import os
from typing import Protocol, runtime_checkable

from ._typing import DirEntry

logger = logging.getLogger(__name__)


@runtime_checkable
class FileSystem(Protocol):
    def list_entries(self, path: str) -> list[DirEntry]:
        """Direct entries of *path*, excluding ``.`` and ``..``.

        Raises :class:`OSError` when *path* cannot be listed (missing, not a
        directory, or unreadable); an empty list means a readable, empty
        directory.
        """
        ...

    def exists(self, path: str) -> bool:
        ...

    def is_dir(self, path: str) -> bool:
        ...

    def home_directory(self) -> str:
        ...


class LocalFileSystem:
    """:class:`FileSystem` backed by the real operating system.

    *home* overrides the home directory; when omitted it is resolved once
    at construction from the process environment.
    """

    def __init__(self, home: str | None = None) -> None:
        if home is not None and not home:
            raise ValueError("home must be a non-empty path or None.")
        self._home: str = home if home is not None else os.path.expanduser("~")

    def list_entries(self, path: str) -> list[DirEntry]:
        entries: list[DirEntry] = []
        with os.scandir(path or ".") as it:
            for entry in it:
                try:
                    is_dir = entry.is_dir()
                except OSError as exc:
                    logger.debug("cannot stat %r: %s", entry.path, exc)
                    is_dir = False
                entries.append(DirEntry(entry.name, is_dir))
        return entries

    def exists(self, path: str) -> bool:
        # A dangling symlink still exists as a directory entry.
        return os.path.lexists(path)

    def is_dir(self, path: str) -> bool:
        return os.path.isdir(path)

    def home_directory(self) -> str:
        return self._home

    def __repr__(self) -> str:
        return f"LocalFileSystem(home={self._home!r})"
