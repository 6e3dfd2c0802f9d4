"""In-memory :class:`~pathglob.FileSystem` for tests and virtual trees."""

from __future__ import annotations

import posixpath
import threading
from collections.abc import Iterable

from ._typing import DirEntry


class _DirNode:
    __slots__ = ("children",)

    def __init__(self) -> None:
        self.children: dict[str, _DirNode | _FileNode] = {}


class _FileNode:
    __slots__ = ()


_Node = _DirNode | _FileNode


class MemoryTree:
    def __init__(self, home: str = "/home/user", cwd: str = "/") -> None:
        if not home.startswith("/"):
            raise ValueError(f"home must be absolute, got {home!r}.")
        if not cwd.startswith("/"):
            raise ValueError(f"cwd must be absolute, got {cwd!r}.")
        self._lock = threading.RLock()
        self._root = _DirNode()
        self._denied: set[str] = set()
        self._home = home
        self._cwd = self._normalize(cwd)

    # -- path helpers --

    def _normalize(self, path: str) -> str:
        if not path.startswith("/"):
            path = posixpath.join(self._cwd, path or ".")
        parts: list[str] = []
        for part in path.split("/"):
            if part in ("", "."):
                continue
            if part == "..":
                # ".." at the root stays at the root
                if parts:
                    parts.pop()
                continue
            parts.append(part)
        return "/" + "/".join(parts)

    def _resolve(self, path: str) -> _Node | None:
        node: _Node = self._root
        for part in self._normalize(path).split("/"):
            if not part:
                continue
            if not isinstance(node, _DirNode):
                return None
            child = node.children.get(part)
            if child is None:
                return None
            node = child
        return node

    def _makedirs(self, npath: str) -> _DirNode:
        node = self._root
        for part in npath.split("/"):
            if not part:
                continue
            child = node.children.get(part)
            if child is None:
                child = _DirNode()
                node.children[part] = child
            elif not isinstance(child, _DirNode):
                raise NotADirectoryError(f"Not a directory: '{part}' in '{npath}'")
            node = child
        return node

    # -- tree construction --

    def mkdir(self, path: str, exist_ok: bool = False) -> None:
        """Create directory *path* and any missing parents."""
        npath = self._normalize(path)
        with self._lock:
            existing = self._resolve(npath)
            if existing is not None:
                if isinstance(existing, _DirNode) and exist_ok:
                    return
                raise FileExistsError(f"File exists: '{path}'")
            self._makedirs(npath)

    def touch(self, path: str) -> None:
        """Create an empty file at *path*, creating parents as needed."""
        npath = self._normalize(path)
        if npath == "/":
            raise IsADirectoryError("Is a directory: '/'")
        parent, name = posixpath.split(npath)
        with self._lock:
            dnode = self._makedirs(parent)
            existing = dnode.children.get(name)
            if isinstance(existing, _DirNode):
                raise IsADirectoryError(f"Is a directory: '{path}'")
            if existing is None:
                dnode.children[name] = _FileNode()

    def import_tree(self, paths: Iterable[str]) -> None:
        """Create every path in *paths*; a trailing ``/`` denotes a directory."""
        for path in paths:
            if path.endswith("/"):
                self.mkdir(path, exist_ok=True)
            else:
                self.touch(path)

    def deny(self, path: str) -> None:
        """Make directory *path* unreadable: listing it raises PermissionError."""
        with self._lock:
            self._denied.add(self._normalize(path))

    # -- FileSystem protocol --

    def list_entries(self, path: str) -> list[DirEntry]:
        npath = self._normalize(path)
        with self._lock:
            if npath in self._denied:
                raise PermissionError(f"Permission denied: '{path}'")
            node = self._resolve(npath)
            if node is None:
                raise FileNotFoundError(f"No such file or directory: '{path}'")
            if not isinstance(node, _DirNode):
                raise NotADirectoryError(f"Not a directory: '{path}'")
            return [
                DirEntry(name, isinstance(child, _DirNode))
                for name, child in node.children.items()
            ]

    def exists(self, path: str) -> bool:
        with self._lock:
            return self._resolve(path) is not None

    def is_dir(self, path: str) -> bool:
        with self._lock:
            return isinstance(self._resolve(path), _DirNode)

    def home_directory(self) -> str:
        return self._home
