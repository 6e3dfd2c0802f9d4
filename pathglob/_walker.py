"""Depth-first directory walk driven by a brace-free glob pattern."""

from __future__ import annotations

import logging

from ._fs import FileSystem
from ._matcher import SegmentMatcher, compile_segment, has_magic, unescape
from ._path import SEP, join_path, mark_dir
from ._typing import DirEntry

logger = logging.getLogger(__name__)

_PSEUDO_ENTRIES = (DirEntry(".", True), DirEntry("..", True))


class DirectoryWalker:
    """Match one expanded pattern against the tree exposed by *fs*.

    Each call to :meth:`walk` keeps its own traversal state, so one walker
    may serve concurrent callers.
    """

    def __init__(self, fs: FileSystem) -> None:
        self._fs = fs

    def walk(self, pattern: str) -> set[str]:
        if not pattern:
            return set()
        dirs_only = pattern.endswith(SEP)
        if dirs_only and not has_magic(pattern):
            target = unescape(pattern)
            stripped = target.rstrip(SEP) or SEP
            return {target} if self._fs.is_dir(stripped) else set()

        matchers = [compile_segment(s) for s in pattern.split(SEP) if s]
        results: set[str] = set()
        last = len(matchers) - 1
        # (matched prefix, index of the next segment)
        stack: list[tuple[str, int]] = [(SEP if pattern.startswith(SEP) else "", 0)]
        while stack:
            prefix, idx = stack.pop()
            matcher = matchers[idx]
            if matcher.literal:
                path = join_path(prefix, matcher.name)
                if idx < last:
                    if self._fs.is_dir(path):
                        stack.append((path, idx + 1))
                elif self._fs.exists(path):
                    is_dir = self._fs.is_dir(path)
                    if is_dir or not dirs_only:
                        results.add(mark_dir(path, is_dir))
                continue

            try:
                entries = self._candidates(prefix, matcher)
            except OSError as exc:
                logger.debug("skipping %r: %s", prefix or ".", exc)
                continue
            for entry in entries:
                if not matcher.matches(entry.name):
                    continue
                path = join_path(prefix, entry.name)
                if idx < last:
                    if entry.is_dir:
                        stack.append((path, idx + 1))
                elif entry.is_dir or not dirs_only:
                    results.add(mark_dir(path, entry.is_dir))
        return results

    def _candidates(self, prefix: str, matcher: SegmentMatcher) -> list[DirEntry]:
        # raises OSError when the directory cannot be read
        entries = list(self._fs.list_entries(prefix or "."))
        if not matcher.allows_hidden:
            return [e for e in entries if not e.hidden]
        # "." and ".." never come from the listing
        entries.extend(_PSEUDO_ENTRIES)
        return entries
