"""pytest fixture plugin.

Usage::

    # conftest.py
    pytest_plugins = ["pathglob._pytest_plugin"]

This makes the ``glob_tree``, ``reference_engine`` and ``engines`` fixtures
available::

    def test_something(glob_tree, reference_engine):
        assert reference_engine.glob("/work/*.txt") == [
            "/work/file1.txt",
            "/work/file2.txt",
        ]
"""

import pytest

from ._engine import GlobEngine, ReferenceGlobEngine
from ._memfs import MemoryTree
from ._native import NativeGlobEngine, native_available

SAMPLE_TREE = (
    "/work/file1.txt",
    "/work/file2.txt",
    "/work/file1.swift",
    "/work/file2.swift",
    "/work/test.h",
    "/work/.hidden",
    "/work/subdir/file3.txt",
    "/work/subdir/file3.swift",
    "/work/another/file4.txt",
    "/work/deep/nested/file.txt",
    "/work/empty/",
    "/home/user/notes.txt",
    "/home/user/.profile",
)


@pytest.fixture
def glob_tree() -> MemoryTree:
    """A :class:`MemoryTree` populated with :data:`SAMPLE_TREE`, cwd ``/work``.

    Provides an independent instance per test (function scope).
    """
    tree = MemoryTree(home="/home/user", cwd="/work")
    tree.import_tree(SAMPLE_TREE)
    return tree


@pytest.fixture
def reference_engine(glob_tree: MemoryTree) -> ReferenceGlobEngine:
    """A :class:`ReferenceGlobEngine` reading ``glob_tree``."""
    return ReferenceGlobEngine(glob_tree)


@pytest.fixture
def engines() -> list[GlobEngine]:
    """Every engine available on this platform, over the real filesystem."""
    found: list[GlobEngine] = [ReferenceGlobEngine()]
    if native_available():
        found.append(NativeGlobEngine())
    return found
