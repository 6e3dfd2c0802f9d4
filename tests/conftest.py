import pytest

from pathglob import LocalFileSystem, ReferenceGlobEngine
from tests.helpers.trees import DISK_TREE, build_disk_tree


@pytest.fixture
def disk_tree(tmp_path):
    """The sample tree written under ``tmp_path``; returns its root as ``str``."""
    build_disk_tree(tmp_path, DISK_TREE)
    return str(tmp_path)


@pytest.fixture
def disk_engine(tmp_path_factory) -> ReferenceGlobEngine:
    """Reference engine over the real filesystem with a private home directory."""
    home = tmp_path_factory.mktemp("home")
    return ReferenceGlobEngine(LocalFileSystem(home=str(home)))
