import pytest

from dir2tree.directory_tree.directory_node import DirectoryNode
from dir2tree.directory_tree.tree_builder import DirectoryTreeBuilder


@pytest.fixture
def special_tree(tmp_path):
    """Tree whose names need escaping in markup and contain non-ASCII text.

    special/
    ├── a&b<c>/
    │   └── say "hi".txt
    ├── empty/
    └── café.txt
    """
    root = tmp_path / "special"
    (root / "a&b<c>").mkdir(parents=True)
    (root / "a&b<c>" / 'say "hi".txt').write_text("hi")
    (root / "empty").mkdir()
    (root / "café.txt").write_text("coffee")
    return DirectoryTreeBuilder().build(DirectoryNode(root))
