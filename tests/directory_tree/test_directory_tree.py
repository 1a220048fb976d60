"""Unit tests for the DirectoryTree query layer."""

import os

import pytest

from dir2tree.directory_tree.directory_node import DirectoryNode
from dir2tree.directory_tree.tree_builder import DirectoryTreeBuilder


def locations(nodes):
    return [node.get_location() for node in nodes]


@pytest.fixture
def query_tree(tmp_path):
    """Tree used for the query scenarios.

    root/
    ├── dir1/
    │   ├── subdir1/
    │   │   └── deep.txt
    │   └── file1.txt
    ├── dir2/
    │   └── file2.txt
    └── root.txt
    """
    root = tmp_path / "root"
    (root / "dir1" / "subdir1").mkdir(parents=True)
    (root / "dir1" / "subdir1" / "deep.txt").touch()
    (root / "dir1" / "file1.txt").touch()
    (root / "dir2").mkdir()
    (root / "dir2" / "file2.txt").touch()
    (root / "root.txt").touch()
    return DirectoryTreeBuilder().build(DirectoryNode(root))


def find(tree, location):
    for node in [tree.get_root()] + tree.get_descendants(tree.get_root()):
        if node.get_location() == location:
            return node
    raise KeyError(location)


def test_get_root(sample_project):
    root = DirectoryNode(sample_project)
    tree = DirectoryTreeBuilder().build(root)

    assert tree.get_root() is root
    assert tree.root is root


def test_get_ancestors(query_tree):
    deep = find(query_tree, "root/dir1/subdir1/deep.txt")

    assert locations(query_tree.get_ancestors(deep)) == ["root/dir1/subdir1", "root/dir1", "root"]


def test_get_ancestors_ends_at_root(query_tree):
    for node in query_tree.get_descendants(query_tree.get_root()):
        assert query_tree.get_ancestors(node)[-1] is query_tree.get_root()


def test_root_has_no_ancestors(query_tree):
    assert query_tree.get_ancestors(query_tree.get_root()) == []


def test_get_siblings(query_tree):
    dir1 = find(query_tree, "root/dir1")

    assert locations(query_tree.get_siblings(dir1)) == ["root/dir2", "root/root.txt"]


def test_get_siblings_of_last_child(query_tree):
    root_txt = find(query_tree, "root/root.txt")

    assert locations(query_tree.get_siblings(root_txt)) == ["root/dir1", "root/dir2"]


def test_only_child_has_no_siblings(query_tree):
    file2 = find(query_tree, "root/dir2/file2.txt")

    assert query_tree.get_siblings(file2) == []


def test_root_has_no_siblings(query_tree):
    assert query_tree.get_siblings(query_tree.get_root()) == []


def test_siblings_never_include_the_node(query_tree):
    for node in query_tree.get_descendants(query_tree.get_root()):
        siblings = query_tree.get_siblings(node)
        assert node not in siblings
        assert len(siblings) == len(node.get_parent().get_children()) - 1


def test_get_descendants_is_breadth_first(query_tree):
    descendants = query_tree.get_descendants(query_tree.get_root())

    assert locations(descendants) == [
        "root/dir1",
        "root/dir2",
        "root/root.txt",
        "root/dir1/subdir1",
        "root/dir1/file1.txt",
        "root/dir2/file2.txt",
        "root/dir1/subdir1/deep.txt",
    ]


def test_get_descendants_of_subtree(query_tree):
    dir1 = find(query_tree, "root/dir1")

    assert locations(query_tree.get_descendants(dir1)) == [
        "root/dir1/subdir1",
        "root/dir1/file1.txt",
        "root/dir1/subdir1/deep.txt",
    ]


def test_file_has_no_descendants(query_tree):
    root_txt = find(query_tree, "root/root.txt")

    assert query_tree.get_descendants(root_txt) == []


def test_empty_directory_has_no_descendants(tmp_path):
    empty = tmp_path / "empty"
    empty.mkdir()
    tree = DirectoryTreeBuilder().build(DirectoryNode(empty))

    assert tree.get_descendants(tree.get_root()) == []
    assert tree.get_file_count() == 0
    assert tree.get_directory_count() == 0


def test_counts(query_tree):
    assert query_tree.get_file_count() == 4
    assert query_tree.get_directory_count() == 3


def test_counts_sample_tree(sample_tree):
    assert sample_tree.get_file_count() == 1
    assert sample_tree.get_directory_count() == 5


def test_iterate_files(query_tree, tmp_path):
    files = list(query_tree.iterate_files())

    assert [location for _, location in files] == [
        "root/dir1/subdir1/deep.txt",
        "root/dir1/file1.txt",
        "root/dir2/file2.txt",
        "root/root.txt",
    ]
    assert files[-1][0] == os.path.realpath(tmp_path / "root" / "root.txt")


def test_queries_do_not_touch_the_filesystem(sample_tree, monkeypatch):
    def forbidden(*args, **kwargs):
        raise AssertionError("filesystem accessed")

    monkeypatch.setattr(os, "scandir", forbidden)
    monkeypatch.setattr(os, "stat", forbidden)

    root = sample_tree.get_root()
    descendants = sample_tree.get_descendants(root)
    assert len(descendants) == 6
    assert sample_tree.get_ancestors(descendants[-1])[-1] is root
    assert sample_tree.get_siblings(descendants[0])[0].name == "level1b"
