"""Test configuration and fixtures for dir2tree."""

import os

import pytest

from dir2tree.directory_tree.directory_node import DirectoryNode
from dir2tree.directory_tree.tree_builder import DirectoryTreeBuilder


@pytest.fixture
def sample_project(tmp_path):
    """Create a small project directory.

    project/
    ├── level1a/
    │   ├── level2a/
    │   │   └── level3a/
    │   └── level2b/
    └── level1b/
        └── file.txt
    """
    root = tmp_path / "project"
    (root / "level1a" / "level2a" / "level3a").mkdir(parents=True)
    (root / "level1a" / "level2b").mkdir()
    (root / "level1b").mkdir()
    (root / "level1b" / "file.txt").write_text("hello")
    return root


@pytest.fixture
def sample_tree(sample_project):
    """A DirectoryTree built from sample_project."""
    return DirectoryTreeBuilder().build(DirectoryNode(sample_project))


@pytest.fixture
def make_symlink():
    """Return a function creating a symlink, skipping the test where that is not allowed."""

    def _make_symlink(target, link, target_is_directory=False):
        try:
            os.symlink(target, link, target_is_directory=target_is_directory)
        except (OSError, NotImplementedError):
            # On some platforms (like Windows) creating symlinks might require special permissions
            pytest.skip("Symlink creation not supported on this platform/environment")
        return link

    return _make_symlink
