"""Iterative population of a directory tree from the filesystem."""

import logging
import os
import posixpath
from typing import List, Optional, Tuple

from dir2tree.directory_tree.directory_node import DirectoryNode
from dir2tree.directory_tree.directory_tree import DirectoryTree
from dir2tree.exceptions import DirectoryScanError
from dir2tree.exclusion_rules.base_rules import BaseExclusionRules

logger = logging.getLogger(__name__)


def _name_sort_key(node: DirectoryNode) -> bytes:
    # Byte-wise ordering, also for names holding undecodable bytes
    return os.fsencode(node.name)


class DirectoryTreeBuilder:
    """Populates a root DirectoryNode with its whole subtree.

    The walk is depth-first and driven by an explicit stack rather than recursion,
    so arbitrarily deep directory nesting cannot exhaust the interpreter's call
    stack. Children of every directory are stored directories first, then files,
    each group sorted by name byte-wise. The order in which directories are
    expanded is not part of the result.

    A build either succeeds completely or raises. After a failure the root is
    partially populated and must be discarded.

    Attributes:
        exclusion_rules (Optional[BaseExclusionRules]): Rules deciding which entries
            to leave out. Paths handed to the rules are relative to the root and use
            forward slashes; directories are also tested with a trailing slash.

    Example:
        >>> builder = DirectoryTreeBuilder()
        >>> tree = builder.build(DirectoryNode("src"))  # doctest: +SKIP
        >>> [child.name for child in tree.get_root().get_children().values()]  # doctest: +SKIP
        ['dir2tree']
    """

    def __init__(self, exclusion_rules: Optional[BaseExclusionRules] = None) -> None:
        self.exclusion_rules = exclusion_rules

    def build(self, root: DirectoryNode) -> DirectoryTree:
        """Populate ``root`` in place and wrap it in a DirectoryTree.

        Args:
            root: The node to expand. Usually a freshly constructed root node.

        Returns:
            A DirectoryTree over ``root``.

        Raises:
            DirectoryScanError: If a directory's entries cannot be listed.
            DirectoryTreeError: Any construction error of a child node
                (PathNotReadableError, NotDescendantError, ...).
        """
        logger.debug(f"Building directory tree for: {root.get_path()}")
        self._build_iterative(root)
        tree = DirectoryTree(root)
        if logger.isEnabledFor(logging.INFO):
            # Counting walks the whole tree again
            logger.info(
                f"Built directory tree for {root.get_path()}: "
                f"{tree.get_directory_count()} directories, {tree.get_file_count()} files"
            )
        return tree

    def _build_iterative(self, root: DirectoryNode) -> None:
        # Each stack entry pairs a node with its path relative to the root
        stack: List[Tuple[DirectoryNode, str]] = [(root, "")]

        while stack:
            current, relative_path = stack.pop()

            if not current.is_dir:
                continue

            directories: List[DirectoryNode] = []
            files: List[DirectoryNode] = []

            for entry in self._scan(current):
                entry_relative_path = posixpath.join(relative_path, entry.name)
                if self._is_excluded(entry, entry_relative_path):
                    logger.debug(f"Excluded: {entry_relative_path}")
                    continue

                child = DirectoryNode(entry.path, current)
                if child.is_dir:
                    directories.append(child)
                else:
                    files.append(child)

            directories.sort(key=_name_sort_key)
            files.sort(key=_name_sort_key)

            for child in directories + files:
                current.add_child(child)

            stack.extend((directory, posixpath.join(relative_path, directory.name)) for directory in directories)

    def _scan(self, node: DirectoryNode) -> List["os.DirEntry[str]"]:
        """List the entries of a directory node.

        Raises:
            DirectoryScanError: If the directory cannot be opened or read.
        """
        path = node.get_path()
        logger.debug(f"Scanning directory: {path}")
        try:
            with os.scandir(path) as entries:
                return list(entries)
        except OSError as e:
            raise DirectoryScanError(path, e) from e

    def _is_excluded(self, entry: "os.DirEntry[str]", relative_path: str) -> bool:
        if self.exclusion_rules is None:
            return False
        if self.exclusion_rules.exclude(relative_path):
            return True
        # Patterns such as "build/" only match when the path carries a trailing slash
        return entry.is_dir() and self.exclusion_rules.exclude(relative_path + "/")
