"""Output strategy base class defining the interface for tree rendering.

This module provides the abstract base class every rendering format implements,
together with a non-recursive walk shared by the formats that need to open and
close a wrapper around each directory's children.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Iterator, List, Tuple

from dir2tree.directory_tree.directory_node import DirectoryNode
from dir2tree.directory_tree.directory_tree import DirectoryTree


class WalkEvent(Enum):
    """Events produced by walk_tree.

    Values:
        ENTER: A node is visited. Directories are entered before their children.
        EXIT: All children of a directory have been visited. Never produced for files.
    """

    ENTER = "enter"
    EXIT = "exit"


def walk_tree(root: DirectoryNode) -> Iterator[Tuple[WalkEvent, DirectoryNode, int]]:
    """Walk a tree depth-first in stored child order without recursion.

    Yields:
        Tuples of (event, node, depth) where the root has depth 0.

    Example:
        >>> for event, node, depth in walk_tree(tree.get_root()):  # doctest: +SKIP
        ...     print(event.value, node.name, depth)
        enter project 0
        enter src 1
        enter main.py 2
        exit src 1
        exit project 0
    """
    stack: List[Tuple[WalkEvent, DirectoryNode, int]] = [(WalkEvent.ENTER, root, 0)]
    while stack:
        event, node, depth = stack.pop()
        yield event, node, depth

        if event is WalkEvent.EXIT:
            continue

        children = node.get_children()
        if children is None:
            continue

        stack.append((WalkEvent.EXIT, node, depth))
        stack.extend((WalkEvent.ENTER, child, depth + 1) for child in reversed(list(children.values())))


class OutputStrategy(ABC):
    """Abstract base class for directory tree rendering strategies.

    This class implements the Strategy pattern for turning a built DirectoryTree
    into text. Concrete strategies only read the tree through the node API:
    ``get_children() is None`` marks a file, children are rendered in stored
    order, and ``get_location()`` is the portable identity of a node.

    Example:
        >>> class NamesOnly(OutputStrategy):
        ...     def format_tree(self, tree: DirectoryTree) -> str:
        ...         return "".join(node.name + "\\n" for _, node, _ in walk_tree(tree.get_root()))
        ...
        ...     def get_file_extension(self) -> str:
        ...         return ".names"
    """

    @abstractmethod
    def format_tree(self, tree: DirectoryTree) -> str:
        """Render the whole tree.

        Args:
            tree: A fully built directory tree.

        Returns:
            The rendered document.
        """
        pass

    @abstractmethod
    def get_file_extension(self) -> str:
        """Get the appropriate file extension for this output format.

        Returns:
            The file extension including the leading dot (e.g., ".xml", ".json").
        """
        pass
