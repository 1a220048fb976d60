"""In-memory directory tree: nodes, the iterative builder and the query layer.

This package provides the classes for capturing a directory hierarchy as an
ordered, queryable snapshot.
"""

from .directory_node import DirectoryNode
from .directory_tree import DirectoryTree
from .node_kind import NodeKind
from .tree_builder import DirectoryTreeBuilder

__all__ = [
    "DirectoryNode",
    "DirectoryTree",
    "DirectoryTreeBuilder",
    "NodeKind",
]
