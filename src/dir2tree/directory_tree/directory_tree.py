"""Read-only query layer over a built directory tree.

DirectoryTree wraps a fully populated root node. None of its methods touch the
filesystem: every answer comes from the node graph captured by the builder.
"""

from typing import Iterator, List, Tuple

from anytree import LevelOrderIter

from dir2tree.directory_tree.directory_node import DirectoryNode


class DirectoryTree:
    """Ancestor, sibling and descendant queries over a directory snapshot.

    Callers must not attach further children once a tree has been built; the
    queries assume the shape is stable.

    Attributes:
        root (DirectoryNode): The root node of the snapshot.

    Example:
        >>> tree = DirectoryTreeBuilder().build(DirectoryNode("project"))  # doctest: +SKIP
        >>> [node.get_location() for node in tree.get_descendants(tree.get_root())]  # doctest: +SKIP
        ['project/docs', 'project/src', 'project/README.md', 'project/src/main.py']
    """

    def __init__(self, root: DirectoryNode) -> None:
        self.root = root

    def get_root(self) -> DirectoryNode:
        return self.root

    def get_ancestors(self, node: DirectoryNode) -> List[DirectoryNode]:
        """Return the ancestors of ``node``, immediate parent first and root last.

        The root itself has no ancestors.
        """
        ancestors = []
        parent = node.get_parent()
        while parent is not None:
            ancestors.append(parent)
            parent = parent.get_parent()
        return ancestors

    def get_siblings(self, node: DirectoryNode) -> List[DirectoryNode]:
        """Return the other children of ``node``'s parent in their stored order.

        Siblings are matched by location, so the node itself is always excluded.
        The root has no siblings.
        """
        parent = node.get_parent()
        if parent is None:
            return []

        children = parent.get_children()
        if children is None:
            return []

        location = node.get_location()
        return [sibling for sibling_location, sibling in children.items() if sibling_location != location]

    def get_descendants(self, node: DirectoryNode) -> List[DirectoryNode]:
        """Return every node below ``node`` in breadth-first order.

        All children of one level come, in stored order, before any node of the
        next level. ``node`` itself is not included.
        """
        descendants = LevelOrderIter(node)
        next(descendants)  # skip the starting node
        return list(descendants)

    def get_file_count(self) -> int:
        """Get the number of file nodes in the tree."""
        return sum(1 for node in LevelOrderIter(self.root) if node.is_file)

    def get_directory_count(self) -> int:
        """Get the number of directory nodes in the tree, excluding the root."""
        return sum(1 for node in LevelOrderIter(self.root) if node.is_dir and node is not self.root)

    def iterate_files(self) -> Iterator[Tuple[str, str]]:
        """Iterate over all file nodes in depth-first, stored order.

        Yields:
            Pairs of (canonical_path, location) for each file.

        Example:
            >>> for path, location in tree.iterate_files():  # doctest: +SKIP
            ...     print(location)
            project/src/main.py
            project/README.md
        """
        stack = [self.root]
        while stack:
            node = stack.pop()
            children = node.get_children()
            if children is None:
                yield node.get_path(), node.get_location()
            else:
                stack.extend(reversed(list(children.values())))
