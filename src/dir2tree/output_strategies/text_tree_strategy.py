"""ASCII tree output strategy, in the style of the Unix ``tree`` command."""

from typing import List, Tuple

from dir2tree.directory_tree.directory_node import DirectoryNode
from dir2tree.directory_tree.directory_tree import DirectoryTree

from .base_strategy import OutputStrategy


class TextTreeStrategy(OutputStrategy):
    """Render the tree with box-drawing connectors.

    The root is printed by name on its own line. Every other node is prefixed by
    ``├── `` or, for the last child of a directory, ``└── ``; deeper levels are
    indented with ``│   `` below a non-last ancestor and four spaces below a last
    one.

    Example:
        >>> print(TextTreeStrategy().format_tree(tree), end="")  # doctest: +SKIP
        project
        ├── docs
        ├── src
        │   └── main.py
        └── README.md
    """

    def format_tree(self, tree: DirectoryTree) -> str:
        root = tree.get_root()
        lines = [f"{root.name}\n"]

        # Each entry holds a node, the prefix inherited from its ancestors and whether it is a last child
        stack: List[Tuple[DirectoryNode, str, bool]] = [
            (child, "", is_last) for child, is_last in reversed(self._with_last_flag(root))
        ]
        while stack:
            node, prefix, is_last = stack.pop()
            connector = "└── " if is_last else "├── "
            lines.append(f"{prefix}{connector}{node.name}\n")

            child_prefix = prefix + ("    " if is_last else "│   ")
            stack.extend((child, child_prefix, last) for child, last in reversed(self._with_last_flag(node)))

        return "".join(lines)

    def _with_last_flag(self, node: DirectoryNode) -> List[Tuple[DirectoryNode, bool]]:
        children = node.get_children()
        if children is None:
            return []
        ordered = list(children.values())
        return [(child, i == len(ordered) - 1) for i, child in enumerate(ordered)]

    def get_file_extension(self) -> str:
        return ".txt"
