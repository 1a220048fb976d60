"""Markdown nested list output strategy."""

from dir2tree.directory_tree.directory_tree import DirectoryTree

from .base_strategy import OutputStrategy, WalkEvent, walk_tree


class MarkdownListStrategy(OutputStrategy):
    """Render the tree as a nested Markdown bullet list.

    The root name is written bare as the list's heading line; every descendant
    becomes a ``- name`` item indented by ``indent_size`` spaces per level.

    Example:
        >>> print(MarkdownListStrategy().format_tree(tree), end="")  # doctest: +SKIP
        project
          - docs
          - src
            - main.py
          - README.md
    """

    def __init__(self, indent_size: int = 2) -> None:
        if indent_size < 0:
            raise ValueError(f"indent_size must not be negative, got {indent_size}")
        self.indent_size = indent_size

    def format_tree(self, tree: DirectoryTree) -> str:
        lines = []
        for event, node, depth in walk_tree(tree.get_root()):
            if event is not WalkEvent.ENTER:
                continue
            if depth == 0:
                lines.append(f"{node.name}\n")
            else:
                lines.append(" " * (depth * self.indent_size) + f"- {node.name}\n")
        return "".join(lines)

    def get_file_extension(self) -> str:
        return ".md"
