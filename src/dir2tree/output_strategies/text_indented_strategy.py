"""Plain indented text output strategy."""

from dir2tree.directory_tree.directory_tree import DirectoryTree

from .base_strategy import OutputStrategy, WalkEvent, walk_tree


class TextIndentedStrategy(OutputStrategy):
    """Render one name per line, indented by depth.

    Attributes:
        indent_size (int): Number of spaces per level. The root is not indented.

    Example:
        >>> print(TextIndentedStrategy().format_tree(tree), end="")  # doctest: +SKIP
        project
          docs
          src
            main.py
          README.md
    """

    def __init__(self, indent_size: int = 2) -> None:
        if indent_size < 0:
            raise ValueError(f"indent_size must not be negative, got {indent_size}")
        self.indent_size = indent_size

    def format_tree(self, tree: DirectoryTree) -> str:
        lines = []
        for event, node, depth in walk_tree(tree.get_root()):
            if event is WalkEvent.ENTER:
                lines.append(" " * (depth * self.indent_size) + node.name + "\n")
        return "".join(lines)

    def get_file_extension(self) -> str:
        return ".txt"
