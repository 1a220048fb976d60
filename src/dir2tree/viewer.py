"""One-call rendering of a directory path into a chosen output format.

This module ties the pieces together: it validates the path, builds the tree
and dispatches to the output strategy matching the requested format.
"""

import os
from typing import Optional, Union

from dir2tree.directory_tree.directory_node import DirectoryNode
from dir2tree.directory_tree.directory_tree import DirectoryTree
from dir2tree.directory_tree.tree_builder import DirectoryTreeBuilder
from dir2tree.exceptions import InvalidFormatError, InvalidRootError
from dir2tree.exclusion_rules.base_rules import BaseExclusionRules
from dir2tree.output_strategies.base_strategy import OutputStrategy
from dir2tree.output_strategies.html_strategy import HtmlListStrategy
from dir2tree.output_strategies.json_strategy import JSONOutputStrategy
from dir2tree.output_strategies.markdown_strategy import MarkdownListStrategy
from dir2tree.output_strategies.text_indented_strategy import TextIndentedStrategy
from dir2tree.output_strategies.text_tree_strategy import TextTreeStrategy
from dir2tree.output_strategies.xml_strategy import XMLOutputStrategy
from dir2tree.types import OutputFormat, PathType


def parse_output_format(output_format: Union[str, OutputFormat]) -> OutputFormat:
    """Convert a format name into an OutputFormat.

    Raises:
        InvalidFormatError: If the name is not one of the supported formats.

    Example:
        >>> parse_output_format("markdown")
        <OutputFormat.MARKDOWN_LIST: 'markdown'>
        >>> parse_output_format(OutputFormat.XML)
        <OutputFormat.XML: 'xml'>
    """
    if isinstance(output_format, OutputFormat):
        return output_format
    try:
        return OutputFormat(str(output_format).lower())
    except ValueError:
        allowed = ", ".join(f"'{member.value}'" for member in OutputFormat)
        raise InvalidFormatError(f"Invalid format: {output_format!r}. Allowed values: {allowed}")


def create_strategy(output_format: Union[str, OutputFormat], indent_size: int = 2) -> OutputStrategy:
    """Return the output strategy for ``output_format``.

    Args:
        output_format: The requested format.
        indent_size: Spaces per level for the indented text and Markdown formats.

    Raises:
        InvalidFormatError: If the format is not supported.
    """
    output_format = parse_output_format(output_format)
    if output_format is OutputFormat.TEXT_TREE:
        return TextTreeStrategy()
    if output_format is OutputFormat.TEXT_INDENTED:
        return TextIndentedStrategy(indent_size)
    if output_format is OutputFormat.MARKDOWN_LIST:
        return MarkdownListStrategy(indent_size)
    if output_format is OutputFormat.HTML_LIST:
        return HtmlListStrategy()
    if output_format is OutputFormat.JSON:
        return JSONOutputStrategy()
    return XMLOutputStrategy()


class DirectoryTreeViewer:
    """Render a directory in one step.

    Attributes:
        exclusion_rules (Optional[BaseExclusionRules]): Rules handed to the builder.
        indent_size (int): Spaces per level for the indented text and Markdown formats.

    Example:
        >>> viewer = DirectoryTreeViewer()
        >>> print(viewer.render("project", "text-indented"), end="")  # doctest: +SKIP
        project
          src
            main.py
          README.md
    """

    def __init__(self, exclusion_rules: Optional[BaseExclusionRules] = None, indent_size: int = 2) -> None:
        self.exclusion_rules = exclusion_rules
        self.indent_size = indent_size

    def render(self, path: PathType, output_format: Union[str, OutputFormat] = OutputFormat.TEXT_TREE) -> str:
        """Build the tree for ``path`` and render it.

        Args:
            path: Directory to render.
            output_format: An OutputFormat or its string value.

        Returns:
            The rendered document.

        Raises:
            InvalidFormatError: If the format is not supported. Checked before any
                filesystem access.
            InvalidRootError: If ``path`` is not a directory or is a symbolic link.
            DirectoryTreeError: Any error raised while building the tree.
        """
        strategy = create_strategy(output_format, self.indent_size)
        return strategy.format_tree(self.build_tree(path))

    def build_tree(self, path: PathType) -> DirectoryTree:
        """Build the tree for the directory at ``path``.

        Trailing separators are stripped before the root node is created.

        Raises:
            InvalidRootError: If ``path`` is not a directory or is a symbolic link.
            DirectoryTreeError: Any error raised while building the tree.
        """
        raw_path = os.fspath(path)
        if not os.path.isdir(raw_path):
            raise InvalidRootError(f"Provided path is not a directory: {raw_path}")

        separators = os.sep + (os.altsep or "")
        root = DirectoryNode(raw_path.rstrip(separators) or raw_path)
        return DirectoryTreeBuilder(self.exclusion_rules).build(root)
