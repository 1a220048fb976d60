"""Conversions of a built directory tree into its textual representations."""

from typing import Any, Dict, Optional

from dir2tree.directory_tree.directory_tree import DirectoryTree
from dir2tree.output_strategies.html_strategy import HtmlListStrategy
from dir2tree.output_strategies.json_strategy import JSONOutputStrategy, node_to_dict
from dir2tree.output_strategies.markdown_strategy import MarkdownListStrategy
from dir2tree.output_strategies.text_indented_strategy import TextIndentedStrategy
from dir2tree.output_strategies.text_tree_strategy import TextTreeStrategy
from dir2tree.output_strategies.xml_strategy import XMLOutputStrategy


class DirectoryTreeTransformer:
    """Facade with one method per output format.

    Each method builds the matching output strategy and renders the given tree
    with it. The tree is only read, so one tree can be transformed into several
    formats.

    Example:
        >>> tree = DirectoryTreeBuilder().build(DirectoryNode("project"))  # doctest: +SKIP
        >>> transformer = DirectoryTreeTransformer()
        >>> print(transformer.to_text_tree(tree), end="")  # doctest: +SKIP
        project
        ├── src
        │   └── main.py
        └── README.md
    """

    def to_array(self, tree: DirectoryTree) -> Dict[str, Any]:
        """Return the tree as nested dictionaries (see node_to_dict)."""
        return node_to_dict(tree.get_root())

    def to_json(self, tree: DirectoryTree, indent: Optional[int] = 4) -> str:
        return JSONOutputStrategy(indent=indent).format_tree(tree)

    def to_xml(self, tree: DirectoryTree) -> str:
        return XMLOutputStrategy().format_tree(tree)

    def to_html_list(self, tree: DirectoryTree) -> str:
        return HtmlListStrategy().format_tree(tree)

    def to_markdown_list(self, tree: DirectoryTree, indent_size: int = 2) -> str:
        return MarkdownListStrategy(indent_size).format_tree(tree)

    def to_text_indented(self, tree: DirectoryTree, indent_size: int = 2) -> str:
        return TextIndentedStrategy(indent_size).format_tree(tree)

    def to_text_tree(self, tree: DirectoryTree) -> str:
        return TextTreeStrategy().format_tree(tree)
