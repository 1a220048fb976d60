"""HTML nested list output strategy."""

from html import escape as html_escape

from dir2tree.directory_tree.directory_node import DirectoryNode
from dir2tree.directory_tree.directory_tree import DirectoryTree

from .base_strategy import OutputStrategy, WalkEvent, walk_tree


class HtmlListStrategy(OutputStrategy):
    """Render the tree as nested ``<ul>``/``<li>`` elements.

    Each item carries the node's location and path as ``data-location`` and
    ``data-path`` attributes, followed by its name. A directory item always holds
    a ``<ul>``, empty or not, so directories and files stay distinguishable. Names
    and attribute values are HTML-escaped.

    Example:
        >>> HtmlListStrategy().format_tree(tree)  # doctest: +SKIP
        '<ul><li data-location="project" data-path="/srv/project">project<ul>...</ul></li></ul>'
    """

    def format_tree(self, tree: DirectoryTree) -> str:
        parts = ["<ul>"]
        for event, node, _ in walk_tree(tree.get_root()):
            if event is WalkEvent.EXIT:
                parts.append("</ul></li>")
            elif node.get_children() is None:
                parts.append(self._format_item(node) + "</li>")
            else:
                parts.append(self._format_item(node) + "<ul>")
        parts.append("</ul>")
        return "".join(parts)

    def _format_item(self, node: DirectoryNode) -> str:
        location = html_escape(node.get_location())
        path = html_escape(node.get_path())
        return f'<li data-location="{location}" data-path="{path}">{html_escape(node.name)}'

    def get_file_extension(self) -> str:
        return ".html"
