"""JSON output strategy for directory trees.

This module renders a tree as a single nested JSON document.
"""

import json
from typing import Any, Dict, List, Optional, Tuple

from dir2tree.directory_tree.directory_node import DirectoryNode
from dir2tree.directory_tree.directory_tree import DirectoryTree

from .base_strategy import OutputStrategy, WalkEvent, walk_tree


def node_to_dict(node: DirectoryNode) -> Dict[str, Any]:
    """Convert a node and its subtree into nested dictionaries.

    Each dictionary has the keys ``path``, ``location`` and ``parent_location``
    (None for a root). Directories additionally carry a ``children`` list in
    stored order, which is empty for an empty directory; files have no
    ``children`` key at all.

    Example:
        >>> node_to_dict(file_node)  # doctest: +SKIP
        {'path': '/srv/project/README.md', 'location': 'project/README.md', 'parent_location': 'project'}
    """
    documents: List[Dict[str, Any]] = []
    open_children: List[List[Dict[str, Any]]] = [documents]

    for event, current, _ in walk_tree(node):
        if event is WalkEvent.EXIT:
            open_children.pop()
            continue

        parent = current.get_parent()
        data: Dict[str, Any] = {
            "path": current.get_path(),
            "location": current.get_location(),
            "parent_location": parent.get_location() if parent is not None else None,
        }
        open_children[-1].append(data)

        if current.get_children() is not None:
            data["children"] = []
            open_children.append(data["children"])

    return documents[0]


class JSONOutputStrategy(OutputStrategy):
    """Output strategy that formats the tree as a JSON document.

    The document is the dictionary produced by node_to_dict for the root:

    {
        "path": "/srv/project",
        "location": "project",
        "parent_location": null,
        "children": [
            {"path": "/srv/project/README.md", "location": "project/README.md", "parent_location": "project"}
        ]
    }

    Non-ASCII names are written as-is rather than as escape sequences.

    Attributes:
        indent (Optional[int]): Indentation passed to json.dumps. None produces
            compact single-line output.
        separators (Optional[Tuple[str, str]]): Item and key separators passed to json.dumps.

    Example:
        >>> strategy = JSONOutputStrategy(indent=None)
        >>> strategy.get_file_extension()
        '.json'
    """

    def __init__(self, indent: Optional[int] = 4, separators: Optional[Tuple[str, str]] = None) -> None:
        self.indent = indent
        self.separators = separators

    def format_tree(self, tree: DirectoryTree) -> str:
        data = node_to_dict(tree.get_root())
        return json.dumps(data, indent=self.indent, separators=self.separators, ensure_ascii=False)

    def get_file_extension(self) -> str:
        return ".json"
