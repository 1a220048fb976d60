"""XML output strategy for directory trees.

This module renders a tree as an XML document with one element per node,
escaping attribute values so arbitrary file names yield well-formed XML.
"""

import re
from xml.sax.saxutils import quoteattr

from dir2tree.directory_tree.directory_node import DirectoryNode
from dir2tree.directory_tree.directory_tree import DirectoryTree

from .base_strategy import OutputStrategy, WalkEvent, walk_tree

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>\n'

# Characters outside the XML 1.0 Char production, including lone surrogates from undecodable names
_INVALID_XML_CHARS = re.compile("[^\u0009\u000A\u000D\u0020-\uD7FF\uE000-\uFFFD\U00010000-\U0010FFFF]")


def _xml_attribute(value: str) -> str:
    return quoteattr(_INVALID_XML_CHARS.sub("\uFFFD", value))


class XMLOutputStrategy(OutputStrategy):
    """Output strategy that formats the tree as XML.

    The document has a ``<tree>`` root element. Directories become
    ``<directory>`` elements enclosing their children, files become self-closing
    ``<file/>`` elements. Both carry ``location`` and ``path`` attributes;
    characters XML 1.0 cannot represent are replaced with U+FFFD:

    <?xml version="1.0" encoding="UTF-8"?>
    <tree><directory location="project" path="/srv/project"><file location="project/README.md" .../></directory></tree>

    Example:
        >>> XMLOutputStrategy().get_file_extension()
        '.xml'
    """

    def format_tree(self, tree: DirectoryTree) -> str:
        parts = [XML_DECLARATION, "<tree>"]
        for event, node, _ in walk_tree(tree.get_root()):
            if event is WalkEvent.EXIT:
                parts.append("</directory>")
            elif node.get_children() is None:
                parts.append(f"<file {self._format_attributes(node)}/>")
            else:
                parts.append(f"<directory {self._format_attributes(node)}>")
        parts.append("</tree>\n")
        return "".join(parts)

    def _format_attributes(self, node: DirectoryNode) -> str:
        return f"location={_xml_attribute(node.get_location())} path={_xml_attribute(node.get_path())}"

    def get_file_extension(self) -> str:
        return ".xml"
