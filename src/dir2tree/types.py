from enum import Enum
from os import PathLike
from typing import Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class OutputFormat(str, Enum):
    """Rendering formats understood by the viewer and the CLI.

    Values are the spellings accepted on the command line, so
    ``OutputFormat("json")`` works for plain strings.
    """

    TEXT_TREE = "text-tree"
    TEXT_INDENTED = "text-indented"
    MARKDOWN_LIST = "markdown"
    HTML_LIST = "html"
    JSON = "json"
    XML = "xml"
