"""Rendering strategies turning a DirectoryTree into text documents."""

from .base_strategy import OutputStrategy
from .html_strategy import HtmlListStrategy
from .json_strategy import JSONOutputStrategy
from .markdown_strategy import MarkdownListStrategy
from .text_indented_strategy import TextIndentedStrategy
from .text_tree_strategy import TextTreeStrategy
from .xml_strategy import XMLOutputStrategy

__all__ = [
    "HtmlListStrategy",
    "JSONOutputStrategy",
    "MarkdownListStrategy",
    "OutputStrategy",
    "TextIndentedStrategy",
    "TextTreeStrategy",
    "XMLOutputStrategy",
]
