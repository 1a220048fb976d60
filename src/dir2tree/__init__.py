"""Directory tree snapshot and rendering utilities.

This package walks a directory, builds an ordered in-memory tree mirroring its
hierarchy and renders that tree as plain text, Markdown, HTML, JSON or XML.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("dir2tree")
except PackageNotFoundError:
    __version__ = "unknown"
