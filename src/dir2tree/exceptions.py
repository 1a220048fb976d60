"""Exceptions raised while building, querying and rendering directory trees.

Every error derives from DirectoryTreeError, which carries a human-readable
message and, where one exists, the underlying cause. The cause is also chained
with ``raise ... from`` at the raise site so tracebacks show both.
"""

from typing import Optional


class DirectoryTreeError(Exception):
    """
    Base class for all dir2tree errors.

    Attributes:
        message (str): Human-readable description of the failure.
        cause (Optional[BaseException]): The lower-level exception that triggered
            this error, if any.

    Example:
        >>> error = DirectoryTreeError("Something went wrong")
        >>> str(error)
        'Something went wrong'
        >>> error.cause is None
        True
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        self.message = message
        self.cause = cause
        super().__init__(message)


class InvalidRootError(DirectoryTreeError):
    """Raised when a root candidate is a symbolic link or not a directory."""

    pass


class PathNotFoundError(DirectoryTreeError):
    """
    Raised when a node's canonical path does not exist.

    Attributes:
        path (str): The path that could not be found.

    Example:
        >>> error = PathNotFoundError("/no/such/dir")
        >>> str(error)
        'Path does not exist: /no/such/dir'
    """

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Path does not exist: {path}")


class PathNotReadableError(DirectoryTreeError):
    """
    Raised when a path exists but the current process cannot read it.

    Attributes:
        path (str): The unreadable path.
    """

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Path is not readable: {path}")


class UnresolvablePathError(DirectoryTreeError):
    """
    Raised when a path cannot be canonicalized, e.g. a dangling symlink or a
    symlink loop.

    Attributes:
        path (str): The path as it was given.
    """

    def __init__(self, path: str, cause: Optional[BaseException] = None) -> None:
        self.path = path
        super().__init__(f"Cannot resolve real path: {path}", cause)


class NotDescendantError(DirectoryTreeError):
    """Raised when a node's canonical path lies outside its declared parent's subtree."""

    def __init__(self, path: str, parent_path: str) -> None:
        self.path = path
        self.parent_path = parent_path
        super().__init__(f"Node is not a descendant of its parent: {path} (parent: {parent_path})")


class NotADirectoryNodeError(DirectoryTreeError):
    """Raised when a child is attached to a node that represents a file."""

    pass


class DirectoryScanError(DirectoryTreeError):
    """
    Raised when the entries of a directory cannot be listed during a build.

    The underlying OSError is available as ``cause``.

    Example:
        >>> error = DirectoryScanError("/srv/data", PermissionError(13, "Permission denied"))
        >>> str(error)
        'Failed to scan directory: /srv/data'
        >>> isinstance(error.cause, PermissionError)
        True
    """

    def __init__(self, path: str, cause: Optional[BaseException] = None) -> None:
        self.path = path
        super().__init__(f"Failed to scan directory: {path}", cause)


class InvalidFormatError(DirectoryTreeError):
    """Raised when an unsupported output format is requested."""

    pass
