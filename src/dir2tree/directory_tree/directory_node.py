"""Node representation for filesystem entries in a directory tree."""

import os
import posixpath
import re
import weakref
from types import MappingProxyType
from typing import Dict, Mapping, Optional

from anytree import NodeMixin

from dir2tree.directory_tree.node_kind import NodeKind
from dir2tree.exceptions import (
    InvalidRootError,
    NotADirectoryNodeError,
    NotDescendantError,
    PathNotFoundError,
    PathNotReadableError,
    UnresolvablePathError,
)
from dir2tree.types import PathType

# Paths such as "zip://archive.zip/inner" name virtual filesystems and are used verbatim
_SCHEME_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]+://")


def is_scheme_path(path: str) -> bool:
    """Return True if ``path`` starts with a URL-style scheme such as ``zip://``.

    Example:
        >>> is_scheme_path("zip://bundle.zip/docs")
        True
        >>> is_scheme_path("/srv/docs")
        False
    """
    return _SCHEME_PATTERN.match(path) is not None


def _strip_trailing_separators(path: str) -> str:
    separators = os.sep + (os.altsep or "")
    return path.rstrip(separators) or path


def _resolve_path(path: str) -> str:
    """Canonicalize ``path``, leaving scheme paths untouched.

    A path that simply does not exist is returned in its non-strict resolved
    form so the caller can report it as missing rather than unresolvable.
    """
    if is_scheme_path(path):
        return path

    try:
        return os.path.realpath(path, strict=True)
    except FileNotFoundError as e:
        if os.path.lexists(path):
            # The entry itself exists, so a symlink somewhere in the chain dangles
            raise UnresolvablePathError(path, e) from e
        return os.path.realpath(path)
    except OSError as e:
        raise UnresolvablePathError(path, e) from e


def _entry_name(path: str, resolved: str) -> str:
    """Name of the entry as it appears in its directory listing."""
    if is_scheme_path(path):
        return posixpath.basename(path.rstrip("/")) or path
    # A symlink keeps its own name even though its path is resolved to the target
    if os.path.islink(_strip_trailing_separators(path)):
        return os.path.basename(os.path.abspath(path))
    return os.path.basename(resolved) or resolved


class DirectoryNode(NodeMixin):  # type: ignore
    """A file or directory captured in a directory tree.

    Extends anytree.NodeMixin so that anytree's iterators and renderers operate
    on the attached children. A node is validated against the filesystem once,
    at construction time; afterwards it is a pure in-memory object.

    Two kinds of parent linkage exist. The *declared* parent is passed to the
    constructor, held through a weak reference and returned by get_parent(). The
    *attached* parent (anytree's ``parent``) is set by add_child() and owns the
    child. The builder always attaches a child to its declared parent.
    Callers must keep the declared parent alive until the child has been
    attached with add_child(); once the parent is collected, get_parent() of an
    unattached child returns None and the node reads as a root.

    Attributes:
        name (str): The entry's basename.
        kind (NodeKind): Whether the node is a directory or a file.

    Example:
        >>> root = DirectoryNode("/srv/project")  # doctest: +SKIP
        >>> docs = DirectoryNode("/srv/project/docs", root)  # doctest: +SKIP
        >>> root.add_child(docs)  # doctest: +SKIP
        >>> list(root.get_children())  # doctest: +SKIP
        ['project/docs']
    """

    def __init__(self, path: PathType, parent: Optional["DirectoryNode"] = None) -> None:
        """Validate ``path`` and create a node for it.

        Args:
            path: Filesystem path of the entry. Relative paths are resolved against
                the current working directory.
            parent: The directory node this entry belongs to, or None for a root.
                Only a weak reference is kept, so the caller owns the parent.

        Raises:
            InvalidRootError: If ``parent`` is None and ``path`` is a symbolic link.
            UnresolvablePathError: If the path cannot be canonicalized.
            PathNotFoundError: If the canonical path does not exist.
            PathNotReadableError: If the path exists but is not readable.
            NotDescendantError: If the canonical path is not inside ``parent``'s path.
        """
        super().__init__()
        raw_path = os.fspath(path)

        if parent is None and os.path.islink(_strip_trailing_separators(raw_path)):
            raise InvalidRootError(f"Root node cannot be a symbolic link: {raw_path}")

        resolved = _resolve_path(raw_path)

        if not os.path.exists(resolved):
            raise PathNotFoundError(resolved)

        if not os.access(resolved, os.R_OK):
            raise PathNotReadableError(resolved)

        if parent is not None:
            parent_path = parent.get_path()
            separator = "/" if is_scheme_path(parent_path) else os.sep
            # Compare against "parent/" so that "/a/bc" is not taken as a child of "/a/b"
            if not resolved.startswith(parent_path.rstrip(separator) + separator):
                raise NotDescendantError(resolved, parent_path)

        self.name = _entry_name(raw_path, resolved)
        self.kind = NodeKind.DIRECTORY if os.path.isdir(resolved) else NodeKind.FILE

        self._canonical_path = resolved
        self._parent_ref = weakref.ref(parent) if parent is not None else None
        self._location = posixpath.join(parent.get_location(), self.name) if parent is not None else self.name
        self._children_by_location: Optional[Dict[str, DirectoryNode]] = (
            {} if self.kind is NodeKind.DIRECTORY else None
        )

    @property
    def is_dir(self) -> bool:
        return self.kind is NodeKind.DIRECTORY

    @property
    def is_file(self) -> bool:
        return self.kind is NodeKind.FILE

    def get_path(self) -> str:
        """Return the canonical absolute path of the entry."""
        return self._canonical_path

    def get_location(self) -> str:
        """Return the forward-slash path of the entry relative to (and including) the root's name."""
        return self._location

    def get_parent(self) -> Optional["DirectoryNode"]:
        """Return the declared parent, or None for a root node."""
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    def get_children(self) -> Optional[Mapping[str, "DirectoryNode"]]:
        """Return a read-only view of the children keyed by location.

        Returns:
            The children in insertion order for a directory node (possibly empty),
            or None for a file node.
        """
        if self._children_by_location is None:
            return None
        return MappingProxyType(self._children_by_location)

    def add_child(self, child: "DirectoryNode") -> None:
        """Attach ``child`` at the end of this node's children.

        A child already stored under the same location is detached first, so
        re-adding a location moves it to the end.

        Raises:
            NotADirectoryNodeError: If this node represents a file.
        """
        if self._children_by_location is None:
            raise NotADirectoryNodeError(f"Cannot add child to non-directory node: {self._location}")

        previous = self._children_by_location.get(child.get_location())
        if previous is not None:
            previous.parent = None

        child.parent = self

    def _pre_attach(self, parent: NodeMixin) -> None:
        if isinstance(parent, DirectoryNode) and parent.is_file:
            raise NotADirectoryNodeError(f"Cannot add child to non-directory node: {parent.get_location()}")

    def _post_attach(self, parent: NodeMixin) -> None:
        if isinstance(parent, DirectoryNode) and parent._children_by_location is not None:
            parent._children_by_location[self._location] = self

    def _post_detach(self, parent: NodeMixin) -> None:
        if isinstance(parent, DirectoryNode) and parent._children_by_location is not None:
            if parent._children_by_location.get(self._location) is self:
                del parent._children_by_location[self._location]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._location!r}, kind={self.kind.value!r})"
