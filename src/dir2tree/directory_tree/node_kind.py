"""Discriminator between directory and file nodes."""

from enum import Enum


class NodeKind(str, Enum):
    """Kind of filesystem entry a node stands for.

    The kind is decided once, when the node is constructed, and is never
    re-checked against the live filesystem afterwards.

    Values:
        DIRECTORY: The node can hold children.
        FILE: Anything that is not a directory (regular files, devices, sockets, ...).
    """

    DIRECTORY = "directory"
    FILE = "file"
