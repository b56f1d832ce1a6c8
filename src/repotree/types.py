from enum import Enum
from os import PathLike
from typing import Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class NodeKind(Enum):
    """Enumeration of the entry kinds that can appear in a rendered tree.

    Attributes:
        DIRECTORY: Directory, may hold children
        FILE: Anything that is not a directory (regular files, symlinks, ...)
    """

    DIRECTORY = "directory"
    FILE = "file"
