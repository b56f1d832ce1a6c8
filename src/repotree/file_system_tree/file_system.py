"""Filesystem access used while building a tree.

The tree builder and the interactive front end only touch the filesystem
through the small FileSystem interface below, so both can be exercised against
an in-memory fake.
"""

import os
from abc import ABC, abstractmethod
from typing import List


class FileSystem(ABC):
    """Read-only filesystem operations needed to scan a directory."""

    @abstractmethod
    def path_exists(self, path: str) -> bool:
        """Return True if something exists at ``path``."""

    @abstractmethod
    def is_directory(self, path: str) -> bool:
        """Return True if ``path`` is a directory that should be descended into."""

    @abstractmethod
    def list_children(self, path: str) -> List[str]:
        """Return the base names of the entries in directory ``path``, in no particular order."""

    @abstractmethod
    def read_text_file(self, path: str) -> str:
        """Return the contents of the text file at ``path`` decoded as UTF-8, line endings untouched.

        Bytes that are not valid UTF-8 are replaced with U+FFFD rather than failing.
        """


class LocalFileSystem(FileSystem):
    """FileSystem implementation backed by the local disk.

    Symbolic links are reported as non-directories, even when they point at a
    directory, so a scan never follows them.

    Example:
        >>> fs = LocalFileSystem()
        >>> fs.path_exists("/definitely/not/here")
        False
    """

    def path_exists(self, path: str) -> bool:
        return os.path.exists(path)

    def is_directory(self, path: str) -> bool:
        return os.path.isdir(path) and not os.path.islink(path)

    def list_children(self, path: str) -> List[str]:
        return os.listdir(path)

    def read_text_file(self, path: str) -> str:
        with open(path, "r", encoding="utf-8", errors="replace", newline="") as f:
            return f.read()
