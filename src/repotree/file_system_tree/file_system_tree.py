"""File system tree representation with configurable exclusion rules.

This module provides the FileSystemTree class, which scans a directory through
a FileSystem, filters entries with exclusion rules and assembles a sorted tree
of DirectoryNode and FileNode objects.
"""

from typing import Callable, List, Optional, Tuple

from repotree.exceptions import RootNotADirectoryError, RootNotFoundError
from repotree.exclusion_rules.base_rules import BaseExclusionRules
from repotree.file_system_tree.file_system import FileSystem, LocalFileSystem
from repotree.file_system_tree.file_system_node import DirectoryNode, FileNode, FileSystemNode
from repotree.file_system_tree.tree_sorter import CollationKey, collation_key, sort_nodes
from repotree.paths import join_path, trim_root
from repotree.types import PathType

GIT_DIRECTORY = ".git"


class FileSystemTree:
    """A tree representation of a directory structure with support for exclusion rules.

    The tree is built lazily on first access and can be refreshed to reflect
    filesystem changes. Every directory's children are sorted independently,
    directories first, then by collated name.

    Exclusion happens in two independent steps:
        - ``exclude_git`` drops an entry literally named ``.git`` from the root
          directory before anything else is looked at.
        - ``exclusion_rules`` are consulted for every entry at every level with the
          entry's parent path and base name. Excluded names are reported through
          ``on_exclude``.

    Errors raised while listing directories below the root (for example
    PermissionError) are not caught; they abort the build.

    Attributes:
        root_path (str): The root path as given, with trailing slashes trimmed.
        exclude_git (bool): Whether to drop the root's ``.git`` entry.
        exclusion_rules (Optional[BaseExclusionRules]): Rules for excluding entries.
        file_system (FileSystem): Filesystem access used for the scan.

    Example:
        >>> tree = FileSystemTree(".", exclude_git=True)  # doctest: +SKIP
        >>> [node.name for node in tree.build()]  # doctest: +SKIP
        ['src', 'tests', 'README.md']
    """

    def __init__(
        self,
        root_path: PathType,
        *,
        exclude_git: bool = False,
        exclusion_rules: Optional[BaseExclusionRules] = None,
        file_system: Optional[FileSystem] = None,
        on_exclude: Optional[Callable[[str], None]] = None,
        sort_key: CollationKey = collation_key,
    ) -> None:
        """Initialize a FileSystemTree.

        Args:
            root_path: Path to the root directory to represent.
            exclude_git: Drop the root's ``.git`` entry. Defaults to False.
            exclusion_rules: Rules for excluding entries. None excludes nothing.
            file_system: Filesystem access. Defaults to LocalFileSystem.
            on_exclude: Called with the base name of every entry removed by
                ``exclusion_rules``. Defaults to None.
            sort_key: Collation key used to order names within a kind.
        """
        self.root_path = trim_root(str(root_path))
        self.exclude_git = exclude_git
        self.exclusion_rules = exclusion_rules
        self.file_system = file_system if file_system is not None else LocalFileSystem()
        self.on_exclude = on_exclude
        self.sort_key = sort_key
        self._tree: Optional[DirectoryNode] = None
        self._file_count: int = 0
        self._directory_count: int = 0

    def validate_root(self) -> None:
        """Check that the root path exists and is a directory.

        Raises:
            RootNotFoundError: If the root path doesn't exist.
            RootNotADirectoryError: If the root path isn't a directory.
        """
        if not self.file_system.path_exists(self.root_path):
            raise RootNotFoundError(self.root_path)
        if not self.file_system.is_directory(self.root_path):
            raise RootNotADirectoryError(self.root_path)

    def get_tree(self) -> DirectoryNode:
        """Get the root node of the filesystem tree, building it on first access.

        The root node is named after the root path; its children are the sorted
        top-level entries.

        Raises:
            RootNotFoundError: If the root path doesn't exist.
            RootNotADirectoryError: If the root path isn't a directory.
        """
        if self._tree is None:
            self._build_tree()
        assert self._tree is not None
        return self._tree

    def build(self) -> Tuple[FileSystemNode, ...]:
        """Get the sorted top-level entries of the tree.

        Returns:
            The root directory's children, directories first.

        Raises:
            RootNotFoundError: If the root path doesn't exist.
            RootNotADirectoryError: If the root path isn't a directory.
        """
        return self.get_tree().children

    def _build_tree(self) -> None:
        self.validate_root()

        entries = self.file_system.list_children(self.root_path)
        if self.exclude_git:
            entries = [entry for entry in entries if entry != GIT_DIRECTORY]

        root = DirectoryNode(self.root_path)
        self._add_children(root, self.root_path, entries)
        self._tree = root
        self._count_files_and_directories()

    def _add_children(self, directory: DirectoryNode, current_path: str, entries: List[str]) -> None:
        """Attach nodes for the surviving ``entries`` of ``current_path``, recursing into directories."""
        children: List[FileSystemNode] = []
        for name in entries:
            if self.exclusion_rules is not None and self.exclusion_rules.exclude(current_path, name):
                if self.on_exclude is not None:
                    self.on_exclude(name)
                continue

            child_path = join_path(current_path, name)
            if self.file_system.is_directory(child_path):
                child_directory = DirectoryNode(name)
                self._add_children(child_directory, child_path, self.file_system.list_children(child_path))
                children.append(child_directory)
            else:
                children.append(FileNode(name))

        directory.children = sort_nodes(children, key=self.sort_key)

    def _count_files_and_directories(self) -> None:
        """Count the files and directories in the tree, the root directory excluded."""
        self._file_count = 0
        self._directory_count = 0

        if self._tree is None:
            return
        for node in self._tree.descendants:
            if node.is_dir:
                self._directory_count += 1
            else:
                self._file_count += 1

    def get_file_count(self) -> int:
        """Get the total number of files in the tree."""
        if self._tree is None:
            self._build_tree()
        return self._file_count

    def get_directory_count(self) -> int:
        """Get the total number of directories in the tree (excluding root)."""
        if self._tree is None:
            self._build_tree()
        return self._directory_count

    def refresh(self) -> None:
        """Discard the cached tree and rebuild it from the current filesystem state."""
        self._tree = None
        self._file_count = 0
        self._directory_count = 0
        self._build_tree()
