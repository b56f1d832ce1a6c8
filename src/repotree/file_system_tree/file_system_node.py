"""Node representation for file system entries in the tree."""

from typing import Any, Iterable

from anytree import NodeMixin, TreeError

from repotree.types import NodeKind


class FileSystemNode(NodeMixin):  # type: ignore
    """Base class for a directory or file entry in the filesystem tree.

    Builds on anytree.NodeMixin for parent/child bookkeeping and traversal. Only
    the two concrete variants, DirectoryNode and FileNode, are instantiated.
    Nodes may only be attached beneath a DirectoryNode.

    Attributes:
        name (str): The base name of the entry.
        kind (NodeKind): Whether the entry is a directory or a file.
        parent (Optional[DirectoryNode]): The containing directory node.
        children (tuple[FileSystemNode]): The child nodes (inherited from anytree).
    """

    kind: NodeKind

    def __init__(self, name: str, parent: Any = None) -> None:
        if not name:
            raise ValueError("Node name must be a non-empty string")
        self.name = name
        self.parent = parent

    @property
    def is_dir(self) -> bool:
        return self.kind is NodeKind.DIRECTORY

    def _pre_attach(self, parent: Any) -> None:
        if not isinstance(parent, DirectoryNode):
            parent_name = getattr(parent, "name", parent)
            raise TreeError(f"Cannot attach {self.name!r} beneath non-directory node {parent_name!r}")

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.name!r})"


class DirectoryNode(FileSystemNode):
    """A directory entry; holds its entries as an ordered children tuple.

    Example:
        >>> root = DirectoryNode("src")
        >>> pkg = DirectoryNode("pkg", parent=root)
        >>> module = FileNode("module.py", parent=pkg)
        >>> [node.name for node in root.descendants]
        ['pkg', 'module.py']
        >>> DirectoryNode("empty").children
        ()
    """

    kind = NodeKind.DIRECTORY

    def __init__(self, name: str, parent: Any = None, children: Iterable[FileSystemNode] = ()) -> None:
        super().__init__(name, parent)
        children = tuple(children)
        if children:
            self.children = children


class FileNode(FileSystemNode):
    """A file entry. File nodes never have children.

    Example:
        >>> readme = FileNode("README.md")
        >>> readme.is_dir
        False
        >>> from anytree import TreeError
        >>> try:
        ...     FileNode("notes.txt", parent=readme)
        ... except TreeError as error:
        ...     print(error)
        Cannot attach 'notes.txt' beneath non-directory node 'README.md'
    """

    kind = NodeKind.FILE

    def _pre_attach_children(self, children: Any) -> None:
        # anytree reassigns the previous (empty) children when an attach fails
        if children:
            raise TreeError(f"File node {self.name!r} cannot have children")
