"""Deterministic ordering of sibling nodes."""

import locale
from typing import Callable, Iterable, List, Tuple

from repotree.file_system_tree.file_system_node import FileSystemNode

CollationKey = Callable[[str], str]


def collation_key(name: str) -> str:
    """Collation key for a node name under the process's LC_COLLATE setting.

    Under the default C locale this is plain code point order; the CLI switches
    LC_COLLATE to the user's locale so names sort the way the user expects.
    """
    return locale.strxfrm(name)


def sort_nodes(nodes: Iterable[FileSystemNode], key: CollationKey = collation_key) -> List[FileSystemNode]:
    """Order sibling nodes: directories first, then by collated name, then by raw name.

    Names the locale collates as equal are ordered by code point, so the result
    never depends on the order the entries were listed in.

    Args:
        nodes: Sibling nodes of a single directory.
        key: Collation key applied to node names. Defaults to the locale-aware
            collation_key.

    Returns:
        A new list holding the nodes in display order.

    Example:
        >>> from repotree.file_system_tree.file_system_node import DirectoryNode, FileNode
        >>> nodes = [FileNode("b.txt"), FileNode("Azz"), DirectoryNode("a_dir"), FileNode("Readme.md")]
        >>> [node.name for node in sort_nodes(nodes, key=str)]
        ['a_dir', 'Azz', 'Readme.md', 'b.txt']
    """

    def sort_key(node: FileSystemNode) -> Tuple[bool, str, str]:
        return (not node.is_dir, key(node.name), node.name)

    return sorted(nodes, key=sort_key)
