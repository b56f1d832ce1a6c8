"""Box-drawing rendering of a sorted file system tree.

The output looks like::

    ./
    ├── 📁 src
    │   ├── 📁 pkg
    │   │   └── 📄 module.py
    │   └── 📄 main.py
    ├── ℹ️ README.md
    └── 🔑 LICENSE

Each line is built from one segment per ancestor level (a continuation bar,
or blanks when that ancestor was the last entry of its directory), a corner
connector, the entry's icon and its name.
"""

from typing import Iterator, Sequence, Tuple

from repotree.file_system_tree.file_system_node import FileSystemNode
from repotree.icons import DEFAULT_ICONS, IconSet

BRANCH = "├── "
LAST_BRANCH = "└── "
CONTINUATION = "│  "
BLANK = "   "
ROOT_LABEL = "./"


class TreeRenderer:
    """Render sorted tree nodes as README-ready text lines.

    The renderer keeps no state between calls; the ancestor state for each
    level is passed down as an immutable tuple, so sibling branches never see
    each other's state.

    Attributes:
        icons (IconSet): Icons used for directories, files, READMEs and licenses.

    Example:
        >>> from repotree.file_system_tree.file_system_node import DirectoryNode, FileNode
        >>> nodes = [DirectoryNode("dirA"), FileNode("file1.txt")]
        >>> print(TreeRenderer().get_tree_representation(nodes))
        ./
        ├── 📁 dirA
        └── 📄 file1.txt
    """

    def __init__(self, icons: IconSet = DEFAULT_ICONS) -> None:
        self.icons = icons

    def render(
        self, nodes: Sequence[FileSystemNode], depth: int = 1, ancestors: Tuple[bool, ...] = ()
    ) -> Iterator[str]:
        """Yield one line per node, depth-first and pre-order.

        Args:
            nodes: Sorted sibling nodes at ``depth``.
            depth: Nesting level of ``nodes``; top-level entries are at depth 1.
            ancestors: For each enclosing level, whether the ancestor at that
                level was the last entry of its directory. Must hold at least
                ``depth - 1`` values.

        Yields:
            Formatted lines without trailing newlines.

        Raises:
            ValueError: If ``depth`` is below 1 or ``ancestors`` is too short for it.
        """
        if depth < 1:
            raise ValueError(f"depth must be at least 1, got {depth}")
        if len(ancestors) < depth - 1:
            raise ValueError(f"ancestors must hold {depth - 1} values at depth {depth}, got {len(ancestors)}")

        prefix = self._prefix(depth, ancestors)
        for i, node in enumerate(nodes):
            is_last = i == len(nodes) - 1
            connector = LAST_BRANCH if is_last else BRANCH
            icon = self.icons.icon_for(node.name, node.kind)
            yield f"{prefix}{connector}{icon} {node.name}"

            if node.is_dir:
                yield from self.render(node.children, depth + 1, ancestors[: depth - 1] + (is_last,))

    @staticmethod
    def _prefix(depth: int, ancestors: Tuple[bool, ...]) -> str:
        segments = []
        for level in range(depth - 1):
            lead = " " if level > 0 else ""
            segments.append(lead + (BLANK if ancestors[level] else CONTINUATION))
        if depth > 1:
            segments.append(" ")
        return "".join(segments)

    def stream_tree_representation(
        self, nodes: Sequence[FileSystemNode], root_label: str = ROOT_LABEL
    ) -> Iterator[str]:
        """Generate the full tree one line at a time, starting with the root label.

        Args:
            nodes: Sorted top-level nodes.
            root_label: Text of the first line. Defaults to ``./``.

        Yields:
            Lines of the tree representation.
        """
        yield root_label
        yield from self.render(nodes)

    def get_tree_representation(self, nodes: Sequence[FileSystemNode], root_label: str = ROOT_LABEL) -> str:
        """Get the complete tree as a single newline-joined string."""
        return "\n".join(self.stream_tree_representation(nodes, root_label))
