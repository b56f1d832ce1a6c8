"""Icon configuration for rendered trees."""

from dataclasses import dataclass

from repotree.types import NodeKind

README_MARKER = "README"
LICENSE_MARKER = "LICENSE"


@dataclass(frozen=True)
class IconSet:
    """Glyphs placed in front of each entry name in a rendered tree.

    Names containing ``README`` take the readme icon, then names containing
    ``LICENSE`` take the license icon; every other entry gets the icon of its
    kind.

    Attributes:
        directory (str): Icon for directories.
        file (str): Icon for files.
        readme (str): Icon for entries whose name contains ``README``.
        license (str): Icon for entries whose name contains ``LICENSE``.

    Example:
        >>> icons = IconSet(directory="D", file="F", readme="R", license="L")
        >>> icons.icon_for("LICENSE.txt", NodeKind.FILE)
        'L'
        >>> icons.icon_for("README-LICENSE", NodeKind.FILE)
        'R'
        >>> icons.icon_for("docs", NodeKind.DIRECTORY)
        'D'
    """

    directory: str = "📁"
    file: str = "📄"
    readme: str = "ℹ️"
    license: str = "🔑"

    def icon_for(self, name: str, kind: NodeKind) -> str:
        if README_MARKER in name:
            return self.readme
        if LICENSE_MARKER in name:
            return self.license
        if kind is NodeKind.DIRECTORY:
            return self.directory
        return self.file


DEFAULT_ICONS = IconSet()
