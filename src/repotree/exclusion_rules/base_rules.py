from abc import ABC, abstractmethod


class BaseExclusionRules(ABC):
    """
    Abstract base class defining the interface for file/directory exclusion rules.

    Rules are consulted once per directory entry while a tree is being built. An
    entry is identified by the path of the directory that contains it and its own
    base name, so implementations can match on either form without having to split
    paths themselves.

    Example:
        >>> from repotree.exclusion_rules.git_rules import GitIgnoreExclusionRules
        >>> rules = GitIgnoreExclusionRules()
        >>> rules.add_rule("node_modules/")
        >>> rules.exclude(".", "node_modules")
        True
        >>> rules.exclude(".", "my_node_modules_backup")
        False
    """

    @abstractmethod
    def exclude(self, parent_path: str, name: str) -> bool:
        """
        Determine if a directory entry should be excluded based on the loaded rules.

        Args:
            parent_path (str): Path of the directory containing the entry, joined with
                forward slashes starting from the root path the scan was started with.
            name (str): Base name of the entry.

        Returns:
            bool: True if the entry should be excluded, False if it should be included.
        """
        pass
