"""Exact-match exclusion rules read from .gitignore-style input."""

from os import PathLike
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Set, Tuple, Union

from repotree.paths import join_path
from repotree.types import PathType

from .base_rules import BaseExclusionRules


def normalize_rule(line: str) -> Optional[str]:
    """Turn one raw .gitignore line into an exclusion pattern.

    Carriage returns are removed and a single trailing slash is stripped. Blank
    lines and comment lines produce no pattern.

    Args:
        line: One line of .gitignore content.

    Returns:
        The normalized pattern, or None if the line does not define one.

    Example:
        >>> normalize_rule("build/\\r")
        'build'
        >>> normalize_rule("# generated files") is None
        True
        >>> normalize_rule("") is None
        True
    """
    pattern = line.replace("\r", "")
    if pattern.endswith("/"):
        pattern = pattern[:-1]
    if not pattern or pattern.startswith("#"):
        return None
    return pattern


def parse_rules(content: str) -> List[str]:
    """Split newline-separated .gitignore content into exclusion patterns.

    Example:
        >>> parse_rules("# deps\\nnode_modules/\\n\\ndist\\n")
        ['node_modules', 'dist']
    """
    patterns = []
    for line in content.split("\n"):
        pattern = normalize_rule(line)
        if pattern is not None:
            patterns.append(pattern)
    return patterns


class GitIgnoreExclusionRules(BaseExclusionRules):
    """Exclusion rules built from the lines of a .gitignore file.

    Patterns are compared literally: an entry is excluded when its base name, or
    its parent path joined to its name with a forward slash, equals one of the
    patterns. Wildcards (``*``, ``**``), character classes and negation are not
    interpreted, so a pattern only ever matches an entry spelled exactly the same
    way.

    Attributes:
        patterns (Tuple[str, ...]): Normalized patterns in the order they were added.

    Example:
        >>> rules = GitIgnoreExclusionRules.from_text("node_modules/\\n# cache\\nsrc/generated\\n")
        >>> rules.patterns
        ('node_modules', 'src/generated')
        >>> rules.exclude("./web", "node_modules")
        True
        >>> rules.exclude("src", "generated")
        True
        >>> rules.exclude("lib", "generated")
        False
    """

    def __init__(self, rules: Optional[Iterable[str]] = None):
        """Initialize GitIgnoreExclusionRules from raw .gitignore lines.

        Args:
            rules: Raw lines to normalize and add. Blank and comment lines are skipped.
        """
        self._patterns: List[str] = []
        self._pattern_set: Set[str] = set()

        if rules is not None:
            for rule in rules:
                self.add_rule(rule)

    @classmethod
    def from_text(cls, content: str) -> "GitIgnoreExclusionRules":
        """Create rules from the full text of a .gitignore file."""
        return cls(content.split("\n"))

    @property
    def patterns(self) -> Tuple[str, ...]:
        return tuple(self._patterns)

    def __len__(self) -> int:
        return len(self._patterns)

    def exclude(self, parent_path: str, name: str) -> bool:
        """Check whether an entry matches one of the loaded patterns.

        Args:
            parent_path: Path of the directory containing the entry.
            name: Base name of the entry.

        Returns:
            bool: True if the name or the joined ``parent_path/name`` equals a pattern.

        Example:
            >>> rules = GitIgnoreExclusionRules(["dist/"])
            >>> rules.exclude(".", "dist")
            True
            >>> rules.exclude(".", "dist.zip")
            False
        """
        return name in self._pattern_set or join_path(parent_path, name) in self._pattern_set

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Load and combine patterns from one or more .gitignore-style files.

        Args:
            rules_files: Path(s) to file(s) containing .gitignore lines.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        # Convert to list if it's a single path
        if isinstance(rules_files, (str, PathLike)):
            rules_files = [rules_files]

        for rules_file in rules_files:
            path = Path(rules_file)
            if not path.exists():
                raise FileNotFoundError(f"Rules file not found: {path}")

            for pattern in parse_rules(path.read_text(encoding="utf-8")):
                self._add_pattern(pattern)

    def add_rule(self, rule: str) -> None:
        """Add a single raw .gitignore line.

        Lines that normalize to nothing (blank lines, comments) are ignored.

        Example:
            >>> rules = GitIgnoreExclusionRules()
            >>> rules.add_rule("coverage/")
            >>> rules.add_rule("# not a rule")
            >>> rules.patterns
            ('coverage',)
        """
        pattern = normalize_rule(rule)
        if pattern is not None:
            self._add_pattern(pattern)

    def _add_pattern(self, pattern: str) -> None:
        if pattern not in self._pattern_set:
            self._patterns.append(pattern)
            self._pattern_set.add(pattern)
