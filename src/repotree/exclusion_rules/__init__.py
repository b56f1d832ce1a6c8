"""Exclusion rules for filtering files and directories."""

from .base_rules import BaseExclusionRules
from .git_rules import GitIgnoreExclusionRules, normalize_rule, parse_rules

__all__ = [
    "BaseExclusionRules",
    "GitIgnoreExclusionRules",
    "normalize_rule",
    "parse_rules",
]
