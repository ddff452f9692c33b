"""Composite exclusion rules for combining multiple rule types."""

from typing import List, Sequence

from .base_rules import BaseExclusionRules


class CompositeExclusionRules(BaseExclusionRules):
    """Composite exclusion rules that combine multiple rule types.

    A path is excluded if ANY of the constituent rules determines it should be
    excluded. There is no ordering dependency between rules: reordering the
    constituents never changes the outcome, only how soon evaluation stops.

    Attributes:
        rules (List[BaseExclusionRules]): List of constituent exclusion rules.

    Example:
        >>> from graverobber.exclusion_rules.name_rules import ExtensionExclusionRules, FilenameExclusionRules
        >>> composite = CompositeExclusionRules([
        ...     ExtensionExclusionRules([".png"]),
        ...     FilenameExclusionRules(["yarn.lock"]),
        ... ])
        >>> composite.exclude("/project/logo.png")
        True
        >>> composite.exclude("/project/yarn.lock")
        True
        >>> composite.exclude("/project/index.js")
        False
    """

    def __init__(self, rules: Sequence[BaseExclusionRules]):
        """Initialize composite exclusion rules.

        Args:
            rules: Sequence of exclusion rules to combine. Each rule must implement
                  the BaseExclusionRules interface.

        Raises:
            ValueError: If rules list is empty.
            TypeError: If any rule doesn't implement BaseExclusionRules.
        """
        if not rules:
            raise ValueError("At least one exclusion rule must be provided")

        for i, rule in enumerate(rules):
            if not isinstance(rule, BaseExclusionRules):
                raise TypeError(f"Rule at index {i} must implement BaseExclusionRules, " f"got {type(rule)}")

        self._rules: List[BaseExclusionRules] = list(rules)

    def exclude(self, path: str) -> bool:
        """Check if a path should be excluded by any constituent rule.

        Args:
            path: File or directory path to check.

        Returns:
            True if ANY of the constituent rules determines the path should be
            excluded, False if ALL rules allow the path.
        """
        return any(rule.exclude(path) for rule in self._rules)
