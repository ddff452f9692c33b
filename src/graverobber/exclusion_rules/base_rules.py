from abc import ABC, abstractmethod


class BaseExclusionRules(ABC):
    """
    Abstract base class defining the interface for file/directory exclusion rules.

    Every rule type answers one question: should this path be skipped? Implementations
    must be pure string predicates. They receive the absolute path of a candidate entry,
    never touch the filesystem, and never raise for any string input. A path that a
    rule fails to recognize is simply not excluded.

    Rules carry their configuration from construction onwards and are not mutated
    afterwards, so a single instance can be shared by every traversal in a run.

    Example:
        >>> class TmpExclusionRules(BaseExclusionRules):
        ...     def exclude(self, path: str) -> bool:
        ...         return path.endswith('.tmp')
        >>> rules = TmpExclusionRules()
        >>> rules.exclude("/project/build/temp.tmp")
        True
        >>> rules.exclude("/project/main.py")
        False
    """

    @abstractmethod
    def exclude(self, path: str) -> bool:
        """
        Determine if a given path should be excluded.

        Args:
            path (str): Absolute path of the file or directory to check.

        Returns:
            bool: True if the path should be excluded, False if it should be included.
        """
        pass
