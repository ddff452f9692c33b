"""Exclusion rules that match whole paths or path segments."""

import os
from typing import FrozenSet, Iterable, Tuple

from graverobber.types import PathType

from .base_rules import BaseExclusionRules


class ExactPathExclusionRules(BaseExclusionRules):
    """Exclude a fixed set of absolute paths.

    Used to keep the running program's own source file and the report it produces out
    of the scan. Paths are made absolute once at construction and compared as plain
    strings afterwards; no symlink resolution or case folding happens at match time.

    Attributes:
        paths (FrozenSet[str]): Absolute paths that are excluded.

    Example:
        >>> rules = ExactPathExclusionRules(["/project/graverobber.py"])
        >>> rules.exclude("/project/graverobber.py")
        True
        >>> rules.exclude("/project/src/graverobber.py")
        False
    """

    def __init__(self, paths: Iterable[PathType]):
        self.paths: FrozenSet[str] = frozenset(os.path.abspath(os.fspath(path)) for path in paths)

    def exclude(self, path: str) -> bool:
        return path in self.paths

class DirectorySegmentExclusionRules(BaseExclusionRules):
    """Exclude any path that has one of a set of names as a full path segment.

    A name matches either as an interior segment (``<sep>name<sep>`` appears in the
    path) or as the final segment (the path ends with ``<sep>name``). The second form
    catches the directory itself when it is the entry being tested, which stops the
    traversal from ever descending into it. Matching is done on the path string with
    the platform separator, so a file called ``myassets.txt`` or a directory called
    ``assets-old`` is not excluded by ``assets``.

    Note that the whole absolute path is examined. If the scan root itself lives below
    a matching directory, every entry of the scan is excluded.

    Attributes:
        names (Tuple[str, ...]): Directory names that are excluded.
        sep (str): Path separator used to delimit segments.

    Example:
        >>> rules = DirectorySegmentExclusionRules(["node_modules"], sep="/")
        >>> rules.exclude("/project/node_modules")
        True
        >>> rules.exclude("/project/node_modules/react/index.js")
        True
        >>> rules.exclude("/project/my_node_modules")
        False
    """

    def __init__(self, names: Iterable[str], sep: str = os.sep):
        self.names: Tuple[str, ...] = tuple(names)
        self.sep = sep
        for name in self.names:
            if not name or sep in name:
                raise ValueError(f"Directory name must be a single non-empty path segment: {name!r}")
        self._interior = tuple(f"{sep}{name}{sep}" for name in self.names)
        self._trailing = tuple(f"{sep}{name}" for name in self.names)

    def exclude(self, path: str) -> bool:
        if path.endswith(self._trailing):
            return True
        return any(segment in path for segment in self._interior)
