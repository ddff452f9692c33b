"""Exclusion rules that look only at the base name of a path."""

import os
from typing import FrozenSet, Iterable, Tuple

from pathspec import PathSpec
from pathspec.patterns import GitWildMatchPattern  # type: ignore

from .base_rules import BaseExclusionRules

# Characters with a special meaning in gitwildmatch patterns
_PATTERN_SPECIAL_CHARACTERS = frozenset("*?[]!#\\/")


class ExtensionExclusionRules(BaseExclusionRules):
    """Exclude paths whose base name ends with one of a set of suffixes.

    Each extension is compiled into a ``*<ext>`` gitwildmatch pattern with the pathspec
    library and matched against the base name only, so the test is a plain
    case-sensitive suffix check: ``logo.png`` matches ``.png``, ``logo.PNG`` does not,
    and a bare ``.md`` file matches ``.md``. Directories are tested the same way as files.

    Attributes:
        extensions (Tuple[str, ...]): The configured suffixes in declaration order.
        spec (PathSpec): Compiled pattern matcher from the pathspec library.

    Example:
        >>> rules = ExtensionExclusionRules([".md", ".lock"])
        >>> rules.exclude("/project/README.md")
        True
        >>> rules.exclude("/project/Cargo.lock")
        True
        >>> rules.exclude("/project/README.md.txt")
        False
    """

    def __init__(self, extensions: Iterable[str]):
        """Initialize with a collection of suffixes.

        Args:
            extensions: Suffixes such as ``.png``. Each must start with a dot.

        Raises:
            ValueError: If an extension does not start with a dot or contains
                characters that would be interpreted as pattern syntax.
        """
        self.extensions: Tuple[str, ...] = tuple(extensions)
        for extension in self.extensions:
            if not extension.startswith("."):
                raise ValueError(f"Extension must start with '.': {extension!r}")
            if any(char in _PATTERN_SPECIAL_CHARACTERS or char.isspace() for char in extension):
                raise ValueError(f"Extension contains pattern characters: {extension!r}")

        # Newer pathspec releases deprecate GitWildMatchPattern in favour of the "gitignore"
        # style; a ``*<ext>`` pattern matches a base name the same way under both.
        self.spec = PathSpec.from_lines(GitWildMatchPattern, [f"*{extension}" for extension in self.extensions])

    def exclude(self, path: str) -> bool:
        name = os.path.basename(path)
        if not name:
            return False
        return bool(self.spec.match_file(name))

class FilenameExclusionRules(BaseExclusionRules):
    """Exclude paths whose base name is exactly one of a set of names.

    Example:
        >>> rules = FilenameExclusionRules(["yarn.lock"])
        >>> rules.exclude("/project/yarn.lock")
        True
        >>> rules.exclude("/project/my-yarn.lock.txt")
        False
    """

    def __init__(self, filenames: Iterable[str]):
        self.filenames: FrozenSet[str] = frozenset(filenames)

    def exclude(self, path: str) -> bool:
        return os.path.basename(path) in self.filenames
