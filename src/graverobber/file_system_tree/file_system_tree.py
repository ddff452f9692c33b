"""File system tree representation with exclusion rules.

This module provides the FileSystemTree class, which walks a directory once, keeps
the entries that survive the exclusion rules in an in-memory anytree structure, and
renders them as an indented text listing.
"""

import os
import stat
from pathlib import Path
from typing import Iterator, List, Optional, Tuple

from graverobber.exclusion_rules.base_rules import BaseExclusionRules
from graverobber.file_system_tree.file_system_node import FileSystemNode
from graverobber.types import PathType

DIRECTORY_GLYPH = "\N{OPEN FILE FOLDER}"
FILE_GLYPH = "\N{PAGE FACING UP}"
INDENT = "  "


class FileSystemTree:
    """A tree representation of a directory structure filtered by exclusion rules.

    The tree is built lazily on first access. Every directory is listed exactly once,
    in the platform's native listing order; entries are neither sorted nor grouped by
    type. Each candidate entry is checked against the exclusion rules using its
    absolute path before anything else happens to it, so an excluded directory is
    never listed and nothing beneath it is ever visited. Surviving entries are
    classified with ``os.stat``, which follows symbolic links.

    Traversal uses an explicit work stack rather than recursion, so arbitrarily deep
    hierarchies do not run into the interpreter's recursion limit.

    Error Handling:
        There is no partial result. Any error while listing a directory or reading an
        entry's metadata (``PermissionError``, a dangling symlink raising
        ``FileNotFoundError``, any other ``OSError``) propagates out of the first call
        that triggers the build, and no tree is kept.

    Attributes:
        root_path (Path): The absolute path to the root directory.
        exclusion_rules (Optional[BaseExclusionRules]): Rules for excluding files/directories.

    Example:
        >>> tree = FileSystemTree("project")  # doctest: +SKIP
        >>> print(tree.get_tree_representation(), end="")  # doctest: +SKIP
        📄main.py
        📂src
          📄lib.py
    """

    def __init__(self, root_path: PathType, exclusion_rules: Optional[BaseExclusionRules] = None) -> None:
        """Initialize a FileSystemTree.

        Args:
            root_path: Path to the root directory to represent. Can be any path-like object.
                It is made absolute so that exclusion rules always see absolute paths.
            exclusion_rules: Rules for excluding files and directories. Defaults to None.
        """
        self.root_path = Path(os.path.abspath(os.fspath(root_path)))
        self.exclusion_rules = exclusion_rules
        self._tree: Optional[FileSystemNode] = None
        self._file_count: int = 0
        self._directory_count: int = 0

    def get_tree(self) -> FileSystemNode:
        """Get the root node of the filesystem tree, building it if needed.

        Returns:
            The root node. Its children are the included top-level entries.

        Raises:
            FileNotFoundError: If the root path doesn't exist.
            NotADirectoryError: If the root path isn't a directory.
            OSError: If any directory listing or stat call fails during the build.
        """
        if self._tree is None:
            self._build_tree()
        assert self._tree is not None
        return self._tree

    def _build_tree(self) -> None:
        """Walk the filesystem from root_path and build the node tree.

        Raises:
            FileNotFoundError: If the root path doesn't exist.
            NotADirectoryError: If the root path isn't a directory.
            OSError: If any directory listing or stat call fails.
        """
        if not self.root_path.exists():
            raise FileNotFoundError(f"Root path does not exist: {self.root_path}")
        if not self.root_path.is_dir():
            raise NotADirectoryError(f"Root path is not a directory: {self.root_path}")

        root_str = str(self.root_path)
        tree = FileSystemNode(self.root_path.name or root_str, abs_path=root_str, is_dir=True)

        pending: List[FileSystemNode] = [tree]
        while pending:
            directory = pending.pop()
            for name in os.listdir(directory.abs_path):
                child_path = os.path.join(directory.abs_path, name)
                if self.exclusion_rules is not None and self.exclusion_rules.exclude(child_path):
                    continue

                is_dir = stat.S_ISDIR(os.stat(child_path).st_mode)
                node = FileSystemNode(name, parent=directory, abs_path=child_path, is_dir=is_dir)
                if is_dir:
                    pending.append(node)

        self._tree = tree
        self._count_files_and_directories()

    def walk(self) -> Iterator[FileSystemNode]:
        """Yield every included node in depth-first pre-order, excluding the root.

        Siblings come out in listing order and a directory is always yielded before
        its children.

        Yields:
            Each file and directory node below the root.
        """
        tree = self.get_tree()
        stack: List[FileSystemNode] = list(reversed(tree.children))
        while stack:
            node = stack.pop()
            yield node
            if node.is_dir:
                stack.extend(reversed(node.children))

    def _count_files_and_directories(self) -> None:
        """Count files and directories in the tree. The root is not counted."""
        self._file_count = 0
        self._directory_count = 0
        for node in self.walk():
            if node.is_dir:
                self._directory_count += 1
            else:
                self._file_count += 1

    def get_file_count(self) -> int:
        """Get the total number of included files in the tree."""
        if self._tree is None:
            self._build_tree()
        return self._file_count

    def get_directory_count(self) -> int:
        """Get the total number of included directories in the tree (excluding root)."""
        if self._tree is None:
            self._build_tree()
        return self._directory_count

    def iterate_files(self) -> Iterator[Tuple[str, str]]:
        """Iterate over all included files in the tree.

        Yields:
            Pairs of (absolute_path, relative_path) for each file, in traversal order.
        """
        root_str = str(self.root_path)
        for node in self.walk():
            if not node.is_dir:
                yield (node.abs_path, os.path.relpath(node.abs_path, root_str))

    def stream_tree_representation(self) -> Iterator[str]:
        """Generate the indented tree listing one line at a time.

        Each line is the indentation (two spaces per nesting level below the root),
        a folder or page glyph, and the entry name, terminated by a newline. The root
        itself is not listed.

        Yields:
            Lines of the tree representation, each ending with ``\\n``.

        Example:
            >>> tree = FileSystemTree("project")  # doctest: +SKIP
            >>> list(tree.stream_tree_representation())  # doctest: +SKIP
            ['📂src\\n', '  📄lib.py\\n', '📄main.py\\n']
        """
        for node in self.walk():
            glyph = DIRECTORY_GLYPH if node.is_dir else FILE_GLYPH
            yield f"{INDENT * (node.depth - 1)}{glyph}{node.name}\n"

    def get_tree_representation(self) -> str:
        """Get the complete tree listing as a single string.

        Returns:
            The concatenated lines; an empty string when nothing is included.
        """
        return "".join(self.stream_tree_representation())

    def refresh(self) -> None:
        """Discard the cached tree and counts and walk the filesystem again."""
        self._tree = None
        self._file_count = 0
        self._directory_count = 0
        self._build_tree()
