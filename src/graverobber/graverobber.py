"""Directory scanning and report generation.

This module ties the exclusion policy, the file system tree, the content collector
and the report writer together into a single scan of one root directory.
"""

import os
from pathlib import Path
from typing import Optional

from graverobber.content_collector import ContentCollector
from graverobber.exclusion_rules.base_rules import BaseExclusionRules
from graverobber.exclusion_rules.default_rules import create_default_exclusion_rules
from graverobber.file_system_tree.file_system_tree import FileSystemTree
from graverobber.report_writer import REPORT_FILENAME, ReportWriter
from graverobber.types import DirectoryRecord, PathType


class Graverobber:
    """Scan a directory and write the tree and details report.

    The directory is walked once. The resulting in-memory tree feeds both the tree
    listing and the details record, so both outputs always agree on which entries are
    included and in which order. Scanning happens on first access to ``tree_string``,
    ``details`` or the counts, or explicitly through ``scan()``.

    A scan is all-or-nothing: any listing, stat, read or decode error propagates and
    no report is written.

    Attributes:
        directory (Path): Absolute path of the directory being scanned.
        program_path (str): Absolute path of the running program, which is never scanned.
        report_path (Path): Where the report is written.

    Example:
        >>> robber = Graverobber("project", program_path="project/graverobber.py")  # doctest: +SKIP
        >>> robber.write_report()  # doctest: +SKIP
        PosixPath('/abs/project/report.txt')
        >>> print(robber.tree_string, end="")  # doctest: +SKIP
        📄main.py
        📂src
          📄lib.py

    Raises:
        ValueError: If directory is not an existing directory.
    """

    def __init__(
        self,
        directory: PathType,
        *,
        program_path: PathType,
        exclusion_rules: Optional[BaseExclusionRules] = None,
        report_name: str = REPORT_FILENAME,
    ):
        """Prepare a scan.

        Args:
            directory: Directory to scan. Can be any path-like object.
            program_path: Path of the running program's own file.
            exclusion_rules: Rules deciding which paths are skipped. If None, the fixed
                default policy is used, built for program_path, the report path and the
                report's temporary file.
            report_name: File name of the report inside directory.

        Raises:
            ValueError: If directory is not an existing directory.
        """
        self.directory = Path(os.path.abspath(os.fspath(directory)))
        if not self.directory.is_dir():
            raise ValueError(f"'{directory}' is not a valid directory")

        self.program_path = os.path.abspath(os.fspath(program_path))
        self.report_path = self.directory / report_name
        self._writer = ReportWriter(self.report_path)

        if exclusion_rules is None:
            exclusion_rules = create_default_exclusion_rules(
                self.program_path, self.report_path, self._writer.temp_path
            )
        self._exclusion_rules = exclusion_rules

        self._fs_tree = FileSystemTree(self.directory, self._exclusion_rules)
        self._collector = ContentCollector(self._fs_tree)

        self._tree_string: Optional[str] = None
        self._details: Optional[DirectoryRecord] = None

    def scan(self) -> None:
        """Walk the directory and compute both outputs.

        Raises:
            ContentDecodeError: If an included file is not valid text.
            OSError: If a directory cannot be listed or a file cannot be read.
        """
        tree_string = self._fs_tree.get_tree_representation()
        details = self._collector.collect()
        self._tree_string = tree_string
        self._details = details

    @property
    def tree_string(self) -> str:
        """The indented tree listing, one line per included entry."""
        if self._tree_string is None:
            self.scan()
        assert self._tree_string is not None
        return self._tree_string

    @property
    def details(self) -> DirectoryRecord:
        """The nested record of included files and their normalized contents."""
        if self._details is None:
            self.scan()
        assert self._details is not None
        return self._details

    @property
    def file_count(self) -> int:
        """Number of included files."""
        return self._fs_tree.get_file_count()

    @property
    def directory_count(self) -> int:
        """Number of included directories, excluding the root."""
        return self._fs_tree.get_directory_count()

    def write_report(self) -> Path:
        """Write the report, scanning first if that has not happened yet.

        Returns:
            The path of the written report.

        Raises:
            ReportWriteError: If the report cannot be written.
        """
        self._writer.write(self.tree_string, self.details)
        return self.report_path
