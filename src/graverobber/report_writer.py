"""Serialization and atomic writing of the scan report.

The report is a single UTF-8 text file::

    FileTree:
    <tree listing>

    Details:
    <compact JSON of the nested details record>

It is assembled completely in memory and then written in one go.
"""

import json
import os
from pathlib import Path

from graverobber.exceptions import ReportWriteError
from graverobber.types import DirectoryRecord, PathType

REPORT_FILENAME = "report.txt"
TREE_HEADER = "FileTree:"
DETAILS_HEADER = "Details:"


def serialize_details(details: DirectoryRecord) -> str:
    """Serialize the details record as compact JSON.

    Non-ASCII characters in names and contents are written as-is rather than as
    ``\\u`` escapes.

    Example:
        >>> serialize_details({"a.txt": {"path": "/p/a.txt", "content": "helloworld"}, "sub": {}})
        '{"a.txt":{"path":"/p/a.txt","content":"helloworld"},"sub":{}}'
    """
    return json.dumps(details, ensure_ascii=False, separators=(",", ":"))


def format_report(tree: str, details: DirectoryRecord) -> str:
    """Assemble the full report text.

    Args:
        tree: The tree listing; each line already ends with a newline.
        details: The nested details record.

    Returns:
        The tree header, the tree, a blank line, the details header and the JSON.

    Example:
        >>> format_report("\N{PAGE FACING UP}a.txt\\n", {})
        'FileTree:\\n\N{PAGE FACING UP}a.txt\\n\\n\\nDetails:\\n{}'
    """
    return f"{TREE_HEADER}\n{tree}\n\n{DETAILS_HEADER}\n{serialize_details(details)}"


class ReportWriter:
    """Write reports to a fixed path, replacing any previous report atomically.

    The report text is written to a temporary sibling file (``<name>.tmp``) and then
    moved over the target with ``os.replace``. A reader therefore sees either the old
    report or the new one, never a partial file, and a failed write leaves the old
    report in place.

    Attributes:
        report_path (Path): Destination of the report.
        encoding (str): Encoding of the written file.

    Example:
        >>> writer = ReportWriter("/project/report.txt")  # doctest: +SKIP
        >>> details = {"main.py": {"path": "/project/main.py", "content": "x=1"}}
        >>> writer.write("\N{PAGE FACING UP}main.py\\n", details)  # doctest: +SKIP
    """

    def __init__(self, report_path: PathType, encoding: str = "utf-8") -> None:
        self.report_path = Path(report_path)
        self.encoding = encoding

    @property
    def temp_path(self) -> Path:
        """Path of the temporary file used while writing."""
        return self.report_path.with_name(self.report_path.name + ".tmp")

    def write(self, tree: str, details: DirectoryRecord) -> None:
        """Serialize and write the report.

        Args:
            tree: The tree listing.
            details: The nested details record.

        Raises:
            ReportWriteError: If the report cannot be written or a name or content
                cannot be encoded. The temporary file is removed on any failure and
                any existing report is left untouched.
        """
        content = format_report(tree, details)
        temp_path = self.temp_path
        try:
            with temp_path.open("w", encoding=self.encoding, newline="") as f:
                f.write(content)
            os.replace(temp_path, self.report_path)
        except (OSError, ValueError) as e:
            self._discard_temp()
            raise ReportWriteError(str(self.report_path), getattr(e, "strerror", None) or str(e)) from e
        except BaseException:
            self._discard_temp()
            raise

    def _discard_temp(self) -> None:
        try:
            self.temp_path.unlink()
        except OSError:
            pass  # the write error is reported instead
