"""Collection of whitespace-normalized file contents.

This module turns a FileSystemTree into the nested details structure stored in the
report: directories become nested mappings, files become records holding their
absolute path and their text with every whitespace character removed.
"""

import re
from typing import Dict

from graverobber.exceptions import ContentDecodeError
from graverobber.file_system_tree.file_system_node import FileSystemNode
from graverobber.file_system_tree.file_system_tree import FileSystemTree
from graverobber.types import DirectoryRecord, FileRecord

# \s does not match U+FEFF, which the utf-8 codec keeps as a leading byte order mark
_WHITESPACE = re.compile(r"[\s\ufeff]+")


def normalize_content(text: str) -> str:
    """Remove every whitespace character from text.

    Not just leading and trailing whitespace: spaces, tabs, newlines, carriage
    returns, Unicode space characters and byte order marks inside the text are
    dropped as well. The result cannot be turned back into the original file; it is a
    compact rendition of the substantive characters only.

    Example:
        >>> normalize_content("def main():\\n    return 1\\n")
        'defmain():return1'
        >>> normalize_content("a\\tb\\r\\nc\\u00a0d")
        'abcd'
    """
    return _WHITESPACE.sub("", text)


class ContentCollector:
    """Build the nested details record for every file in a tree.

    The collector relies on the tree for filtering and ordering, so the details
    structure contains exactly the entries listed in the tree text, keyed by entry
    name in listing order. Empty directories map to an empty dict.

    Files are read one at a time; each handle is closed before the next file is
    opened. Any read error, or content that is not valid text in the configured
    encoding, aborts collection.

    Attributes:
        fs_tree (FileSystemTree): The tree providing the files to read.
        encoding (str): Text encoding used to decode file contents.

    Example:
        >>> tree = FileSystemTree("project")  # doctest: +SKIP
        >>> ContentCollector(tree).collect()  # doctest: +SKIP
        {'main.py': {'path': '/project/main.py', 'content': 'print("hi")'}, 'src': {}}
    """

    def __init__(self, fs_tree: FileSystemTree, encoding: str = "utf-8") -> None:
        self.fs_tree = fs_tree
        self.encoding = encoding

    def collect(self) -> DirectoryRecord:
        """Read every included file and build the nested record.

        Returns:
            Mapping of top-level entry names to file records or nested directory records.

        Raises:
            ContentDecodeError: If a file is not valid text in the configured encoding.
            OSError: If a file cannot be opened or read, or the tree cannot be built.
        """
        root = self.fs_tree.get_tree()
        details: DirectoryRecord = {}
        records: Dict[FileSystemNode, DirectoryRecord] = {root: details}

        for node in self.fs_tree.walk():
            parent_record = records[node.parent]
            if node.is_dir:
                directory_record: DirectoryRecord = {}
                parent_record[node.name] = directory_record
                records[node] = directory_record
            else:
                parent_record[node.name] = self.read_file(node.abs_path)

        return details

    def read_file(self, path: str) -> FileRecord:
        """Read a single file and return its record.

        Args:
            path: Absolute path of the file.

        Returns:
            A record with the path and the normalized content.

        Raises:
            ContentDecodeError: If the file is not valid text in the configured encoding.
            OSError: If the file cannot be opened or read.
        """
        try:
            with open(path, "r", encoding=self.encoding) as f:
                text = f.read()
        except UnicodeDecodeError as e:
            raise ContentDecodeError(path, self.encoding) from e

        return {"path": path, "content": normalize_content(text)}
