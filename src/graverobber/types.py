from os import PathLike
from typing import Dict, TypedDict, Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class FileRecord(TypedDict):
    """Captured state of a single file.

    Attributes:
        path: Absolute path of the file as it was visited.
        content: The file's text with every whitespace character removed.
    """

    path: str
    content: str


# Nested mapping from entry name to either a file record or another directory record.
# Keys keep directory-listing order.
DirectoryRecord = Dict[str, Union[FileRecord, "DirectoryRecord"]]
