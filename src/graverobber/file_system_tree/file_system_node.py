"""Node representation for file system elements in the tree."""

from typing import Any, Optional

from anytree import Node


class FileSystemNode(Node):  # type: ignore
    """Node class representing a file or directory in the filesystem tree.

    Extends anytree.Node with the absolute path of the entry and a flag telling
    directories from files. Children are kept in the order they were attached, which
    is the order the directory listing returned them in.

    Attributes:
        name (str): The name of the file or directory (just the basename).
        parent (Optional[FileSystemNode]): The parent node in the tree.
        abs_path (str): Absolute path of the entry. Stored apart from anytree's read-only
            ``path`` property, which is the tuple of ancestor nodes.
        is_dir (bool): True if this node represents a directory, False for files.
        children (tuple[FileSystemNode]): The child nodes (inherited from anytree.Node).

    Example:
        >>> root = FileSystemNode("project", abs_path="/project", is_dir=True)
        >>> child = FileSystemNode("main.py", parent=root, abs_path="/project/main.py")
        >>> child.abs_path
        '/project/main.py'
        >>> child.is_dir
        False
    """

    def __init__(
        self,
        name: str,
        parent: Optional["FileSystemNode"] = None,
        abs_path: str = "",
        is_dir: bool = False,
        **kwargs: Any,
    ) -> None:
        """Initialize a FileSystemNode.

        Args:
            name: The name of the file or directory.
            parent: The parent node. Defaults to None.
            abs_path: The absolute path of the entry. Defaults to an empty string.
            is_dir: Whether this node represents a directory. Defaults to False.
            **kwargs: Additional arguments passed to anytree.Node.
        """
        super().__init__(name, parent, **kwargs)
        self.abs_path = abs_path
        self.is_dir = is_dir
