"""File system tree representation filtered by exclusion rules.

This module provides classes for building an in-memory tree of a directory
structure, skipping excluded entries, and rendering it as indented text.
"""

from .file_system_node import FileSystemNode
from .file_system_tree import DIRECTORY_GLYPH, FILE_GLYPH, INDENT, FileSystemTree

__all__ = ["DIRECTORY_GLYPH", "FILE_GLYPH", "INDENT", "FileSystemNode", "FileSystemTree"]
