"""Exclusion rules for filtering files and directories."""

from .base_rules import BaseExclusionRules
from .composite_rules import CompositeExclusionRules
from .default_rules import (
    IGNORED_DIRECTORIES,
    IGNORED_EXTENSIONS,
    IGNORED_FILENAMES,
    create_default_exclusion_rules,
)
from .name_rules import ExtensionExclusionRules, FilenameExclusionRules
from .path_rules import DirectorySegmentExclusionRules, ExactPathExclusionRules

__all__ = [
    "BaseExclusionRules",
    "CompositeExclusionRules",
    "DirectorySegmentExclusionRules",
    "ExactPathExclusionRules",
    "ExtensionExclusionRules",
    "FilenameExclusionRules",
    "IGNORED_DIRECTORIES",
    "IGNORED_EXTENSIONS",
    "IGNORED_FILENAMES",
    "create_default_exclusion_rules",
]
