"""The fixed exclusion policy applied to every scan."""

from graverobber.types import PathType

from .composite_rules import CompositeExclusionRules
from .name_rules import ExtensionExclusionRules, FilenameExclusionRules
from .path_rules import DirectorySegmentExclusionRules, ExactPathExclusionRules

# Binary, image, audio and video formats, lockfiles, SQLite databases and Markdown
IGNORED_EXTENSIONS = (
    ".bin",
    ".svg",
    ".jpg",
    ".jpeg",
    ".png",
    ".gif",
    ".mp3",
    ".mp4",
    ".wav",
    ".ico",
    ".sqlite",
    ".lock",
    ".md",
)

# Version-control internals, build output, static assets and dependency trees
IGNORED_DIRECTORIES = (
    ".git",
    "public",
    "target",
    "assets",
    ".next",
    "node_modules",
)

IGNORED_FILENAMES = ("yarn.lock",)


def create_default_exclusion_rules(program_path: PathType, *output_paths: PathType) -> CompositeExclusionRules:
    """Build the exclusion policy used by a scan.

    Args:
        program_path: Path of the running program. It is never scanned or reported.
        *output_paths: Files the scan itself produces, such as the report and its
            temporary file. Copies left over from a previous run are skipped too, so
            repeated runs see the same tree.

    Returns:
        An immutable composite of the self-reference, extension, directory-segment and
        exact-filename rules.

    Example:
        >>> rules = create_default_exclusion_rules(
        ...     "/project/graverobber.py", "/project/report.txt", "/project/report.txt.tmp"
        ... )
        >>> rules.exclude("/project/graverobber.py")
        True
        >>> rules.exclude("/project/report.txt")
        True
        >>> rules.exclude("/project/.git")  # doctest: +SKIP
        True
        >>> rules.exclude("/project/src/main.rs")
        False
    """
    own_paths = [program_path, *output_paths]
    return CompositeExclusionRules(
        [
            ExactPathExclusionRules(own_paths),
            ExtensionExclusionRules(IGNORED_EXTENSIONS),
            DirectorySegmentExclusionRules(IGNORED_DIRECTORIES),
            FilenameExclusionRules(IGNORED_FILENAMES),
        ]
    )
