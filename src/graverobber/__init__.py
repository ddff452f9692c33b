"""Directory scanning and flattening utilities.

This package walks a project directory, skips binary assets, lockfiles, build
artifacts and version-control internals, and writes a single report holding an
indented file tree plus the whitespace-normalized contents of every remaining file.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("graverobber")
except PackageNotFoundError:
    __version__ = "unknown"
