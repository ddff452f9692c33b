"""Command-line argument parsing for graverobber.

The scan has no tunable policy, so the parser only provides help and version
information. Parsing still rejects unexpected arguments with argparse's usual
error message and exit code 2.
"""

import argparse

from graverobber import __version__


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with graverobber's options.
    """
    description = """
    graverobber: dig up every text file in a project and bury it in one report.

    The current working directory is walked recursively. Binary and media files,
    lockfiles, SQLite databases, Markdown files and the directories .git, public,
    target, assets, .next and node_modules are skipped, as are graverobber itself
    and any report from a previous run.

    The result is written to report.txt in the current working directory. It holds
    an indented tree of the included files and directories followed by a JSON
    document mapping each file to its absolute path and its content with every
    whitespace character removed.
    """

    epilog = """
    Examples:
      # Scan the current project and write ./report.txt
      cd /path/to/project && graverobber

      # Display version information and exit
      graverobber -V
      graverobber --version

    Exit codes:
      0    report written
      1    scan or write failed
      2    command-line syntax error
      126  permission denied while scanning
      130  interrupted (Ctrl+C)
      141  broken pipe on standard output
    """

    parser = argparse.ArgumentParser(
        prog="graverobber",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"graverobber {__version__}", help="Show the version and exit"
    )

    return parser
