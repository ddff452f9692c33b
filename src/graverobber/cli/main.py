"""Command-line interface for graverobber.

This module provides the ``graverobber`` entry point. It scans the current working
directory, writes ``report.txt`` there and reports progress on standard output.

Exit Codes:
    0: Successful completion
    1: Runtime error during execution (including undecodable files and write failures)
    2: Command-line syntax error
    126: Permission denied
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (standard output closed early)

Example:
    $ cd /path/to/project
    $ graverobber
"""

import os
import sys
from pathlib import Path
from typing import Optional, Sequence

from graverobber.cli.argparser import create_parser
from graverobber.graverobber import Graverobber

START_MESSAGE = "\N{HEADSTONE} GRAVEROBBER: The scanning ritual has begun. There is no escape... \N{COFFIN}"
SCAN_COMPLETE_MESSAGE = (
    "\N{LEFT-POINTING MAGNIFYING GLASS} GRAVEROBBER: The digging is over. "
    "{files} files exhumed from {directories} directories. Preparing the grimoire... \N{SCROLL}"
)
REPORT_WRITTEN_MESSAGE = (
    "\N{BLACK HEART} GRAVEROBBER: The plunder is complete. The dark report awaits at {report_path} \N{BLACK HEART}"
)
FAREWELL_MESSAGE = (
    "\N{SCROLL} GRAVEROBBER: The grimoire is complete. The secrets of the files are revealed. "
    "Use them wisely, or suffer the consequences... \N{SMILING FACE WITH HORNS}"
)


def get_program_path() -> str:
    """Return the absolute path of the running program.

    This is the file the interpreter was started with (the console script, or the
    module file when run with ``python -m``). It is excluded from the scan.
    """
    return os.path.abspath(sys.argv[0]) if sys.argv and sys.argv[0] else os.path.abspath(__file__)


def _silence_stdout() -> None:
    """Point stdout at the null device so shutdown does not report the broken pipe again."""
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, sys.stdout.fileno())


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main entry point for the graverobber command-line interface.

    Args:
        argv: Arguments to parse instead of ``sys.argv[1:]``.

    Exit codes:
        0: Successful completion
        1: Runtime error during execution
        2: Command-line syntax error
        126: Permission denied
        130: Interrupted by SIGINT (Ctrl+C)
        141: Broken pipe on standard output
    """
    parser = create_parser()
    parser.parse_args(argv)

    try:
        print(START_MESSAGE, flush=True)

        robber = Graverobber(Path.cwd(), program_path=get_program_path())
        robber.scan()
        print(
            SCAN_COMPLETE_MESSAGE.format(files=robber.file_count, directories=robber.directory_count),
            flush=True,
        )

        report_path = robber.write_report()
        print(REPORT_WRITTEN_MESSAGE.format(report_path=report_path), flush=True)
        print(FAREWELL_MESSAGE, flush=True)

    except KeyboardInterrupt:
        sys.exit(130)
    except BrokenPipeError:
        _silence_stdout()
        sys.exit(141)
    except PermissionError as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(126)
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
