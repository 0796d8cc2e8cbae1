"""Command-line entry point: validate a map file and print its grid."""

from __future__ import annotations

import sys
from typing import List, Optional, Sequence

from cubmap.grid import MapError, check_file_format
from cubmap.mapfile import load_map

_RED = "\x1b[38;5;196m"
_RESET = "\033[0m"


def check_arguments(argv: Sequence[str]) -> Optional[str]:
    """An error message for bad command-line arguments, or None when they are fine."""
    if len(argv) != 1:
        return "Error : Wrong number of arguments"
    if not argv[0].endswith(".cub"):
        return "Error : File map is not .cub"
    return None


def main(argv: Optional[List[str]] = None) -> int:
    """Check the map file named on the command line and print its rows."""
    args = sys.argv[1:] if argv is None else list(argv)
    problem = check_arguments(args)
    if problem is not None:
        print(f"{_RED}[{problem}]{_RESET}")
    if len(args) != 1:
        return 1
    try:
        check_file_format(args[0])
        parsed = load_map(args[0])
    except MapError as error:
        print(f"Error\n{error}")
        return 1
    for row in parsed.grid:
        print(row)
    return 0


if __name__ == "__main__":
    sys.exit(main())