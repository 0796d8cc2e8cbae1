"""Checks on map file names and on the rows of a map grid."""

from __future__ import annotations

from typing import Sequence

MAP_SUFFIX = ".cub"


class MapError(Exception):
    """Raised when a map file or its contents are invalid."""


def check_file_format(name: str) -> str:
    """Accept a file name whose text from its first '.' on is exactly '.cub'.

    Returns the name; raises MapError otherwise.
    """
    dot = name.find(".")
    rest = name[dot:] if dot != -1 else ""
    if rest != MAP_SUFFIX:
        raise MapError("Map file is not a .cub")
    return name


def is_all_space_n_ones(line: str) -> bool:
    """True when line holds nothing but walls and spaces."""
    return all(ch in "1 " for ch in line)


def missing_side_wall(line: str) -> bool:
    """True when the first run of non-space cells does not start and end with a wall."""
    stripped = line.lstrip(" ")
    if not stripped.startswith("1"):
        return True
    run = stripped.split(" ", 1)[0]
    return not run.endswith("1")


def _cell(grid: Sequence[str], x: int, y: int) -> str:
    if 0 <= y < len(grid) and 0 <= x < len(grid[y]):
        return grid[y][x]
    return ""


def leaks_at(grid: Sequence[str], x: int, y: int) -> bool:
    """True when the cell at (x, y) is a space touching an open floor cell."""
    if grid[y][x] != " ":
        return False
    neighbours = (
        _cell(grid, x, y - 1) if y > 0 else "",
        _cell(grid, x, y + 1),
        _cell(grid, x - 1, y) if x > 0 else "",
        _cell(grid, x + 1, y),
    )
    return "0" in neighbours