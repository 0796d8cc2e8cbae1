"""Loading a map file and checking its grid of rows."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import List, Sequence, Union

from cubmap.grid import MapError, is_all_space_n_ones, leaks_at, missing_side_wall
from cubmap.strutil import split
from cubmap.textures import Textures, read_textures

_VALID_CELLS = frozenset("01NSWE ")
_PLAYER_CELLS = frozenset("NSWE")


@dataclass(frozen=True)
class Point:
    """A position on the map grid."""

    x: float
    y: float


@dataclass
class CubMap:
    """A parsed map: its header values, its grid rows and the player's start."""

    grid: List[str]
    textures: Textures = field(default_factory=dict)
    player: Point = Point(-1.0, -1.0)


def check_map(grid: Sequence[str]) -> Point:
    """Validate the rows of a map grid and return the player's starting cell.

    Raises MapError on the first problem found.
    """
    if not grid:
        raise MapError("Map is empty")
    if not is_all_space_n_ones(grid[0]):
        raise MapError("Missing outside wall (top)")
    players: List[Point] = []
    for y, row in enumerate(grid[1:], start=1):
        if missing_side_wall(row):
            raise MapError("Missing outside wall (vertical)")
        for x, cell in enumerate(row):
            if cell not in _VALID_CELLS:
                raise MapError("Map char unvalid")
            if cell in _PLAYER_CELLS:
                players.append(Point(float(x), float(y)))
            if leaks_at(grid, x, y):
                raise MapError("Missing outside wall")
    if not is_all_space_n_ones(grid[-1]):
        raise MapError("Missing outside wall (bottom)")
    if len(players) != 1:
        raise MapError("Incorrect number of player starting point")
    return players[-1]


def parse_map(text: str) -> CubMap:
    """Parse the full text of a map file.

    Blank lines are ignored. The header lines come first, then the grid.
    """
    lines = split(text, "\n")
    if not lines:
        raise MapError("Map file is empty")
    textures, grid = read_textures(lines)
    player = check_map(grid)
    return CubMap(grid=grid, textures=textures, player=player)


def load_map(path: Union[str, "os.PathLike[str]"]) -> CubMap:
    """Read and parse the map file at path."""
    try:
        with open(path, encoding="utf-8") as handle:
            text = handle.read()
    except (OSError, UnicodeDecodeError) as error:
        raise MapError(f"Cannot read map file: {error}") from error
    return parse_map(text)