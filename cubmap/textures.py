"""Reading the texture and colour header lines of a map file."""

from __future__ import annotations

from enum import Enum
from typing import Dict, List, Sequence, Tuple

from cubmap.grid import MapError


class TextureSlot(Enum):
    """The header identifiers, in the order they are matched."""

    NORTH = "NO"
    SOUTH = "SO"
    EAST = "EA"
    WEST = "WE"
    CEILING = "C"
    FLOOR = "F"

    @property
    def prefix(self) -> str:
        return self.value + " "


Textures = Dict[TextureSlot, str]

_MAP_START = frozenset("10 ")


def parse_texture_line(line: str, textures: Textures) -> bool:
    """Store the value of a header line in textures.

    Returns False when the line is not a header line. Raises MapError when
    the value is followed by anything, trailing spaces included. A repeated
    identifier replaces the earlier value.
    """
    for slot in TextureSlot:
        if line.startswith(slot.prefix):
            value = line[len(slot.prefix):].lstrip(" ")
            if " " in value:
                raise MapError("Texture format incorrect")
            textures[slot] = value
            return True
    return False


def read_textures(lines: Sequence[str]) -> Tuple[Textures, List[str]]:
    """Read header lines until the first map row.

    Returns the textures found and the remaining lines. If a header line is
    not recognised, the lines come back whole with what was read so far.
    """
    textures: Textures = {}
    count = 0
    for line in lines:
        if line[:1] in _MAP_START and line:
            break
        if not parse_texture_line(line, textures):
            return textures, list(lines)
        count += 1
    return textures, list(lines[count:])