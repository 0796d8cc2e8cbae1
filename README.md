# cubmap

Reads and validates `.cub` map files. A `.cub` file is a small text format
that describes a grid-based level for a raycasting game. It holds the level's
wall textures, its floor and ceiling colours, and the map grid.

## The format

A `.cub` file starts with header lines. Each one is an identifier, a space,
and a single value with no spaces in it:

```
NO ./textures/north.xpm
SO ./textures/south.xpm
EA ./textures/east.xpm
WE ./textures/west.xpm
C 40,40,40
F 120,80,20
```

The header ends at the first line that starts with `1`, `0` or a space.
The map grid follows. Blank lines anywhere in the file are ignored.

The grid may contain only these characters:

- `1`: a wall
- `0`: empty floor
- `N`, `S`, `E`, `W`: the player's starting point
- space: outside the map

A grid is valid when all of these hold:

- The first row and the last row contain only walls and spaces.
- In every row after the first, the first run of non-space cells starts
  with a wall and ends with a wall.
- No space cell touches a `0` above it, below it, or to either side.
- There is exactly one starting point.

## Command line

```
cubmap path/to/level.cub
```

The command takes exactly one argument. The file name must end in `.cub`,
and the part of the name from its first `.` onwards must be exactly `.cub`.

If the map is valid, the command prints the grid rows and exits with
status 0. If it is not valid, the command prints `Error` and then the
reason on the next line, and exits with status 1. If the wrong number of
arguments is given, it prints a red `[Error : Wrong number of arguments]`
and exits with status 1.

## Library

```python
from cubmap.mapfile import load_map, parse_map

level = load_map("level.cub")
print(level.player)             # Point(x=..., y=...)
print(level.textures)           # {TextureSlot.NORTH: "./textures/north.xpm", ...}
for row in level.grid:
    print(row)
```

Modules and what they provide:

- `cubmap.mapfile`: `load_map(path)` reads and parses a file.
  `parse_map(text)` parses the text of a file. Both return a `CubMap`,
  which has the fields `grid`, `textures` and `player`. `check_map(grid)`
  validates a list of rows and returns the starting `Point`.
- `cubmap.textures`: `TextureSlot` is an enum with the members `NORTH`,
  `SOUTH`, `EAST`, `WEST`, `CEILING` and `FLOOR`. `parse_texture_line(line,
  textures)` reads one header line. `read_textures(lines)` splits the header
  from the grid.
- `cubmap.grid`: `MapError` is raised for every invalid file or map. This
  module also has the row checks `check_file_format`, `is_all_space_n_ones`,
  `missing_side_wall` and `leaks_at`.
- `cubmap.cli`: `main(argv=None)` runs the command, and
  `check_arguments(argv)` checks its arguments.

The package also includes some general helpers:

- `cubmap.strutil`: string functions such as `split`, `substr`, `strtrim`,
  `atoi` and `itoa`.
- `cubmap.charclass`: ASCII classification, such as `is_alpha` and
  `is_digit`, and the case converters `to_upper` and `to_lower`.
- `cubmap.memory`: byte-buffer operations on `bytearray`, such as `memset`,
  `memmove` and `calloc`.
- `cubmap.linkedlist`: `LinkedList` and `Node`.
- `cubmap.output`: `printf` and the writers `put_char`, `put_str`,
  `put_endl` and `put_nbr`, which all write to a text stream.
- `cubmap.linereader`: `LineReader`, which reads a stream one line at a time.

## What it does not do

- It does not render, raycast, open a window or handle keyboard input.
- The header values are stored as text. Texture paths are not checked to
  exist, and colour values are not parsed.
- A file can be accepted even if it is missing some header lines.

## Tests

```
pip install -e .[test]
pytest
```