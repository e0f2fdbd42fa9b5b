"""Pipe maze: follow the loop through the start tile and count enclosed tiles."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

START = "S"


class Direction(Enum):
    """A side of a tile, given as the row and column offset towards it."""

    NORTH = (-1, 0)
    EAST = (0, 1)
    SOUTH = (1, 0)
    WEST = (0, -1)

    @property
    def opposite(self) -> Direction:
        row, col = self.value
        return Direction((-row, -col))

    def step(self, location: tuple[int, int]) -> tuple[int, int]:
        """The location of the neighbour on this side of ``location``."""
        return location[0] + self.value[0], location[1] + self.value[1]


_OPENINGS: dict[str, frozenset[Direction]] = {
    "|": frozenset({Direction.NORTH, Direction.SOUTH}),
    "-": frozenset({Direction.EAST, Direction.WEST}),
    "L": frozenset({Direction.NORTH, Direction.EAST}),
    "J": frozenset({Direction.NORTH, Direction.WEST}),
    "7": frozenset({Direction.SOUTH, Direction.WEST}),
    "F": frozenset({Direction.SOUTH, Direction.EAST}),
}

_CROSSINGS = frozenset("|7F")

_GLYPHS = {
    ".": " ",
    "|": "║",
    "-": "═",
    "L": "╚",
    "J": "╝",
    "7": "╗",
    "F": "╔",
}

_Grid = list[list[str]]
_Location = tuple[int, int]


def _grid(lines: Sequence[str]) -> _Grid:
    return [list(line) for line in lines]


def _inside(grid: _Grid, location: _Location) -> bool:
    row, col = location
    return 0 <= row < len(grid) and 0 <= col < len(grid[row])


def _pipe_at(grid: _Grid, location: _Location) -> str | None:
    if not _inside(grid, location):
        return None
    tile = grid[location[0]][location[1]]
    return tile if tile in _OPENINGS else None


def _find_start(grid: _Grid) -> _Location:
    for row, tiles in enumerate(grid):
        if START in tiles:
            return row, tiles.index(START)
    raise ValueError("no 'S' on the board")


def _connects(grid: _Grid, start: _Location, side: Direction) -> bool:
    pipe = _pipe_at(grid, side.step(start))
    return pipe is not None and side.opposite in _OPENINGS[pipe]


def _first_pipe(grid: _Grid, start: _Location) -> tuple[_Location, Direction]:
    for side in (Direction.NORTH, Direction.EAST, Direction.SOUTH, Direction.WEST):
        if _connects(grid, start, side):
            return side.step(start), side.opposite
    raise ValueError("no pipe connects to the start tile")


def _trace_loop(grid: _Grid) -> list[_Location]:
    """Locations visited from the first pipe next to the start up to the loop's end."""
    location, entry = _first_pipe(grid, _find_start(grid))
    path = [location]
    while (pipe := _pipe_at(grid, location)) is not None:
        openings = _OPENINGS[pipe]
        if entry not in openings:
            raise ValueError(f"pipe {pipe!r} at {location} cannot be entered from {entry.name}")
        (exit_side,) = openings - {entry}
        location = exit_side.step(location)
        entry = exit_side.opposite
        path.append(location)
    if not _inside(grid, location):
        raise ValueError("the pipe leads off the board")
    return path


def _start_shape(grid: _Grid, start: _Location) -> str | None:
    north = _connects(grid, start, Direction.NORTH)
    east = _connects(grid, start, Direction.EAST)
    south = _connects(grid, start, Direction.SOUTH)
    west = _connects(grid, start, Direction.WEST)
    shape = None
    if east and west:
        shape = "-"
    if west and north:
        shape = "J"
    if west and south:
        shape = "7"
    if east and north:
        shape = "L"
    if east and south:
        shape = "F"
    return shape


def _cleaned(lines: Sequence[str]) -> _Grid:
    """The board with every tile off the loop blanked and the start replaced."""
    grid = _grid(lines)
    start = _find_start(grid)
    on_loop = set(_trace_loop(grid))
    for row, tiles in enumerate(grid):
        for col, tile in enumerate(tiles):
            if (row, col) not in on_loop and tile != "I":
                tiles[col] = "."
    shape = _start_shape(grid, start)
    if shape is not None:
        grid[start[0]][start[1]] = shape
    return grid


def pipe_maze_part1(lines: Sequence[str]) -> int:
    """Number of steps to the point of the loop farthest from the start."""
    return len(_trace_loop(_grid(lines))) // 2


def pipe_maze_part2(lines: Sequence[str]) -> int:
    """Number of tiles enclosed by the loop."""
    enclosed = 0
    for tiles in _cleaned(lines):
        inside = False
        for tile in tiles:
            if tile in _CROSSINGS:
                inside = not inside
            elif inside and tile not in _OPENINGS:
                enclosed += 1
    return enclosed


def render(lines: Sequence[str]) -> str:
    """The loop drawn with box-drawing characters, one text line per row."""
    return "\n".join(
        "".join(_GLYPHS.get(tile, tile) for tile in tiles) for tiles in _cleaned(lines)
    )