"""Parabolic reflector dish: roll rounded rocks and measure the load on the beams."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

CUBE_ROCK = "#"
ROUND_ROCK = "O"
EMPTY = "."

CYCLES = 1_000_000_000

Grid = list[list[str]]


class Direction(Enum):
    """The direction in which the platform is tilted."""

    NORTH = "north"
    WEST = "west"
    SOUTH = "south"
    EAST = "east"


def column_load(rocks: int, start_row: int) -> int:
    """Load of ``rocks`` rounded rocks stacked from a row whose load is ``start_row``."""
    first = start_row - rocks + 1
    return (first + start_row) * rocks // 2


def total_load(grid: Sequence[Sequence[str]]) -> int:
    """Load on the north support beams: each rock counts its distance to the south edge."""
    height = len(grid)
    return sum(
        height - row
        for row, tiles in enumerate(grid)
        for tile in tiles
        if tile == ROUND_ROCK
    )


def _roll(line: str, toward_start: bool) -> str:
    segments = []
    for segment in line.split(CUBE_ROCK):
        rocks = segment.count(ROUND_ROCK)
        spaces = len(segment) - rocks
        if toward_start:
            segments.append(ROUND_ROCK * rocks + EMPTY * spaces)
        else:
            segments.append(EMPTY * spaces + ROUND_ROCK * rocks)
    return CUBE_ROCK.join(segments)


def _transposed(rows: Sequence[str]) -> list[str]:
    return ["".join(column) for column in zip(*rows)]


def tilt(direction: Direction, grid: Sequence[Sequence[str]]) -> Grid:
    """A new grid with every rounded rock rolled as far as it goes in ``direction``."""
    rows = ["".join(tiles) for tiles in grid]
    toward_start = direction in (Direction.NORTH, Direction.WEST)
    if direction in (Direction.NORTH, Direction.SOUTH):
        columns = [_roll(column, toward_start) for column in _transposed(rows)]
        rows = _transposed(columns)
    else:
        rows = [_roll(row, toward_start) for row in rows]
    return [list(row) for row in rows]


def tilt_cycle(grid: Sequence[Sequence[str]]) -> Grid:
    """The grid after one spin cycle: north, west, south and east in turn."""
    result = tilt(Direction.NORTH, grid)
    for direction in (Direction.WEST, Direction.SOUTH, Direction.EAST):
        result = tilt(direction, result)
    return result


def parabolic_reflector_dish_part1(lines: Sequence[str]) -> int:
    """Total load after tilting the platform north."""
    height = len(lines)
    total = 0
    for col in range(len(lines[0])):
        rocks = 0
        last_cube = -1
        for row, line in enumerate(lines):
            tile = line[col]
            if tile == CUBE_ROCK:
                total += column_load(rocks, height - last_cube - 1)
                last_cube = row
                rocks = 0
            elif tile == ROUND_ROCK:
                rocks += 1
        total += column_load(rocks, height - last_cube - 1)
    return total


def _key(grid: Grid) -> tuple[str, ...]:
    return tuple("".join(tiles) for tiles in grid)


def parabolic_reflector_dish_part2(lines: Sequence[str]) -> int:
    """Total load after a billion spin cycles, found by detecting the repetition."""
    grid: Grid = [list(line) for line in lines]
    seen = {_key(grid): 0}
    for iteration in range(1, CYCLES):
        grid = tilt_cycle(grid)
        key = _key(grid)
        if key in seen:
            length = iteration - seen[key]
            for _ in range((CYCLES - iteration) % length):
                grid = tilt_cycle(grid)
            return total_load(grid)
        seen[key] = iteration
    return total_load(grid)