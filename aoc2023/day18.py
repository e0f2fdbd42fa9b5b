"""Lavaduct lagoon: area of a lagoon dug along a plan of straight trenches."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

_STEPS = {
    "U": (-1, 0),
    "D": (1, 0),
    "L": (0, -1),
    "R": (0, 1),
}

_HEX_DIRECTIONS = "RDLU"


def shoelace(points: Sequence[tuple[int, int]]) -> int:
    """Area of the polygon with the given vertices, by the shoelace formula."""
    total = 0
    last = points[-1]
    for point in points:
        total += point[0] * last[1] - point[1] * last[0]
        last = point
    return abs(total) // 2


def _lagoon(moves: Iterable[tuple[str, int]]) -> int:
    row = col = 0
    points = [(row, col)]
    perimeter = 0
    for direction, meters in moves:
        try:
            d_row, d_col = _STEPS[direction]
        except KeyError:
            raise ValueError(f"unknown direction {direction!r}") from None
        row += d_row * meters
        col += d_col * meters
        perimeter += meters
        points.append((row, col))
    return shoelace(points) + perimeter // 2 + 1


def _plain_moves(lines: Iterable[str]) -> Iterable[tuple[str, int]]:
    for line in lines:
        direction, meters, _ = line.split()
        yield direction[0], int(meters)


def _colour_moves(lines: Iterable[str]) -> Iterable[tuple[str, int]]:
    for line in lines:
        colour = line.split()[2][1:-1]
        code = colour[-1]
        if code not in "0123":
            raise ValueError(f"unknown direction {code!r}")
        yield _HEX_DIRECTIONS[int(code)], int(colour[1:-1], 16)


def lavaduct_lagoon_part1(lines: Iterable[str]) -> int:
    """Cubic meters of lava the lagoon holds, following the plain plan."""
    return _lagoon(_plain_moves(lines))


def lavaduct_lagoon_part2(lines: Iterable[str]) -> int:
    """Cubic meters of lava the lagoon holds, following the plan hidden in the colours."""
    return _lagoon(_colour_moves(lines))