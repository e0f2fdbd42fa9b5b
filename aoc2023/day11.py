"""Cosmic expansion: galaxy distances in a universe whose empty lines grow."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Sequence
from itertools import combinations

EMPTY = "."
GALAXY = "#"


def _galaxies(lines: Sequence[str]) -> list[tuple[int, int]]:
    return [
        (row, col)
        for row, line in enumerate(lines)
        for col, tile in enumerate(line)
        if tile == GALAXY
    ]


def _empty_rows(lines: Sequence[str]) -> list[int]:
    return [row for row, line in enumerate(lines) if all(tile == EMPTY for tile in line)]


def _empty_columns(lines: Sequence[str]) -> list[int]:
    return [
        col
        for col in range(len(lines[0]))
        if all(line[col] == EMPTY for line in lines)
    ]


def expanded_distance_sum(lines: Sequence[str], factor: int) -> int:
    """Sum of shortest paths between all galaxy pairs, each empty line ``factor`` wide."""
    if not lines:
        return 0
    empty_rows = _empty_rows(lines)
    empty_cols = _empty_columns(lines)
    growth = factor - 1
    positions = [
        (
            row + growth * bisect_left(empty_rows, row),
            col + growth * bisect_left(empty_cols, col),
        )
        for row, col in _galaxies(lines)
    ]
    return sum(
        abs(r1 - r2) + abs(c1 - c2)
        for (r1, c1), (r2, c2) in combinations(positions, 2)
    )


def cosmic_expansion_part1(lines: Sequence[str]) -> int:
    """Distance sum when every empty row and column doubles."""
    return expanded_distance_sum(lines, 2)


def cosmic_expansion_part2(lines: Sequence[str]) -> int:
    """Distance sum when every empty row and column grows a million times."""
    return expanded_distance_sum(lines, 1_000_000)