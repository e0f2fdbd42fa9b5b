"""The floor will be lava: trace light beams through mirrors and splitters."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum


class Heading(Enum):
    """The direction a beam travels, as a row and column step."""

    NORTH = (-1, 0)
    EAST = (0, 1)
    SOUTH = (1, 0)
    WEST = (0, -1)


def _next_headings(tile: str, heading: Heading) -> tuple[Heading, ...]:
    d_row, d_col = heading.value
    if tile == "\\":
        return (Heading((d_col, d_row)),)
    if tile == "/":
        return (Heading((-d_col, -d_row)),)
    if tile == "|" and d_row == 0:
        return (Heading.NORTH, Heading.SOUTH)
    if tile == "-" and d_col == 0:
        return (Heading.WEST, Heading.EAST)
    if tile in ".|-":
        return (heading,)
    return ()


def energized(lines: Sequence[str], row: int, col: int, heading: Heading) -> int:
    """Number of tiles lit by a beam entering at ``(row, col)`` travelling ``heading``."""
    seen: set[tuple[int, int, Heading]] = set()
    lit: set[tuple[int, int]] = set()
    pending = [(row, col, heading)]
    while pending:
        state = pending.pop()
        r, c, h = state
        if r < 0 or c < 0 or r >= len(lines) or c >= len(lines[r]) or state in seen:
            continue
        seen.add(state)
        lit.add((r, c))
        for nxt in _next_headings(lines[r][c], h):
            pending.append((r + nxt.value[0], c + nxt.value[1], nxt))
    return len(lit)


def floor_will_be_lava_part1(lines: Sequence[str]) -> int:
    """Tiles energized by a beam entering the top-left corner heading east."""
    return energized(lines, 0, 0, Heading.EAST)


def floor_will_be_lava_part2(lines: Sequence[str]) -> int:
    """Most tiles energized by a beam entering from any edge tile."""
    height = len(lines)
    width = len(lines[0])
    starts = [
        start
        for r in range(height)
        for start in ((r, 0, Heading.EAST), (r, width - 1, Heading.WEST))
    ] + [
        start
        for c in range(width)
        for start in ((0, c, Heading.SOUTH), (height - 1, c, Heading.NORTH))
    ]
    return max(energized(lines, *start) for start in starts)