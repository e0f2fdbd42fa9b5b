"""Clumsy crucible: least heat loss on a path with limits on straight runs."""

from __future__ import annotations

import heapq
from collections.abc import Sequence


def minimal_heat_loss(lines: Sequence[str], min_run: int, max_run: int) -> int:
    """Least heat lost from the top-left to the bottom-right block.

    The crucible must move at least ``min_run`` and at most ``max_run`` blocks
    in one direction before turning, and must end a run of at least
    ``min_run`` blocks on the goal.
    """
    height = len(lines)
    width = len(lines[0])
    goal = (height - 1, width - 1)
    # cost, row, col, row step, col step, length of the current straight run
    queue = [(0, 0, 0, 0, 1, 0), (0, 0, 0, 1, 0, 0)]
    settled: set[tuple[int, int, int, int, int]] = set()
    while queue:
        cost, row, col, d_row, d_col, run = heapq.heappop(queue)
        if (row, col) == goal and run >= min_run:
            return cost
        state = (row, col, d_row, d_col, run)
        if state in settled:
            continue
        settled.add(state)
        for n_row, n_col in ((d_row, d_col), (-d_col, d_row), (d_col, -d_row)):
            if (n_row, n_col) == (d_row, d_col):
                if run >= max_run:
                    continue
                next_run = run + 1
            else:
                if run < min_run:
                    continue
                next_run = 1
            r, c = row + n_row, col + n_col
            if 0 <= r < height and 0 <= c < width:
                heapq.heappush(
                    queue, (cost + int(lines[r][c]), r, c, n_row, n_col, next_run)
                )
    raise ValueError("no path reaches the bottom-right block")


def clumsy_crucible_part1(lines: Sequence[str]) -> int:
    """Least heat loss for a crucible that moves one to three blocks straight."""
    return minimal_heat_loss(lines, 1, 3)


def clumsy_crucible_part2(lines: Sequence[str]) -> int:
    """Least heat loss for an ultra crucible that moves four to ten blocks straight."""
    return minimal_heat_loss(lines, 4, 10)