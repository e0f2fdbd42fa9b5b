"""Cube conundrum: validate cube draws and compute minimal set powers."""

from __future__ import annotations

import os
import re
from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor

_LIMITS = {"red": 12, "green": 13, "blue": 14}
_COLOURS = ("red", "green", "blue")
_SEPARATORS = re.compile(r"[;,]")


def _parse_game(line: str) -> tuple[int, list[tuple[int, str]]]:
    header, _, body = line.partition(":")
    game_id = int(header[5:])
    draws = []
    for chunk in _SEPARATORS.split(body):
        count, colour = chunk.split()
        draws.append((int(count), colour))
    return game_id, draws


def _possible_id(line: str) -> int:
    game_id, draws = _parse_game(line)
    if all(count <= _LIMITS.get(colour, count) for count, colour in draws):
        return game_id
    return 0


def _power(line: str) -> int:
    _, draws = _parse_game(line)
    power = 1
    for colour in _COLOURS:
        power *= max((count for count, name in draws if name == colour), default=-1)
    return power


def cube_conundrum_part1(lines: Sequence[str]) -> int:
    """Sum of ids of the games possible with 12 red, 13 green and 14 blue cubes."""
    return sum(_possible_id(line) for line in lines)


def cube_conundrum_part2(lines: Sequence[str]) -> int:
    """Sum of the powers of the minimal cube sets of every game."""
    return sum(_power(line) for line in lines)


def _in_parallel(
    lines: Sequence[str], workers: int | None, score: Callable[[str], int]
) -> int:
    if workers is None:
        workers = os.cpu_count() or 1
    if workers < 1:
        raise ValueError("workers must be at least 1")
    workers = min(workers, len(lines))
    if workers == 0:
        return 0
    chunks = [lines[start::workers] for start in range(workers)]
    with ThreadPoolExecutor(max_workers=workers) as pool:
        return sum(pool.map(lambda chunk: sum(map(score, chunk)), chunks))


def cube_conundrum_part1_parallel(lines: Sequence[str], workers: int | None = None) -> int:
    """Part 1 computed by several workers over interleaved slices of the input."""
    return _in_parallel(lines, workers, _possible_id)


def cube_conundrum_part2_parallel(lines: Sequence[str], workers: int | None = None) -> int:
    """Part 2 computed by several workers over interleaved slices of the input."""
    return _in_parallel(lines, workers, _power)