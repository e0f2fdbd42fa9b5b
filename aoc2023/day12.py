"""Hot springs: count the spring arrangements that match damaged-group records."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from functools import lru_cache

DAMAGED = "#"
OPERATIONAL = "."
UNKNOWN = "?"

_FOLDS = 5


def count_arrangements(record: str, groups: Sequence[int]) -> int:
    """Number of ways the unknown springs in ``record`` can yield ``groups``."""
    sizes = tuple(groups)
    length = len(record)

    @lru_cache(maxsize=None)
    def count(position: int, group: int) -> int:
        if position >= length:
            return 1 if group == len(sizes) else 0
        tile = record[position]
        total = 0
        if tile in (OPERATIONAL, UNKNOWN):
            total += count(position + 1, group)
        if tile in (DAMAGED, UNKNOWN) and group < len(sizes):
            end = position + sizes[group]
            if (
                end <= length
                and OPERATIONAL not in record[position:end]
                and (end == length or record[end] != DAMAGED)
            ):
                total += count(end + 1, group + 1)
        return total

    return count(0, 0)


def _parse(line: str) -> tuple[str, list[int]]:
    record, numbers = line.split()
    return record, [int(number) for number in numbers.split(",")]


def _unfold(record: str, groups: list[int]) -> tuple[str, list[int]]:
    return UNKNOWN.join([record] * _FOLDS), groups * _FOLDS


def hot_springs_part1(lines: Iterable[str]) -> int:
    """Sum of arrangement counts of every record."""
    return sum(count_arrangements(*_parse(line)) for line in lines)


def hot_springs_part2(lines: Iterable[str]) -> int:
    """Sum of arrangement counts after unfolding every record five times."""
    return sum(count_arrangements(*_unfold(*_parse(line))) for line in lines)