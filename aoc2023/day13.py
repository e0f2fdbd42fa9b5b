"""Point of incidence: find mirror lines in patterns of ash and rocks."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sequence

Pattern = Sequence[str]


def split_patterns(lines: Iterable[str]) -> Iterator[list[str]]:
    """Yield the patterns of the input, which are separated by blank lines."""
    current: list[str] = []
    for line in lines:
        if line:
            current.append(line)
        elif current:
            yield current
            current = []
    if current:
        yield current


def columns_equal(pattern: Pattern, first: int, second: int) -> bool:
    """Whether columns ``first`` and ``second`` of ``pattern`` are identical."""
    return all(row[first] == row[second] for row in pattern)


def _differences(a: str, b: str) -> int:
    return sum(x != y for x, y in zip(a, b))


def _reflection(rows: Sequence[str], smudges: int) -> int | None:
    """Number of rows above the first mirror line with exactly ``smudges`` flaws."""
    for split in range(1, len(rows)):
        above = reversed(rows[:split])
        below = rows[split:]
        if sum(_differences(a, b) for a, b in zip(above, below)) == smudges:
            return split
    return None


def _transposed(pattern: Pattern) -> list[str]:
    return ["".join(column) for column in zip(*pattern)]


def _summarize(lines: Iterable[str], smudges: int) -> int:
    total = 0
    for pattern in split_patterns(lines):
        rows = _reflection(pattern, smudges)
        if rows is not None:
            total += rows * 100
        columns = _reflection(_transposed(pattern), smudges)
        if columns is not None:
            total += columns
    return total


def point_of_incidence_part1(lines: Iterable[str]) -> int:
    """Summary of the perfect mirror lines of every pattern."""
    return _summarize(lines, 0)


def point_of_incidence_part2(lines: Iterable[str]) -> int:
    """Summary of the mirror lines that need exactly one smudge fixed."""
    return _summarize(lines, 1)


Summarizer = Callable[[Iterable[str]], int]