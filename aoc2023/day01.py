"""Trebuchet calibration: recover two-digit values from noisy lines."""

from __future__ import annotations

from collections.abc import Iterable

_SPELLED = {
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
}


def _digit_at(line: str, index: int) -> int | None:
    char = line[index]
    return int(char) if "0" <= char <= "9" else None


def _first(line: str, *, spelled: bool) -> int:
    for index in range(len(line)):
        digit = _digit_at(line, index)
        if digit is not None:
            return digit
        if spelled:
            for word, value in _SPELLED.items():
                if line.startswith(word, index):
                    return value
    return 0


def _last(line: str, *, spelled: bool) -> int:
    for index in reversed(range(len(line))):
        digit = _digit_at(line, index)
        if digit is not None:
            return digit
        if spelled:
            head = line[: index + 1]
            for word, value in _SPELLED.items():
                if head.endswith(word):
                    return value
    return 0


def _calibration(lines: Iterable[str], *, spelled: bool) -> int:
    return sum(
        _first(line, spelled=spelled) * 10 + _last(line, spelled=spelled)
        for line in lines
    )


def trebuchet_part1(lines: Iterable[str]) -> int:
    """Sum of values made of the first and last numeric digit of each line."""
    return _calibration(lines, spelled=False)


def trebuchet_part2(lines: Iterable[str]) -> int:
    """Like part 1, but digits spelled out in English count as well."""
    return _calibration(lines, spelled=True)