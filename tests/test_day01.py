import pytest

from aoc2023.day01 import trebuchet_part1, trebuchet_part2


def test_part1_example():
    lines = ["1abc2", "pqr3stu8vwx", "a1b2c3d4e5f", "treb7uchet"]
    assert trebuchet_part1(lines) == 142


def test_part1_single_digit_is_doubled():
    assert trebuchet_part1(["treb7uchet"]) == 77


def test_part1_ignores_spelled_digits():
    assert trebuchet_part1(["one2three4five"]) == 24


def test_part1_line_without_digits_counts_zero():
    assert trebuchet_part1(["abc", "1x2"]) == 12


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("1", 11),
        ("12", 12),
        ("one", 11),
        ("oneone", 11),
        ("oneeight", 18),
        ("oneightwoneight", 18),
        ("two1nine", 29),
        ("eightwothree", 83),
        ("abcone2threexyz", 13),
        ("xtwone3four", 24),
        ("4nineeightseven2", 42),
        ("zoneight234", 14),
        ("7pqrstsixteen", 76),
    ],
)
def test_part2_single_lines(line, expected):
    assert trebuchet_part2([line]) == expected


def test_part2_example():
    lines = [
        "two1nine",
        "eightwothree",
        "abcone2threexyz",
        "xtwone3four",
        "4nineeightseven2",
        "zoneight234",
        "7pqrstsixteen",
    ]
    assert trebuchet_part2(lines) == 281


def test_part2_empty_input():
    assert trebuchet_part2([]) == 0