import pytest

from aoc2023.day13 import (
    columns_equal,
    point_of_incidence_part1,
    point_of_incidence_part2,
    split_patterns,
)

TWO_PATTERNS = [
    "#.##..##.",
    "..#.##.#.",
    "##......#",
    "##......#",
    "..#.##.#.",
    "..##..##.",
    "#.#.##.#.",
    "",
    "#...##..#",
    "#....#..#",
    "..##..###",
    "#####.##.",
    "#####.##.",
    "..##..###",
    "#....#..#",
]

FOUR_PATTERNS = TWO_PATTERNS + [
    "",
    ".#.##.#.#",
    ".##..##..",
    ".#.##.#..",
    "#......##",
    "#......##",
    ".#.##.#..",
    ".##..##.#",
    "",
    "#..#....#",
    "###..##..",
    ".##.#####",
    ".##.#####",
    "###..##..",
    "#..#....#",
    "#..##...#",
]


@pytest.mark.parametrize(
    ("lines", "expected"),
    [
        (TWO_PATTERNS, 405),
        (
            [
                "##..######..#",
                "###.##..##.##",
                "###..####..##",
                "...#.#..#.#..",
                "..##.#..#.##.",
                "###.#.##.#.##",
                "##....##....#",
                "####.####.###",
                "...########..",
                "..#.#....#.#.",
                "###..####..##",
                "..##......##.",
                "###.#.##.#.##",
                "####..##..###",
                "#..#......#..",
                "...##.##.##..",
                "###.##..##.##",
            ],
            7,
        ),
        (
            [
                "###......####",
                "..##....##...",
                ".#.######.#..",
                "#.###..###.##",
                "#.##.....#.##",
                ".#.##..##.#..",
                ".##......##..",
            ],
            12,
        ),
        (FOUR_PATTERNS, 709),
        (
            [
                "###.##.##",
                "##.####.#",
                "##.#..#.#",
                "####..###",
                "....##...",
                "##.#..#.#",
                "...#..#..",
                "##..###.#",
                "##......#",
                "##......#",
                "..#.##.#.",
                "...#..#..",
                "##.####.#",
                "....##...",
                "...####..",
                "....##...",
                "##.####.#",
                "",
                ".##.##...##...##.",
                "#####..##..##..##",
                ".....##..##..##..",
                ".##.#.#.####.#.#.",
                ".##...#.#..#.#...",
                "....#..........#.",
                "#..#..#......#..#",
                "....###.....####.",
                ".##...#.#..#.#...",
                ".....#..####..#..",
                "#..#...##..##...#",
                "....#...#..#...#.",
                "#..#.##########.#",
                "#..##...####...##",
                "#####.##.##.##.##",
            ],
            3,
        ),
    ],
)
def test_part1(lines, expected):
    assert point_of_incidence_part1(lines) == expected


@pytest.mark.parametrize(
    ("lines", "expected"),
    [
        (FOUR_PATTERNS, 1400),
        (TWO_PATTERNS, 400),
    ],
)
def test_part2(lines, expected):
    assert point_of_incidence_part2(lines) == expected


COLUMN_PATTERN = [
    "#.##..##.",
    "..#.##.#.",
    "##..#...#",
    "##...#..#",
    "..#.##.#.",
    "..##..##.",
    "#.#.##.#.",
]


@pytest.mark.parametrize(("first", "second"), [(0, 1), (1, 2)])
def test_columns_not_equal(first, second):
    assert columns_equal(COLUMN_PATTERN, first, second) is False


def test_columns_equal_to_themselves():
    assert columns_equal(COLUMN_PATTERN, 3, 3) is True


def test_split_patterns_separates_on_blank_lines():
    patterns = list(split_patterns(TWO_PATTERNS))
    assert len(patterns) == 2
    assert patterns[0] == TWO_PATTERNS[:7]
    assert patterns[1] == TWO_PATTERNS[8:]