import pytest

from aoc2023.day02 import (
    cube_conundrum_part1,
    cube_conundrum_part1_parallel,
    cube_conundrum_part2,
    cube_conundrum_part2_parallel,
)

GAMES = [
    "Game 1: 3 blue, 4 red; 1 red, 2 green, 6 blue; 2 green",
    "Game 2: 1 blue, 2 green; 3 green, 4 blue, 1 red; 1 green, 1 blue",
    "Game 3: 8 green, 6 blue, 20 red; 5 blue, 4 red, 13 green; 5 green, 1 red",
    "Game 4: 1 green, 3 red, 6 blue; 3 green, 6 red; 3 green, 15 blue, 14 red",
    "Game 5: 6 red, 1 blue, 3 green; 2 blue, 1 red, 2 green",
]

PART1_SINGLE = list(zip(GAMES, [1, 2, 0, 0, 5]))
PART2_SINGLE = list(zip(GAMES, [48, 12, 1560, 630, 36]))


@pytest.mark.parametrize(("line", "expected"), PART1_SINGLE)
def test_part1_single_games(line, expected):
    assert cube_conundrum_part1([line]) == expected


def test_part1_example():
    assert cube_conundrum_part1(GAMES) == 8


@pytest.mark.parametrize(("line", "expected"), PART1_SINGLE)
def test_part1_parallel_single_games(line, expected):
    assert cube_conundrum_part1_parallel([line]) == expected


@pytest.mark.parametrize("workers", [1, 2, 3, 8])
def test_part1_parallel_example(workers):
    assert cube_conundrum_part1_parallel(GAMES, workers) == 8


@pytest.mark.parametrize(("line", "expected"), PART2_SINGLE)
def test_part2_single_games(line, expected):
    assert cube_conundrum_part2([line]) == expected


def test_part2_example():
    assert cube_conundrum_part2(GAMES) == 2286


@pytest.mark.parametrize(("line", "expected"), PART2_SINGLE)
def test_part2_parallel_single_games(line, expected):
    assert cube_conundrum_part2_parallel([line]) == expected


@pytest.mark.parametrize("workers", [1, 2, 4, 16])
def test_part2_parallel_example(workers):
    assert cube_conundrum_part2_parallel(GAMES, workers) == 2286


def test_multi_digit_game_id():
    assert cube_conundrum_part1(["Game 42: 12 red, 13 green, 14 blue"]) == 42


def test_parallel_empty_input():
    assert cube_conundrum_part1_parallel([], 4) == 0
    assert cube_conundrum_part2_parallel([], 4) == 0


def test_parallel_rejects_zero_workers():
    with pytest.raises(ValueError):
        cube_conundrum_part1_parallel(GAMES, 0)