import pytest

from aoc2023.day15 import holiday_hash, lens_library_part1, lens_library_part2

SEQUENCE = "rn=1,cm-,qp=3,cm=2,qp-,pc=4,ot=9,ab=5,pc-,pc=6,ot=7"


@pytest.mark.parametrize(
    ("step", "expected"),
    [
        ("rn=1", 30),
        ("cm-", 253),
        ("qp=3", 97),
        ("cm=2", 47),
        ("qp-", 14),
        ("pc=4", 180),
        ("ot=9", 9),
        ("ab=5", 197),
        ("pc-", 48),
        ("pc=6", 214),
        ("ot=7", 231),
        (SEQUENCE, 1320),
    ],
)
def test_part1(step, expected):
    assert lens_library_part1([step]) == expected


@pytest.mark.parametrize(
    ("sequence", "expected"),
    [
        ("rn=1,rn-", 0),
        (SEQUENCE, 145),
    ],
)
def test_part2(sequence, expected):
    assert lens_library_part2([sequence]) == expected


def test_hash_of_word():
    assert holiday_hash("HASH") == 52


def test_hash_of_empty_text():
    assert holiday_hash("") == 0


def test_hash_of_labels_selects_boxes():
    assert holiday_hash("rn") == 0
    assert holiday_hash("qp") == 1


def test_reassignment_keeps_slot():
    # both labels hash to box 0; replacing rn keeps it in the first slot
    assert lens_library_part2(["rn=1,cm=2,rn=5"]) == 1 * 1 * 5 + 1 * 2 * 2


def test_step_without_operation_is_rejected():
    with pytest.raises(ValueError):
        lens_library_part2(["rn"])