"""Lens library: the holiday hash and the lens-box initialisation sequence."""

from __future__ import annotations

from collections.abc import Sequence

_BOXES = 256
_REMOVE = "-"
_ASSIGN = "="


def holiday_hash(text: str) -> int:
    """The HASH value of ``text``: a running ``(value + code) * 17 mod 256``."""
    value = 0
    for char in text:
        value = (value + ord(char)) * 17 % 256
    return value


def lens_library_part1(lines: Sequence[str]) -> int:
    """Sum of the hashes of every comma-separated step on the first line."""
    return sum(holiday_hash(step) for step in lines[0].split(","))


def _split_step(step: str) -> tuple[str, str, str]:
    for index, char in enumerate(step):
        if char in (_ASSIGN, _REMOVE):
            return step[:index], char, step[index + 1 :]
    raise ValueError(f"step {step!r} has no operation")


def lens_library_part2(lines: Sequence[str]) -> int:
    """Total focusing power after running the initialisation sequence."""
    boxes: list[dict[str, int]] = [{} for _ in range(_BOXES)]
    for step in lines[0].split(","):
        label, operation, focal = _split_step(step)
        box = boxes[holiday_hash(label)]
        if operation == _ASSIGN:
            box[label] = int(focal)
        else:
            box.pop(label, None)
    return sum(
        box_number * slot * focal
        for box_number, box in enumerate(boxes, start=1)
        for slot, focal in enumerate(box.values(), start=1)
    )