"""Aplenty: sort machine parts through workflows of rating conditions."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from math import prod

START = "in"
ACCEPTED = "A"
REJECTED = "R"
RATINGS = "xmas"
LOWEST = 1
HIGHEST = 4000

Part = dict[str, int]
_Range = tuple[int, int]


@dataclass(frozen=True)
class Condition:
    """A test ``rating < threshold`` or ``rating > threshold`` sending parts to ``target``."""

    rating: str
    operator: str
    threshold: int
    target: str

    def matches(self, part: Part) -> bool:
        value = part[self.rating]
        if self.operator == "<":
            return value < self.threshold
        return value > self.threshold

    def split(self, low: int, high: int) -> tuple[_Range | None, _Range | None]:
        """The parts of ``low..high`` that do and do not match, or None where empty."""
        if self.operator == "<":
            matched = (low, min(high, self.threshold - 1))
            rest = (max(low, self.threshold), high)
        else:
            matched = (max(low, self.threshold + 1), high)
            rest = (low, min(high, self.threshold))
        return _non_empty(matched), _non_empty(rest)


@dataclass(frozen=True)
class Workflow:
    """Named conditions tried in order, with a fallback target when none matches."""

    name: str
    conditions: tuple[Condition, ...]
    fallback: str

    def route(self, part: Part) -> str:
        """Where ``part`` goes next."""
        for condition in self.conditions:
            if condition.matches(part):
                return condition.target
        return self.fallback


def _non_empty(span: _Range) -> _Range | None:
    return span if span[0] <= span[1] else None


def _parse_condition(text: str) -> Condition:
    test, target = text.split(":")
    operator = ">" if ">" in test else "<"
    rating, threshold = test.split(operator)
    return Condition(rating, operator, int(threshold), target)


def _parse_workflow(line: str) -> Workflow:
    name, body = line.split("{")
    *conditions, fallback = body.rstrip("}").split(",")
    return Workflow(name, tuple(_parse_condition(c) for c in conditions), fallback)


def parse_workflows(lines: Iterable[str]) -> dict[str, Workflow]:
    """Workflows keyed by name, one per line."""
    workflows = (_parse_workflow(line) for line in lines)
    return {workflow.name: workflow for workflow in workflows}


def parse_parts(lines: Iterable[str]) -> list[Part]:
    """Parts written as ``{x=..,m=..,a=..,s=..}``, one per line."""
    parts = []
    for line in lines:
        ratings = {}
        for field in line[1:-1].split(","):
            name, value = field.split("=")
            ratings[name] = int(value)
        parts.append(ratings)
    return parts


def _sections(lines: Sequence[str]) -> tuple[list[str], list[str]]:
    lines = list(lines)
    if "" in lines:
        blank = lines.index("")
        return lines[:blank], [line for line in lines[blank + 1 :] if line]
    return lines, []


def _outcome(part: Part, workflows: dict[str, Workflow]) -> str:
    name = START
    while name not in (ACCEPTED, REJECTED):
        name = workflows[name].route(part)
    return name


def aplenty_part1(lines: Sequence[str]) -> int:
    """Sum of all ratings of the accepted parts."""
    workflow_lines, part_lines = _sections(lines)
    workflows = parse_workflows(workflow_lines)
    return sum(
        sum(part.values())
        for part in parse_parts(part_lines)
        if _outcome(part, workflows) == ACCEPTED
    )


def _accepted(ranges: dict[str, _Range], name: str, workflows: dict[str, Workflow]) -> int:
    if name == REJECTED:
        return 0
    if name == ACCEPTED:
        return prod(high - low + 1 for low, high in ranges.values())
    workflow = workflows[name]
    ranges = dict(ranges)
    total = 0
    for condition in workflow.conditions:
        matched, rest = condition.split(*ranges[condition.rating])
        if matched is not None:
            total += _accepted(
                {**ranges, condition.rating: matched}, condition.target, workflows
            )
        if rest is None:
            return total
        ranges[condition.rating] = rest
    return total + _accepted(ranges, workflow.fallback, workflows)


def aplenty_part2(lines: Sequence[str]) -> int:
    """Number of rating combinations from 1 to 4000 that the workflows accept."""
    workflow_lines, _ = _sections(lines)
    ranges = {rating: (LOWEST, HIGHEST) for rating in RATINGS}
    return _accepted(ranges, START, parse_workflows(workflow_lines))