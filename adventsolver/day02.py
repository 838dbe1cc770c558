"""Red-Nosed Reports: count reports whose levels change safely."""

from __future__ import annotations

from itertools import pairwise

_MAX_LEVELS = 8
_MAX_DIGITS = 2
_MAX_STEP = 3


def parse_reports(text: str) -> list[tuple[int, ...]]:
    """Parse one report per line, levels separated by single spaces."""
    reports: list[tuple[int, ...]] = []
    for number, line in enumerate(text.splitlines(), start=1):
        fields = line.split(" ")
        if len(fields) > _MAX_LEVELS:
            raise ValueError(f"line {number}: more than {_MAX_LEVELS} levels")
        levels = []
        for field in fields:
            if not field.isdigit() or not field.isascii():
                raise ValueError(f"line {number}: invalid level {field!r}")
            if len(field) > _MAX_DIGITS:
                raise ValueError(f"line {number}: level {field!r} has too many digits")
            levels.append(int(field))
        reports.append(tuple(levels))
    return reports


def is_safe(levels) -> bool:
    """Return True if the levels move in one direction by 1 to 3 each step.

    The direction is fixed by the first pair of levels.
    """
    levels = tuple(levels)
    if len(levels) < 2:
        raise ValueError("a report needs at least two levels")
    increasing = levels[0] < levels[1]
    for before, after in pairwise(levels):
        step = after - before if increasing else before - after
        if not 1 <= step <= _MAX_STEP:
            return False
    return True


def is_safe_with_dampener(levels) -> bool:
    """Return True if the report is safe, or safe once a single level is removed."""
    levels = tuple(levels)
    if is_safe(levels):
        return True
    return any(
        is_safe(levels[:index] + levels[index + 1:]) for index in range(len(levels))
    )


def part1(text: str) -> int:
    """Count the safe reports."""
    return sum(is_safe(report) for report in parse_reports(text))


def part2(text: str) -> int:
    """Count the reports that are safe with the problem dampener."""
    return sum(is_safe_with_dampener(report) for report in parse_reports(text))