"""Bridge Repair: decide which calibration equations can be made true."""

from __future__ import annotations

import re
from dataclasses import dataclass

_MAX_DIGITS = 20
_LINE = re.compile(r"([0-9]+): ([0-9]+(?: [0-9]+)+)")


@dataclass(frozen=True)
class Equation:
    """A test value and the numbers that must combine, left to right, to reach it."""

    target: int
    numbers: tuple[int, ...]


def _number(field: str, line_number: int) -> int:
    if len(field) > _MAX_DIGITS:
        raise ValueError(f"line {line_number}: number {field!r} is too long")
    return int(field)


def parse_equations(text: str) -> list[Equation]:
    """Parse lines of the form ``target: n1 n2 ...`` with at least two numbers."""
    equations = []
    for line_number, line in enumerate(text.splitlines(), start=1):
        match = _LINE.fullmatch(line)
        if match is None:
            raise ValueError(f"line {line_number}: invalid equation {line!r}")
        target = _number(match[1], line_number)
        numbers = tuple(_number(field, line_number) for field in match[2].split(" "))
        equations.append(Equation(target, numbers))
    if not equations:
        raise ValueError("no equations given")
    return equations


def can_solve(equation: Equation, allow_concat: bool) -> bool:
    """Return True if +, * (and optionally digit concatenation) can reach the target.

    Operators are applied strictly left to right.
    """
    numbers = equation.numbers
    if len(numbers) < 2:
        raise ValueError("an equation needs at least two numbers")
    target = equation.target
    # Without zeros no operator can make a value smaller, so overshoots are dead ends.
    can_prune = 0 not in numbers
    values = {numbers[0]}
    for number in numbers[1:]:
        following = set()
        for value in values:
            following.add(value + number)
            following.add(value * number)
            if allow_concat:
                following.add(int(f"{value}{number}"))
        if can_prune:
            following = {value for value in following if value <= target}
        values = following
        if not values:
            return False
    return target in values


def part1(text: str) -> int:
    """Sum the targets reachable with addition and multiplication."""
    return sum(
        equation.target
        for equation in parse_equations(text)
        if can_solve(equation, allow_concat=False)
    )


def part2(text: str) -> int:
    """Sum the targets reachable once concatenation is also allowed."""
    return sum(
        equation.target
        for equation in parse_equations(text)
        if can_solve(equation, allow_concat=True)
    )