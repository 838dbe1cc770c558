"""Command-line entry point: solve one part of one puzzle from an input file."""

from __future__ import annotations

import argparse
import sys
from types import ModuleType

from adventsolver import (
    day02,
    day03,
    day04,
    day05,
    day06,
    day07,
    day08,
    day09,
    day18,
    day19,
    day20,
)

_DAYS: dict[int, ModuleType] = {
    2: day02,
    3: day03,
    4: day04,
    5: day05,
    6: day06,
    7: day07,
    8: day08,
    9: day09,
    18: day18,
    19: day19,
    20: day20,
}


def solve(day: int, part: int, text: str):
    """Return the answer to ``part`` (1 or 2) of ``day`` for the given input text."""
    module = _DAYS.get(day)
    if module is None:
        known = ", ".join(str(number) for number in sorted(_DAYS))
        raise ValueError(f"no solver for day {day}; known days: {known}")
    if part == 1:
        return module.part1(text)
    if part == 2:
        return module.part2(text)
    raise ValueError(f"part must be 1 or 2, got {part}")


def main(argv=None) -> int:
    """Parse arguments, solve the puzzle and print the answer; return the exit code."""
    parser = argparse.ArgumentParser(
        prog="adventsolver", description="Solve a puzzle from an input file."
    )
    parser.add_argument("day", type=int, help="puzzle day")
    parser.add_argument("part", type=int, choices=(1, 2), help="puzzle part")
    parser.add_argument("filename", help="input file")
    args = parser.parse_args(argv)

    try:
        with open(args.filename, encoding="utf-8") as handle:
            text = handle.read()
    except OSError:
        print("Failed to open file")
        return 1

    try:
        result = solve(args.day, args.part, text)
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    print(result)
    return 0