"""Linen Layout: build towel designs out of the available stripe patterns."""

from __future__ import annotations

from functools import lru_cache


def _is_word(text: str) -> bool:
    return bool(text) and text.isascii() and text.isalpha()


def parse_towels(text: str) -> tuple[tuple[str, ...], list[str]]:
    """Return the towel patterns and the designs.

    The first line lists towels separated by ``", "``; after a blank line
    comes one design per line.
    """
    lines = text.splitlines()
    if len(lines) < 2 or lines[1] != "":
        raise ValueError("expected a towel line followed by a blank line")
    towels = tuple(lines[0].split(", "))
    for towel in towels:
        if not _is_word(towel):
            raise ValueError(f"invalid towel {towel!r}")
    designs = lines[2:]
    if not designs:
        raise ValueError("no designs given")
    for number, design in enumerate(designs, start=3):
        if not _is_word(design):
            raise ValueError(f"line {number}: invalid design {design!r}")
    return towels, designs


def count_arrangements(design: str, towels) -> int:
    """Count the ordered ways of building ``design`` from the towels."""
    towels = tuple(towels)

    @lru_cache(maxsize=None)
    def ways(start: int) -> int:
        if start == len(design):
            return 1
        return sum(
            ways(start + len(towel))
            for towel in towels
            if design.startswith(towel, start)
        )

    return ways(0)


def is_possible(design: str, towels) -> bool:
    """Return True if ``design`` can be built from the towels."""
    towels = tuple(towels)

    @lru_cache(maxsize=None)
    def possible(start: int) -> bool:
        if start == len(design):
            return True
        return any(
            possible(start + len(towel))
            for towel in towels
            if design.startswith(towel, start)
        )

    return possible(0)


def part1(text: str) -> int:
    """Count the designs that can be built."""
    towels, designs = parse_towels(text)
    return sum(is_possible(design, towels) for design in designs)


def part2(text: str) -> int:
    """Sum the number of arrangements over every design."""
    towels, designs = parse_towels(text)
    return sum(count_arrangements(design, towels) for design in designs)