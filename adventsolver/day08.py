"""Resonant Collinearity: locate antinodes created by pairs of antennas."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import combinations

Position = tuple[int, int]


@dataclass(frozen=True)
class Antenna:
    """An antenna at (x, y) tuned to a frequency character."""

    x: int
    y: int
    frequency: str


def parse_antennas(text: str) -> tuple[list[Antenna], int, int]:
    """Return the antennas, the map width and the map height.

    Every character other than '.' marks an antenna of that frequency.
    """
    rows = text.splitlines()
    if not rows or not rows[0]:
        raise ValueError("map is empty")
    width = len(rows[0])
    antennas = []
    for y, row in enumerate(rows):
        if len(row) != width:
            raise ValueError(f"row {y + 1} has width {len(row)}, expected {width}")
        antennas.extend(
            Antenna(x, y, char) for x, char in enumerate(row) if char != "."
        )
    return antennas, width, len(rows)


def _pairs(antennas):
    for first, second in combinations(antennas, 2):
        if first.frequency == second.frequency:
            yield first, second


def antinodes(antennas, width: int, height: int) -> set[Position]:
    """Return the in-bounds points one antenna-gap beyond each same-frequency pair."""
    found = set()
    for first, second in _pairs(antennas):
        dx, dy = second.x - first.x, second.y - first.y
        for x, y in ((first.x - dx, first.y - dy), (second.x + dx, second.y + dy)):
            if 0 <= x < width and 0 <= y < height:
                found.add((x, y))
    return found


def resonant_antinodes(antennas, width: int, height: int) -> set[Position]:
    """Return every in-bounds point on the line of each pair, at whole gap steps."""
    found = set()
    for first, second in _pairs(antennas):
        dx, dy = second.x - first.x, second.y - first.y
        for (x, y), (sx, sy) in (((first.x, first.y), (-dx, -dy)),
                                 ((second.x, second.y), (dx, dy))):
            while 0 <= x < width and 0 <= y < height:
                found.add((x, y))
                x, y = x + sx, y + sy
    return found


def part1(text: str) -> int:
    """Count the distinct antinode locations."""
    return len(antinodes(*parse_antennas(text)))


def part2(text: str) -> int:
    """Count the distinct antinode locations with resonant harmonics."""
    return len(resonant_antinodes(*parse_antennas(text)))