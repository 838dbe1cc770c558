"""RAM Run: find a way through a memory grid as bytes fall into it."""

from __future__ import annotations

import re
from bisect import bisect_left
from collections import deque
from typing import Iterable, Optional

Position = tuple[int, int]

DEFAULT_SIZE = 71
DEFAULT_COUNT = 1024

_LINE = re.compile(r"([0-9]{1,2}),([0-9]{1,2})")
_STEPS = ((0, -1), (0, 1), (-1, 0), (1, 0))


def parse_positions(text: str) -> list[Position]:
    """Parse one ``x,y`` byte position per line, each coordinate of one or two digits."""
    positions = []
    for number, line in enumerate(text.splitlines(), start=1):
        match = _LINE.fullmatch(line)
        if match is None:
            raise ValueError(f"line {number}: invalid position {line!r}")
        positions.append((int(match[1]), int(match[2])))
    if not positions:
        raise ValueError("no positions given")
    return positions


def _check_size(size: int) -> None:
    if size < 1:
        raise ValueError(f"grid size must be positive, got {size}")


def _check_inside(positions: Iterable[Position], size: int) -> None:
    for x, y in positions:
        if not (0 <= x < size and 0 <= y < size):
            raise ValueError(f"position {x},{y} is outside a {size}x{size} grid")


def _distance(blocked: frozenset[Position], size: int) -> Optional[int]:
    """Breadth-first search from the top-left to the bottom-right corner."""
    start, goal = (0, 0), (size - 1, size - 1)
    if start in blocked or goal in blocked:
        return None
    distances = {start: 0}
    queue = deque([start])
    while queue:
        x, y = current = queue.popleft()
        if current == goal:
            return distances[current]
        for dx, dy in _STEPS:
            nx, ny = x + dx, y + dy
            following = (nx, ny)
            if (
                0 <= nx < size
                and 0 <= ny < size
                and following not in blocked
                and following not in distances
            ):
                distances[following] = distances[current] + 1
                queue.append(following)
    return None


def shortest_path(blocked, size: int) -> Optional[int]:
    """Return the fewest steps from (0, 0) to the far corner, or None if cut off."""
    _check_size(size)
    blocked = frozenset(blocked)
    _check_inside(blocked, size)
    for corner in ((0, 0), (size - 1, size - 1)):
        if corner in blocked:
            raise ValueError(f"corner {corner[0]},{corner[1]} is blocked")
    return _distance(blocked, size)


def first_blocking_byte(positions, size: int) -> Position:
    """Return the first byte after whose fall no path to the exit remains."""
    _check_size(size)
    positions = list(positions)
    _check_inside(positions, size)
    corners = {(0, 0), (size - 1, size - 1)}
    corner_index = next(
        (index for index, position in enumerate(positions) if position in corners),
        None,
    )

    def cut_off(index: int) -> bool:
        return _distance(frozenset(positions[: index + 1]), size) is None

    index = bisect_left(range(len(positions)), True, key=cut_off)
    if index == len(positions):
        raise ValueError("no byte cuts off the exit")
    if corner_index is not None and index >= corner_index:
        x, y = positions[corner_index]
        raise ValueError(f"byte {x},{y} falls on a corner")
    if index == 0:
        raise ValueError("the very first byte cuts off the exit")
    return positions[index]


def part1(text: str, size: int = DEFAULT_SIZE, count: int = DEFAULT_COUNT) -> int:
    """Fewest steps to the exit once the first ``count`` bytes have fallen."""
    steps = shortest_path(parse_positions(text)[:count], size)
    if steps is None:
        raise ValueError("the exit cannot be reached")
    return steps


def part2(text: str, size: int = DEFAULT_SIZE) -> str:
    """Coordinates, as ``x,y``, of the first byte that cuts off the exit."""
    x, y = first_blocking_byte(parse_positions(text), size)
    return f"{x},{y}"