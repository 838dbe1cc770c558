"""Guard Gallivant: trace a patrolling guard and find obstructions that trap it."""

from __future__ import annotations

from dataclasses import dataclass

Position = tuple[int, int]

_UP = (0, -1)


@dataclass(frozen=True)
class LabMap:
    """The lab floor: its size, the obstacles and the guard's starting tile."""

    width: int
    height: int
    walls: frozenset[Position]
    start: Position

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height


def parse_map(text: str) -> LabMap:
    """Parse a grid of '.', '#' and a single '^' marking the guard facing up."""
    rows = text.splitlines()
    if not rows or not rows[0]:
        raise ValueError("map is empty")
    if len(rows) < 2:
        raise ValueError("map must have more than one row")
    width = len(rows[0])
    walls = set()
    start = None
    for y, row in enumerate(rows):
        if len(row) != width:
            raise ValueError(f"row {y + 1} has width {len(row)}, expected {width}")
        for x, char in enumerate(row):
            if char == "#":
                walls.add((x, y))
            elif char == "^":
                start = (x, y)
            elif char != ".":
                raise ValueError(f"unexpected character {char!r} at row {y + 1}")
    if start is None:
        raise ValueError("map has no guard")
    return LabMap(width, len(rows), frozenset(walls), start)


def _walk(lab: LabMap, obstruction: Position | None = None) -> tuple[set[Position], bool]:
    """Follow the guard; return the tiles visited and whether the route loops."""
    x, y = lab.start
    dx, dy = _UP
    positions = {(x, y)}
    states = {(x, y, dx, dy)}
    while True:
        nx, ny = x + dx, y + dy
        if not lab._inside(nx, ny):
            return positions, False
        if (nx, ny) in lab.walls or (nx, ny) == obstruction:
            dx, dy = -dy, dx
        else:
            x, y = nx, ny
            positions.add((x, y))
        state = (x, y, dx, dy)
        if state in states:
            return positions, True
        states.add(state)


def visited_positions(lab: LabMap) -> set[Position]:
    """Return every tile the guard stands on before leaving the map."""
    positions, looped = _walk(lab)
    if looped:
        raise ValueError("the guard never leaves the map")
    return positions


def causes_loop(lab: LabMap, obstruction: Position) -> bool:
    """Return True if adding an obstacle at ``obstruction`` traps the guard in a loop."""
    if not lab._inside(*obstruction):
        raise ValueError(f"obstruction {obstruction} is outside the map")
    if obstruction == lab.start:
        raise ValueError("cannot place an obstruction on the guard's start")
    return _walk(lab, obstruction)[1]


def part1(text: str) -> int:
    """Count the distinct tiles the guard visits."""
    return len(visited_positions(parse_map(text)))


def part2(text: str) -> int:
    """Count the tiles where a single new obstacle would trap the guard."""
    lab = parse_map(text)
    route, looped = _walk(lab)
    if looped:
        candidates = {
            (x, y) for y in range(lab.height) for x in range(lab.width)
        }
    else:
        # An obstacle off the guard's route cannot change where it goes.
        candidates = route
    candidates = candidates - lab.walls - {lab.start}
    return sum(causes_loop(lab, position) for position in candidates)