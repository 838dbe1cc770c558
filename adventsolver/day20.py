"""Race Condition: count the shortcuts that cheating through walls opens up."""

from __future__ import annotations

Position = tuple[int, int]

DEFAULT_MIN_SAVING = 100
_SHORT_CHEAT = 2
_LONG_CHEAT = 20
_STEPS = ((0, -1), (0, 1), (-1, 0), (1, 0))


def parse_track(text: str) -> list[Position]:
    """Return the race track as the ordered tiles from 'S' to 'E'.

    The map is made of '#', '.', 'S' and 'E'; its first row must be all walls
    and the open tiles must form a single corridor without branches.
    """
    rows = text.splitlines()
    if not rows or not rows[0]:
        raise ValueError("map is empty")
    if set(rows[0]) != {"#"}:
        raise ValueError("first row must consist of walls only")
    width = len(rows[0])
    open_tiles: set[Position] = set()
    start = end = None
    for y, row in enumerate(rows):
        if len(row) != width:
            raise ValueError(f"row {y + 1} has width {len(row)}, expected {width}")
        for x, char in enumerate(row):
            if char == "#":
                continue
            if char == "S":
                if start is not None:
                    raise ValueError("map has more than one start")
                start = (x, y)
            elif char == "E":
                if end is not None:
                    raise ValueError("map has more than one end")
                end = (x, y)
            elif char != ".":
                raise ValueError(f"unexpected character {char!r} at row {y + 1}")
            open_tiles.add((x, y))
    if start is None:
        raise ValueError("map has no start")
    if end is None:
        raise ValueError("map has no end")

    path = [start]
    seen = {start}
    current = start
    while current != end:
        x, y = current
        choices = [
            (x + dx, y + dy)
            for dx, dy in _STEPS
            if (x + dx, y + dy) in open_tiles and (x + dx, y + dy) not in seen
        ]
        if not choices:
            raise ValueError(f"track stops at {x},{y} before reaching the end")
        if len(choices) > 1:
            raise ValueError(f"track branches at {x},{y}")
        current = choices[0]
        seen.add(current)
        path.append(current)
    return path


def count_cheats(path, max_cheat: int, min_saving: int) -> int:
    """Count cheats of at most ``max_cheat`` steps that save ``min_saving`` or more.

    A cheat jumps from one track tile to a later one; it saves the track
    distance between them minus the Manhattan distance it covers.
    """
    if max_cheat < 0:
        raise ValueError(f"cheat length must not be negative, got {max_cheat}")
    path = list(path)
    index = {position: order for order, position in enumerate(path)}
    if len(index) != len(path):
        raise ValueError("track visits a tile twice")
    offsets = [
        (dx, dy, abs(dx) + abs(dy))
        for dx in range(-max_cheat, max_cheat + 1)
        for dy in range(-max_cheat, max_cheat + 1)
        if 0 < abs(dx) + abs(dy) <= max_cheat
    ]
    total = 0
    for order, (x, y) in enumerate(path):
        for dx, dy, steps in offsets:
            target = index.get((x + dx, y + dy))
            if target is not None and target > order and target - order - steps >= min_saving:
                total += 1
    return total


def part1(text: str, min_saving: int = DEFAULT_MIN_SAVING) -> int:
    """Count two-step cheats saving at least ``min_saving`` picoseconds."""
    return count_cheats(parse_track(text), _SHORT_CHEAT, min_saving)


def part2(text: str, min_saving: int = DEFAULT_MIN_SAVING) -> int:
    """Count cheats of up to twenty steps saving at least ``min_saving`` picoseconds."""
    return count_cheats(parse_track(text), _LONG_CHEAT, min_saving)