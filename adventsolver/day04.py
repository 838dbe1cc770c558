"""Ceres Search: find XMAS words and X-shaped MAS crosses in a letter grid."""

from __future__ import annotations

_DIRECTIONS = (
    (-1, -1), (0, -1), (1, -1),
    (-1, 0), (1, 0),
    (-1, 1), (0, 1), (1, 1),
)
_TAIL = "MAS"
_CROSS = {"M", "S"}


def parse_grid(text: str) -> list[str]:
    """Split the text into rows of equal width; at least two rows are required."""
    rows = text.splitlines()
    if not rows or not rows[0]:
        raise ValueError("grid is empty")
    if len(rows) < 2:
        raise ValueError("grid must have more than one row")
    width = len(rows[0])
    for number, row in enumerate(rows, start=1):
        if len(row) != width:
            raise ValueError(f"row {number} has width {len(row)}, expected {width}")
    return rows


def count_xmas(grid) -> int:
    """Count occurrences of XMAS in all eight directions."""
    height = len(grid)
    width = len(grid[0]) if grid else 0

    def matches(x: int, y: int, dx: int, dy: int) -> bool:
        for step, letter in enumerate(_TAIL, start=1):
            nx, ny = x + step * dx, y + step * dy
            if not (0 <= nx < width and 0 <= ny < height) or grid[ny][nx] != letter:
                return False
        return True

    return sum(
        matches(x, y, dx, dy)
        for y, row in enumerate(grid)
        for x, char in enumerate(row)
        if char == "X"
        for dx, dy in _DIRECTIONS
    )


def count_x_mas(grid) -> int:
    """Count A cells whose two diagonals each read MAS in either direction."""
    height = len(grid)
    width = len(grid[0]) if grid else 0
    total = 0
    for y in range(1, height - 1):
        for x in range(1, width - 1):
            if grid[y][x] != "A":
                continue
            falling = {grid[y - 1][x - 1], grid[y + 1][x + 1]}
            rising = {grid[y + 1][x - 1], grid[y - 1][x + 1]}
            if falling == _CROSS and rising == _CROSS:
                total += 1
    return total


def part1(text: str) -> int:
    """Count XMAS words in the grid."""
    return count_xmas(parse_grid(text))


def part2(text: str) -> int:
    """Count X-MAS crosses in the grid."""
    return count_x_mas(parse_grid(text))