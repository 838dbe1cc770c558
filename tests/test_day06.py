import pytest

from adventsolver.day06 import (
    LabMap,
    causes_loop,
    parse_map,
    part1,
    part2,
    visited_positions,
)

EXAMPLE = """\
....#.....
.........#
..........
..#.......
.......#..
..........
.#..^.....
........#.
#.........
......#...
"""

BOXED = """\
.#..
...#
#^..
..#.
"""


@pytest.fixture
def lab():
    return parse_map(EXAMPLE)


def test_parse_map_reads_size_start_and_walls(lab):
    assert (lab.width, lab.height) == (10, 10)
    assert lab.start == (4, 6)
    assert (4, 0) in lab.walls
    assert (0, 8) in lab.walls
    assert len(lab.walls) == 8


def test_example_part1():
    assert part1(EXAMPLE) == 41


def test_example_part2():
    assert part2(EXAMPLE) == 6


def test_visited_positions_stay_on_open_floor(lab):
    visited = visited_positions(lab)
    assert lab.start in visited
    assert not visited & lab.walls
    assert all(0 <= x < lab.width and 0 <= y < lab.height for x, y in visited)
    assert len(visited) == part1(EXAMPLE)


def test_guard_at_edge_leaves_immediately():
    lab = parse_map("^.\n..\n")
    assert visited_positions(lab) == {(0, 0)}


def test_known_trapping_obstruction(lab):
    assert causes_loop(lab, (3, 6))


def test_obstruction_off_route_never_traps(lab):
    visited = visited_positions(lab)
    for y in range(lab.height):
        for x in range(lab.width):
            if (x, y) not in visited:
                assert not causes_loop(lab, (x, y))


def test_part2_matches_individual_checks(lab):
    trapping = [
        (x, y)
        for y in range(lab.height)
        for x in range(lab.width)
        if (x, y) not in lab.walls
        and (x, y) != lab.start
        and causes_loop(lab, (x, y))
    ]
    assert len(trapping) == part2(EXAMPLE)


def test_boxed_guard_never_leaves():
    lab = parse_map(BOXED)
    with pytest.raises(ValueError):
        visited_positions(lab)


def test_obstruction_on_start_rejected(lab):
    with pytest.raises(ValueError):
        causes_loop(lab, lab.start)


def test_obstruction_outside_map_rejected(lab):
    with pytest.raises(ValueError):
        causes_loop(lab, (lab.width, 0))


def test_labmap_is_immutable(lab):
    with pytest.raises(AttributeError):
        lab.width = 3  # type: ignore[misc]
    assert lab.width == 10
    assert len(visited_positions(lab)) == 41


@pytest.mark.parametrize(
    "text",
    [
        "",
        "..^.\n",
        "....\n..\n^...\n",
        "....\n....\n",
        "..x.\n.^..\n",
    ],
)
def test_invalid_maps_rejected(text):
    with pytest.raises(ValueError):
        parse_map(text)


def test_constructed_map_walks_like_parsed_one():
    built = LabMap(width=3, height=3, walls=frozenset({(1, 0)}), start=(1, 2))
    parsed = parse_map(".#.\n...\n.^.\n")
    assert built == parsed
    assert visited_positions(built) == visited_positions(parsed)