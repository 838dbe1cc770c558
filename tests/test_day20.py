import pytest

from adventsolver.day20 import count_cheats, parse_track, part1, part2

EXAMPLE = "\n".join(
    [
        "###############",
        "#...#...#.....#",
        "#.#.#.#.#.###.#",
        "#S#...#.#.#...#",
        "#######.#.#.###",
        "#######.#.#...#",
        "#######.#.###.#",
        "###..E#...#...#",
        "###.#######.###",
        "#...###...#...#",
        "#.#####.#.###.#",
        "#.#...#.#.#...#",
        "#.#.#.#.#.#.###",
        "#...#...#...###",
        "###############",
    ]
) + "\n"

CORRIDOR = "#####\n#S.E#\n#####\n"


def test_example_track_length():
    path = parse_track(EXAMPLE)
    assert len(path) == 85
    assert path[0] == (1, 3)
    assert path[-1] == (5, 7)


def test_example_path_is_connected():
    path = parse_track(EXAMPLE)
    for (x1, y1), (x2, y2) in zip(path, path[1:]):
        assert abs(x1 - x2) + abs(y1 - y2) == 1
    assert len(set(path)) == len(path)


def test_corridor_path():
    assert parse_track(CORRIDOR) == [(1, 1), (2, 1), (3, 1)]


def test_part1_example_best_cheat():
    assert part1(EXAMPLE, 64) == 1


def test_part2_example():
    assert part2(EXAMPLE, 76) == 3


def test_nothing_saves_more_than_track_length():
    path = parse_track(EXAMPLE)
    assert part1(EXAMPLE, len(path)) == 0
    assert part2(EXAMPLE, len(path)) == 0
    assert part1(EXAMPLE) == 0


def test_counts_fall_as_threshold_rises():
    path = parse_track(EXAMPLE)
    counts = [count_cheats(path, 20, saving) for saving in range(0, 80, 4)]
    assert counts == sorted(counts, reverse=True)


def test_longer_cheats_find_at_least_as_many():
    path = parse_track(EXAMPLE)
    for saving in (2, 10, 40):
        assert count_cheats(path, 2, saving) <= count_cheats(path, 20, saving)


def test_part1_matches_count_cheats():
    path = parse_track(EXAMPLE)
    assert part1(EXAMPLE, 20) == count_cheats(path, 2, 20)
    assert part2(EXAMPLE, 50) == count_cheats(path, 20, 50)


def test_zero_length_cheat_counts_nothing():
    assert count_cheats(parse_track(EXAMPLE), 0, 0) == 0


def test_negative_cheat_length_rejected():
    with pytest.raises(ValueError):
        count_cheats(parse_track(CORRIDOR), -1, 0)


def test_missing_start_rejected():
    with pytest.raises(ValueError, match="start"):
        parse_track("#####\n#..E#\n#####\n")


def test_missing_end_rejected():
    with pytest.raises(ValueError, match="end"):
        parse_track("#####\n#S..#\n#####\n")


def test_bad_character_rejected():
    with pytest.raises(ValueError, match="unexpected character"):
        parse_track("#####\n#SxE#\n#####\n")


def test_uneven_rows_rejected():
    with pytest.raises(ValueError, match="width"):
        parse_track("#####\n#S.E#\n####\n")


def test_first_row_must_be_walls():
    with pytest.raises(ValueError, match="walls"):
        parse_track("##.##\n#S.E#\n#####\n")


def test_unreachable_end_rejected():
    with pytest.raises(ValueError, match="before reaching"):
        parse_track("######\n#S.#E#\n######\n")


def test_branching_track_rejected():
    with pytest.raises(ValueError, match="branches"):
        parse_track("#####\n#...#\n#.S.#\n#..E#\n#####\n")