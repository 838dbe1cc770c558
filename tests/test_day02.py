import pytest

from adventsolver import day02

EXAMPLE = """7 6 4 2 1
1 2 7 8 9
9 7 6 2 1
1 3 2 4 5
8 6 4 4 1
1 3 6 7 9
"""


def test_parse_reports_reads_levels():
    reports = day02.parse_reports("7 6 4 2 1\n1 3 6 7 9")
    assert reports == [(7, 6, 4, 2, 1), (1, 3, 6, 7, 9)]


def test_parse_reports_empty_text():
    assert day02.parse_reports("") == []


@pytest.mark.parametrize(
    "text",
    ["1 2 x", "1 234", "1  2", "1 2\n\n3 4", "1 2 3 4 5 6 7 8 9", "-1 2"],
)
def test_parse_reports_rejects_bad_input(text):
    with pytest.raises(ValueError):
        day02.parse_reports(text)


@pytest.mark.parametrize(
    "levels, expected",
    [
        ((7, 6, 4, 2, 1), True),
        ((1, 2, 7, 8, 9), False),
        ((9, 7, 6, 2, 1), False),
        ((1, 3, 2, 4, 5), False),
        ((8, 6, 4, 4, 1), False),
        ((1, 3, 6, 7, 9), True),
    ],
)
def test_is_safe_example_reports(levels, expected):
    assert day02.is_safe(levels) is expected


@pytest.mark.parametrize(
    "levels, expected",
    [
        ((7, 6, 4, 2, 1), True),
        ((1, 2, 7, 8, 9), False),
        ((9, 7, 6, 2, 1), False),
        ((1, 3, 2, 4, 5), True),
        ((8, 6, 4, 4, 1), True),
        ((1, 3, 6, 7, 9), True),
    ],
)
def test_is_safe_with_dampener_example_reports(levels, expected):
    assert day02.is_safe_with_dampener(levels) is expected


def test_safety_is_symmetric_under_reversal():
    for report in day02.parse_reports(EXAMPLE):
        assert day02.is_safe(report) == day02.is_safe(tuple(reversed(report)))


def test_equal_first_pair_is_unsafe():
    assert day02.is_safe([5, 5, 4]) is False


def test_is_safe_needs_two_levels():
    with pytest.raises(ValueError):
        day02.is_safe([4])


def test_example_totals():
    assert day02.part1(EXAMPLE) == 2
    assert day02.part2(EXAMPLE) == 4


def test_dampener_never_lowers_count():
    assert day02.part2(EXAMPLE) >= day02.part1(EXAMPLE)