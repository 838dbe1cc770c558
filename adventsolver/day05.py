"""Print Queue: check and repair page orderings against precedence rules."""

from __future__ import annotations

import re
from dataclasses import dataclass

_RULE = re.compile(r"([0-9]{2})\|([0-9]{2})")
_PAGE = re.compile(r"[0-9]{2}")


@dataclass(frozen=True)
class Rule:
    """Page ``before`` must be printed at some point before page ``after``."""

    before: int
    after: int


def parse_manual(text: str) -> tuple[list[Rule], list[tuple[int, ...]]]:
    """Parse the rule section and the update section of the input.

    Rules are ``AB|CD`` lines of two-digit page numbers, followed by a blank
    line and then comma-separated updates of two-digit page numbers.
    """
    lines = text.splitlines()
    try:
        separator = lines.index("")
    except ValueError:
        raise ValueError("missing blank line between rules and updates") from None
    rule_lines, update_lines = lines[:separator], lines[separator + 1:]
    if not rule_lines:
        raise ValueError("no ordering rules given")

    rules = []
    for number, line in enumerate(rule_lines, start=1):
        match = _RULE.fullmatch(line)
        if match is None:
            raise ValueError(f"line {number}: invalid rule {line!r}")
        rules.append(Rule(int(match[1]), int(match[2])))

    if not update_lines:
        raise ValueError("no updates given")
    updates = []
    for number, line in enumerate(update_lines, start=separator + 2):
        pages = line.split(",")
        if not all(_PAGE.fullmatch(page) for page in pages):
            raise ValueError(f"line {number}: invalid update {line!r}")
        updates.append(tuple(int(page) for page in pages))
    return rules, updates


def _first_violation(pages, rules) -> tuple[int, int] | None:
    """Return (later, earlier) indices of the first pair that breaks a rule."""
    for index, page in enumerate(pages):
        earlier = pages[:index]
        for rule in rules:
            if rule.before == page and rule.after in earlier:
                return index, earlier.index(rule.after)
    return None


def is_ordered(update, rules) -> bool:
    """Return True if no page appears after a page it must precede."""
    return _first_violation(list(update), rules) is None


def fix_order(update, rules) -> list[int]:
    """Return the update reordered by swapping offending pairs until it obeys the rules."""
    pages = list(update)
    while (violation := _first_violation(pages, rules)) is not None:
        later, earlier = violation
        pages[later], pages[earlier] = pages[earlier], pages[later]
    return pages


def _middle(pages) -> int:
    pages = list(pages)
    if len(pages) % 2 != 1:
        raise ValueError(f"update {pages} has no middle page")
    return pages[len(pages) // 2]


def part1(text: str) -> int:
    """Sum the middle pages of the correctly ordered updates."""
    rules, updates = parse_manual(text)
    return sum(_middle(update) for update in updates if is_ordered(update, rules))


def part2(text: str) -> int:
    """Sum the middle pages of the incorrectly ordered updates once fixed."""
    rules, updates = parse_manual(text)
    return sum(
        _middle(fix_order(update, rules))
        for update in updates
        if not is_ordered(update, rules)
    )