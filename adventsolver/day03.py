"""Mull It Over: sum the products of valid mul instructions in corrupted memory."""

from __future__ import annotations

_MAX_DIGITS = 3


def _read_number(text: str, pos: int) -> tuple[int | None, int]:
    """Read a run of digits at pos; return (value or None, position after it)."""
    end = pos
    while end < len(text) and text[end].isdigit() and text[end].isascii():
        end += 1
    if end == pos:
        return None, pos
    if end - pos > _MAX_DIGITS:
        raise ValueError(f"number at offset {pos} has more than {_MAX_DIGITS} digits")
    return int(text[pos:end]), end


def _read_mul(text: str, pos: int) -> tuple[int | None, int]:
    """Read the part of a mul instruction after its leading 'm'."""
    if not text.startswith("ul(", pos):
        return None, pos
    pos += 3
    first, pos = _read_number(text, pos)
    if first is None or not text.startswith(",", pos):
        return None, pos
    second, pos = _read_number(text, pos + 1)
    if second is None or not text.startswith(")", pos):
        return None, pos
    return first * second, pos + 1


def _scan(text: str, conditionals: bool) -> int:
    total = 0
    enabled = True
    pos = 0
    length = len(text)
    while pos < length:
        char = text[pos]
        pos += 1
        if char == "m":
            if not enabled:
                continue
            product, pos = _read_mul(text, pos)
            if product is not None:
                total += product
        elif conditionals and char == "d":
            if not text.startswith("o", pos):
                continue
            pos += 1
            following = text[pos:pos + 1]
            if following == "(":
                pos += 1
                if text.startswith(")", pos):
                    enabled = True
                    pos += 1
            elif following == "n":
                pos += 1
                if text.startswith("'t()", pos):
                    enabled = False
                    pos += 4
            else:
                # The character after "do" is consumed when it starts nothing.
                pos += 1
    return total


def part1(text: str) -> int:
    """Sum every valid mul(a,b) product."""
    return _scan(text, conditionals=False)


def part2(text: str) -> int:
    """Sum mul products, honouring do() and don't() switches."""
    return _scan(text, conditionals=True)