"""Disk Fragmenter: compact a disk map and compute its checksum."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional


@dataclass(frozen=True)
class Span:
    """A run of blocks: ``length`` blocks of file ``file_id``, or free if it is None."""

    length: int
    file_id: Optional[int] = None

    @property
    def is_free(self) -> bool:
        return self.file_id is None


def _disk_map(text: str) -> Iterator[tuple[Optional[int], int]]:
    """Yield (file id or None, length) for each digit of the dense disk map."""
    digits = text.rstrip("\n")
    if not digits:
        raise ValueError("disk map is empty")
    for index, char in enumerate(digits):
        if char not in "0123456789":
            raise ValueError(f"invalid disk map character {char!r} at offset {index}")
        file_id = index // 2 if index % 2 == 0 else None
        yield file_id, int(char)


def parse_blocks(text: str) -> list[Optional[int]]:
    """Expand the disk map into one entry per block: a file id, or None for free."""
    blocks: list[Optional[int]] = []
    for file_id, length in _disk_map(text):
        blocks.extend([file_id] * length)
    return blocks


def compact_blocks(blocks) -> list[int]:
    """Move blocks one at a time from the end into the leftmost free gaps.

    Returns the file ids left on disk, with no free blocks remaining.
    """
    disk = list(blocks)
    left, right = 0, len(disk) - 1
    while left < right:
        if disk[left] is not None:
            left += 1
        elif disk[right] is None:
            right -= 1
        else:
            disk[left] = disk[right]
            disk[right] = None
            left += 1
            right -= 1
    while disk and disk[-1] is None:
        disk.pop()
    if None in disk:
        raise ValueError("compaction left a gap")
    return disk


def parse_spans(text: str) -> list[Span]:
    """Read the disk map as whole files and free runs; empty runs are dropped."""
    return [Span(length, file_id) for file_id, length in _disk_map(text) if length]


def compact_spans(spans) -> list[Span]:
    """Move each whole file, highest id first, into the leftmost free run that fits.

    A file only moves towards the start of the disk; the first file never moves.
    """
    disk = list(spans)
    ids = sorted(
        (span.file_id for span in disk if not span.is_free), reverse=True
    )
    for file_id in ids:
        if file_id == 0:
            continue
        source = next(
            index for index, span in enumerate(disk) if span.file_id == file_id
        )
        size = disk[source].length
        target = next(
            (
                index
                for index, span in enumerate(disk[:source])
                if span.is_free and span.length >= size
            ),
            None,
        )
        if target is None:
            continue
        space = disk[target].length
        disk[source] = Span(size)
        disk[target] = Span(size, file_id)
        if space > size:
            disk.insert(target + 1, Span(space - size))
    return disk


def block_checksum(blocks) -> int:
    """Sum position times file id over every occupied block."""
    return sum(
        position * file_id
        for position, file_id in enumerate(blocks)
        if file_id is not None
    )


def span_checksum(spans) -> int:
    """Sum position times file id over every block covered by a file span."""
    total = 0
    position = 0
    for span in spans:
        if not span.is_free:
            total += span.file_id * sum(range(position, position + span.length))
        position += span.length
    return total


def part1(text: str) -> int:
    """Checksum after compacting block by block."""
    return block_checksum(compact_blocks(parse_blocks(text)))


def part2(text: str) -> int:
    """Checksum after compacting whole files."""
    return span_checksum(compact_spans(parse_spans(text)))