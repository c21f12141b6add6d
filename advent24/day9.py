"""Disk Fragmenter: compacting a disk map and computing its checksum."""

from __future__ import annotations

from typing import Iterable, Sequence

Layout = list[int | None]


def parse_disk_map(lines: Iterable[str]) -> list[int]:
    """Digits of the disk map; only the last line of the input counts."""
    digits = ""
    for line in lines:
        digits = line
    return [int(char) for char in digits]


def expand_layout(disk_map: Sequence[int]) -> Layout:
    """Block layout of a disk map: file ids for file blocks, None for free ones.

    Even entries are file lengths, odd entries free-space lengths; files are
    numbered from 0 in order.
    """
    layout: Layout = []
    for index, length in enumerate(disk_map):
        block = index // 2 if index % 2 == 0 else None
        layout.extend([block] * length)
    return layout


def _last_file_block(blocks: Sequence[int | None], start: int) -> int:
    """Index of the last file block at or before start, above index 0; else -1."""
    return next((i for i in range(start, 0, -1) if blocks[i] is not None), -1)


def compact_blocks(layout: Sequence[int | None]) -> Layout:
    """Move single file blocks from the end into free blocks from the start.

    The forward scan stops only where it meets the backward scan exactly.
    Raises ValueError when a free block is left with no file block to move
    into it.
    """
    blocks = list(layout)
    last = _last_file_block(blocks, len(blocks) - 1)
    for first in range(len(blocks)):
        if first == last:
            break
        if blocks[first] is not None:
            continue
        if last < 0:
            raise ValueError("no file block left to move")
        blocks[first], blocks[last] = blocks[last], blocks[first]
        last = _last_file_block(blocks, last)
    return blocks


def block_checksum(layout: Sequence[int | None]) -> int:
    """Sum of position times file id up to the first free block.

    A layout without any free block gives 0.
    """
    total = 0
    for index, block in enumerate(layout):
        if block is None:
            return total
        total += index * block
    return 0


def _last_file(blocks: Sequence[int | None], last_index: int) -> tuple[int, int]:
    """Start and length of the run holding the last file block at or before last_index."""
    index = next(
        (i for i in range(last_index, -1, -1) if blocks[i] is not None), 0
    )
    value = blocks[index]
    count = 0
    while index >= 0 and blocks[index] == value:
        count += 1
        index -= 1
    return index + 1, count


def _find_gap(blocks: Sequence[int | None], size: int, limit: int) -> int | None:
    """Start of the leftmost run of size free blocks lying before limit."""
    run = 0
    for index, block in enumerate(blocks[:limit]):
        run = run + 1 if block is None else 0
        if run == size:
            return index - size + 1
    return None


def compact_files(layout: Sequence[int | None]) -> Layout:
    """Move whole files, last first, into the leftmost free span that fits."""
    blocks = list(layout)
    cursor = len(blocks) - 1
    while cursor >= 1:
        start, count = _last_file(blocks, cursor)
        gap = _find_gap(blocks, count, start)
        if gap is not None:
            moved = blocks[start:start + count]
            blocks[start:start + count] = blocks[gap:gap + count]
            blocks[gap:gap + count] = moved
        elif cursor == start:
            break
        cursor = start - 1
    return blocks


def file_checksum(layout: Sequence[int | None]) -> int:
    """Sum of position times file id over every file block."""
    return sum(index * block for index, block in enumerate(layout) if block is not None)