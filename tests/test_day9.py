from collections import Counter

import pytest

from advent24.day9 import (
    block_checksum,
    compact_blocks,
    compact_files,
    expand_layout,
    file_checksum,
    parse_disk_map,
)

EXAMPLE = "2333133121414131402"


def test_parse_disk_map_reads_digits():
    assert parse_disk_map(["12345"]) == [1, 2, 3, 4, 5]


def test_parse_disk_map_keeps_last_line():
    assert parse_disk_map(["987", "12"]) == [1, 2]


def test_parse_disk_map_empty_input():
    assert parse_disk_map([]) == []


def test_parse_disk_map_rejects_non_digits():
    with pytest.raises(ValueError):
        parse_disk_map(["12x"])


def test_expand_layout_lengths_and_ids():
    disk_map = parse_disk_map([EXAMPLE])
    layout = expand_layout(disk_map)
    assert len(layout) == sum(disk_map)
    counts = Counter(layout)
    assert counts[None] == sum(disk_map[1::2])
    for file_id, length in enumerate(disk_map[::2]):
        assert counts[file_id] == length


def test_compact_blocks_keeps_blocks():
    layout = expand_layout(parse_disk_map(["12345"]))
    original = list(layout)
    compacted = compact_blocks(layout)
    assert layout == original
    assert len(compacted) == len(layout)
    assert Counter(compacted) == Counter(layout)


def test_compact_blocks_without_free_space_is_unchanged():
    layout = [0, 0, 1, 2, 2]
    assert compact_blocks(layout) == layout


def test_compact_blocks_packs_files_to_the_front():
    compacted = compact_blocks(expand_layout([1, 2, 3]))
    files = sum(block is not None for block in compacted)
    assert all(block is not None for block in compacted[:files])
    assert all(block is None for block in compacted[files:])


def test_compact_blocks_without_block_to_move_raises():
    with pytest.raises(ValueError):
        compact_blocks([None, None, 1])


def test_block_checksum_stops_at_first_free_block():
    assert block_checksum([0, 3, None, 7]) == 3


def test_block_checksum_without_free_block_is_zero():
    assert block_checksum([0, 1, 1]) == 0


def test_checksums_agree_on_packed_layout():
    compacted = compact_blocks(expand_layout([1, 2, 3]))
    assert block_checksum(compacted) == file_checksum(compacted)


def test_compact_files_keeps_blocks():
    layout = expand_layout(parse_disk_map([EXAMPLE]))
    moved = compact_files(layout)
    assert len(moved) == len(layout)
    assert Counter(moved) == Counter(layout)


def test_compact_files_keeps_files_contiguous():
    moved = compact_files(expand_layout(parse_disk_map([EXAMPLE])))
    for file_id in {block for block in moved if block is not None}:
        places = [i for i, block in enumerate(moved) if block == file_id]
        assert places == list(range(places[0], places[-1] + 1))


def test_compact_files_without_free_space_is_unchanged():
    layout = [0, 1, 1, 2]
    assert compact_files(layout) == layout


def test_compact_files_example_checksum():
    moved = compact_files(expand_layout(parse_disk_map([EXAMPLE])))
    assert file_checksum(moved) == 2858