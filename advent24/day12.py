"""Garden Groups: pricing fences around regions of plants."""

from __future__ import annotations

from collections import deque
from typing import Iterable, Sequence

from advent24.common import Position

Garden = list[list[str]]
Region = tuple[str, frozenset[Position]]

# Cells holding this mark are not plants and belong to no region.
_EMPTY = "."
_STEPS = (Position(-1, 0), Position(1, 0), Position(0, -1), Position(0, 1))


def parse_garden(lines: Iterable[str]) -> Garden:
    """The garden as rows of single-character plant names."""
    return [list(line) for line in lines]


def _flood(garden: Sequence[Sequence[str]], start: Position, plant: str) -> set[Position]:
    height = len(garden)
    width = len(garden[0])
    region = {start}
    queue = deque([start])
    while queue:
        current = queue.popleft()
        for step in _STEPS:
            neighbour = current + step
            if (
                0 <= neighbour.x < width
                and 0 <= neighbour.y < height
                and neighbour not in region
                and garden[neighbour.y][neighbour.x] == plant
            ):
                region.add(neighbour)
                queue.append(neighbour)
    return region


def regions(garden: Sequence[Sequence[str]]) -> list[Region]:
    """Connected plant regions in scan order; positions have x as column, y as row."""
    claimed: set[Position] = set()
    found: list[Region] = []
    for y, row in enumerate(garden):
        for x, plant in enumerate(row):
            start = Position(x, y)
            if plant == _EMPTY or start in claimed:
                continue
            region = _flood(garden, start, plant)
            claimed |= region
            found.append((plant, frozenset(region)))
    return found


def _perimeter(region: frozenset[Position]) -> int:
    return sum(pos + step not in region for pos in region for step in _STEPS)


def _edge_sides(region: frozenset[Position], pos: Position, dx: int) -> int:
    if Position(pos.x + dx, pos.y) in region:
        return 0
    above = Position(pos.x, pos.y - 1) in region
    below = Position(pos.x, pos.y + 1) in region
    diagonal_above = Position(pos.x + dx, pos.y - 1) in region
    diagonal_below = Position(pos.x + dx, pos.y + 1) in region
    sides = 0
    if not (above or below or diagonal_above or diagonal_below):
        sides += 2
    elif (not above and not diagonal_above) or (not below and not diagonal_below):
        sides += 1
    return sides + diagonal_above + diagonal_below


def _sides(region: frozenset[Position]) -> int:
    return sum(
        _edge_sides(region, pos, dx) for pos in region for dx in (1, -1)
    )


def fence_price(garden: Sequence[Sequence[str]]) -> int:
    """Sum over regions of area times perimeter."""
    return sum(len(region) * _perimeter(region) for _, region in regions(garden))


def bulk_fence_price(garden: Sequence[Sequence[str]]) -> int:
    """Sum over regions of area times number of sides."""
    return sum(len(region) * _sides(region) for _, region in regions(garden))