"""Hoof It: scoring and rating hiking trails on a topographic map."""

from __future__ import annotations

from typing import Iterable, Iterator, Sequence

Topo = list[list[int]]
_PEAK = 9


def parse_topo(lines: Iterable[str]) -> Topo:
    """Heights of the map as rows of single-digit ints."""
    return [[int(char) for char in line] for line in lines]


def _trailheads(topo: Sequence[Sequence[int]]) -> Iterator[tuple[int, int]]:
    return (
        (x, y)
        for x, row in enumerate(topo)
        for y, height in enumerate(row)
        if height == 0
    )


def _trail_ends(topo: Sequence[Sequence[int]], x: int, y: int) -> Iterator[tuple[int, int]]:
    """The peak reached by every uphill trail from (x, y), once per trail."""
    height = topo[x][y]
    if height == _PEAK:
        yield x, y
        return
    for nx, ny in ((x - 1, y), (x, y - 1), (x, y + 1), (x + 1, y)):
        if 0 <= nx < len(topo) and 0 <= ny < len(topo[0]) and topo[nx][ny] == height + 1:
            yield from _trail_ends(topo, nx, ny)


def trailhead_score(topo: Sequence[Sequence[int]]) -> int:
    """Sum over trailheads of the number of distinct peaks each can reach."""
    return sum(len(set(_trail_ends(topo, x, y))) for x, y in _trailheads(topo))


def trailhead_rating(topo: Sequence[Sequence[int]]) -> int:
    """Sum over trailheads of the number of distinct trails from each."""
    return sum(sum(1 for _ in _trail_ends(topo, x, y)) for x, y in _trailheads(topo))