"""Resonant Collinearity: counting antinodes of antenna pairs."""

from __future__ import annotations

from itertools import combinations
from typing import Iterable, Sequence

from advent24.common import Position


def parse_grid(lines: Iterable[str]) -> list[str]:
    """Return the map rows as strings."""
    return [line.rstrip("\r\n") for line in lines]


def antenna_positions(grid: Sequence[str]) -> dict[str, list[Position]]:
    """Positions (row as x, column as y) of each antenna frequency, in scan order."""
    positions: dict[str, list[Position]] = {}
    for x, row in enumerate(grid):
        for y, frequency in enumerate(row):
            if frequency != ".":
                positions.setdefault(frequency, []).append(Position(x, y))
    return positions


def _bounds(grid: Sequence[str]):
    height = len(grid)
    width = len(grid[0]) if grid else 0

    def inside(position: Position) -> bool:
        return 0 <= position.x < height and 0 <= position.y < width

    return inside


def count_antinodes(grid: Sequence[str]) -> int:
    """Distinct in-map points lying beyond each antenna pair at the same spacing."""
    inside = _bounds(grid)
    nodes: set[Position] = set()
    for positions in antenna_positions(grid).values():
        for first, second in combinations(positions, 2):
            for node in (first + (first - second), second + (second - first)):
                if inside(node):
                    nodes.add(node)
    return len(nodes)


def count_harmonic_antinodes(grid: Sequence[str]) -> int:
    """Distinct in-map points in line with an antenna pair at multiples of its spacing."""
    inside = _bounds(grid)
    nodes: set[Position] = set()
    for positions in antenna_positions(grid).values():
        for first, second in combinations(positions, 2):
            for origin, delta in ((first, first - second), (second, second - first)):
                node = origin
                while inside(node):
                    nodes.add(node)
                    node = node + delta
    return len(nodes)