"""Ceres Search: counting XMAS words and X-MAS crosses in a letter grid."""

from __future__ import annotations

from typing import Iterable, Sequence

_DIRECTIONS = [
    (di, dj) for di in (-1, 0, 1) for dj in (-1, 0, 1) if (di, dj) != (0, 0)
]
_TAIL = "MAS"


def parse_grid(lines: Iterable[str]) -> list[str]:
    """Return the grid rows as strings."""
    return [line.rstrip("\r\n") for line in lines]


def _letter(grid: Sequence[str], i: int, j: int) -> str | None:
    if 0 <= i < len(grid) and 0 <= j < len(grid[i]):
        return grid[i][j]
    return None


def count_xmas(grid: Sequence[str]) -> int:
    """Count XMAS in all eight directions, overlaps included."""
    return sum(
        all(
            _letter(grid, i + di * step, j + dj * step) == letter
            for step, letter in enumerate(_TAIL, start=1)
        )
        for i, row in enumerate(grid)
        for j, char in enumerate(row)
        if char == "X"
        for di, dj in _DIRECTIONS
    )


def _is_cross(grid: Sequence[str], i: int, j: int) -> bool:
    if not (1 <= i < len(grid) - 1 and 1 <= j < len(grid[i]) - 1):
        return False
    corners = {
        "tl": _letter(grid, i - 1, j - 1),
        "tr": _letter(grid, i - 1, j + 1),
        "bl": _letter(grid, i + 1, j - 1),
        "br": _letter(grid, i + 1, j + 1),
    }
    ends = {"M", "S"}
    return {corners["tl"], corners["br"]} == ends and {
        corners["tr"],
        corners["bl"],
    } == ends


def count_x_mas(grid: Sequence[str]) -> int:
    """Count A letters crossed by two diagonal MAS words."""
    return sum(
        _is_cross(grid, i, j)
        for i, row in enumerate(grid)
        for j, char in enumerate(row)
        if char == "A"
    )