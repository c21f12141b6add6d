"""Guard Gallivant: tracing a patrolling guard and finding loop obstacles."""

from __future__ import annotations

from collections import Counter
from enum import Enum
from typing import Iterable, Sequence

Grid = list[list[str]]
Cell = tuple[int, int]


class Direction(Enum):
    """Heading of the guard as a row and column offset."""

    LEFT = (0, -1)
    RIGHT = (0, 1)
    UP = (-1, 0)
    DOWN = (1, 0)

    @property
    def turned(self) -> Direction:
        """The heading after turning right."""
        return _TURNS[self]


_TURNS = {
    Direction.UP: Direction.RIGHT,
    Direction.RIGHT: Direction.DOWN,
    Direction.DOWN: Direction.LEFT,
    Direction.LEFT: Direction.UP,
}

_GUARDS = {"<": Direction.LEFT, ">": Direction.RIGHT, "^": Direction.UP, "v": Direction.DOWN}

# A cell entered more often than this means the guard is going round in circles.
_LOOP_VISITS = 5


def parse_map(lines: Iterable[str]) -> Grid:
    """Return the map as a list of rows of single characters."""
    return [list(line) for line in lines]


def find_guard(grid: Sequence[Sequence[str]]) -> Cell:
    """Row and column of the guard."""
    for i, row in enumerate(grid):
        for j, cell in enumerate(row):
            if cell in _GUARDS:
                return i, j
    raise ValueError("no guard on the map")


def step(
    grid: Sequence[Sequence[str]], i: int, j: int, direction: Direction
) -> tuple[Cell | None, Direction]:
    """Move one cell, or turn right in front of an obstacle.

    Returns the new cell, or None when the guard leaves the map, and the
    new heading.
    """
    di, dj = direction.value
    ni, nj = i + di, j + dj
    if not (0 <= ni < len(grid) and 0 <= nj < len(grid[ni])):
        return None, direction
    if grid[ni][nj] == "#":
        return (i, j), direction.turned
    return (ni, nj), direction


def walk(grid: Sequence[Sequence[str]], start: Cell) -> list[tuple[Cell, Direction]]:
    """Cells the guard visits, in order of first visit, with the heading on arrival."""
    i, j = start
    try:
        direction = _GUARDS[grid[i][j]]
    except KeyError:
        raise ValueError(f"no guard at {start}") from None
    path = [(start, direction)]
    seen = {start}
    position: Cell = start
    while True:
        following, direction = step(grid, *position, direction)
        if following is None:
            return path
        if following not in seen:
            seen.add(following)
            path.append((following, direction))
        position = following


def count_visited(grid: Sequence[Sequence[str]]) -> int:
    """Number of distinct cells the guard visits before leaving."""
    return len(walk(grid, find_guard(grid)))


def _loops(grid: Sequence[Sequence[str]], start: Cell, direction: Direction) -> bool:
    visits: Counter[Cell] = Counter()
    position: Cell | None = start
    while True:
        current = position
        while position == current:
            position, direction = step(grid, *current, direction)
        if position is None:
            return False
        visits[position] += 1
        if visits[position] > _LOOP_VISITS:
            return True


def count_loop_obstacles(grid: Sequence[Sequence[str]]) -> int:
    """Number of cells on the guard's path where an obstacle makes her loop.

    The first cell the guard steps into is not tried.
    """
    path = walk(grid, find_guard(grid))
    blocked = [list(row) for row in grid]
    count = 0
    for (previous, direction), (cell, _) in zip(path[1:], path[2:]):
        i, j = cell
        original = blocked[i][j]
        blocked[i][j] = "#"
        if _loops(blocked, previous, direction):
            count += 1
        blocked[i][j] = original
    return count