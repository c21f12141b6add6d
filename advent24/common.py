"""Small helpers shared by the daily puzzle solvers."""

from __future__ import annotations

import time
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator


@dataclass(frozen=True, order=True)
class Position:
    """A point on a two-dimensional integer grid."""

    x: int
    y: int

    def __add__(self, other: Position) -> Position:
        return Position(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Position) -> Position:
        return Position(self.x - other.x, self.y - other.y)


def read_lines(path: str | Path) -> list[str]:
    """Return the lines of a text file without their line terminators.

    A final newline does not produce a trailing empty line.
    """
    text = Path(path).read_text(encoding="utf-8")
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


@contextmanager
def timer(name: str) -> Iterator[None]:
    """Print how long the enclosed block took, even if it raised."""
    start = time.perf_counter()
    try:
        yield
    finally:
        elapsed = time.perf_counter() - start
        print(f"{name} took {elapsed:.6f}s")