"""Historian Hysteria: comparing two location-id lists."""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Sequence


def parse_lists(lines: Iterable[str]) -> tuple[list[int], list[int]]:
    """Split lines of two whitespace-separated numbers into two lists."""
    left: list[int] = []
    right: list[int] = []
    for line in lines:
        fields = line.split()
        if len(fields) != 2:
            raise ValueError(f"expected two numbers, got {line!r}")
        left.append(int(fields[0]))
        right.append(int(fields[1]))
    return left, right


def total_distance(left: Sequence[int], right: Sequence[int]) -> int:
    """Sum of distances between the lists paired up in sorted order."""
    return sum(abs(a - b) for a, b in zip(sorted(left), sorted(right), strict=True))


def similarity_score(left: Iterable[int], right: Iterable[int]) -> int:
    """Sum of each left number times how often it appears on the right."""
    counts = Counter(right)
    return sum(num * counts[num] for num in left)