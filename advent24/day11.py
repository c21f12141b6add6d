"""Plutonian Pebbles: counting stones that change every blink."""

from __future__ import annotations

from functools import cache
from typing import Iterable

_WORD = 2**64
_FACTOR = 2024


def parse_stones(lines: Iterable[str]) -> list[str]:
    """Engraved numbers on the first line, separated by single spaces."""
    for line in lines:
        return line.split(" ")
    raise ValueError("no stones in input")


def blink(stone: str) -> list[str]:
    """The stones one stone turns into after a blink.

    Multiplication wraps around at 64 bits.
    """
    if stone == "0":
        return ["1"]
    if len(stone) % 2 == 0:
        half = len(stone) // 2
        return [stone[:half], stone[half:].lstrip("0") or "0"]
    return [str(int(stone) * _FACTOR % _WORD)]


@cache
def _count(stone: str, blinks: int) -> int:
    if blinks == 0:
        return 1
    return sum(_count(child, blinks - 1) for child in blink(stone))


def count_stones(stones: Iterable[str], blinks: int) -> int:
    """Number of stones after the given number of blinks."""
    if blinks < 0:
        raise ValueError("blinks must not be negative")
    return sum(_count(stone, blinks) for stone in stones)