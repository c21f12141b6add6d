"""Mull It Over: summing multiplications found in corrupted memory."""

from __future__ import annotations

import re
from typing import Iterable, Iterator

_INSTRUCTION = re.compile(r"mul\((\d+),(\d+)\)|do\(\)|don't\(\)", re.ASCII)


def parse_memory(lines: Iterable[str]) -> str:
    """Join the lines of the memory dump into one string."""
    return "".join(lines)


def _instructions(memory: str) -> Iterator[re.Match[str]]:
    matches = list(_INSTRUCTION.finditer(memory))
    if not matches:
        raise ValueError("No match found")
    return iter(matches)


def _product(match: re.Match[str]) -> int:
    return int(match[1]) * int(match[2]) if match[1] is not None else 0


def sum_multiplications(memory: str) -> int:
    """Sum every valid mul(a,b) instruction."""
    return sum(_product(match) for match in _instructions(memory))


def sum_enabled_multiplications(memory: str) -> int:
    """Sum mul(a,b) instructions, honouring do() and don't() switches."""
    total = 0
    enabled = True
    for match in _instructions(memory):
        if match[0] == "do()":
            enabled = True
        elif match[0] == "don't()":
            enabled = False
        elif enabled:
            total += _product(match)
    return total