"""Claw Contraption: the fewest tokens that win each claw machine's prize."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from advent24.common import Position

_NUMBER = re.compile(r"\d+", re.ASCII)
_PRESS_A_COST = 3
_PRESS_B_COST = 1
_ORIGIN = Position(0, 0)


@dataclass(frozen=True)
class ClawMachine:
    """How far buttons A and B move the claw, and where the prize lies."""

    a: Position = field(default=_ORIGIN)
    b: Position = field(default=_ORIGIN)
    prize: Position = field(default=_ORIGIN)


def _line_position(line: str) -> Position:
    numbers = _NUMBER.findall(line)
    if len(numbers) < 2:
        raise ValueError(f"expected two numbers, got {line!r}")
    return Position(int(numbers[0]), int(numbers[1]))


def parse_machines(lines: Iterable[str]) -> list[ClawMachine]:
    """Read machines as groups of button A, button B and prize lines.

    Blank lines are skipped. A trailing incomplete group keeps the origin
    for the lines it lacks.
    """
    positions = [_line_position(line) for line in lines if line != ""]
    return [
        ClawMachine(*positions[start:start + 3])
        for start in range(0, len(positions), 3)
    ]


def cheapest_win(machine: ClawMachine, offset: int = 0) -> int | None:
    """Tokens needed to reach the prize moved by offset on both axes.

    Solves the two button equations exactly; returns None when the buttons
    are parallel or no whole number of presses lands on the prize.
    """
    ax, ay = machine.a.x, machine.a.y
    bx, by = machine.b.x, machine.b.y
    tx, ty = machine.prize.x + offset, machine.prize.y + offset

    det = ax * by - ay * bx
    if det == 0:
        return None
    a_numerator = tx * by - ty * bx
    b_numerator = ax * ty - ay * tx
    if a_numerator % det or b_numerator % det:
        return None
    return (a_numerator // det) * _PRESS_A_COST + (b_numerator // det) * _PRESS_B_COST


def total_tokens(machines: Sequence[ClawMachine], offset: int = 0) -> int:
    """Sum of the tokens for every machine that can be won."""
    costs = (cheapest_win(machine, offset) for machine in machines)
    return sum(cost for cost in costs if cost is not None)