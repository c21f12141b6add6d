"""Red-Nosed Reports: checking level reports for safety."""

from __future__ import annotations

from itertools import pairwise
from typing import Iterable, Sequence


def parse_reports(lines: Iterable[str]) -> list[list[int]]:
    """Parse each line of space-separated levels into a list of ints."""
    return [[int(value) for value in line.split(" ")] for line in lines]


def _check_length(level: Sequence[int]) -> None:
    if len(level) < 2:
        raise ValueError("a report needs at least two levels")


def _steps_ok(levels: Sequence[int], increasing: bool) -> bool:
    return all(
        1 <= (b - a if increasing else a - b) <= 3 for a, b in pairwise(levels)
    )


def is_safe(level: Sequence[int]) -> bool:
    """True if levels move in one direction by steps of 1 to 3."""
    _check_length(level)
    return _steps_ok(level, level[0] <= level[1])


def is_safe_dampened(level: Sequence[int]) -> bool:
    """True if the report is safe after removing at most one level.

    The direction is taken from the majority of the steps in the whole
    report; a report with as many rising as non-rising steps is unsafe.
    """
    _check_length(level)
    rising = sum(b > a for a, b in pairwise(level))
    falling = len(level) - 1 - rising
    if rising == falling:
        return False
    increasing = rising > falling
    return any(
        _steps_ok([*level[:skip], *level[skip + 1:]], increasing)
        for skip in range(len(level))
    )


def count_safe(reports: Iterable[Sequence[int]]) -> int:
    """Number of safe reports."""
    return sum(is_safe(report) for report in reports)


def count_safe_dampened(reports: Iterable[Sequence[int]]) -> int:
    """Number of reports that are safe with the problem dampener."""
    return sum(is_safe_dampened(report) for report in reports)