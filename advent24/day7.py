"""Bridge Repair: finding operator choices that make equations true."""

from __future__ import annotations

from itertools import product
from typing import Iterable, Mapping, Sequence

BASIC_OPERATORS = ("+", "*")
ALL_OPERATORS = ("+", "*", "|")


def parse_equations(lines: Iterable[str]) -> dict[int, list[int]]:
    """Map each test value to its numbers; a repeated value keeps the last line."""
    equations: dict[int, list[int]] = {}
    for line in lines:
        value, numbers = line.split(": ")
        equations[int(value)] = [int(num) for num in numbers.split(" ")]
    return equations


def operator_combinations(
    size: int, operators: Sequence[str]
) -> list[tuple[str, ...]]:
    """Every sequence of operators to place between size numbers."""
    if size < 1:
        raise ValueError("at least one number is needed")
    return list(product(operators, repeat=size - 1))


def _apply(operator: str, left: int, right: int) -> int:
    if operator == "+":
        return left + right
    if operator == "*":
        return left * right
    if operator == "|":
        return int(f"{left}{right}")
    raise ValueError(f"unknown operator {operator!r}")


def _evaluate(nums: Sequence[int], operators: Sequence[str]) -> int:
    result = nums[0]
    for operator, num in zip(operators, nums[1:]):
        result = _apply(operator, result, num)
    return result


def can_evaluate(value: int, nums: Sequence[int], operators: Sequence[str]) -> bool:
    """True if some choice of operators, applied left to right, gives value."""
    return any(
        _evaluate(nums, combination) == value
        for combination in operator_combinations(len(nums), operators)
    )


def calibration_total(
    equations: Mapping[int, Sequence[int]], operators: Sequence[str]
) -> int:
    """Sum of the test values of the equations that can be made true."""
    return sum(
        value
        for value, nums in equations.items()
        if can_evaluate(value, nums, operators)
    )