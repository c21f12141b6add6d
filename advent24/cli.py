"""Command line entry point that solves one day's puzzle from an input file."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Iterable, Sequence

from advent24 import (
    day1,
    day2,
    day3,
    day4,
    day5,
    day6,
    day7,
    day8,
    day9,
    day10,
    day11,
    day12,
    day13,
    day14,
)
from advent24.common import read_lines, timer

Answers = list[tuple[str, int]]

_FAR_PRIZE_OFFSET = 10000000000000
_STONE_BLINKS = 75


def _day1(lines: list[str]) -> Answers:
    left, right = day1.parse_lists(lines)
    return [
        ("part 1", day1.total_distance(left, right)),
        ("part 2", day1.similarity_score(left, right)),
    ]


def _day2(lines: list[str]) -> Answers:
    reports = day2.parse_reports(lines)
    return [
        ("part 1", day2.count_safe(reports)),
        ("part 2", day2.count_safe_dampened(reports)),
    ]


def _day3(lines: list[str]) -> Answers:
    memory = day3.parse_memory(lines)
    return [
        ("part 1", day3.sum_multiplications(memory)),
        ("part 2", day3.sum_enabled_multiplications(memory)),
    ]


def _day4(lines: list[str]) -> Answers:
    grid = day4.parse_grid(lines)
    return [("part 1", day4.count_xmas(grid)), ("part 2", day4.count_x_mas(grid))]


def _day5(lines: list[str]) -> Answers:
    ordering, updates = day5.parse_rules(lines)
    return [
        ("part 1", day5.sum_correct_middles(ordering, updates)),
        ("part 2", day5.sum_fixed_middles(ordering, updates)),
    ]


def _day6(lines: list[str]) -> Answers:
    grid = day6.parse_map(lines)
    return [
        ("part 1", day6.count_visited(grid)),
        ("part 2", day6.count_loop_obstacles(grid)),
    ]


def _day7(lines: list[str]) -> Answers:
    equations = day7.parse_equations(lines)
    return [
        ("part 1", day7.calibration_total(equations, day7.BASIC_OPERATORS)),
        ("part 2", day7.calibration_total(equations, day7.ALL_OPERATORS)),
    ]


def _day8(lines: list[str]) -> Answers:
    grid = day8.parse_grid(lines)
    return [
        ("part 1", day8.count_antinodes(grid)),
        ("part 2", day8.count_harmonic_antinodes(grid)),
    ]


def _day9(lines: list[str]) -> Answers:
    layout = day9.expand_layout(day9.parse_disk_map(lines))
    return [
        ("part 1", day9.block_checksum(day9.compact_blocks(layout))),
        ("part 2", day9.file_checksum(day9.compact_files(layout))),
    ]


def _day10(lines: list[str]) -> Answers:
    topo = day10.parse_topo(lines)
    return [
        ("part 1", day10.trailhead_score(topo)),
        ("part 2", day10.trailhead_rating(topo)),
    ]


def _day11(lines: list[str]) -> Answers:
    stones = day11.parse_stones(lines)
    return [("score", day11.count_stones(stones, _STONE_BLINKS))]


def _day12(lines: list[str]) -> Answers:
    garden = day12.parse_garden(lines)
    return [
        ("part 1", day12.fence_price(garden)),
        ("part 2", day12.bulk_fence_price(garden)),
    ]


def _day13(lines: list[str]) -> Answers:
    machines = day13.parse_machines(lines)
    return [
        ("part 1", day13.total_tokens(machines)),
        ("part 2", day13.total_tokens(machines, _FAR_PRIZE_OFFSET)),
    ]


def _day14(lines: list[str]) -> Answers:
    robots = day14.parse_robots(lines)
    return [
        ("part 1", day14.safety_factor(robots, day14.SPACE, 100)),
        ("tree", day14.find_tree(robots, day14.SPACE)),
    ]


_SOLVERS: dict[int, Callable[[list[str]], Answers]] = {
    1: _day1,
    2: _day2,
    3: _day3,
    4: _day4,
    5: _day5,
    6: _day6,
    7: _day7,
    8: _day8,
    9: _day9,
    10: _day10,
    11: _day11,
    12: _day12,
    13: _day13,
    14: _day14,
}


def solve(day: int, lines: Iterable[str]) -> Answers:
    """Labelled answers for a day's puzzle input."""
    try:
        solver = _SOLVERS[day]
    except KeyError:
        raise ValueError(f"no solver for day {day}") from None
    return solver(list(lines))


def main(argv: Sequence[str] | None = None) -> int:
    """Solve one day and print its answers; return the exit status."""
    parser = argparse.ArgumentParser(prog="advent24", description=__doc__)
    parser.add_argument("day", type=int, choices=sorted(_SOLVERS))
    parser.add_argument(
        "-i", "--input", help="puzzle input file (default: day<N>/input.txt)"
    )
    args = parser.parse_args(argv)
    path = args.input or f"day{args.day}/input.txt"

    try:
        lines = read_lines(path)
    except OSError as error:
        print(f"cannot read {path}: {error}", file=sys.stderr)
        return 1

    print(f"Day {args.day}")
    try:
        with timer(f"day {args.day}"):
            answers = solve(args.day, lines)
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    for label, value in answers:
        print(f"{label}: {value}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())