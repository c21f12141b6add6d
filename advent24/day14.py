"""Restroom Redoubt: robots wrapping around a tiled bathroom floor."""

from __future__ import annotations

import re
import struct
import zlib
from dataclasses import dataclass
from math import prod
from pathlib import Path
from typing import Iterable, Sequence

from advent24.common import Position

SPACE = Position(101, 103)
FIRST_FRAME = 434

_NUMBER = re.compile(r"\d+|-\d+", re.ASCII)
_TREE_VARIANCE = 400
_PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"
_BACKGROUND = bytes((0, 0, 0, 255))
_ROBOT = bytes((255, 255, 255, 255))


@dataclass(frozen=True)
class Robot:
    """A robot's starting tile and its movement per second."""

    position: Position
    velocity: Position


def parse_robots(lines: Iterable[str]) -> list[Robot]:
    """Read lines like 'p=0,4 v=3,-3'; missing numbers count as zero."""
    robots = []
    for line in lines:
        nums = [int(match) for match in _NUMBER.findall(line)][:4]
        nums += [0] * (4 - len(nums))
        robots.append(Robot(Position(nums[0], nums[1]), Position(nums[2], nums[3])))
    return robots


def move_robot(robot: Robot, seconds: int, space: Position = SPACE) -> Position:
    """Where the robot stands after the given seconds, wrapping at the edges."""
    return Position(
        (robot.position.x + robot.velocity.x * seconds) % space.x,
        (robot.position.y + robot.velocity.y * seconds) % space.y,
    )


def safety_factor(
    robots: Iterable[Robot], space: Position = SPACE, seconds: int = 100
) -> int:
    """Product of the robot counts in the four quadrants.

    Robots on the middle row or column are in no quadrant.
    """
    half_x, half_y = space.x // 2, space.y // 2
    quadrants = [0, 0, 0, 0]
    for robot in robots:
        pos = move_robot(robot, seconds, space)
        if pos.x == half_x or pos.y == half_y:
            continue
        quadrants[(pos.x >= half_x) + 2 * (pos.y >= half_y)] += 1
    return prod(quadrants)


def find_tree(robots: Sequence[Robot], space: Position = SPACE) -> int:
    """First second at which the robots cluster tightly enough to draw a tree.

    Averages and variances are taken over the occupied tiles with integer
    division by the robot count, and each second's running values start
    from the previous second's. Raises ValueError when no such second
    comes within one full period of the floor.
    """
    count = len(robots)
    if count == 0:
        raise ValueError("no robots to look at")
    avg_x = avg_y = var_x = var_y = 0
    for second in range(space.x * space.y):
        occupied = {move_robot(robot, second, space) for robot in robots}
        avg_x = (avg_x + sum(pos.x for pos in occupied)) // count
        avg_y = (avg_y + sum(pos.y for pos in occupied)) // count
        var_x = (var_x + sum((pos.x - avg_x) ** 2 for pos in occupied)) // count
        var_y = (var_y + sum((pos.y - avg_y) ** 2 for pos in occupied)) // count
        if var_x < _TREE_VARIANCE and var_y < _TREE_VARIANCE:
            return second
    raise ValueError("the robots never cluster into a tree")


def _chunk(tag: bytes, data: bytes) -> bytes:
    return (
        struct.pack(">I", len(data))
        + tag
        + data
        + struct.pack(">I", zlib.crc32(tag + data) & 0xFFFFFFFF)
    )


def render_frame(
    robots: Iterable[Robot], space: Position = SPACE, second: int = 0
) -> bytes:
    """PNG image of the floor at a given second: white robots on black."""
    occupied = {move_robot(robot, second, space) for robot in robots}
    raw = b"".join(
        b"\x00"
        + b"".join(
            _ROBOT if Position(x, y) in occupied else _BACKGROUND
            for x in range(space.x)
        )
        for y in range(space.y)
    )
    header = struct.pack(">IIBBBBB", space.x, space.y, 8, 6, 0, 0, 0)
    return (
        _PNG_SIGNATURE
        + _chunk(b"IHDR", header)
        + _chunk(b"IDAT", zlib.compress(raw))
        + _chunk(b"IEND", b"")
    )


def write_frames(
    robots: Sequence[Robot],
    space: Position,
    directory: str | Path,
    start: int = FIRST_FRAME,
    count: int = 1,
) -> list[Path]:
    """Write frame_<second>.png for count seconds from start; return the paths."""
    if count < 0:
        raise ValueError("count must not be negative")
    folder = Path(directory)
    folder.mkdir(parents=True, exist_ok=True)
    paths = []
    for second in range(start, start + count):
        path = folder / f"frame_{second}.png"
        path.write_bytes(render_frame(robots, space, second))
        paths.append(path)
    return paths