"""Restroom Redoubt: move robots around a wrapping floor."""

from __future__ import annotations

import re
from collections import Counter
from dataclasses import dataclass, field
from enum import IntEnum
from math import prod

_NUMBER = re.compile(r"[-\d]+")
_INTEGER = re.compile(r"[+-]?\d+")

WIDTH = 101
HEIGHT = 103


def _atoi(token: str) -> int:
    return int(token) if _INTEGER.fullmatch(token) else 0


class Quadrant(IntEnum):
    """Which quarter of the floor a robot stands in; MIDDLE is on a centre line."""

    MIDDLE = 0
    LEFT_TOP = 1
    RIGHT_TOP = 2
    LEFT_BOTTOM = 3
    RIGHT_BOTTOM = 4


@dataclass(frozen=True)
class Grid:
    """The floor the robots move on; robots wrap around its edges."""

    width: int = WIDTH
    height: int = HEIGHT

    def quadrant(self, robot: Robot) -> Quadrant:
        """Return the quadrant the robot currently stands in."""
        mid_x = (self.width - 1) // 2
        mid_y = (self.height - 1) // 2
        x, y = robot.x, robot.y
        if x < mid_x and y < mid_y:
            return Quadrant.LEFT_TOP
        if x > mid_x and y < mid_y:
            return Quadrant.RIGHT_TOP
        if x < mid_x and y > mid_y:
            return Quadrant.LEFT_BOTTOM
        if x > mid_x and y > mid_y:
            return Quadrant.RIGHT_BOTTOM
        return Quadrant.MIDDLE

    def draw(self, robots: list[Robot]) -> str:
        """Render the floor, one "#" per occupied cell, one line per row."""
        occupied = {(r.x, r.y) for r in robots}
        rows = (
            "".join("#" if (x, y) in occupied else " " for x in range(self.width))
            for y in range(self.height)
        )
        return "".join(row + "\n" for row in rows)

    def guess(self, robots: list[Robot]) -> bool:
        """Guess that a picture has formed when enough robots have a diagonal neighbour."""
        hits = sum(
            any(
                (r.x == other.x + 1 or r.x == other.x - 1)
                and (r.y == other.y + 1 or r.y == other.y - 1)
                for other in robots
            )
            for r in robots
        )
        return hits > len(robots) / 2.5


@dataclass(eq=False)
class Robot:
    """A robot's position and its velocity per second."""

    x: int
    y: int
    vx: int
    vy: int
    grid: Grid = field(repr=False)

    def move(self) -> None:
        """Advance one second, wrapping around the floor's edges."""
        self.x = (self.x + self.vx) % self.grid.width
        self.y = (self.y + self.vy) % self.grid.height


def parse_input(text: str, grid: Grid) -> list[Robot]:
    """Read lines of the form "p=x,y v=vx,vy"."""
    robots = []
    for line in text.split("\n"):
        values = _NUMBER.findall(line)
        if len(values) < 4:
            raise ValueError(f"unrecognised robot line: {line!r}")
        x, y, vx, vy = (_atoi(v) for v in values[:4])
        robots.append(Robot(x, y, vx, vy, grid))
    return robots


def part1(text: str, width: int = WIDTH, height: int = HEIGHT) -> str:
    grid = Grid(width, height)
    robots = parse_input(text, grid)
    for _ in range(100):
        for robot in robots:
            robot.move()
    counts = Counter(grid.quadrant(robot) for robot in robots)
    return str(
        prod(
            counts[q]
            for q in (
                Quadrant.LEFT_TOP,
                Quadrant.RIGHT_TOP,
                Quadrant.LEFT_BOTTOM,
                Quadrant.RIGHT_BOTTOM,
            )
        )
    )


def part2(text: str, width: int = WIDTH, height: int = HEIGHT) -> str:
    """Move until the robots seem to form a picture, then print it."""
    grid = Grid(width, height)
    robots = parse_input(text, grid)
    for iteration in range(1, 100000):
        for robot in robots:
            robot.move()
        if grid.guess(robots):
            print("#################")
            print("Iteration: ", iteration)
            print("#################")
            print(grid.draw(robots), end="")
            break
    return str(0)