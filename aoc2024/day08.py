"""Resonant Collinearity: count antinodes of same-frequency antennas."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import count, permutations
from typing import Iterator


@dataclass
class Grid:
    """Map size and the positions of each antenna frequency."""

    width: int
    height: int
    antennas: dict[str, list[int]] = field(default_factory=dict)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def xy(self, pos: int) -> tuple[int, int]:
        return pos % self.width, pos // self.width

    def pos(self, x: int, y: int) -> int:
        return self.width * y + x

    def pairs(self) -> Iterator[tuple[int, int, int, int]]:
        """Yield the coordinates of every ordered pair of same-frequency antennas."""
        for positions in self.antennas.values():
            for first, second in permutations(positions, 2):
                yield (*self.xy(first), *self.xy(second))


def parse_input(text: str) -> Grid:
    """Read the map; every character other than "." is an antenna."""
    lines = text.split("\n")
    grid = Grid(len(lines[0]), len(lines))
    for y, line in enumerate(lines):
        for x, cell in enumerate(line):
            if cell != ".":
                grid.antennas.setdefault(cell, []).append(grid.pos(x, y))
    return grid


def part1(text: str) -> str:
    grid = parse_input(text)
    locations = set()
    for x1, y1, x2, y2 in grid.pairs():
        x, y = 2 * x1 - x2, 2 * y1 - y2
        if grid.in_bounds(x, y):
            locations.add(grid.pos(x, y))
    return str(len(locations))


def part2(text: str) -> str:
    grid = parse_input(text)
    locations = set()
    for x1, y1, x2, y2 in grid.pairs():
        for mul in count():
            x, y = x1 + (x1 - x2) * mul, y1 + (y1 - y2) * mul
            if not grid.in_bounds(x, y):
                break
            locations.add(grid.pos(x, y))
    return str(len(locations))