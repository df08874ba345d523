"""Hoof It: score and rate hiking trails on a topographic map."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field

_DIGITS = frozenset("0123456789")

# Up, left, right and down, in the order the neighbours are visited.
_NEIGHBOURS = ((-1, 0), (0, -1), (0, 1), (1, 0))


@dataclass
class Grid:
    """Height map; impassable cells hold -1."""

    width: int
    height: int
    cells: list[int] = field(default_factory=list)
    starts: list[int] = field(default_factory=list)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def xy(self, pos: int) -> tuple[int, int]:
        return pos % self.width, pos // self.width

    def pos(self, x: int, y: int) -> int:
        return self.width * y + x

    def find_path(self, pos: int, ends: Counter[int]) -> None:
        """Walk every uphill trail from ``pos``, counting arrivals at each height-9 cell."""
        x, y = self.xy(pos)
        value = self.cells[pos]
        for dx, dy in _NEIGHBOURS:
            nx, ny = x + dx, y + dy
            if not self.in_bounds(nx, ny):
                continue
            following = self.pos(nx, ny)
            if value == 8 and self.cells[following] == 9:
                ends[following] += 1
            elif self.cells[following] == value + 1:
                self.find_path(following, ends)


def parse_input(text: str) -> Grid:
    """Read the map; "." marks a cell that no trail can use."""
    lines = text.split("\n")
    grid = Grid(len(lines[0]), len(lines))
    for y, line in enumerate(lines):
        for x, char in enumerate(line):
            if char == ".":
                value = -1
            else:
                value = int(char) if char in _DIGITS else 0
            grid.cells.append(value)
            if value == 0:
                grid.starts.append(grid.pos(x, y))
    return grid


def _trail_ends(grid: Grid) -> list[Counter[int]]:
    results = []
    for start in grid.starts:
        ends: Counter[int] = Counter()
        grid.find_path(start, ends)
        results.append(ends)
    return results


def part1(text: str) -> str:
    return str(sum(len(ends) for ends in _trail_ends(parse_input(text))))


def part2(text: str) -> str:
    return str(sum(sum(ends.values()) for ends in _trail_ends(parse_input(text))))