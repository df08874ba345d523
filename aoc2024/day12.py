"""Garden Groups: price fences around plant regions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

_NEIGHBOURS = ((-1, 0), (1, 0), (0, -1), (0, 1))
_DIAGONALS = ((1, 1), (1, -1), (-1, 1), (-1, -1))


@dataclass(eq=False)
class Grid:
    """Garden plots and the region each plot has been assigned to."""

    width: int
    height: int
    cells: list[str] = field(default_factory=list)
    regions: list[Optional[Region]] = field(default_factory=list, repr=False)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def xy(self, pos: int) -> tuple[int, int]:
        return pos % self.width, pos // self.width

    def pos(self, x: int, y: int) -> int:
        if y < 0:
            return self.width * (y - self.width) + x
        return self.width * y + x


@dataclass(eq=False)
class Region:
    """Connected plots of one plant type and the fence pieces around them."""

    grid: Grid = field(repr=False)
    value: str
    positions: list[int] = field(default_factory=list)
    perimeter: list[int] = field(default_factory=list)

    def flood_fill(self, x: int, y: int) -> None:
        """Claim every connected plot of this plant starting at ``(x, y)``."""
        grid = self.grid
        stack = [(x, y)]
        while stack:
            cx, cy = stack.pop()
            if not grid.in_bounds(cx, cy):
                continue
            pos = grid.pos(cx, cy)
            if grid.regions[pos] is not None or grid.cells[pos] != self.value:
                continue
            self.positions.append(pos)
            grid.regions[pos] = self
            for dx, dy in _NEIGHBOURS:
                nx, ny = cx + dx, cy + dy
                if not grid.in_bounds(nx, ny) or grid.cells[grid.pos(nx, ny)] != self.value:
                    self.perimeter.append(grid.pos(nx, ny))
                else:
                    stack.append((nx, ny))

    def sides(self) -> int:
        """Count the straight fence sides, which equals the number of corners."""
        plots = {self.grid.xy(pos) for pos in self.positions}
        corners = 0
        for x, y in plots:
            for dx, dy in _DIAGONALS:
                horizontal = (x + dx, y) in plots
                vertical = (x, y + dy) in plots
                if not horizontal and not vertical:
                    corners += 1
                elif horizontal and vertical and (x + dx, y + dy) not in plots:
                    corners += 1
        return corners


def parse_input(text: str) -> Grid:
    """Read the garden map, one plant letter per plot."""
    lines = text.split("\n")
    width, height = len(lines[0]), len(lines)
    grid = Grid(width, height, regions=[None] * (width * height))
    for line in lines:
        grid.cells.extend(line)
    return grid


def find_regions(grid: Grid) -> list[Region]:
    """Split the whole garden into regions, in order of their first plot."""
    regions = []
    for pos, value in enumerate(grid.cells):
        if grid.regions[pos] is not None:
            continue
        region = Region(grid, value)
        regions.append(region)
        region.flood_fill(*grid.xy(pos))
    return regions


def part1(text: str) -> str:
    regions = find_regions(parse_input(text))
    return str(sum(len(r.perimeter) * len(r.positions) for r in regions))


def part2(text: str) -> str:
    regions = find_regions(parse_input(text))
    return str(sum(r.sides() * len(r.positions) for r in regions))