"""Reindeer Maze: find the cheapest routes through a maze and the tiles on them."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Iterator, Optional

from aoc2024.graph import Graph


class Direction(IntEnum):
    """Compass heading, in clockwise order."""

    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    def clockwise(self) -> Direction:
        return Direction((self + 1) % 4)

    def counter_clockwise(self) -> Direction:
        return Direction((self + 3) % 4)


_STEPS = {
    Direction.NORTH: (0, -1),
    Direction.EAST: (1, 0),
    Direction.SOUTH: (0, 1),
    Direction.WEST: (-1, 0),
}


class State(Enum):
    """What lies in a cell the reindeer might step into."""

    BLOCKED = 0
    OPEN = 1
    FINISH = 2


@dataclass(eq=False)
class Maze:
    """The maze cells, the end tile and the reindeer at its start."""

    width: int
    height: int
    cells: list[str] = field(default_factory=list)
    end: tuple[int, int] = (0, 0)
    reindeer: Optional[Reindeer] = field(default=None, repr=False)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def xy(self, pos: int) -> tuple[int, int]:
        return pos % self.width, pos // self.width

    def pos(self, x: int, y: int) -> int:
        return self.width * y + x

    def cell(self, x: int, y: int) -> str:
        return self.cells[self.pos(x, y)]


@dataclass(eq=False)
class Reindeer:
    """The reindeer's position and heading within its maze."""

    maze: Maze = field(repr=False)
    x: int = 0
    y: int = 0
    direction: Direction = Direction.EAST

    def next_step(self, x: int, y: int, direction: Direction) -> tuple[int, int]:
        dx, dy = _STEPS[direction]
        return x + dx, y + dy

    def is_available(self, x: int, y: int) -> State:
        if not self.maze.in_bounds(x, y):
            return State.BLOCKED
        cell = self.maze.cell(x, y)
        if cell == "#":
            return State.BLOCKED
        if cell == "E":
            return State.FINISH
        return State.OPEN

    def move_towards(self, start: int, pos: int, direction: Direction, tiles: set[int]) -> Direction:
        """Walk from ``start`` in ``direction`` until ``pos`` is adjacent, marking every tile.

        Returns the heading of the final step into ``pos``.
        """
        tiles.add(start)
        tiles.add(pos)
        x1, y1 = self.maze.xy(start)
        target = self.maze.xy(pos)
        while True:
            for heading in Direction:
                if self.next_step(x1, y1, heading) == target:
                    tiles.add(self.maze.pos(*target))
                    return heading
            x1, y1 = self.next_step(x1, y1, direction)
            if not self.maze.in_bounds(x1, y1):
                raise ValueError(f"tile {pos} cannot be reached from {start}")
            tiles.add(self.maze.pos(x1, y1))

    def _walk(self, graph: Graph, x: int, y: int, direction: Direction) -> Iterator[tuple[int, int, Direction]]:
        """Add arcs from ``(x, y)`` along a straight run, yielding the side branches to explore."""
        current = self.maze.pos(x, y)
        steps = 1
        while True:
            arcs = graph.arcs(current)
            nx, ny = self.next_step(x, y, direction)
            next_state = self.is_available(nx, ny)
            for turn in (direction.counter_clockwise(), direction.clockwise()):
                tx, ty = self.next_step(x, y, turn)
                state = self.is_available(tx, ty)
                if state is State.BLOCKED:
                    continue
                turn_pos = self.maze.pos(tx, ty)
                if turn_pos in arcs:
                    continue
                graph.add_arc(current, turn_pos, 1000 + steps)
                if state is State.OPEN:
                    yield tx, ty, turn
            if next_state is State.BLOCKED:
                return
            if next_state is State.FINISH:
                graph.add_arc(current, self.maze.pos(nx, ny), steps)
                return
            steps += 1
            x, y = nx, ny

    def find_paths(self, graph: Graph, x: int, y: int, direction: Direction) -> None:
        """Explore the maze depth first from ``(x, y)``, adding arcs to ``graph``."""
        stack = [self._walk(graph, x, y, direction)]
        while stack:
            try:
                branch = next(stack[-1])
            except StopIteration:
                stack.pop()
                continue
            stack.append(self._walk(graph, *branch))


def parse_input(text: str) -> Maze:
    """Read the maze; "S" marks the start and "E" the end tile."""
    lines = text.split("\n")
    maze = Maze(len(lines[0]), len(lines))
    start = (0, 0)
    for line in lines:
        offset = len(maze.cells)
        for index, cell in enumerate(line):
            if cell == "S":
                start = maze.xy(offset + index)
            if cell == "E":
                maze.end = maze.xy(offset + index)
        maze.cells.extend(line)
    maze.reindeer = Reindeer(maze, start[0], start[1], Direction.EAST)
    return maze


def _build_graph(maze: Maze) -> tuple[Graph, int, int]:
    reindeer = maze.reindeer
    graph = Graph()
    for pos in range(len(maze.cells)):
        graph.add_vertex(pos)
    reindeer.find_paths(graph, reindeer.x, reindeer.y, Direction.EAST)
    return graph, maze.pos(reindeer.x, reindeer.y), maze.pos(*maze.end)


def part1(text: str) -> str:
    graph, source, target = _build_graph(parse_input(text))
    return str(graph.shortest(source, target).distance)


def part2(text: str) -> str:
    maze = parse_input(text)
    graph, source, target = _build_graph(maze)
    tiles: set[int] = set()
    for path in graph.shortest_all(source, target).paths:
        direction = Direction.EAST
        start = source
        for step in path[1:]:
            direction = maze.reindeer.move_towards(start, step, direction, tiles)
            start = step
    return str(len(tiles))