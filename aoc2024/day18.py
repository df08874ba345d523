"""RAM Run: find a route through memory as bytes fall and corrupt it."""

from __future__ import annotations

import re
from collections import deque
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Iterable, Iterator, Optional

from aoc2024.graph import Graph, NoPathError

WIDTH = 71
HEIGHT = 71
CORRUPTED = 1024

_INTEGER = re.compile(r"[+-]?\d+")


def _atoi(token: str) -> int:
    return int(token) if _INTEGER.fullmatch(token) else 0


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
    """What lies in a cell the user might step into."""

    BLOCKED = 0
    OPEN = 1
    FINISH = 2


@dataclass(eq=False)
class Memory:
    """The memory space, the bytes still to fall and the user at the start."""

    width: int
    height: int
    cells: list[str] = field(default_factory=list)
    end: tuple[int, int] = (0, 0)
    corrupted_bytes: deque[int] = field(default_factory=deque)
    user: Optional[User] = field(default=None, repr=False)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def xy(self, pos: int) -> tuple[int, int]:
        return pos % self.width, pos // self.width

    def pos(self, x: int, y: int) -> int:
        return self.width * y + x

    def cell(self, x: int, y: int) -> str:
        return self.cells[self.pos(x, y)]

    def place_corrupted_byte(self) -> int:
        """Corrupt the next pending byte and return its position.

        Raises IndexError when no bytes are left to fall.
        """
        if not self.corrupted_bytes:
            raise IndexError("no corrupted bytes left")
        pos = self.corrupted_bytes.popleft()
        self.cells[pos] = "#"
        return pos

    def draw(self, path: Iterable[int]) -> str:
        """Render the memory, marking the cells of ``path`` with "O"."""
        on_path = set(path)
        parts = []
        for index, cell in enumerate(self.cells):
            if index % self.width == 0:
                parts.append("\n")
            parts.append("O" if index in on_path else cell)
            parts.append(cell)
        parts.append("\n")
        return "".join(parts)


@dataclass(eq=False)
class User:
    """The user's position within the memory space."""

    memory: Memory = field(repr=False)
    x: int = 0
    y: int = 0

    def next_step(self, x: int, y: int, direction: Direction) -> tuple[int, int]:
        dx, dy = _STEPS[direction]
        return x + dx, y + dy

    def is_available(self, x: int, y: int) -> State:
        if not self.memory.in_bounds(x, y):
            return State.BLOCKED
        if (x, y) == self.memory.end:
            return State.FINISH
        if self.memory.cell(x, y) == "#":
            return State.BLOCKED
        return State.OPEN

    def _branches(
        self, graph: Graph, x: int, y: int, direction: Direction
    ) -> Iterator[tuple[int, int, Direction]]:
        """Add arcs to the left, right and forward cells, yielding those to explore."""
        current = self.memory.pos(x, y)
        arcs = graph.arcs(current)
        for heading in (direction.counter_clockwise(), direction.clockwise(), direction):
            nx, ny = self.next_step(x, y, heading)
            state = self.is_available(nx, ny)
            if state is State.BLOCKED:
                continue
            target = self.memory.pos(nx, ny)
            if target in arcs:
                continue
            graph.add_arc(current, target, 1)
            if state is State.OPEN:
                yield nx, ny, heading

    def find_paths(self, graph: Graph, x: int, y: int, direction: Direction) -> None:
        """Explore depth first from ``(x, y)``, adding unit arcs to ``graph``."""
        stack = [self._branches(graph, x, y, direction)]
        while stack:
            try:
                branch = next(stack[-1])
            except StopIteration:
                stack.pop()
                continue
            stack.append(self._branches(graph, *branch))


def parse_input(
    text: str, width: int = WIDTH, height: int = HEIGHT, corrupted: int = CORRUPTED
) -> Memory:
    """Read "x,y" lines; the first ``corrupted`` bytes have already fallen."""
    memory = Memory(width, height, ["."] * (width * height), end=(width - 1, height - 1))
    memory.user = User(memory, 0, 0)
    fallen = 0
    for line in text.split("\n"):
        coord = line.split(",")
        if len(coord) < 2:
            raise ValueError(f"unrecognised byte line: {line!r}")
        pos = memory.pos(_atoi(coord[0]), _atoi(coord[1]))
        if corrupted > fallen:
            fallen += 1
            memory.cells[pos] = "#"
            continue
        memory.corrupted_bytes.append(pos)
    return memory


def _settings(width: int, height: int, corrupted: int) -> tuple[int, int, int]:
    if not corrupted:
        corrupted = CORRUPTED
    if not width or not height:
        width, height = WIDTH, HEIGHT
    return width, height, corrupted


def _build_graph(memory: Memory) -> tuple[Graph, int, int]:
    user = memory.user
    graph = Graph()
    for pos in range(len(memory.cells)):
        graph.add_vertex(pos)
    user.find_paths(graph, user.x, user.y, Direction.EAST)
    return graph, memory.pos(user.x, user.y), memory.pos(*memory.end)


def part1(
    text: str, width: int = WIDTH, height: int = HEIGHT, corrupted: int = CORRUPTED
) -> str:
    memory = parse_input(text, *_settings(width, height, corrupted))
    graph, source, target = _build_graph(memory)
    return str(graph.shortest(source, target).distance)


def part2(
    text: str, width: int = WIDTH, height: int = HEIGHT, corrupted: int = CORRUPTED
) -> str:
    """Return the coordinates of the first byte that cuts off the exit."""
    memory = parse_input(text, *_settings(width, height, corrupted))
    x = y = 0
    while True:
        try:
            pos = memory.place_corrupted_byte()
        except IndexError:
            break
        x, y = memory.xy(pos)
        graph, source, target = _build_graph(memory)
        try:
            graph.shortest(source, target)
        except NoPathError:
            break
    return f"{x},{y}"