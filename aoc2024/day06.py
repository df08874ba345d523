"""Guard Gallivant: follow a patrolling guard and find loop-making obstacles."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import IntEnum


class Direction(IntEnum):
    """Heading of the guard, in clockwise order."""

    TOP = 0
    RIGHT = 1
    BOTTOM = 2
    LEFT = 3

    def turned(self) -> Direction:
        """Return the heading after a right turn."""
        return Direction((self + 1) % 4)


_STEPS = {
    Direction.TOP: (0, -1),
    Direction.RIGHT: (1, 0),
    Direction.BOTTOM: (0, 1),
    Direction.LEFT: (-1, 0),
}


class GuardStuckError(RuntimeError):
    """Raised when the guard enters a cell she already crossed with the same heading."""


@dataclass(frozen=True)
class Lab:
    """The lab floor: its size, its obstacles and one optional extra obstacle."""

    width: int
    height: int
    obstacles: frozenset[int] = frozenset()
    extra_obstacle: tuple[int, int] | None = None

    def _pos(self, x: int, y: int) -> int:
        return self.width * y + x

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_obstacle(self, x: int, y: int) -> bool:
        return (x, y) == self.extra_obstacle or self._pos(x, y) in self.obstacles

    def with_obstacle(self, x: int, y: int) -> Lab:
        """Return a copy of the lab with an extra obstacle at ``(x, y)``."""
        return replace(self, extra_obstacle=(x, y))


@dataclass
class Guard:
    """The guard's position, heading and the cells she has entered."""

    x: int = 0
    y: int = 0
    direction: Direction = Direction.TOP
    path: list[int] = field(default_factory=list)
    visited: dict[int, Direction] = field(default_factory=dict)

    def move(self, lab: Lab) -> bool:
        """Take one step or turn; return False once the guard leaves the lab.

        Raises GuardStuckError when the guard would repeat an earlier step.
        """
        dx, dy = _STEPS[self.direction]
        x, y = self.x + dx, self.y + dy
        if not lab.in_bounds(x, y):
            return False
        if lab.is_obstacle(x, y):
            self.direction = self.direction.turned()
            return True
        pos = lab._pos(x, y)
        if self.visited.get(pos) == self.direction:
            raise GuardStuckError("guard got stuck")
        self.set_position(x, y, pos)
        return True

    def set_position(self, x: int, y: int, pos: int) -> None:
        self.x = x
        self.y = y
        self.visited[pos] = self.direction
        self.path.append(pos)


def parse_input(text: str) -> tuple[Lab, Guard]:
    """Read the map: "#" marks an obstacle and "^" the guard facing up."""
    lines = text.split("\n")
    width, height = len(lines[0]), len(lines)
    obstacles: set[int] = set()
    guard = Guard()
    for y, line in enumerate(lines):
        for x, cell in enumerate(line):
            pos = width * y + x
            if cell == "#":
                obstacles.add(pos)
            if cell == "^":
                guard.set_position(x, y, pos)
    return Lab(width, height, frozenset(obstacles)), guard


def _patrol(lab: Lab, guard: Guard) -> bool:
    """Walk the guard until she leaves; return True if she got stuck in a loop."""
    try:
        while guard.move(lab):
            pass
    except GuardStuckError:
        return True
    return False


def part1(text: str) -> str:
    lab, guard = parse_input(text)
    _patrol(lab, guard)
    return str(len(guard.visited))


def part2(text: str) -> str:
    lab, guard = parse_input(text)
    stuck = 0
    for y in range(lab.height):
        for x in range(lab.width):
            if (x, y) == (guard.x, guard.y) or lab.is_obstacle(x, y):
                continue
            if _patrol(lab.with_obstacle(x, y), Guard(guard.x, guard.y)):
                stuck += 1
    return str(stuck)