"""Claw Contraption: find the cheapest button presses that reach each prize."""

from __future__ import annotations

import re
from dataclasses import dataclass, field, replace

_LINE = re.compile(r"([A-z\s]*): X[+|=]([0-9]+), Y[+|=]([0-9]+)")
_PRIZE_OFFSET = 1_000_000_000


@dataclass(frozen=True)
class Coord:
    x: int = 0
    y: int = 0


@dataclass(frozen=True)
class Claw:
    """Two buttons, each moving the claw by a fixed offset, and the prize location."""

    button_a: Coord = field(default_factory=Coord)
    button_b: Coord = field(default_factory=Coord)
    prize: Coord = field(default_factory=Coord)

    def _cost_for(self, presses_a: int) -> int | None:
        a, b, prize = self.button_a, self.button_b, self.prize
        remaining_x = prize.x - a.x * presses_a
        if remaining_x % b.x != 0:
            return None
        presses_b = remaining_x // b.x
        if presses_b * b.y != prize.y - a.y * presses_a:
            return None
        return presses_a * 3 + presses_b

    def matches(self) -> list[int]:
        """Return the token cost of every way to win, with at least one A press.

        Costs are listed by decreasing number of A presses.
        """
        a, b, prize = self.button_a, self.button_b, self.prize
        max_a = prize.x // a.x
        determinant = a.x * b.y - a.y * b.x
        if determinant != 0:
            numerator = prize.x * b.y - prize.y * b.x
            if numerator % determinant != 0:
                return []
            presses_a = numerator // determinant
            if not 1 <= presses_a <= max_a:
                return []
            cost = self._cost_for(presses_a)
            return [] if cost is None else [cost]
        costs = (self._cost_for(presses_a) for presses_a in range(max_a, 0, -1))
        return [cost for cost in costs if cost is not None]


def parse_input(text: str) -> list[Claw]:
    """Read blank-line separated blocks of button and prize lines."""
    claws = []
    claw = Claw()
    for line in text.split("\n"):
        if line == "":
            claws.append(claw)
            claw = Claw()
            continue
        match = _LINE.search(line)
        if match is None:
            raise ValueError(f"unrecognised line: {line!r}")
        name, x, y = match.group(1), int(match.group(2)), int(match.group(3))
        if name == "Button A":
            claw = replace(claw, button_a=Coord(x, y))
        elif name == "Button B":
            claw = replace(claw, button_b=Coord(x, y))
        elif name == "Prize":
            claw = replace(claw, prize=Coord(x, y))
    claws.append(claw)
    return claws


def _cheapest_total(claws: list[Claw]) -> int:
    return sum(min(costs) for costs in (claw.matches() for claw in claws) if costs)


def part1(text: str) -> str:
    return str(_cheapest_total(parse_input(text)))


def part2(text: str) -> str:
    claws = [
        replace(c, prize=Coord(c.prize.x + _PRIZE_OFFSET, c.prize.y + _PRIZE_OFFSET))
        for c in parse_input(text)
    ]
    return str(_cheapest_total(claws))