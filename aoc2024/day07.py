"""Bridge Repair: find operator choices that make equations true."""

from __future__ import annotations

import re
from dataclasses import dataclass, field, replace

_INTEGER = re.compile(r"[+-]?\d+")


def _atoi(token: str) -> int:
    return int(token) if _INTEGER.fullmatch(token) else 0


def concat(left: int, right: int) -> int:
    """Join the decimal digits of two numbers."""
    return _atoi(str(left) + str(right))


@dataclass(frozen=True)
class Equation:
    """A test value and the numbers that should combine into it."""

    result: int
    values: list[int] = field(default_factory=list)
    use_concat: bool = False

    def is_valid(self) -> bool:
        """Check whether any operator choice reaches the result."""
        return self.result in self.calc(0, self.values[0])

    def calc(self, depth: int, value: int) -> list[int]:
        """List every reachable total from ``value`` onward, pruning overshoots."""
        if value > self.result:
            return []
        depth += 1
        if depth == len(self.values):
            return [value]
        operand = self.values[depth]
        results = self.calc(depth, value + operand) + self.calc(depth, value * operand)
        if self.use_concat:
            results += self.calc(depth, concat(value, operand))
        return results


def parse_input(text: str) -> list[Equation]:
    """Read lines of the form "result: v1 v2 ..."."""
    equations = []
    for line in text.split("\n"):
        if line == "":
            continue
        head, *rest = line.split(" ")
        equations.append(Equation(_atoi(head[:-1]), [_atoi(v) for v in rest]))
    return equations


def part1(text: str) -> str:
    return str(sum(e.result for e in parse_input(text) if e.is_valid()))


def part2(text: str) -> str:
    equations = (replace(e, use_concat=True) for e in parse_input(text))
    return str(sum(e.result for e in equations if e.is_valid()))