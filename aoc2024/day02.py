"""Red-Nosed Reports: check level sequences for safety."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

_INTEGER = re.compile(r"[+-]?\d+")


def _atoi(token: str) -> int:
    return int(token) if _INTEGER.fullmatch(token) else 0


def _is_ordered(levels: list[int]) -> bool:
    ascending = levels[0] < levels[1]
    for previous, current in zip(levels, levels[1:]):
        if (current < previous) if ascending else (current > previous):
            return False
        if not 1 <= abs(current - previous) <= 3:
            return False
    return True


@dataclass
class Report:
    """One line of levels."""

    levels: list[int] = field(default_factory=list)

    def is_safe(self, tolerate: bool) -> bool:
        """Check monotonic steps of 1 to 3, optionally allowing one level to be dropped."""
        if not self.levels:
            return False
        if not tolerate:
            return _is_ordered(self.levels)
        return any(
            _is_ordered(self.levels[:i] + self.levels[i + 1 :])
            for i in range(len(self.levels))
        )


def parse_input(text: str) -> list[Report]:
    """Read one report per non-empty line."""
    return [
        Report([_atoi(token) for token in line.split(" ")])
        for line in text.split("\n")
        if line != ""
    ]


def part1(text: str) -> str:
    return str(sum(report.is_safe(False) for report in parse_input(text)))


def part2(text: str) -> str:
    return str(
        sum(report.is_safe(False) or report.is_safe(True) for report in parse_input(text))
    )