"""Print Queue: check and repair page orderings."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from functools import cmp_to_key

_INTEGER = re.compile(r"[+-]?\d+")


def _atoi(token: str) -> int:
    return int(token) if _INTEGER.fullmatch(token) else 0


@dataclass
class Printer:
    """Ordering rules and the updates to be printed."""

    rules: dict[int, list[int]] = field(default_factory=dict)
    updates: list[list[int]] = field(default_factory=list)

    def sum_middles(self, faulty: bool) -> int:
        """Sum the middle page of selected updates after sorting them by the rules.

        ``True`` selects updates already in rule order; ``False`` selects the
        ones that sorting had to change.
        """
        rules = self.rules

        def compare(a: int, b: int) -> int:
            if b in rules.get(a, ()):
                return -1
            return 1

        order = cmp_to_key(compare)
        total = 0
        for update in self.updates:
            ordered = sorted(update, key=order)
            if faulty == (ordered == update):
                total += ordered[(len(ordered) - 1) // 2]
        return total


def parse_input(text: str) -> Printer:
    """Read "a|b" rules, then a blank line, then comma-separated updates."""
    printer = Printer()
    in_updates = False
    for line in text.split("\n"):
        if line == "":
            in_updates = True
            continue
        if not in_updates:
            before, after = line.split("|")[:2]
            printer.rules.setdefault(_atoi(before), []).append(_atoi(after))
        else:
            printer.updates.append([_atoi(page) for page in line.split(",")])
    return printer


def part1(text: str) -> str:
    return str(parse_input(text).sum_middles(True))


def part2(text: str) -> str:
    return str(parse_input(text).sum_middles(False))