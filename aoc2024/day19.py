"""Linen Layout: arrange towel patterns into requested designs."""

from __future__ import annotations


class TowelSet:
    """The available towel patterns, with memoised design checks."""

    def __init__(self, patterns: list[str]) -> None:
        self.patterns = sorted(patterns, key=len)
        self._matches: dict[str, bool] = {}
        self._ways: dict[str, int] = {}

    def match(self, design: str) -> bool:
        """Return whether the design can be built from the patterns."""
        if design in self._matches:
            return self._matches[design]
        for pattern in self.patterns:
            if pattern == design:
                self._matches[design] = True
                return True
            if design.endswith(pattern) and self.match(design[: len(design) - len(pattern)]):
                self._matches[design] = True
                return True
        self._matches[design] = False
        return False

    def count_ways(self, design: str) -> int:
        """Count the different pattern sequences that build the design."""
        if design in self._ways:
            return self._ways[design]
        if design == "":
            return 1
        ways = sum(
            self.count_ways(design[: len(design) - len(pattern)])
            for pattern in self.patterns
            if design.endswith(pattern)
        )
        self._ways[design] = ways
        return ways


def parse_input(text: str) -> tuple[TowelSet, list[str]]:
    """Read the comma-separated patterns, then one design per non-empty line."""
    lines = text.split("\n")
    towels = TowelSet(lines[0].split(", "))
    designs = [line for line in lines[1:] if line != ""]
    return towels, designs


def part1(text: str) -> str:
    towels, designs = parse_input(text)
    return str(sum(towels.match(design) for design in designs))


def part2(text: str) -> str:
    towels, designs = parse_input(text)
    return str(sum(towels.count_ways(design) for design in designs))