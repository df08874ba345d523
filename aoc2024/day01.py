"""Historian Hysteria: compare two location-id lists."""

from __future__ import annotations

from collections import Counter

from aoc2024.mathutil import abs_int


def _scan_int(token: str) -> int | None:
    try:
        return int(token)
    except ValueError:
        return None


def parse_input(text: str) -> tuple[list[int], list[int]]:
    """Split each non-empty line into a left and a right number."""
    left: list[int] = []
    right: list[int] = []
    for line in text.split("\n"):
        if line == "":
            continue
        tokens = line.split()
        first = _scan_int(tokens[0]) if tokens else None
        second = _scan_int(tokens[1]) if first is not None and len(tokens) > 1 else None
        left.append(first or 0)
        right.append(second or 0)
    return left, right


def sort_ascending(values: list[int]) -> list[int]:
    """Return the values in ascending order."""
    return sorted(values)


def total_distance(left: list[int], right: list[int]) -> int:
    """Sum the pairwise distances of two equally long lists."""
    return sum(abs_int(r - l) for l, r in zip(left, right, strict=True))


def count_occurrences(left: list[int], right: list[int]) -> dict[int, int]:
    """Map every left value to how often it appears in the right list."""
    counts = Counter(right)
    return {value: counts[value] for value in left}


def part1(text: str) -> str:
    left, right = parse_input(text)
    return str(total_distance(sort_ascending(left), sort_ascending(right)))


def part2(text: str) -> str:
    left, right = parse_input(text)
    occurrences = count_occurrences(left, right)
    return str(sum(value * occurrences[value] for value in left))