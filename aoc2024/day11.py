"""Plutonian Pebbles: count stones after repeated blinks."""

from __future__ import annotations

import re

_INTEGER = re.compile(r"[+-]?\d+")


def _atoi(token: str) -> int:
    return int(token) if _INTEGER.fullmatch(token) else 0


def blink(times: int, value: str, memo: dict[tuple[int, str], int] | None = None) -> int:
    """Return how many stones one stone engraved ``value`` becomes after ``times`` blinks."""
    if memo is None:
        memo = {}
    if times == 0:
        return 1
    times -= 1
    if value == "0":
        return blink(times, "1", memo)
    if len(value) % 2 == 0:
        key = (times, value)
        if key in memo:
            return memo[key]
        mid = len(value) // 2
        result = blink(times, value[:mid], memo) + blink(
            times, str(_atoi(value[mid:])), memo
        )
        memo[key] = result
        return result
    return blink(times, str(_atoi(value) * 2024), memo)


def count_stones(text: str, times: int) -> int:
    """Count the stones of a space-separated row after ``times`` blinks."""
    memo: dict[tuple[int, str], int] = {}
    return sum(blink(times, value, memo) for value in text.split(" "))


def part1(text: str) -> str:
    return str(count_stones(text, 25))


def part2(text: str) -> str:
    return str(count_stones(text, 75))