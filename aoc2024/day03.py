"""Mull It Over: sum multiplications hidden in corrupted memory."""

from __future__ import annotations

import re

_MUL = re.compile(r"mul\(([0-9]+),([0-9]+)\)")
_MUL_OR_TOGGLE = re.compile(r"mul\(([0-9]+),([0-9]+)\)|do\(\)|don't\(\)")


def part1(text: str) -> str:
    return str(sum(int(a) * int(b) for a, b in _MUL.findall(text)))


def part2(text: str) -> str:
    total = 0
    enabled = True
    for match in _MUL_OR_TOGGLE.finditer(text):
        instruction = match.group(0)
        if instruction == "do()":
            enabled = True
        elif instruction == "don't()":
            enabled = False
        elif enabled:
            total += int(match.group(1)) * int(match.group(2))
    return str(total)