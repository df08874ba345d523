"""Chronospatial Computer: run a three-bit program and find a self-printing input."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from aoc2024.mathutil import pow_int

_LINE = re.compile(r"([A-z]*): ([0-9,]*)")
_INTEGER = re.compile(r"[+-]?\d+")


def _atoi(token: str) -> int:
    return int(token) if _INTEGER.fullmatch(token) else 0


@dataclass
class Computer:
    """Three registers, an instruction pointer and the program."""

    a: int = 0
    b: int = 0
    c: int = 0
    pointer: int = 0
    program: list[int] = field(default_factory=list)

    def combo_operand(self, value: int) -> int:
        if 0 <= value <= 3:
            return value
        if value == 4:
            return self.a
        if value == 5:
            return self.b
        if value == 6:
            return self.c
        return 0

    def instruction(self, opcode: int, operand: int) -> list[int]:
        """Execute one instruction and return what it output."""
        out: list[int] = []
        if opcode == 0:
            self.a = self.a // pow_int(2, self.combo_operand(operand))
        elif opcode == 1:
            self.b = self.b ^ operand
        elif opcode == 2:
            self.b = self.combo_operand(operand) % 8
        elif opcode == 3:
            if self.a != 0 and self.pointer != operand:
                self.pointer = operand
                return out
        elif opcode == 4:
            self.b = self.b ^ self.c
        elif opcode == 5:
            out.append(self.combo_operand(operand) % 8)
        elif opcode == 6:
            self.b = self.a // pow_int(2, self.combo_operand(operand))
        elif opcode == 7:
            self.c = self.a // pow_int(2, self.combo_operand(operand))
        self.pointer += 2
        return out

    def run(self) -> list[int]:
        """Run from the current pointer until it leaves the program."""
        out: list[int] = []
        while self.pointer < len(self.program):
            out += self.instruction(self.program[self.pointer], self.program[self.pointer + 1])
        return out


def parse_input(text: str) -> Computer:
    """Read "Register X: n" lines and a "Program: ..." line."""
    computer = Computer()
    for line in text.split("\n"):
        if line == "":
            continue
        match = _LINE.search(line)
        if match is None:
            raise ValueError(f"unrecognised line: {line!r}")
        name, value = match.group(1), match.group(2)
        if name == "A":
            computer.a = _atoi(value)
        elif name == "B":
            computer.b = _atoi(value)
        elif name == "C":
            computer.c = _atoi(value)
        elif name == "Program":
            computer.program = [_atoi(v) for v in value.split(",")]
    return computer


def part1(text: str) -> str:
    return ",".join(str(value) for value in parse_input(text).run())


def part2(text: str) -> str:
    """Find the lowest register A value that makes the program output itself."""
    computer = parse_input(text)
    program = computer.program
    a = 1
    while True:
        computer.pointer = 0
        computer.a = a
        out = computer.run()
        if len(out) > len(program):
            raise RuntimeError("program output grew longer than the program")
        if out == program[len(program) - len(out):]:
            if out == program:
                break
            a *= 8
        else:
            a += 1
    return str(a)