"""Disk Fragmenter: compact a disk map and compute its checksum."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import islice
from typing import Optional

_DIGITS = frozenset("0123456789")


@dataclass(frozen=True)
class DiskFile:
    """A file on the disk; each of its blocks refers to the same object."""

    id: int
    size: int


Disk = list[Optional[DiskFile]]


def parse_input(text: str) -> Disk:
    """Expand the dense map into one entry per block; free blocks are None."""
    disk: Disk = []
    next_id = 0
    for line in text.split("\n"):
        for index, char in enumerate(line):
            length = int(char) if char in _DIGITS else 0
            if index % 2 == 0:
                disk.extend([DiskFile(next_id, length)] * length)
                next_id += 1
            else:
                disk.extend([None] * length)
    return disk


def checksum(disk: Disk) -> int:
    """Sum block index times file id over the used blocks."""
    return sum(index * block.id for index, block in enumerate(disk) if block is not None)


def part1(text: str) -> str:
    disk = parse_input(text)
    right = len(disk) - 1
    for index in range(len(disk)):
        if disk[index] is not None:
            continue
        while right > index and disk[right] is None:
            right -= 1
        if right <= index:
            break
        disk[index], disk[right] = disk[right], None
    return str(checksum(disk))


def _find_gap(disk: Disk, end: int, size: int) -> int | None:
    """Return where the first free run of ``size`` blocks within ``disk[:end + 1]`` starts."""
    run_start = 0
    run = 0
    for index, block in enumerate(islice(disk, end + 1)):
        if block is not None:
            run_start = run = 0
            continue
        if run_start == 0:
            run_start = index
        run += 1
        if run == size:
            return run_start
    return None


def part2(text: str) -> str:
    disk = parse_input(text)
    starts: dict[int, int] = {}
    for index, block in enumerate(disk):
        if block is not None:
            starts.setdefault(block.id, index)
    last = next((block for block in reversed(disk) if block is not None), None)
    if last is None:
        return str(checksum(disk))
    for file_id in range(last.id, -1, -1):
        start = starts.get(file_id)
        if start is None:
            continue
        size = disk[start].size
        target = _find_gap(disk, start, size)
        if target is not None:
            disk[target : target + size] = disk[start : start + size]
            disk[start : start + size] = [None] * size
    return str(checksum(disk))