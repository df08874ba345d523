# aoc2024

This package solves the puzzles of the 2024 puzzle calendar. There is one
module for each day, from `day01` to `day19`. Day 15 is not included. Each
day module takes the puzzle input as a string and returns the answer as a
string. The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Usage

Each day module has `part1(text)` and `part2(text)`. The input is split on
`"\n"`, so remove the trailing newline from an input file first. Days 14
and 18 reject an empty last line.

```python
from pathlib import Path

from aoc2024 import day01, day07

text = Path("input.txt").read_text().rstrip("\n")
print(day01.part1(text))
print(day07.part2(text))
```

Days 14 and 18 take the size of their puzzle as extra arguments. The
defaults are the sizes of the real puzzle. For the worked examples, pass
smaller values:

```python
from aoc2024 import day14, day18

day14.part1(text, 11, 7)           # width, height of the robot floor
day18.part1(text, 7, 7, 12)        # width, height, bytes fallen before start
day18.part2(text, 7, 7, 12)        # first byte that blocks the exit, as "x,y"
```

On day 18, a width, height or byte count of zero falls back to the
default of 71 × 71 with 1024 fallen bytes.

`day14.part2` moves the robots until most of them have a diagonal
neighbour. It then prints the iteration number and a drawing of the floor
to standard output, and returns `"0"`.

## Building blocks

Each day module also makes `parse_input` public, together with the types
behind the puzzle. You can use them to look at intermediate state. Some
examples:

- `day04.Grid` has `find_words(word)` and `find_x()`.
- `day06.Lab` and `day06.Guard` are used by `day06.part2`. `Guard.move(lab)`
  raises `GuardStuckError` when the guard repeats a step.
- `day09.checksum(disk)` works on the block list from `day09.parse_input`.
- `day11.blink(times, value)` and `day11.count_stones(text, times)` count
  stones for any number of blinks.
- `day12.find_regions(grid)` returns a list of `Region` objects. Each one
  has `positions`, `perimeter` and `sides()`.
- `day13.Claw.matches()` returns the token cost of every way to win a claw.
- `day14.Grid.draw(robots)` and `day18.Memory.draw(path)` return the
  picture as a string.
- `day17.Computer.run()` runs the program and returns its output values.
- `day19.TowelSet` has `match(design)` and `count_ways(design)`.

`aoc2024.mathutil` has two small integer helpers, `abs_int` and `pow_int`.

Days 16 and 18 find shortest paths with `aoc2024.graph.Graph`, a small
weighted directed graph:

- Add vertices with `add_vertex` and arcs with `add_arc`.
- `shortest(source, target)` returns one best `Path`.
- `shortest_all(source, target)` returns `BestPaths`, which holds every
  path of least cost.
- Both raise `NoPathError` when the target cannot be reached.
- They raise `KeyError` for a vertex that was never added.

## What it does not do

The package has no command-line program. It does not read input files or
fetch puzzle inputs. You call the day functions from your own code.