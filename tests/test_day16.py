import pytest

from aoc2024.day16 import Direction, State, parse_input, part1, part2
from aoc2024.graph import NoPathError

SAMPLE1 = """###############
#.......#....E#
#.#.###.#.###.#
#.....#.#...#.#
#.###.#####.#.#
#.#.#.......#.#
#.#.#####.###.#
#...........#.#
###.#.#####.#.#
#...#.....#.#.#
#.#.#.###.#.#.#
#.....#...#.#.#
#.###.#.#.#.#.#
#S..#.....#...#
###############"""

SAMPLE2 = """#################
#...#...#...#..E#
#.#.#.#.#.#.#.#.#
#.#.#.#...#...#.#
#.#.#.#.###.#.#.#
#...#.#.#.....#.#
#.#.#.#.#.#####.#
#.#...#.#.#.....#
#.#.#####.#.###.#
#.#.#.......#...#
#.#.###.#####.###
#.#.#...#.....#.#
#.#.#.#####.###.#
#.#.#.........#.#
#.#.#.#########.#
#S#.............#
#################"""

CORRIDOR = "#####\n#S.E#\n#####"


def test_part1_sample():
    assert part1(SAMPLE1) == "7036"


def test_part2_sample():
    assert part2(SAMPLE2) == "64"


def test_corridor():
    assert part1(CORRIDOR) == "2"
    assert part2(CORRIDOR) == "3"


def test_unreachable_end_raises():
    with pytest.raises(NoPathError):
        part1("#####\n#S#E#\n#####")


def test_parse_input_finds_start_and_end():
    maze = parse_input(SAMPLE1)
    assert (maze.width, maze.height) == (15, 15)
    assert (maze.reindeer.x, maze.reindeer.y) == (1, 13)
    assert maze.reindeer.direction == Direction.EAST
    assert maze.end == (13, 1)
    assert maze.cell(13, 1) == "E"


def test_direction_rotation():
    assert Direction.NORTH.clockwise() == Direction.EAST
    assert Direction.WEST.clockwise() == Direction.NORTH
    assert Direction.NORTH.counter_clockwise() == Direction.WEST


def test_next_step_and_availability():
    reindeer = parse_input(CORRIDOR).reindeer
    assert reindeer.next_step(1, 1, Direction.NORTH) == (1, 0)
    assert reindeer.next_step(1, 1, Direction.EAST) == (2, 1)
    assert reindeer.is_available(2, 1) == State.OPEN
    assert reindeer.is_available(3, 1) == State.FINISH
    assert reindeer.is_available(1, 0) == State.BLOCKED
    assert reindeer.is_available(-1, 0) == State.BLOCKED


def test_move_towards_marks_tiles():
    maze = parse_input(CORRIDOR)
    tiles: set[int] = set()
    heading = maze.reindeer.move_towards(maze.pos(1, 1), maze.pos(3, 1), Direction.EAST, tiles)
    assert heading == Direction.EAST
    assert tiles == {maze.pos(1, 1), maze.pos(2, 1), maze.pos(3, 1)}