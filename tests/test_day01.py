from aoc2024.day01 import (
    count_occurrences,
    parse_input,
    part1,
    part2,
    sort_ascending,
    total_distance,
)

SAMPLE = "3   4\n4   3\n2   5\n1   3\n3   9\n3   3"


def test_sorting():
    assert sort_ascending([3, 4, 2, 1, 3, 3]) == [1, 2, 3, 3, 3, 4]


def test_part1_sample():
    assert part1(SAMPLE) == "11"


def test_part2_sample():
    text = "3   4\n\t4   3\n\t2   5\n\t1   3\n\t3   9\n\t3   3"
    assert part2(text) == "31"


def test_parse_input_splits_columns():
    left, right = parse_input(SAMPLE + "\n")
    assert left == [3, 4, 2, 1, 3, 3]
    assert right == [4, 3, 5, 3, 9, 3]


def test_total_distance_of_identical_lists_is_zero():
    assert total_distance([1, 2, 3], [1, 2, 3]) == 0


def test_count_occurrences_matches_sample():
    left, right = parse_input(SAMPLE)
    counts = count_occurrences(left, right)
    assert counts[3] == 3
    assert counts[2] == 0
    assert counts[4] == 1