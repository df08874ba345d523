from aoc2024.day05 import parse_input, part1, part2

SAMPLE = """47|53
97|13
97|61
97|47
75|29
61|13
75|53
29|13
97|29
53|29
61|53
97|53
61|29
47|13
75|47
97|75
47|61
75|61
47|29
75|13
53|13

75,47,61,53,29
97,61,53,29,13
75,29,13
75,97,47,61,53
61,13,29
97,13,75,29,47"""


def test_part1_sample():
    assert part1(SAMPLE) == "143"


def test_part2_sample():
    assert part2(SAMPLE) == "123"


def test_parse_input_reads_rules_and_updates():
    printer = parse_input(SAMPLE)
    assert printer.rules[47] == [53, 13, 61, 29]
    assert printer.updates[2] == [75, 29, 13]
    assert len(printer.updates) == 6


def test_single_ordered_update_counts_only_as_correct():
    printer = parse_input("1|2\n2|3\n1|3\n\n1,2,3")
    assert printer.sum_middles(True) == 2
    assert printer.sum_middles(False) == 0


def test_reordered_update_counts_only_as_faulty():
    printer = parse_input("1|2\n2|3\n1|3\n\n3,1,2")
    assert printer.sum_middles(True) == 0
    assert printer.sum_middles(False) == 2