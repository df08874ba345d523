import pytest

from aoc2024.day19 import TowelSet, parse_input, part1, part2

SAMPLE = """r, wr, b, g, bwu, rb, gb, br

brwrr
bggr
gbbr
rrbgbr
ubwu
bwurrg
brgr
bbrgwb"""


def test_part1_sample():
    assert part1(SAMPLE) == "6"


def test_part2_sample():
    assert part2(SAMPLE) == "16"


def test_parse_input():
    towels, designs = parse_input(SAMPLE)
    assert sorted(towels.patterns) == sorted(["r", "wr", "b", "g", "bwu", "rb", "gb", "br"])
    assert [len(p) for p in towels.patterns] == sorted(len(p) for p in towels.patterns)
    assert designs[0] == "brwrr"
    assert len(designs) == 8


@pytest.mark.parametrize(
    "design, expected",
    [("brwrr", True), ("bggr", True), ("ubwu", False), ("bbrgwb", False), ("", False)],
)
def test_match(design, expected):
    towels, _ = parse_input(SAMPLE)
    assert towels.match(design) is expected


@pytest.mark.parametrize(
    "design, expected",
    [
        ("brwrr", 2),
        ("bggr", 1),
        ("gbbr", 4),
        ("rrbgbr", 6),
        ("ubwu", 0),
        ("bwurrg", 1),
        ("brgr", 2),
        ("bbrgwb", 0),
    ],
)
def test_count_ways(design, expected):
    towels, _ = parse_input(SAMPLE)
    assert towels.count_ways(design) == expected


def test_match_and_count_agree():
    towels = TowelSet(["a", "aa", "b"])
    for design in ("aab", "ba", "c", "aaaa"):
        assert towels.match(design) == (towels.count_ways(design) > 0)
    assert towels.count_ways("aaaa") == 5