import pytest

from aoc2024.day02 import Report, parse_input, part1, part2

SAMPLE = """7 6 4 2 1
1 2 7 8 9
9 7 6 2 1
1 3 2 4 5
8 6 4 4 1
1 3 6 7 9
"""


def test_part1_sample():
    assert part1(SAMPLE) == "2"


def test_part2_sample():
    assert part2(SAMPLE) == "4"


def test_parse_input_reads_levels():
    reports = parse_input(SAMPLE)
    assert len(reports) == 6
    assert reports[0].levels == [7, 6, 4, 2, 1]


@pytest.mark.parametrize(
    ("levels", "strict", "tolerant"),
    [
        ([7, 6, 4, 2, 1], True, True),
        ([1, 2, 7, 8, 9], False, False),
        ([1, 3, 2, 4, 5], False, True),
        ([8, 6, 4, 4, 1], False, True),
    ],
)
def test_is_safe_per_sample_line(levels, strict, tolerant):
    report = Report(levels)
    assert report.is_safe(False) is strict
    assert (report.is_safe(False) or report.is_safe(True)) is tolerant


def test_empty_report_is_unsafe():
    assert Report([]).is_safe(False) is False