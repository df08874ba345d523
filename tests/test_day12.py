import pytest

from aoc2024.day12 import Grid, find_regions, parse_input, part1, part2

SAMPLE = "AAAA\nBBCD\nBBCC\nEEEC"

SAMPLE2 = """OOOOO
OXOXO
OOOOO
OXOXO
OOOOO"""

SAMPLE3 = """RRRRIICCFF
RRRRIICCCF
VVRRRCCFFF
VVRCCCJFFF
VVVVCJJCFE
VVIVCCJJEE
VVIIICJJEE
MIIIIIJJEE
MIIISIJEEE
MMMISSJEEE"""


@pytest.mark.parametrize(
    ("text", "expected"),
    [(SAMPLE, "140"), (SAMPLE2, "772"), (SAMPLE3, "1930")],
)
def test_part1(text, expected):
    assert part1(text) == expected


@pytest.mark.parametrize(
    ("text", "expected"),
    [(SAMPLE, "80"), (SAMPLE2, "436"), (SAMPLE3, "1206")],
)
def test_part2(text, expected):
    assert part2(text) == expected


def test_find_regions_covers_every_plot_once():
    grid = parse_input(SAMPLE3)
    regions = find_regions(grid)
    positions = [pos for region in regions for pos in region.positions]
    assert sorted(positions) == list(range(len(grid.cells)))
    assert all(grid.regions[pos] is region for region in regions for pos in region.positions)


def test_region_values_in_first_plot_order():
    regions = find_regions(parse_input(SAMPLE))
    assert [r.value for r in regions] == ["A", "B", "C", "D", "E"]
    assert [len(r.positions) for r in regions] == [4, 4, 4, 1, 3]


def test_single_plot_region():
    regions = find_regions(parse_input("A"))
    assert len(regions) == 1
    assert len(regions[0].perimeter) == 4
    assert regions[0].sides() == 4


def test_grid_pos_for_negative_row():
    grid = Grid(4, 4)
    assert grid.pos(1, -1) == -19
    assert grid.pos(1, 2) == 9
    assert grid.xy(9) == (1, 2)