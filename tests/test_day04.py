from aoc2024.day04 import parse_input, part1, part2


def _grid(*rows):
    return "\n".join(rows)


SAMPLE1 = _grid(
    "....XXMAS.", ".SAMXMS...", "...S..A...", "..A.A.MS.X", "XMASAMX.MM",
    "X.....XA.A", "S.S.S.S.SS", ".A.A.A.A.A", "..M.M.M.MM", ".X.X.XMASX",
)

SAMPLE2 = _grid(
    ".M.S......", "..A..MSMS.", ".M.S.MAA..", "..A.ASMSM.", ".M.S.M....",
    "." * 10, "S.S.S.S.S.", ".A.A.A.A..", "M.M.M.M.M.", "." * 10,
)


def test_part1_sample():
    assert part1(SAMPLE1) == "18"


def test_diagonal_xmas_part1():
    grid = parse_input(_grid("...S", "..A.", ".M..", "X..."), ["X", "S"])
    assert grid.find_words("XMAS") == 0


def test_diagonal_samx_part1():
    grid = parse_input(_grid("S..S", ".AA.", ".MM.", "X..X"), ["X", "S"])
    assert grid.find_words("SAMX") == 2


def test_part2_sample():
    assert part2(SAMPLE2) == "9"


def test_parse_input_records_starts():
    grid = parse_input(_grid("XMAS", "SAMX"), ["X", "S"])
    assert grid.starts == {"X": [0, 7], "S": [3, 4]}
    assert grid.width == 4
    assert grid.height == 2


def test_row_match_respects_width():
    grid = parse_input(_grid("XMAS", "SAMX"), ["X", "S"])
    assert grid.find_word_in_row("XMAS", 0, 0) is True
    assert grid.find_word_in_row("XMAS", 1, 0) is False


def test_cross_word_on_edge_is_rejected():
    grid = parse_input(_grid("M.S", ".A.", "M.S"), ["A"])
    assert grid.match_cross_word(1, 1) is True
    assert grid.match_cross_word(0, 0) is False