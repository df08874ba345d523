"""Ceres Search: find XMAS words and X-shaped MAS crosses."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Grid:
    """Letter grid with the positions of selected starting letters."""

    width: int
    height: int
    rows: list[list[str]] = field(default_factory=list)
    starts: dict[str, list[int]] = field(default_factory=dict)

    def _yx(self, pos: int) -> tuple[int, int]:
        return divmod(pos, self.width)

    def find_words(self, word: str) -> int:
        """Count the word read rightwards, downwards and along both down diagonals."""
        found = 0
        for pos in self.starts.get(word[0], []):
            y, x = self._yx(pos)
            found += self.find_word_in_row(word, x, y)
            found += self.find_word_in_column(word, x, y)
            found += self.find_word_diagonal(word, x, y)
        return found

    def find_x(self) -> int:
        """Count the "A" cells that centre two crossing MAS words."""
        return sum(
            self.match_cross_word(x, y)
            for y, x in map(self._yx, self.starts.get("A", []))
        )

    def match_cross_word(self, x: int, y: int) -> bool:
        if x - 1 < 0 or y - 1 < 0 or x + 1 >= self.width or y + 1 >= self.height:
            return False
        rows = self.rows
        left = rows[y - 1][x - 1] + rows[y][x] + rows[y + 1][x + 1]
        right = rows[y - 1][x + 1] + rows[y][x] + rows[y + 1][x - 1]
        return left in ("MAS", "SAM") and right in ("MAS", "SAM")

    def find_word_in_row(self, word: str, x: int, y: int) -> bool:
        if x + len(word) > self.width:
            return False
        return "".join(self.rows[y][x : x + len(word)]) == word

    def find_word_in_column(self, word: str, x: int, y: int) -> bool:
        if y + len(word) > self.height:
            return False
        return "".join(self.rows[y + i][x] for i in range(len(word))) == word

    def find_word_diagonal(self, word: str, x: int, y: int) -> int:
        size = len(word)
        if y + size - 1 >= self.height:
            return 0
        found = 0
        if x + size - 1 < self.width:
            found += "".join(self.rows[y + i][x + i] for i in range(size)) == word
        if x - size + 1 >= 0:
            found += "".join(self.rows[y + i][x - i] for i in range(size)) == word
        return found


def parse_input(text: str, values: list[str]) -> Grid:
    """Build the grid, recording where each of ``values`` occurs."""
    lines = text.split("\n")
    grid = Grid(width=len(lines[0]), height=len(lines))
    for y, line in enumerate(lines):
        if line == "":
            continue
        row = list(line)
        for x, cell in enumerate(row):
            if cell in values:
                grid.starts.setdefault(cell, []).append(grid.width * y + x)
        grid.rows.append(row)
    return grid


def part1(text: str) -> str:
    grid = parse_input(text, ["X", "S"])
    return str(grid.find_words("XMAS") + grid.find_words("SAMX"))


def part2(text: str) -> str:
    return str(parse_input(text, ["A"]).find_x())