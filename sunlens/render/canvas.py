"""Character canvas with per-cell ANSI styling.

Rows are addressed bottom-up: row 0 is the lowest printed line.

   (r,0)       (r,c)
        +-----+
        |     |
        +-----+
   (0,0)       (0,c)
"""

from sunlens.models.color import Color
from sunlens.render.errors import InvalidDimension, OutOfBounds

EMPTY = " "
DEFAULT_STYLE = "0"
STYLE_SEPARATOR = ";"
BOLD = "1"
ESC = "\x1b["
RESET = "\x1b[0m"


class Canvas:
    def __init__(self, rows: int, cols: int):
        if rows <= 0 or cols <= 0:
            raise InvalidDimension(
                f"canvas needs positive size, got {rows} rows x {cols} cols"
            )
        self.rows = rows
        self.cols = cols
        self._chars = [EMPTY] * (rows * cols)
        self._styles = [DEFAULT_STYLE] * (rows * cols)

    def _index(self, row: int, col: int) -> int:
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise OutOfBounds(row, col, self.rows, self.cols)
        return (self.rows - 1 - row) * self.cols + col

    def set(self, row: int, col: int, char: str) -> None:
        self._chars[self._index(row, col)] = _single_char(char)

    def soft_set(self, row: int, col: int, char: str) -> None:
        """Write only if the cell is still blank."""
        char = _single_char(char)
        i = self._index(row, col)
        if self._chars[i] == EMPTY:
            self._chars[i] = char

    def get(self, row: int, col: int) -> str:
        return self._chars[self._index(row, col)]

    def style(self, row: int, col: int) -> str:
        return self._styles[self._index(row, col)]

    def set_vertical_bar(self, col: int, char: str) -> None:
        for row in range(self.rows):
            self.soft_set(row, col, char)

    def apply_style(self, row: int, col: int, token: str) -> None:
        """Add a style token to the cell, keeping any earlier ones."""
        i = self._index(row, col)
        if self._styles[i] == DEFAULT_STYLE:
            self._styles[i] = token
        else:
            self._styles[i] += STYLE_SEPARATOR + token

    def set_color(self, row: int, col: int, color: Color) -> None:
        self.apply_style(row, col, f"38;5;{color.cube_index}")

    def set_bold(self, row: int, col: int) -> None:
        self.apply_style(row, col, BOLD)

    def render_row(self, row: int) -> str:
        start = self._index(row, 0)
        return "".join(
            f"{ESC}{self._styles[i]}m{self._chars[i]}{RESET}"
            for i in range(start, start + self.cols)
        )

    def plain_row(self, row: int) -> str:
        start = self._index(row, 0)
        return "".join(self._chars[start:start + self.cols])

    def __str__(self) -> str:
        return "".join(
            self.plain_row(row) + "\n" for row in range(self.rows - 1, -1, -1)
        )


def _single_char(char: str) -> str:
    if len(char) != 1:
        raise ValueError(f"canvas cell takes one character, got {char!r}")
    return char
