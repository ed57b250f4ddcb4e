"""Terminal dimension detection and minimum size checks."""

import shutil
from dataclasses import dataclass

MIN_ROWS = 24
MIN_COLUMNS = 80


class TerminalTooSmall(Exception):
    """Raised when the terminal cannot fit the chart."""


@dataclass(frozen=True)
class TerminalSize:
    rows: int
    columns: int


def get_terminal_size() -> TerminalSize:
    size = shutil.get_terminal_size(fallback=(MIN_COLUMNS, MIN_ROWS))
    return TerminalSize(rows=size.lines, columns=size.columns)


def check_terminal_size(
    size: TerminalSize, min_rows: int = MIN_ROWS, min_columns: int = MIN_COLUMNS
) -> TerminalSize:
    """Return `size` unchanged if it meets the minimum, else raise TerminalTooSmall."""
    if size.rows < min_rows:
        raise TerminalTooSmall(
            f"Terminal is too small: number of rows must be at least {min_rows}"
        )
    if size.columns < min_columns:
        raise TerminalTooSmall(
            f"Terminal is too small: number of columns must be at least {min_columns}"
        )
    return size
