"""Tests for terminal size detection and checks."""

import os
from unittest.mock import patch

import pytest

from sunlens.terminal import (
    MIN_COLUMNS,
    MIN_ROWS,
    TerminalSize,
    TerminalTooSmall,
    check_terminal_size,
    get_terminal_size,
)


class TestGetTerminalSize:
    def test_reads_shutil(self):
        with patch(
            "sunlens.terminal.shutil.get_terminal_size",
            return_value=os.terminal_size((132, 43)),
        ):
            assert get_terminal_size() == TerminalSize(rows=43, columns=132)


class TestCheckTerminalSize:
    def test_large_enough(self):
        size = TerminalSize(rows=MIN_ROWS, columns=MIN_COLUMNS)
        assert check_terminal_size(size) is size

    def test_too_few_rows(self):
        with pytest.raises(TerminalTooSmall, match="rows must be at least 24"):
            check_terminal_size(TerminalSize(rows=10, columns=200))

    def test_too_few_columns(self):
        with pytest.raises(TerminalTooSmall, match="columns must be at least 80"):
            check_terminal_size(TerminalSize(rows=50, columns=79))
