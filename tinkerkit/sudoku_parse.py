"""Reading sudoku boards from text."""

from __future__ import annotations

from tinkerkit.sudoku_board import Board
from tinkerkit.sudoku_cell import Cell


def parse_str_1(text: str) -> Board:
    """Parse a board: digits 1-9 fill a cell, whitespace is skipped, anything else is empty.

    Cells are read row by row; a board with more than 81 cells is rejected.
    """
    board = Board()
    cells = [ch for ch in text if not ch.isspace()]
    if len(cells) > len(board.grid):
        raise ValueError(f"too many cells: {len(cells)} given, 81 allowed")
    for index, ch in enumerate(cells):
        board.grid[index] = Cell.filled(int(ch)) if "1" <= ch <= "9" else Cell()
    return board