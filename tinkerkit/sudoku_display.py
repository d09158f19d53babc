"""Text renderings of a sudoku board."""

from __future__ import annotations

from tinkerkit.sudoku_board import Board
from tinkerkit.sudoku_cell import Cell

_SEPARATOR = "+---+---+---+---+---+---+---+---+---+"


def render_basic(board: Board) -> str:
    """Render one character per cell, a blank line first."""
    lines = [
        "".join(str(board.get_cell((col, row))) for col in range(9)) for row in range(9)
    ]
    return "\n" + "".join(line + "\n" for line in lines)


def _band(cell: Cell, band: int) -> str:
    if cell.is_filled():
        return f" {cell.number} " if band == 1 else ". ."
    marks = cell.pencil.possible_numbers
    return "".join(
        str(n + 1) if marks[n] else "_" for n in range(band * 3, band * 3 + 3)
    )


def render_full(board: Board) -> str:
    """Render every cell as a 3x3 block showing its number or pencil marks."""
    out = ["\n", _SEPARATOR, "\n"]
    for row in range(9):
        for band in range(3):
            cells = (board.get_cell((col, row)) for col in range(9))
            out.append("".join("|" + _band(cell, band) for cell in cells))
            out.append("|\n")
        out.append(_SEPARATOR + "\n")
    return "".join(out)