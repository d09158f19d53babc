"""A sudoku solver built from pencil-mark strategies."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import chain
from typing import Iterable, Optional

from tinkerkit.sudoku_board import Board
from tinkerkit.sudoku_display import render_full

Pos = tuple[int, int]

_TRIPLES = ((0, 1, 2), (0, 2, 1), (1, 2, 0))


@dataclass
class SolverOptions:
    """Which strategies the solver may use, and whether it reports progress."""

    print_debug: bool = False
    one_pencil_rem_cell: bool = False
    one_pencil_rem_column: bool = False
    one_pencil_rem_row: bool = False
    one_pencil_rem_box: bool = False
    pointing_pencil_column: bool = False
    pointing_pencil_row: bool = False

    @classmethod
    def all(cls) -> SolverOptions:
        """Enable every strategy and debug output."""
        return cls(
            print_debug=True,
            one_pencil_rem_cell=True,
            one_pencil_rem_column=True,
            one_pencil_rem_row=True,
            one_pencil_rem_box=True,
            pointing_pencil_column=True,
            pointing_pencil_row=True,
        )


def _row(row: int) -> list[Pos]:
    return [(col, row) for col in range(9)]


def _column(col: int) -> list[Pos]:
    return [(col, row) for row in range(9)]


def _box(bcol: int, brow: int) -> list[Pos]:
    return [
        (bcol * 3 + icol, brow * 3 + irow) for irow in range(3) for icol in range(3)
    ]


def _boxes() -> Iterable[list[Pos]]:
    return (_box(bcol, brow) for brow in range(3) for bcol in range(3))


def is_solved(board: Board) -> bool:
    """Return whether every cell is filled and every unit holds each number once."""
    cols = [[0] * 9 for _ in range(9)]
    rows = [[0] * 9 for _ in range(9)]
    boxes = [[0] * 9 for _ in range(9)]
    for col, row, cell in board.iter_grid():
        if not cell.is_filled():
            return False
        n = cell.number - 1
        cols[col][n] += 1
        rows[row][n] += 1
        boxes[(row // 3) * 3 + col // 3][n] += 1
    return all(count == 1 for unit in chain(cols, rows, boxes) for count in unit)


def _init_pencils(board: Board) -> None:
    for cell in board.grid:
        if cell.is_empty():
            cell.pencil.possible_numbers = [True] * 9
    units = chain(
        (_row(r) for r in range(9)), (_column(c) for c in range(9)), _boxes()
    )
    for unit in units:
        cells = [board.get_cell(pos) for pos in unit]
        taken = {cell.number for cell in cells if cell.is_filled()}
        for cell in cells:
            if cell.is_empty():
                for n in taken:
                    cell.pencil.possible_numbers[n - 1] = False


def attempt_solve(board: Board, options: SolverOptions) -> bool:
    """Fill in the board as far as the enabled strategies allow.

    Returns whether the board ended up solved.
    """
    _init_pencils(board)

    stepped = True
    while stepped:
        if options.print_debug:
            print(render_full(board), end="")
        stepped = False

        if options.pointing_pencil_column:
            pointing_pencil_column(board, options)
        if options.pointing_pencil_row:
            pointing_pencil_row(board, options)

        if options.one_pencil_rem_cell:
            stepped |= one_pencil_rem_cell(board)
        if options.one_pencil_rem_column:
            stepped |= one_pencil_rem_column(board)
        if options.one_pencil_rem_row:
            stepped |= one_pencil_rem_row(board)
        if options.one_pencil_rem_box:
            stepped |= one_pencil_rem_box(board)

    return is_solved(board)


def one_pencil_rem_cell(board: Board) -> bool:
    """Fill every empty cell that has exactly one pencil mark left."""
    stepped = False
    for col, row, cell in board.iter_grid():
        marks = cell.pencil.possible_numbers
        if cell.is_empty() and sum(marks) == 1:
            n = marks.index(True) + 1
            print(f"placed a {n} by 1-pencil-rem-cell at {col},{row}")
            board.place_number((col, row), n)
            stepped = True
    return stepped


def _hidden_singles(board: Board, unit: list[Pos], label: str) -> bool:
    seen: dict[int, Optional[Pos]] = {}
    for pos in unit:
        cell = board.get_cell(pos)
        if not cell.is_empty():
            continue
        for index, marked in enumerate(cell.pencil.possible_numbers):
            if marked:
                seen[index] = pos if index not in seen else None
    stepped = False
    for index in sorted(seen):
        pos = seen[index]
        if pos is None:
            continue
        n = index + 1
        col, row = pos
        print(f"placed a {n} by 1-pencil-rem-{label} at {col},{row}")
        board.place_number(pos, n)
        stepped = True
    return stepped


def one_pencil_rem_column(board: Board) -> bool:
    """Place each number whose pencil mark appears only once in a column."""
    stepped = False
    for col in range(9):
        stepped |= _hidden_singles(board, _column(col), "column")
    return stepped


def one_pencil_rem_row(board: Board) -> bool:
    """Place each number whose pencil mark appears only once in a row."""
    stepped = False
    for row in range(9):
        stepped |= _hidden_singles(board, _row(row), "row")
    return stepped


def one_pencil_rem_box(board: Board) -> bool:
    """Place each number whose pencil mark appears only once in a 3x3 box."""
    stepped = False
    for unit in _boxes():
        stepped |= _hidden_singles(board, unit, "box")
    return stepped


def pointing_pencil_column(board: Board, options: SolverOptions) -> bool:
    """Erase marks outside a box when inside it they lie in one column only."""
    stepped = False
    for brow in range(3):
        for bcol in range(3):
            row1, row2 = brow * 3, (brow + 1) * 3
            for icol1, icol2, icolo in _TRIPLES:
                col1, col2, colo = bcol * 3 + icol1, bcol * 3 + icol2, bcol * 3 + icolo
                for n in range(1, 10):
                    if (
                        not board.has_pencil_in_range((col1, row1), (col1 + 1, row2), n)
                        and not board.has_pencil_in_range(
                            (col2, row1), (col2 + 1, row2), n
                        )
                        and board.has_pencil_in_range((colo, row1), (colo + 1, row2), n)
                    ):
                        if options.print_debug:
                            print(
                                f"erased pencil {n} by pointing-pencil-col "
                                f"({col1},{col2}) at box {bcol},{brow}"
                            )
                        board.remove_pencil_in_range((colo, 0), (colo + 1, row1), n)
                        board.remove_pencil_in_range((colo, row2), (colo + 1, 9), n)
                        stepped = True
    return stepped


def pointing_pencil_row(board: Board, options: SolverOptions) -> bool:
    """Erase marks outside a box when inside it they lie in one row only."""
    stepped = False
    for brow in range(3):
        for bcol in range(3):
            col1, col2 = bcol * 3, (bcol + 1) * 3
            for irow1, irow2, irowo in _TRIPLES:
                row1, row2, rowo = brow * 3 + irow1, brow * 3 + irow2, brow * 3 + irowo
                for n in range(1, 10):
                    if (
                        not board.has_pencil_in_range((col1, row1), (col2, row1 + 1), n)
                        and not board.has_pencil_in_range(
                            (col1, row2), (col2, row2 + 1), n
                        )
                        and board.has_pencil_in_range((col1, rowo), (col2, rowo + 1), n)
                    ):
                        if options.print_debug:
                            print(
                                f"erased pencil {n} by pointing-pencil-row "
                                f"({row1},{row2}) at box {bcol},{brow}"
                            )
                        board.remove_pencil_in_range((0, rowo), (col1, rowo + 1), n)
                        board.remove_pencil_in_range((col2, rowo), (9, rowo + 1), n)
                        stepped = True
    return stepped