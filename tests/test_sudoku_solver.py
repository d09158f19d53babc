from dataclasses import replace

from tinkerkit.sudoku_board import Board
from tinkerkit.sudoku_parse import parse_str_1
from tinkerkit.sudoku_solver import (
    SolverOptions,
    attempt_solve,
    is_solved,
    one_pencil_rem_box,
    one_pencil_rem_cell,
    one_pencil_rem_column,
    one_pencil_rem_row,
    pointing_pencil_column,
    pointing_pencil_row,
)

SOLUTION = [
    "534678912",
    "672195348",
    "198342567",
    "859761423",
    "426853791",
    "713924856",
    "961537284",
    "287419635",
    "345286179",
]

PUZZLE = [
    "53..7....",
    "6..195...",
    ".98....6.",
    "8...6...3",
    "4..8.3..1",
    "7...2...6",
    ".6....28.",
    "...419..5",
    "....8..79",
]


def _quiet_all():
    return replace(SolverOptions.all(), print_debug=False)


def _nearly_solved():
    lines = []
    for row, line in enumerate(SOLUTION):
        col = (row * 4) % 9
        lines.append(line[:col] + "." + line[col + 1:])
    return parse_str_1("\n".join(lines))


def _set_marks(board, pos, *numbers):
    cell = board.get_cell(pos)
    for n in numbers:
        cell.set_pencil(n, True)


def test_options_all_enables_everything():
    options = SolverOptions.all()
    assert options.print_debug
    assert options.one_pencil_rem_cell and options.one_pencil_rem_column
    assert options.one_pencil_rem_row and options.one_pencil_rem_box
    assert options.pointing_pencil_column and options.pointing_pencil_row


def test_is_solved_on_complete_grid():
    assert is_solved(parse_str_1("\n".join(SOLUTION)))


def test_is_solved_false_with_blank():
    assert not is_solved(_nearly_solved())


def test_is_solved_false_with_swapped_cells():
    lines = list(SOLUTION)
    lines[0] = "354678912"
    assert not is_solved(parse_str_1("\n".join(lines)))


def test_attempt_solve_fills_single_blanks():
    board = _nearly_solved()
    assert attempt_solve(board, _quiet_all())
    rendered = ["".join(str(board.get_cell((c, r))) for c in range(9)) for r in range(9)]
    assert rendered == SOLUTION


def test_attempt_solve_is_sound_on_puzzle():
    board = parse_str_1("\n".join(PUZZLE))
    solved = attempt_solve(board, _quiet_all())
    for col, row, cell in board.iter_grid():
        if cell.is_filled():
            assert cell.number == int(SOLUTION[row][col])
    assert solved == is_solved(board)
    assert solved == all(cell.is_filled() for cell in board.grid)


def test_attempt_solve_without_strategies_leaves_board():
    board = _nearly_solved()
    assert not attempt_solve(board, SolverOptions())
    assert sum(cell.is_empty() for cell in board.grid) == 9


def test_attempt_solve_prints_board_in_debug(capsys):
    board = parse_str_1("\n".join(SOLUTION))
    assert attempt_solve(board, SolverOptions(print_debug=True))
    assert "+---+---+---+---+---+---+---+---+---+" in capsys.readouterr().out


def test_one_pencil_rem_cell_ignores_multiple_marks():
    board = Board()
    _set_marks(board, (3, 3), 1, 2)
    assert not one_pencil_rem_cell(board)
    assert board.get_cell((3, 3)).is_empty()


def test_one_pencil_rem_row_places_unique_mark():
    board = Board()
    _set_marks(board, (3, 2), 7)
    _set_marks(board, (3, 6), 7)
    assert one_pencil_rem_row(board)
    assert board.get_cell((3, 2)).number == 7
    assert board.get_cell((3, 6)).is_empty()
    assert not board.get_cell((3, 6)).has_pencil(7)


def test_one_pencil_rem_box_places_unique_mark():
    board = Board()
    _set_marks(board, (7, 7), 9)
    assert one_pencil_rem_box(board)
    assert board.get_cell((7, 7)).number == 9


def test_one_pencil_rem_box_skips_repeated_mark():
    board = Board()
    _set_marks(board, (0, 0), 1)
    _set_marks(board, (1, 1), 1)
    assert not one_pencil_rem_box(board)
    assert board.get_cell((0, 0)).is_empty()
    assert board.get_cell((1, 1)).is_empty()


def test_strategies_do_nothing_on_unmarked_board():
    board = Board()
    options = SolverOptions()
    assert not one_pencil_rem_cell(board)
    assert not one_pencil_rem_column(board)
    assert not one_pencil_rem_row(board)
    assert not one_pencil_rem_box(board)
    assert not pointing_pencil_column(board, options)
    assert not pointing_pencil_row(board, options)


def test_pointing_pencil_column_erases_outside_box():
    board = Board()
    _set_marks(board, (2, 1), 4)
    _set_marks(board, (2, 5), 4)
    assert pointing_pencil_column(board, SolverOptions())
    assert board.get_cell((2, 1)).has_pencil(4)
    assert not board.get_cell((2, 5)).has_pencil(4)


def test_pointing_pencil_row_erases_outside_box():
    board = Board()
    _set_marks(board, (1, 2), 4)
    _set_marks(board, (5, 2), 4)
    assert pointing_pencil_row(board, SolverOptions())
    assert board.get_cell((1, 2)).has_pencil(4)
    assert not board.get_cell((5, 2)).has_pencil(4)


def test_pointing_debug_output(capsys):
    board = Board()
    _set_marks(board, (2, 1), 4)
    pointing_pencil_column(board, SolverOptions(print_debug=True))
    assert "by pointing-pencil-col" in capsys.readouterr().out