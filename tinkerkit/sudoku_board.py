"""A 9x9 sudoku board."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Sequence

from tinkerkit.sudoku_cell import Cell
from tinkerkit.sudoku_pos import PosLike, pos_to_box, to_index, to_pos


@dataclass
class Board:
    """Eighty-one cells stored row by row."""

    grid: list[Cell] = field(default_factory=lambda: [Cell() for _ in range(81)])

    def get_cell(self, p: PosLike) -> Cell:
        index = to_index(p)
        if not 0 <= index < len(self.grid):
            raise IndexError(f"position {p!r} is off the board")
        return self.grid[index]

    def place_number(self, pos: Sequence[int], n: int) -> None:
        """Fill an empty cell and erase ``n`` from the marks of its peers."""
        col, row = to_pos(pos)
        cell = self.get_cell((col, row))
        if not cell.is_empty():
            return
        cell.set_fill(n)
        cols, rows = pos_to_box((col, row))
        peers = (
            [(c, row) for c in range(9)]
            + [(col, r) for r in range(9)]
            + [(c, r) for r in rows for c in cols]
        )
        for peer in peers:
            self.get_cell(peer).set_pencil(n, False)

    def _cells_in_range(self, pos1: Sequence[int], pos2: Sequence[int]) -> Iterator[Cell]:
        col1, row1 = to_pos(pos1)
        col2, row2 = to_pos(pos2)
        for row in range(row1, row2):
            for col in range(col1, col2):
                yield self.get_cell((col, row))

    def remove_pencil_in_range(
        self, pos1: Sequence[int], pos2: Sequence[int], n: int
    ) -> None:
        """Erase mark ``n`` in the half-open rectangle ``[pos1, pos2)``."""
        for cell in self._cells_in_range(pos1, pos2):
            cell.set_pencil(n, False)

    def has_pencil_in_range(
        self, pos1: Sequence[int], pos2: Sequence[int], n: int
    ) -> bool:
        """Return whether any cell in ``[pos1, pos2)`` has mark ``n``."""
        return any(cell.has_pencil(n) for cell in self._cells_in_range(pos1, pos2))

    def all_have_pencil_in_range(
        self, pos1: Sequence[int], pos2: Sequence[int], n: int
    ) -> bool:
        """Return whether every cell in ``[pos1, pos2)`` has mark ``n``."""
        return all(cell.has_pencil(n) for cell in self._cells_in_range(pos1, pos2))

    def iter_grid(self) -> Iterator[tuple[int, int, Cell]]:
        """Yield ``(column, row, cell)`` for every cell, row by row."""
        for row in range(9):
            for col in range(9):
                yield col, row, self.get_cell((col, row))