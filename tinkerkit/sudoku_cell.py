"""Sudoku cells and their pencil marks."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


def _check_number(n: int) -> int:
    if not 1 <= n <= 9:
        raise ValueError(f"sudoku number must be between 1 and 9, got {n}")
    return n


@dataclass
class Pencil:
    """The candidate numbers still possible in an empty cell."""

    possible_numbers: list[bool] = field(default_factory=lambda: [False] * 9)


@dataclass
class Cell:
    """A cell that is either filled with a number or empty with pencil marks."""

    number: Optional[int] = None
    pencil: Pencil = field(default_factory=Pencil)

    @classmethod
    def filled(cls, n: int) -> Cell:
        return cls(number=_check_number(n))

    def is_empty(self) -> bool:
        return self.number is None

    def is_filled(self) -> bool:
        return self.number is not None

    def has_pencil(self, n: int) -> bool:
        """Return whether ``n`` is pencilled in; filled cells have no marks."""
        _check_number(n)
        return self.is_empty() and self.pencil.possible_numbers[n - 1]

    def set_pencil(self, n: int, state: bool) -> None:
        """Set the pencil mark for ``n``; ignored on filled cells."""
        _check_number(n)
        if self.is_empty():
            self.pencil.possible_numbers[n - 1] = state

    def set_fill(self, n: int) -> None:
        self.number = _check_number(n)
        self.pencil = Pencil()

    def __str__(self) -> str:
        return "_" if self.number is None else str(self.number)