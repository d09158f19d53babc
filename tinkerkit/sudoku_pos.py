"""Positions on a 9x9 sudoku grid as ``(column, row)`` pairs."""

from __future__ import annotations

from typing import Sequence, Union

Pos = tuple[int, int]
PosLike = Union[Sequence[int], int]


def to_pos(p: Sequence[int]) -> Pos:
    """Turn a two-element sequence into a ``(column, row)`` tuple."""
    if isinstance(p, (int, str, bytes)):
        raise TypeError(f"not a position: {p!r}")
    try:
        col, row = p
    except (TypeError, ValueError) as exc:
        raise TypeError(f"not a position: {p!r}") from exc
    return col, row


def to_index(p: PosLike) -> int:
    """Return the flat grid index of a position; an int is already an index."""
    if isinstance(p, int) and not isinstance(p, bool):
        return p
    col, row = to_pos(p)
    return row * 9 + col


def pos_to_box(pos: Sequence[int]) -> tuple[range, range]:
    """Return the column and row ranges of the 3x3 box holding ``pos``."""
    col, row = to_pos(pos)
    bcol, brow = col // 3, row // 3
    return range(bcol * 3, (bcol + 1) * 3), range(brow * 3, (brow + 1) * 3)