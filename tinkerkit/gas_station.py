"""Per-station fuel balances and their running totals around a circuit."""

from __future__ import annotations

from typing import Sequence


def station_deltas(gas: Sequence[int], offset: int) -> list[int]:
    """Return ``gas[i] - gas[(i + offset) % n]`` for every station."""
    n = len(gas)
    if not 0 <= offset < n:
        raise ValueError(f"offset {offset} must be in 0..{n}")
    return [gas[i] - gas[(i + offset) % n] for i in range(n)]


def running_totals(delta: Sequence[int]) -> list[list[int]]:
    """Return totals where ``totals[t][d]`` sums ``t`` deltas starting at station ``d``.

    There are ``n`` rows and ``n + 1`` columns; row 0 and the last column stay zero.
    """
    n = len(delta)
    totals = [[0] * (n + 1) for _ in range(n)]
    for t in range(1, n):
        previous, current = totals[t - 1], totals[t]
        for d in range(n):
            current[d] = previous[d] + delta[(d + t - 1) % n]
    return totals