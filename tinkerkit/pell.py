"""Several ways of computing Pell numbers, bounded to 128-bit unsigned values."""

from __future__ import annotations

_LIMIT = 1 << 128

_PELL_VALUES: list[int] = [0, 1]


def _check_index(n: int) -> None:
    if n < 0:
        raise ValueError("Pell index must be non-negative")


def _fits(value: int) -> int:
    if value >= _LIMIT:
        raise OverflowError("Pell number does not fit in 128 bits")
    return value


def _extend(values: list[int], n: int) -> int:
    while len(values) <= n:
        values.append(_fits(2 * values[-1] + values[-2]))
    return values[n]


def pell_memo(n: int) -> int:
    """Return the n-th Pell number using a module-wide cache."""
    _check_index(n)
    return _extend(_PELL_VALUES, n)


def pell_recurse(n: int) -> int:
    """Return the n-th Pell number by plain recursion."""
    _check_index(n)
    if n <= 1:
        return n
    return _fits(pell_recurse(n - 2) + 2 * pell_recurse(n - 1))


class PellGenerator:
    """Caches Pell numbers as they are computed."""

    def __init__(self) -> None:
        self.values: list[int] = [0, 1]

    def get(self, n: int) -> int:
        _check_index(n)
        return _extend(self.values, n)


def pell_generator(n: int) -> int:
    """Return the n-th Pell number using a fresh generator."""
    return PellGenerator().get(n)


def pell_fib(n: int) -> int:
    """Return the n-th Pell number iteratively."""
    _check_index(n)
    if n < 2:
        return n
    a, b = 0, 1
    for _ in range(n - 1):
        a, b = b, _fits(2 * b + a)
    return b