"""Fibonacci numbers bounded to fixed-width unsigned integers."""


def _fib(number: int, bits: int) -> int:
    if number < 0:
        raise ValueError("fibonacci index must be non-negative")
    if number == 0:
        return 0
    if number <= 2:
        return 1
    limit = 1 << bits
    prev, current = 1, 1
    for _ in range(number - 2):
        prev, current = current, prev + current
        if current >= limit:
            raise OverflowError(f"fibonacci({number}) does not fit in {bits} bits")
    return current


def fib_u32(number: int) -> int:
    """Return the Fibonacci number at ``number``, limited to 32 bits."""
    return _fib(number, 32)


def fib_u64(number: int) -> int:
    """Return the Fibonacci number at ``number``, limited to 64 bits."""
    return _fib(number, 64)