"""Parsing a leading integer out of a string, saturating at 32 bits."""

from __future__ import annotations

import re

I32_MIN = -(1 << 31)
I32_MAX = (1 << 31) - 1

_DIGITS = re.compile(r"[0-9]*")


def my_atoi(s: str) -> int:
    """Read an optionally signed integer after leading spaces.

    Anything unparsable yields 0; out-of-range values clamp to the 32-bit limits.
    """
    rest = s.lstrip(" ")
    sign = 1
    if rest[:1] in ("-", "+"):
        sign = -1 if rest[0] == "-" else 1
        rest = rest[1:]
    rest = rest.lstrip("0")
    digits = _DIGITS.match(rest).group()
    if not digits:
        return 0
    result = 0
    for ch in digits:
        result = max(I32_MIN, min(I32_MAX, result * 10 + sign * int(ch)))
    return result