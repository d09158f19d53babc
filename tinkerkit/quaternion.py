"""Quaternions over ints or floats."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Union

Number = Union[int, float]


def _div(x: Number, y: Number) -> Number:
    """Divide, truncating for ints and following IEEE-754 for floats."""
    if isinstance(x, int) and isinstance(y, int):
        if y == 0:
            raise ZeroDivisionError("integer division by zero")
        quotient = abs(x) // abs(y)
        return -quotient if (x < 0) != (y < 0) else quotient
    try:
        return x / y
    except ZeroDivisionError:
        if x == 0 or math.isnan(x):
            return math.nan
        return math.copysign(math.inf, x) * math.copysign(1.0, y)


@dataclass(frozen=True)
class Quaternion:
    """A quaternion ``a + b*i + c*j + d*k``."""

    a: Number = 0
    b: Number = 0
    c: Number = 0
    d: Number = 0

    def __iter__(self) -> Iterator[Number]:
        return iter((self.a, self.b, self.c, self.d))

    def conjugate(self) -> Quaternion:
        return Quaternion(self.a, -self.b, -self.c, -self.d)

    def norm2(self) -> Number:
        """Return the squared norm."""
        return self.a * self.a + self.b * self.b + self.c * self.c + self.d * self.d

    def norm(self) -> Number:
        """Return the norm; integer quaternions use the integer square root."""
        if all(isinstance(x, int) for x in self):
            return math.isqrt(self.norm2())
        return math.sqrt(self.norm2())

    def normalize(self) -> Quaternion:
        """Return this quaternion scaled to a norm of one."""
        return self / self.norm()

    def recip(self) -> Quaternion:
        """Return the multiplicative inverse."""
        return self.conjugate() / self.norm2()

    def rot_conj(self, half_angle: float) -> Quaternion:
        """Return the unit quaternion rotating by ``half_angle`` about this pure axis."""
        if self.a != 0:
            raise ValueError("rotation axis must be a pure quaternion")
        s, c = math.sin(half_angle), math.cos(half_angle)
        return Quaternion(c, 0.0, 0.0, 0.0) + self * s

    def __neg__(self) -> Quaternion:
        return Quaternion(-self.a, -self.b, -self.c, -self.d)

    def __add__(self, other: object) -> Quaternion:
        if not isinstance(other, Quaternion):
            return NotImplemented
        return Quaternion(*(x + y for x, y in zip(self, other)))

    def __sub__(self, other: object) -> Quaternion:
        if not isinstance(other, Quaternion):
            return NotImplemented
        return Quaternion(*(x - y for x, y in zip(self, other)))

    def __mul__(self, other: object) -> Quaternion:
        if isinstance(other, Quaternion):
            a, b, c, d = self
            ra, rb, rc, rd = other
            return Quaternion(
                a * ra - b * rb - c * rc - d * rd,
                a * rb + b * ra + c * rd - d * rc,
                a * rc + c * ra + d * rb - b * rd,
                a * rd + d * ra + b * rc - c * rb,
            )
        if isinstance(other, (int, float)):
            return Quaternion(*(x * other for x in self))
        return NotImplemented

    def __rmul__(self, other: object) -> Quaternion:
        if isinstance(other, (int, float)):
            return Quaternion(*(other * x for x in self))
        return NotImplemented

    def __truediv__(self, other: object) -> Quaternion:
        if not isinstance(other, (int, float)):
            return NotImplemented
        return Quaternion(*(_div(x, other) for x in self))