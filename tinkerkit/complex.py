"""Complex numbers with a plain real/imaginary representation."""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal


def _ieee_div(x: float, y: float) -> float:
    """Divide with IEEE-754 semantics instead of raising on zero."""
    try:
        return x / y
    except ZeroDivisionError:
        if x == 0 or math.isnan(x):
            return math.nan
        return math.copysign(math.inf, x) * math.copysign(1.0, y)


def _format_number(x: float) -> str:
    """Render a float the way a shortest round-trip decimal printer would."""
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "inf" if x > 0 else "-inf"
    value = Decimal(repr(float(x)))
    if value == value.to_integral_value():
        value = value.to_integral_value()
    return format(value, "f")


@dataclass(frozen=True)
class Complex:
    """A complex number ``real + imaginary * i``."""

    real: float = 0.0
    imaginary: float = 0.0

    def mag(self) -> float:
        """Return the magnitude ``sqrt(a^2 + b^2)``."""
        return math.sqrt(self.magsq())

    def magsq(self) -> float:
        """Return the squared magnitude."""
        return self.real * self.real + self.imaginary * self.imaginary

    def is_zero(self) -> bool:
        return self.real == 0.0 and self.imaginary == 0.0

    def conjugate(self) -> Complex:
        return Complex(self.real, -self.imaginary)

    def __str__(self) -> str:
        if -1e-10 < self.imaginary < 1e-10:
            return _format_number(self.real)
        if -1e-10 < self.real < 1e-10:
            return f"{_format_number(self.imaginary)}i"
        return f"({_format_number(self.real)} + {_format_number(self.imaginary)}i)"

    def __add__(self, other: object) -> Complex:
        if not isinstance(other, Complex):
            return NotImplemented
        return Complex(self.real + other.real, self.imaginary + other.imaginary)

    def __neg__(self) -> Complex:
        return Complex(-self.real, -self.imaginary)

    def __sub__(self, other: object) -> Complex:
        if not isinstance(other, Complex):
            return NotImplemented
        return Complex(self.real - other.real, self.imaginary - other.imaginary)

    def __mul__(self, other: object) -> Complex:
        if isinstance(other, Complex):
            return Complex(
                self.real * other.real - self.imaginary * other.imaginary,
                self.real * other.imaginary + self.imaginary * other.real,
            )
        if isinstance(other, (int, float)):
            return Complex(self.real * other, self.imaginary * other)
        return NotImplemented

    def __rmul__(self, other: object) -> Complex:
        if isinstance(other, (int, float)):
            return Complex(self.real * other, self.imaginary * other)
        return NotImplemented

    def __truediv__(self, other: object) -> Complex:
        if not isinstance(other, Complex):
            return NotImplemented
        d = other.real * other.real + other.imaginary * other.imaginary
        real = self.real * other.real + self.imaginary * other.imaginary
        imaginary = -self.real * other.imaginary + other.real * self.imaginary
        return Complex(_ieee_div(real, d), _ieee_div(imaginary, d))