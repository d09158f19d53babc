"""Solvers for linear and quadratic equations."""

from __future__ import annotations

import math
from enum import Enum

from tinkerkit.complex import Complex


class ErrorType(Enum):
    NO_SOLUTIONS = "no solutions"
    FALSE_DISCRIMINANT = "false discriminant"
    UNKNOWN = "unknown failure"


class PolynomialError(Exception):
    """Raised when an equation cannot be solved."""

    def __init__(self, kind: ErrorType) -> None:
        super().__init__(kind.value)
        self.kind = kind


def solve_linear(a: Complex, b: Complex) -> Complex:
    """Solve ``a*x + b = 0``."""
    if a.is_zero():
        raise PolynomialError(ErrorType.NO_SOLUTIONS)
    return -b / a


def solve_quadratic(a: float, b: float, c: float) -> tuple[Complex, Complex]:
    """Solve ``a*x^2 + b*x + c = 0``, returning both roots."""
    if a == 0.0:
        root = solve_linear(Complex(b, 0.0), Complex(c, 0.0))
        return root, root

    k = -b / (a * 2.0)
    d = k * k - c / a
    if d < 0.0:
        i = math.sqrt(-d) / (a * 2.0)
        return Complex(k, i), Complex(k, -i)
    f = math.sqrt(d)
    return Complex(k - f, 0.0), Complex(k + f, 0.0)