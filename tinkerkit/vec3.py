"""Three-component vectors of floats."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator


def _recip(x: float) -> float:
    """Return ``1 / x`` with IEEE-754 behaviour at zero."""
    if x == 0:
        return math.copysign(math.inf, x)
    return 1.0 / x


@dataclass(frozen=True)
class Vec3:
    """A vector ``(x, y, z)``."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def zero(cls) -> Vec3:
        return cls(0.0, 0.0, 0.0)

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z))

    def length(self) -> float:
        return math.sqrt(self.length2())

    def length2(self) -> float:
        """Return the squared length."""
        return self.x * self.x + self.y * self.y + self.z * self.z

    def dot(self, other: Vec3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def normalize(self) -> Vec3:
        """Return this vector scaled to unit length."""
        return self / self.length()

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __add__(self, other: object) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: object) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: object) -> Vec3:
        if isinstance(other, Vec3):
            return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, (int, float)):
            return Vec3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, other: object) -> Vec3:
        if isinstance(other, (int, float)):
            return self * other
        return NotImplemented

    def __truediv__(self, other: object) -> Vec3:
        if not isinstance(other, (int, float)):
            return NotImplemented
        return self * _recip(float(other))


Point3 = Vec3