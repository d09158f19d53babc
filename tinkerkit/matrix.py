"""A dense row-major two-dimensional matrix."""

from __future__ import annotations

from dataclasses import dataclass, field, replace


@dataclass
class Matrix2D:
    """A matrix stored row by row in ``data``."""

    columns: int
    rows: int
    data: list[float] = field(default_factory=list)

    @classmethod
    def new_empty(cls, columns: int, rows: int) -> Matrix2D:
        """Create a matrix with the given shape and no data yet."""
        return cls(columns, rows, [])

    @classmethod
    def new_zero(cls, columns: int, rows: int) -> Matrix2D:
        return cls.new_with_value(columns, rows, 0.0)

    @classmethod
    def new_with_value(cls, columns: int, rows: int, value: float) -> Matrix2D:
        return cls(columns, rows, [value] * (columns * rows))

    @classmethod
    def from_vec(cls, columns: int, rows: int, values: list[float]) -> Matrix2D:
        return cls(columns, rows, list(values))

    def fill(self, value: float) -> None:
        """Set every stored element to ``value``."""
        self.data = [value] * len(self.data)

    def _check_elementwise(self, other: Matrix2D, action: str) -> None:
        if self.columns != other.columns and self.rows != other.rows:
            raise ValueError(
                f"cannot {action} matrices of different sizes: "
                f"{self.columns}x{self.rows} and {other.columns}x{other.rows}"
            )
        if len(other.data) < len(self.data):
            raise IndexError("right-hand matrix holds fewer elements")

    def _map(self, func) -> Matrix2D:
        return replace(self, data=[func(x) for x in self.data])

    def __add__(self, other: object) -> Matrix2D:
        if isinstance(other, Matrix2D):
            self._check_elementwise(other, "add")
            return replace(self, data=[x + y for x, y in zip(self.data, other.data)])
        if isinstance(other, (int, float)):
            return self._map(lambda x: x + other)
        return NotImplemented

    def __sub__(self, other: object) -> Matrix2D:
        if isinstance(other, Matrix2D):
            self._check_elementwise(other, "subtract")
            return replace(self, data=[x - y for x, y in zip(self.data, other.data)])
        if isinstance(other, (int, float)):
            return self._map(lambda x: x - other)
        return NotImplemented

    def __mul__(self, other: object) -> Matrix2D:
        if isinstance(other, Matrix2D):
            return self._matmul(other)
        if isinstance(other, (int, float)):
            return self._map(lambda x: x * other)
        return NotImplemented

    def _matmul(self, other: Matrix2D) -> Matrix2D:
        if self.columns != other.rows:
            raise ValueError(
                "cannot multiply: left column count differs from right row count"
            )
        if (
            len(self.data) < self.columns * self.rows
            or len(other.data) < other.columns * other.rows
        ):
            raise IndexError("matrix holds fewer elements than its shape requires")
        left_rows = [
            self.data[r * self.columns:(r + 1) * self.columns] for r in range(self.rows)
        ]
        right_columns = [
            other.data[c:other.columns * other.rows:other.columns]
            for c in range(other.columns)
        ]
        data = [
            sum((a * b for a, b in zip(row, col)), 0.0)
            for row in left_rows
            for col in right_columns
        ]
        return Matrix2D(other.columns, self.rows, data)