"""Square matrices of floats with arithmetic, comparison and determinant."""

from __future__ import annotations

import math
from numbers import Integral, Real
from typing import Callable, Iterator, List

_Rows = List[List[float]]


def _check_index(index: object, length: int, what: str) -> int:
    if isinstance(index, bool) or not isinstance(index, Integral):
        raise TypeError(f"{what} index must be an integer")
    if not 0 <= index < length:
        raise IndexError(f"{what} index out of bounds")
    return int(index)


class _Row:
    """A writable view of one matrix row with bounds-checked columns."""

    __slots__ = ("_values",)

    def __init__(self, values: List[float]) -> None:
        self._values = values

    def __getitem__(self, col: int) -> float:
        return self._values[_check_index(col, len(self._values), "Column")]

    def __setitem__(self, col: int, value: float) -> None:
        self._values[_check_index(col, len(self._values), "Column")] = float(value)

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[float]:
        return iter(self._values)

    def __repr__(self) -> str:
        return f"_Row({self._values!r})"


def _determinant(rows: _Rows) -> float:
    n = len(rows)
    if n == 1:
        return rows[0][0]
    if n == 2:
        return rows[0][0] * rows[1][1] - rows[0][1] * rows[1][0]
    det = 0.0
    for p, pivot in enumerate(rows[0]):
        minor = [row[:p] + row[p + 1:] for row in rows[1:]]
        sign = 1.0 if p % 2 == 0 else -1.0
        det += sign * pivot * _determinant(minor)
    return det


class SquareMat:
    """An N x N matrix of floats, initialised to zeros.

    Comparison operators compare the sums of all elements.
    """

    __slots__ = ("_rows",)

    def __init__(self, size: int) -> None:
        if isinstance(size, bool) or not isinstance(size, Integral):
            raise TypeError("Matrix size must be an integer.")
        if size <= 0:
            raise ValueError("Matrix size must be positive.")
        self._rows: _Rows = [[0.0] * int(size) for _ in range(int(size))]

    @classmethod
    def _from_rows(cls, rows: _Rows) -> "SquareMat":
        mat = cls.__new__(cls)
        mat._rows = rows
        return mat

    @property
    def size(self) -> int:
        """The number of rows (and columns)."""
        return len(self._rows)

    def __len__(self) -> int:
        return len(self._rows)

    def __getitem__(self, row: int) -> _Row:
        return _Row(self._rows[_check_index(row, len(self._rows), "Row")])

    def copy(self) -> "SquareMat":
        """Return an independent copy."""
        return self._from_rows([list(row) for row in self._rows])

    def __str__(self) -> str:
        return "".join(
            "[ " + "".join(f"{value:g} " for value in row) + "]\n"
            for row in self._rows
        )

    # helpers

    def _map(self, func: Callable[[float], float]) -> "SquareMat":
        return self._from_rows([[func(v) for v in row] for row in self._rows])

    def _zip(self, other: "SquareMat", func: Callable[[float, float], float],
             action: str) -> "SquareMat":
        if self.size != other.size:
            raise ValueError(f"Matrix sizes do not match for {action}.")
        return self._from_rows([
            [func(a, b) for a, b in zip(row, other_row)]
            for row, other_row in zip(self._rows, other._rows)
        ])

    def _matmul(self, other: "SquareMat") -> "SquareMat":
        if self.size != other.size:
            raise ValueError("Matrix sizes must match for multiplication.")
        columns = list(zip(*other._rows))
        return self._from_rows([
            [sum(a * b for a, b in zip(row, col)) for col in columns]
            for row in self._rows
        ])

    def _modulo(self, scalar: int) -> "SquareMat":
        if scalar == 0:
            raise ZeroDivisionError("Modulo by zero is not allowed.")
        divisor = float(scalar)
        return self._map(lambda v: math.fmod(v, divisor))

    def _divide(self, scalar: float) -> "SquareMat":
        if scalar == 0.0:
            raise ZeroDivisionError("Division by zero is not allowed.")
        return self._map(lambda v: v / scalar)

    # arithmetic

    def __add__(self, other: "SquareMat") -> "SquareMat":
        if not isinstance(other, SquareMat):
            return NotImplemented
        return self._zip(other, lambda a, b: a + b, "addition")

    def __neg__(self) -> "SquareMat":
        return self._map(lambda v: 0.0 if v == 0.0 else -v)

    def __sub__(self, other: "SquareMat") -> "SquareMat":
        if not isinstance(other, SquareMat):
            return NotImplemented
        return self._zip(other, lambda a, b: a - b, "subtraction")

    def __mul__(self, other: object) -> "SquareMat":
        """Matrix product with a matrix, or scaling by a number."""
        if isinstance(other, SquareMat):
            return self._matmul(other)
        if isinstance(other, Real):
            scalar = float(other)
            return self._map(lambda v: v * scalar)
        return NotImplemented

    def __rmul__(self, scalar: object) -> "SquareMat":
        if isinstance(scalar, Real):
            return self * scalar
        return NotImplemented

    def __mod__(self, other: object) -> "SquareMat":
        """Element-wise product with a matrix, or fmod of each element by an int."""
        if isinstance(other, SquareMat):
            return self._zip(other, lambda a, b: a * b,
                             "element-wise multiplication")
        if isinstance(other, Integral):
            return self._modulo(int(other))
        return NotImplemented

    def __truediv__(self, scalar: object) -> "SquareMat":
        if isinstance(scalar, Real):
            return self._divide(float(scalar))
        return NotImplemented

    def __pow__(self, power: object) -> "SquareMat":
        if isinstance(power, bool) or not isinstance(power, Integral):
            return NotImplemented
        if power < 0:
            raise ValueError("Negative powers not supported.")
        result = self._from_rows([
            [1.0 if i == j else 0.0 for j in range(self.size)]
            for i in range(self.size)
        ])
        for _ in range(int(power)):
            result = result._matmul(self)
        return result

    def increment(self) -> "SquareMat":
        """Add one to every element in place and return self."""
        self._rows = [[v + 1.0 for v in row] for row in self._rows]
        return self

    def decrement(self) -> "SquareMat":
        """Subtract one from every element in place and return self."""
        self._rows = [[v - 1.0 for v in row] for row in self._rows]
        return self

    def transpose(self) -> "SquareMat":
        return self._from_rows([list(col) for col in zip(*self._rows)])

    def __invert__(self) -> "SquareMat":
        return self.transpose()

    def determinant(self) -> float:
        """Determinant by cofactor expansion along the first row."""
        return _determinant(self._rows)

    def total(self) -> float:
        """Sum of all elements."""
        result = 0.0
        for row in self._rows:
            for value in row:
                result += value
        return result

    # comparisons by element sum

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SquareMat):
            return NotImplemented
        return self.total() == other.total()

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, SquareMat):
            return NotImplemented
        return not self == other

    def __lt__(self, other: "SquareMat") -> bool:
        if not isinstance(other, SquareMat):
            return NotImplemented
        return self.total() < other.total()

    def __gt__(self, other: "SquareMat") -> bool:
        if not isinstance(other, SquareMat):
            return NotImplemented
        return self.total() > other.total()

    def __le__(self, other: "SquareMat") -> bool:
        if not isinstance(other, SquareMat):
            return NotImplemented
        return self.total() <= other.total()

    def __ge__(self, other: "SquareMat") -> bool:
        if not isinstance(other, SquareMat):
            return NotImplemented
        return self.total() >= other.total()

    __hash__ = None  # type: ignore[assignment]

    # in-place operators

    def __iadd__(self, other: "SquareMat") -> "SquareMat":
        if not isinstance(other, SquareMat):
            return NotImplemented
        self._rows = (self + other)._rows
        return self

    def __isub__(self, other: "SquareMat") -> "SquareMat":
        if not isinstance(other, SquareMat):
            return NotImplemented
        self._rows = (self - other)._rows
        return self

    def __imul__(self, other: object) -> "SquareMat":
        """Element-wise product with a matrix, or scaling by a number."""
        if isinstance(other, SquareMat):
            self._rows = (self % other)._rows
        elif isinstance(other, Real):
            self._rows = (self * other)._rows
        else:
            return NotImplemented
        return self

    def __itruediv__(self, scalar: object) -> "SquareMat":
        if not isinstance(scalar, Real):
            return NotImplemented
        self._rows = self._divide(float(scalar))._rows
        return self

    def __imod__(self, other: object) -> "SquareMat":
        if isinstance(other, SquareMat) or isinstance(other, Integral):
            self._rows = (self % other)._rows
            return self
        return NotImplemented