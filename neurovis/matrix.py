"""A small dense matrix of floats, stored as nested lists."""

from __future__ import annotations

import random
from numbers import Real
from typing import Callable, Iterable, Sequence


class Matrix:
    """A rows x cols matrix of floats with the operations a small network needs."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, values: Iterable[Sequence[float]] = ()) -> None:
        data = [[float(v) for v in row] for row in values]
        width = len(data[0]) if data else 0
        if any(len(row) != width for row in data):
            raise ValueError("All matrix rows must have the same length")
        self._data = data
        self._rows = len(data)
        self._cols = width

    @classmethod
    def zeros(cls, rows: int, cols: int) -> "Matrix":
        """Return a rows x cols matrix filled with zeros."""
        if rows < 0 or cols < 0:
            raise ValueError("Matrix dimensions must not be negative")
        matrix = cls()
        matrix._data = [[0.0] * cols for _ in range(rows)]
        matrix._rows = rows
        matrix._cols = cols
        return matrix

    @classmethod
    def column(cls, values: Iterable[float]) -> "Matrix":
        """Return a single-column matrix holding the given values."""
        return cls([v] for v in values)

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def shape(self) -> tuple[int, int]:
        return self._rows, self._cols

    def transpose(self) -> "Matrix":
        result = Matrix.zeros(self._cols, self._rows)
        result._data = [list(col) for col in zip(*self._data)]
        return result

    def _require_same_shape(self, other: "Matrix", operation: str) -> None:
        if self.shape != other.shape:
            raise ValueError(f"Matrix dimensions do not match for {operation}")

    def hadamard(self, other: "Matrix") -> "Matrix":
        """Element-wise product of two matrices of the same shape."""
        self._require_same_shape(other, "Hadamard product")
        return self._combine(other, lambda a, b: a * b)

    def apply(self, func: Callable[[float], float]) -> "Matrix":
        """Return a new matrix with func applied to every element."""
        result = Matrix.zeros(self._rows, self._cols)
        result._data = [[func(v) for v in row] for row in self._data]
        return result

    def randomize(
        self,
        low: float = -1.0,
        high: float = 1.0,
        rng: random.Random | None = None,
    ) -> None:
        """Fill the matrix in place with uniform values from [low, high]."""
        generator = rng if rng is not None else _default_rng
        self._data = [
            [generator.uniform(low, high) for _ in row] for row in self._data
        ]

    def to_vector(self) -> list[float]:
        """Return the contents of a single-column matrix as a flat list."""
        if self._cols != 1:
            raise ValueError("Can only convert single-column matrix to vector")
        return [row[0] for row in self._data]

    def to_lists(self) -> list[list[float]]:
        """Return a copy of the contents as a list of rows."""
        return [list(row) for row in self._data]

    def _check_index(self, index: tuple[int, int]) -> tuple[int, int]:
        row, col = index
        if not (0 <= row < self._rows and 0 <= col < self._cols):
            raise IndexError("Matrix index out of range")
        return row, col

    def __getitem__(self, index: tuple[int, int]) -> float:
        row, col = self._check_index(index)
        return self._data[row][col]

    def __setitem__(self, index: tuple[int, int], value: float) -> None:
        row, col = self._check_index(index)
        self._data[row][col] = float(value)

    def _combine(
        self, other: "Matrix", op: Callable[[float, float], float]
    ) -> "Matrix":
        result = Matrix.zeros(self._rows, self._cols)
        result._data = [
            [op(a, b) for a, b in zip(mine, theirs)]
            for mine, theirs in zip(self._data, other._data)
        ]
        return result

    def __add__(self, other: "Matrix") -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        self._require_same_shape(other, "addition")
        return self._combine(other, lambda a, b: a + b)

    def __sub__(self, other: "Matrix") -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        self._require_same_shape(other, "subtraction")
        return self._combine(other, lambda a, b: a - b)

    def __mul__(self, scalar: float) -> "Matrix":
        if not isinstance(scalar, Real):
            return NotImplemented
        factor = float(scalar)
        return self.apply(lambda v: v * factor)

    def __rmul__(self, scalar: float) -> "Matrix":
        return self.__mul__(scalar)

    def __matmul__(self, other: "Matrix") -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        if self._cols != other._rows:
            raise ValueError("Matrix dimensions do not match for multiplication")
        result = Matrix.zeros(self._rows, other._cols)
        other_cols = list(zip(*other._data)) if other._rows else []
        if not other_cols:
            return result
        result._data = [
            [sum(a * b for a, b in zip(row, col)) for col in other_cols]
            for row in self._data
        ]
        return result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and self._data == other._data

    def __repr__(self) -> str:
        return f"Matrix({self._data!r})"

    def __str__(self) -> str:
        if self._rows == 0 and self._cols == 0:
            return "{Empty Matrix}\n"
        return "".join(
            "[" + ", ".join(f"{v:.4f}" for v in row) + "]\n" for row in self._data
        )


_default_rng = random.Random()