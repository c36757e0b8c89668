"""Square matrices with determinants, inversion and tuple transformation."""

from __future__ import annotations

from typing import Iterable, Sequence

from .tuples import EPSILON, Tuple


def is_invertible(det: float) -> bool:
    """A determinant whose magnitude is below EPSILON counts as singular."""
    return abs(det) >= EPSILON


class Matrix:
    """An immutable square matrix of floats."""

    __slots__ = ("_rows",)

    def __init__(self, rows: Iterable[Iterable[float]]):
        data = tuple(tuple(float(v) for v in row) for row in rows)
        if not data or any(len(row) != len(data) for row in data):
            raise ValueError("matrix must be square and non-empty")
        self._rows = data

    @classmethod
    def identity(cls) -> Matrix:
        return cls([[1.0 if i == j else 0.0 for j in range(4)] for i in range(4)])

    @classmethod
    def orientation(cls, left: Tuple, true_up: Tuple, forward: Tuple) -> Matrix:
        """Rows are left, true_up and the negated forward direction."""
        return cls([
            [left.x, left.y, left.z, 0],
            [true_up.x, true_up.y, true_up.z, 0],
            [-forward.x, -forward.y, -forward.z, 0],
            [0, 0, 0, 1],
        ])

    @property
    def size(self) -> int:
        return len(self._rows)

    def __getitem__(self, index):
        if isinstance(index, tuple):
            row, col = index
            return self._rows[row][col]
        return self._rows[index]

    def __iter__(self):
        return iter(self._rows)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._rows == other._rows

    def __hash__(self) -> int:
        return hash(self._rows)

    def __repr__(self) -> str:
        return f"Matrix({[list(r) for r in self._rows]!r})"

    def __matmul__(self, other):
        if isinstance(other, Matrix):
            if other.size != self.size:
                raise ValueError("matrix sizes differ")
            columns = list(zip(*other._rows))
            return Matrix([
                [sum(a * b for a, b in zip(row, col)) for col in columns]
                for row in self._rows
            ])
        if isinstance(other, Tuple):
            if self.size != 4:
                raise ValueError("only a 4x4 matrix transforms a tuple")
            return Tuple(*(sum(a * b for a, b in zip(row, other)) for row in self._rows))
        return NotImplemented

    def transpose(self) -> Matrix:
        return Matrix(zip(*self._rows))

    def submatrix(self, row: int, col: int) -> Matrix:
        """The matrix with the given row and column removed."""
        if self.size < 2:
            raise ValueError("a 1x1 matrix has no submatrix")
        return Matrix(
            [v for j, v in enumerate(r) if j != col]
            for i, r in enumerate(self._rows) if i != row
        )

    def minor(self, row: int, col: int) -> float:
        return self.submatrix(row, col).determinant()

    def cofactor(self, row: int, col: int) -> float:
        minor = self.minor(row, col)
        return minor if (row + col) % 2 == 0 else -minor

    def determinant(self) -> float:
        rows: Sequence[Sequence[float]] = self._rows
        if self.size == 1:
            return rows[0][0]
        if self.size == 2:
            return rows[0][0] * rows[1][1] - rows[0][1] * rows[1][0]
        return sum(value * self.cofactor(0, col) for col, value in enumerate(rows[0]))

    def inverse(self) -> Matrix:
        """The inverse; a singular matrix yields the 4x4 identity instead."""
        det = self.determinant()
        if not is_invertible(det):
            return Matrix.identity()
        n = self.size
        return Matrix([[self.cofactor(col, row) / det for col in range(n)] for row in range(n)])