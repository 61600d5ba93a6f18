"""Dense ``rows x cols`` matrix of floats with functional updates.

Every operation that looks like a mutation (replacing or scaling a row,
scaling the whole matrix) returns a new :class:`Matrix`; the backing
``numpy`` array is read-only and never shared with another matrix or handed
out to callers.
"""

from __future__ import annotations

import logging
import numbers
from typing import List, Optional, Sequence, Tuple

import numpy as np

from .config import get_config
from .errors import IndexOutOfBoundsError, InvalidArgumentError, ShapeMismatchError

logger = logging.getLogger(__name__)


def _ensure_size(value: object, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral) or int(value) < 0:
        raise InvalidArgumentError(f"{name} must be a non-negative integer, got {value!r}")
    return int(value)


def _ensure_index(value: object, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidArgumentError(f"{name} must be an integer, got {value!r}")
    return int(value)


def _accumulate(v1: np.ndarray, v2: np.ndarray) -> float:
    # left-to-right sum; numpy's pairwise/BLAS reductions round differently
    total = 0.0
    for term in np.multiply(v1, v2).tolist():
        total += term
    return total


def _readonly(data: np.ndarray) -> np.ndarray:
    data.setflags(write=False)
    return data


def _ensure_non_zero(scalar: float) -> None:
    if scalar == 0.0:
        raise InvalidArgumentError("The scalar should be non-zero")


class Matrix:
    """Represents a ``rows x cols`` matrix.

    >>> m = Matrix(3, 4)
    >>> m.shape
    (3, 4)
    """

    __slots__ = ("_data",)

    def __init__(self, rows: int, cols: int) -> None:
        rows = _ensure_size(rows, "rows")
        cols = _ensure_size(cols, "cols")
        self._data = _readonly(np.zeros((rows, cols), dtype=float))

    @classmethod
    def _wrap(cls, data: np.ndarray) -> "Matrix":
        # takes ownership of ``data``; callers pass freshly allocated arrays
        matrix = cls.__new__(cls)
        matrix._data = _readonly(np.asarray(data, dtype=float))
        return matrix

    # ------------------------------------------------------------------
    # Construction

    @classmethod
    def new(cls, rows: int, cols: int) -> "Matrix":
        """Return a ``rows x cols`` matrix filled with ``0.0``."""

        return cls(rows, cols)

    @classmethod
    def identity(cls, rows: int, cols: int) -> Optional["Matrix"]:
        """Return the identity matrix, or ``None`` when ``rows != cols``.

        A non-square request is not an error: identity matrices only exist
        for square shapes, so the caller gets nothing back.
        """

        rows = _ensure_size(rows, "rows")
        cols = _ensure_size(cols, "cols")
        if rows != cols:
            return None
        return cls._wrap(np.eye(rows, dtype=float))

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> "Matrix":
        """Build a matrix from a rectangular sequence of rows."""

        grid = [[float(value) for value in row] for row in rows]
        if not grid:
            return cls(0, 0)
        width = len(grid[0])
        for index, row in enumerate(grid):
            if len(row) != width:
                raise ShapeMismatchError(
                    f"Row {index} has {len(row)} columns, expected {width}"
                )
        return cls._wrap(np.array(grid, dtype=float).reshape(len(grid), width))

    # ------------------------------------------------------------------
    # Queries

    @property
    def rows(self) -> int:
        return int(self._data.shape[0])

    @property
    def cols(self) -> int:
        return int(self._data.shape[1])

    @property
    def shape(self) -> Tuple[int, int]:
        return self.rows, self.cols

    def to_list(self) -> List[List[float]]:
        return self._data.tolist()

    def is_square(self) -> bool:
        return self.rows == self.cols

    def get_principal(self) -> List[float]:
        """Return the entries of the principal diagonal, in row order."""

        if not self.is_square():
            raise ShapeMismatchError(
                f"The matrix is not a square matrix ({self.rows}x{self.cols})"
            )
        return np.diagonal(self._data).tolist()

    def get_row(self, row_num: int) -> List[float]:
        row_num = _ensure_index(row_num, "row_num")
        if not 0 <= row_num < self.rows:
            raise IndexOutOfBoundsError(f"The matrix does not contain row: {row_num}")
        return self._data[row_num].tolist()

    def get_col(self, col_num: int) -> List[float]:
        """Return column ``col_num`` as a list.

        An out-of-range column does not raise: a zero vector comes back
        instead. Its length is ``cols`` unless the library is configured with
        ``column_padding="rows"``.
        """

        col_num = _ensure_index(col_num, "col_num")
        if not 0 <= col_num < self.cols:
            padding = self.rows if get_config().column_padding == "rows" else self.cols
            logger.debug("Column %d is out of range, returning %d zeros", col_num, padding)
            return [0.0] * padding
        return self._data[:, col_num].tolist()

    # ------------------------------------------------------------------
    # Shape-preserving transforms

    def replace_row(self, row_num: int, row: Sequence[float]) -> "Matrix":
        """Return a copy of the matrix with row ``row_num`` replaced by ``row``.

        A row of the wrong length raises :class:`ShapeMismatchError`. An
        out-of-range ``row_num`` is a programming error and raises a plain
        :class:`IndexError`.
        """

        row_num = _ensure_index(row_num, "row_num")
        values = [float(value) for value in row]
        if len(values) != self.cols:
            raise ShapeMismatchError(
                f"The number of columns differ by {abs(self.cols - len(values))}"
            )
        if not 0 <= row_num < self.rows:
            raise IndexError(f"row index {row_num} out of range for {self.rows} rows")
        data = self._data.copy()
        data[row_num] = values
        return self._wrap(data)

    def scalar_row_mul(self, row_num: int, scalar: float) -> "Matrix":
        """Return a copy with every entry of row ``row_num`` multiplied by ``scalar``."""

        _ensure_non_zero(scalar)
        row_num = _ensure_index(row_num, "row_num")
        if not 0 <= row_num < self.rows:
            raise IndexOutOfBoundsError(f"The row {row_num} does not exist")
        data = self._data.copy()
        data[row_num] *= scalar
        return self._wrap(data)

    def scalar_mat_mul(self, scalar: float) -> "Matrix":
        """Return the matrix scaled by ``scalar``, one row at a time."""

        _ensure_non_zero(scalar)
        result = self._wrap(self._data.copy())
        for row_num in range(self.rows):
            result = result.scalar_row_mul(row_num, scalar)
        return result

    def transpose(self) -> "Matrix":
        """Return the ``cols x rows`` transpose; also usable as ``Matrix.transpose(m)``."""

        return self._wrap(self._data.T.copy())

    # ------------------------------------------------------------------
    # Binary operations

    def _ensure_same_shape(self, other: "Matrix") -> None:
        if self.shape != other.shape:
            raise ShapeMismatchError(
                "The dimensions are different. "
                f"Row Diff: {abs(self.rows - other.rows)}, Col Diff: {abs(self.cols - other.cols)}"
            )

    def add(self, other: "Matrix") -> "Matrix":
        """Entrywise sum; ``Matrix.add(m1, m2)`` reads like the binary form."""

        self._ensure_same_shape(other)
        return self._wrap(self._data + other._data)

    def subtract(self, other: "Matrix") -> "Matrix":
        self._ensure_same_shape(other)
        return self._wrap(self._data - other._data)

    def multiply(self, other: "Matrix") -> "Matrix":
        """Matrix product; entry ``[i][j]`` is row ``i`` of ``self`` dotted with column ``j`` of ``other``."""

        if self.cols != other.rows:
            raise ShapeMismatchError(
                "The multiplication cannot be performed. "
                f"The columns of matrix1 {self.cols} should be equal to rows of matrix2 {other.rows}"
            )
        logger.debug(
            "Multiplying %dx%d by %dx%d", self.rows, self.cols, other.rows, other.cols
        )
        result = np.empty((self.rows, other.cols), dtype=float)
        for i in range(self.rows):
            for j in range(other.cols):
                result[i, j] = _accumulate(self._data[i], other._data[:, j])
        return self._wrap(result)

    @staticmethod
    def dot_product(v1: Sequence[float], v2: Sequence[float]) -> float:
        """Return the dot product of two vectors, or ``0.0`` if their lengths differ."""

        if len(v1) != len(v2):
            logger.debug("dot_product length mismatch (%d != %d), returning 0.0", len(v1), len(v2))
            return 0.0
        return _accumulate(np.asarray(v1, dtype=float), np.asarray(v2, dtype=float))

    def __add__(self, other: object) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.subtract(other)

    def __matmul__(self, other: object) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.multiply(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Matrix(rows={self.rows}, cols={self.cols}, data={self.to_list()!r})"


__all__ = ["Matrix"]
