"""Exception hierarchy shared by the geometry and matrix modules."""

from __future__ import annotations


class RalgebError(Exception):
    """Base class for every error raised by :mod:`ralgeb`."""


class InvalidArgumentError(RalgebError, ValueError):
    """Raised when an argument is outside the accepted domain (e.g. a zero scalar)."""


class MatrixError(RalgebError):
    """Base class for matrix shape and indexing errors."""


class ShapeMismatchError(MatrixError, ValueError):
    """Raised when operand dimensions are incompatible for an operation."""


class IndexOutOfBoundsError(MatrixError, IndexError):
    """Raised when a row index exceeds the extent of a matrix."""


__all__ = [
    "RalgebError",
    "InvalidArgumentError",
    "MatrixError",
    "ShapeMismatchError",
    "IndexOutOfBoundsError",
]
