"""
matreex: a simple dense matrix type for Python.

Generic over any element type that supports the operators in use
(int, float, Fraction, Decimal, complex, numpy scalars, ...).

Quick start:
    from matreex import matrix

    lhs = matrix([0, 1, 2], [3, 4, 5])
    rhs = matrix([5, 4, 3], [2, 1, 0])
    lhs + rhs   # Matrix([[5, 5, 5], [5, 5, 5]])
    lhs - rhs   # Matrix([[-5, -3, -1], [1, 3, 5]])

    lhs * matrix([0, 1], [2, 3], [4, 5])   # Matrix([[10, 13], [28, 40]])

Submodules:
    core: exceptions, validation, element protocol, tolerance tiers
    dense: the Matrix type and its operation kernels
"""

from typing import Iterable

__version__ = "0.1.0"

from matreex.core.exceptions import (
    MatreexError,
    ValidationError,
    ShapeError,
    SizeMismatchError,
    CapacityError,
    ShapeMismatchError,
    IndexOutOfBoundsError,
)
from matreex.core.protocols import Number
from matreex.dense import Matrix, Shape, Index, vector_dot_product


def matrix(*rows: Iterable) -> Matrix:
    """
    Build a Matrix from rows given as separate arguments.

    matrix([0, 1, 2], [3, 4, 5]) is Matrix.from_rows([[0, 1, 2], [3, 4, 5]]).

    Raises:
        ShapeError: If no rows are given or rows differ in length
    """
    return Matrix.from_rows(rows)


__all__ = [
    "__version__",
    "matrix",
    "Matrix",
    "Shape",
    "Index",
    "Number",
    "vector_dot_product",
    "MatreexError",
    "ValidationError",
    "ShapeError",
    "SizeMismatchError",
    "CapacityError",
    "ShapeMismatchError",
    "IndexOutOfBoundsError",
]
