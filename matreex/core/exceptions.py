"""
Exception hierarchy for matreex.

All exceptions inherit from MatreexError to allow catching any
library-specific error. Shape and index problems are reported through
the specific classes below.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""

from __future__ import annotations

from typing import Any


class MatreexError(Exception):
    """Base exception for all matreex errors."""
    pass


class ValidationError(MatreexError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class ShapeError(ValidationError):
    """
    Matrix construction input is malformed.

    Raised for empty or ragged nested rows, negative or non-integer
    dimensions, and arrays that are not 2-dimensional.
    """
    pass


class SizeMismatchError(ValidationError):
    """
    Number of elements does not match the requested shape.

    Attributes:
        expected: Number of elements the shape requires
        actual: Number of elements supplied
    """

    def __init__(
        self,
        message: str,
        expected: int | None = None,
        actual: int | None = None
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class CapacityError(ValidationError):
    """
    Requested matrix size exceeds what a Python list can hold.

    Attributes:
        size: Requested number of elements
        limit: Largest supported number of elements
    """

    def __init__(
        self,
        message: str,
        size: int | None = None,
        limit: int | None = None
    ):
        super().__init__(message)
        self.size = size
        self.limit = limit


class ShapeMismatchError(ValidationError):
    """
    Operand shapes are not conformable for a binary operation.

    Raised when element-wise operands differ in shape, or when the
    inner dimensions of a matrix product disagree.

    Attributes:
        lhs_shape: Shape of the left operand
        rhs_shape: Shape of the right operand
        operation: Name of the operation that was attempted
    """

    def __init__(
        self,
        message: str,
        lhs_shape: Any = None,
        rhs_shape: Any = None,
        operation: str | None = None
    ):
        super().__init__(message)
        self.lhs_shape = lhs_shape
        self.rhs_shape = rhs_shape
        self.operation = operation


class IndexOutOfBoundsError(MatreexError, IndexError):
    """
    Element index lies outside the matrix.

    Also an IndexError, so generic Python handlers keep working.

    Attributes:
        index: The offending index as given by the caller
        shape: Shape of the matrix that was indexed
    """

    def __init__(
        self,
        message: str,
        index: Any = None,
        shape: Any = None
    ):
        super().__init__(message)
        self.index = index
        self.shape = shape
