"""
Input validation utilities for matreex.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent coercion (no wraparound, no negative indices, no broadcasting)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from __future__ import annotations

import numbers
import struct
import sys
from typing import Any, Iterable

import numpy as np
from numpy.typing import NDArray

from matreex.core.exceptions import (
    CapacityError,
    IndexOutOfBoundsError,
    ShapeError,
    ShapeMismatchError,
    SizeMismatchError,
)

# Largest number of elements a list can hold: one pointer per slot
MAX_SIZE: int = sys.maxsize // struct.calcsize("P")


def _is_integer(value: Any) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def check_dimension(value: Any, name: str) -> int:
    """
    Validate a single matrix dimension.

    Args:
        value: Candidate row or column count
        name: Parameter name for error messages

    Returns:
        The dimension as a plain int

    Raises:
        ShapeError: If value is not a non-negative integer
    """
    if not _is_integer(value):
        raise ShapeError(
            f"{name}: expected a non-negative integer, got {type(value).__name__} {value!r}"
        )
    if value < 0:
        raise ShapeError(f"{name}: must be non-negative, got {value}")
    return int(value)


def check_size(nrows: int, ncols: int) -> int:
    """
    Verify that nrows * ncols elements can be stored.

    Args:
        nrows: Number of rows (already validated)
        ncols: Number of columns (already validated)

    Returns:
        Total number of elements

    Raises:
        CapacityError: If the element count exceeds MAX_SIZE
    """
    size = nrows * ncols
    if size > MAX_SIZE:
        raise CapacityError(
            f"shape ({nrows}, {ncols}) requires {size} elements, limit is {MAX_SIZE}",
            size=size,
            limit=MAX_SIZE,
        )
    return size


def check_rows(rows: Iterable[Iterable[Any]], name: str) -> list[list[Any]]:
    """
    Validate nested row data and copy it into lists.

    Args:
        rows: Outer sequence of row sequences
        name: Parameter name for error messages

    Returns:
        List of row lists, all of the same length

    Raises:
        ShapeError: If there are no rows, a row is not iterable, or
            rows have inconsistent lengths
    """
    try:
        copied = [list(row) for row in rows]
    except TypeError as e:
        raise ShapeError(f"{name}: expected a sequence of row sequences: {e}") from e

    if not copied:
        raise ShapeError(f"{name}: requires at least one row, got 0")

    ncols = len(copied[0])
    ragged = [i for i, row in enumerate(copied) if len(row) != ncols]
    if ragged:
        details = ", ".join(f"row {i} has {len(copied[i])}" for i in ragged)
        raise ShapeError(
            f"{name}: inconsistent row lengths, expected {ncols} columns ({details})"
        )
    return copied


def check_flat_size(actual: int, nrows: int, ncols: int, name: str) -> None:
    """
    Verify that a flat element count matches a shape.

    Args:
        actual: Number of elements supplied
        nrows: Requested number of rows
        ncols: Requested number of columns
        name: Parameter name for error messages

    Raises:
        SizeMismatchError: If actual != nrows * ncols
    """
    expected = nrows * ncols
    if actual != expected:
        raise SizeMismatchError(
            f"{name}: shape ({nrows}, {ncols}) requires {expected} elements, got {actual}",
            expected=expected,
            actual=actual,
        )


def check_index(row: Any, col: Any, nrows: int, ncols: int) -> int:
    """
    Validate an element index and translate it to a flat position.

    Args:
        row: Row index
        col: Column index
        nrows: Number of rows in the matrix
        ncols: Number of columns in the matrix

    Returns:
        Row-major flat position row * ncols + col

    Raises:
        IndexOutOfBoundsError: If either index is not an integer in range
    """
    if not (_is_integer(row) and _is_integer(col)):
        raise IndexOutOfBoundsError(
            f"index ({row!r}, {col!r}): indices must be integers",
            index=(row, col),
            shape=(nrows, ncols),
        )
    if not (0 <= row < nrows and 0 <= col < ncols):
        raise IndexOutOfBoundsError(
            f"index ({row}, {col}) out of bounds for shape ({nrows}, {ncols})",
            index=(row, col),
            shape=(nrows, ncols),
        )
    return int(row) * ncols + int(col)


def check_axis_index(n: Any, length: int, axis: str) -> int:
    """
    Validate a row or column number.

    Args:
        n: Row or column number
        length: Number of rows or columns available
        axis: 'row' or 'column', for error messages

    Returns:
        n as a plain int

    Raises:
        IndexOutOfBoundsError: If n is not an integer in [0, length)
    """
    if not _is_integer(n) or not 0 <= n < length:
        raise IndexOutOfBoundsError(
            f"{axis} {n!r} out of bounds, matrix has {length} {axis}s",
            index=n,
        )
    return int(n)


def check_same_shape(lhs_shape: tuple[int, int], rhs_shape: tuple[int, int], operation: str) -> None:
    """
    Verify two operands have identical shape.

    Args:
        lhs_shape: Shape of the left operand
        rhs_shape: Shape of the right operand
        operation: Operation name for error messages

    Raises:
        ShapeMismatchError: If the shapes differ
    """
    if tuple(lhs_shape) != tuple(rhs_shape):
        raise ShapeMismatchError(
            f"{operation}: operands must have identical shape, "
            f"got {tuple(lhs_shape)} and {tuple(rhs_shape)}",
            lhs_shape=lhs_shape,
            rhs_shape=rhs_shape,
            operation=operation,
        )


def check_multiplication_conformable(
    lhs_shape: tuple[int, int],
    rhs_shape: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify lhs columns match rhs rows.

    Args:
        lhs_shape: Shape (m, k) of the left operand
        rhs_shape: Shape (k, n) of the right operand
        operation: Operation name for error messages

    Raises:
        ShapeMismatchError: If lhs_shape[1] != rhs_shape[0]
    """
    if lhs_shape[1] != rhs_shape[0]:
        raise ShapeMismatchError(
            f"{operation}: lhs has {lhs_shape[1]} columns but rhs has {rhs_shape[0]} rows "
            f"(shapes {tuple(lhs_shape)} and {tuple(rhs_shape)})",
            lhs_shape=lhs_shape,
            rhs_shape=rhs_shape,
            operation=operation,
        )


def check_2d(array: NDArray[Any], name: str) -> None:
    """
    Verify array is 2-dimensional.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        ShapeError: If array is not 2D
    """
    if np.ndim(array) != 2:
        raise ShapeError(
            f"{name}: expected 2D array, got {np.ndim(array)}D with shape {np.shape(array)}"
        )
