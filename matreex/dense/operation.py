"""
Operation kernels over row-major flat storage.

Every kernel takes plain lists and returns a freshly built list; none of
them touches its inputs. Matrix wraps these into its operator methods.

Kernels:
    elementwise: op(lhs[i], rhs[i]) for every position
    scalar / scalar_reflected: op(element, scalar) or op(scalar, element)
    multiplication_like: op(row_i, col_j) for every output cell
    vector_dot_product: the op used by the matrix product
"""

from __future__ import annotations

from typing import Any, Callable, Sequence

from matreex.core.exceptions import ShapeMismatchError
from matreex.core.protocols import T, U


def elementwise(
    lhs: Sequence[T],
    rhs: Sequence[Any],
    op: Callable[[T, Any], U],
) -> list[U]:
    """Apply op to each pair of corresponding elements."""
    return [op(left, right) for left, right in zip(lhs, rhs)]


def scalar(data: Sequence[T], value: Any, op: Callable[[T, Any], U]) -> list[U]:
    """Apply op(element, value) to each element."""
    return [op(element, value) for element in data]


def scalar_reflected(data: Sequence[T], value: Any, op: Callable[[Any, T], U]) -> list[U]:
    """Apply op(value, element) to each element, keeping the scalar on the left."""
    return [op(value, element) for element in data]


def multiplication_like(
    lhs: Sequence[T],
    rhs: Sequence[Any],
    m: int,
    k: int,
    n: int,
    op: Callable[[Sequence[T], Sequence[Any]], U],
) -> list[U]:
    """
    Combine every row of lhs with every column of rhs.

    Args:
        lhs: Row-major data of an (m, k) matrix
        rhs: Row-major data of a (k, n) matrix
        m, k, n: The three dimensions
        op: Reduces a length-k row and a length-k column to one value

    Returns:
        Row-major data of the (m, n) result, cells produced in
        row-major order
    """
    cols = [rhs[j::n] for j in range(n)]

    result: list[U] = []
    for i in range(m):
        row = lhs[i * k:(i + 1) * k]
        for col in cols:
            result.append(op(row, col))
    return result


def vector_dot_product(lhs: Sequence[Any], rhs: Sequence[Any]) -> Any | None:
    """
    Compute sum(lhs[p] * rhs[p]) accumulated left to right.

    The first product seeds the accumulator and every later product is
    added on its right, so only __mul__ and __add__ of the elements are
    used. Two empty vectors have no product to seed with and give None;
    callers choose their own empty value.

    Raises:
        ShapeMismatchError: If the vectors differ in length
    """
    if len(lhs) != len(rhs):
        raise ShapeMismatchError(
            f"vector_dot_product: vectors must have equal length, got {len(lhs)} and {len(rhs)}",
            lhs_shape=(len(lhs),),
            rhs_shape=(len(rhs),),
            operation='vector_dot_product',
        )
    if not lhs:
        return None

    accumulator = lhs[0] * rhs[0]
    for p in range(1, len(lhs)):
        accumulator = accumulator + lhs[p] * rhs[p]
    return accumulator
