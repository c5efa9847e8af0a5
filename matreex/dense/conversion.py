"""
numpy interop for Matrix.

Arrays come in through array_to_flat and go out through flat_to_array;
Matrix.from_array / Matrix.to_array are the public entry points.
"""

from __future__ import annotations

from typing import Any, Sequence

import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from matreex.core.exceptions import ShapeError
from matreex.core.validation import check_2d
from matreex.dense.shape import Shape


def array_to_flat(array: ArrayLike, name: str = 'array') -> tuple[list[Any], Shape]:
    """
    Flatten a 2D array-like into row-major Python scalars.

    Args:
        array: numpy array or anything np.asarray accepts
        name: Parameter name for error messages

    Returns:
        (data, shape) with numpy scalars converted by tolist()

    Raises:
        ShapeError: If the array is not 2-dimensional
    """
    try:
        result = np.asarray(array)
    except ValueError as e:
        raise ShapeError(f"{name}: cannot convert to array: {e}") from e
    check_2d(result, name)
    nrows, ncols = result.shape
    return result.reshape(-1).tolist(), Shape(nrows, ncols)


def flat_to_array(
    data: Sequence[Any],
    shape: Shape,
    dtype: DTypeLike | None = None,
) -> NDArray[Any]:
    """Build a 2D numpy array of the given shape from row-major data."""
    if dtype is None and not data:
        dtype = np.float64
    return np.asarray(list(data), dtype=dtype).reshape(shape.nrows, shape.ncols)
