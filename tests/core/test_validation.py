"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_dimension: non-negative integer dimensions
    - check_size: capacity limit
    - check_rows: nested row copying, empty and ragged rejection
    - check_flat_size: flat element count vs shape
    - check_index / check_axis_index: bounds, no wraparound
    - check_same_shape / check_multiplication_conformable: operand shapes
    - check_2d: array dimensionality
"""

import struct
import sys

import numpy as np
import pytest

from matreex.core import validation
from matreex.core.exceptions import (
    CapacityError,
    IndexOutOfBoundsError,
    ShapeError,
    ShapeMismatchError,
    SizeMismatchError,
)
from matreex.core.validation import (
    check_2d,
    check_axis_index,
    check_dimension,
    check_flat_size,
    check_index,
    check_multiplication_conformable,
    check_rows,
    check_same_shape,
    check_size,
)


# ═══════════════════════════════════════════════════════════════════════
# check_dimension / check_size
# ═══════════════════════════════════════════════════════════════════════


class TestCheckDimension:

    def test_accepts_zero(self):
        assert check_dimension(0, "nrows") == 0

    def test_accepts_numpy_integer(self):
        result = check_dimension(np.int64(3), "nrows")
        assert result == 3
        assert type(result) is int

    def test_rejects_negative(self):
        with pytest.raises(ShapeError, match="nrows: must be non-negative"):
            check_dimension(-1, "nrows")

    def test_rejects_float(self):
        with pytest.raises(ShapeError, match="ncols"):
            check_dimension(2.0, "ncols")

    def test_rejects_bool(self):
        with pytest.raises(ShapeError):
            check_dimension(True, "nrows")


class TestCheckSize:

    def test_returns_product(self):
        assert check_size(2, 3) == 6

    def test_zero_size(self):
        assert check_size(0, 1000) == 0

    def test_over_limit(self):
        with pytest.raises(CapacityError) as exc_info:
            check_size(validation.MAX_SIZE, 2)
        assert exc_info.value.size == validation.MAX_SIZE * 2
        assert exc_info.value.limit == validation.MAX_SIZE

    def test_at_limit(self):
        assert check_size(validation.MAX_SIZE, 1) == validation.MAX_SIZE

    def test_limit_counts_pointer_slots(self):
        assert validation.MAX_SIZE == sys.maxsize // struct.calcsize("P")
        with pytest.raises(CapacityError):
            check_size(validation.MAX_SIZE + 1, 1)


# ═══════════════════════════════════════════════════════════════════════
# check_rows
# ═══════════════════════════════════════════════════════════════════════


class TestCheckRows:

    def test_copies_rows(self):
        source = [[0, 1], [2, 3]]
        result = check_rows(source, "rows")
        assert result == source
        assert result[0] is not source[0]

    def test_accepts_tuples_and_generators(self):
        result = check_rows(((i, i + 1) for i in range(2)), "rows")
        assert result == [[0, 1], [1, 2]]

    def test_rejects_empty(self):
        with pytest.raises(ShapeError, match="at least one row"):
            check_rows([], "rows")

    def test_rejects_ragged(self):
        with pytest.raises(ShapeError, match="row 1 has 1"):
            check_rows([[0, 1], [2]], "rows")

    def test_rejects_non_iterable_row(self):
        with pytest.raises(ShapeError, match="sequence of row sequences"):
            check_rows([1, 2], "rows")

    def test_rows_of_zero_length(self):
        assert check_rows([[], []], "rows") == [[], []]


# ═══════════════════════════════════════════════════════════════════════
# check_flat_size
# ═══════════════════════════════════════════════════════════════════════


class TestCheckFlatSize:

    def test_match(self):
        check_flat_size(6, 2, 3, "data")

    def test_mismatch(self):
        with pytest.raises(SizeMismatchError, match="requires 6 elements, got 5") as exc_info:
            check_flat_size(5, 2, 3, "data")
        assert exc_info.value.expected == 6
        assert exc_info.value.actual == 5


# ═══════════════════════════════════════════════════════════════════════
# check_index / check_axis_index
# ═══════════════════════════════════════════════════════════════════════


class TestCheckIndex:

    def test_row_major_position(self):
        assert check_index(0, 0, 2, 3) == 0
        assert check_index(0, 2, 2, 3) == 2
        assert check_index(1, 0, 2, 3) == 3
        assert check_index(1, 2, 2, 3) == 5

    @pytest.mark.parametrize("row, col", [(2, 0), (0, 3), (2, 3)])
    def test_out_of_bounds(self, row, col):
        with pytest.raises(IndexOutOfBoundsError) as exc_info:
            check_index(row, col, 2, 3)
        assert exc_info.value.index == (row, col)
        assert exc_info.value.shape == (2, 3)

    @pytest.mark.parametrize("row, col", [(-1, 0), (0, -1)])
    def test_no_negative_wraparound(self, row, col):
        with pytest.raises(IndexOutOfBoundsError):
            check_index(row, col, 2, 3)

    def test_rejects_non_integer(self):
        with pytest.raises(IndexOutOfBoundsError, match="must be integers"):
            check_index(0.0, 1, 2, 3)

    def test_empty_matrix_has_no_valid_index(self):
        with pytest.raises(IndexOutOfBoundsError):
            check_index(0, 0, 0, 3)


class TestCheckAxisIndex:

    def test_in_range(self):
        assert check_axis_index(1, 2, "row") == 1

    def test_out_of_range(self):
        with pytest.raises(IndexOutOfBoundsError, match="column 3 out of bounds"):
            check_axis_index(3, 3, "column")

    def test_negative(self):
        with pytest.raises(IndexOutOfBoundsError):
            check_axis_index(-1, 3, "row")


# ═══════════════════════════════════════════════════════════════════════
# Operand shape checks
# ═══════════════════════════════════════════════════════════════════════


class TestCheckSameShape:

    def test_same(self):
        check_same_shape((2, 3), (2, 3), "add")

    def test_transposed_shape_rejected(self):
        with pytest.raises(ShapeMismatchError, match="add: operands must have identical shape") as exc_info:
            check_same_shape((2, 3), (3, 2), "add")
        assert exc_info.value.lhs_shape == (2, 3)
        assert exc_info.value.rhs_shape == (3, 2)
        assert exc_info.value.operation == "add"


class TestCheckMultiplicationConformable:

    def test_conformable(self):
        check_multiplication_conformable((2, 3), (3, 1), "matmul")

    def test_inner_dimension_mismatch(self):
        with pytest.raises(ShapeMismatchError, match="lhs has 3 columns but rhs has 2 rows") as exc_info:
            check_multiplication_conformable((2, 3), (2, 2), "matmul")
        assert exc_info.value.operation == "matmul"

    def test_same_shape_not_enough(self):
        with pytest.raises(ShapeMismatchError):
            check_multiplication_conformable((2, 3), (2, 3), "matmul")


# ═══════════════════════════════════════════════════════════════════════
# check_2d
# ═══════════════════════════════════════════════════════════════════════


class TestCheck2D:

    def test_2d_passes(self):
        check_2d(np.zeros((2, 3)), "array")

    def test_1d_fails(self):
        with pytest.raises(ShapeError, match="expected 2D array, got 1D"):
            check_2d(np.zeros(3), "array")

    def test_3d_fails(self):
        with pytest.raises(ShapeError, match="got 3D"):
            check_2d(np.zeros((2, 2, 2)), "array")
