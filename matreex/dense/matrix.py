"""
Matrix: dense, generic, row-major 2D container.

A Matrix owns a flat list of elements plus its Shape. Element (i, j)
lives at position i * ncols + j. Storage is filled eagerly at
construction and is changed afterwards only by single-element
assignment; every operator returns a new Matrix.

Construction:
    Matrix([[0, 1, 2], [3, 4, 5]])          same as Matrix.from_rows(...)
    Matrix.with_shape(2, 3, 0)
    Matrix.from_flat([0, 1, 2, 3, 4, 5], (2, 3))
    Matrix.from_fn((2, 3), lambda i, j: i * 3 + j)
    Matrix.from_array(np.arange(6).reshape(2, 3))

Operators:
    a + b, a - b      element-wise, identical shapes
    a * b, a @ b      matrix product when b is a Matrix
    a * s, s * a      scalar multiplication
    a / s, a // s, a % s, -a
    a == b            same shape and equal elements
"""

from __future__ import annotations

import operator
from typing import Any, Callable, Generic, Iterable, Iterator, Sequence

import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from matreex.core.protocols import N
from matreex.core.tolerances import ToleranceTier, is_close, select_tolerance
from matreex.core.validation import (
    check_axis_index,
    check_dimension,
    check_flat_size,
    check_index,
    check_multiplication_conformable,
    check_rows,
    check_same_shape,
    check_size,
)
from matreex.dense import operation
from matreex.dense.conversion import array_to_flat, flat_to_array
from matreex.dense.shape import Shape


def _dot_or_zero(row: Sequence[Any], col: Sequence[Any]) -> Any:
    product = operation.vector_dot_product(row, col)
    return 0 if product is None else product


class Matrix(Generic[N]):
    """
    Dense matrix over a generic element type.

    Elements only need the operators an operation actually uses
    (see matreex.core.protocols.Number). Matrices are mutable through
    indexed assignment and therefore unhashable.
    """

    __slots__ = ('_data', '_shape')

    # Make numpy scalars defer to our reflected operators instead of
    # treating the matrix as an array-like.
    __array_ufunc__ = None

    def __init__(self, rows: Iterable[Iterable[N]]):
        data, shape = self._flatten_rows(rows)
        self._data: list[N] = data
        self._shape: Shape = shape

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def _from_parts(cls, data: list[Any], shape: Shape) -> Matrix[Any]:
        """Wrap already-validated storage without copying."""
        matrix = cls.__new__(cls)
        matrix._data = data
        matrix._shape = shape
        return matrix

    @staticmethod
    def _flatten_rows(rows: Iterable[Iterable[Any]]) -> tuple[list[Any], Shape]:
        copied = check_rows(rows, 'rows')
        shape = Shape(len(copied), len(copied[0]))
        return [element for row in copied for element in row], shape

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[N]]) -> Matrix[N]:
        """
        Build a matrix from a sequence of equal-length rows.

        Raises:
            ShapeError: If there are no rows or rows differ in length
        """
        data, shape = cls._flatten_rows(rows)
        return cls._from_parts(data, shape)

    @classmethod
    def with_shape(cls, nrows: int, ncols: int, fill: N) -> Matrix[N]:
        """
        Build an (nrows, ncols) matrix with every cell set to fill.

        Raises:
            ShapeError: If a dimension is negative or not an integer
            CapacityError: If nrows * ncols is too large to store
        """
        nrows = check_dimension(nrows, 'nrows')
        ncols = check_dimension(ncols, 'ncols')
        size = check_size(nrows, ncols)
        return cls._from_parts([fill] * size, Shape(nrows, ncols))

    @classmethod
    def from_flat(cls, data: Iterable[N], shape: tuple[int, int]) -> Matrix[N]:
        """
        Build a matrix from row-major flat data.

        Raises:
            ShapeError: If a dimension is negative or not an integer
            SizeMismatchError: If len(data) != nrows * ncols
        """
        nrows, ncols = shape
        nrows = check_dimension(nrows, 'nrows')
        ncols = check_dimension(ncols, 'ncols')
        copied = list(data)
        check_flat_size(len(copied), nrows, ncols, 'data')
        return cls._from_parts(copied, Shape(nrows, ncols))

    @classmethod
    def from_fn(cls, shape: tuple[int, int], fn: Callable[[int, int], N]) -> Matrix[N]:
        """Build a matrix whose cell (i, j) is fn(i, j), filled row by row."""
        nrows, ncols = shape
        nrows = check_dimension(nrows, 'nrows')
        ncols = check_dimension(ncols, 'ncols')
        check_size(nrows, ncols)
        data = [fn(i, j) for i in range(nrows) for j in range(ncols)]
        return cls._from_parts(data, Shape(nrows, ncols))

    @classmethod
    def from_array(cls, array: ArrayLike) -> Matrix[Any]:
        """
        Build a matrix from a 2D numpy array (or array-like).

        Elements are converted to Python scalars.

        Raises:
            ShapeError: If the input is not 2-dimensional
        """
        data, shape = array_to_flat(array)
        return cls._from_parts(data, shape)

    def to_array(self, dtype: DTypeLike | None = None) -> NDArray[Any]:
        """Copy the matrix into a new 2D numpy array."""
        return flat_to_array(self._data, self._shape, dtype)

    def copy(self) -> Matrix[N]:
        return self._from_parts(list(self._data), self._shape)

    # ------------------------------------------------------------------
    # Shape
    # ------------------------------------------------------------------

    @property
    def shape(self) -> Shape:
        return self._shape

    @property
    def nrows(self) -> int:
        return self._shape.nrows

    @property
    def ncols(self) -> int:
        return self._shape.ncols

    @property
    def size(self) -> int:
        return len(self._data)

    def is_empty(self) -> bool:
        return not self._data

    def __len__(self) -> int:
        return len(self._data)

    # ------------------------------------------------------------------
    # Indexing
    # ------------------------------------------------------------------

    def get(self, row: int, col: int) -> N:
        """
        Return element (row, col).

        Raises:
            IndexOutOfBoundsError: If row >= nrows, col >= ncols, or
                either index is negative or not an integer
        """
        return self._data[check_index(row, col, self.nrows, self.ncols)]

    def set(self, row: int, col: int, value: N) -> None:
        """
        Replace element (row, col) with value.

        Raises:
            IndexOutOfBoundsError: Same rules as get()
        """
        self._data[check_index(row, col, self.nrows, self.ncols)] = value

    @staticmethod
    def _unpack_index(index: Any) -> tuple[Any, Any]:
        if isinstance(index, tuple) and len(index) == 2:
            return index
        raise TypeError(
            f"matrix indices must be (row, col) pairs, got {type(index).__name__}"
        )

    def __getitem__(self, index: tuple[int, int]) -> N:
        return self.get(*self._unpack_index(index))

    def __setitem__(self, index: tuple[int, int], value: N) -> None:
        self.set(*self._unpack_index(index), value)

    # ------------------------------------------------------------------
    # Iteration
    # ------------------------------------------------------------------

    def __iter__(self) -> Iterator[N]:
        """Iterate over elements in row-major order."""
        return iter(self._data)

    def row(self, n: int) -> list[N]:
        """Return a copy of row n."""
        n = check_axis_index(n, self.nrows, 'row')
        return self._data[n * self.ncols:(n + 1) * self.ncols]

    def col(self, n: int) -> list[N]:
        """Return a copy of column n."""
        n = check_axis_index(n, self.ncols, 'column')
        return self._data[n::self.ncols]

    def iter_rows(self) -> Iterator[list[N]]:
        for i in range(self.nrows):
            yield self._data[i * self.ncols:(i + 1) * self.ncols]

    def iter_cols(self) -> Iterator[list[N]]:
        for j in range(self.ncols):
            yield self._data[j::self.ncols]

    def to_rows(self) -> list[list[N]]:
        """Return the elements as a new list of row lists."""
        return list(self.iter_rows())

    # ------------------------------------------------------------------
    # Transformations
    # ------------------------------------------------------------------

    def transpose(self) -> Matrix[N]:
        """Return a new (ncols, nrows) matrix with rows and columns swapped."""
        data = [element for col in self.iter_cols() for element in col]
        return self._from_parts(data, self._shape.transpose())

    def reshape(self, nrows: int, ncols: int) -> Matrix[N]:
        """
        Return the same row-major elements under a new shape.

        Raises:
            ShapeError: If a dimension is negative or not an integer
            SizeMismatchError: If nrows * ncols != size
        """
        nrows = check_dimension(nrows, 'nrows')
        ncols = check_dimension(ncols, 'ncols')
        check_flat_size(self.size, nrows, ncols, 'reshape')
        return self._from_parts(list(self._data), Shape(nrows, ncols))

    def map(self, fn: Callable[[N], Any]) -> Matrix[Any]:
        """Return a new matrix with fn applied to every element."""
        return self._from_parts([fn(element) for element in self._data], self._shape)

    # ------------------------------------------------------------------
    # Generic operations
    # ------------------------------------------------------------------

    def elementwise_operation(
        self,
        other: Matrix[Any],
        op: Callable[[N, Any], Any],
        name: str = 'elementwise_operation',
    ) -> Matrix[Any]:
        """
        Combine corresponding elements of two identically-shaped matrices.

        Raises:
            ShapeMismatchError: If the shapes differ
        """
        check_same_shape(self._shape, other._shape, name)
        return self._from_parts(operation.elementwise(self._data, other._data, op), self._shape)

    def multiplication_like_operation(
        self,
        other: Matrix[Any],
        op: Callable[[Sequence[N], Sequence[Any]], Any],
        name: str = 'multiplication_like_operation',
    ) -> Matrix[Any]:
        """
        Reduce each row of self with each column of other.

        The result has shape (self.nrows, other.ncols) and its cell (i, j)
        is op(self.row(i), other.col(j)).

        Raises:
            ShapeMismatchError: If self.ncols != other.nrows
        """
        check_multiplication_conformable(self._shape, other._shape, name)
        shape = Shape(self.nrows, other.ncols)
        check_size(*shape)
        data = operation.multiplication_like(
            self._data, other._data, self.nrows, self.ncols, other.ncols, op
        )
        return self._from_parts(data, shape)

    def scalar_operation(self, value: Any, op: Callable[[N, Any], Any]) -> Matrix[Any]:
        """Return op(element, value) for every element."""
        return self._from_parts(operation.scalar(self._data, value, op), self._shape)

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def __add__(self, other: Any) -> Matrix[Any]:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.elementwise_operation(other, operator.add, 'add')

    def __sub__(self, other: Any) -> Matrix[Any]:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.elementwise_operation(other, operator.sub, 'sub')

    def __mul__(self, other: Any) -> Matrix[Any]:
        if isinstance(other, Matrix):
            return self.matmul(other)
        return self.scalar_operation(other, operator.mul)

    def __rmul__(self, other: Any) -> Matrix[Any]:
        data = operation.scalar_reflected(self._data, other, operator.mul)
        return self._from_parts(data, self._shape)

    def __matmul__(self, other: Any) -> Matrix[Any]:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.matmul(other)

    def matmul(self, other: Matrix[Any]) -> Matrix[Any]:
        """
        Matrix product of an (m, k) and a (k, n) matrix.

        Cell (i, j) is sum(self[i, p] * other[p, j] for p in 0..k-1),
        accumulated left to right in increasing p. With k == 0 every
        cell is the integer 0.

        Raises:
            ShapeMismatchError: If self.ncols != other.nrows
        """
        return self.multiplication_like_operation(other, _dot_or_zero, 'matmul')

    def __truediv__(self, other: Any) -> Matrix[Any]:
        if isinstance(other, Matrix):
            return NotImplemented
        return self.scalar_operation(other, operator.truediv)

    def __floordiv__(self, other: Any) -> Matrix[Any]:
        if isinstance(other, Matrix):
            return NotImplemented
        return self.scalar_operation(other, operator.floordiv)

    def __mod__(self, other: Any) -> Matrix[Any]:
        if isinstance(other, Matrix):
            return NotImplemented
        return self.scalar_operation(other, operator.mod)

    def __neg__(self) -> Matrix[Any]:
        return self.map(operator.neg)

    def hadamard(self, other: Matrix[Any]) -> Matrix[Any]:
        """Element-wise product of two identically-shaped matrices."""
        return self.elementwise_operation(other, operator.mul, 'hadamard')

    def elementwise_div(self, other: Matrix[Any]) -> Matrix[Any]:
        """Element-wise true division of two identically-shaped matrices."""
        return self.elementwise_operation(other, operator.truediv, 'elementwise_div')

    def elementwise_rem(self, other: Matrix[Any]) -> Matrix[Any]:
        """Element-wise remainder (Python % semantics) of two identically-shaped matrices."""
        return self.elementwise_operation(other, operator.mod, 'elementwise_rem')

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self._shape != other._shape:
            return False
        return all(left == right for left, right in zip(self._data, other._data))

    __hash__ = None  # type: ignore[assignment]

    def allclose(self, other: Matrix[Any], tolerance: ToleranceTier | None = None) -> bool:
        """
        Check whether two matrices are numerically close everywhere.

        Shapes must match exactly; a shape difference returns False.
        Without an explicit tolerance the tier is chosen from the
        combined element dtype (exact for integers and booleans).

        Raises:
            TypeError: If other is not a Matrix
        """
        if not isinstance(other, Matrix):
            raise TypeError(
                f"allclose: expected a Matrix, got {type(other).__name__}"
            )
        if self._shape != other._shape:
            return False
        lhs = self.to_array()
        rhs = other.to_array()
        if tolerance is None:
            tolerance = select_tolerance(np.result_type(lhs, rhs))
        return is_close(lhs, rhs, tolerance)

    def __repr__(self) -> str:
        if self.nrows == 0:
            return f"Matrix.from_flat([], ({self.nrows}, {self.ncols}))"
        return f"Matrix({self.to_rows()!r})"
