"""
Dense matrix module.

Public API:
    Matrix              - Dense generic row-major matrix
    Shape               - (nrows, ncols) named tuple
    Index               - (row, col) named tuple
    vector_dot_product  - Left-to-right dot product used by the matrix product
"""

from matreex.dense.matrix import Matrix
from matreex.dense.shape import Shape, Index
from matreex.dense.operation import vector_dot_product

__all__ = [
    "Matrix",
    "Shape",
    "Index",
    "vector_dot_product",
]
