"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from matreex import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def m23():
    """The 2x3 matrix [[0, 1, 2], [3, 4, 5]] used throughout the examples."""
    return Matrix.from_rows([[0, 1, 2], [3, 4, 5]])


@pytest.fixture
def m32():
    """The 3x2 matrix [[0, 1], [2, 3], [4, 5]]."""
    return Matrix.from_rows([[0, 1], [2, 3], [4, 5]])


@pytest.fixture
def random_int_matrix(rng):
    """Factory for random integer matrices of a given shape."""
    def make(nrows, ncols):
        return Matrix.from_array(rng.integers(-50, 50, size=(nrows, ncols)))
    return make
