"""
Tolerance tiers for approximate matrix comparison.

Exact equality (==) is the contract for matrices; these tiers are only
used by Matrix.allclose, where floating-point results need a looser
check:
- EXACT: integer and rational elements, no slack at all
- FP64: double precision results
- FP32: single precision results (e.g. from float32 numpy arrays)
"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance settings for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='No tolerance, values must match exactly',
)

FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='fp64',
    description='Double precision',
)

FP32 = ToleranceTier(
    rtol=1e-4,
    atol=1e-5,
    name='fp32',
    description='Single precision',
)

DEFAULT_TOLERANCE = FP64


def select_tolerance(dtype: np.dtype | type) -> ToleranceTier:
    """Select the tolerance tier appropriate for an element dtype."""
    dtype = np.dtype(dtype)
    if np.issubdtype(dtype, np.integer) or np.issubdtype(dtype, np.bool_):
        return EXACT
    if dtype.itemsize <= 4 and np.issubdtype(dtype, np.floating):
        return FP32
    return FP64


def is_close(a: np.ndarray, b: np.ndarray, tolerance: ToleranceTier = DEFAULT_TOLERANCE) -> bool:
    """
    Check if two arrays are numerically close everywhere.

    Uses the formula: |a - b| <= atol + rtol * |b|
    Boolean arrays are compared as 0/1 integers, since numpy does not
    subtract booleans.
    """
    if a.dtype == np.bool_:
        a = a.astype(np.int64)
    if b.dtype == np.bool_:
        b = b.astype(np.int64)
    return bool(np.all(np.abs(a - b) <= tolerance.atol + tolerance.rtol * np.abs(b)))
