"""
Core infrastructure for matreex.

Shared abstractions and utilities used by the matrix module.

Key components:
    protocols: Number element protocol
    exceptions: Exception hierarchy
    validation: Input validators
    tolerances: Tolerance tiers for approximate comparison
"""

from matreex.core.protocols import Number
from matreex.core.tolerances import ToleranceTier
from matreex.core.exceptions import (
    MatreexError,
    ValidationError,
    ShapeError,
    SizeMismatchError,
    CapacityError,
    ShapeMismatchError,
    IndexOutOfBoundsError,
)

__all__ = [
    # Protocols
    "Number",
    # Configuration
    "ToleranceTier",
    # Exceptions
    "MatreexError",
    "ValidationError",
    "ShapeError",
    "SizeMismatchError",
    "CapacityError",
    "ShapeMismatchError",
    "IndexOutOfBoundsError",
]
