"""
Core protocols for matreex.

These define the structural interface an element type must satisfy to
take part in matrix arithmetic. We use Protocol (structural typing)
rather than ABC (nominal typing) so that int, float, Fraction, Decimal,
complex, numpy scalars and user types all qualify without registration.

Design Principles:
    - Minimal contracts: each operation needs only the operators it calls
    - Checked at call time: an element lacking an operator raises TypeError
      from Python itself, never a silent fallback
"""

from typing import Any, Protocol, TypeVar, runtime_checkable

T = TypeVar('T')  # Element type
U = TypeVar('U')  # Result element type


@runtime_checkable
class Number(Protocol):
    """
    Capability set for matrix elements: addable, subtractable,
    multipliable and equality-comparable.

    Elements are stored by reference and never mutated by matreex, so
    immutable values (the usual case for numbers) need no cloning.
    """

    def __add__(self, other: Any) -> Any:
        ...

    def __sub__(self, other: Any) -> Any:
        ...

    def __mul__(self, other: Any) -> Any:
        ...

    def __eq__(self, other: object) -> bool:
        ...


N = TypeVar('N', bound=Number)  # Element type restricted to Number
