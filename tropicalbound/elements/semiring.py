"""
Semiring capabilities
=====================

A ``Semiring`` bundles the two operations, the two distinguished elements and
the entry validation that a ``SemiringMatrix`` needs. Two instances exist:

- ``TROPICAL``: (min, +) over {0, 1, 2, ...} ∪ {INF}
- ``BOOLEAN``: (OR, AND) over {0, 1}
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from functools import total_ordering
from typing import Any, Callable, Union

from tropicalbound.exceptions import InputFaultError, TropicalOverflowError

# Every finite tropical entry and every finite sum must stay strictly below this.
FINITE_LIMIT: int = 2**31 - 1


@total_ordering
class Infinity:
    """The absorbing element of the tropical semiring.

    There is exactly one instance, ``INF``. It compares greater than every
    integer and equal only to itself.
    """

    __slots__ = ()
    _instance: "Infinity | None" = None

    def __new__(cls) -> "Infinity":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __eq__(self, other: Any) -> bool:
        return other is self

    def __lt__(self, other: Any) -> bool:
        if other is self or isinstance(other, int):
            return False
        return NotImplemented

    def __hash__(self) -> int:
        return hash("tropical-infinity")

    def __repr__(self) -> str:
        return "INF"

    def __str__(self) -> str:
        return "-"

    def __reduce__(self):
        return (Infinity, ())


INF = Infinity()

TropicalValue = Union[int, Infinity]


def is_finite(value: TropicalValue) -> bool:
    return value is not INF


def tropical_add(x: TropicalValue, y: TropicalValue) -> TropicalValue:
    """Tropical multiplication: ordinary addition with INF absorbing."""
    if x is INF or y is INF:
        return INF
    total = x + y
    if total >= FINITE_LIMIT:
        TropicalOverflowError.raise_overflow(x, y, FINITE_LIMIT)
    return total


def _tropical_min(x: TropicalValue, y: TropicalValue) -> TropicalValue:
    if x is INF:
        return y
    if y is INF:
        return x
    return x if x <= y else y


def _coerce_tropical(value: Any) -> TropicalValue:
    if value is INF:
        return INF
    if isinstance(value, float) and math.isinf(value) and value > 0:
        return INF
    if isinstance(value, bool) or not isinstance(value, int):
        raise InputFaultError(
            f"Tropical entries must be non-negative integers or INF, got {value!r}."
        )
    if value < 0:
        raise InputFaultError(f"Elements must be non-negative, got {value}.")
    if value >= FINITE_LIMIT:
        raise InputFaultError(
            f"Finite entries must be below {FINITE_LIMIT}, got {value}."
        )
    return value


def _coerce_boolean(value: Any) -> int:
    if value is True or value is False:
        return int(value)
    if isinstance(value, int) and value in (0, 1):
        return value
    raise InputFaultError(f"Elements must be 0 or 1, got {value!r}.")


@dataclass(frozen=True, eq=False)
class Semiring:
    """Operations and constants a matrix needs to multiply over a semiring.

    ``add`` selects between alternative paths, ``multiply`` composes
    consecutive steps, ``zero`` is the additive identity (and absorbing for
    ``multiply``) and ``one`` is the multiplicative identity.
    """

    name: str
    add: Callable[[Any, Any], Any]
    multiply: Callable[[Any, Any], Any]
    zero: Any
    one: Any
    coerce: Callable[[Any], Any]
    format_entry: Callable[[Any], str] = str

    def __repr__(self) -> str:
        return f"Semiring({self.name})"


TROPICAL = Semiring(
    name="tropical",
    add=_tropical_min,
    multiply=tropical_add,
    zero=INF,
    one=0,
    coerce=_coerce_tropical,
)

BOOLEAN = Semiring(
    name="boolean",
    add=lambda x, y: x | y,
    multiply=lambda x, y: x & y,
    zero=0,
    one=1,
    coerce=_coerce_boolean,
)
