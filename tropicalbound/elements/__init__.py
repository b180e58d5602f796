"""
Semiring matrix algebra.

This module provides the generic ``SemiringMatrix`` container together with
the tropical and boolean semirings and their matrix helpers.
"""

from .semiring import (
    FINITE_LIMIT,
    INF,
    Infinity,
    Semiring,
    TROPICAL,
    BOOLEAN,
    TropicalValue,
    is_finite,
    tropical_add,
)
from .matrix import SemiringMatrix
from .boolean import (
    boolean_matrix,
    boolean_identity,
    transitive_closure,
    random_boolean_matrix,
)
from .tropical import (
    tropical_matrix,
    tropical_identity,
    is_tropical,
    max_value,
    boolean_abstraction,
    normalized,
    random_tropical_matrix,
)

__all__ = [
    "FINITE_LIMIT",
    "INF",
    "Infinity",
    "Semiring",
    "TROPICAL",
    "BOOLEAN",
    "TropicalValue",
    "is_finite",
    "tropical_add",
    "SemiringMatrix",
    "boolean_matrix",
    "boolean_identity",
    "transitive_closure",
    "random_boolean_matrix",
    "tropical_matrix",
    "tropical_identity",
    "is_tropical",
    "max_value",
    "boolean_abstraction",
    "normalized",
    "random_tropical_matrix",
]
