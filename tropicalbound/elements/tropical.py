"""
Tropical (min, +) matrices
==========================

Helpers for ``SemiringMatrix`` instances over ``TROPICAL``. The product is

    (A · B)[i][j] = min_k (A[i][k] + B[k][j])

with INF absorbing, so entry (i, j) of a product of a word of matrices is the
weight of the lightest path from node i to node j that takes one edge per
letter of the word.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence

import numpy as np

from tropicalbound.elements.boolean import boolean_matrix
from tropicalbound.elements.matrix import SemiringMatrix
from tropicalbound.elements.semiring import (
    FINITE_LIMIT,
    INF,
    TROPICAL,
    TropicalValue,
    is_finite,
    tropical_add,
)
from tropicalbound.exceptions import InputFaultError

__all__ = [
    "FINITE_LIMIT",
    "INF",
    "TropicalValue",
    "is_finite",
    "tropical_add",
    "tropical_matrix",
    "tropical_identity",
    "is_tropical",
    "max_value",
    "boolean_abstraction",
    "normalized",
    "random_tropical_matrix",
]


def tropical_matrix(data: Sequence[Sequence[Any]]) -> SemiringMatrix:
    return SemiringMatrix(data, TROPICAL)


def tropical_identity(n: int) -> SemiringMatrix:
    """Tropical identity matrix of dimension n (0 on diag, INF elsewhere)."""
    return SemiringMatrix.identity(n, TROPICAL)


def is_tropical(matrix: Any) -> bool:
    return isinstance(matrix, SemiringMatrix) and matrix.semiring is TROPICAL


def _require_tropical(matrix: Any) -> None:
    if not is_tropical(matrix):
        raise InputFaultError("Expected a tropical matrix.")


def max_value(matrix: SemiringMatrix) -> int:
    """Largest finite entry, or 0 if every entry is INF."""
    _require_tropical(matrix)
    return max((v for v in matrix.entries() if is_finite(v)), default=0)


def boolean_abstraction(matrix: SemiringMatrix) -> SemiringMatrix:
    """Edge-existence graph: 1 wherever the entry is finite."""
    _require_tropical(matrix)
    return boolean_matrix(
        [[1 if is_finite(v) else 0 for v in row] for row in matrix.rows()]
    )


def normalized(matrix: SemiringMatrix) -> SemiringMatrix:
    """Clamp finite entries to ``min(1, v)``; keeps the zero / positive / INF pattern."""
    _require_tropical(matrix)
    return tropical_matrix(
        [[v if v is INF else min(1, v) for v in row] for row in matrix.rows()]
    )


def _check_probability(name: str, value: float) -> None:
    if not 0.0 <= value <= 1.0:
        raise InputFaultError(f"{name} must be between 0 and 1.")


def random_tropical_matrix(
    n: int,
    max_value: int,
    zero_chance: float,
    inf_chance: float,
    rng: Optional[np.random.Generator] = None,
) -> SemiringMatrix:
    """
    Draw a random tropical matrix.

    Each entry is independently 0 with probability ``zero_chance``, INF with
    probability ``inf_chance`` and otherwise uniform in ``[1, max_value]``.

    Args:
        n: Dimension of the matrix
        max_value: Largest finite entry that can be drawn (>= 1)
        zero_chance: Probability of an exact 0
        inf_chance: Probability of INF
        rng: Optional numpy generator; a fresh unseeded one is used otherwise

    Raises:
        InputFaultError: If a probability is outside [0, 1], the probabilities
            sum to more than 1, or ``max_value`` is smaller than 1
    """
    _check_probability("zero_chance", zero_chance)
    _check_probability("inf_chance", inf_chance)
    if zero_chance + inf_chance > 1.0:
        raise InputFaultError("zero_chance + inf_chance must be between 0 and 1.")
    if isinstance(max_value, bool) or not isinstance(max_value, int) or max_value < 1:
        raise InputFaultError("max_value must be a positive integer.")
    SemiringMatrix._check_size(n)

    rng = rng if rng is not None else np.random.default_rng()
    draws = rng.random((n, n))
    values = rng.integers(1, max_value, size=(n, n), endpoint=True)

    data: list[list[TropicalValue]] = []
    for i in range(n):
        row: list[TropicalValue] = []
        for j in range(n):
            r = draws[i, j]
            if r < zero_chance:
                row.append(0)
            elif r < zero_chance + inf_chance:
                row.append(INF)
            else:
                row.append(int(values[i, j]))
        data.append(row)
    return tropical_matrix(data)
