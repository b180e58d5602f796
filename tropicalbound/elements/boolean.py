"""Boolean (OR, AND) matrices used as reachability graphs."""

from __future__ import annotations

from typing import Any, Optional, Sequence

import numpy as np

from tropicalbound.elements.matrix import SemiringMatrix
from tropicalbound.elements.semiring import BOOLEAN
from tropicalbound.exceptions import InputFaultError


def boolean_matrix(data: Sequence[Sequence[Any]]) -> SemiringMatrix:
    return SemiringMatrix(data, BOOLEAN)


def boolean_identity(n: int) -> SemiringMatrix:
    """Boolean identity matrix of dimension n (1 on diag, 0 elsewhere)."""
    return SemiringMatrix.identity(n, BOOLEAN)


def transitive_closure(matrix: SemiringMatrix) -> SemiringMatrix:
    """
    Reachability with one or more steps.

    Computed as M¹ ∨ M² ∨ … ∨ Mⁿ: in an n-node graph every reachable pair is
    reachable within n hops. The 0-hop identity is not included, so
    ``closure[i][i] == 1`` only when node i lies on a cycle.
    """
    if not isinstance(matrix, SemiringMatrix) or matrix.semiring is not BOOLEAN:
        raise InputFaultError("Transitive closure requires a boolean matrix.")
    n = matrix.size()
    result = [list(row) for row in matrix.rows()]
    product = matrix.copy()
    for _ in range(2, n + 1):
        product.times_in_place(matrix)
        for j, row in enumerate(product.rows()):
            for k, value in enumerate(row):
                result[j][k] |= value
    return boolean_matrix(result)


def random_boolean_matrix(
    n: int, one_chance: float, rng: Optional[np.random.Generator] = None
) -> SemiringMatrix:
    """Each entry is independently 1 with probability ``one_chance``."""
    if not 0.0 <= one_chance <= 1.0:
        raise InputFaultError("one_chance must be between 0 and 1.")
    SemiringMatrix._check_size(n)
    rng = rng if rng is not None else np.random.default_rng()
    return boolean_matrix((rng.random((n, n)) < one_chance).astype(int).tolist())
