"""
Random and exhaustive instance generation.

Functions:
    - get_random_matrices: a deduplicated random generator set
    - get_all_matrices: every matrix of a given dimension and value range
"""

from __future__ import annotations

from itertools import product
from typing import Iterator, List, Union

import numpy as np

from tropicalbound.elements.matrix import SemiringMatrix
from tropicalbound.elements.semiring import INF, TropicalValue
from tropicalbound.elements.tropical import random_tropical_matrix, tropical_matrix
from tropicalbound.exceptions import InputFaultError

DEFAULT_ZERO_CHANCE = 0.333
DEFAULT_INF_CHANCE = 0.333

SeedLike = Union[None, int, np.random.Generator]


def _as_rng(rng: SeedLike) -> np.random.Generator:
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


def count_matrices(dimension: int, max_value: int) -> int:
    """Number of distinct matrices with entries in {0..max_value, INF}."""
    return (max_value + 2) ** (dimension * dimension)


def get_random_matrices(
    number_of_matrices: int,
    dimension: int,
    max_value: int,
    zero_chance: float = DEFAULT_ZERO_CHANCE,
    inf_chance: float = DEFAULT_INF_CHANCE,
    rng: SeedLike = None,
) -> List[SemiringMatrix]:
    """
    Draw a random instance of ``number_of_matrices`` distinct generators.

    Args:
        number_of_matrices: Size of the generator set
        dimension: Dimension of every generator
        max_value: Largest finite entry
        zero_chance: Probability of a 0 entry
        inf_chance: Probability of an INF entry
        rng: A numpy Generator, a seed, or None for fresh entropy

    Raises:
        InputFaultError: If a count is below 1 or more distinct matrices are
            requested than exist
    """
    if number_of_matrices < 1 or dimension < 1:
        raise InputFaultError("number_of_matrices and dimension must be at least 1.")
    if max_value < 1:
        raise InputFaultError("max_value must be a positive integer.")
    if number_of_matrices > count_matrices(dimension, max_value):
        raise InputFaultError(
            f"Only {count_matrices(dimension, max_value)} distinct matrices exist "
            f"for dimension {dimension} and max_value {max_value}."
        )

    generator = _as_rng(rng)
    # dict keeps draw order while discarding duplicates
    matrices: dict[SemiringMatrix, None] = {}
    while len(matrices) < number_of_matrices:
        matrix = random_tropical_matrix(
            dimension, max_value, zero_chance, inf_chance, rng=generator
        )
        matrices.setdefault(matrix, None)
    return list(matrices)


def get_all_matrices(dimension: int, max_value: int) -> Iterator[SemiringMatrix]:
    """
    Yield every tropical matrix with entries in {0, 1, ..., max_value, INF}.

    Entry ``(j // dimension, j % dimension)`` is digit j of a mixed-radix
    counter, least significant first, so the first matrix is all zeros.
    """
    if dimension < 1 or max_value < 0:
        raise InputFaultError("dimension must be positive and max_value non-negative.")
    values: List[TropicalValue] = list(range(max_value + 1)) + [INF]
    cells = dimension * dimension
    for digits in product(values, repeat=cells):
        # product varies the last position fastest; reverse so entry 0 does
        flat = digits[::-1]
        yield tropical_matrix(
            [list(flat[r * dimension : (r + 1) * dimension]) for r in range(dimension)]
        )
