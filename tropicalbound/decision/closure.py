"""
Word closure exploration
========================

All sound decision procedures share one fixed-point step. Starting from the
identity, every product of a word of the current length is extended by every
generator:

    next = { p · g : p ∈ partial, g ∈ G }

Once ``next`` equals ``partial`` or adds nothing to ``full``, no longer word
can produce a new matrix and ``full`` is the complete closure.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, Optional, Set

from tropicalbound.elements.matrix import SemiringMatrix
from tropicalbound.elements.tropical import is_tropical, max_value, tropical_identity
from tropicalbound.exceptions import InputFaultError
from tropicalbound.logger import tb_logger
from tropicalbound.types import GeneratorSet

logger = logging.getLogger(__name__)


def validate_generators(generators: Optional[GeneratorSet]) -> int:
    """
    Check a generator set and return its common dimension.

    Raises:
        InputFaultError: If the set is None or empty, contains a non-tropical
            matrix, or mixes dimensions
    """
    if generators is None or len(generators) < 1:
        raise InputFaultError("Matrices is null or empty.")
    for index, matrix in enumerate(generators):
        if not is_tropical(matrix):
            raise InputFaultError(f"Generator {index} is not a tropical matrix.")
    dimension = generators[0].size()
    for index, matrix in enumerate(generators):
        if matrix.size() != dimension:
            InputFaultError.raise_dimension_mismatch(dimension, matrix.size(), index)
    return dimension


@dataclass
class ClosureFrontier:
    """Working state of the fixed-point iteration for one query."""

    partial: Set[SemiringMatrix]
    """Products of all words of the current length."""

    full: Set[SemiringMatrix]
    """Products of all words of every length seen so far."""

    layers: int = 0
    """Number of absorbed layers, i.e. the current word length."""

    converged: bool = False

    @classmethod
    def start(cls, dimension: int) -> "ClosureFrontier":
        identity = tropical_identity(dimension)
        return cls(partial={identity}, full={identity.copy()})

    def expand(self, generators: GeneratorSet) -> Set[SemiringMatrix]:
        """Extend every word of the current length by every generator."""
        return {p.times(g) for p in self.partial for g in generators}

    def is_fixed_point(self, next_layer: Set[SemiringMatrix]) -> bool:
        return next_layer == self.partial or next_layer <= self.full

    def absorb(self, next_layer: Set[SemiringMatrix]) -> None:
        self.full |= next_layer
        self.partial = next_layer
        self.layers += 1

    def step(self, generators: GeneratorSet) -> bool:
        """Run one full layer; return True once the fixed point is reached."""
        next_layer = self.expand(generators)
        if self.is_fixed_point(next_layer):
            self.converged = True
            return True
        self.absorb(next_layer)
        return False

    def max_value(self) -> int:
        return max((max_value(m) for m in self.full), default=0)


def explore_closure(
    generators: GeneratorSet,
    timeout_seconds: Optional[float] = None,
    stop: Optional[Callable[[ClosureFrontier], bool]] = None,
) -> ClosureFrontier:
    """
    Iterate the fixed-point step until convergence, deadline or ``stop``.

    The deadline is checked once before each layer, never in the middle of
    one: the convergence test only holds on a completely built layer. The
    elapsed time may therefore exceed ``timeout_seconds`` by one layer.

    Args:
        generators: The generator set
        timeout_seconds: Wall-clock budget; None means no deadline
        stop: Called after each absorbed layer; returning True ends the loop

    Returns:
        The frontier; ``converged`` tells whether the fixed point was reached
    """
    dimension = validate_generators(generators)
    frontier = ClosureFrontier.start(dimension)
    deadline = None if timeout_seconds is None else time.monotonic() + timeout_seconds

    while deadline is None or time.monotonic() < deadline:
        if frontier.step(generators):
            break
        if not tb_logger.disabled:
            tb_logger.debug(
                f"Layer {frontier.layers}: {len(frontier.partial)} new products, "
                f"{len(frontier.full)} in closure"
            )
        if stop is not None and stop(frontier):
            break

    logger.debug(
        "Closure exploration finished after %d layers (converged=%s, size=%d)",
        frontier.layers,
        frontier.converged,
        len(frontier.full),
    )
    return frontier
