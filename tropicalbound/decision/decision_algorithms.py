"""
Boundedness decision procedures
===============================

A generator set G of tropical matrices is *bounded* when the products of all
finite words over G take only finitely many distinct finite entry values.

Procedures:
    - semi_decide: proves boundedness by reaching the closure fixed point,
      gives up ("undecided") at a deadline
    - semi_decide_max_value: same, and reports the largest finite entry seen
    - decide_one_matrix: exact polynomial decision for a single generator
    - decide_with_bound: full decision conditioned on a conjectured bound
    - decide: deprecated structural heuristic with false negatives
"""

from __future__ import annotations

import logging
import warnings
from typing import List

from tropicalbound.decision.closure import (
    ClosureFrontier,
    explore_closure,
    validate_generators,
)
from tropicalbound.elements.boolean import boolean_matrix, transitive_closure
from tropicalbound.elements.matrix import SemiringMatrix
from tropicalbound.elements.tropical import (
    boolean_abstraction,
    is_finite,
    max_value,
    tropical_identity,
)
from tropicalbound.logger import format_set, tb_logger
from tropicalbound.types import GeneratorSet, SemiDecision

logger = logging.getLogger(__name__)


def semi_decide(generators: GeneratorSet, timeout_seconds: float) -> bool:
    """
    Iteratively build the products of all words of increasing length.

    If the instance is bounded some layer adds no new product and this
    returns True. If that does not happen within ``timeout_seconds`` the
    result is False, which only means "undecided": without the timeout the
    loop would never terminate on an unbounded instance.
    """
    tb_logger.section("Semi-decision")
    frontier = explore_closure(generators, timeout_seconds)
    tb_logger.result("Converged", frontier.converged)
    tb_logger.result("Layers", frontier.layers)
    return frontier.converged


def semi_decide_max_value(
    generators: GeneratorSet, timeout_seconds: float
) -> SemiDecision:
    """
    Run the semi-decision and report the largest finite entry in the closure.

    When ``converged`` is True the maximum is the exact bound. After a
    timeout it is only the largest value seen so far and can be used to tell
    whether the timeout was set too low.
    """
    tb_logger.section("Semi-decision with maximum value")
    frontier = explore_closure(generators, timeout_seconds)
    decision = SemiDecision(frontier.converged, frontier.max_value())
    tb_logger.table(
        [[decision.converged, decision.max_value, frontier.layers, len(frontier.full)]],
        headers=["converged", "max value", "layers", "closure size"],
    )
    return decision


def _zero_loops(matrix: SemiringMatrix) -> List[bool]:
    """zero_loop[j] is True if some power M^i (1 <= i <= n) has M^i[j][j] == 0."""
    n = matrix.size()
    zero_loop = [False] * n
    product = tropical_identity(n)
    for _ in range(n):
        product.times_in_place(matrix)
        for j in range(n):
            if product.get(j, j) == 0:
                zero_loop[j] = True
    return zero_loop


def decide_one_matrix(matrix: SemiringMatrix) -> bool:
    """
    Exact decision for a single generator.

    The powers of M are bounded iff every node that lies on a cycle of M's
    edge graph can reach, and be reached back from, a node with a zero-weight
    closed walk of length at most n.
    """
    n = validate_generators([matrix])

    tb_logger.section("Single-matrix decision")
    zero_loop = _zero_loops(matrix)
    reachable = transitive_closure(boolean_abstraction(matrix))
    tb_logger.matrix(reachable, title="Reachability (1..n hops)")
    tb_logger.info(f"Zero loops: {format_set(j + 1 for j in range(n) if zero_loop[j])}")

    for i in range(n):
        if reachable.get(i, i) == 0:
            continue
        if not any(
            zero_loop[j] and reachable.get(i, j) == 1 and reachable.get(j, i) == 1
            for j in range(n)
        ):
            tb_logger.info(f"Node {i + 1} lies on a cycle without a reachable zero loop")
            return False
    return True


def unboundedness_bound(generators: GeneratorSet) -> int:
    """The conjectured bound (n − 1) · 2 · max_i maxValue(G_i) · k."""
    dimension = validate_generators(generators)
    largest = max(max_value(m) for m in generators)
    return (dimension - 1) * 2 * largest * len(generators)


def decide_with_bound(generators: GeneratorSet) -> bool:
    """
    Decide boundedness assuming ``unboundedness_bound`` is a true bound.

    Iterates like ``semi_decide`` without a deadline, but answers False as
    soon as a layer contains a finite entry above the bound, which eventually
    happens on every unbounded instance. For a single generator the bound is
    safe; for k > 1 it is conjectured only, so a False answer is not a
    certified proof of unboundedness.
    """
    bound = unboundedness_bound(generators)
    tb_logger.section("Decision with bound")
    tb_logger.result("Bound", bound)

    def exceeds_bound(frontier: ClosureFrontier) -> bool:
        return max(max_value(m) for m in frontier.partial) > bound

    frontier = explore_closure(generators, stop=exceeds_bound)
    if frontier.converged:
        return True

    if len(generators) > 1:
        logger.warning(
            "decide_with_bound: entry above %d found after %d layers; "
            "the bound is unproven for %d generators, so this negative answer "
            "is not certified.",
            bound,
            frontier.layers,
            len(generators),
        )
        tb_logger.warning("Negative answer relies on an unproven bound (k > 1)")
    return False


def decide(generators: GeneratorSet) -> bool:
    """
    Deprecated structural test for boundedness.

    If this returns True the instance is bounded. It returns False on some
    bounded instances as well, because the condition it checks (every path
    through a loop must pass a zero loop that every generator shares) is
    stronger than boundedness.
    """
    warnings.warn(
        "decide is deprecated and reports false negatives, use semi_decide, "
        "decide_one_matrix or decide_with_bound instead",
        DeprecationWarning,
        stacklevel=2,
    )
    n = validate_generators(generators)

    # (i, j) has weight 0 in every generator
    zero_intersection = boolean_matrix(
        [
            [int(all(m.get(i, j) == 0 for m in generators)) for j in range(n)]
            for i in range(n)
        ]
    )

    # node j reaches itself over 0-edges within n steps
    zero_loop = [False] * n
    product = zero_intersection.copy()
    for _ in range(n):
        for j in range(n):
            if product.get(j, j) == 1:
                zero_loop[j] = True
        product.times_in_place(zero_intersection)

    edge_union = boolean_matrix(
        [
            [int(any(is_finite(m.get(i, j)) for m in generators)) for j in range(n)]
            for i in range(n)
        ]
    )
    edge_intersection = boolean_matrix(
        [
            [int(all(is_finite(m.get(i, j)) for m in generators)) for j in range(n)]
            for i in range(n)
        ]
    )

    path_union = transitive_closure(edge_union)
    path_intersection = transitive_closure(edge_intersection)

    for i in range(n):
        for j in range(n):
            if path_union.get(i, j) == 0:
                continue

            word_with_loop_exists = any(
                path_union.get(i, k) == 1
                and path_union.get(k, k) == 1
                and path_union.get(k, j) == 1
                for k in range(n)
            )
            if not word_with_loop_exists:
                continue

            passes_zero_loop = any(
                path_intersection.get(i, k) == 1
                and zero_loop[k]
                and path_intersection.get(k, j) == 1
                for k in range(n)
            )
            if not passes_zero_loop:
                return False

    return True
