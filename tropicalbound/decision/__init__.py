"""
Boundedness decision procedures for tropical generator sets.
"""

from .closure import ClosureFrontier, explore_closure, validate_generators
from .decision_algorithms import (
    semi_decide,
    semi_decide_max_value,
    decide_one_matrix,
    decide_with_bound,
    unboundedness_bound,
    decide,
)

__all__ = [
    "ClosureFrontier",
    "explore_closure",
    "validate_generators",
    "semi_decide",
    "semi_decide_max_value",
    "decide_one_matrix",
    "decide_with_bound",
    "unboundedness_bound",
    "decide",
]
