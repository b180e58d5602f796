"""Boundedness analysis for semigroups of tropical (min, +) matrices."""

__all__ = [
    "INF",
    "SemiringMatrix",
    "tropical_matrix",
    "tropical_identity",
    "semi_decide",
    "semi_decide_max_value",
    "decide_one_matrix",
    "decide_with_bound",
    "decide",
    "tropical_dijkstra",
    "find_min_path_for_max_value",
    "parse_matrices",
    "read_matrices",
    "write_matrices",
    "SemiDecision",
    "WitnessReport",
    "ExperimentConfig",
]


def __getattr__(name):
    if name in {"INF", "SemiringMatrix", "tropical_matrix", "tropical_identity"}:
        from .elements import INF, SemiringMatrix, tropical_matrix, tropical_identity

        return locals()[name]
    if name in {
        "semi_decide",
        "semi_decide_max_value",
        "decide_one_matrix",
        "decide_with_bound",
        "decide",
    }:
        from .decision import (
            semi_decide,
            semi_decide_max_value,
            decide_one_matrix,
            decide_with_bound,
            decide,
        )

        return locals()[name]
    if name in {"tropical_dijkstra", "find_min_path_for_max_value"}:
        from .witness import tropical_dijkstra, find_min_path_for_max_value

        return locals()[name]
    if name in {"parse_matrices", "read_matrices", "write_matrices"}:
        from .parser import parse_matrices
        from .io import read_matrices, write_matrices

        return locals()[name]
    if name in {"SemiDecision", "WitnessReport", "ExperimentConfig"}:
        from .types import SemiDecision, WitnessReport, ExperimentConfig

        return locals()[name]
    raise AttributeError(name)
