"""Result and configuration types shared across the package."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, NamedTuple, Optional, Sequence, TypeAlias

from tropicalbound.elements.matrix import SemiringMatrix
from tropicalbound.elements.semiring import TropicalValue
from tropicalbound.logger.formatting import format_path, format_word

# An ordered, fixed array of same-dimension tropical matrices.
GeneratorSet: TypeAlias = Sequence[SemiringMatrix]

# A word is a sequence of 0-based generator indices.
Word: TypeAlias = List[int]


class SemiDecision(NamedTuple):
    """Outcome of ``semi_decide_max_value``."""

    converged: bool
    """True if the closure reached a fixed point before the deadline."""

    max_value: int
    """Largest finite entry seen; the exact bound only when ``converged``."""


@dataclass
class WitnessReport:
    """Shortest-path justification of one entry of a word product."""

    generators: List[SemiringMatrix]
    word: Word
    """0-based generator indices, left to right."""

    resulting_matrix: SemiringMatrix
    start: int
    """1-based row of the inspected entry."""

    end: int
    """1-based column of the inspected entry."""

    distance: TropicalValue
    path: List[int] = field(default_factory=list)
    """1-based nodes visited, one per layer (len(word) + 1 nodes)."""

    weights: List[int] = field(default_factory=list)
    """Edge weight taken at each letter of the word."""

    def describe(self) -> str:
        """Render the report as human-readable text."""
        lines = ["Matrices:"]
        for index, matrix in enumerate(self.generators):
            lines.append(f"M{index + 1}:")
            lines.append(str(matrix))
            lines.append("")
        lines.append(f"Word: {format_word(self.word)}")
        lines.append("Resulting Matrix:")
        lines.append(str(self.resulting_matrix))
        lines.append("")
        lines.append(f"Shortest path from {self.start} to {self.end}:")
        lines.append(f"Total distance: {self.distance}")
        lines.append(f"Path: {format_path(self.path)}")
        lines.append(f"Weights: {self.weights}")
        return "\n".join(lines)


@dataclass
class ExperimentConfig:
    """Configuration for the random bound-search experiment."""

    dimension: int = 3
    number_of_matrices: int = 2
    max_value: int = 1
    timeout_seconds: float = 0.1
    report_interval_seconds: float = 2.0
    total_seconds: float = 180.0
    max_instances: Optional[int] = None
    zero_chance: float = 0.333
    inf_chance: float = 0.333
    seed: Optional[int] = None
    logger_name: str = __name__


@dataclass
class ExperimentResult:
    """Running statistics of a bound-search experiment."""

    config: ExperimentConfig
    max_bounded: int = 0
    """Largest bound found among instances that converged."""

    min_unbounded: Optional[int] = None
    """Smallest maximum seen among instances that timed out (presumed unbounded)."""

    max_instance: Optional[List[SemiringMatrix]] = None
    instances_checked: int = 0
    bounded_count: int = 0
    elapsed_seconds: float = 0.0

    @property
    def expected_bound(self) -> int:
        """The conjectured bound 2·(n−1)·max_value, known to fail for k > 1."""
        return 2 * (self.config.dimension - 1) * self.config.max_value

    @property
    def bound_violated(self) -> bool:
        return self.min_unbounded is not None and self.min_unbounded <= self.expected_bound
