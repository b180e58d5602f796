"""
Random bound-search experiment
==============================

Samples random generator sets, semi-decides each with a short timeout and
keeps running statistics:

- ``max_bounded``: the largest bound among instances that converged
- ``min_unbounded``: the smallest maximum among instances that timed out

If ``min_unbounded`` gets close to ``max_bounded`` the timeout is too short
to separate bounded from unbounded instances and should be raised.
"""

from __future__ import annotations

import logging
import time
from datetime import timedelta
from typing import Callable, Optional

import numpy as np

from tropicalbound.decision.decision_algorithms import semi_decide_max_value
from tropicalbound.generator import get_random_matrices
from tropicalbound.logger import tb_logger
from tropicalbound.types import ExperimentConfig, ExperimentResult

ProgressCallback = Callable[[ExperimentResult], None]


def format_duration(seconds: float) -> str:
    """Render a duration as '[Hh ][Mm ]S.CCs', e.g. '1m 5.25s'."""
    duration = timedelta(seconds=seconds)
    total = int(duration.total_seconds())
    hours, remainder = divmod(total, 3600)
    minutes, secs = divmod(remainder, 60)
    centis = duration.microseconds // 10_000
    text = f"{secs}.{centis:02d}s"
    if hours > 0 or minutes > 0:
        text = f"{minutes}m {text}"
    if hours > 0:
        text = f"{hours}h {text}"
    return text


class BoundSearchExperiment:
    """Repeatedly samples instances and tracks the largest bound observed."""

    def __init__(self, config: Optional[ExperimentConfig] = None):
        self.config = config or ExperimentConfig()
        self.logger = logging.getLogger(self.config.logger_name)
        self.rng = np.random.default_rng(self.config.seed)

    def _finished(self, result: ExperimentResult, elapsed: float) -> bool:
        if (
            self.config.max_instances is not None
            and result.instances_checked >= self.config.max_instances
        ):
            return True
        return elapsed >= self.config.total_seconds

    def run(self, on_progress: Optional[ProgressCallback] = None) -> ExperimentResult:
        """
        Run the experiment until ``total_seconds`` or ``max_instances`` is reached.

        Args:
            on_progress: Called with the running result roughly every
                ``report_interval_seconds``

        Returns:
            The final statistics
        """
        config = self.config
        result = ExperimentResult(config=config)
        self.logger.info(
            "Searching for maximum bound: dimension=%d, matrices=%d, max value=%d",
            config.dimension,
            config.number_of_matrices,
            config.max_value,
        )
        tb_logger.section("Bound search experiment")

        start = time.monotonic()
        last_report = start
        while not self._finished(result, time.monotonic() - start):
            matrices = get_random_matrices(
                config.number_of_matrices,
                config.dimension,
                config.max_value,
                zero_chance=config.zero_chance,
                inf_chance=config.inf_chance,
                rng=self.rng,
            )
            converged, max_value = semi_decide_max_value(matrices, config.timeout_seconds)
            if converged:
                result.bounded_count += 1
                if max_value > result.max_bounded or result.max_instance is None:
                    result.max_bounded = max_value
                    result.max_instance = list(matrices)
            elif result.min_unbounded is None or max_value < result.min_unbounded:
                result.min_unbounded = max_value
            result.instances_checked += 1

            now = time.monotonic()
            result.elapsed_seconds = now - start
            if now - last_report >= config.report_interval_seconds:
                last_report = now
                self.logger.info(
                    "min_unbounded == %s; max_bounded == %d; checked %d instances in %s",
                    result.min_unbounded,
                    result.max_bounded,
                    result.instances_checked,
                    format_duration(result.elapsed_seconds),
                )
                if on_progress is not None:
                    on_progress(result)

        result.elapsed_seconds = time.monotonic() - start
        if result.bound_violated:
            self.logger.warning(
                "min_unbounded == %s <= expected bound %d",
                result.min_unbounded,
                result.expected_bound,
            )
        tb_logger.table(
            [
                [
                    result.instances_checked,
                    result.bounded_count,
                    result.max_bounded,
                    result.min_unbounded,
                    result.expected_bound,
                ]
            ],
            headers=["checked", "bounded", "max bounded", "min unbounded", "expected"],
        )
        return result
