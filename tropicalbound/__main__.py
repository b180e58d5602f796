#!/usr/bin/env python3
"""
Command-line interface for tropical boundedness analysis.

Decides whether the semigroup generated by a set of tropical (min, +)
matrices is bounded, exhibits shortest witnesses for its maximum value, and
runs random bound-search experiments.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from tropicalbound.decision.decision_algorithms import (
    decide,
    decide_one_matrix,
    decide_with_bound,
    semi_decide_max_value,
)
from tropicalbound.exceptions import InputFaultError
from tropicalbound.experiment import BoundSearchExperiment, format_duration
from tropicalbound.io import read_matrices
from tropicalbound.logger import tb_logger
from tropicalbound.types import ExperimentConfig
from tropicalbound.validators import (
    NonNegativeFloatAction,
    PositiveIntegerAction,
    parse_word,
)
from tropicalbound.witness.witness_search import (
    DEFAULT_TIMEOUT_SECONDS,
    find_min_path_for_max_value,
    shortest_word_path,
)


def setup_argument_parser() -> argparse.ArgumentParser:
    """
    Configure and return the argument parser.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog="tropicalbound",
        description=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-v",
        "--verbose",
        help="Trace the algorithms on the console",
        action="store_true",
    )
    parser.add_argument(
        "--html-log",
        help="Write the algorithm trace as HTML to this file",
        type=Path,
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # decide
    decide_parser = subparsers.add_parser("decide", help="Decide boundedness")
    decide_parser.add_argument("input", help="File with matrix blocks", type=Path)
    decide_parser.add_argument(
        "-m",
        "--method",
        help="Decision procedure (default: semi)",
        choices=["semi", "bound", "one", "deprecated"],
        default="semi",
    )
    decide_parser.add_argument(
        "-t",
        "--timeout",
        help="Timeout in seconds for the semi-decision (default: 10)",
        default=DEFAULT_TIMEOUT_SECONDS,
        type=float,
        action=NonNegativeFloatAction,
    )

    # witness
    witness_parser = subparsers.add_parser(
        "witness", help="Show a shortest path through a word product"
    )
    witness_parser.add_argument("input", help="File with matrix blocks", type=Path)
    witness_parser.add_argument(
        "-t",
        "--timeout",
        help="Timeout in seconds for the semi-decision (default: 10)",
        default=DEFAULT_TIMEOUT_SECONDS,
        type=float,
        action=NonNegativeFloatAction,
    )
    explicit_group = witness_parser.add_argument_group(
        "explicit word options",
        "Give all three to inspect one entry of a chosen word instead of the maximum",
    )
    explicit_group.add_argument(
        "--start", help="1-based row", type=int, action=PositiveIntegerAction
    )
    explicit_group.add_argument(
        "--end", help="1-based column", type=int, action=PositiveIntegerAction
    )
    explicit_group.add_argument(
        "--word", help="Comma-separated 1-based generator numbers", type=parse_word
    )

    # search
    search_parser = subparsers.add_parser(
        "search", help="Search random instances for the largest bound"
    )
    search_parser.add_argument(
        "-n",
        "--dimension",
        help="Matrix dimension (default: 3)",
        default=3,
        type=int,
        action=PositiveIntegerAction,
    )
    search_parser.add_argument(
        "-k",
        "--matrices",
        help="Number of generators per instance (default: 2)",
        default=2,
        type=int,
        action=PositiveIntegerAction,
    )
    search_parser.add_argument(
        "--max-value",
        help="Largest finite entry (default: 1)",
        default=1,
        type=int,
        action=PositiveIntegerAction,
    )
    search_parser.add_argument(
        "-t",
        "--timeout",
        help="Timeout per instance in seconds (default: 0.1)",
        default=0.1,
        type=float,
        action=NonNegativeFloatAction,
    )
    search_parser.add_argument(
        "--total",
        help="Total runtime in seconds (default: 180)",
        default=180.0,
        type=float,
        action=NonNegativeFloatAction,
    )
    search_parser.add_argument(
        "--interval",
        help="Seconds between progress reports (default: 2)",
        default=2.0,
        type=float,
        action=NonNegativeFloatAction,
    )
    search_parser.add_argument(
        "--instances",
        help="Stop after this many instances",
        type=int,
        action=PositiveIntegerAction,
    )
    search_parser.add_argument("--seed", help="Random seed", type=int)

    return parser


def run_decide(args: argparse.Namespace) -> None:
    matrices = read_matrices(args.input)
    if args.method == "semi":
        converged, max_value = semi_decide_max_value(matrices, args.timeout)
        if converged:
            print(f"bounded (maximum value {max_value})")
        else:
            print(
                f"undecided after {format_duration(args.timeout)} "
                f"(largest value seen {max_value}); likely unbounded"
            )
    elif args.method == "one":
        if len(matrices) != 1:
            raise InputFaultError("Method 'one' requires exactly one matrix.")
        print("bounded" if decide_one_matrix(matrices[0]) else "unbounded")
    elif args.method == "bound":
        bounded = decide_with_bound(matrices)
        if bounded:
            print("bounded")
        elif len(matrices) > 1:
            print("unbounded (relies on an unproven bound for more than one matrix)")
        else:
            print("unbounded")
    else:
        print("bounded" if decide(matrices) else "not shown bounded (heuristic)")


def run_witness(args: argparse.Namespace) -> None:
    matrices = read_matrices(args.input)
    explicit = [args.start, args.end, args.word]
    if any(value is not None for value in explicit):
        if any(value is None for value in explicit):
            raise InputFaultError("--start, --end and --word must be given together.")
        report = shortest_word_path(matrices, args.start, args.end, args.word)
    else:
        report = find_min_path_for_max_value(matrices, args.timeout)
    print(report.describe())


def run_search(args: argparse.Namespace) -> None:
    config = ExperimentConfig(
        dimension=args.dimension,
        number_of_matrices=args.matrices,
        max_value=args.max_value,
        timeout_seconds=args.timeout,
        report_interval_seconds=args.interval,
        total_seconds=args.total,
        max_instances=args.instances,
        seed=args.seed,
    )
    print("Searching for maximum bound in randomly generated instances with:")
    print(f"dimension: {config.dimension}")
    print(f"number of matrices: {config.number_of_matrices}")
    print(f"maximum allowed value: {config.max_value}")
    print(f"(search stops after approximately {format_duration(config.total_seconds)})")

    result = BoundSearchExperiment(config).run(
        on_progress=lambda r: print(
            f"min_unbounded == {r.min_unbounded}; max_bounded == {r.max_bounded}; "
            f"checked {r.instances_checked} instances in "
            f"{format_duration(r.elapsed_seconds)}"
        )
    )

    print(f"\nChecked {result.instances_checked} instances "
          f"({result.bounded_count} bounded)")
    if result.bound_violated:
        print(
            f"Warning!! min_unbounded == {result.min_unbounded} <= "
            f"expected bound == {result.expected_bound}"
        )
    print(f"Expected bound (2*(dimension-1)*maxValue): {result.expected_bound}")
    print(f"Actual bound: {result.max_bounded}")
    if result.max_instance is not None:
        print("\nExample for actual bound:\n")
        report = find_min_path_for_max_value(result.max_instance)
        print(report.describe())


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the CLI."""
    parser = setup_argument_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        tb_logger.setup_console_logging(logging.INFO)
    elif args.html_log:
        tb_logger.disabled = False

    commands = {"decide": run_decide, "witness": run_witness, "search": run_search}
    try:
        commands[args.command](args)
    except (InputFaultError, OSError) as e:
        parser.error(str(e))
    finally:
        if args.html_log:
            tb_logger.write_html(args.html_log, title=f"tropicalbound {args.command}")


if __name__ == "__main__":
    main(sys.argv[1:])
