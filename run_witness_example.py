"""Witness search on a small bounded instance."""

import logging

from tropicalbound.decision.decision_algorithms import semi_decide_max_value
from tropicalbound.logger import tb_logger
from tropicalbound.parser.matrix_parser import parse_matrices
from tropicalbound.types import WitnessReport
from tropicalbound.witness.witness_search import find_min_path_for_max_value

EXAMPLE = """
0 1 - -
- - - 1
1 - 0 -
1 - - -

1 1 - -
1 - - 1
- 1 0 -
- - 1 -
"""


def main():
    logging.basicConfig(level=logging.INFO)
    tb_logger.disabled = False

    matrices = parse_matrices(EXAMPLE)
    converged, max_value = semi_decide_max_value(matrices, timeout_seconds=10.0)
    print(f"Converged: {converged}, maximum value: {max_value}")

    report: WitnessReport = find_min_path_for_max_value(matrices)
    print(report.describe())

    tb_logger.write_html("output/witness_example.html", title="Witness example")


if __name__ == "__main__":
    main()
