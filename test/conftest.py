import logging

import pytest

from tropicalbound.elements import INF, tropical_matrix
from tropicalbound.logger import tb_logger


def pytest_configure(config):
    """Set up test environment before tests run."""
    # Configure logging
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    # Enable the algorithm trace so every logging branch runs
    tb_logger.disabled = False


def pytest_runtest_setup(item):
    """Start every test with an empty HTML trace."""
    tb_logger.clear()


@pytest.fixture
def bounded_one():
    """M² == M, so the closure is {I, M} and the bound is 1."""
    return [tropical_matrix([[0, INF], [1, 0]])]


@pytest.fixture
def unbounded_one():
    """A positive 2-cycle without any zero loop: entries of M^t grow like t."""
    return [tropical_matrix([[INF, 1], [1, INF]])]


@pytest.fixture
def disjoint_zero_loops():
    """Bounded, but the two zero loops are not shared by both generators."""
    return [
        tropical_matrix([[0, INF], [INF, INF]]),
        tropical_matrix([[INF, INF], [INF, 0]]),
    ]


@pytest.fixture
def four_node_pair():
    """Two 4×4 generators used for witness paths."""
    return [
        tropical_matrix(
            [[0, 1, INF, INF], [INF, INF, INF, 1], [1, INF, 0, INF], [1, INF, INF, INF]]
        ),
        tropical_matrix(
            [[1, 1, INF, INF], [1, INF, INF, 1], [INF, 1, 0, INF], [INF, INF, 1, INF]]
        ),
    ]
