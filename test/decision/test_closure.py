import pytest

from tropicalbound.decision.closure import (
    ClosureFrontier,
    explore_closure,
    validate_generators,
)
from tropicalbound.elements import INF, boolean_identity, tropical_identity, tropical_matrix
from tropicalbound.exceptions import InputFaultError


class TestValidateGenerators:
    def test_returns_dimension(self, four_node_pair):
        assert validate_generators(four_node_pair) == 4

    @pytest.mark.parametrize("generators", [None, []])
    def test_rejects_missing_generators(self, generators):
        with pytest.raises(InputFaultError, match="null or empty"):
            validate_generators(generators)

    def test_rejects_mixed_dimensions(self):
        with pytest.raises(InputFaultError, match="Generator 1 has dimension 3"):
            validate_generators([tropical_identity(2), tropical_identity(3)])

    def test_rejects_non_tropical_generators(self):
        with pytest.raises(InputFaultError, match="not a tropical matrix"):
            validate_generators([tropical_identity(2), boolean_identity(2)])


class TestExploreClosure:
    def test_idempotent_generator_converges_after_one_layer(self, bounded_one):
        frontier = explore_closure(bounded_one, timeout_seconds=5.0)
        assert frontier.converged
        assert frontier.layers == 1
        assert frontier.full == {tropical_identity(2), bounded_one[0]}
        assert frontier.max_value() == 1

    def test_identity_generator_converges_immediately(self):
        frontier = explore_closure([tropical_identity(3)], timeout_seconds=5.0)
        assert frontier.converged
        assert frontier.layers == 0
        assert frontier.max_value() == 0

    def test_closure_of_disjoint_zero_loops(self, disjoint_zero_loops):
        frontier = explore_closure(disjoint_zero_loops, timeout_seconds=5.0)
        all_infinite = tropical_matrix([[INF, INF], [INF, INF]])
        assert frontier.converged
        assert frontier.full == {tropical_identity(2), all_infinite, *disjoint_zero_loops}

    def test_deadline_stops_unbounded_instance(self, unbounded_one):
        frontier = explore_closure(unbounded_one, timeout_seconds=0.05)
        assert not frontier.converged
        assert frontier.layers >= 1
        assert frontier.max_value() >= 1

    def test_stop_callback(self, unbounded_one):
        frontier = explore_closure(
            unbounded_one, stop=lambda f: f.layers == 4
        )
        assert not frontier.converged
        assert frontier.layers == 4
        assert frontier.partial == {unbounded_one[0].pow(4)}
        assert frontier.max_value() == 4

    def test_zero_timeout_runs_no_layer(self, bounded_one):
        frontier = explore_closure(bounded_one, timeout_seconds=0.0)
        assert not frontier.converged
        assert frontier.layers == 0


def test_frontier_step():
    generator = tropical_matrix([[INF, 0], [0, INF]])
    frontier = ClosureFrontier.start(2)
    assert frontier.partial == {tropical_identity(2)}
    assert not frontier.step([generator])
    assert frontier.partial == {generator}
    # the square is the identity, which is already in the closure
    assert frontier.step([generator])
    assert frontier.converged
    assert frontier.layers == 1
