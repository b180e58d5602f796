import numpy as np
import pytest

from tropicalbound.elements import (
    INF,
    boolean_matrix,
    is_tropical,
    max_value,
    normalized,
    random_tropical_matrix,
    tropical_matrix,
    boolean_abstraction,
)
from tropicalbound.exceptions import InputFaultError


def test_max_value_ignores_infinity():
    assert max_value(tropical_matrix([[0, 7], [INF, 3]])) == 7


def test_max_value_of_all_infinite_matrix_is_zero():
    assert max_value(tropical_matrix([[INF, INF], [INF, INF]])) == 0


def test_max_value_requires_tropical():
    with pytest.raises(InputFaultError):
        max_value(boolean_matrix([[1]]))


def test_boolean_abstraction():
    m = tropical_matrix([[0, INF], [5, 1]])
    assert boolean_abstraction(m) == boolean_matrix([[1, 0], [1, 1]])


def test_normalized_keeps_zero_positive_infinite_pattern():
    m = tropical_matrix([[0, 5], [INF, 1]])
    assert normalized(m) == tropical_matrix([[0, 1], [INF, 1]])


def test_is_tropical():
    assert is_tropical(tropical_matrix([[0]]))
    assert not is_tropical(boolean_matrix([[0]]))
    assert not is_tropical([[0]])


class TestRandomTropicalMatrix:
    def test_entries_in_range(self):
        rng = np.random.default_rng(7)
        for _ in range(20):
            m = random_tropical_matrix(3, 4, 0.3, 0.3, rng=rng)
            assert m.size() == 3
            for value in m.entries():
                assert value is INF or 0 <= value <= 4

    def test_seeded_draws_repeat(self):
        first = random_tropical_matrix(4, 9, 0.2, 0.2, rng=np.random.default_rng(3))
        second = random_tropical_matrix(4, 9, 0.2, 0.2, rng=np.random.default_rng(3))
        assert first == second

    def test_only_zeros(self):
        m = random_tropical_matrix(3, 5, 1.0, 0.0)
        assert list(m.entries()) == [0] * 9

    def test_only_infinity(self):
        m = random_tropical_matrix(3, 5, 0.0, 1.0)
        assert list(m.entries()) == [INF] * 9

    def test_only_positive_values(self):
        m = random_tropical_matrix(3, 1, 0.0, 0.0)
        assert list(m.entries()) == [1] * 9

    @pytest.mark.parametrize(
        "zero_chance, inf_chance",
        [(-0.1, 0.5), (0.5, 1.5), (0.6, 0.6)],
    )
    def test_rejects_invalid_probabilities(self, zero_chance, inf_chance):
        with pytest.raises(InputFaultError):
            random_tropical_matrix(2, 3, zero_chance, inf_chance)

    @pytest.mark.parametrize("bad_max", [0, -4, 2.5])
    def test_rejects_invalid_max_value(self, bad_max):
        with pytest.raises(InputFaultError, match="max_value"):
            random_tropical_matrix(2, bad_max, 0.3, 0.3)

    def test_rejects_invalid_size(self):
        with pytest.raises(InputFaultError):
            random_tropical_matrix(0, 3, 0.3, 0.3)
