import numpy as np
import pytest

from tropicalbound.elements import INF, tropical_matrix
from tropicalbound.exceptions import InputFaultError
from tropicalbound.generator import count_matrices, get_all_matrices, get_random_matrices


class TestGetAllMatrices:
    def test_one_by_one(self):
        assert list(get_all_matrices(1, 1)) == [
            tropical_matrix([[0]]),
            tropical_matrix([[1]]),
            tropical_matrix([[INF]]),
        ]

    def test_first_entry_varies_fastest(self):
        matrices = list(get_all_matrices(2, 0))
        assert matrices[0] == tropical_matrix([[0, 0], [0, 0]])
        assert matrices[1] == tropical_matrix([[INF, 0], [0, 0]])
        assert matrices[-1] == tropical_matrix([[INF, INF], [INF, INF]])

    @pytest.mark.parametrize("dimension, max_value", [(1, 3), (2, 0), (2, 1)])
    def test_enumerates_every_matrix_once(self, dimension, max_value):
        matrices = list(get_all_matrices(dimension, max_value))
        assert len(matrices) == count_matrices(dimension, max_value)
        assert len(set(matrices)) == len(matrices)

    def test_rejects_invalid_arguments(self):
        with pytest.raises(InputFaultError):
            list(get_all_matrices(0, 1))


class TestGetRandomMatrices:
    def test_distinct_generators(self):
        matrices = get_random_matrices(4, 2, 3, rng=5)
        assert len(matrices) == 4
        assert len(set(matrices)) == 4
        for m in matrices:
            assert m.size() == 2

    def test_exhausts_small_space(self):
        matrices = get_random_matrices(3, 1, 1, rng=0)
        assert set(matrices) == set(get_all_matrices(1, 1))

    def test_accepts_generator_instance(self):
        rng = np.random.default_rng(9)
        first = get_random_matrices(2, 3, 2, rng=rng)
        second = get_random_matrices(2, 3, 2, rng=np.random.default_rng(9))
        assert first == second

    def test_rejects_too_many_matrices(self):
        with pytest.raises(InputFaultError, match="Only 3 distinct matrices"):
            get_random_matrices(4, 1, 1)

    @pytest.mark.parametrize(
        "number, dimension, max_value", [(0, 2, 1), (2, 0, 1), (2, 2, 0)]
    )
    def test_rejects_invalid_counts(self, number, dimension, max_value):
        with pytest.raises(InputFaultError):
            get_random_matrices(number, dimension, max_value)
