import pytest

from tropicalbound.elements import INF, tropical_matrix
from tropicalbound.exceptions import InputFaultError
from tropicalbound.io import read_matrices, write_matrices


def test_write_then_read(tmp_path, four_node_pair):
    path = tmp_path / "instance.txt"
    write_matrices(four_node_pair, path)

    assert path.read_text().endswith("-\n")
    assert read_matrices(path) == four_node_pair
    assert read_matrices(str(path)) == four_node_pair


def test_read_matrices_from_hand_written_file(tmp_path):
    path = tmp_path / "single.txt"
    path.write_text("0 -\n1 0\n")
    assert read_matrices(path) == [tropical_matrix([[0, INF], [1, 0]])]


def test_read_rejects_malformed_file(tmp_path):
    path = tmp_path / "broken.txt"
    path.write_text("0 1\n2\n")
    with pytest.raises(InputFaultError):
        read_matrices(path)


def test_read_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_matrices(tmp_path / "missing.txt")
