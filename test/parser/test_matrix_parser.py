import pytest

from tropicalbound.elements import INF, boolean_identity, tropical_matrix
from tropicalbound.exceptions import InputFaultError
from tropicalbound.parser import (
    format_matrices,
    format_matrix,
    parse_block,
    parse_matrices,
    parse_token,
)

FOUR_NODE_SOURCE = """
0  1  -  -
-  -  -  1
1  -  0  -
1  -  -  -

1  1  -  -
1  -  -  1
-  1  0  -
-  -  1  -"""


def test_parse_token():
    assert parse_token("-") is INF
    assert parse_token("0") == 0
    assert parse_token("42") == 42


@pytest.mark.parametrize("token", ["x", "-1", "1.5", "٣", ""])
def test_parse_token_rejects_invalid(token):
    with pytest.raises(InputFaultError, match="Invalid matrix entry"):
        parse_token(token)


def test_parse_matrices_with_padding(four_node_pair):
    assert parse_matrices(FOUR_NODE_SOURCE) == four_node_pair


def test_parse_matrices_handles_windows_line_endings():
    source = "0 1\r\n- 0\r\n\r\n1 1\r\n1 1\r\n"
    assert parse_matrices(source) == [
        tropical_matrix([[0, 1], [INF, 0]]),
        tropical_matrix([[1, 1], [1, 1]]),
    ]


def test_parse_matrices_of_blank_input():
    assert parse_matrices("") == []
    assert parse_matrices("\n   \n") == []


def test_parse_block_rejects_non_square():
    with pytest.raises(InputFaultError, match="not square: 2×3"):
        parse_block("0 1 2\n1 2 3")


def test_format_matrix():
    m = tropical_matrix([[0, INF], [12, 3]])
    assert format_matrix(m) == "0   -\n12  3"
    assert parse_block(format_matrix(m)) == m


def test_format_matrices_round_trip(four_node_pair):
    text = format_matrices(four_node_pair)
    assert "\n\n" in text
    assert parse_matrices(text) == four_node_pair


def test_format_matrix_requires_tropical():
    with pytest.raises(InputFaultError):
        format_matrix(boolean_identity(2))
