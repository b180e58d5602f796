from tropicalbound.elements import INF, tropical_matrix
from tropicalbound.exceptions import InputFaultError
from tropicalbound.logger import Logger, format_path, format_set, format_word, tb_logger
from tropicalbound.logger.matrix_logger import to_ascii_matrix


def test_format_word():
    assert format_word([]) == "ε"
    assert format_word([0, 1, 0]) == "M1·M2·M1"


def test_format_path():
    assert format_path([1, 3, 2]) == "1 → 3 → 2"
    assert format_path([]) == "∅"


def test_format_set():
    assert format_set({2, 1}) == "{1, 2}"
    assert format_set(set()) == "∅"


def test_to_ascii_matrix():
    lines = to_ascii_matrix(tropical_matrix([[0, INF], [12, 3]]))
    assert lines == ["[  0  - ]", "[ 12  3 ]"]


def test_disabled_logger_records_nothing():
    logger = Logger("quiet_test_logger")
    logger.disabled = True
    logger.section("Hidden")
    logger.matrix(tropical_matrix([[0]]))
    logger.table([[1, 2]], headers=["a", "b"])
    assert logger.get_html_content() == '<div class="content">\n</div>'


def test_trace_collects_html():
    logger = Logger("html_test_logger")
    logger.section("Closure")
    logger.result("Converged", True)
    logger.matrices([tropical_matrix([[0, INF], [1, 0]])], title="Generators")
    logger.table([[True, 1]], headers=["converged", "max value"])
    content = logger.get_html_content()
    assert "<h3>Closure</h3>" in content
    assert "Converged:</span> True" in content
    assert "<h4>M1</h4>" in content
    assert "<th>max value</th>" in content
    assert content.count("<section") == content.count("</section>")


def test_dimension_mismatch_is_traced():
    assert not tb_logger.disabled
    try:
        InputFaultError.raise_dimension_mismatch(2, 3, 1)
    except InputFaultError as e:
        assert "expected 2" in str(e)
    assert "Generator 1 has dimension 3" in tb_logger.get_html_content()
