import argparse

import pytest

from tropicalbound.__main__ import main, setup_argument_parser
from tropicalbound.validators import parse_word


@pytest.fixture
def bounded_file(tmp_path):
    path = tmp_path / "bounded.txt"
    path.write_text("0 -\n1 0\n")
    return path


@pytest.fixture
def pair_file(tmp_path):
    path = tmp_path / "pair.txt"
    path.write_text("0 -\n- -\n\n- -\n- 0\n")
    return path


class TestDecideCommand:
    def test_semi(self, bounded_file, capsys):
        main(["decide", str(bounded_file)])
        assert "bounded (maximum value 1)" in capsys.readouterr().out

    def test_one(self, bounded_file, capsys):
        main(["decide", str(bounded_file), "--method", "one"])
        assert capsys.readouterr().out.strip() == "bounded"

    def test_bound(self, bounded_file, capsys):
        main(["decide", str(bounded_file), "-m", "bound"])
        assert capsys.readouterr().out.strip() == "bounded"

    def test_deprecated(self, pair_file, capsys):
        with pytest.deprecated_call():
            main(["decide", str(pair_file), "-m", "deprecated"])
        assert "not shown bounded" in capsys.readouterr().out

    def test_one_requires_single_matrix(self, pair_file, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["decide", str(pair_file), "-m", "one"])
        assert exc.value.code == 2
        assert "exactly one matrix" in capsys.readouterr().err

    def test_missing_file(self, tmp_path):
        with pytest.raises(SystemExit):
            main(["decide", str(tmp_path / "missing.txt")])

    def test_negative_timeout(self, bounded_file):
        with pytest.raises(SystemExit):
            main(["decide", str(bounded_file), "--timeout", "-1"])


class TestWitnessCommand:
    def test_maximum_witness(self, bounded_file, capsys):
        main(["witness", str(bounded_file)])
        out = capsys.readouterr().out
        assert "Word: M1" in out
        assert "Total distance: 1" in out
        assert "Path: 2 → 1" in out

    def test_explicit_word(self, pair_file, capsys):
        main(["witness", str(pair_file), "--start", "1", "--end", "1", "--word", "1,1"])
        out = capsys.readouterr().out
        assert "Word: M1·M1" in out
        assert "Total distance: 0" in out

    def test_explicit_word_needs_all_options(self, pair_file, capsys):
        with pytest.raises(SystemExit):
            main(["witness", str(pair_file), "--start", "1"])
        assert "must be given together" in capsys.readouterr().err

    def test_rejects_zero_start(self, pair_file):
        with pytest.raises(SystemExit):
            main(["witness", str(pair_file), "--start", "0", "--end", "1", "--word", "1"])


def test_search_command(capsys):
    main(
        [
            "search",
            "-n", "2",
            "-k", "1",
            "--max-value", "1",
            "--timeout", "0.01",
            "--interval", "100",
            "--instances", "3",
            "--seed", "4",
        ]
    )
    out = capsys.readouterr().out
    assert "dimension: 2" in out
    assert "Checked 3 instances" in out
    assert "Expected bound (2*(dimension-1)*maxValue): 2" in out


def test_html_log(bounded_file, tmp_path):
    log_path = tmp_path / "trace" / "log.html"
    main(["--html-log", str(log_path), "decide", str(bounded_file)])
    page = log_path.read_text(encoding="utf-8")
    assert "<title>tropicalbound decide</title>" in page
    assert "Semi-decision" in page


def test_command_is_required():
    with pytest.raises(SystemExit):
        setup_argument_parser().parse_args([])


class TestParseWord:
    def test_one_based_letters(self):
        assert parse_word("1, 2,1") == [0, 1, 0]

    @pytest.mark.parametrize("text", ["0", "a,1", "1,-2"])
    def test_rejects_invalid_words(self, text):
        with pytest.raises(argparse.ArgumentTypeError):
            parse_word(text)
