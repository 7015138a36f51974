import io
import sys

import pytest

from xvtools.wc import Counts, count, main


@pytest.mark.parametrize(
    "data",
    [
        b"",
        b"hello world\n",
        b"  leading and trailing  \n\n",
        b"tabs\tand\rreturns\vvertical\n",
        b"no newline at end",
        b"word " * 300,
        b"x" * 1000,
    ],
)
def test_invariants(data):
    counts = count(io.BytesIO(data))
    assert counts.chars == len(data)
    assert counts.lines == data.count(b"\n")
    assert counts.words == len(data.split())


def test_empty_input():
    assert count(io.BytesIO(b"")) == Counts(0, 0, 0)


def test_nul_separates_words():
    assert count(io.BytesIO(b"a\0b")).words == count(io.BytesIO(b"a b")).words


def test_form_feed_is_not_a_separator():
    assert count(io.BytesIO(b"a\fb")).words == count(io.BytesIO(b"ab")).words


def test_text_and_bytes_agree():
    text = "one two\nthree\n"
    assert count(io.StringIO(text)) == count(io.BytesIO(text.encode()))


def test_main_file(tmp_path, capsys):
    data = b"hi there\nsecond line\n"
    path = tmp_path / "f.txt"
    path.write_bytes(data)
    expected = count(io.BytesIO(data))
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert out == f"{expected.lines} {expected.words} {expected.chars} {path}\n"


def test_main_stdin(monkeypatch, capsys):
    data = b"a b c\n"
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(data)))
    expected = count(io.BytesIO(data))
    assert main([]) == 0
    assert capsys.readouterr().out == f"{expected.lines} {expected.words} {expected.chars} \n"


def test_main_missing_file(tmp_path, capsys):
    missing = tmp_path / "absent"
    assert main([str(missing)]) == 1
    assert capsys.readouterr().out == f"wc: cannot open {missing}\n"