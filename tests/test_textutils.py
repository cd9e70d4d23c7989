import io
import sys

import pytest

from fogos.textutils import cat, cat_main, echo, echo_main, wc, wc_main


class _ShortWriter:
    def write(self, data):
        return len(data) - 1


def test_cat_copies_exactly():
    data = bytes(range(256)) * 10
    out = io.BytesIO()
    cat(io.BytesIO(data), out)
    assert out.getvalue() == data


def test_cat_short_write_raises():
    with pytest.raises(OSError, match="write error"):
        cat(io.BytesIO(b"hello"), _ShortWriter())


def test_echo_joins_words():
    out = io.StringIO()
    echo(["hello", "world"], out)
    assert out.getvalue() == "hello world\n"


def test_echo_nothing():
    out = io.StringIO()
    echo([], out)
    assert out.getvalue() == ""


def test_wc_invariants():
    data = b"hello world\nfoo  bar\tbaz\n\nlast"
    lines, words, chars = wc(io.BytesIO(data))
    assert lines == data.count(b"\n")
    assert chars == len(data)
    assert words == len(data.split())


def test_wc_small_example():
    assert wc(io.BytesIO(b"a b\n")) == (1, 2, 4)


def test_wc_nul_separates_words():
    assert wc(io.BytesIO(b"a\0b"))[1] == 2


def test_wc_empty():
    assert wc(io.BytesIO(b"")) == (0, 0, 0)


def test_cat_main_file(tmp_path, capsysbinary):
    path = tmp_path / "f"
    path.write_bytes(b"contents\n")
    assert cat_main([str(path), str(path)]) == 0
    assert capsysbinary.readouterr().out == b"contents\ncontents\n"


def test_cat_main_missing(tmp_path, capsys):
    missing = tmp_path / "missing"
    assert cat_main([str(missing)]) == 1
    assert capsys.readouterr().err == f"cat: cannot open {missing}\n"


def test_echo_main(capsys):
    assert echo_main(["a", "b"]) == 0
    assert capsys.readouterr().out == "a b\n"


def test_wc_main_file(tmp_path, capsys):
    data = b"one two\nthree\n"
    path = tmp_path / "f"
    path.write_bytes(data)
    assert wc_main([str(path)]) == 0
    lines, words, chars = wc(io.BytesIO(data))
    assert capsys.readouterr().out == f"{lines} {words} {chars} {path}\n"


def test_wc_main_stdin(monkeypatch, capsys):
    data = b"x y z\n"
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(data)))
    assert wc_main([]) == 0
    lines, words, chars = wc(io.BytesIO(data))
    assert capsys.readouterr().out == f"{lines} {words} {chars} \n"


def test_wc_main_missing(tmp_path, capsys):
    missing = tmp_path / "missing"
    assert wc_main([str(missing)]) == 1
    assert capsys.readouterr().out == f"wc: cannot open {missing}\n"