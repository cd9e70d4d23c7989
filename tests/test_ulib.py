import io

from fogos.ulib import atoi, fgets, getline, strcmp


def test_atoi_leading_digits():
    assert atoi("123abc") == 123
    assert atoi("42") == 42


def test_atoi_without_digits_is_zero():
    assert atoi("abc") == 0
    assert atoi("") == 0
    assert atoi("-5") == 0
    assert atoi(" 7") == 0


def test_strcmp_equal():
    assert strcmp("hello", "hello") == 0
    assert strcmp("", "") == 0


def test_strcmp_ordering_and_antisymmetry():
    assert strcmp("abc", "abd") < 0
    assert strcmp("b", "a") > 0
    assert strcmp("abc", "abd") == -strcmp("abd", "abc")


def test_strcmp_prefix_difference_is_next_byte():
    assert strcmp("ab", "a") == ord("b")
    assert strcmp("a", "ab") == -ord("b")


def test_strcmp_stops_at_nul():
    assert strcmp("ab\0x", "ab\0y") == 0


def test_fgets_reads_lines():
    stream = io.StringIO("hello\nworld")
    assert fgets(stream, 100) == "hello\n"
    assert fgets(stream, 100) == "world"
    assert fgets(stream, 100) == ""


def test_fgets_respects_max():
    stream = io.StringIO("abcdef")
    assert fgets(stream, 4) == "abc"
    assert fgets(stream, 4) == "def"
    assert fgets(io.StringIO("abc"), 1) == ""


def test_fgets_stops_at_carriage_return():
    assert fgets(io.StringIO("ab\rcd"), 100) == "ab\r"


def test_getline_reads_past_carriage_return():
    stream = io.StringIO("ab\rcd\nrest")
    assert getline(stream) == "ab\rcd\n"
    assert getline(stream) == "rest"
    assert getline(stream) == ""


def test_getline_long_line():
    line = "x" * 300 + "\n"
    assert getline(io.StringIO(line + "next\n")) == line