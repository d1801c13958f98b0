import io

import pytest

from parkomat.console import Console


def make(text):
    out = io.StringIO()
    return Console(io.StringIO(text), out), out


def test_write_passes_text_through():
    console, out = make("")
    console.write("Wybor: ")
    assert out.getvalue() == "Wybor: "


def test_read_int_simple():
    console, _ = make("42\n")
    assert console.read_int() == 42


def test_read_int_discards_rest_of_line():
    console, _ = make("12 extra words\n5\n")
    assert console.read_int() == 12
    assert console.read_int() == 5


def test_read_int_prefix_is_accepted():
    console, _ = make("7abc\n")
    assert console.read_int() == 7


def test_bad_int_raises_and_skips_line():
    console, _ = make("abc def\n9\n")
    with pytest.raises(ValueError):
        console.read_int()
    assert console.read_int() == 9


def test_int_out_of_range():
    console, _ = make("99999999999\n")
    with pytest.raises(ValueError):
        console.read_int()


def test_read_float():
    console, _ = make("2.5\n-3\n")
    assert console.read_float() == 2.5
    assert console.read_float() == -3.0


def test_bad_float_raises():
    console, _ = make("x\n")
    with pytest.raises(ValueError):
        console.read_float()


def test_read_token_skips_blank_lines():
    console, _ = make("\n\n  WA123  KR456\n")
    assert console.read_token() == "WA123"
    assert console.read_token() == "KR456"


def test_read_line_after_token_returns_remainder():
    console, _ = make("ABC\n10:30\n")
    assert console.read_token() == "ABC"
    assert console.read_line() == ""
    assert console.read_line() == "10:30"


def test_read_line_fresh():
    console, _ = make("hello world\r\n")
    assert console.read_line() == "hello world"


def test_eof_raises():
    console, _ = make("")
    with pytest.raises(EOFError):
        console.read_token()
    with pytest.raises(EOFError):
        console.read_line()
    with pytest.raises(EOFError):
        console.read_int()