import io

import pytest

from raycub.printf import format_printf, printf, put_char, put_endl, put_nbr, put_str


def test_plain_text_passes_through():
    assert format_printf("hello world") == "hello world"


def test_percent_literal():
    assert format_printf("100%%") == "100%"


@pytest.mark.parametrize("n", [0, 7, -7, 123456, -2147483647, 2147483647])
def test_decimal_matches_str(n):
    assert format_printf("%d", n) == str(n)
    assert format_printf("%i", n) == str(n)


def test_decimal_wraps_to_int():
    assert format_printf("%d", 2147483648) == "-2147483648"


def test_unsigned_wraps_negative():
    assert format_printf("%u", -1) == str(0xFFFFFFFF)


@pytest.mark.parametrize("n", [0, 1, 15, 16, 255, 4096, 0xDEADBEEF])
def test_hex_lower_and_upper_agree(n):
    lower = format_printf("%x", n)
    upper = format_printf("%X", n)
    assert lower.upper() == upper
    assert int(lower, 16) == n


def test_null_string():
    assert format_printf("%s", None) == "(null)"


def test_string_argument():
    assert format_printf("[%s]", "abc") == "[abc]"


def test_null_pointer():
    assert format_printf("%p", 0) == "(nil)"
    assert format_printf("%p", None) == "(nil)"


def test_pointer_has_prefix_and_hex():
    out = format_printf("%p", 0x1A2B)
    assert out.startswith("0x")
    assert int(out[2:], 16) == 0x1A2B


def test_char_from_str_and_int():
    assert format_printf("%c", "z") == "z"
    assert format_printf("%c", ord("q")) == "q"


def test_unknown_conversion_emits_nothing_and_keeps_argument():
    assert format_printf("%q%d", 5) == "5"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        format_printf("%d")


def test_printf_returns_count_and_writes(capsys):
    count = printf("%s-%d", "ab", -3)
    out = capsys.readouterr().out
    assert out == "ab--3"
    assert count == len(out)


def test_put_char_and_str():
    buf = io.StringIO()
    put_char("x", buf)
    put_str("yz", buf)
    put_str(None, buf)
    assert buf.getvalue() == "xyz"


def test_put_endl():
    buf = io.StringIO()
    put_endl("line", buf)
    put_endl(None, buf)
    assert buf.getvalue() == "line\n"


@pytest.mark.parametrize("n", [0, 9, 10, -1, -2147483648, 2147483647])
def test_put_nbr(n):
    buf = io.StringIO()
    put_nbr(n, buf)
    assert buf.getvalue() == str(n)