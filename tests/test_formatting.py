import io

import pytest
from hypothesis import given
from hypothesis import strategies as st

from pushswap.formatting import format_pointer, format_printf, printf


def test_plain_text_passes_through():
    assert format_printf("sa\n") == "sa\n"


def test_percent_escape():
    assert format_printf("100%%") == "100%"


def test_unknown_conversion_prints_the_character():
    assert format_printf("%q") == "q"


def test_null_string():
    assert format_printf("%s", None) == "(null)"


def test_string_conversion():
    assert format_printf("[%s]", "abc") == "[abc]"


def test_char_from_str_and_code():
    assert format_printf("%c%c", "O", ord("K")) == "OK"


def test_char_rejects_long_string():
    with pytest.raises(ValueError):
        format_printf("%c", "ab")


def test_null_pointer():
    assert format_pointer(0) == "0x0"
    assert format_printf("%p", 0) == "0x0"


@given(st.integers(min_value=1, max_value=2**64 - 1))
def test_pointer_round_trip(value):
    text = format_pointer(value)
    assert text.startswith("0x")
    assert int(text[2:], 16) == value
    assert text == text.lower()


@given(st.integers(min_value=-(2**31), max_value=2**31 - 1))
def test_decimal_round_trip(value):
    assert int(format_printf("%d", value)) == value
    assert format_printf("%i", value) == format_printf("%d", value)


def test_decimal_wraps_to_int32():
    assert format_printf("%d", 2**31) == "-2147483648"


@given(st.integers(min_value=0, max_value=2**32 - 1))
def test_unsigned_and_hex_round_trip(value):
    assert int(format_printf("%u", value)) == value
    lower = format_printf("%x", value)
    upper = format_printf("%X", value)
    assert int(lower, 16) == value
    assert lower == lower.lower()
    assert upper == lower.upper()


def test_unsigned_of_negative_wraps():
    assert format_printf("%u", -1) == "4294967295"


def test_missing_argument():
    with pytest.raises(TypeError):
        format_printf("%d %d", 1)


def test_extra_arguments_are_ignored():
    assert format_printf("%d", 7, 8) == format_printf("%d", 7)


def test_lone_percent_at_end():
    with pytest.raises(ValueError):
        format_printf("abc%")


def test_printf_writes_and_counts():
    stream = io.StringIO()
    count = printf("%s=%d\n", "n", -42, stream=stream)
    assert stream.getvalue() == format_printf("%s=%d\n", "n", -42)
    assert count == len(stream.getvalue())


def test_printf_defaults_to_stdout(capsys):
    count = printf("OK\n")
    assert capsys.readouterr().out == "OK\n"
    assert count == len("OK\n")