import pytest

from miniprintf.text import (
    format_char,
    format_escaped,
    format_percent,
    format_reversed,
    format_rot13,
    format_string,
)


def test_char_from_string():
    assert format_char("z") == "z"


def test_char_from_code():
    assert format_char(65) == "A"
    assert format_char(ord("q")) == "q"


def test_char_code_truncated_to_byte():
    assert format_char(256 + ord("x")) == "x"


def test_char_rejects_long_string():
    with pytest.raises(ValueError):
        format_char("ab")


def test_percent():
    assert format_percent() == "%"


def test_string_passes_through():
    assert format_string("hello world") == "hello world"
    assert format_string("") == ""


def test_string_none():
    assert format_string(None) == "(null)"


@pytest.mark.parametrize("text", ["", "a", "hello", "Holberton 123"])
def test_reversed_round_trip(text):
    result = format_reversed(text)
    assert len(result) == len(text)
    assert format_reversed(result) == text


def test_reversed_first_becomes_last():
    result = format_reversed("xyz")
    assert result[0] == "z" and result[-1] == "x"


def test_reversed_none():
    assert format_reversed(None) == "(llun)"


@pytest.mark.parametrize("text", ["Hello", "abcXYZ", "The quick brown fox"])
def test_rot13_round_trip(text):
    assert format_rot13(format_rot13(text)) == text


def test_rot13_pinned():
    assert format_rot13("Hello") == "Uryyb"


def test_rot13_leaves_non_letters():
    assert format_rot13("123 !?-") == "123 !?-"


def test_rot13_none():
    assert format_rot13(None) == "(avyy)"


def test_escaped_printable_unchanged():
    assert format_escaped("Best School") == "Best School"


def test_escaped_newline():
    assert format_escaped("\n") == "\\x0A"


def test_escaped_each_control_byte_takes_four_chars():
    result = format_escaped(b"a\x01\x7fb")
    assert len(result) == 2 + 4 * 2
    assert result.startswith("a\\x")
    assert result.endswith("b")


def test_escaped_uses_uppercase_hex():
    result = format_escaped(b"\x1b")
    assert result.startswith("\\x")
    assert result[2:] == result[2:].upper()


def test_escaped_none_rejected():
    with pytest.raises(TypeError):
        format_escaped(None)