import io

import pytest

from miniprintf.printer import FormatError, printf, render


def test_plain_text():
    assert render("hello") == "hello"


def test_empty_format():
    assert render("") == ""


def test_integer_and_strings():
    assert render("%d items", 3) == "3 items"
    assert render("%s and %s", "tea", "cake") == "tea and cake"


def test_double_percent():
    assert render("100%%") == "100%"


def test_unknown_conversion_kept():
    assert render("%q") == "%q"
    assert render("a%#cb") == "a%#cb"


def test_length_modifier_alone_prints_percent():
    assert render("%l") == "%"
    assert render("x%hy") == "x%y"


def test_binary_and_hex():
    assert render("%b", 5) == "101"
    assert render("%x %X", 255, 255) == "ff FF"


def test_negative_int():
    assert render("%i", -7) == "-7"


def test_rot13_round_trip_through_format():
    once = render("%R", "Secret Message")
    assert render("%R", once) == "Secret Message"


def test_lone_percent_is_error():
    with pytest.raises(FormatError) as info:
        render("%")
    assert info.value.partial == ""


def test_trailing_percent_keeps_partial():
    with pytest.raises(FormatError) as info:
        render("ab%")
    assert info.value.partial == "ab"


def test_trailing_percent_space_prints_nothing():
    with pytest.raises(FormatError) as info:
        render("ab% ")
    assert info.value.partial == ""


def test_none_format():
    with pytest.raises(FormatError):
        render(None)


def test_missing_argument():
    with pytest.raises(TypeError):
        render("%d")


def test_printf_to_file():
    out = io.StringIO()
    count = printf("%s=%u", "n", 12, file=out)
    assert out.getvalue() == "n=12"
    assert count == len(out.getvalue())


def test_printf_writes_partial_before_error():
    out = io.StringIO()
    with pytest.raises(FormatError):
        printf("ab%", file=out)
    assert out.getvalue() == "ab"


def test_printf_default_stdout(capsys):
    count = printf("%c%c", "o", "k")
    captured = capsys.readouterr()
    assert captured.out == "ok"
    assert count == 2