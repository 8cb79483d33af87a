"""Binary, octal and hexadecimal conversions for integers of a given C width."""

from __future__ import annotations

from .digits import binary_to_hex, binary_to_octal, strip_leading_zeros, to_binary

_WIDTHS = (16, 32, 64)
_INT_WIDTH = 32
_POINTER_WIDTH = 64
_NIL = "(nil)"


def _wrap(value: int, width: int) -> int:
    """Truncate ``value`` to a signed integer of ``width`` bits."""
    if width not in _WIDTHS:
        raise ValueError(f"unsupported width {width}; expected one of {_WIDTHS}")
    value &= (1 << width) - 1
    if value >= 1 << (width - 1):
        value -= 1 << width
    return value


def _hex_digits(value: int, width: int, uppercase: bool) -> str:
    return strip_leading_zeros(binary_to_hex(to_binary(value, width), uppercase))


def _octal_digits(value: int, width: int) -> str:
    return strip_leading_zeros(binary_to_octal(to_binary(value, width)))


def format_binary(value: int) -> str:
    """Render an ``int`` in binary with no leading zeros."""
    value = _wrap(value, _INT_WIDTH)
    if value == 0:
        return "0"
    return strip_leading_zeros(to_binary(value, _INT_WIDTH))


def format_octal(value: int, width: int) -> str:
    """Render a signed integer of ``width`` bits (16, 32 or 64) in octal."""
    value = _wrap(value, width)
    if value == 0:
        return "0"
    return _octal_digits(value, width)


def format_hex(value: int, width: int, uppercase: bool) -> str:
    """Render a signed integer of ``width`` bits (16, 32 or 64) in hexadecimal."""
    value = _wrap(value, width)
    if value == 0:
        return "0"
    return _hex_digits(value, width, uppercase)


def format_alt_octal(value: int) -> str:
    """Render an ``int`` in octal with a leading ``0``; zero stays ``"0"``."""
    value = _wrap(value, _INT_WIDTH)
    if value == 0:
        return "0"
    return "0" + _octal_digits(value, _INT_WIDTH)


def format_alt_hex(value: int, uppercase: bool) -> str:
    """Render an ``int`` in hex with a ``0x`` or ``0X`` prefix; zero stays ``"0"``."""
    value = _wrap(value, _INT_WIDTH)
    if value == 0:
        return "0"
    prefix = "0X" if uppercase else "0x"
    return prefix + _hex_digits(value, _INT_WIDTH, uppercase)


def format_address(address: int | None) -> str:
    """Render a pointer value as ``0x`` followed by lowercase hex, or ``(nil)``."""
    if not address:
        return _NIL
    value = _wrap(address, _POINTER_WIDTH)
    return "0x" + _hex_digits(value, _POINTER_WIDTH, False)