"""Decimal rendering of signed and unsigned integers of a given C width."""

from __future__ import annotations

import operator

_WIDTHS = (16, 32, 64)
_PREFIXES = ("", "+", " ")


def _check_width(width: int) -> None:
    if width not in _WIDTHS:
        raise ValueError(f"unsupported width {width}; expected one of {_WIDTHS}")


def _truncate(value: object, width: int) -> int:
    """Return ``value`` reduced modulo ``2**width`` (an unsigned bit pattern)."""
    _check_width(width)
    return operator.index(value) & ((1 << width) - 1)


def format_signed(value: int, width: int, positive_prefix: str = "") -> str:
    """Render a signed integer of ``width`` bits in decimal.

    Negative numbers start with ``-``; others start with ``positive_prefix``,
    which is empty, ``"+"`` or a single space.
    """
    if positive_prefix not in _PREFIXES:
        raise ValueError(f"positive prefix must be one of {_PREFIXES!r}")
    number = _truncate(value, width)
    if number >= 1 << (width - 1):
        number -= 1 << width
    if number < 0:
        return f"-{-number}"
    return f"{positive_prefix}{number}"


def format_unsigned(value: int, width: int) -> str:
    """Render an unsigned integer of ``width`` bits in decimal."""
    return str(_truncate(value, width))