"""Character and string conversions."""

from __future__ import annotations

import operator
import string

_ROT13 = str.maketrans(
    string.ascii_uppercase + string.ascii_lowercase,
    string.ascii_uppercase[13:]
    + string.ascii_uppercase[:13]
    + string.ascii_lowercase[13:]
    + string.ascii_lowercase[:13],
)


def format_char(value: int | str) -> str:
    """Render a single character given as a one-character string or a code."""
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        return value
    return chr(operator.index(value) & 0xFF)


def format_percent() -> str:
    """Render a literal percent sign."""
    return "%"


def format_string(value: str | None) -> str:
    """Render a string, or ``(null)`` for ``None``."""
    return "(null)" if value is None else value


def format_reversed(value: str | None) -> str:
    """Render a string backwards, or ``(llun)`` for ``None``."""
    return "(llun)" if value is None else value[::-1]


def format_rot13(value: str | None) -> str:
    """Render a string with ASCII letters rotated by 13, or ``(avyy)`` for ``None``."""
    return "(avyy)" if value is None else value.translate(_ROT13)


def format_escaped(value: str | bytes) -> str:
    """Render a string with non-printable bytes written as ``\\xHH``.

    Bytes below 32 or from 127 upwards are escaped with two uppercase hex
    digits; a ``str`` is taken as its UTF-8 encoding.
    """
    if value is None:
        raise TypeError("%S needs a string, not None")
    data = value.encode("utf-8") if isinstance(value, str) else bytes(value)
    return "".join(
        chr(byte) if 32 <= byte < 127 else f"\\x{byte:02X}" for byte in data
    )