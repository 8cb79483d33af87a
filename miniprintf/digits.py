"""Fixed-width binary, hexadecimal and octal digit strings."""

from __future__ import annotations

_BINARY_DIGITS = frozenset("01")


def _check_bits(bits: str) -> None:
    if not bits:
        raise ValueError("bit string must not be empty")
    if not set(bits) <= _BINARY_DIGITS:
        raise ValueError(f"not a bit string: {bits!r}")


def to_binary(value: int, width: int) -> str:
    """Return ``value`` as a ``width``-bit string, two's complement when negative."""
    if width <= 0:
        raise ValueError(f"width must be positive, got {width}")
    if not -(1 << (width - 1)) <= value < (1 << width):
        raise ValueError(f"{value} does not fit in {width} bits")
    return format(value & ((1 << width) - 1), f"0{width}b")


def binary_to_hex(bits: str, uppercase: bool) -> str:
    """Convert a bit string whose length is a multiple of four to hex digits.

    The result keeps one digit per four bits, leading zeros included.
    """
    _check_bits(bits)
    if len(bits) % 4:
        raise ValueError("bit string length must be a multiple of 4")
    spec = "X" if uppercase else "x"
    return format(int(bits, 2), spec).zfill(len(bits) // 4)


def binary_to_octal(bits: str) -> str:
    """Convert a bit string to octal digits, grouping three bits from the right.

    Any bits left over on the left form one final, shorter group, so a
    32-bit string gives 11 digits, a 64-bit one 22 and a 16-bit one 6.
    """
    _check_bits(bits)
    digits = -(-len(bits) // 3)
    return format(int(bits, 2), "o").zfill(digits)


def strip_leading_zeros(digits: str) -> str:
    """Drop leading zeros, keeping a single ``"0"`` when nothing else is left."""
    return digits.lstrip("0") or "0"