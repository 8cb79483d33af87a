"""The table of conversion specifiers and the lookup over it."""

from __future__ import annotations

from dataclasses import dataclass
from functools import partial
from typing import Any, Callable, Iterator

from .integers import format_signed, format_unsigned
from .radix import (
    format_address,
    format_alt_hex,
    format_alt_octal,
    format_binary,
    format_hex,
    format_octal,
)
from .text import (
    format_char,
    format_escaped,
    format_percent,
    format_reversed,
    format_rot13,
    format_string,
)


@dataclass(frozen=True)
class Specifier:
    """A conversion token (the text after ``%``) and how it renders."""

    token: str
    convert: Callable[..., str]
    takes_argument: bool = True

    def render(self, args: Iterator[Any]) -> str:
        """Render this conversion, taking its value from the iterator ``args``."""
        if not self.takes_argument:
            return self.convert()
        try:
            value = next(args)
        except StopIteration:
            raise TypeError(
                f"not enough arguments for conversion %{self.token}"
            ) from None
        return self.convert(value)


def _signed(width: int, prefix: str = "") -> Callable[[Any], str]:
    return partial(format_signed, width=width, positive_prefix=prefix)


def _unsigned(width: int) -> Callable[[Any], str]:
    return partial(format_unsigned, width=width)


def _octal(width: int) -> Callable[[Any], str]:
    return partial(format_octal, width=width)


def _hex(width: int, uppercase: bool) -> Callable[[Any], str]:
    return partial(format_hex, width=width, uppercase=uppercase)


# Order matters: the first token that the format continues with wins.
_TABLE: tuple[Specifier, ...] = tuple(
    Specifier(token, convert, takes_argument)
    for token, convert, takes_argument in (
        ("c", format_char, True),
        ("s", format_string, True),
        ("i", _signed(32), True),
        ("d", _signed(32), True),
        ("b", format_binary, True),
        ("u", _unsigned(32), True),
        ("o", _octal(32), True),
        ("x", _hex(32, False), True),
        ("X", _hex(32, True), True),
        ("S", format_escaped, True),
        ("p", format_address, True),
        ("li", _signed(64), True),
        ("ld", _signed(64), True),
        ("lu", _unsigned(64), True),
        ("lo", _octal(64), True),
        ("lx", _hex(64, False), True),
        ("lX", _hex(64, True), True),
        ("hi", _signed(16), True),
        ("hd", _signed(16), True),
        ("hu", _unsigned(16), True),
        ("ho", _octal(16), True),
        ("hx", _hex(16, False), True),
        ("hX", _hex(16, True), True),
        ("#o", format_alt_octal, True),
        ("#x", partial(format_alt_hex, uppercase=False), True),
        ("#X", partial(format_alt_hex, uppercase=True), True),
        ("#i", _signed(32), True),
        ("#d", _signed(32), True),
        ("#u", _unsigned(32), True),
        ("+i", _signed(32, "+"), True),
        ("+d", _signed(32, "+"), True),
        ("+u", _unsigned(32), True),
        ("+o", _octal(32), True),
        ("+x", _hex(32, False), True),
        ("+X", _hex(32, True), True),
        (" i", _signed(32, " "), True),
        (" d", _signed(32, " "), True),
        (" u", _unsigned(32), True),
        (" o", _octal(32), True),
        (" x", _hex(32, False), True),
        (" X", _hex(32, True), True),
        ("R", format_rot13, True),
        ("r", format_reversed, True),
        ("%", format_percent, False),
        ("l", format_percent, False),
        ("h", format_percent, False),
        (" +i", _signed(32, "+"), True),
        (" +d", _signed(32, "+"), True),
        ("+ i", _signed(32, "+"), True),
        ("+ d", _signed(32, "+"), True),
        (" %", format_percent, False),
    )
)


def match_specifier(fmt: str, index: int) -> Specifier | None:
    """Return the specifier that ``fmt`` continues with at ``index``, if any."""
    if index < 0:
        raise ValueError(f"index must not be negative, got {index}")
    return next((spec for spec in _TABLE if fmt.startswith(spec.token, index)), None)