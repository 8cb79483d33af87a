"""Formatting a whole format string and writing it out."""

from __future__ import annotations

import sys
from typing import Any, TextIO

from .specifiers import match_specifier


class FormatError(ValueError):
    """Raised for a format string that cannot be rendered.

    ``partial`` holds the text that is still written out before the failure.
    """

    def __init__(self, message: str, partial: str = "") -> None:
        super().__init__(message)
        self.partial = partial


def render(fmt: str, *args: Any) -> str:
    """Render ``fmt`` with ``args`` and return the resulting text.

    An unknown conversion leaves its ``%`` in the output and the text after
    it untouched.  A ``%`` at the very end, or ``"% "`` at the very end, is
    a :class:`FormatError`.
    """
    if fmt is None:
        raise FormatError("format must not be None")
    arguments = iter(args)
    pieces: list[str] = []
    pos = 0
    while (pct := fmt.find("%", pos)) != -1:
        pieces.append(fmt[pos:pct])
        if pct + 1 == len(fmt):
            raise FormatError("format ends with a lone '%'", "".join(pieces))
        spec = match_specifier(fmt, pct + 1)
        if spec is None:
            if fmt[pct + 1] == " " and pct + 2 == len(fmt):
                raise FormatError("format ends with '% '")
            pieces.append("%")
            pos = pct + 1
            continue
        pieces.append(spec.render(arguments))
        pos = pct + 1 + len(spec.token)
    pieces.append(fmt[pos:])
    return "".join(pieces)


def printf(fmt: str, *args: Any, file: TextIO | None = None) -> int:
    """Write ``fmt`` rendered with ``args`` to ``file`` (standard output by default).

    Returns the number of characters written.  On a :class:`FormatError`
    whatever was rendered before the fault is written before it propagates.
    """
    stream = sys.stdout if file is None else file
    try:
        text = render(fmt, *args)
    except FormatError as error:
        if error.partial:
            stream.write(error.partial)
            stream.flush()
        raise
    stream.write(text)
    stream.flush()
    return len(text)