"""Write characters, text, lines and integers to a text stream."""

from __future__ import annotations

import sys
from typing import TextIO


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(char: str, stream: TextIO | None = None) -> None:
    """Write a single character to ``stream`` (standard output by default)."""
    if len(char) != 1:
        raise ValueError("expected a single character")
    _target(stream).write(char)


def put_str(text: str, stream: TextIO | None = None) -> None:
    """Write ``text`` to ``stream`` (standard output by default)."""
    _target(stream).write(text)


def put_endl(text: str, stream: TextIO | None = None) -> None:
    """Write ``text`` followed by a newline."""
    out = _target(stream)
    put_str(text, out)
    put_char("\n", out)


def put_nbr(n: int, stream: TextIO | None = None) -> None:
    """Write the decimal form of the integer ``n``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError("expected an integer")
    put_str(str(n), _target(stream))