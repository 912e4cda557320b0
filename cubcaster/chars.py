"""ASCII character classification, case mapping and integer/text conversion."""

from __future__ import annotations

import operator
from itertools import takewhile

_SPACES = "\t\n\v\f\r "
_DIGITS = "0123456789"


def _code(c: int | str) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError("expected a single character")
        return ord(c)
    return operator.index(c)


def _like(original: int | str, code: int) -> int | str:
    return chr(code) if isinstance(original, str) else code


def is_alpha(c: int | str) -> bool:
    """Whether ``c`` is an ASCII letter."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: int | str) -> bool:
    """Whether ``c`` is an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: int | str) -> bool:
    """Whether ``c`` is an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """Whether ``c`` lies in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """Whether ``c`` is a printable ASCII character, space included."""
    return 32 <= _code(c) < 127


def to_lower(c: int | str) -> int | str:
    """Lower-case an ASCII capital; anything else is returned unchanged."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        return _like(c, code + 32)
    return c


def to_upper(c: int | str) -> int | str:
    """Upper-case an ASCII small letter; anything else is returned unchanged."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        return _like(c, code - 32)
    return c


def atoi(text: str) -> int:
    """Read a leading decimal integer, after blanks and one optional sign."""
    rest = text.lstrip(_SPACES)
    sign = 1
    if rest.startswith("+"):
        rest = rest[1:]
    elif rest.startswith("-"):
        sign = -1
        rest = rest[1:]
    digits = "".join(takewhile(lambda ch: ch in _DIGITS, rest))
    return sign * int(digits) if digits else 0


def itoa(n: int) -> str:
    """Decimal text of an integer."""
    return str(operator.index(n))