"""Text helpers: searching, comparing, slicing, trimming, splitting and bounded copies."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from itertools import zip_longest
from typing import Any

_NUL = "\0"


def _require_single(char: str) -> None:
    if len(char) != 1:
        raise ValueError("expected a single character")


def _require_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative")


def find_char(text: str, char: str) -> int | None:
    """Index of the first ``char`` in ``text``.

    Searching for NUL finds the end of the text. Returns None when absent.
    """
    _require_single(char)
    index = text.find(char)
    if index >= 0:
        return index
    if char == _NUL:
        return len(text)
    return None


def rfind_char(text: str, char: str) -> int | None:
    """Index of the last ``char`` in ``text``.

    Searching for NUL finds the end of the text. Returns None when absent.
    """
    _require_single(char)
    if char == _NUL:
        return len(text)
    index = text.rfind(char)
    return index if index >= 0 else None


def compare_prefix(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the code difference at the first mismatch, or 0 if they agree.
    """
    _require_non_negative("n", n)
    for left, right in zip_longest(first[:n], second[:n], fillvalue=_NUL):
        if left != right:
            return ord(left) - ord(right)
        if left == _NUL:
            break
    return 0


def find_bounded(haystack: str, needle: str, length: int) -> int | None:
    """Index of ``needle`` wholly inside the first ``length`` characters of ``haystack``."""
    _require_non_negative("length", length)
    if not needle:
        return 0
    if not haystack:
        return None
    index = haystack[:length].find(needle)
    return index if index >= 0 else None


def substring(text: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``text`` from ``start``; empty past the end."""
    _require_non_negative("start", start)
    _require_non_negative("length", length)
    if start > len(text):
        return ""
    return text[start:start + length]


def trim(text: str, charset: str) -> str:
    """Remove every character found in ``charset`` from both ends of ``text``."""
    if not charset:
        return text
    return text.strip(charset)


def split(text: str, separator: str) -> list[str]:
    """Split ``text`` on ``separator``, dropping empty pieces."""
    _require_single(separator)
    return [word for word in text.split(separator) if word]


def bounded_copy(source: str, size: int) -> tuple[str, int]:
    """Copy ``source`` into room for ``size`` characters including a terminator.

    Returns the copied text and the full length of ``source``.
    """
    _require_non_negative("size", size)
    if size == 0:
        return "", len(source)
    return source[:size - 1], len(source)


def bounded_concat(dest: str, source: str, size: int) -> tuple[str, int]:
    """Append ``source`` to ``dest`` within a total room of ``size`` including a terminator.

    Returns the resulting text and the length the full result would have had.
    """
    _require_non_negative("size", size)
    if size <= len(dest):
        return dest, size + len(source)
    room = size - len(dest) - 1
    return dest + source[:room], len(dest) + len(source)


def map_indexed(text: str, func: Callable[[int, str], str]) -> str:
    """A new text whose characters are ``func(index, char)`` for each character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def iter_indexed(buffer: MutableSequence[Any], func: Callable[[int, Any], Any]) -> None:
    """Call ``func(index, item)`` for each item; a non-None result replaces the item."""
    for index, item in enumerate(buffer):
        result = func(index, item)
        if result is not None:
            buffer[index] = result