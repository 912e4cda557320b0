"""Byte-buffer helpers: filling, zeroing, searching, comparing, copying and moving."""

from __future__ import annotations


def _check_count(n: int, *lengths: int) -> None:
    if n < 0:
        raise ValueError("byte count must not be negative")
    if any(n > length for length in lengths):
        raise ValueError("byte count exceeds the buffer length")


def fill(buffer: bytearray, value: int, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buffer`` to the low byte of ``value``."""
    _check_count(n, len(buffer))
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def zero(buffer: bytearray, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buffer`` to zero."""
    return fill(buffer, 0, n)


def allocate_zeroed(count: int, size: int) -> bytearray:
    """A new zero-filled buffer holding ``count`` items of ``size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def find_byte(data: bytes | bytearray, value: int, n: int) -> int | None:
    """Index of the first byte equal to the low byte of ``value`` among the first ``n``."""
    _check_count(n, len(data))
    index = bytes(data[:n]).find(value & 0xFF)
    return None if index < 0 else index


def compare(first: bytes | bytearray, second: bytes | bytearray, n: int) -> int:
    """Difference of the first unequal bytes within ``n``, or 0 when they agree."""
    _check_count(n, len(first), len(second))
    for a, b in zip(first[:n], second[:n]):
        if a != b:
            return a - b
    return 0


def copy(dest: bytearray, source: bytes | bytearray, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``source`` into the start of ``dest``."""
    _check_count(n, len(dest), len(source))
    dest[:n] = source[:n]
    return dest


def move(buffer: bytearray, dest_offset: int, source_offset: int, n: int) -> bytearray:
    """Copy ``n`` bytes within ``buffer``; overlapping regions are handled correctly."""
    if dest_offset < 0 or source_offset < 0:
        raise ValueError("offsets must not be negative")
    _check_count(n, len(buffer) - dest_offset, len(buffer) - source_offset)
    buffer[dest_offset:dest_offset + n] = bytes(buffer[source_offset:source_offset + n])
    return buffer