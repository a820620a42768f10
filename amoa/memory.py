"""Byte buffer helpers: searching, comparing, copying, filling and allocation.

Buffers are bytes-like objects; the functions that change a buffer need a
mutable one such as :class:`bytearray`. Byte values are taken modulo 256,
as a C ``unsigned char`` would be. Asking for more bytes than a buffer
holds raises :class:`ValueError`.
"""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytes, bytearray, memoryview]
MutableBuffer = Union[bytearray, memoryview]


def _require_count(n: object, name: str = "n") -> int:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"{name} must be an int, got {type(n).__name__}")
    if n < 0:
        raise ValueError(f"{name} must not be negative")
    return n


def _require_byte(value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an integer byte value, got {type(value).__name__}")
    return value % 256


def _require_span(buffer: Buffer, start: int, n: int, name: str) -> None:
    if start + n > len(buffer):
        raise ValueError(
            f"{name} holds {len(buffer)} bytes, {start + n} are needed"
        )


def mem_find(buffer: Buffer, value: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``value`` among the first ``n``.

    Returns None when no such byte exists.
    """
    _require_count(n)
    _require_span(buffer, 0, n, "buffer")
    index = bytes(buffer[:n]).find(_require_byte(value))
    return index if index >= 0 else None


def mem_compare(first: Buffer, second: Buffer, n: int) -> int:
    """Compare the first ``n`` bytes of two buffers.

    Returns the difference between the first pair of differing bytes,
    or 0 when the compared bytes are equal.
    """
    _require_count(n)
    _require_span(first, 0, n, "first")
    _require_span(second, 0, n, "second")
    for a, b in zip(bytes(first[:n]), bytes(second[:n])):
        if a != b:
            return a - b
    return 0


def mem_copy(dest: MutableBuffer, src: Buffer, n: int) -> MutableBuffer:
    """Copy the first ``n`` bytes of ``src`` to the start of ``dest`` and return ``dest``."""
    _require_count(n)
    _require_span(src, 0, n, "src")
    _require_span(dest, 0, n, "dest")
    dest[:n] = bytes(src[:n])
    return dest


def mem_move(buffer: MutableBuffer, dest: int, src: int, n: int) -> MutableBuffer:
    """Copy ``n`` bytes at offset ``src`` to offset ``dest`` inside ``buffer``.

    The two regions may overlap; the result is as if the source bytes were
    first copied aside. Returns ``buffer``.
    """
    _require_count(n)
    _require_count(dest, "dest")
    _require_count(src, "src")
    _require_span(buffer, src, n, "buffer")
    _require_span(buffer, dest, n, "buffer")
    buffer[dest:dest + n] = bytes(buffer[src:src + n])
    return buffer


def mem_set(buffer: MutableBuffer, value: int, n: int) -> MutableBuffer:
    """Set the first ``n`` bytes of ``buffer`` to ``value`` and return ``buffer``."""
    _require_count(n)
    _require_span(buffer, 0, n, "buffer")
    buffer[:n] = bytes([_require_byte(value)]) * n
    return buffer


def zero(buffer: MutableBuffer, n: int) -> None:
    """Set the first ``n`` bytes of ``buffer`` to zero."""
    mem_set(buffer, 0, n)


def zeroed(count: int, size: int) -> bytearray:
    """Return a new zero-filled buffer of ``count`` elements of ``size`` bytes each."""
    return bytearray(_require_count(count, "count") * _require_count(size, "size"))


def swap_bytes(buffer: MutableBuffer, i: int, j: int) -> None:
    """Exchange the bytes at indexes ``i`` and ``j`` of ``buffer``."""
    buffer[i], buffer[j] = buffer[j], buffer[i]