"""Searching and comparing strings, and bounded copy and concatenation.

Strings behave as if they ended with a terminating NUL character, so
searching for ``"\\0"`` finds the position just past the last character,
and a string that runs out during a comparison compares as a code of 0.
"""

from __future__ import annotations

from typing import Optional, Tuple, Union

CharLike = Union[str, int]

_NUL = "\0"


def _require_str(value: object, name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, got {type(value).__name__}")
    return value


def _require_size(value: object, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must not be negative")
    return value


def _char(c: CharLike) -> str:
    """Return ``c`` as a one-character string; integer codes are taken modulo 256."""
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got {len(c)} characters")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")
    return chr(c % 256)


def _code_at(text: str, index: int) -> int:
    """Return the code of ``text[index]``, or 0 past the end."""
    return ord(text[index]) if index < len(text) else 0


def find_char(text: str, c: CharLike) -> Optional[int]:
    """Return the index of the first ``c`` in ``text``, or None if it is absent.

    Searching for the NUL character finds the terminator at ``len(text)``.
    """
    _require_str(text, "text")
    ch = _char(c)
    index = text.find(ch)
    if index >= 0:
        return index
    return len(text) if ch == _NUL else None


def rfind_char(text: str, c: CharLike) -> Optional[int]:
    """Return the index of the last ``c`` in ``text``, or None if it is absent.

    Searching for the NUL character finds the terminator at ``len(text)``.
    """
    _require_str(text, "text")
    ch = _char(c)
    index = text.rfind(ch)
    if index >= 0:
        return index
    return len(text) if ch == _NUL else None


def _difference(first: str, second: str, limit: int) -> int:
    for index in range(limit):
        a = _code_at(first, index)
        b = _code_at(second, index)
        if a != b or a == 0:
            return a - b
    return 0


def compare(first: str, second: str) -> int:
    """Compare two strings by character code.

    Returns the difference between the first pair of differing codes,
    a missing character counting as 0; 0 when the strings are equal.
    """
    _require_str(first, "first")
    _require_str(second, "second")
    return _difference(first, second, max(len(first), len(second)) + 1)


def compare_n(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` leading characters of two strings, like :func:`compare`."""
    _require_str(first, "first")
    _require_str(second, "second")
    _require_size(n, "n")
    return _difference(first, second, n)


def find_bounded(haystack: str, needle: str, length: int) -> Optional[int]:
    """Return where ``needle`` starts in the first ``length`` characters of ``haystack``.

    The whole of ``needle`` must lie within that prefix. An empty needle
    is found at index 0; otherwise None is returned when there is no match.
    """
    _require_str(haystack, "haystack")
    _require_str(needle, "needle")
    _require_size(length, "length")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return index if index >= 0 else None


def bounded_concat(dest: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dest`` as if into a buffer of ``size`` characters.

    One character of the buffer is kept for the terminator, so at most
    ``size - len(dest) - 1`` characters of ``src`` are appended. Returns the
    resulting string and the length the untruncated result would have had,
    that is ``len(src) + min(size, len(dest))``.
    """
    _require_str(dest, "dest")
    _require_str(src, "src")
    _require_size(size, "size")
    room = max(0, size - len(dest) - 1)
    return dest + src[:room], len(src) + min(size, len(dest))


def bounded_copy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` as if into a buffer of ``size`` characters.

    At most ``size - 1`` characters are kept; a size of 0 copies nothing.
    Returns the copy and the length of ``src``.
    """
    _require_str(src, "src")
    _require_size(size, "size")
    copied = src[:size - 1] if size > 0 else ""
    return copied, len(src)