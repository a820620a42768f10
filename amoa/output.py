"""Writing characters, strings and numbers to text streams."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from amoa.integers import itoa

DECIMAL = "0123456789"
HEX_LOWER = "0123456789abcdef"
HEX_UPPER = "0123456789ABCDEF"


def _target(stream: Optional[TextIO]) -> TextIO:
    """Return ``stream``, or the current standard output when it is None."""
    return sys.stdout if stream is None else stream


def to_base(n: int, base: str) -> str:
    """Return the non-negative integer ``n`` written with the digits of ``base``.

    The length of ``base`` is the radix; its characters are the digits in
    increasing order.
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    if n < 0:
        raise ValueError("cannot write a negative number in an arbitrary base")
    radix = len(base)
    if radix < 2:
        raise ValueError("a base needs at least two digits")
    digits = []
    while True:
        n, remainder = divmod(n, radix)
        digits.append(base[remainder])
        if n == 0:
            break
    return "".join(reversed(digits))


def put_char(c: str, stream: Optional[TextIO] = None) -> None:
    """Write the single character ``c`` to ``stream`` (standard output by default)."""
    if not isinstance(c, str) or len(c) != 1:
        raise TypeError("expected a single character")
    _target(stream).write(c)


def put_str(text: str, stream: Optional[TextIO] = None) -> None:
    """Write ``text`` to ``stream`` (standard output by default)."""
    if not isinstance(text, str):
        raise TypeError(f"expected a str, got {type(text).__name__}")
    _target(stream).write(text)


def put_endl(text: str, stream: Optional[TextIO] = None) -> None:
    """Write ``text`` followed by a newline to ``stream``."""
    put_str(text, stream)
    put_char("\n", stream)


def put_nbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write the 32-bit signed integer ``n`` in decimal to ``stream``."""
    put_str(itoa(n), stream)


def put_nbr_base(n: int, base: str, stream: Optional[TextIO] = None) -> None:
    """Write the non-negative integer ``n`` in the given ``base`` to ``stream``."""
    put_str(to_base(n, base), stream)