"""Integer parsing, formatting and sign helpers with C integer semantics."""

from __future__ import annotations

INT_MAX = 2147483647
INT_MIN = -2147483648
LONG_MAX = 9223372036854775807
LONG_MIN = -9223372036854775808

_WHITESPACE = " \f\n\r\t\v"


def _wrap(value: int, bits: int) -> int:
    """Wrap ``value`` into a signed two's complement integer of ``bits`` bits."""
    modulus = 1 << bits
    half = 1 << (bits - 1)
    return (value + half) % modulus - half


def _check_int(n: int) -> int:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return n


def _parse_leading(text: str) -> int:
    """Parse optional whitespace, one optional sign and leading digits."""
    stripped = text.lstrip(_WHITESPACE)
    sign = 1
    if stripped[:1] in ("-", "+"):
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]
    digits = []
    for ch in stripped:
        if not "0" <= ch <= "9":
            break
        digits.append(ch)
    return sign * int("".join(digits)) if digits else 0


def atoi(text: str) -> int:
    """Convert the leading portion of ``text`` to a 32-bit signed integer.

    Leading whitespace and one sign are accepted; parsing stops at the first
    non-digit. Values outside the 32-bit range wrap around.
    """
    return _wrap(_parse_leading(text), 32)


def atol(text: str) -> int:
    """Convert the leading portion of ``text`` to a 64-bit signed integer.

    Same rules as :func:`atoi`, wrapping on the 64-bit range instead.
    """
    return _wrap(_parse_leading(text), 64)


def int_abs(n: int) -> int:
    """Return the absolute value of a 32-bit integer.

    As with a C ``int``, the absolute value of ``INT_MIN`` wraps back to
    ``INT_MIN``.
    """
    return _wrap(abs(_check_int(n)), 32)


def int_len(number: int) -> int:
    """Return how many characters the decimal form of ``number`` takes, sign included."""
    return len(itoa(number))


def itoa(n: int) -> str:
    """Return the decimal representation of a 32-bit integer."""
    return str(_check_int(n))