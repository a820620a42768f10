"""A small printf supporting the %c, %s, %p, %d, %i, %u, %x, %X and %% conversions."""

from __future__ import annotations

from typing import Any, Iterable, Optional, TextIO

from amoa.output import DECIMAL, HEX_LOWER, HEX_UPPER, put_str, to_base

_UINT_MODULUS = 1 << 32
_POINTER_MODULUS = 1 << 64
_INT_HALF = 1 << 31

NULL_STRING = "(null)"
NULL_POINTER = "(nil)"


def _require_int(value: Any, conversion: str) -> int:
    if not isinstance(value, int):
        raise TypeError(f"%{conversion} expects an int, got {type(value).__name__}")
    return value


def _as_int32(value: int) -> int:
    return (value + _INT_HALF) % _UINT_MODULUS - _INT_HALF


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError("%c expects a single character")
        return value
    return chr(_require_int(value, "c") % 256)


def _format_string(value: Any) -> str:
    if value is None:
        return NULL_STRING
    if not isinstance(value, str):
        raise TypeError(f"%s expects a str, got {type(value).__name__}")
    return value


def _format_pointer(value: Any) -> str:
    if value is None:
        return NULL_POINTER
    address = _require_int(value, "p") % _POINTER_MODULUS
    if address == 0:
        return NULL_POINTER
    return "0x" + to_base(address, HEX_LOWER)


def _format_unsigned(value: Any, conversion: str, base: str) -> str:
    return to_base(_require_int(value, conversion) % _UINT_MODULUS, base)


def _convert(conversion: str, value: Any) -> str:
    if conversion == "c":
        return _format_char(value)
    if conversion == "s":
        return _format_string(value)
    if conversion == "p":
        return _format_pointer(value)
    if conversion in ("d", "i"):
        return str(_as_int32(_require_int(value, conversion)))
    if conversion == "u":
        return _format_unsigned(value, conversion, DECIMAL)
    if conversion == "x":
        return _format_unsigned(value, conversion, HEX_LOWER)
    return _format_unsigned(value, conversion, HEX_UPPER)


_CONSUMING = frozenset("cspdiuxX")


def format_printf(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by ``args``.

    A ``%`` followed by an unknown character produces nothing and both
    characters are skipped. Extra arguments are ignored; missing ones raise
    :class:`TypeError`.
    """
    pieces = []
    remaining = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        conversion = next(chars, "")
        if conversion == "%":
            pieces.append("%")
        elif conversion in _CONSUMING and conversion:
            try:
                value = next(remaining)
            except StopIteration:
                raise TypeError(f"not enough arguments for %{conversion}") from None
            pieces.append(_convert(conversion, value))
    return "".join(pieces)


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the formatted text to ``stream`` and return how many characters it has."""
    text = format_printf(fmt, *args)
    put_str(text, stream)
    return len(text)


def print_lines(lines: Iterable[Optional[str]], stream: Optional[TextIO] = None) -> None:
    """Write every entry of ``lines`` followed by a newline."""
    for line in lines:
        printf("%s\n", line, stream=stream)