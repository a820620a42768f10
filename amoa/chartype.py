"""ASCII character classification and case conversion.

Every function accepts either a one-character string or an integer
character code. The case converters return a value of the same kind
as they were given.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[str, int]

_ORD_A_LOWER = ord("a")
_ORD_Z_LOWER = ord("z")
_ORD_A_UPPER = ord("A")
_ORD_Z_UPPER = ord("Z")
_CASE_SHIFT = _ORD_A_LOWER - _ORD_A_UPPER


def _code(c: CharLike) -> int:
    """Return the integer code of ``c``."""
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got {len(c)} characters")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")
    return c


def _like(original: CharLike, code: int) -> CharLike:
    """Return ``code`` in the same form as ``original``."""
    return chr(code) if isinstance(original, str) else code


def is_alpha(c: CharLike) -> bool:
    """Tell whether ``c`` is an ASCII letter."""
    code = _code(c)
    return _ORD_A_LOWER <= code <= _ORD_Z_LOWER or _ORD_A_UPPER <= code <= _ORD_Z_UPPER


def is_digit(c: CharLike) -> bool:
    """Tell whether ``c`` is an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: CharLike) -> bool:
    """Tell whether ``c`` is an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """Tell whether ``c`` lies in the ASCII range 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """Tell whether ``c`` is a printable ASCII character (32 to 126)."""
    return 32 <= _code(c) <= 126


def to_lower(c: CharLike) -> CharLike:
    """Convert an uppercase ASCII letter to lowercase; leave anything else as is."""
    code = _code(c)
    if _ORD_A_UPPER <= code <= _ORD_Z_UPPER:
        code += _CASE_SHIFT
    return _like(c, code)


def to_upper(c: CharLike) -> CharLike:
    """Convert a lowercase ASCII letter to uppercase; leave anything else as is."""
    code = _code(c)
    if _ORD_A_LOWER <= code <= _ORD_Z_LOWER:
        code -= _CASE_SHIFT
    return _like(c, code)