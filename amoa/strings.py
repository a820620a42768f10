"""Building new strings: splitting, trimming, slicing, joining and mapping."""

from __future__ import annotations

from typing import Callable, List


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


def split(text: str, sep: str) -> List[str]:
    """Split ``text`` on the single character ``sep``.

    Runs of separators count as one, and separators at either end produce
    no empty pieces, so the result never holds an empty string.
    """
    _require_str(text, "text")
    _require_str(sep, "sep")
    if len(sep) != 1:
        raise ValueError("sep must be a single character")
    return [piece for piece in text.split(sep) if piece]


def trim(text: str, charset: str) -> str:
    """Return ``text`` without the characters of ``charset`` at either end."""
    _require_str(text, "text")
    _require_str(charset, "charset")
    if not charset:
        return text
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` beginning at ``start``.

    A ``start`` at or past the end of ``text`` gives an empty string.
    """
    _require_str(text, "text")
    _require_size(start, "start")
    _require_size(length, "length")
    if start >= len(text):
        return ""
    return text[start:start + length]


def join(first: str, second: str) -> str:
    """Return ``first`` followed by ``second``."""
    return _require_str(first, "first") + _require_str(second, "second")


def map_indexed(text: str, func: Callable[[int, str], str]) -> str:
    """Build a string by applying ``func(index, char)`` to every character.

    ``func`` must return a single character for every call.
    """
    _require_str(text, "text")
    mapped = []
    for index, char in enumerate(text):
        result = func(index, char)
        if not isinstance(result, str) or len(result) != 1:
            raise TypeError("func must return a single character")
        mapped.append(result)
    return "".join(mapped)