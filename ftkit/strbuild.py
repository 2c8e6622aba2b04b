"""Building new strings from existing ones: splitting, joining, mapping, trimming."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Any


def _as_separator(sep: int | str) -> str:
    """Return sep as a one-character string, reducing ints to a byte."""
    if isinstance(sep, str):
        if len(sep) != 1:
            raise ValueError(f"expected a single character, got {sep!r}")
        return sep
    if isinstance(sep, bool) or not isinstance(sep, int):
        raise TypeError(f"expected a character or an int, got {type(sep).__name__}")
    return chr(sep & 0xFF)


def split(text: str, sep: int | str) -> list[str]:
    """Split text on the separator character, dropping empty words.

    Runs of separators, and separators at either end, produce no empty
    entries. A NUL separator never occurs inside text, so the whole text
    is one word.
    """
    separator = _as_separator(sep)
    if separator == "\0":
        return [text] if text else []
    return [word for word in text.split(separator) if word]


def strjoin(first: str, second: str) -> str:
    """Return the concatenation of first and second."""
    if not isinstance(first, str) or not isinstance(second, str):
        raise TypeError("strjoin expects two strings")
    return first + second


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string by applying func(index, char) to every character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def striteri(buffer: MutableSequence[Any], func: Callable[[int, Any], Any]) -> None:
    """Apply func(index, item) to every item of a mutable buffer in place.

    Whatever func returns replaces the item; returning None leaves it as
    it was.
    """
    for index, item in enumerate(buffer):
        replacement = func(index, item)
        if replacement is not None:
            buffer[index] = replacement


def strtrim(text: str, charset: str) -> str:
    """Remove every character of charset from both ends of text."""
    if not isinstance(text, str) or not isinstance(charset, str):
        raise TypeError("strtrim expects two strings")
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most length characters of text beginning at start.

    A start at or past the end of text gives an empty string.
    """
    if start < 0:
        raise ValueError(f"start must not be negative, got {start}")
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if start >= len(text):
        return ""
    return text[start : start + length]