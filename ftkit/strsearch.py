"""Searching, comparing and bounded copying of strings."""

from __future__ import annotations

from typing import NamedTuple


class BoundedCopy(NamedTuple):
    """Outcome of a size-limited copy or concatenation.

    ``text`` is what the destination holds afterwards; ``length`` is the
    length the full result would have had with an unlimited buffer.
    """

    text: str
    length: int


def _as_char(c: int | str) -> str:
    """Return the one-character string for c, reducing ints to a byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an int, got {type(c).__name__}")
    return chr(c & 0xFF)


def strchr(text: str, c: int | str) -> int | None:
    """Index of the first occurrence of c in text, or None.

    Searching for the NUL character finds the end of the text.
    """
    index = (text + "\0").find(_as_char(c))
    return None if index < 0 else index


def strrchr(text: str, c: int | str) -> int | None:
    """Index of the last occurrence of c in text, or None.

    Searching for the NUL character finds the end of the text.
    """
    index = (text + "\0").rfind(_as_char(c))
    return None if index < 0 else index


def strncmp(first: str, second: str, length: int) -> int:
    """Compare at most length characters of two strings.

    Returns the difference between the first pair of differing character
    codes, or 0 when the compared parts are equal.
    """
    for position in range(length):
        a = ord(first[position]) if position < len(first) else 0
        b = ord(second[position]) if position < len(second) else 0
        if a != b:
            return a - b
        if a == 0:
            break
    return 0


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Index of needle within the first length characters of haystack.

    An empty needle is found at index 0. Returns None when needle does not
    lie wholly inside the searched part.
    """
    if not needle:
        return 0
    index = haystack[: max(length, 0)].find(needle)
    return None if index < 0 else index


def strlcpy(dst: str, src: str, size: int) -> BoundedCopy:
    """Copy src into a buffer of size characters including the terminator.

    With a size of 0 the destination is left as it is. The returned length
    is always the length of src.
    """
    if size <= 0:
        return BoundedCopy(dst, len(src))
    return BoundedCopy(src[: size - 1], len(src))


def strlcat(dst: str, src: str, size: int) -> BoundedCopy:
    """Append src to dst within a buffer of size characters.

    When dst already fills the buffer nothing is appended and the returned
    length is size plus the length of src; otherwise it is the length of
    dst plus the length of src.
    """
    if size <= len(dst):
        return BoundedCopy(dst, size + len(src))
    room = size - 1 - len(dst)
    return BoundedCopy(dst + src[:room], len(dst) + len(src))