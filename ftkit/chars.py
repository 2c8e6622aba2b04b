"""ASCII character classification and case conversion."""

from __future__ import annotations

_WHITESPACE = "\t\n\v\f\r "
_DIGITS = frozenset("0123456789")


def _code(c: int | str) -> int:
    """Return the integer code of a one-character string or of an int."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an int, got {type(c).__name__}")
    return c


def is_alpha(c: int | str) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(c: int | str) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: int | str) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """True for a code in the range 0..127."""
    return 0 <= _code(c) < 128


def is_print(c: int | str) -> bool:
    """True for a printable ASCII character (space through tilde)."""
    return 32 <= _code(c) < 127


def is_str_digit(text: str) -> bool:
    """True if every character is a decimal digit or a space."""
    return all(ch in _DIGITS or ch == " " for ch in text)


def is_digit_sign(text: str) -> bool:
    """True for space-separated integers, each optionally signed.

    A sign must be followed by a digit and sit at the start of the text
    or right after a space.
    """
    previous = None
    for position, ch in enumerate(text):
        if ch in _DIGITS or ch == " ":
            pass
        elif ch in "+-":
            following = text[position + 1 : position + 2]
            if not (following and following in _DIGITS):
                return False
            if previous not in (None, " "):
                return False
        else:
            return False
        previous = ch
    return True


def is_digit_sign_float(text: str) -> bool:
    """True for an optionally signed decimal number with at most one point.

    Leading whitespace is allowed; at least one digit is required.
    """
    body = text.lstrip(_WHITESPACE)
    if body[:1] in ("+", "-") and body:
        body = body[1:]
    has_digit = False
    has_point = False
    for ch in body:
        if ch in _DIGITS:
            has_digit = True
        elif ch == ".":
            if has_point:
                return False
            has_point = True
        else:
            return False
    return has_digit


def _convert_case(c: int | str, low: str, high: str, shift: int) -> int | str:
    code = _code(c)
    if ord(low) <= code <= ord(high):
        code += shift
    return chr(code) if isinstance(c, str) else code


def to_lower(c: int | str) -> int | str:
    """Lower-case an ASCII upper-case letter; anything else is unchanged."""
    return _convert_case(c, "A", "Z", 32)


def to_upper(c: int | str) -> int | str:
    """Upper-case an ASCII lower-case letter; anything else is unchanged."""
    return _convert_case(c, "a", "z", -32)