"""Number parsing and formatting with C integer semantics."""

from __future__ import annotations

from itertools import takewhile

_WHITESPACE = "\t\n\v\f\r "
_DIGITS = "0123456789"
_LOWER_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
_UPPER_DIGITS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"
_ULONG_MASK = (1 << 64) - 1


def _wrap(value: int, bits: int) -> int:
    """Reduce value to a two's-complement integer of the given width."""
    value &= (1 << bits) - 1
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _sign_and_body(text: str) -> tuple[int, str]:
    """Skip leading whitespace and one optional sign."""
    body = text.lstrip(_WHITESPACE)
    if body[:1] == "-":
        return -1, body[1:]
    if body[:1] == "+":
        return 1, body[1:]
    return 1, body


def _leading_digits(text: str) -> str:
    return "".join(takewhile(lambda ch: ch in _DIGITS, text))


def _parse_integer(text: str) -> int:
    sign, body = _sign_and_body(text)
    digits = _leading_digits(body)
    return sign * int(digits) if digits else 0


def atoi(text: str) -> int:
    """Parse a leading integer, wrapping to a signed 32-bit value.

    Whitespace and one sign are skipped; parsing stops at the first
    non-digit. Text without digits yields 0.
    """
    return _wrap(_parse_integer(text), 32)


def atol(text: str) -> int:
    """Parse a leading integer, wrapping to a signed 64-bit value."""
    return _wrap(_parse_integer(text), 64)


def atod(text: str) -> float:
    """Parse a leading decimal number such as ``-12.75``.

    Only digits and one decimal point are recognised; no exponent.
    """
    sign, body = _sign_and_body(text)
    whole = _leading_digits(body)
    result = 0.0
    for ch in whole:
        result = result * 10.0 + (ord(ch) - ord("0"))
    rest = body[len(whole):]
    if rest[:1] == ".":
        fraction = 1.0
        for ch in _leading_digits(rest[1:]):
            fraction *= 0.1
            result += (ord(ch) - ord("0")) * fraction
    return result * (-1.0 if sign < 0 else 1.0)


def _check_base(base: int) -> None:
    if not 2 <= base <= 36:
        raise ValueError(f"base must be between 2 and 36, got {base}")


def size_base(nbr: int, base: int) -> int:
    """Number of digits needed to write a non-negative nbr in base.

    Negative numbers count as a single digit.
    """
    _check_base(base)
    size = 1
    while nbr >= base:
        nbr //= base
        size += 1
    return size


def convert_base(nbr: int, base: int, fmt: str) -> str:
    """Return the lowest digit of nbr in base.

    nbr is taken as an unsigned 64-bit value; fmt ``"X"`` selects
    upper-case digits, anything else lower-case.
    """
    _check_base(base)
    alphabet = _UPPER_DIGITS if fmt == "X" else _LOWER_DIGITS
    return alphabet[(nbr & _ULONG_MASK) % base]


def itoa(n: int) -> str:
    """Decimal text of an integer, with a leading minus when negative."""
    return str(n)