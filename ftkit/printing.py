"""Formatted output: a small printf, number formatting and put helpers."""

from __future__ import annotations

import sys
from typing import Any, TextIO

from ftkit.conversions import convert_base

_INT_MIN = -2147483648
_INT_MIN_TEXT = "-2147483648"
_UINT_MASK = (1 << 32) - 1
_ULONG_MASK = (1 << 64) - 1


def _wrap_int(value: int) -> int:
    """Reduce value to a signed 32-bit integer."""
    value &= _UINT_MASK
    return value - (1 << 32) if value >= 1 << 31 else value


def _check_base(base: int) -> None:
    if not 2 <= base <= 36:
        raise ValueError(f"base must be between 2 and 36, got {base}")


def _digits(value: int, base: int, fmt: str) -> str:
    """Digits of a non-negative value in base, most significant first."""
    digits = [convert_base(value, base, fmt)]
    value //= base
    while value:
        digits.append(convert_base(value, base, fmt))
        value //= base
    return "".join(reversed(digits))


def format_number(nbr: int, base: int, fmt: str) -> str:
    """Write a signed 32-bit integer in base, with a leading minus if negative.

    fmt ``"X"`` selects upper-case digits. The smallest 32-bit integer is
    always written in decimal.
    """
    _check_base(base)
    nbr = _wrap_int(nbr)
    if nbr == _INT_MIN:
        return _INT_MIN_TEXT
    if nbr < 0:
        return "-" + _digits(-nbr, base, fmt)
    return _digits(nbr, base, fmt)


def format_unsigned(nbr: int, base: int, fmt: str) -> str:
    """Write nbr, taken as an unsigned 64-bit value, in base."""
    _check_base(base)
    return _digits(nbr & _ULONG_MASK, base, fmt)


def _char_of(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        return value
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected a character or an int, got {type(value).__name__}")
    return chr(value & 0xFF)


def _pointer(value: Any) -> str:
    if value is None or value == 0:
        return "(nil)"
    address = value if isinstance(value, int) and not isinstance(value, bool) else id(value)
    return "0x" + format_unsigned(address, 16, "p")


def _convert(spec: str, value: Any) -> str:
    if spec == "c":
        return _char_of(value)
    if spec == "s":
        return "(null)" if value is None else str(value)
    if spec in "di":
        return format_number(int(value), 10, spec)
    if spec == "u":
        return format_unsigned(int(value) & _UINT_MASK, 10, spec)
    if spec in "xX":
        return format_unsigned(int(value) & _UINT_MASK, 16, spec)
    return _pointer(value)


def sprintf(fmt: str, *args: Any) -> str:
    """Format args according to fmt and return the text.

    Supported conversions: %% %c %s %d %i %u %x %X %p. Any other
    conversion, a trailing lone %, or too few arguments raise ValueError.
    """
    if fmt is None:
        raise ValueError("format must not be None")
    pieces: list[str] = []
    remaining = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, "")
        if spec == "%":
            pieces.append("%")
            continue
        if spec == "" or spec not in "csdiuxXp":
            raise ValueError(f"unsupported conversion %{spec}")
        try:
            value = next(remaining)
        except StopIteration:
            raise ValueError(f"not enough arguments for %{spec}") from None
        pieces.append(_convert(spec, value))
    return "".join(pieces)


def _stream(out: TextIO | None) -> TextIO:
    return sys.stdout if out is None else out


def printf(fmt: str, *args: Any, out: TextIO | None = None) -> int:
    """Write formatted text to out (standard output by default).

    Returns the number of characters written.
    """
    text = sprintf(fmt, *args)
    _stream(out).write(text)
    return len(text)


def put_char(c: int | str, out: TextIO | None = None) -> int:
    """Write one character and return 1."""
    _stream(out).write(_char_of(c))
    return 1


def put_str(text: str | None, out: TextIO | None = None) -> int:
    """Write text, or ``(null)`` for None; return the number of characters."""
    text = "(null)" if text is None else text
    _stream(out).write(text)
    return len(text)


def put_endl(text: str | None, out: TextIO | None = None) -> int:
    """Write text followed by a newline; return the number of characters."""
    return put_str(text, out) + put_char("\n", out)


def put_nbr(n: int, out: TextIO | None = None) -> int:
    """Write a signed 32-bit integer in decimal; return the number of characters."""
    return put_str(format_number(n, 10, "d"), out)