import string

import pytest

from ftkit import chars

ASCII_CHARS = [chr(code) for code in range(128)]


@pytest.mark.parametrize("c", ASCII_CHARS)
def test_is_alpha_matches_ascii_letters(c):
    assert chars.is_alpha(c) == (c in string.ascii_letters)


@pytest.mark.parametrize("c", ASCII_CHARS)
def test_is_digit_matches_decimal_digits(c):
    assert chars.is_digit(c) == (c in string.digits)


@pytest.mark.parametrize("c", ASCII_CHARS)
def test_is_alnum_is_alpha_or_digit(c):
    assert chars.is_alnum(c) == (chars.is_alpha(c) or chars.is_digit(c))


def test_is_digit_rejects_non_ascii_digit():
    assert not chars.is_digit("\u0663")


def test_int_codes_accepted():
    assert chars.is_alpha(ord("q"))
    assert not chars.is_alpha(ord("@"))
    assert chars.is_digit(ord("0"))


@pytest.mark.parametrize("code", [-1, 0, 127, 128, 255])
def test_is_ascii_range(code):
    assert chars.is_ascii(code) == (0 <= code <= 127)


@pytest.mark.parametrize("c", ASCII_CHARS)
def test_is_print_matches_printable_without_controls(c):
    assert chars.is_print(c) == (c.isprintable() and c.isascii())


def test_multi_char_string_rejected():
    with pytest.raises(ValueError):
        chars.is_alpha("ab")


def test_non_char_type_rejected():
    with pytest.raises(TypeError):
        chars.is_digit(1.5)


@pytest.mark.parametrize(
    "text, expected",
    [("123 456", True), ("", True), ("   ", True), ("12a", False), ("-1", False)],
)
def test_is_str_digit(text, expected):
    assert chars.is_str_digit(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("12 -3 +4", True),
        ("-5", True),
        ("", True),
        ("1-2", False),
        ("- 1", False),
        ("+", False),
        ("3.5", False),
        ("--1", False),
    ],
)
def test_is_digit_sign(text, expected):
    assert chars.is_digit_sign(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        (" -3.14", True),
        ("+0.5", True),
        ("42", True),
        (".5", True),
        ("3.", True),
        ("3.1.4", False),
        ("-", False),
        (".", False),
        ("", False),
        ("1 ", False),
        ("1e5", False),
        ("--1", False),
    ],
)
def test_is_digit_sign_float(text, expected):
    assert chars.is_digit_sign_float(text) == expected


@pytest.mark.parametrize("c", ASCII_CHARS)
def test_to_lower_matches_ascii_lowering(c):
    assert chars.to_lower(c) == c.lower()


@pytest.mark.parametrize("c", ASCII_CHARS)
def test_to_upper_matches_ascii_uppering(c):
    assert chars.to_upper(c) == c.upper()


def test_case_round_trip_on_letters():
    for c in string.ascii_letters:
        assert chars.to_lower(chars.to_upper(c)) == c.lower()
        assert chars.to_upper(chars.to_lower(c)) == c.upper()


def test_case_conversion_keeps_int_type():
    assert chars.to_lower(ord("G")) == ord("g")
    assert chars.to_upper(ord("g")) == ord("G")


def test_non_ascii_left_unchanged():
    assert chars.to_lower("\u00c9") == "\u00c9"
    assert chars.to_upper(200) == 200