import string

import pytest

from solong.chars import (
    atoi,
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    itoa,
    to_lower,
    to_upper,
)

ASCII_CODES = range(128)


@pytest.mark.parametrize("code", ASCII_CODES)
def test_is_alpha_matches_ascii_letters(code):
    assert is_alpha(code) == (chr(code) in string.ascii_letters)


@pytest.mark.parametrize("code", ASCII_CODES)
def test_is_digit_matches_ascii_digits(code):
    assert is_digit(code) == (chr(code) in string.digits)


@pytest.mark.parametrize("code", ASCII_CODES)
def test_is_alnum_is_union_of_alpha_and_digit(code):
    assert is_alnum(code) == (is_alpha(code) or is_digit(code))


@pytest.mark.parametrize("code", ASCII_CODES)
def test_is_print_matches_visible_and_space(code):
    ch = chr(code)
    expected = ch == " " or (ch in string.printable and ch not in string.whitespace)
    assert is_print(code) == expected


def test_is_ascii_bounds():
    assert is_ascii(0)
    assert is_ascii(127)
    assert not is_ascii(128)
    assert not is_ascii(-1)


def test_classification_accepts_strings():
    assert is_alpha("q")
    assert not is_alpha("7")
    assert is_digit("7")


def test_classification_rejects_long_strings():
    with pytest.raises(ValueError):
        is_alpha("ab")


def test_case_conversion_on_strings():
    for ch in string.ascii_lowercase:
        assert to_upper(ch) == ch.upper()
        assert to_lower(ch.upper()) == ch


def test_case_conversion_leaves_others_alone():
    for ch in string.digits + string.punctuation + " ":
        assert to_upper(ch) == ch
        assert to_lower(ch) == ch


def test_case_conversion_keeps_int_type():
    assert to_upper(ord("a")) == ord("A")
    assert to_lower(ord("Z")) == ord("z")


@pytest.mark.parametrize("n", [0, 1, -1, 42, -42, 2147483647, -2147483648])
def test_itoa_atoi_round_trip(n):
    assert itoa(n) == str(n)
    assert atoi(itoa(n)) == n


def test_itoa_rejects_out_of_range():
    with pytest.raises(OverflowError):
        itoa(2**31)


def test_atoi_skips_whitespace_and_trailing_text():
    assert atoi(" \t\n-42abc") == int("-42")
    assert atoi("+17 apples") == int("17")


def test_atoi_non_numeric_gives_zero():
    assert atoi("abc") == 0
    assert atoi("--5") == 0
    assert atoi("") == 0


def test_atoi_wraps_to_32_bits():
    assert atoi("2147483648") == -2147483648


def test_atoi_overflow_of_accumulator():
    assert atoi("99999999999999999999") == -1
    assert atoi("-99999999999999999999") == 0