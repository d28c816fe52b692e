"""Character classification, case conversion and integer/text conversion."""

from __future__ import annotations

_LLONG_MAX = 2**63 - 1
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_WHITESPACE = frozenset({32, 9, 10, 11, 12, 13})


def _code(c: int | str) -> int:
    """Return the character code of ``c``, given as an int or a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected a single character")
        return ord(c)
    return c


def _wrap_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 2**32 if value > _INT_MAX else value


def is_alnum(c: int | str) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_alpha(c: int | str) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_ascii(c: int | str) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def is_digit(c: int | str) -> bool:
    """True for the ASCII digits 0-9."""
    return ord("0") <= _code(c) <= ord("9")


def is_print(c: int | str) -> bool:
    """True for printable ASCII, space through tilde."""
    return 31 < _code(c) < 127


def to_lower(c: int | str) -> int | str:
    """Lower-case an ASCII letter; anything else is returned unchanged, in the type given."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return chr(code) if isinstance(c, str) else code


def to_upper(c: int | str) -> int | str:
    """Upper-case an ASCII letter; anything else is returned unchanged, in the type given."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return chr(code) if isinstance(c, str) else code


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way the C library's atoi does.

    Leading whitespace is skipped and one sign is accepted. If the value
    overflows a 64-bit accumulator the result is -1 for positive input and 0
    for negative input; otherwise it is truncated to a 32-bit int.
    """
    i = 0
    length = len(text)
    while i < length and ord(text[i]) in _WHITESPACE:
        i += 1
    sign = 1
    if i < length and text[i] in "+-":
        if text[i] == "-":
            sign = -1
        i += 1
    result = 0
    while i < length and "0" <= text[i] <= "9":
        result = result * 10 + ord(text[i]) - ord("0")
        if result > _LLONG_MAX:
            return 0 if sign < 0 else -1
        i += 1
    return _wrap_int32(result * sign)


def itoa(n: int) -> str:
    """Return the decimal text of a 32-bit signed integer."""
    if not _INT_MIN <= n <= _INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit int")
    return str(n)