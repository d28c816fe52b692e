"""printf-style formatting and small writers for text streams."""

from __future__ import annotations

import operator
import sys
from collections.abc import Callable
from typing import Any, TextIO

_UINT32_MASK = 0xFFFFFFFF
_SIZE_MASK = 0xFFFFFFFFFFFFFFFF
_INT_MAX = 2**31 - 1
_NULL_TEXT = "(null)"


def _as_int(value: Any) -> int:
    """Return ``value`` as an int, rejecting non-integral types."""
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(f"expected an integer, got {type(value).__name__}") from None


def _wrap_int32(value: int) -> int:
    value = _as_int(value) & _UINT32_MASK
    return value - 2**32 if value > _INT_MAX else value


def _as_char(c: int | str) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected a single character")
        return c
    return chr(_as_int(c) & 0xFF)


def _resolve(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def format_hex(value: int, upper: bool = False) -> str:
    """Hexadecimal text of ``value`` taken as a 32-bit unsigned int."""
    text = format(_as_int(value) & _UINT32_MASK, "x")
    return text.upper() if upper else text


def format_pointer(value: int | None) -> str:
    """Address text: ``0x`` followed by lower-case hex; None counts as zero."""
    number = 0 if value is None else _as_int(value) & _SIZE_MASK
    return "0x" + format(number, "x")


def format_unsigned(value: int) -> str:
    """Decimal text of ``value`` taken as a 32-bit unsigned int."""
    return str(_as_int(value) & _UINT32_MASK)


def _format_string(value: Any) -> str:
    return _NULL_TEXT if value is None else str(value)


def _format_int(value: Any) -> str:
    return str(_wrap_int32(value))


_CONVERTERS: dict[str, Callable[[Any], str]] = {
    "c": _as_char,
    "s": _format_string,
    "p": format_pointer,
    "d": _format_int,
    "i": _format_int,
    "u": format_unsigned,
    "x": lambda value: format_hex(value, False),
    "X": lambda value: format_hex(value, True),
}


def format_printf(fmt: str, *args: Any) -> str:
    """Expand ``fmt`` with the conversions c, s, p, d, i, u, x, X and %%.

    An unknown conversion character is dropped along with its ``%`` and
    consumes no argument. A ``%`` at the very end raises ValueError, and
    running out of arguments raises TypeError.
    """
    pieces: list[str] = []
    values = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            raise ValueError("format string ends with a lone '%'")
        if spec == "%":
            pieces.append("%")
            continue
        converter = _CONVERTERS.get(spec)
        if converter is None:
            continue
        try:
            value = next(values)
        except StopIteration:
            raise TypeError("not enough arguments for format string") from None
        pieces.append(converter(value))
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the expanded format to standard output; return the characters written."""
    text = format_printf(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)


def put_char(c: int | str, stream: TextIO | None = None) -> None:
    """Write one character to ``stream`` (standard output by default)."""
    _resolve(stream).write(_as_char(c))


def put_str(s: str | None, stream: TextIO | None = None) -> None:
    """Write ``s`` to ``stream``; None writes nothing."""
    if s is not None:
        _resolve(stream).write(s)


def put_endl(s: str | None, stream: TextIO | None = None) -> None:
    """Write ``s`` and a newline to ``stream``; None writes nothing."""
    if s is not None:
        _resolve(stream).write(s + "\n")


def put_nbr(n: int, stream: TextIO | None = None) -> None:
    """Write ``n``, taken as a 32-bit signed int, in decimal to ``stream``."""
    _resolve(stream).write(str(_wrap_int32(n)))