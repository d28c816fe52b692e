"""String helpers with C-library semantics, expressed over Python strings.

Functions that return a position in C return an index here, or None when
nothing was found.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence

_NUL = "\0"


def _char(c: int | str) -> str:
    """Return ``c`` as a one-character string; ints are taken modulo 256."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected a single character")
        return c
    return chr(c & 0xFF)


def _at(s: str, i: int) -> str:
    """Character at ``i``, or NUL past the end, as if the string were terminated."""
    return s[i] if i < len(s) else _NUL


def strlen(s: str | None) -> int:
    """Length of ``s``; None counts as empty."""
    return 0 if s is None else len(s)


def strchr(s: str | None, c: int | str) -> int | None:
    """Index of the first ``c`` in ``s``.

    Searching for NUL finds the terminator at ``len(s)``.
    """
    if s is None:
        return None
    ch = _char(c)
    if ch == _NUL:
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: int | str) -> int | None:
    """Index of the last ``c`` in ``s``; NUL finds the terminator at ``len(s)``."""
    ch = _char(c)
    if ch == _NUL:
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; return the code difference at the first mismatch."""
    if n == 0:
        return 0
    i = 0
    while i < n - 1 and _at(s1, i) == _at(s2, i) and _at(s1, i) != _NUL:
        i += 1
    return ord(_at(s1, i)) - ord(_at(s2, i))


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Index of ``needle`` lying wholly within the first ``length`` characters of ``haystack``."""
    if not needle:
        return 0
    limit = min(length, len(haystack))
    index = haystack.find(needle, 0, limit)
    return None if index < 0 else index


def strdup(s: str) -> str:
    """Return a copy of ``s``."""
    return "".join(s)


def strjoin(left: str | None, right: str) -> str:
    """Concatenate ``left`` and ``right``; a missing ``left`` counts as empty."""
    if right is None:
        raise TypeError("right operand must be a string")
    return (left or "") + right


def substr(s: str, start: int, length: int) -> str:
    """Up to ``length`` characters of ``s`` from ``start``; empty if ``start`` is past the end."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(s):
        return ""
    return s[start:start + length]


def strtrim(s: str | None, charset: str | None) -> str:
    """Remove characters in ``charset`` from both ends of ``s``.

    A missing or empty ``s``, or a missing ``charset``, gives an empty string.
    """
    if not s or charset is None:
        return ""
    return s.strip(charset)


def split(s: str, sep: int | str) -> list[str]:
    """Split ``s`` on the single character ``sep``, dropping empty pieces."""
    ch = _char(sep)
    return [word for word in s.split(ch) if word]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` applied to each character."""
    return "".join(func(index, ch) for index, ch in enumerate(s))


def striteri(
    s: MutableSequence[str], func: Callable[[int, str], str | None]
) -> MutableSequence[str]:
    """Call ``func(index, char)`` on each character of ``s`` in place.

    When ``func`` returns a character, it replaces the one at that index.
    """
    for index, ch in enumerate(s):
        replacement = func(index, ch)
        if replacement is not None:
            s[index] = replacement
    return s


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters including the terminator.

    Returns the copied text and the full length of ``src``. A size of zero
    copies nothing.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    copied = src[: size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the full result would have had.
    If ``dst`` already fills the buffer it is left unchanged and the length
    returned is ``size + len(src)``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    dst_len = min(len(dst), size)
    total = dst_len + len(src)
    if dst_len >= size:
        return dst, total
    room = size - 1 - dst_len
    return dst + src[:room], total