"""String helpers with C-string conventions expressed the Python way.

Positions are returned as indices (or None when nothing is found), and
functions that would fill a caller's buffer return the new text instead.
"""

from __future__ import annotations

from itertools import islice, zip_longest
from typing import Callable, List, MutableSequence, Optional, Tuple

_NUL = "\0"
_ATOI_SPACE = frozenset("\t\n\v\f\r ")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def _single_char(c: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def strchr(s: str, c: str) -> Optional[int]:
    """Index of the first occurrence of c in s, or None.

    Searching for the NUL character finds the end of the string.
    """
    c = _single_char(c)
    index = s.find(c)
    if index != -1:
        return index
    return len(s) if c == _NUL else None


def strrchr(s: str, c: str) -> Optional[int]:
    """Index of the last occurrence of c in s, or None.

    Searching for the NUL character finds the end of the string.
    """
    c = _single_char(c)
    if c == _NUL:
        return len(s)
    index = s.rfind(c)
    return None if index == -1 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most n characters; the code difference of the first mismatch, or 0.

    The end of a string compares as a NUL character, and comparison stops
    once both strings have ended.
    """
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")
    for a, b in islice(zip_longest(s1, s2, fillvalue=_NUL), n):
        if a != b:
            return ord(a) - ord(b)
        if a == _NUL:
            return 0
    return 0


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Index of little in the first length characters of big, or None.

    An empty needle is found at index 0.
    """
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if not little:
        return 0
    index = big[:length].find(little)
    return None if index == -1 else index


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy src into a buffer of size characters, terminator included.

    Returns the text that fits and the full length of src, so truncation
    happened when the second value is at least size.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append src to dst within a buffer of size characters, terminator included.

    Returns the combined text and the length the result would have had
    without truncation, following the classic strlcat rule.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    room = max(0, size - len(dst) - 1)
    result = dst + src[:room]
    if len(dst) < size:
        return result, len(src) + len(dst)
    return result, len(src) + size


def substr(s: str, start: int, length: int) -> str:
    """At most length characters of s from index start; empty past the end."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(s):
        return ""
    return s[start:start + length]


def strtrim(s: str, charset: Optional[str]) -> str:
    """Strip characters found in charset from both ends of s.

    With no charset the string is returned unchanged.
    """
    if charset is None:
        return s
    return s.strip(charset)


def split(s: str, sep: str) -> List[str]:
    """Split s on sep, dropping the empty pieces."""
    sep = _single_char(sep)
    return [word for word in s.split(sep) if word]


def itoa(n: int) -> str:
    """Decimal text of a 32-bit signed integer."""
    if not _INT_MIN <= n <= _INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way atoi does.

    Leading whitespace is skipped, one optional sign is read, then digits up
    to the first non-digit. Text with no digits gives 0.
    """
    rest = text.lstrip("".join(_ATOI_SPACE))
    sign = 1
    if rest[:1] == "+":
        rest = rest[1:]
    elif rest[:1] == "-":
        sign = -1
        rest = rest[1:]
    total = 0
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        total = total * 10 + (ord(ch) - ord("0"))
    return sign * total


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """A new string made of func(index, character) for each character of s."""
    return "".join(func(index, ch) for index, ch in enumerate(s))


def striteri(
    chars: MutableSequence[str], func: Callable[[int, str], Optional[str]]
) -> MutableSequence[str]:
    """Call func(index, character) on each element of chars, in place.

    A value returned by func replaces the character; None leaves it as is.
    """
    for index, ch in enumerate(chars):
        replacement = func(index, ch)
        if replacement is not None:
            chars[index] = replacement
    return chars