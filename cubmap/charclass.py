"""ASCII character classification and case conversion.

Every function accepts either a one-character string or an integer code.
The classifiers answer with a bool. The case converters give back a value
of the same kind they were given.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[str, int]

_LOWER_A, _LOWER_Z = ord("a"), ord("z")
_UPPER_A, _UPPER_Z = ord("A"), ord("Z")
_DIGIT_0, _DIGIT_9 = ord("0"), ord("9")
_CASE_OFFSET = _LOWER_A - _UPPER_A


def _code(c: CharLike) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def _is_lower(code: int) -> bool:
    return _LOWER_A <= code <= _LOWER_Z


def _is_upper(code: int) -> bool:
    return _UPPER_A <= code <= _UPPER_Z


def is_alpha(c: CharLike) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return _is_lower(code) or _is_upper(code)


def is_digit(c: CharLike) -> bool:
    """True for an ASCII decimal digit."""
    return _DIGIT_0 <= _code(c) <= _DIGIT_9


def is_alnum(c: CharLike) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """True for a code in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def to_upper(c: CharLike) -> CharLike:
    """Map an ASCII lower-case letter to upper case; leave anything else alone."""
    code = _code(c)
    if _is_lower(code):
        code -= _CASE_OFFSET
    return chr(code) if isinstance(c, str) else code


def to_lower(c: CharLike) -> CharLike:
    """Map an ASCII upper-case letter to lower case; leave anything else alone."""
    code = _code(c)
    if _is_upper(code):
        code += _CASE_OFFSET
    return chr(code) if isinstance(c, str) else code