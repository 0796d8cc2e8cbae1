"""Writing characters, strings and numbers to text streams, with a small printf."""

from __future__ import annotations

from typing import Any, Optional, TextIO

DECIMAL = "0123456789"
HEX_LOWER = "0123456789abcdef"
HEX_UPPER = "0123456789ABCDEF"

_CONVERSIONS = frozenset("cspdiuxX%")
_UINT_MASK = 0xFFFFFFFF


def put_char(c: str, stream: TextIO) -> None:
    """Write one character to stream."""
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    stream.write(c)


def put_str(s: Optional[str], stream: TextIO) -> None:
    """Write s to stream; None writes nothing."""
    if s is not None:
        stream.write(s)


def put_endl(s: Optional[str], stream: TextIO) -> None:
    """Write s followed by a newline; None writes nothing."""
    if s is not None:
        stream.write(s + "\n")


def put_nbr(n: int, stream: TextIO) -> None:
    """Write the decimal form of n to stream."""
    stream.write(format_base(abs(n), DECIMAL, n < 0))


def format_base(number: int, base: str, negative: bool = False) -> str:
    """Digits of a non-negative number in the given base, with '-' when negative."""
    if len(base) < 2:
        raise ValueError("a base needs at least two digits")
    if number < 0:
        raise ValueError(f"number must not be negative, got {number}")
    radix = len(base)
    digits = []
    while True:
        number, remainder = divmod(number, radix)
        digits.append(base[remainder])
        if number == 0:
            break
    sign = "-" if negative else ""
    return sign + "".join(reversed(digits))


def format_address(address: Optional[int]) -> str:
    """An address as 0x-prefixed lower-case hex, or '(nil)' for zero."""
    if not address:
        return "(nil)"
    return "0x" + format_base(address, HEX_LOWER)


def _to_int32(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << 32) if value >= 1 << 31 else value


def _convert(conversion: str, args) -> str:
    if conversion == "%":
        return "%"
    try:
        value: Any = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{conversion}") from None
    if conversion == "c":
        return value if isinstance(value, str) else chr(value & 0xFF)
    if conversion == "s":
        return "(null)" if value is None else str(value)
    if conversion == "p":
        return format_address(value)
    if conversion in "di":
        number = _to_int32(value)
        return format_base(abs(number), DECIMAL, number < 0)
    if conversion == "u":
        return format_base(value & _UINT_MASK, DECIMAL)
    if conversion == "x":
        return format_base(value & _UINT_MASK, HEX_LOWER)
    return format_base(value & _UINT_MASK, HEX_UPPER)


def printf(stream: TextIO, fmt: str, *args: Any) -> int:
    """Write fmt to stream with %c %s %p %d %i %u %x %X %% expanded.

    Returns the number of characters written.
    """
    values = iter(args)
    pieces = []
    position = 0
    while position < len(fmt):
        percent = fmt.find("%", position)
        if percent == -1:
            pieces.append(fmt[position:])
            break
        pieces.append(fmt[position:percent])
        conversion = fmt[percent + 1:percent + 2]
        if conversion not in _CONVERSIONS or not conversion:
            raise ValueError(f"unsupported conversion at index {percent} in {fmt!r}")
        pieces.append(_convert(conversion, values))
        position = percent + 2
    text = "".join(pieces)
    stream.write(text)
    return len(text)