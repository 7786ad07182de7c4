"""Minimal formatted output and small writers for characters, strings and numbers.

Supported conversions are ``%c``, ``%s``, ``%p``, ``%d``, ``%i``, ``%u``,
``%x``, ``%X`` and ``%%``. There are no flags, widths or precisions. An
unknown conversion produces no output and uses no argument. Integer
conversions wrap their argument to the width of a C ``int`` or
``unsigned int``, and ``%p`` wraps to 64 bits.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any, TextIO

__all__ = [
    "format_printf",
    "printf",
    "put_char",
    "put_str",
    "put_endl",
    "put_nbr",
]

_LOWER_HEX = "0123456789abcdef"
_UPPER_HEX = "0123456789ABCDEF"
_DECIMAL = "0123456789"
_CONVERSIONS = frozenset("cspdiuxX%")


def _as_int(value: int) -> int:
    wrapped = int(value) & 0xFFFFFFFF
    return wrapped - (1 << 32) if wrapped >= (1 << 31) else wrapped


def _as_uint(value: int) -> int:
    return int(value) & 0xFFFFFFFF


def _in_base(number: int, digits: str) -> str:
    """Spell ``number`` with the given digit alphabet, with a leading '-' if negative."""
    sign = "-" if number < 0 else ""
    number = abs(number)
    base = len(digits)
    out = []
    while True:
        number, rem = divmod(number, base)
        out.append(digits[rem])
        if not number:
            break
    return sign + "".join(reversed(out))


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(int(value) & 0xFF)


def _pointer(value: Any) -> str:
    address = 0 if value is None else int(value) & 0xFFFFFFFFFFFFFFFF
    if not address:
        return "(nil)"
    return "0x" + _in_base(address, _LOWER_HEX)


def _convert(spec: str, values: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if not spec or spec not in _CONVERSIONS:
        return ""
    try:
        value = next(values)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None
    if spec == "c":
        return _char(value)
    if spec == "s":
        return "(null)" if value is None else str(value)
    if spec in ("d", "i"):
        return _in_base(_as_int(value), _DECIMAL)
    if spec == "u":
        return _in_base(_as_uint(value), _DECIMAL)
    if spec == "p":
        return _pointer(value)
    if spec == "x":
        return _in_base(_as_uint(value), _LOWER_HEX)
    return _in_base(_as_uint(value), _UPPER_HEX)


def format_printf(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by ``args``."""
    pieces: list[str] = []
    values = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        pieces.append(_convert(next(chars, ""), values))
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = format_printf(fmt, *args)
    sys.stdout.write(text)
    return len(text)


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: str | int, stream: TextIO | None = None) -> None:
    """Write one character."""
    _target(stream).write(_char(c))


def put_str(text: str | None, stream: TextIO | None = None) -> None:
    """Write ``text``; ``None`` writes nothing."""
    if text is None:
        return
    _target(stream).write(text)


def put_endl(text: str | None, stream: TextIO | None = None) -> None:
    """Write ``text`` followed by a newline; ``None`` writes nothing."""
    if text is None:
        return
    _target(stream).write(text + "\n")


def put_nbr(n: int, stream: TextIO | None = None) -> None:
    """Write the decimal representation of an integer."""
    _target(stream).write(_in_base(int(n), _DECIMAL))