"""A small ``printf`` supporting the ``c s p d i u x X %`` conversions.

No flags, widths or precisions are understood. An unknown conversion
character is dropped and consumes no argument.
"""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterator
from typing import Any

_MASK32 = 0xFFFF_FFFF
_MASK64 = 0xFFFF_FFFF_FFFF_FFFF


def _as_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError("%c expects a single character")
        return value
    return chr(int(value) & 0xFF)


def _as_string(value: Any) -> str:
    return "(null)" if value is None else str(value)


def _as_pointer(value: Any) -> str:
    if value is None:
        return "(nil)"
    address = value if isinstance(value, int) else id(value)
    address &= _MASK64
    if address == 0:
        return "(nil)"
    return f"0x{address:x}"


def _as_signed(value: Any) -> str:
    number = int(value) & _MASK32
    if number >= 1 << 31:
        number -= 1 << 32
    return str(number)


def _as_unsigned(value: Any) -> str:
    return str(int(value) & _MASK32)


def _as_hex(value: Any) -> str:
    return f"{int(value) & _MASK32:x}"


def _as_upper_hex(value: Any) -> str:
    return f"{int(value) & _MASK32:X}"


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _as_char,
    "s": _as_string,
    "p": _as_pointer,
    "d": _as_signed,
    "i": _as_signed,
    "u": _as_unsigned,
    "x": _as_hex,
    "X": _as_upper_hex,
}


def _next_arg(values: Iterator[Any], spec: str) -> Any:
    try:
        return next(values)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None


def format_string(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by ``args``.

    Raises TypeError when there are fewer arguments than conversions.
    """
    pieces: list[str] = []
    values = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, "")
        if not spec:
            break
        if spec == "%":
            pieces.append("%")
        elif spec in _CONVERSIONS:
            pieces.append(_CONVERSIONS[spec](_next_arg(values, spec)))
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = format_string(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)