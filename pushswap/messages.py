"""Minimal printf-style formatting used for the programs' output."""

from __future__ import annotations

import sys
from typing import Any, Callable, Iterator, TextIO

_UINT32 = 0xFFFFFFFF
_UINT64 = 0xFFFFFFFFFFFFFFFF


def _to_int32(value: int) -> int:
    value &= _UINT32
    return value - (1 << 32) if value >= (1 << 31) else value


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("%c expects a single character")
        return value
    return chr(int(value) & 0xFF)


def _signed(value: Any) -> str:
    return str(_to_int32(int(value)))


def _text(value: Any) -> str:
    return "(null)" if value is None else str(value)


def _unsigned(value: Any) -> str:
    return str(int(value) & _UINT32)


def _hex_lower(value: Any) -> str:
    return format(int(value) & _UINT32, "x")


def _hex_upper(value: Any) -> str:
    return format(int(value) & _UINT32, "X")


def _pointer(value: Any) -> str:
    address = 0 if value is None else int(value) & _UINT64
    if address == 0:
        return "(nil)"
    return "0x" + format(address, "x")


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _char,
    "d": _signed,
    "i": _signed,
    "s": _text,
    "u": _unsigned,
    "x": _hex_lower,
    "X": _hex_upper,
    "p": _pointer,
}


def _convert(spec: str, values: Iterator[Any]) -> str:
    converter = _CONVERSIONS.get(spec)
    if converter is None:
        # Any other character after '%' yields a literal percent sign.
        return "%"
    try:
        value = next(values)
    except StopIteration:
        raise ValueError(f"missing argument for %{spec}") from None
    return converter(value)


def format_message(template: str, *args: Any) -> str:
    """Expand the %c %d %i %s %u %x %X %p conversions of ``template``.

    Integers are taken as 32-bit values (64-bit for %p); a ``None`` string
    prints as "(null)" and a null pointer as "(nil)".  Any other character
    following '%' is replaced by a single '%'.
    """
    values = iter(args)
    chars = iter(template)
    parts: list[str] = []
    for ch in chars:
        if ch == "%":
            parts.append(_convert(next(chars, ""), values))
        else:
            parts.append(ch)
    return "".join(parts)


def print_message(template: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the formatted message to ``stream`` (stdout by default).

    Returns the number of characters written.
    """
    text = format_message(template, *args)
    (stream if stream is not None else sys.stdout).write(text)
    return len(text)