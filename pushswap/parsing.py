"""Parsing and validation of the integer arguments given to the programs."""

from __future__ import annotations

import re
from typing import Iterable, Sequence

INT_MAX = 2147483647
INT_MIN = -2147483648

_LEADING = re.compile(r"([+-]?)([0-9]*)")
_STRICT = re.compile(r"-?[0-9]+")


class InputError(ValueError):
    """Raised when the arguments are not a valid list of integers."""


def atoi(text: str) -> int:
    """Lenient conversion: optional sign then leading digits, 32-bit wrapped.

    A string that starts with neither a digit nor a sign gives 1.
    """
    if not text or not (text[0].isascii() and (text[0].isdigit() or text[0] in "+-")):
        return 1
    match = _LEADING.match(text)
    sign, digits = match.group(1), match.group(2)
    value = int(digits) if digits else 0
    if sign == "-":
        value = -value
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value > INT_MAX else value


def checked_int(text: str) -> int:
    """Strictly parse ``text`` as an int in the 32-bit signed range.

    Only an optional leading '-' followed by digits is accepted.
    """
    if not _STRICT.fullmatch(text):
        raise InputError(f"not an integer: {text!r}")
    value = int(text)
    if not INT_MIN <= value <= INT_MAX:
        raise InputError(f"out of range: {text!r}")
    return value


def parse_arguments(args: Sequence[str]) -> list[int]:
    """Validate every argument and return the values in order.

    Duplicates are not checked here; see ``has_duplicates``.
    """
    if not args:
        raise InputError("no arguments")
    return [checked_int(arg) for arg in args]


def has_duplicates(values: Iterable[int]) -> bool:
    """Return True if any value occurs more than once."""
    seen: set[int] = set()
    for value in values:
        if value in seen:
            return True
        seen.add(value)
    return False