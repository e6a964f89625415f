"""Checker: applies instructions read from standard input and reports the result."""

from __future__ import annotations

import sys
from typing import Iterable, Sequence

from .linereader import read_lines
from .messages import print_message
from .parsing import InputError, has_duplicates, parse_arguments
from .stacks import Operation, Stacks

_READ_CHUNK = 4096

# Order matters: a line is taken for the first instruction it is a prefix of.
_INSTRUCTIONS: tuple[tuple[str, Operation], ...] = tuple(
    (op.value + "\n", op)
    for op in (
        Operation.PA,
        Operation.PB,
        Operation.RA,
        Operation.RB,
        Operation.RRA,
        Operation.RRB,
        Operation.SA,
        Operation.SB,
        Operation.RR,
        Operation.RRR,
    )
)


def _parse_instruction(line: str) -> Operation:
    for text, op in _INSTRUCTIONS:
        if text.startswith(line):
            return op
    raise InputError(f"unknown instruction: {line!r}")


def check(values: Sequence[int], lines: Iterable[str]) -> bool:
    """Apply the instructions in ``lines`` to ``values`` and report whether a is sorted.

    Already sorted values are accepted without reading any line.  Reading
    stops at the first empty line.  Raises InputError for duplicate values
    or an unknown instruction.
    """
    values = list(values)
    if not values:
        raise InputError("no values")
    if has_duplicates(values):
        raise InputError("duplicate values")
    stacks = Stacks(values)
    if stacks.is_sorted():
        return True
    for line in lines:
        if not line:
            break
        stacks.apply(_parse_instruction(line))
    return stacks.is_sorted()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the checker on the given arguments, reading instructions from stdin."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        values = parse_arguments(args)
    except InputError:
        print_message("Error\n")
        return 1
    if has_duplicates(values):
        print_message("Error\n")
        return 1
    try:
        ok = check(values, read_lines(sys.stdin, _READ_CHUNK))
    except InputError:
        print_message("Error\n")
        return 0
    print_message("OK\n" if ok else "KO\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())