"""Command that prints the instructions sorting its arguments."""

from __future__ import annotations

import sys
from typing import Sequence

from .messages import print_message
from .parsing import InputError, parse_arguments
from .sorting import sort_operations


def main(argv: Sequence[str] | None = None) -> int:
    """Print one instruction per line that sorts the given integers."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        values = parse_arguments(args)
    except InputError:
        print_message("Error\n")
        return 1
    try:
        ops = sort_operations(values)
    except InputError:
        sys.stderr.write("Error\n")
        return 0
    for op in ops:
        print_message("%s\n", op)
    return 0


if __name__ == "__main__":
    sys.exit(main())