"""The two stacks and the eleven operations that act on them."""

from __future__ import annotations

from collections import deque
from enum import Enum
from typing import Iterable, Sequence


class Operation(str, Enum):
    """An instruction, named as it is written on the instruction stream."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"

    def __str__(self) -> str:
        return self.value


def is_sorted(values: Iterable[int]) -> bool:
    """Return True if ``values`` never decreases from one item to the next."""
    previous = None
    for value in values:
        if previous is not None and value < previous:
            return False
        previous = value
    return True


def _swap(stack: deque[int]) -> None:
    if len(stack) >= 2:
        stack[0], stack[1] = stack[1], stack[0]


def _push(source: deque[int], target: deque[int]) -> None:
    if source:
        target.appendleft(source.popleft())


def _rotate(stack: deque[int]) -> None:
    if len(stack) >= 2:
        stack.rotate(-1)


def _reverse_rotate(stack: deque[int]) -> None:
    if len(stack) >= 2:
        stack.rotate(1)


class Stacks:
    """Stacks ``a`` and ``b``; the first item of each is its top.

    Operations that cannot act (swapping or rotating fewer than two items,
    pushing from an empty stack) leave the stacks unchanged.
    """

    def __init__(self, values: Sequence[int]) -> None:
        self.a: deque[int] = deque(values)
        self.b: deque[int] = deque()

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)!r}, b={list(self.b)!r})"

    def apply(self, op: Operation | str) -> None:
        """Apply one operation; a name that is not an operation raises ValueError."""
        op = Operation(op)
        if op is Operation.SA:
            _swap(self.a)
        elif op is Operation.SB:
            _swap(self.b)
        elif op is Operation.SS:
            _swap(self.b)
            _swap(self.a)
        elif op is Operation.PA:
            _push(self.b, self.a)
        elif op is Operation.PB:
            _push(self.a, self.b)
        elif op is Operation.RA:
            _rotate(self.a)
        elif op is Operation.RB:
            _rotate(self.b)
        elif op is Operation.RR:
            _rotate(self.b)
            _rotate(self.a)
        elif op is Operation.RRA:
            _reverse_rotate(self.a)
        elif op is Operation.RRB:
            _reverse_rotate(self.b)
        else:
            _reverse_rotate(self.b)
            _reverse_rotate(self.a)

    def run(self, ops: Iterable[Operation | str]) -> None:
        """Apply each operation in turn."""
        for op in ops:
            self.apply(op)

    def is_sorted(self) -> bool:
        """Return True if stack ``a`` is in ascending order.

        Only stack ``a`` is examined, as the checker does.
        """
        return is_sorted(self.a)