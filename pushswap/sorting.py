"""Computation of an instruction list that sorts stack ``a``.

The strategy: push everything but three values to ``b``, arrange those three
into rotated ascending order, then repeatedly insert back into ``a`` the
value of ``b`` that is cheapest to place, and finally rotate the smallest
value to the top.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Sequence

from .parsing import InputError, has_duplicates
from .stacks import Operation, Stacks, is_sorted


class Rotation(IntEnum):
    """How both stacks are turned before a value is pushed back to ``a``."""

    ROTATE_BOTH = 0
    REVERSE_BOTH = 1
    ROTATE_A_REVERSE_B = 2
    REVERSE_A_ROTATE_B = 3


@dataclass(frozen=True)
class Candidate:
    """A value of ``b`` together with where it goes and what it costs."""

    cost: int
    value: int
    index_a: int
    index_b: int


def find_target(a: Sequence[int], value: int) -> int:
    """Return the position in ``a`` above which ``value`` belongs.

    That is the position of the smallest item greater than ``value`` or, if
    there is none, the position of the smallest item.  ``a`` must not be empty.
    """
    if not a:
        raise ValueError("stack a is empty")
    greater = [(item, index) for index, item in enumerate(a) if item > value]
    if greater:
        return min(greater)[1]
    return min(range(len(a)), key=a.__getitem__)


def _rotation_costs(
    index_a: int, index_b: int, len_a: int, len_b: int
) -> list[tuple[Rotation, int]]:
    return [
        (Rotation.ROTATE_BOTH, max(index_a, index_b)),
        (Rotation.REVERSE_BOTH, max(len_a - index_a, len_b - index_b)),
        (Rotation.ROTATE_A_REVERSE_B, index_a + len_b - index_b),
        (Rotation.REVERSE_A_ROTATE_B, index_b + len_a - index_a),
    ]


def choose_rotation(index_a: int, index_b: int, len_a: int, len_b: int) -> Rotation:
    """Return the cheapest way to bring both positions to the top.

    Ties go to the first of: both forward, both reverse, a forward and b
    reverse, a reverse and b forward.
    """
    return min(
        _rotation_costs(index_a, index_b, len_a, len_b), key=lambda item: item[1]
    )[0]


def move_cost(index_a: int, index_b: int, len_a: int, len_b: int) -> int:
    """Return the number of rotations the cheapest way takes."""
    return min(cost for _, cost in _rotation_costs(index_a, index_b, len_a, len_b))


def best_candidate(a: Sequence[int], b: Sequence[int]) -> Candidate:
    """Return the first value of ``b`` that is cheapest to insert into ``a``."""
    if not b:
        raise ValueError("stack b is empty")
    best: Candidate | None = None
    for index_b, value in enumerate(b):
        index_a = find_target(a, value)
        cost = move_cost(index_a, index_b, len(a), len(b))
        if best is None or cost < best.cost:
            best = Candidate(cost, value, index_a, index_b)
    assert best is not None
    return best


def is_rotated_sorted(values: Sequence[int]) -> bool:
    """Return True if ``values`` is ascending apart from one step from max to min.

    The step from the last item back to the first is not examined.
    """
    if is_sorted(values):
        return True
    highest, lowest = max(values), min(values)
    for current, following in zip(values, values[1:]):
        if current == highest and following != lowest:
            return False
        if current > following and (current != highest or following != lowest):
            return False
    return True


_SINGLE_A = {Operation.SA, Operation.RA, Operation.RRA}
_SINGLE_B = {Operation.SB, Operation.RB, Operation.RRB}


class _Planner:
    """Applies operations to a pair of stacks and records those emitted."""

    def __init__(self, values: Iterable[int]) -> None:
        self.stacks = Stacks(list(values))
        self.ops: list[Operation] = []

    def _emitted(self, op: Operation) -> bool:
        # Single-stack moves on fewer than two items and pushes from an
        # empty stack are silent; the combined moves are always written.
        if op in _SINGLE_A:
            return len(self.stacks.a) >= 2
        if op in _SINGLE_B:
            return len(self.stacks.b) >= 2
        if op is Operation.PA:
            return bool(self.stacks.b)
        if op is Operation.PB:
            return bool(self.stacks.a)
        return True

    def do(self, op: Operation, times: int = 1) -> None:
        for _ in range(times):
            if self._emitted(op):
                self.ops.append(op)
            self.stacks.apply(op)

    def insert(self, candidate: Candidate) -> None:
        len_a, len_b = len(self.stacks.a), len(self.stacks.b)
        index_a, index_b = candidate.index_a, candidate.index_b
        rotation = choose_rotation(index_a, index_b, len_a, len_b)
        if rotation is Rotation.ROTATE_BOTH:
            both = min(index_a, index_b)
            self.do(Operation.RR, both)
            self.do(Operation.RA, index_a - both)
            self.do(Operation.RB, index_b - both)
        elif rotation is Rotation.REVERSE_BOTH:
            steps_a, steps_b = len_a - index_a, len_b - index_b
            both = min(steps_a, steps_b)
            self.do(Operation.RRR, both)
            self.do(Operation.RRA, steps_a - both)
            self.do(Operation.RRB, steps_b - both)
        elif rotation is Rotation.ROTATE_A_REVERSE_B:
            self.do(Operation.RA, index_a)
            self.do(Operation.RRB, len_b - index_b)
        else:
            self.do(Operation.RRA, len_a - index_a)
            self.do(Operation.RB, index_b)
        self.do(Operation.PA)

    def bring_min_to_top(self) -> None:
        a = self.stacks.a
        size = len(a)
        min_index = list(a).index(min(a))
        if min_index <= size // 2:
            self.do(Operation.RA, min_index)
        else:
            self.do(Operation.RRA, size - min_index)


def sort_operations(values: Iterable[int]) -> list[Operation]:
    """Return the operations that sort ``values`` in stack ``a``.

    Raises InputError if a value occurs twice.  Sorted input gives no
    operations.
    """
    values = list(values)
    if has_duplicates(values):
        raise InputError("duplicate values")
    if is_sorted(values):
        return []
    planner = _Planner(values)
    stacks = planner.stacks
    while len(stacks.a) > 3:
        planner.do(Operation.PB)
    if len(stacks.a) == 3 and not is_rotated_sorted(list(stacks.a)):
        planner.do(Operation.SA)
    while stacks.b:
        planner.insert(best_candidate(list(stacks.a), list(stacks.b)))
    planner.bring_min_to_top()
    return planner.ops