from collections import Counter

import pytest
from hypothesis import given
from hypothesis import strategies as st

from pushswap.stacks import Operation, Stacks, is_sorted

value_lists = st.lists(st.integers(-1000, 1000), unique=True, max_size=12)
op_lists = st.lists(st.sampled_from(list(Operation)), max_size=40)


def state(stacks):
    return list(stacks.a), list(stacks.b)


def test_operation_names_match_instruction_stream():
    assert [op.value for op in Operation] == [
        "sa", "sb", "ss", "pa", "pb", "ra", "rb", "rr", "rra", "rrb", "rrr",
    ]
    assert Operation("rrr") is Operation.RRR
    assert str(Operation.PA) == "pa"


def test_swap_top_two():
    s = Stacks([2, 1, 3])
    s.apply("sa")
    assert state(s) == ([1, 2, 3], [])


def test_push_moves_top():
    s = Stacks([5, 6, 7])
    s.run(["pb", "pb"])
    assert state(s) == ([7], [6, 5])
    s.apply(Operation.PA)
    assert state(s) == ([6, 7], [5])


def test_rotate_and_reverse_rotate():
    s = Stacks([1, 2, 3])
    s.apply("ra")
    assert state(s) == ([2, 3, 1], [])
    s.apply("rra")
    s.apply("rra")
    assert state(s) == ([3, 1, 2], [])


def test_operations_on_too_small_stacks_do_nothing():
    s = Stacks([4])
    s.run(["sa", "ra", "rra", "sb", "rb", "rrb", "pa", "ss", "rr", "rrr"])
    assert state(s) == ([4], [])


def test_combined_operations_act_on_both():
    s = Stacks([1, 2, 3, 4])
    s.run(["pb", "pb"])
    s.apply("ss")
    assert state(s) == ([4, 3], [1, 2])
    s.apply("rr")
    assert state(s) == ([3, 4], [2, 1])
    s.apply("rrr")
    assert state(s) == ([4, 3], [1, 2])


def test_unknown_operation_raises():
    s = Stacks([1, 2])
    with pytest.raises(ValueError):
        s.apply("xx")
    with pytest.raises(ValueError):
        s.run(["sa", "sa\n"])


def test_is_sorted_function():
    assert is_sorted([1, 2, 2, 3])
    assert not is_sorted([1, 3, 2])
    assert is_sorted([])


def test_stacks_is_sorted_looks_at_a_only():
    s = Stacks([3, 1, 2])
    assert not s.is_sorted()
    s.apply("pb")
    assert s.is_sorted()
    assert list(s.b) == [3]


@given(value_lists, op_lists)
def test_values_are_conserved(values, ops):
    s = Stacks(values)
    s.run(ops)
    assert Counter(s.a) + Counter(s.b) == Counter(values)


@given(value_lists, op_lists)
def test_inverse_pairs_restore_state(values, ops):
    inverses = {
        Operation.SA: Operation.SA, Operation.SB: Operation.SB,
        Operation.SS: Operation.SS, Operation.RA: Operation.RRA,
        Operation.RB: Operation.RRB, Operation.RR: Operation.RRR,
        Operation.RRA: Operation.RA, Operation.RRB: Operation.RB,
        Operation.RRR: Operation.RR,
    }
    s = Stacks(values)
    s.run(ops)
    before = state(s)
    for op, inverse in inverses.items():
        s.apply(op)
        s.apply(inverse)
        assert state(s) == before


@given(value_lists)
def test_push_all_and_back_restores(values):
    s = Stacks(values)
    s.run([Operation.PB] * len(values))
    assert list(s.b) == list(reversed(values))
    s.run([Operation.PA] * len(values))
    assert state(s) == (values, [])


@given(value_lists)
def test_full_rotation_is_identity(values):
    s = Stacks(values)
    s.run(["ra"] * len(values))
    assert list(s.a) == values


@given(st.lists(st.integers(), max_size=20))
def test_is_sorted_matches_sorted(values):
    assert is_sorted(values) == (values == sorted(values))