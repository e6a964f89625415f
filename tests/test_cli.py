import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from pushswap.cli import main
from pushswap.sorting import sort_operations
from pushswap.stacks import Stacks


def _ops(output):
    return output.splitlines()


def test_output_matches_sort_operations(capsys):
    values = [5, 3, 9, 1, 7]
    assert main([str(v) for v in values]) == 0
    out = capsys.readouterr().out
    assert out == "".join(op.value + "\n" for op in sort_operations(values))


def test_sorted_input_prints_nothing(capsys):
    assert main(["1", "2", "3"]) == 0
    assert capsys.readouterr().out == ""


def test_single_value_prints_nothing(capsys):
    assert main(["42"]) == 0
    assert capsys.readouterr().out == ""


@pytest.mark.parametrize("argv", [[], ["a"], ["1", "2147483648"], ["+1", "2"]])
def test_argument_errors(capsys, argv):
    assert main(argv) == 1
    assert capsys.readouterr().out == "Error\n"


def test_duplicates_reported_on_stderr(capsys):
    assert main(["3", "1", "3"]) == 0
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""


@settings(max_examples=40, deadline=None)
@given(st.lists(st.integers(-500, 500), min_size=1, max_size=30, unique=True))
def test_output_sorts(values):
    import io
    import contextlib

    buffer = io.StringIO()
    with contextlib.redirect_stdout(buffer):
        assert main([str(v) for v in values]) == 0
    stacks = Stacks(values)
    stacks.run(_ops(buffer.getvalue()))
    assert list(stacks.a) == sorted(values)
    assert not stacks.b