# pushswap

Sort a list of integers using two stacks, `a` and `b`, and a small set of
instructions, and verify instruction lists against a starting stack.

## Instructions

| Name  | Effect                                          |
|-------|-------------------------------------------------|
| `sa`  | swap the first two elements of `a`              |
| `sb`  | swap the first two elements of `b`              |
| `ss`  | `sa` and `sb` together                          |
| `pa`  | move the top of `b` onto `a`                    |
| `pb`  | move the top of `a` onto `b`                    |
| `ra`  | rotate `a` up: the first element becomes last   |
| `rb`  | rotate `b` up                                   |
| `rr`  | `ra` and `rb` together                          |
| `rra` | rotate `a` down: the last element becomes first |
| `rrb` | rotate `b` down                                 |
| `rrr` | `rra` and `rrb` together                        |

An instruction that cannot act (swapping or rotating a stack with fewer than
two elements, pushing from an empty stack) leaves the stacks unchanged.

## Installation

```
pip install .
```

## Commands

### push_swap

Prints, one per line, instructions that sort the given integers in
ascending order, with the first argument at the top of stack `a`.

```
push_swap 3 2 1 5 4
```

Each argument must be an optional `-` followed by digits, within the 32-bit
signed range. A malformed or out-of-range argument, or no argument at all,
prints `Error` on standard output and exits with status 1. Duplicate values
print `Error` on standard error. Input that is already sorted produces no
output.

### checker

Reads instructions from standard input, one per line, applies them to the
stack given on the command line, and prints `OK` if `a` ends sorted, `KO`
otherwise.

```
push_swap 3 2 1 5 4 | checker 3 2 1 5 4
```

Invalid arguments or duplicate values print `Error` and exit with status 1.
A line that is not one of the instructions prints `Error`. The checker does
not accept `ss`. If the arguments are already sorted, `OK` is printed without
reading standard input. Reading stops at end of input.

## Library use

```python
from pushswap.sorting import sort_operations
from pushswap.stacks import Stacks

ops = sort_operations([3, 2, 1, 5, 4])
stacks = Stacks([3, 2, 1, 5, 4])
stacks.run(ops)
assert stacks.is_sorted()
```

- `pushswap.stacks`: `Operation` (an enum of the eleven instructions),
  `Stacks` with `apply`, `run` and `is_sorted`, and a plain `is_sorted`
  function for any sequence.
- `pushswap.sorting`: `sort_operations(values)` returns the instruction list
  and raises `InputError` on duplicates; the helpers `find_target`,
  `choose_rotation`, `move_cost`, `best_candidate` and `is_rotated_sorted`,
  with the `Rotation` enum and the `Candidate` dataclass, expose the steps of
  the strategy.
- `pushswap.checker`: `check(values, lines)` applies instruction lines to
  `values` and returns whether `a` ends sorted; it raises `InputError` for
  duplicate values or an unknown instruction.
- `pushswap.parsing`: `parse_arguments`, `checked_int`, `atoi`,
  `has_duplicates` and the `InputError` exception.
- `pushswap.linereader`: `read_lines(stream, chunk_size)` yields the lines of
  a text stream, reading it in fixed-size chunks.
- `pushswap.messages`: `format_message` and `print_message`, a small
  printf-style formatter supporting `%c %d %i %s %u %x %X %p`.

## Tests

```
pip install .[test]
pytest
```