# pushswap

Sort a list of integers with two stacks, **a** and **b**, using only a
fixed set of operations, and check whether a list of operations sorts
a given list.

## Operations

| Name  | Effect                                      |
|-------|---------------------------------------------|
| `sa`  | swap the top two elements of a              |
| `sb`  | swap the top two elements of b              |
| `ss`  | `sa` and `sb` together                      |
| `pa`  | move the top of b onto a                    |
| `pb`  | move the top of a onto b                    |
| `ra`  | rotate a upwards (top goes to the bottom)   |
| `rb`  | rotate b upwards                            |
| `rr`  | `ra` and `rb` together                      |
| `rra` | rotate a downwards (bottom goes to the top) |
| `rrb` | rotate b downwards                          |
| `rrr` | `rra` and `rrb` together                    |

## Installing

```
pip install .
```

## Sorting

Give the numbers as arguments. They can be spread over several
arguments or given in one argument separated by spaces. The first
number is the top of stack a.

```
push-swap 3 2 1
push-swap "5 1 4 2 3"
```

The operations that sort the numbers are printed one per line. Nothing
is printed when the numbers are already sorted or when there is only
one. With no arguments at all the command does nothing and exits with
status 0. When an argument is not an integer (an optional `+` or `-`
followed by digits), is outside the 32-bit signed range, or is
repeated, `Error` is written to standard error and the exit status
is 1.

The same command is available as `python -m pushswap.sorter`.

## Checking

The checker takes the same numbers as arguments and reads operations
from standard input, one per line; every line, the last one included,
must end with a newline. It prints `OK` when the operations leave
stack a sorted and stack b empty, and `KO` otherwise. An operation that
needs two elements on a stack that holds fewer does nothing.

An unknown operation, a line without its newline, or bad numbers make
it write `Error` to standard error and exit with status 1. When no
operations are given and the numbers are not already sorted, it prints
`KO` and exits with status 1; otherwise the exit status is 0.

```
push-swap 3 2 1 | push-swap-checker 3 2 1
```

The same command is available as `python -m pushswap.checker`.

## From Python

```python
from pushswap.sorter import solve
from pushswap.checker import run_checker
from pushswap.stacks import Stacks

operations = solve([3, 2, 1])
print([operation.value for operation in operations])

print(run_checker([2, 1, 3], ["sa\n"]))   # ('OK', 0)

stacks = Stacks([2, 1, 3])
stacks.sa()
print(stacks.is_sorted())                 # True
print(stacks.operations)
```

- `pushswap.sorter.solve(values)` returns the `Operation` members that
  sort the values, or an empty list when they are already sorted.
- `pushswap.stacks.Stacks(values, lenient=False)` holds the two stacks
  (`a` and `b`, index 0 on top) with one method per operation, plus
  `apply(operation)` taking an `Operation` or its name, and
  `is_sorted()`. In strict mode an operation that needs two elements
  raises `IndexError` when they are missing; with `lenient=True` it
  does nothing. Every operation carried out is recorded in
  `operations`.
- `pushswap.stacks.Operation` is a string enum of the eleven operation
  names.
- `pushswap.checker.run_checker(values, lines)` returns the verdict and
  exit code; `validate_instructions(lines)` turns lines into
  operations.
- `pushswap.parsing.parse_arguments(args)` turns command-line arguments
  into integers and raises `pushswap.parsing.InputError` on bad input.

## What it does not do

The package prints operation lists and verdicts only: it does not show
the stacks step by step, and the sorter aims for short operation lists
without promising the shortest one.

## Tests

```
pip install .[test]
pytest
```