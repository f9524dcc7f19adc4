"""Checking that a list of instructions sorts the given numbers."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from typing import TextIO

from .parsing import InputError, parse_arguments
from .stacks import Operation, Stacks


def read_instructions(stream: TextIO) -> list[str]:
    """Read every line of ``stream``, keeping each line's terminating newline."""
    return list(stream)


def validate_instructions(lines: Iterable[str]) -> list[Operation]:
    """Turn instruction lines into operations.

    Each line must be an operation name followed by a newline; anything else
    raises :class:`InputError`.
    """
    operations: list[Operation] = []
    for line in lines:
        name, newline, rest = line.partition("\n")
        if not newline or rest:
            raise InputError(f"bad instruction: {line!r}")
        try:
            operations.append(Operation(name))
        except ValueError:
            raise InputError(f"bad instruction: {line!r}") from None
    return operations


def run_checker(values: Iterable[int], lines: Iterable[str]) -> tuple[str, int]:
    """Apply the instruction lines to ``values`` and return the verdict and exit code.

    The verdict is ``"OK"`` when stack ``a`` ends up sorted and stack ``b``
    empty, ``"KO"`` otherwise. With no instructions at all, an unsorted input
    gives exit code 1; in every other case the exit code is 0. Bad lines
    raise :class:`InputError`.
    """
    operations = validate_instructions(lines)
    stacks = Stacks(values, lenient=True)
    if not operations:
        return ("OK", 0) if stacks.is_sorted() else ("KO", 1)
    for operation in operations:
        stacks.apply(operation)
    verdict = "OK" if stacks.is_sorted() and not stacks.b else "KO"
    return verdict, 0


def main(argv: Sequence[str] | None = None, stdin: TextIO | None = None) -> int:
    """Read instructions from standard input and report whether they sort the numbers."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    stream = sys.stdin if stdin is None else stdin
    try:
        numbers = parse_arguments(args)
        verdict, code = run_checker(numbers, read_instructions(stream))
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    sys.stdout.write(f"{verdict}\n")
    return code


if __name__ == "__main__":
    sys.exit(main())