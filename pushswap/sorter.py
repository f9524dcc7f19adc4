"""Finding a short list of stack operations that sorts the numbers."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Iterable, Sequence

from .parsing import InputError, parse_arguments
from .stacks import Operation, Stacks

_SMALL_WINDOW = 15
_LARGE_WINDOW = 25
_SMALL_INPUT_LIMIT = 100


def quick_sort(values: Iterable[int]) -> list[int]:
    """Return the values in ascending order, partitioning around the first element."""
    result: list[int] = []
    # Each entry is either a segment still to sort or a pivot ready to emit.
    pending: list[tuple[bool, list[int] | int]] = [(True, list(values))]
    while pending:
        is_segment, item = pending.pop()
        if not is_segment:
            result.append(item)
            continue
        if len(item) <= 1:
            result.extend(item)
            continue
        pivot, *rest = item
        lower = [value for value in rest if value <= pivot]
        higher = [value for value in rest if value > pivot]
        pending.append((True, higher))
        pending.append((False, pivot))
        pending.append((True, lower))
    return result


def position_of(stack: Sequence[int] | deque[int], value: int) -> int:
    """Return the distance of ``value`` from the top of ``stack``, or -1 if absent."""
    return next((index for index, item in enumerate(stack) if item == value), -1)


def move_cost(stack: Sequence[int] | deque[int], position: int) -> int:
    """Count the operations needed to bring ``position`` to the top and push it."""
    size = len(stack)
    if position == 1:
        return 2
    if position > size // 2:
        return size - position + 1
    return position + 1


def _bring_to_top(stacks: Stacks, position: int) -> None:
    size = len(stacks.a)
    if position <= size // 2:
        for _ in range(position):
            stacks.ra()
    else:
        for _ in range(size - position):
            stacks.rra()


def _push_value(stacks: Stacks, value: int) -> None:
    _bring_to_top(stacks, position_of(stacks.a, value))
    stacks.pb()


def _b_top_smaller(stacks: Stacks) -> bool:
    b = stacks.b
    return len(b) >= 2 and b[0] < b[1]


def sort_three(stacks: Stacks) -> None:
    """Sort a stack ``a`` of exactly three numbers, combining moves with ``b`` when useful."""
    if len(stacks.a) != 3:
        raise ValueError("sort_three needs exactly three numbers in stack a")
    first, second, third = stacks.a
    while not stacks.is_sorted():
        if first > second and first > third:
            if _b_top_smaller(stacks):
                stacks.rr()
            else:
                stacks.ra()
        if second < first < third:
            if _b_top_smaller(stacks):
                stacks.ss()
            else:
                stacks.sa()
        first, second, third = stacks.a
        if first < second and second > third and first != third:
            stacks.rra()


def sort_small(stacks: Stacks, ranked: Sequence[int]) -> None:
    """Sort four or five numbers; ``ranked`` holds them in ascending order."""
    count = len(ranked)
    smallest, runner_up = ranked[0], ranked[1]
    a = stacks.a
    if count == 5 and move_cost(a, position_of(a, smallest)) > move_cost(
        a, position_of(a, runner_up)
    ):
        _push_value(stacks, runner_up)
    else:
        _push_value(stacks, smallest)
        if len(a) > 3:
            _push_value(stacks, runner_up)
    if count == 4:
        sort_three(stacks)
        stacks.pa()
        return
    if len(a) > 3:
        _push_value(stacks, smallest)
    sort_three(stacks)
    if stacks.b[0] < stacks.b[1]:
        stacks.sb()
    stacks.pa()
    stacks.pa()


def sort_large(stacks: Stacks, ranked: Sequence[int]) -> None:
    """Sort many numbers by pushing them to ``b`` in a sliding window of ranks, then back."""
    rank_of = {value: rank for rank, value in enumerate(ranked)}
    window = _SMALL_WINDOW if len(ranked) - 1 <= _SMALL_INPUT_LIMIT else _LARGE_WINDOW
    low = 1
    while stacks.a:
        position, rank = next(
            (index, rank_of[value])
            for index, value in enumerate(stacks.a)
            if rank_of[value] <= window
        )
        _bring_to_top(stacks, position)
        stacks.pb()
        if rank < low and len(stacks.b) >= 2:
            if stacks.a and rank_of[stacks.a[0]] > window + 1:
                stacks.rr()
            else:
                stacks.rb()
        low += 1
        window += 1
    push_back(stacks, ranked)


def push_back(stacks: Stacks, ranked: Sequence[int]) -> None:
    """Move every number from ``b`` back to ``a``, largest first."""
    b = stacks.b
    for rank, target in reversed(list(enumerate(ranked))):
        if not b:
            break
        position = position_of(b, target)
        if position < 0:
            raise ValueError(f"{target} is not in stack b")
        if position <= rank // 2:
            while b[0] != target:
                if b[1] == target:
                    stacks.sb()
                else:
                    stacks.rb()
        else:
            while b[0] != target:
                stacks.rrb()
        stacks.pa()


def solve(values: Iterable[int]) -> list[Operation]:
    """Return the operations that sort ``values``; none if they are already sorted."""
    stacks = Stacks(values)
    count = len(stacks.a)
    if count < 2 or stacks.is_sorted():
        return []
    if count == 2:
        stacks.sa()
    elif count == 3:
        sort_three(stacks)
    elif count <= 5:
        sort_small(stacks, quick_sort(stacks.a))
    else:
        sort_large(stacks, quick_sort(stacks.a))
    return list(stacks.operations)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the operations that sort the numbers given on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        numbers = parse_arguments(args)
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    sys.stdout.write("".join(f"{operation.value}\n" for operation in solve(numbers)))
    return 0


if __name__ == "__main__":
    sys.exit(main())