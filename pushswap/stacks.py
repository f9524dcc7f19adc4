"""The two stacks and the eleven operations that act on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from enum import Enum
from itertools import pairwise


class Operation(str, Enum):
    """The instructions understood by the stacks, named as they are printed."""

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


def _swap(stack: deque[int]) -> None:
    stack[0], stack[1] = stack[1], stack[0]


class Stacks:
    """Stack ``a`` holding the numbers and an empty stack ``b``; index 0 is the top.

    In strict mode an operation that needs two elements raises
    :class:`IndexError` when they are missing. In lenient mode such an
    operation does nothing. Every operation that is carried out is appended
    to :attr:`operations`.
    """

    def __init__(self, values: Iterable[int] = (), lenient: bool = False) -> None:
        self.a: deque[int] = deque(values)
        self.b: deque[int] = deque()
        self.lenient = lenient
        self.operations: list[Operation] = []

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)}, b={list(self.b)})"

    def _ready(self, operation: Operation, *stacks: deque[int]) -> bool:
        if all(len(stack) >= 2 for stack in stacks):
            return True
        if self.lenient:
            return False
        raise IndexError(f"{operation.value}: not enough elements")

    def _swap_op(self, operation: Operation, *stacks: deque[int]) -> None:
        if self._ready(operation, *stacks):
            for stack in stacks:
                _swap(stack)
            self.operations.append(operation)

    def _rotate_op(self, operation: Operation, step: int, *stacks: deque[int]) -> None:
        if self._ready(operation, *stacks):
            for stack in stacks:
                stack.rotate(step)
            self.operations.append(operation)

    def sa(self) -> None:
        """Swap the two top elements of ``a``."""
        self._swap_op(Operation.SA, self.a)

    def sb(self) -> None:
        """Swap the two top elements of ``b``."""
        self._swap_op(Operation.SB, self.b)

    def ss(self) -> None:
        """Swap the two top elements of both stacks."""
        self._swap_op(Operation.SS, self.a, self.b)

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``; nothing happens if ``b`` is empty."""
        if self.b:
            self.a.appendleft(self.b.popleft())
            self.operations.append(Operation.PA)

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``; nothing happens if ``a`` is empty."""
        if self.a:
            self.b.appendleft(self.a.popleft())
            self.operations.append(Operation.PB)

    def ra(self) -> None:
        """Move the top of ``a`` to its bottom."""
        self._rotate_op(Operation.RA, -1, self.a)

    def rb(self) -> None:
        """Move the top of ``b`` to its bottom."""
        self._rotate_op(Operation.RB, -1, self.b)

    def rr(self) -> None:
        """Rotate both stacks upwards."""
        self._rotate_op(Operation.RR, -1, self.a, self.b)

    def rra(self) -> None:
        """Move the bottom of ``a`` to its top."""
        self._rotate_op(Operation.RRA, 1, self.a)

    def rrb(self) -> None:
        """Move the bottom of ``b`` to its top."""
        self._rotate_op(Operation.RRB, 1, self.b)

    def rrr(self) -> None:
        """Rotate both stacks downwards."""
        self._rotate_op(Operation.RRR, 1, self.a, self.b)

    def apply(self, operation: Operation | str) -> None:
        """Carry out an operation given as an :class:`Operation` or its name."""
        getattr(self, Operation(operation).value)()

    def is_sorted(self) -> bool:
        """Tell whether ``a`` is non-empty and ascending from top to bottom."""
        return bool(self.a) and all(upper <= lower for upper, lower in pairwise(self.a))