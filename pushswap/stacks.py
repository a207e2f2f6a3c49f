"""The two stacks of the puzzle and the moves allowed on them."""

from collections import deque
from enum import Enum
from itertools import pairwise


class Operation(Enum):
    """A move on the stacks, valued by its printed name."""

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

    def __str__(self):
        return self.value


def is_sorted(values):
    """Tell whether ``values`` is in non-decreasing order."""
    return all(first <= second for first, second in pairwise(values))


def _require(stack, count, action):
    if len(stack) < count:
        raise IndexError(f"cannot {action}: stack holds {len(stack)} element(s)")


class Stacks:
    """Stacks ``a`` and ``b``, top first, with a record of the moves made."""

    def __init__(self, values=()):
        self.a = deque(values)
        self.b = deque()
        self.operations = []

    def __repr__(self):
        return f"Stacks(a={list(self.a)!r}, b={list(self.b)!r})"

    def _record(self, operation):
        self.operations.append(operation)

    @staticmethod
    def _push(source, destination):
        _require(source, 1, "push")
        destination.appendleft(source.popleft())

    @staticmethod
    def _swap(stack):
        stack[0], stack[1] = stack[1], stack[0]

    def push_a(self):
        """Move the top of b onto a."""
        self._push(self.b, self.a)
        self._record(Operation.PA)

    def push_b(self):
        """Move the top of a onto b."""
        self._push(self.a, self.b)
        self._record(Operation.PB)

    def swap_a(self):
        """Exchange the two top elements of a."""
        _require(self.a, 2, "swap")
        self._swap(self.a)
        self._record(Operation.SA)

    def swap_b(self):
        """Exchange the two top elements of b."""
        _require(self.b, 2, "swap")
        self._swap(self.b)
        self._record(Operation.SB)

    def swap_both(self):
        """Swap the tops of a and b in one move."""
        _require(self.a, 2, "swap")
        _require(self.b, 2, "swap")
        self._swap(self.a)
        self._swap(self.b)
        self._record(Operation.SS)

    def rotate_a(self):
        """Move the top of a to its bottom."""
        _require(self.a, 1, "rotate")
        self.a.rotate(-1)
        self._record(Operation.RA)

    def rotate_b(self):
        """Move the top of b to its bottom."""
        _require(self.b, 1, "rotate")
        self.b.rotate(-1)
        self._record(Operation.RB)

    def rotate_both(self):
        """Rotate a and b in one move."""
        _require(self.a, 1, "rotate")
        _require(self.b, 1, "rotate")
        self.a.rotate(-1)
        self.b.rotate(-1)
        self._record(Operation.RR)

    def reverse_rotate_a(self):
        """Move the bottom of a to its top."""
        _require(self.a, 1, "reverse rotate")
        self.a.rotate(1)
        self._record(Operation.RRA)

    def reverse_rotate_b(self):
        """Move the bottom of b to its top."""
        _require(self.b, 1, "reverse rotate")
        self.b.rotate(1)
        self._record(Operation.RRB)

    def reverse_rotate_both(self):
        """Reverse-rotate a and b in one move."""
        _require(self.a, 1, "reverse rotate")
        _require(self.b, 1, "reverse rotate")
        self.a.rotate(1)
        self.b.rotate(1)
        self._record(Operation.RRR)

    def is_sorted(self):
        """Tell whether a is in ascending order and b is empty."""
        return not self.b and is_sorted(self.a)