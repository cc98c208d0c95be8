"""The two stacks of the puzzle and the eleven operations on them."""

from __future__ import annotations

from collections import deque
from enum import Enum
from typing import Iterable, Iterator


class Op(Enum):
    """An operation of the puzzle, valued by its printed name."""

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


class Stack:
    """A bounded stack; iteration runs from the top to the bottom."""

    def __init__(self, capacity: int, values: Iterable[int] = ()) -> None:
        self.capacity = capacity
        self._items: deque[int] = deque(values)
        if len(self._items) > capacity:
            raise ValueError(
                f"{len(self._items)} values do not fit in a stack of {capacity}"
            )

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Stack({self.capacity}, {list(self._items)!r})"

    def is_full(self) -> bool:
        """Whether the stack holds as many values as its capacity."""
        return len(self._items) == self.capacity

    def value_at(self, n: int) -> int:
        """The n-th value counted from the top, starting at 1."""
        if not 1 <= n <= len(self._items):
            raise IndexError(f"no value at position {n} from the top")
        return self._items[n - 1]

    def value_from_bottom(self, n: int) -> int:
        """The n-th value counted from the bottom, starting at 1."""
        if not 1 <= n <= len(self._items):
            raise IndexError(f"no value at position {n} from the bottom")
        return self._items[-n]

    def swap(self) -> None:
        """Exchange the two top values; fewer than two values is a no-op."""
        if len(self._items) >= 2:
            self._items[0], self._items[1] = self._items[1], self._items[0]

    def rotate(self) -> None:
        """Move the top value to the bottom."""
        self._items.rotate(-1)

    def reverse_rotate(self) -> None:
        """Move the bottom value to the top."""
        self._items.rotate(1)

    def push_to(self, dest: Stack) -> None:
        """Move the top value onto dest, unless this is empty or dest is full."""
        if not self._items or dest.is_full():
            return
        dest._items.appendleft(self._items.popleft())


class PushSwap:
    """Stacks a and b, with a record of the operations applied to them."""

    def __init__(self, values: Iterable[int], record: bool = True) -> None:
        items = list(values)
        self.a = Stack(len(items), items)
        self.b = Stack(len(items))
        self.record = record
        self.ops: list[Op] = []

    def _done(self, op: Op) -> None:
        if self.record:
            self.ops.append(op)

    def sa(self) -> None:
        self.a.swap()
        self._done(Op.SA)

    def sb(self) -> None:
        self.b.swap()
        self._done(Op.SB)

    def ss(self) -> None:
        self.a.swap()
        self.b.swap()
        self._done(Op.SS)

    def pa(self) -> None:
        self.b.push_to(self.a)
        self._done(Op.PA)

    def pb(self) -> None:
        self.a.push_to(self.b)
        self._done(Op.PB)

    def ra(self) -> None:
        self.a.rotate()
        self._done(Op.RA)

    def rb(self) -> None:
        self.b.rotate()
        self._done(Op.RB)

    def rr(self) -> None:
        self.a.rotate()
        self.b.rotate()
        self._done(Op.RR)

    def rra(self) -> None:
        self.a.reverse_rotate()
        self._done(Op.RRA)

    def rrb(self) -> None:
        self.b.reverse_rotate()
        self._done(Op.RRB)

    def rrr(self) -> None:
        self.a.reverse_rotate()
        self.b.reverse_rotate()
        self._done(Op.RRR)


def format_ops(ops: Iterable[Op]) -> str:
    """Render operations one per line, each line ending in a newline."""
    return "".join(f"{op.value}\n" for op in ops)