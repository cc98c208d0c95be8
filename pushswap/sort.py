"""Choice of sorting strategy by the number of values."""

from __future__ import annotations

from collections.abc import Iterable

from .chunk import chunk_sort
from .stack import Op, PushSwap


def is_sorted(state: PushSwap) -> bool:
    """Whether stack a already reads 1, 2, 3, ... from the top."""
    expected = list(range(1, state.a.capacity))
    return list(state.a)[: len(expected)] == expected


def sort_three_a(state: PushSwap) -> None:
    """Order the top three values of a with at most two operations."""
    first, second, third = (state.a.value_at(n) for n in (1, 2, 3))
    if first > second and second < third and third > first:
        state.sa()
    elif first > second and second < third and third < first:
        state.ra()
    elif first < second and second > third and third < first:
        state.rra()
    elif first > second and second > third and third < first:
        state.sa()
        state.rra()
    elif first < second and second > third and third > first:
        state.sa()
        state.ra()


def sort_five_a(state: PushSwap) -> None:
    """Sort exactly five ranks by parking 1 and 2 on b."""
    while len(state.a) > 3:
        if state.a.value_at(1) in (1, 2):
            state.pb()
        else:
            state.ra()
    if state.b.value_at(1) < state.b.value_at(2):
        state.sb()
    sort_three_a(state)
    state.pa()
    state.pa()


def sort_state(state: PushSwap) -> None:
    """Sort stack a of a freshly built state."""
    size = state.a.capacity
    if is_sorted(state) or size <= 1:
        return
    if size == 3:
        sort_three_a(state)
    elif size == 5:
        sort_five_a(state)
    else:
        chunk_sort(state)


def push_swap(ranks: Iterable[int]) -> list[Op]:
    """The operations that sort the given ranks, top of the stack first."""
    state = PushSwap(ranks, record=True)
    sort_state(state)
    return state.ops