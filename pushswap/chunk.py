"""Recursive chunk sort over the four ends of the two stacks."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from .stack import PushSwap, Stack


class Loc(Enum):
    """One of the four ends a chunk of values can sit at."""

    TOP_A = "top_a"
    BOTTOM_A = "bottom_a"
    TOP_B = "top_b"
    BOTTOM_B = "bottom_b"

    @property
    def on_a(self) -> bool:
        return self in (Loc.TOP_A, Loc.BOTTOM_A)

    @property
    def is_top(self) -> bool:
        return self in (Loc.TOP_A, Loc.TOP_B)


@dataclass
class Chunk:
    """A run of `size` values lying at one end of a stack."""

    loc: Loc
    size: int


@dataclass
class Split:
    """The three chunks a chunk is divided into, by value."""

    low: Chunk
    mid: Chunk
    high: Chunk


_Move = Callable[[PushSwap], None]

_MOVES: dict[tuple[Loc, Loc], tuple[_Move, ...]] = {
    (Loc.TOP_A, Loc.TOP_B): (PushSwap.pb,),
    (Loc.TOP_A, Loc.BOTTOM_A): (PushSwap.ra,),
    (Loc.TOP_A, Loc.BOTTOM_B): (PushSwap.pb, PushSwap.rb),
    (Loc.TOP_B, Loc.TOP_A): (PushSwap.pa,),
    (Loc.TOP_B, Loc.BOTTOM_B): (PushSwap.rb,),
    (Loc.TOP_B, Loc.BOTTOM_A): (PushSwap.pa, PushSwap.ra),
    (Loc.BOTTOM_A, Loc.TOP_A): (PushSwap.rra,),
    (Loc.BOTTOM_A, Loc.TOP_B): (PushSwap.rra, PushSwap.pb),
    (Loc.BOTTOM_A, Loc.BOTTOM_B): (PushSwap.rra, PushSwap.pb, PushSwap.rb),
    (Loc.BOTTOM_B, Loc.TOP_B): (PushSwap.rrb,),
    (Loc.BOTTOM_B, Loc.TOP_A): (PushSwap.rrb, PushSwap.pa),
    (Loc.BOTTOM_B, Loc.BOTTOM_A): (PushSwap.rrb, PushSwap.pa, PushSwap.ra),
}

_SPLIT_LOCATIONS: dict[Loc, tuple[Loc, Loc, Loc]] = {
    Loc.TOP_A: (Loc.BOTTOM_B, Loc.TOP_B, Loc.BOTTOM_A),
    Loc.BOTTOM_A: (Loc.BOTTOM_B, Loc.TOP_B, Loc.TOP_A),
    Loc.TOP_B: (Loc.BOTTOM_B, Loc.BOTTOM_A, Loc.TOP_A),
    Loc.BOTTOM_B: (Loc.TOP_B, Loc.BOTTOM_A, Loc.TOP_A),
}


def stack_for(state: PushSwap, loc: Loc) -> Stack:
    """The stack that holds the given end."""
    return state.a if loc.on_a else state.b


def chunk_value(state: PushSwap, chunk: Chunk, n: int) -> int:
    """The n-th value of the chunk counted from its end, starting at 1."""
    stack = stack_for(state, chunk.loc)
    return stack.value_at(n) if chunk.loc.is_top else stack.value_from_bottom(n)


def chunk_max(state: PushSwap, chunk: Chunk) -> int:
    """The largest value in the chunk, or 0 for an empty chunk."""
    return max(
        (chunk_value(state, chunk, n) for n in range(1, chunk.size + 1)),
        default=0,
    )


def split_locations(loc: Loc) -> tuple[Loc, Loc, Loc]:
    """Where the low, middle and high thirds of a chunk at loc are sent."""
    return _SPLIT_LOCATIONS[loc]


def pivots(loc: Loc, size: int) -> tuple[int, int]:
    """The two pivot distances from the chunk maximum used to split it."""
    pivot_2 = size // 3
    pivot_1 = 2 * size // 3 if loc.on_a else size // 2
    if loc.on_a and size < 15:
        pivot_1 = size
    if loc is Loc.BOTTOM_B and size < 8:
        pivot_2 = size // 2
    return pivot_1, pivot_2


def move(state: PushSwap, source: Loc, dest: Loc) -> None:
    """Move one value from the source end to the dest end."""
    for op in _MOVES.get((source, dest), ()):
        op(state)


def chunk_split(state: PushSwap, chunk: Chunk) -> Split:
    """Distribute every value of the chunk into three chunks by size."""
    low_loc, mid_loc, high_loc = split_locations(chunk.loc)
    split = Split(Chunk(low_loc, 0), Chunk(mid_loc, 0), Chunk(high_loc, 0))
    pivot_1, pivot_2 = pivots(chunk.loc, chunk.size)
    largest = chunk_max(state, chunk)
    for _ in range(chunk.size):
        value = chunk_value(state, chunk, 1)
        if value > largest - pivot_2:
            target = split.high
        elif value > largest - pivot_1:
            target = split.mid
        else:
            target = split.low
        move(state, chunk.loc, target.loc)
        target.size += 1
    chunk.size = 0
    return split


def sort_one(state: PushSwap, chunk: Chunk) -> None:
    """Bring a one-value chunk to the top of a."""
    if chunk.loc is not Loc.TOP_A:
        move(state, chunk.loc, Loc.TOP_A)
    chunk.size -= 1


def sort_two(state: PushSwap, chunk: Chunk) -> None:
    """Bring a two-value chunk to the top of a in ascending order."""
    if chunk.loc is not Loc.TOP_A:
        move(state, chunk.loc, Loc.TOP_A)
        move(state, chunk.loc, Loc.TOP_A)
    if state.a.value_at(1) > state.a.value_at(2):
        state.sa()
    chunk.size -= 2


def _three_top_a(state: PushSwap, stack: Stack, largest: int) -> Loc:
    if stack.value_at(1) == largest:
        state.sa()
        state.ra()
        state.sa()
        state.rra()
    elif stack.value_at(2) == largest:
        state.ra()
        state.sa()
        state.rra()
    return Loc.TOP_A


def _three_bottom_a(state: PushSwap, stack: Stack, largest: int) -> Loc:
    state.rra()
    state.rra()
    if stack.value_at(1) == largest:
        state.sa()
        state.rra()
    elif stack.value_at(2) == largest:
        state.rra()
    else:
        state.pb()
        state.rra()
        state.sa()
        state.pa()
    return Loc.TOP_A


def _three_top_b(state: PushSwap, stack: Stack, largest: int) -> Loc:
    state.pa()
    if stack.value_at(1) == largest:
        state.pa()
        state.sa()
    elif stack.value_at(2) == largest:
        state.sb()
        state.pa()
        state.sa()
    else:
        state.pa()
    state.pa()
    return Loc.TOP_A


def _three_bottom_b(state: PushSwap, stack: Stack, largest: int) -> Loc:
    state.rrb()
    state.rrb()
    if stack.value_at(1) == largest:
        state.pa()
        state.rrb()
    elif stack.value_at(2) == largest:
        state.sb()
        state.pa()
        state.rrb()
    else:
        state.rrb()
        state.pa()
    return Loc.TOP_B


_THREE_HANDLERS = {
    Loc.TOP_A: _three_top_a,
    Loc.BOTTOM_A: _three_bottom_a,
    Loc.TOP_B: _three_top_b,
    Loc.BOTTOM_B: _three_bottom_b,
}


def sort_three(state: PushSwap, chunk: Chunk) -> None:
    """Bring a three-value chunk to the top of a in ascending order."""
    stack = stack_for(state, chunk.loc)
    largest = chunk_max(state, chunk)
    chunk.loc = _THREE_HANDLERS[chunk.loc](state, stack, largest)
    chunk.size -= 1
    sort_two(state, chunk)


_SMALL_SORTS = {1: sort_one, 2: sort_two, 3: sort_three}


def _sort_chunk(state: PushSwap, chunk: Chunk) -> None:
    if chunk.size <= 3:
        handler = _SMALL_SORTS.get(chunk.size)
        if handler is not None:
            handler(state, chunk)
        return
    split = chunk_split(state, chunk)
    for part in (split.high, split.mid, split.low):
        _sort_chunk(state, part)


def chunk_sort(state: PushSwap) -> None:
    """Sort the whole of stack a by recursive three-way splitting."""
    _sort_chunk(state, Chunk(Loc.TOP_A, state.a.capacity))