import pytest
from hypothesis import given
from hypothesis import strategies as st

from pushswap.stack import Op, PushSwap, Stack, format_ops

OP_NAMES = [op.value for op in Op]


@st.composite
def permutations(draw, max_size=8):
    n = draw(st.integers(min_value=0, max_value=max_size))
    return draw(st.permutations(list(range(1, n + 1))))


def test_stack_iterates_top_to_bottom():
    values = [5, 9, 2]
    stack = Stack(4, values)
    assert list(stack) == values
    assert len(stack) == len(values)
    assert not stack.is_full()


def test_stack_rejects_too_many_values():
    with pytest.raises(ValueError):
        Stack(1, [1, 2])


def test_value_at_and_from_bottom():
    values = [7, 8, 9]
    stack = Stack(3, values)
    assert stack.value_at(1) == values[0]
    assert stack.value_at(3) == values[-1]
    assert stack.value_from_bottom(1) == values[-1]
    assert stack.value_from_bottom(3) == values[0]
    assert stack.is_full()


@pytest.mark.parametrize("n", [0, 4])
def test_value_at_out_of_range(n):
    with pytest.raises(IndexError):
        Stack(3, [1, 2, 3]).value_at(n)
    with pytest.raises(IndexError):
        Stack(3, [1, 2, 3]).value_from_bottom(n)


def test_swap_on_short_stack_is_noop():
    single = Stack(3, [4])
    single.swap()
    assert list(single) == [4]
    empty = Stack(3)
    empty.swap()
    assert list(empty) == []


def test_push_to_full_destination_is_noop():
    src = Stack(2, [1])
    dest = Stack(1, [2])
    src.push_to(dest)
    assert list(src) == [1]
    assert list(dest) == [2]


def test_push_from_empty_is_noop():
    src = Stack(2)
    dest = Stack(2, [1])
    src.push_to(dest)
    assert list(dest) == [1]
    assert len(src) == 0


@given(permutations())
def test_swap_exchanges_top_two(values):
    stack = Stack(len(values), values)
    stack.swap()
    if len(values) >= 2:
        assert list(stack) == values[1::-1] + values[2:]
    else:
        assert list(stack) == values


@given(permutations())
def test_rotate_moves_top_to_bottom(values):
    stack = Stack(len(values), values)
    stack.rotate()
    assert list(stack) == values[1:] + values[:1]
    stack.reverse_rotate()
    assert list(stack) == values


@given(permutations())
def test_reverse_rotate_moves_bottom_to_top(values):
    stack = Stack(len(values), values)
    stack.reverse_rotate()
    assert list(stack) == values[-1:] + values[:-1]


def test_format_ops_names():
    assert format_ops([Op.SA, Op.PB, Op.RRR]) == "sa\npb\nrrr\n"
    assert format_ops([]) == ""
    assert str(Op.RRA) == "rra"


def test_push_swap_records_operations():
    state = PushSwap([2, 1, 3])
    state.pb()
    state.ra()
    state.pa()
    assert state.ops == [Op.PB, Op.RA, Op.PA]


def test_push_moves_top_between_stacks():
    values = [3, 1, 2]
    state = PushSwap(values)
    state.pb()
    state.pb()
    assert list(state.b) == values[1::-1]
    assert list(state.a) == values[2:]
    state.pa()
    assert list(state.a) == values[1:]


def test_combined_operations_act_on_both():
    state = PushSwap([1, 2, 3, 4])
    state.pb()
    state.pb()
    a_before, b_before = list(state.a), list(state.b)
    state.ss()
    assert list(state.a) == a_before[::-1]
    assert list(state.b) == b_before[::-1]
    state.rr()
    state.rrr()
    assert list(state.a) == a_before[::-1]
    assert list(state.b) == b_before[::-1]


@given(permutations(), st.lists(st.sampled_from(OP_NAMES), max_size=40))
def test_operations_keep_values_and_replay(values, names):
    state = PushSwap(values)
    for name in names:
        getattr(state, name)()
    assert sorted(list(state.a) + list(state.b)) == sorted(values)
    assert len(state.a) <= len(values)
    assert [op.value for op in state.ops] == names

    replay = PushSwap(values, record=False)
    for op in state.ops:
        getattr(replay, op.value)()
    assert list(replay.a) == list(state.a)
    assert list(replay.b) == list(state.b)


@given(permutations())
def test_push_all_then_back_restores(values):
    state = PushSwap(values)
    for _ in values:
        state.pb()
    assert len(state.a) == 0
    assert list(state.b) == values[::-1]
    for _ in values:
        state.pa()
    assert list(state.a) == values