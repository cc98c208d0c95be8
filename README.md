# pushswap

`pushswap` sorts a list of distinct integers using two stacks, `a` and `b`,
and a fixed set of operations. It prints the operations it used, one per
line, so that applying them to the input leaves stack `a` sorted in
ascending order from top to bottom and stack `b` empty.

## Operations

| Name  | Effect                                              |
|-------|-----------------------------------------------------|
| `sa`  | swap the top two elements of `a`                    |
| `sb`  | swap the top two elements of `b`                    |
| `ss`  | `sa` and `sb` together                              |
| `pa`  | move the top of `b` onto `a`                        |
| `pb`  | move the top of `a` onto `b`                        |
| `ra`  | rotate `a` up: the top element goes to the bottom   |
| `rb`  | rotate `b` up                                       |
| `rr`  | `ra` and `rb` together                              |
| `rra` | rotate `a` down: the bottom element goes to the top |
| `rrb` | rotate `b` down                                     |
| `rrr` | `rra` and `rrb` together                            |

## Installation

```
pip install .
```

## Command line

Pass the numbers as separate arguments; the first one is the top of `a`:

```
push_swap 2 1 3
```

prints

```
sa
```

An input that is already sorted, or empty, prints nothing. Every argument
must be an optional `+` or `-` followed by one or more digits, within the
32-bit signed range, and no value may appear twice. Otherwise the command
writes `Error` to standard error and exits with status 1.

## How it sorts

The numbers are first replaced by their ranks 1 to n. Three values are
sorted with at most two operations and five values by parking the two
smallest on `b`. Any other count is sorted by `pushswap.chunk.chunk_sort`,
which splits the values into three chunks by size, spreads them over the
four ends of the two stacks, and recurses until each chunk holds at most
three values.

## Library use

```python
from pushswap.parser import parse_arguments
from pushswap.sort import push_swap
from pushswap.stack import format_ops

ranks = parse_arguments(["42", "-7", "0"])
ops = push_swap(ranks)
print(format_ops(ops), end="")
```

- `pushswap.parser.parse_arguments` checks the arguments and turns them into
  ranks from 1 to n, raising `pushswap.parser.InputError` on bad input.
- `pushswap.sort.push_swap` returns the list of `pushswap.stack.Op` values
  that sorts the ranks.
- `pushswap.stack.format_ops` renders operations the way the command prints
  them, one per line.
- `pushswap.stack.PushSwap` holds both stacks (`a` and `b`, each a
  `pushswap.stack.Stack`) and has one method per operation (`sa`, `pb`,
  `rra`, ...). With `record=True` it appends each operation it performs to
  its `ops` list.

## What it does not do

The package only produces a sequence of operations. It has no command that
reads operations from standard input and checks whether they sort a given
list.

## Tests

```
pip install .[test]
pytest
```