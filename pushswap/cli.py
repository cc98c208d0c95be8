"""Command line: print the operations that sort the given integers."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .parser import InputError, parse_arguments
from .sort import push_swap
from .stack import format_ops


def main(argv: Sequence[str] | None = None) -> int:
    """Sort the integer arguments and print one operation per line."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        ranks = parse_arguments(args)
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    sys.stdout.write(format_ops(push_swap(ranks)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())