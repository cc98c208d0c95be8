"""Validation of command-line numbers and their conversion to ranks."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

_INT_MAX = "2147483647"
_INT_MIN_ABS = "2147483648"
_WHITESPACE = "\t\n\v\f\r "


class InputError(ValueError):
    """The arguments cannot be used as a stack of distinct integers."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def _digit_count(text: str) -> int:
    """Digits in an optionally signed decimal, or 0 if text is not one."""
    if not text:
        return 0
    body = text[1:] if text[0] in "+-" else text
    if not body or not all("0" <= ch <= "9" for ch in body):
        return 0
    return len(body)


def is_valid_number(text: str) -> bool:
    """Whether text is an optional sign followed by one or more digits."""
    return _digit_count(text) > 0


def in_range(text: str) -> bool:
    """Whether text is a valid number that fits a signed 32-bit integer."""
    count = _digit_count(text)
    if count == 0 or count > 10:
        return False
    if count == 10:
        limit = _INT_MIN_ABS if text.startswith("-") else _INT_MAX
        if text[-10:] > limit:
            return False
    return True


def to_int(text: str) -> int:
    """Read a leading decimal integer, ignoring anything after its digits."""
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest.startswith("+") and not rest.startswith("+-"):
        rest = rest[1:]
    if rest.startswith("-"):
        sign = -1
        rest = rest[1:]
    result = 0
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        result = result * 10 + (ord(ch) - ord("0"))
    return sign * result


def check_duplicates(numbers: Iterable[int]) -> None:
    """Raise InputError if any number occurs twice."""
    seen: set[int] = set()
    for number in numbers:
        if number in seen:
            raise InputError()
        seen.add(number)


def rank(numbers: Sequence[int]) -> list[int]:
    """Replace each number by how many numbers are at most it."""
    return [sum(1 for other in numbers if other <= number) for number in numbers]


def parse_arguments(args: Iterable[str]) -> list[int]:
    """Turn argument strings into ranks 1..n, top of the stack first."""
    numbers = []
    for arg in args:
        if not in_range(arg):
            raise InputError()
        numbers.append(to_int(arg))
    check_duplicates(numbers)
    return rank(numbers)