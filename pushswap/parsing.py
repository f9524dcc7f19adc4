"""Turning command-line arguments into a validated list of integers."""

from __future__ import annotations

import re
from collections.abc import Iterable

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_LEADING_NUMBER = re.compile(r"([+-]?)([0-9]*)")


class InputError(ValueError):
    """Raised when the arguments do not describe a valid list of integers."""


def to_int(text: str) -> int:
    """Read the leading signed decimal number of ``text``.

    Parsing stops at the first character that is not a digit; text with no
    digits reads as 0. A value outside the 32-bit signed range raises
    :class:`InputError`.
    """
    match = _LEADING_NUMBER.match(text)
    sign, digits = match.group(1), match.group(2)
    value = int(digits) if digits else 0
    if sign == "-":
        value = -value
    if not INT_MIN <= value <= INT_MAX:
        raise InputError(f"number out of range: {text!r}")
    return value


def is_number(text: str) -> bool:
    """Tell whether ``text`` is an optional sign followed only by digits.

    A sign must be followed by at least one digit.
    """
    rest = text
    if rest[:1] in ("+", "-"):
        rest = rest[1:]
        if not rest[:1].isascii() or not rest[:1].isdigit():
            return False
    return all("0" <= char <= "9" for char in rest)


def join_arguments(args: Iterable[str]) -> str:
    """Concatenate the arguments, each one followed by a single space."""
    return "".join(f"{arg} " for arg in args)


def split_words(text: str, separator: str) -> list[str]:
    """Split ``text`` on ``separator``, dropping empty pieces."""
    return [word for word in text.split(separator) if word]


def validate_numbers(words: Iterable[str]) -> list[int]:
    """Convert the words to integers, rejecting bad, out-of-range or repeated ones."""
    numbers: list[int] = []
    seen: set[int] = set()
    for word in words:
        if not is_number(word):
            raise InputError(f"not a number: {word!r}")
        value = to_int(word)
        if value in seen:
            raise InputError(f"duplicate number: {word!r}")
        seen.add(value)
        numbers.append(value)
    return numbers


def parse_arguments(args: Iterable[str]) -> list[int]:
    """Parse command-line arguments, which may hold several space-separated numbers each."""
    words = split_words(join_arguments(args), " ")
    if not words:
        raise InputError("no numbers given")
    return validate_numbers(words)