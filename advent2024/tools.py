"""Small text and list helpers shared by the puzzle solutions."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from os import PathLike

_ASCII_DIGITS = frozenset("0123456789")
_ASCII_LETTERS = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz")
_BASE_DIGITS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _leading_int(text: str) -> int | None:
    """Parse the integer at the start of ``text``, ignoring whatever follows it."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else None


def split_string(text: str, delimiter: str) -> list[str]:
    """Split ``text`` on every occurrence of ``delimiter``, keeping empty fields."""
    if not delimiter:
        raise ValueError("delimiter must not be empty")
    return text.split(delimiter)


def is_string_digits(text: str) -> bool:
    """Return True if every character of ``text`` is an ASCII digit."""
    return all(ch in _ASCII_DIGITS for ch in text)


def convert_int_to_base_n(num: int, base: int) -> str:
    """Write a non-negative integer in the given base (2 to 36), upper-case digits."""
    if not 2 <= base <= 36:
        raise ValueError(f"invalid base: {base}")
    if num < 0:
        raise ValueError(f"negative numbers are not supported: {num}")
    if num == 0:
        return "0"
    digits = []
    while num > 0:
        num, remainder = divmod(num, base)
        digits.append(_BASE_DIGITS[remainder])
    return "".join(reversed(digits))


def get_integers_from_string(text: str) -> list[int]:
    """Return the integers that start the whitespace-separated tokens of ``text``."""
    return [value for token in text.split() if (value := _leading_int(token)) is not None]


def read_text_file(path: str | PathLike[str]) -> list[str]:
    """Read a text file and return its lines without line terminators."""
    with open(path, encoding="utf-8") as handle:
        content = handle.read()
    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def strings_to_integers(strings: Iterable[str]) -> list[int]:
    """Convert strings to integers after removing spaces; blank strings are skipped."""
    result = []
    for text in strings:
        compact = text.replace(" ", "")
        if not compact:
            continue
        value = _leading_int(compact)
        if value is None:
            raise ValueError(f"not an integer: {text!r}")
        result.append(value)
    return result


def combine_integers_in_string(text: str) -> int:
    """Join the integers found in ``text`` into one number, digit strings end to end."""
    joined = "".join(str(value) for value in get_integers_from_string(text))
    value = _leading_int(joined)
    if value is None:
        raise ValueError(f"no integers in {text!r}")
    return value


def remove_nonalpha_characters(text: str) -> str:
    """Keep only the ASCII letters of ``text``."""
    return "".join(ch for ch in text if ch in _ASCII_LETTERS)


def remove_nonalphanumeric_characters(text: str) -> str:
    """Keep only the ASCII letters and digits of ``text``."""
    return "".join(ch for ch in text if ch in _ASCII_LETTERS or ch in _ASCII_DIGITS)


def _combine_2d(
    first: Sequence[Sequence[int]], second: Sequence[Sequence[int]], operation
) -> list[list[int]]:
    if len(first) != len(second):
        raise ValueError(f"vector sizes do not match: {len(first)} != {len(second)}")
    return [
        [operation(a, b) for a, b in zip(row_a, row_b, strict=True)]
        for row_a, row_b in zip(first, second)
    ]


def subtract_2d_vectors(
    first: Sequence[Sequence[int]], second: Sequence[Sequence[int]]
) -> list[list[int]]:
    """Element-wise difference of two equally shaped nested lists."""
    return _combine_2d(first, second, lambda a, b: a - b)


def multiply_2d_vectors(
    first: Sequence[Sequence[int]], second: Sequence[Sequence[int]]
) -> list[list[int]]:
    """Element-wise product of two equally shaped nested lists."""
    return _combine_2d(first, second, lambda a, b: a * b)