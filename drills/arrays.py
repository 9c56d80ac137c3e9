"""Exercises on one-dimensional integer sequences and nested arrays."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence


def _is_nested(item) -> bool:
    return isinstance(item, Sequence) and not isinstance(item, (str, bytes))


def _depth(array) -> int:
    if not _is_nested(array):
        return 0
    return 1 + max((_depth(item) for item in array), default=0)


def format_array(array) -> str:
    """Render a flat or nested array.

    Elements of a flat array are separated by spaces, rows by newlines,
    and each further level of nesting by one more newline.
    """
    depth = _depth(array)
    if depth == 0:
        return str(array)
    if depth == 1:
        return " ".join(str(item) for item in array)
    separator = "\n" * (depth - 1)
    return separator.join(format_array(item) for item in array)


def arrays_equal(first: Iterable, second: Iterable) -> bool:
    """True if both sequences hold the same elements in the same order."""
    return list(first) == list(second)


def is_sorted(values: Sequence) -> bool:
    """True if ``values`` is in non-decreasing order."""
    return all(a <= b for a, b in zip(values, values[1:]))


def common_elements(first: Iterable, second: Iterable) -> list:
    """Elements of ``first`` that also occur in ``second``, in ``first``'s order."""
    others = set(second)
    return [value for value in first if value in others]


def duplicate_elements(values: Iterable) -> list:
    """Each element that occurs again later in the sequence, in order."""
    values = list(values)
    remaining = Counter(values)
    result = []
    for value in values:
        remaining[value] -= 1
        if remaining[value] > 0:
            result.append(value)
    return result


def _require_items(values: Sequence) -> None:
    if not values:
        raise ValueError("array is empty")


def find_max(values: Sequence):
    """Largest element; ``ValueError`` if empty."""
    _require_items(values)
    return max(values)


def find_min(values: Sequence):
    """Smallest element; ``ValueError`` if empty."""
    _require_items(values)
    return min(values)


def max_min(values: Sequence) -> tuple:
    """``(largest, smallest)`` of a non-empty sequence."""
    return find_max(values), find_min(values)


def missing_number(values: Sequence[int], n: int) -> int:
    """The one number of 1..n absent from ``values`` (which holds n - 1 items)."""
    if len(values) != n - 1:
        raise ValueError(f"expected {n - 1} values, got {len(values)}")
    return n * (n + 1) // 2 - sum(values)


def rotate_left(values: Sequence) -> list:
    """Shift every element one place to the left, the first going last."""
    values = list(values)
    return values[1:] + values[:1]


def rotate_right(values: Sequence) -> list:
    """Shift every element one place to the right, the last going first."""
    values = list(values)
    return values[-1:] + values[:-1]


def zeros_to_front(values: Iterable) -> list:
    """Move every zero to the front, keeping the order of the rest."""
    values = list(values)
    non_zero = [value for value in values if value != 0]
    return [0] * (len(values) - len(non_zero)) + non_zero


def zeros_to_end(values: Iterable) -> list:
    """Move every zero to the end, keeping the order of the rest."""
    values = list(values)
    non_zero = [value for value in values if value != 0]
    return non_zero + [0] * (len(values) - len(non_zero))


def is_palindrome_sequence(values: Sequence) -> bool:
    """True if the sequence reads the same backwards."""
    values = list(values)
    return values == values[::-1]


def remove_duplicates(values: Iterable) -> list:
    """Elements in order of first appearance, each only once."""
    return list(dict.fromkeys(values))