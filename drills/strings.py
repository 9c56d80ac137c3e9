"""Exercises on text strings."""

from __future__ import annotations


def _as_bytes(text: str | bytes) -> bytes:
    return text if isinstance(text, bytes) else text.encode("utf-8")


def is_palindrome_string(text: str) -> bool:
    """True if ``text`` reads the same backwards."""
    return text == text[::-1]


def reverse_string(text: str) -> str:
    """``text`` with its characters in reverse order."""
    return text[::-1]


def compare(s1: str | bytes, s2: str | bytes) -> int:
    """Compare two strings byte by byte.

    Returns zero when they are equal, otherwise the difference between the
    first pair of differing bytes, where the end of the shorter string
    counts as a zero byte.
    """
    a, b = _as_bytes(s1), _as_bytes(s2)
    for x, y in zip(a, b):
        if x != y:
            return x - y
    if len(a) == len(b):
        return 0
    if len(a) > len(b):
        return a[len(b)]
    return -b[len(a)]


def find_substring(haystack: str, needle: str) -> int | None:
    """Position of the first occurrence of ``needle``, or ``None``."""
    position = haystack.find(needle)
    return None if position < 0 else position


def byte_length(text: str | bytes) -> int:
    """Number of bytes in the UTF-8 encoding of ``text``."""
    return len(_as_bytes(text))