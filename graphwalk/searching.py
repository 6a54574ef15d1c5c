"""Binary search over sorted sequences."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def binary_search(items: Sequence[Any], key: Any) -> int | None:
    """Return the index of some element equal to ``key``, or None if absent.

    ``items`` must be sorted in ascending order.
    """
    start, end = 0, len(items) - 1
    while start <= end:
        mid = (start + end) // 2
        value = items[mid]
        if value == key:
            return mid
        if value < key:
            start = mid + 1
        else:
            end = mid - 1
    return None


def _find_edge(items: Sequence[Any], key: Any, *, leftmost: bool) -> int:
    start, end = 0, len(items) - 1
    found: int | None = None
    while start <= end:
        mid = (start + end) // 2
        value = items[mid]
        if key == value:
            found = mid
            if leftmost:
                end = mid - 1
            else:
                start = mid + 1
        elif key < value:
            end = mid - 1
        else:
            start = mid + 1
    if found is None:
        raise ValueError(f"{key!r} is not in the sequence")
    return found


def first_occurrence(items: Sequence[Any], key: Any) -> int:
    """Return the index of the first element equal to ``key``.

    Raises ValueError if ``key`` does not occur.
    """
    return _find_edge(items, key, leftmost=True)


def last_occurrence(items: Sequence[Any], key: Any) -> int:
    """Return the index of the last element equal to ``key``.

    Raises ValueError if ``key`` does not occur.
    """
    return _find_edge(items, key, leftmost=False)


def count_occurrences(items: Sequence[Any], key: Any) -> int:
    """Return how many times ``key`` occurs in the sorted sequence."""
    try:
        first = first_occurrence(items, key)
    except ValueError:
        return 0
    return last_occurrence(items, key) - first + 1