"""Comparison sorts: insertion, quick and merge sort variants."""

from __future__ import annotations

import bisect
from collections.abc import Callable, Iterable
from typing import Any

KeyFunc = Callable[[Any], Any]


def _identity(value: Any) -> Any:
    return value


def digit_sum(n: int) -> int:
    """Return the sum of the decimal digits of ``n``, carrying its sign."""
    total = sum(int(digit) for digit in str(abs(n)))
    return -total if n < 0 else total


def insertion_sort(items: Iterable[Any]) -> list[Any]:
    """Return a new list with the items in ascending order."""
    result = list(items)
    for i in range(1, len(result)):
        current = result[i]
        j = i - 1
        while j >= 0 and result[j] > current:
            result[j + 1] = result[j]
            j -= 1
        result[j + 1] = current
    return result


def binary_insertion_sort(items: Iterable[Any]) -> list[Any]:
    """Insertion sort that locates each insertion point by binary search."""
    result: list[Any] = []
    for item in items:
        bisect.insort_right(result, item)
    return result


def _partition(work: list[Any], low: int, high: int, key: KeyFunc) -> int:
    """Partition ``work[low..high]`` around its first element; return its final index."""
    pivot = key(work[low])
    i, j = low + 1, high
    while True:
        while i <= high and key(work[i]) <= pivot:
            i += 1
        while key(work[j]) > pivot:
            j -= 1
        if i < j:
            work[i], work[j] = work[j], work[i]
        else:
            break
    work[low], work[j] = work[j], work[low]
    return j


def quick_sort(items: Iterable[Any], key: KeyFunc | None = None) -> list[Any]:
    """Return a new list sorted by ``key`` using first-element-pivot quicksort."""
    keyfunc = key or _identity
    work = list(items)
    ranges = [(0, len(work) - 1)]
    while ranges:
        low, high = ranges.pop()
        if low < high:
            pos = _partition(work, low, high, keyfunc)
            ranges.append((low, pos - 1))
            ranges.append((pos + 1, high))
    return work


def quick_sort_median(items: Iterable[Any]) -> Any:
    """Return the lower median, found by quicksort partitioning.

    Raises ValueError for an empty input.
    """
    work = list(items)
    if not work:
        raise ValueError("median of an empty sequence")
    target = (len(work) - 1) // 2
    low, high = 0, len(work) - 1
    while low < high:
        pos = _partition(work, low, high, _identity)
        if pos == target:
            return work[pos]
        if pos < target:
            low = pos + 1
        else:
            high = pos - 1
    return work[target]


def _merge(left: list[Any], right: list[Any], key: KeyFunc) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if key(left[i]) < key(right[j]):
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def _merge_sort(work: list[Any], key: KeyFunc) -> list[Any]:
    if len(work) < 2:
        return work
    mid = (len(work) - 1) // 2 + 1
    return _merge(_merge_sort(work[:mid], key), _merge_sort(work[mid:], key), key)


def merge_sort(items: Iterable[Any], key: KeyFunc | None = None) -> list[Any]:
    """Return a new list sorted by ``key`` using top-down merge sort."""
    return _merge_sort(list(items), key or _identity)


def _three_way(work: list[Any]) -> list[Any]:
    if len(work) < 2:
        return work
    end = len(work) - 1
    mid = end // 2
    mid1 = mid // 2
    mid2 = (mid + end) // 2
    first = _three_way(work[: mid1 + 1])
    second = _three_way(work[mid1 + 1 : mid2 + 1])
    third = _three_way(work[mid2 + 1 :])
    return _merge(_merge(first, second, _identity), third, _identity)


def three_way_merge_sort(items: Iterable[Any]) -> list[Any]:
    """Return a new sorted list, splitting each range into three parts."""
    return _three_way(list(items))