"""Classic comparison and counting sorts, plus wave and sign rearrangements.

Every function takes any iterable and returns a new list; the input is never
modified.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from typing import Any, TypeVar

T = TypeVar("T")

__all__ = [
    "bubble_sort",
    "counting_sort",
    "insertion_sort",
    "merge_sort",
    "quick_sort",
    "selection_sort",
    "shell_sort",
    "wave_sort",
    "partition_negatives",
]


def bubble_sort(values: Iterable[T]) -> list[T]:
    """Sort ascending by repeatedly swapping adjacent out-of-order items."""
    items = list(values)
    for unsorted_end in range(len(items) - 1, 0, -1):
        for j in range(unsorted_end):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def counting_sort(values: Iterable[int]) -> list[int]:
    """Sort non-negative integers by counting occurrences of each value.

    Raises TypeError for non-integers and ValueError for negative values.
    """
    items = list(values)
    for item in items:
        if isinstance(item, bool) or not isinstance(item, int):
            raise TypeError(f"counting sort needs integers, got {item!r}")
        if item < 0:
            raise ValueError(f"counting sort needs non-negative values, got {item}")
    if not items:
        return []
    counts = Counter(items)
    result: list[int] = []
    for value in range(max(items) + 1):
        result.extend([value] * counts[value])
    return result


def insertion_sort(values: Iterable[T]) -> list[T]:
    """Sort ascending by inserting each item into the sorted prefix."""
    items = list(values)
    for i in range(1, len(items)):
        key = items[i]
        j = i - 1
        while j >= 0 and items[j] > key:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = key
    return items


def _merge(left: list[T], right: list[T]) -> list[T]:
    merged: list[T] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[T]) -> list[T]:
    """Stable top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) + 1) // 2
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def _partition(items: list[Any], low: int, high: int) -> int:
    pivot = items[low]
    i = low + 1
    j = high
    while True:
        while i <= high and items[i] <= pivot:
            i += 1
        while items[j] > pivot:
            j -= 1
        if i < j:
            items[i], items[j] = items[j], items[i]
        else:
            break
    items[low], items[j] = items[j], items[low]
    return j


def quick_sort(values: Iterable[T]) -> list[T]:
    """Quick sort using the first element of each range as the pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot_index = _partition(items, low, high)
            pending.append((low, pivot_index - 1))
            pending.append((pivot_index + 1, high))
    return items


def selection_sort(values: Iterable[T]) -> list[T]:
    """Sort ascending by selecting the minimum of the unsorted suffix."""
    items = list(values)
    for i in range(len(items) - 1):
        min_index = min(range(i, len(items)), key=items.__getitem__)
        if min_index != i:
            items[i], items[min_index] = items[min_index], items[i]
    return items


def shell_sort(values: Iterable[T]) -> list[T]:
    """Shell sort with gaps n/2, n/4, ..., 1."""
    items = list(values)
    gap = len(items) // 2
    while gap > 0:
        for i in range(gap, len(items)):
            current = items[i]
            j = i
            while j >= gap and items[j - gap] > current:
                items[j] = items[j - gap]
                j -= gap
            items[j] = current
        gap //= 2
    return items


def wave_sort(values: Iterable[T]) -> list[T]:
    """Rearrange so that items at odd positions are no larger than their neighbours.

    The result satisfies a[0] >= a[1] <= a[2] >= a[3] <= ...
    """
    items = list(values)
    n = len(items)
    for i in range(1, n, 2):
        if items[i] > items[i - 1]:
            items[i], items[i - 1] = items[i - 1], items[i]
        if i + 1 < n and items[i] > items[i + 1]:
            items[i], items[i + 1] = items[i + 1], items[i]
    return items


def partition_negatives(values: Iterable[int]) -> list[int]:
    """Move negative numbers before positive ones with a two-pointer sweep.

    Relative order is not preserved. Zeros are treated as neither negative nor
    positive: when one sits under a pointer both pointers simply advance, so
    inputs containing zeros are not guaranteed to end up fully partitioned.
    """
    items = list(values)
    left, right = 0, len(items) - 1
    while left <= right:
        if items[left] < 0 and items[right] < 0:
            left += 1
        elif items[left] > 0 and items[right] < 0:
            items[left], items[right] = items[right], items[left]
            left += 1
            right -= 1
        elif items[left] > 0 and items[right] > 0:
            right -= 1
        else:
            left += 1
            right -= 1
    return items