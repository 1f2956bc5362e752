"""Array utilities: positional edits, subarray sums and small optimisation problems."""

from __future__ import annotations

import heapq
import itertools
from collections.abc import Iterable, Iterator, Sequence
from typing import TypeVar

T = TypeVar("T")

__all__ = [
    "insert_at",
    "delete_at",
    "subarrays",
    "max_subarray_sum",
    "max_subarray",
    "trapped_water",
    "permutations",
    "optimal_merge_cost",
    "knapsack",
    "reverse_digits",
]


def insert_at(
    values: Iterable[T], index: int, element: T, capacity: int | None = None
) -> list[T]:
    """Return a copy of ``values`` with ``element`` inserted before ``index``.

    Raises OverflowError when the array already holds ``capacity`` items and
    IndexError when ``index`` is outside ``0..len(values)``.
    """
    items = list(values)
    if capacity is not None and len(items) >= capacity:
        raise OverflowError(f"array is full (capacity {capacity})")
    if not 0 <= index <= len(items):
        raise IndexError(f"insertion index {index} out of range")
    items.insert(index, element)
    return items


def delete_at(values: Iterable[T], index: int) -> list[T]:
    """Return a copy of ``values`` without the item at ``index``."""
    items = list(values)
    if not 0 <= index < len(items):
        raise IndexError(f"deletion index {index} out of range")
    del items[index]
    return items


def subarrays(values: Iterable[T]) -> Iterator[list[T]]:
    """Yield every non-empty contiguous slice, ordered by start then end."""
    items = list(values)
    for start in range(len(items)):
        for end in range(start + 1, len(items) + 1):
            yield items[start:end]


def max_subarray_sum(values: Iterable[int]) -> int:
    """Kadane's algorithm; the empty subarray counts, so the result is never negative."""
    best = current = 0
    for item in values:
        current = max(current + item, 0)
        best = max(best, current)
    return best


def max_subarray(values: Iterable[int]) -> tuple[int, list[int]]:
    """Return the largest subarray sum together with the first subarray reaching it.

    Only strictly positive sums are taken; otherwise ``(0, [])`` is returned.
    """
    items = list(values)
    prefix = [0, *itertools.accumulate(items)]
    best, bounds = 0, None
    for start in range(len(items)):
        for end in range(start + 1, len(items) + 1):
            total = prefix[end] - prefix[start]
            if total > best:
                best, bounds = total, (start, end)
    if bounds is None:
        return 0, []
    return best, items[bounds[0] : bounds[1]]


def trapped_water(heights: Sequence[int]) -> int:
    """Units of water held between blocks of the given heights, each one wide."""
    if not heights:
        return 0
    left_max = itertools.accumulate(heights, max)
    right_max = reversed(list(itertools.accumulate(reversed(heights), max)))
    return sum(
        min(left, right) - height
        for left, right, height in zip(left_max, right_max, heights)
    )


def permutations(values: Iterable[T]) -> list[list[T]]:
    """All orderings of ``values`` by position, in lexicographic order of positions."""
    return [list(order) for order in itertools.permutations(values)]


def optimal_merge_cost(sizes: Iterable[int]) -> int:
    """Least total cost of merging files pairwise, a merge costing the sum of sizes."""
    heap = list(sizes)
    heapq.heapify(heap)
    cost = 0
    while len(heap) > 1:
        merged = heapq.heappop(heap) + heapq.heappop(heap)
        cost += merged
        heapq.heappush(heap, merged)
    return cost


def knapsack(capacity: int, weights: Sequence[int], values: Sequence[int]) -> int:
    """Best total value of a 0/1 selection whose weight fits in ``capacity``."""
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    if any(weight < 0 for weight in weights):
        raise ValueError("weights must not be negative")
    best = [0] * (capacity + 1)
    for weight, value in zip(weights, values):
        for room in range(capacity, weight - 1, -1):
            best[room] = max(best[room], best[room - weight] + value)
    return best[capacity]


def reverse_digits(number: int) -> int:
    """Reverse the decimal digits of ``number``, keeping its sign."""
    sign = -1 if number < 0 else 1
    return sign * int(str(abs(number))[::-1])