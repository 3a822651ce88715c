"""Routines over sequences of integers: extremes, searching and sorting."""

from __future__ import annotations

import heapq
from bisect import bisect_left
from collections.abc import Iterable, Sequence


def _require_items(values: Sequence) -> None:
    if not values:
        raise ValueError("sequence is empty")


def largest(values: Sequence[int]) -> int:
    """The largest element; raises ValueError for an empty sequence."""
    _require_items(values)
    return max(values)


def smallest(values: Sequence[int]) -> int:
    """The smallest element; raises ValueError for an empty sequence."""
    _require_items(values)
    return min(values)


def sum_and_average(values: Sequence[int]) -> tuple[int, float]:
    """Return the total and the arithmetic mean of the elements."""
    _require_items(values)
    total = sum(values)
    return total, total / len(values)


def linear_search(values: Iterable[int], key: int) -> bool:
    """True when ``key`` occurs among the values."""
    return any(value == key for value in values)


def binary_search(values: Sequence[int], key: int) -> bool:
    """True when ``key`` occurs in the ascending sequence ``values``."""
    position = bisect_left(values, key)
    return position < len(values) and values[position] == key


def bubble_sort(values: Iterable[int]) -> list[int]:
    """Return a new ascending list, sorted by repeated adjacent exchanges."""
    items = list(values)
    for end in range(len(items) - 1, 0, -1):
        swapped = False
        for j in range(end):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break
    return items


def merge_sort(values: Sequence[int]) -> list[int]:
    """Return a new ascending list, sorted stably by recursive merging."""
    items = list(values)
    if len(items) <= 1:
        return items
    middle = (len(items) + 1) // 2
    return list(heapq.merge(merge_sort(items[:middle]), merge_sort(items[middle:])))


def recursive_sum(values: Sequence[int]) -> int:
    """Sum of the elements, computed recursively from the last one."""
    if not values:
        return 0
    return values[-1] + recursive_sum(values[:-1])


def parse_integers(text: str) -> list[int]:
    """Read whitespace-separated integers; raises ValueError on other tokens."""
    return [int(token) for token in text.split()]


def format_sequence(values: Iterable[int]) -> str:
    """Each value followed by a single space."""
    return "".join(f"{value} " for value in values)