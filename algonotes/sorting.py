"""Classic comparison and counting sorts.

Every function takes an iterable of comparable values and returns a new,
ascending list. The input is never modified.
"""

from __future__ import annotations

from itertools import accumulate
from typing import Iterable, List, TypeVar

T = TypeVar("T")


def counting_sort(values: Iterable[int]) -> List[int]:
    """Sort non-negative integers by counting occurrences (stable)."""
    items = list(values)
    if not items:
        return []
    if min(items) < 0:
        raise ValueError("counting sort needs non-negative integers")

    counts = [0] * (max(items) + 1)
    for value in items:
        counts[value] += 1
    positions = list(accumulate(counts))

    output = [0] * len(items)
    for value in reversed(items):
        positions[value] -= 1
        output[positions[value]] = value
    return output


def _sift_down(items: List[T], size: int, root: int) -> None:
    while True:
        largest = root
        left, right = 2 * root + 1, 2 * root + 2
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest == root:
            return
        items[root], items[largest] = items[largest], items[root]
        root = largest


def heap_sort(values: Iterable[T]) -> List[T]:
    """Sort by building a max-heap and repeatedly moving its root to the end."""
    items = list(values)
    size = len(items)
    for root in range(size // 2 - 1, -1, -1):
        _sift_down(items, size, root)
    for end in range(size - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, end, 0)
    return items


def _merge(left: List[T], right: List[T]) -> List[T]:
    merged: List[T] = []
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


def merge_sort(values: Iterable[T]) -> List[T]:
    """Sort by splitting in halves and merging the sorted halves (stable)."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) - 1) // 2 + 1
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def _partition(items: List[T], low: int, high: int) -> int:
    pivot = items[high]
    boundary = low - 1
    for current in range(low, high):
        if items[current] <= pivot:
            boundary += 1
            items[boundary], items[current] = items[current], items[boundary]
    items[boundary + 1], items[high] = items[high], items[boundary + 1]
    return boundary + 1


def quick_sort(values: Iterable[T]) -> List[T]:
    """Sort with quicksort, using the last element of each range as pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot = _partition(items, low, high)
            pending.append((low, pivot - 1))
            pending.append((pivot + 1, high))
    return items


def bubble_sort(values: Iterable[T]) -> List[T]:
    """Sort by repeatedly swapping adjacent out-of-order pairs."""
    items = list(values)
    size = len(items)
    for done in range(size - 1):
        for j in range(size - 1 - done):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def insertion_sort(values: Iterable[T]) -> List[T]:
    """Sort by inserting each element into the sorted prefix before it."""
    items = list(values)
    for i in range(1, len(items)):
        current = items[i]
        j = i - 1
        while j >= 0 and items[j] > current:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = current
    return items


def selection_sort(values: Iterable[T]) -> List[T]:
    """Sort by placing the smallest remaining element at each position."""
    items = list(values)
    size = len(items)
    for i in range(size - 1):
        for j in range(i + 1, size):
            if items[j] < items[i]:
                items[i], items[j] = items[j], items[i]
    return items