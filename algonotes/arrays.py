"""Subarray, window and substring problems on sequences."""

from __future__ import annotations

from itertools import accumulate
from typing import Iterable, List, Sequence, TypeVar

T = TypeVar("T")


def max_subarray_sum(values: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous run (Kadane)."""
    if not values:
        raise ValueError("max_subarray_sum needs at least one value")
    current = best = values[0]
    for value in values[1:]:
        current = current + value if current >= 0 else value
        best = max(best, current)
    return best


def max_subarray_sum_brute_force(values: Sequence[int]) -> int:
    """Return the largest contiguous sum by trying every starting point."""
    if not values:
        raise ValueError("max_subarray_sum_brute_force needs at least one value")
    return max(max(accumulate(values[start:])) for start in range(len(values)))


def max_consecutive_ones(bits: Sequence[int], k: int) -> int:
    """Return the longest run of ones after flipping at most k zeros."""
    if k < 0:
        raise ValueError("k must not be negative")
    zeroes = 0
    left = 0
    best = 0
    for right, bit in enumerate(bits):
        if bit == 0:
            zeroes += 1
        while zeroes > k:
            if bits[left] == 0:
                zeroes -= 1
            left += 1
        best = max(best, right - left + 1)
    return best


def longest_unique_substring(text: str) -> int:
    """Return the length of the longest substring without repeated characters."""
    last_seen: dict = {}
    start = -1
    best = 0
    for index, char in enumerate(text):
        if last_seen.get(char, -1) > start:
            start = last_seen[char]
        last_seen[char] = index
        best = max(best, index - start)
    return best


def reverse_array(values: Iterable[T]) -> List[T]:
    """Return the elements in reverse order as a new list."""
    return list(reversed(list(values)))