"""Searching within sequences and strings."""

from __future__ import annotations

from bisect import bisect_left
from itertools import combinations
from typing import Optional, Sequence, Tuple, TypeVar

T = TypeVar("T")


def linear_search(values: Sequence[T], target: T) -> Optional[int]:
    """Return the index of the first element equal to target, or None."""
    return next((index for index, value in enumerate(values) if value == target), None)


def binary_search(values: Sequence[T], target: T) -> Optional[int]:
    """Return an index of target in the ascending sequence values, or None."""
    index = bisect_left(values, target)
    if index < len(values) and values[index] == target:
        return index
    return None


def contains_substring(text: str, pattern: str) -> bool:
    """Tell whether pattern occurs within text."""
    return pattern in text


def find_triplet(values: Sequence[int], target: int) -> Optional[Tuple[int, int, int]]:
    """Return the first triple of elements, in input order, that sums to target."""
    return next((triple for triple in combinations(values, 3) if sum(triple) == target), None)


def middle_of_three(a: int, b: int, c: int) -> int:
    """Return the middle one of three distinct numbers."""
    if a < b < c or c < b < a:
        return b
    if b < a < c or c < a < b:
        return a
    return c