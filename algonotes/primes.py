"""Primality testing and the sieve of Eratosthenes."""

from __future__ import annotations

from math import isqrt
from typing import List


def is_prime(n: int) -> bool:
    """Tell whether n is prime, by trial division."""
    if n < 2:
        return False
    return all(n % divisor for divisor in range(2, isqrt(n) + 1))


def primes_below(n: int) -> List[int]:
    """Return every prime strictly less than n, in ascending order."""
    if n <= 2:
        return []
    # odd[k] stands for the number 2k + 1; index 0 (the number 1) is excluded.
    odd = [True] * ((n + 1) // 2)
    odd[0] = False
    for candidate in range(3, isqrt(n - 1) + 1, 2):
        if odd[candidate // 2]:
            for multiple in range(candidate * candidate, n, 2 * candidate):
                odd[multiple // 2] = False
    return [2] + [2 * k + 1 for k, flag in enumerate(odd) if flag and 2 * k + 1 < n]