"""Dynamic programming and exhaustive-search problems on number lists."""

from __future__ import annotations

from functools import lru_cache
from typing import Iterable, List, Sequence, Tuple


def minimum_triangle_path(triangle: Sequence[Sequence[int]]) -> int:
    """Return the smallest top-to-bottom path sum, moving to adjacent entries.

    The rows are folded bottom-up: each row takes, for each of its leading
    entries, the cheaper of the two entries below it. The input is not changed.
    """
    rows = [list(row) for row in triangle]
    if not rows or not rows[-1]:
        raise ValueError("triangle needs a non-empty last row")

    width = len(rows[-1]) - 1
    for upper, lower in zip(reversed(rows[:-1]), reversed(rows[1:])):
        if width > 0 and (len(upper) < width or len(lower) < width + 1):
            raise ValueError("triangle rows are too short to fold")
        for column in range(width):
            upper[column] += min(lower[column], lower[column + 1])
        width -= 1

    if not rows[0]:
        raise ValueError("triangle needs a non-empty first row")
    return rows[0][0]


def count_combinations(nums: Iterable[int], target: int) -> int:
    """Count ordered sequences of steps from nums that add up to target."""
    steps = list(nums)
    if target < 0:
        raise ValueError("target must not be negative")
    if any(step <= 0 for step in steps):
        raise ValueError("every step must be a positive integer")

    ways = [1] + [0] * target
    for total in range(1, target + 1):
        ways[total] = sum(ways[total - step] for step in steps if step <= total)
    return ways[target]


def can_partition(values: Iterable[int]) -> bool:
    """Tell whether values split into two groups of equal sum (recursive search)."""
    items = tuple(values)
    total = sum(items)
    if total % 2:
        return False

    @lru_cache(maxsize=None)
    def reachable(count: int, remaining: int) -> bool:
        if remaining == 0:
            return True
        if count == 0 or remaining < 0:
            return False
        return reachable(count - 1, remaining - items[count - 1]) or reachable(
            count - 1, remaining
        )

    return reachable(len(items), total // 2)


def can_partition_dp(values: Iterable[int]) -> bool:
    """Tell whether values split into two groups of equal sum (subset-sum table).

    A half-sum of zero counts as unreachable, so an empty list or a list of
    zeros gives False.
    """
    items = list(values)
    if any(value < 0 for value in items):
        raise ValueError("values must not be negative")
    total = sum(items)
    if total % 2:
        return False

    half = total // 2
    row = [False] * (half + 1)
    for value in items:
        previous = row
        row = [False] * (half + 1)
        for target in range(1, half + 1):
            if value > target:
                row[target] = previous[target]
            elif value == target:
                row[target] = True
            else:
                row[target] = previous[target] or previous[target - value]
    return row[half]


def _truncated_half(total: int) -> int:
    return -(-total // 2) if total < 0 else total // 2


def tug_of_war(values: Iterable[int]) -> Tuple[List[int], List[int]]:
    """Split values into a group of n // 2 elements and the rest, with sums as close as possible.

    Both groups keep the input order. Among equally good splits, the first
    one found wins.
    """
    items = list(values)
    size = len(items)
    needed = size // 2
    target = _truncated_half(sum(items))

    best_diff: int | None = None
    best: frozenset = frozenset()
    chosen: List[int] = []

    def explore(position: int, count: int, running: int) -> None:
        nonlocal best_diff, best
        if position == size:
            return
        if needed - count > size - position:
            return

        explore(position + 1, count, running)

        count += 1
        running += items[position]
        chosen.append(position)
        if count == needed:
            diff = abs(target - running)
            if best_diff is None or diff < best_diff:
                best_diff = diff
                best = frozenset(chosen)
        else:
            explore(position + 1, count, running)
        chosen.pop()

    explore(0, 0, 0)
    first = [value for index, value in enumerate(items) if index in best]
    second = [value for index, value in enumerate(items) if index not in best]
    return first, second