# algonotes

A small collection of classic algorithms in plain Python, with no
third-party dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algonotes.sorting` | `counting_sort`, `heap_sort`, `merge_sort`, `quick_sort`, `bubble_sort`, `insertion_sort`, `selection_sort` |
| `algonotes.searching` | `linear_search`, `binary_search`, `contains_substring`, `find_triplet`, `middle_of_three` |
| `algonotes.arrays` | `max_subarray_sum`, `max_subarray_sum_brute_force`, `max_consecutive_ones`, `longest_unique_substring`, `reverse_array` |
| `algonotes.primes` | `is_prime`, `primes_below` |
| `algonotes.dynamic` | `minimum_triangle_path`, `count_combinations`, `can_partition`, `can_partition_dp`, `tug_of_war` |
| `algonotes.crossword` | `parse_words`, `solve_crossword`, `main` |
| `algonotes.mst` | `DisjointSet`, `Edge`, `prim_mst` |

Every sorting function takes an iterable and returns a new ascending list;
the input is left alone. `counting_sort` accepts only non-negative integers
and raises `ValueError` otherwise. The search functions return `None` when
nothing is found.

## Examples

```python
from algonotes.sorting import merge_sort
from algonotes.searching import find_triplet, binary_search
from algonotes.primes import primes_below
from algonotes.dynamic import count_combinations, tug_of_war
from algonotes.mst import prim_mst

merge_sort([12, 11, 13, 5, 6, 7])        # [5, 6, 7, 11, 12, 13]
find_triplet([1, 4, 45, 6, 10, 8], 22)   # (4, 10, 8)
binary_search([1, 3, 5, 7], 6)           # None
primes_below(20)                         # [2, 3, 5, 7, 11, 13, 17, 19]
count_combinations([1, 2, 3], 4)         # 7

first, second = tug_of_war([3, 4, 5, 6])  # two halves with sums as close as possible

weights = [
    [None, 2, 3],
    [2, None, 1],
    [3, 1, None],
]
prim_mst(weights, start=0)
# [Edge(first=0, second=1, weight=2), Edge(first=1, second=2, weight=1)]
```

In `prim_mst` a weight of `None`, or of `999` (`algonotes.mst.NO_EDGE`) or
more, means there is no edge. A graph that is not connected raises
`ValueError`.

## Crossword solver

`solve_crossword(grid, words)` fills a grid of equal-length strings, where
`+` marks a blocked cell and `-` an open one, placing each word down or
across. It returns the filled rows, or `None` if the words cannot all be
placed.

The `algonotes-crossword` command reads ten grid rows followed by one
`;`-separated word list, from a file or from standard input, and prints the
filled grid:

```
algonotes-crossword puzzle.txt
algonotes-crossword < puzzle.txt
```

It exits with status 1, printing nothing, when there is no solution.

## What it does not include

The package offers functions only; it has no container types of its own
(no tree, linked list, segment tree or hash table classes) and no pattern
printing. Apart from the crossword solver, there is no command-line
interface.