from itertools import permutations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algonotes.searching import (
    binary_search,
    contains_substring,
    find_triplet,
    linear_search,
    middle_of_three,
)


def test_linear_search_finds_first_occurrence():
    data = [7, 3, 9, 3, 1]
    assert linear_search(data, 3) == 1
    assert linear_search(data, 1) == 4


def test_linear_search_missing():
    assert linear_search([1, 2, 3], 8) is None


@given(st.lists(st.integers(-50, 50), max_size=30), st.integers(-50, 50))
def test_linear_search_invariant(data, target):
    index = linear_search(data, target)
    if target in data:
        assert data[index] == target
        assert target not in data[:index]
    else:
        assert index is None


@given(st.sets(st.integers(-500, 500), max_size=40), st.integers(-500, 500))
def test_binary_search_invariant(items, target):
    data = sorted(items)
    index = binary_search(data, target)
    if target in items:
        assert data[index] == target
    else:
        assert index is None


@pytest.mark.parametrize("target", [1, 5, 9])
def test_binary_search_every_position(target):
    data = [1, 5, 9]
    assert binary_search(data, target) == data.index(target)


def test_binary_search_empty():
    assert binary_search([], 4) is None


def test_contains_substring():
    assert contains_substring("segment tree", "ent t") is True
    assert contains_substring("segment tree", "heap") is False
    assert contains_substring("abc", "") is True


def test_find_triplet_example():
    assert find_triplet([1, 4, 45, 6, 10, 8], 22) == (4, 10, 8)


def test_find_triplet_missing():
    assert find_triplet([1, 2, 3, 4], 100) is None
    assert find_triplet([5, 5], 10) is None


@given(st.lists(st.integers(-20, 20), max_size=10), st.integers(-60, 60))
def test_find_triplet_sums_to_target(data, target):
    triple = find_triplet(data, target)
    if triple is not None:
        assert sum(triple) == target
        remaining = list(data)
        for value in triple:
            remaining.remove(value)


@pytest.mark.parametrize("order", list(permutations((20, 30, 40))))
def test_middle_of_three_any_order(order):
    assert middle_of_three(*order) == 30


@given(st.sets(st.integers(), min_size=3, max_size=3))
def test_middle_of_three_is_median(numbers):
    a, b, c = numbers
    assert middle_of_three(a, b, c) == sorted(numbers)[1]