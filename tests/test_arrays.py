import pytest
from hypothesis import given
from hypothesis import strategies as st

from algonotes.arrays import (
    longest_unique_substring,
    max_consecutive_ones,
    max_subarray_sum,
    max_subarray_sum_brute_force,
    reverse_array,
)

SOURCE_ARRAY = [4, 3, -2, 6, -14, 7, -1, 4, 5, 7, -10, 2, 9, -10, -5, -9, 6, 1]


def test_kadane_agrees_with_brute_force_on_sample():
    assert max_subarray_sum(SOURCE_ARRAY) == max_subarray_sum_brute_force(SOURCE_ARRAY)


def test_all_negative_picks_largest_element():
    data = [-3, -1, -2]
    assert max_subarray_sum(data) == -1
    assert max_subarray_sum_brute_force(data) == -1


@given(st.lists(st.integers(-100, 100), min_size=1, max_size=40))
def test_kadane_matches_brute_force(data):
    assert max_subarray_sum(data) == max_subarray_sum_brute_force(data)


@given(st.lists(st.integers(-100, 100), min_size=1, max_size=40))
def test_max_subarray_at_least_every_element(data):
    assert max_subarray_sum(data) >= max(data)


def test_max_subarray_empty_raises():
    with pytest.raises(ValueError):
        max_subarray_sum([])
    with pytest.raises(ValueError):
        max_subarray_sum_brute_force([])


def test_max_consecutive_ones_example():
    assert max_consecutive_ones([1, 1, 1, 0, 0, 0, 1, 1, 1, 1, 0], 2) == 6


def test_max_consecutive_ones_enough_flips():
    bits = [0, 1, 0, 0, 1]
    assert max_consecutive_ones(bits, bits.count(0)) == len(bits)


def test_max_consecutive_ones_negative_k():
    with pytest.raises(ValueError):
        max_consecutive_ones([1, 0], -1)


def _zeros(window):
    return window.count(0)


@given(st.lists(st.sampled_from([0, 1]), max_size=30), st.integers(0, 5))
def test_max_consecutive_ones_is_tight(bits, k):
    result = max_consecutive_ones(bits, k)
    windows = [bits[i:i + result] for i in range(len(bits) - result + 1)]
    assert any(_zeros(w) <= k for w in windows)
    longer = [bits[i:i + result + 1] for i in range(len(bits) - result)]
    assert all(_zeros(w) > k for w in longer)


def test_longest_unique_substring_example():
    assert longest_unique_substring("abcabcbb") == 3


def test_longest_unique_substring_distinct_and_empty():
    assert longest_unique_substring("") == 0
    assert longest_unique_substring("xyz") == len("xyz")


@given(st.text(alphabet="abcd", max_size=25))
def test_longest_unique_substring_is_tight(text):
    result = longest_unique_substring(text)
    windows = [text[i:i + result] for i in range(len(text) - result + 1)]
    assert any(len(set(w)) == len(w) for w in windows)
    longer = [text[i:i + result + 1] for i in range(len(text) - result)]
    assert all(len(set(w)) < len(w) for w in longer)


@given(st.lists(st.integers(), max_size=30))
def test_reverse_twice_is_identity(data):
    assert reverse_array(reverse_array(data)) == data


def test_reverse_array_order():
    assert reverse_array([1, 2, 3]) == [3, 2, 1]
    assert reverse_array(iter("ab")) == ["b", "a"]