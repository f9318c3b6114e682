"""Tests for algorithm_playground/sorting.py"""

from collections import Counter
from dataclasses import dataclass

import pytest
from hypothesis import given, settings, strategies as st

from algorithm_playground.ordering import is_sorted
from algorithm_playground.sorting import (
    SortAlgorithm,
    bubble_sort,
    heap_sort,
    insertion_sort,
    merge_sort,
    quick_sort,
    selection_sort,
    sort_with,
)

ALL_SORTS = [merge_sort, heap_sort, quick_sort, insertion_sort, selection_sort, bubble_sort]
STABLE_SORTS = [merge_sort, insertion_sort]


@dataclass(frozen=True)
class Tagged:
    """Orders by key only; tag records the input position."""

    key: int
    tag: int

    def __lt__(self, other: "Tagged") -> bool:
        return self.key < other.key


def _ids(sort) -> str:
    return sort.__name__


class TestScenarios:
    @pytest.mark.parametrize("sort", ALL_SORTS, ids=_ids)
    def test_three_two_one(self, sort):
        values = [3, 2, 1]
        assert sort(values) is None
        assert values == [1, 2, 3]

    @pytest.mark.parametrize("sort", ALL_SORTS, ids=_ids)
    def test_characters(self, sort):
        values = ["c", "b", "a"]
        sort(values)
        assert values == ["a", "b", "c"]

    @pytest.mark.parametrize("sort", ALL_SORTS, ids=_ids)
    def test_empty_and_single_are_noops(self, sort):
        empty: list[int] = []
        sort(empty)
        assert empty == []

        single = [9]
        sort(single)
        assert single == [9]

    @pytest.mark.parametrize("sort", ALL_SORTS, ids=_ids)
    def test_duplicates_and_negatives(self, sort):
        values = [0, -3, 5, -3, 2, 5, 0, 1]
        sort(values)
        assert values == [-3, -3, 0, 0, 1, 2, 5, 5]

    @pytest.mark.parametrize("sort", ALL_SORTS, ids=_ids)
    def test_all_equal(self, sort):
        values = [7] * 10
        sort(values)
        assert values == [7] * 10

    @pytest.mark.parametrize("sort", ALL_SORTS, ids=_ids)
    def test_reverse_sorted(self, sort):
        values = list(range(50, 0, -1))
        sort(values)
        assert values == list(range(1, 51))

    @pytest.mark.parametrize("sort", ALL_SORTS, ids=_ids)
    def test_sorts_caller_list_in_place(self, sort):
        values = [4, 1, 3]
        alias = values
        sort(values)
        assert alias is values
        assert alias == [1, 3, 4]


class TestQuickSort:
    def test_sorted_input_is_not_quadratic_in_depth(self):
        """Middle pivot on sorted input splits evenly; no recursion error."""
        values = list(range(5000))
        quick_sort(values)
        assert values == list(range(5000))

    def test_many_duplicates(self):
        values = [1, 0] * 500
        quick_sort(values)
        assert values == [0] * 500 + [1] * 500


class TestSortAlgorithm:
    def test_every_algorithm_has_a_sort(self):
        assert {algorithm.sort for algorithm in SortAlgorithm} == set(ALL_SORTS)

    def test_stability_flags(self):
        stable = {algorithm for algorithm in SortAlgorithm if algorithm.is_stable}
        assert stable == {SortAlgorithm.MERGE, SortAlgorithm.INSERTION, SortAlgorithm.BUBBLE}

    @pytest.mark.parametrize("name", [algorithm.value for algorithm in SortAlgorithm])
    def test_sort_with_name(self, name):
        values = [2, 3, 1]
        sort_with(values, name)
        assert values == [1, 2, 3]

    def test_sort_with_enum(self):
        values = ["b", "a"]
        sort_with(values, SortAlgorithm.HEAP)
        assert values == ["a", "b"]

    def test_unknown_name(self):
        with pytest.raises(ValueError, match="Unknown sort algorithm 'bogo'"):
            sort_with([2, 1], "bogo")


@pytest.mark.parametrize("sort", ALL_SORTS, ids=_ids)
@settings(max_examples=100)
@given(values=st.lists(st.integers(-1000, 1000), max_size=60))
def test_sort_produces_ordered_permutation(sort, values: list[int]):
    result = list(values)
    sort(result)
    assert is_sorted(result)
    assert Counter(result) == Counter(values)


@pytest.mark.parametrize("sort", ALL_SORTS, ids=_ids)
@settings(max_examples=50)
@given(values=st.lists(st.text(max_size=4), max_size=30))
def test_sort_matches_builtin_on_strings(sort, values: list[str]):
    result = list(values)
    sort(result)
    assert result == sorted(values)


@pytest.mark.parametrize("sort", ALL_SORTS, ids=_ids)
@settings(max_examples=50)
@given(values=st.lists(st.floats(allow_nan=False), max_size=40))
def test_sort_is_idempotent(sort, values: list[float]):
    once = list(values)
    sort(once)
    twice = list(once)
    sort(twice)
    assert twice == once


@pytest.mark.parametrize("sort", STABLE_SORTS + [bubble_sort], ids=_ids)
@settings(max_examples=100)
@given(keys=st.lists(st.integers(0, 5), max_size=40))
def test_stable_sorts_keep_order_of_equal_keys(sort, keys: list[int]):
    values = [Tagged(key, tag) for tag, key in enumerate(keys)]
    result = list(values)
    sort(result)
    # sorted() is stable
    assert result == sorted(values, key=lambda item: item.key)


@pytest.mark.parametrize("sort", [heap_sort, quick_sort, selection_sort], ids=_ids)
@settings(max_examples=50)
@given(keys=st.lists(st.integers(0, 5), max_size=40))
def test_unstable_sorts_still_order_by_key(sort, keys: list[int]):
    values = [Tagged(key, tag) for tag, key in enumerate(keys)]
    result = list(values)
    sort(result)
    assert [item.key for item in result] == sorted(keys)
    assert Counter(result) == Counter(values)


class TestNumpyArrays:
    """Any indexable, assignable sequence works, not only lists."""

    @pytest.mark.parametrize("sort", ALL_SORTS, ids=_ids)
    def test_sorts_array_in_place(self, sort):
        np = pytest.importorskip("numpy")
        array = np.array([5, 3, 9, 1, 3, 0], dtype=np.int64)
        sort(array)
        np.testing.assert_array_equal(array, [0, 1, 3, 3, 5, 9])
