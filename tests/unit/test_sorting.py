from __future__ import annotations

from collections import Counter
from operator import attrgetter

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from sortbench.algorithms.sorting import quick_sort
from sortbench.domain.models import Record
from sortbench.domain.ordering import BY_AUTHOR, KeyOrdering

BY_VALUE = KeyOrdering(lambda value: value, name="value")
DUPLICATE_HEAVY_SIZE = 1500

authors = st.text(alphabet="ABCDE", min_size=0, max_size=3)
records = st.builds(
    Record,
    author=authors,
    title=st.text(alphabet="xyz", max_size=2),
    year=st.integers(1970, 2019),
    pages=st.integers(1, 999),
)


def _keys(items: list[Record]) -> list[str]:
    return [item.author for item in items]


def test_quick_sort_orders_example_library(library):
    quick_sort(library, BY_AUTHOR)
    assert _keys(library) == ["Adams", "Bell", "Bell"]


@pytest.mark.parametrize(
    "values",
    [
        [2, 1, 3],
        [1, 2, 0],
        [3, 2, 1],
        [5, 1, 4, 1, 5, 9, 2, 6, 5, 3, 5],
        [0, 0, 0, 0],
        [1, 0],
    ],
)
def test_quick_sort_small_inputs(values):
    expected = sorted(values)
    quick_sort(values, BY_VALUE)
    assert values == expected


def test_quick_sort_empty_and_single_are_noops():
    empty: list[int] = []
    quick_sort(empty, BY_VALUE)
    assert empty == []

    single = [42]
    quick_sort(single, BY_VALUE)
    assert single == [42]


def test_quick_sort_only_touches_first_n_elements():
    values = [4, 3, 2, 1, 0, -1]
    quick_sort(values, BY_VALUE, n=4)
    assert values == [1, 2, 3, 4, 0, -1]


def test_quick_sort_n_zero_is_noop():
    values = [3, 1, 2]
    quick_sort(values, BY_VALUE, n=0)
    assert values == [3, 1, 2]


@pytest.mark.parametrize("n", [-1, 4])
def test_quick_sort_rejects_out_of_range_n(n):
    with pytest.raises(ValueError):
        quick_sort([3, 1, 2], BY_VALUE, n=n)


def test_quick_sort_handles_duplicate_heavy_input_without_recursion_error():
    values = [7] * DUPLICATE_HEAVY_SIZE + [1, 9]
    quick_sort(values, BY_VALUE)
    assert values[0] == 1
    assert values[-1] == 9
    assert values[1:-1] == [7] * DUPLICATE_HEAVY_SIZE


@settings(max_examples=200, deadline=None)
@given(st.lists(records, max_size=60))
def test_quick_sort_result_is_ordered(items):
    quick_sort(items, BY_AUTHOR)
    keys = _keys(items)
    assert all(left <= right for left, right in zip(keys, keys[1:]))


@settings(max_examples=200, deadline=None)
@given(st.lists(records, max_size=60))
def test_quick_sort_is_a_permutation(items):
    before = Counter(items)
    quick_sort(items, BY_AUTHOR)
    assert Counter(items) == before


@settings(max_examples=100, deadline=None)
@given(st.lists(records, max_size=60))
def test_quick_sort_is_idempotent_on_keys(items):
    quick_sort(items, BY_AUTHOR)
    once = _keys(items)
    quick_sort(items, BY_AUTHOR)
    assert _keys(items) == once


@settings(max_examples=100, deadline=None)
@given(st.lists(st.integers(-50, 50), max_size=80))
def test_quick_sort_matches_builtin_sorted_for_integers(values):
    expected = sorted(values)
    quick_sort(values, BY_VALUE)
    assert values == expected


def test_quick_sort_uses_only_the_given_ordering():
    items = [Record(author="b", year=1), Record(author="a", year=3), Record(author="c", year=2)]
    quick_sort(items, KeyOrdering(attrgetter("year"), name="year"))
    assert [item.year for item in items] == [1, 2, 3]
