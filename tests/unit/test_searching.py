from __future__ import annotations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from sortbench.algorithms.searching import binary_search, linear_search
from sortbench.algorithms.sorting import quick_sort
from sortbench.domain.models import Record
from sortbench.domain.ordering import BY_AUTHOR, KeyOrdering

BY_VALUE = KeyOrdering(lambda value: value, name="value")

authors = st.text(alphabet="ABC", min_size=0, max_size=2)
records = st.builds(Record, author=authors, year=st.integers(1970, 2019))


def test_linear_search_example(library):
    target = Record(author="Bell")
    assert linear_search(library, target, BY_AUTHOR) == [0, 2]


def test_binary_search_example_after_sort(library):
    target = Record(author="Bell")
    quick_sort(library, BY_AUTHOR)
    assert binary_search(library, target, BY_AUTHOR) == [1, 2]


def test_searches_return_empty_for_absent_key(library):
    missing = Record(author="")
    assert linear_search(library, missing, BY_AUTHOR) == []
    quick_sort(library, BY_AUTHOR)
    assert binary_search(library, missing, BY_AUTHOR) == []


def test_searches_on_empty_sequence():
    target = Record(author="Bell")
    assert linear_search([], target, BY_AUTHOR) == []
    assert binary_search([], target, BY_AUTHOR) == []


def test_searches_with_n_zero_ignore_contents(library):
    target = Record(author="Bell")
    assert linear_search(library, target, BY_AUTHOR, n=0) == []
    assert binary_search(library, target, BY_AUTHOR, n=0) == []


def test_linear_search_respects_n(library):
    target = Record(author="Bell")
    assert linear_search(library, target, BY_AUTHOR, n=2) == [0]


def test_binary_search_respects_n():
    values = [1, 2, 2, 3, 2]
    assert binary_search(values, 2, BY_VALUE, n=4) == [1, 2]


@pytest.mark.parametrize(
    "values, target, expected",
    [
        ([5, 5, 5, 5], 5, [0, 1, 2, 3]),
        ([1, 5, 5, 5], 5, [1, 2, 3]),
        ([5, 5, 5, 9], 5, [0, 1, 2]),
        ([1, 2, 3, 4, 5], 1, [0]),
        ([1, 2, 3, 4, 5], 5, [4]),
        ([1, 2, 3, 4, 5], 0, []),
        ([1, 2, 3, 4, 5], 6, []),
        ([7], 7, [0]),
    ],
)
def test_binary_search_block_edges(values, target, expected):
    assert binary_search(values, target, BY_VALUE) == expected


@pytest.mark.parametrize("n", [-1, 10])
def test_searches_reject_out_of_range_n(n):
    with pytest.raises(ValueError):
        linear_search([1, 2], 1, BY_VALUE, n=n)
    with pytest.raises(ValueError):
        binary_search([1, 2], 1, BY_VALUE, n=n)


@settings(max_examples=200, deadline=None)
@given(st.lists(records, max_size=50), authors)
def test_linear_search_finds_exactly_the_matching_indices(items, key):
    target = Record(author=key)
    expected = [i for i, item in enumerate(items) if item.author == key]
    assert linear_search(items, target, BY_AUTHOR) == expected


@settings(max_examples=200, deadline=None)
@given(st.lists(records, max_size=50), authors)
def test_binary_search_agrees_with_linear_on_sorted_data(items, key):
    target = Record(author=key)
    quick_sort(items, BY_AUTHOR)
    found = binary_search(items, target, BY_AUTHOR)
    assert found == linear_search(items, target, BY_AUTHOR)
    if found:
        # one contiguous block
        assert found == list(range(found[0], found[0] + len(found)))
