import itertools

import pytest

from ngram_search.ranker import keys_only, order_ties, rank


def test_sorted_by_count_descending():
    assert rank({"a": 1, "b": 3, "c": 2}) == [("b", 3), ("c", 2), ("a", 1)]


def test_zero_counts_dropped():
    assert rank({"a": 0, "b": 1}) == [("b", 1)]
    assert rank({}) == []


def test_ties_use_natural_key_order():
    assert rank({3: 2, 1: 2, 2: 2, 9: 5}) == [(9, 5), (1, 2), (2, 2), (3, 2)]


def test_mixed_key_types_are_deterministic():
    assert rank({"x": 1, 1: 1}) == [(1, 1), ("x", 1)]
    assert rank({1: 1, "x": 1}) == [(1, 1), ("x", 1)]


def test_limit():
    counts = {"a": 3, "b": 2, "c": 1}
    assert rank(counts, limit=2) == [("a", 3), ("b", 2)]
    assert rank(counts, limit=0) == []
    assert rank(counts, limit=-1) == []
    assert rank(counts, limit=10) == [("a", 3), ("b", 2), ("c", 1)]


def test_keys_only():
    assert keys_only([("a", 3), ("b", 1)]) == ["a", "b"]


def test_subset_ordered_keys_use_repr():
    keys = [frozenset({3}), frozenset({1}), frozenset({2})]
    assert order_ties(keys) == [frozenset({1}), frozenset({2}), frozenset({3})]


def test_mixed_numeric_and_unorderable_keys():
    assert order_ties([frozenset(), 1, 10.0]) == [10.0, frozenset(), 1]


def test_numeric_group_uses_natural_order():
    assert order_ties([10.0, 2, True]) == [True, 2, 10.0]


@pytest.mark.parametrize("keys", [
    [frozenset({1}), frozenset({2}), frozenset({3})],
    [1, 10.0, frozenset()],
    [("a", 1), ("a", frozenset()), "a"],
])
def test_rank_ignores_insertion_order(keys):
    orderings = {
        tuple(rank({key: 1 for key in permutation}))
        for permutation in itertools.permutations(keys)
    }
    assert len(orderings) == 1
