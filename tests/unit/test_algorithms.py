from __future__ import annotations

import random
from collections import Counter, UserList

import pytest

from sortlab.algorithms import (
    BaselineSort,
    InsertionSort,
    MergeSort,
    ShakerSort,
    SortAlgorithm,
    baseline_sort,
    insertion_sort,
    merge_sort,
    shaker_sort,
)
from sortlab.domain.ordering import less

ALL_SORTS = [insertion_sort, shaker_sort, merge_sort, baseline_sort]
SORT_IDS = ["insertion", "shaker", "merge", "baseline"]

parametrize_sorts = pytest.mark.parametrize("sort_fn", ALL_SORTS, ids=SORT_IDS)


def _is_non_decreasing(seq, comp) -> bool:
    return all(not comp(y, x) for x, y in zip(seq, seq[1:]))


@parametrize_sorts
@pytest.mark.parametrize(
    "data",
    [
        [],
        [1],
        [2, 1],
        [1, 2],
        [5, 3, 1, 4, 2],
        [3, 3, 3],
        [9, 8, 7, 6, 5, 4, 3, 2, 1, 0],
        [1, 3, 2, 3, 1, 2],
    ],
    ids=["empty", "single", "pair-desc", "pair-asc", "mixed", "all-equal", "reversed", "dups"],
)
def test_sorts_small_inputs(sort_fn, data):
    seq = list(data)
    sort_fn(seq)
    assert seq == sorted(data)


@parametrize_sorts
@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_sorts_random_integers(sort_fn, seed):
    rng = random.Random(seed)
    data = [rng.randint(-50, 50) for _ in range(rng.randint(0, 120))]
    seq = list(data)

    sort_fn(seq)

    assert seq == sorted(data)


@parametrize_sorts
def test_records_are_sorted_and_preserved(sort_fn, records_of):
    data = records_of(80, 5)
    seq = list(data)

    sort_fn(seq, less)

    assert _is_non_decreasing(seq, less)
    assert Counter(seq) == Counter(data)
    assert len(seq) == len(data)


@parametrize_sorts
def test_sorting_sorted_input_is_idempotent(sort_fn, records_of):
    seq = records_of(40, 9)
    sort_fn(seq, less)
    once = list(seq)

    sort_fn(seq, less)

    assert [r.sort_key() for r in seq] == [r.sort_key() for r in once]


@pytest.mark.parametrize(
    "sort_fn", [insertion_sort, shaker_sort, baseline_sort], ids=["insertion", "shaker", "baseline"]
)
def test_sorted_input_is_left_untouched(sort_fn, records_of):
    seq = records_of(40, 9)
    sort_fn(seq, less)
    once = list(seq)

    sort_fn(seq, less)

    assert all(a is b for a, b in zip(seq, once))


@pytest.mark.parametrize("sort_fn", [insertion_sort, shaker_sort], ids=["insertion", "shaker"])
def test_adjacent_sorts_keep_exact_order_on_sorted_input(sort_fn, make_record):
    # Equivalent records with distinct identities must not be reordered.
    a = make_record("A", "first", "U1", 1)
    b = make_record("A", "second", "U1", 1)
    c = make_record("B", "x", "U1", 1)
    seq = [a, b, c]

    sort_fn(seq, less)

    assert [r.job for r in seq] == ["first", "second", "x"]


@parametrize_sorts
def test_custom_comparator_reverses_order(sort_fn):
    seq = [4, 1, 3, 5, 2]
    sort_fn(seq, lambda a, b: a > b)
    assert seq == [5, 4, 3, 2, 1]


@parametrize_sorts
def test_works_on_non_list_mutable_sequence(sort_fn):
    seq = UserList([3, 1, 2])
    sort_fn(seq)
    assert list(seq) == [1, 2, 3]


def test_unit_decides_order_of_two_records(make_record):
    a = make_record("A", "x", "U2", 5)
    b = make_record("B", "y", "U1", 9)
    for sort_fn in ALL_SORTS:
        seq = [a, b]
        sort_fn(seq, less)
        assert seq == [b, a]


@pytest.mark.parametrize(
    "algorithm, name, tag",
    [
        (InsertionSort(), "insertion_sort", "insertion"),
        (ShakerSort(), "shaker_sort", "shaker"),
        (MergeSort(), "merge_sort", "merge"),
        (BaselineSort(), "baseline_sort", "sort"),
    ],
)
def test_algorithm_classes_follow_protocol(algorithm, name, tag):
    assert isinstance(algorithm, SortAlgorithm)
    assert algorithm.name == name
    assert algorithm.output_tag == tag
    assert algorithm.description

    seq = [3, 1, 2]
    algorithm.sort(seq, less_than)
    assert seq == [1, 2, 3]


def less_than(a, b):
    return a < b
