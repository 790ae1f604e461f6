"""
Baseline (reference) sort backed by the interpreter's built-in Timsort.

Plays the role std::sort plays in a C++ benchmark: the optimised library
sort every hand-written algorithm is measured against.
"""

from __future__ import annotations

import operator
from functools import cmp_to_key
from typing import Any, Callable, MutableSequence

from sortlab.algorithms.abstract import AbstractSortAlgorithm, Comparator


def _three_way(comp: Comparator) -> Callable[[Any, Any], int]:
    """Adapt a strict-less predicate to a cmp-style function."""

    def compare(a: Any, b: Any) -> int:
        if comp(a, b):
            return -1
        if comp(b, a):
            return 1
        return 0

    return compare


def baseline_sort(seq: MutableSequence[Any], comp: Comparator = operator.lt) -> None:
    """Sort `seq` in place with the library sort under `comp`."""
    key = cmp_to_key(_three_way(comp))
    if isinstance(seq, list):
        seq.sort(key=key)
        return

    for index, item in enumerate(sorted(seq, key=key)):
        seq[index] = item


class BaselineSort(AbstractSortAlgorithm):
    name: str = "baseline_sort"
    description: str = "Built-in Timsort (list.sort) used as the performance reference."
    output_tag: str = "sort"

    def sort(self, seq: MutableSequence[Any], comp: Comparator = operator.lt) -> None:
        baseline_sort(seq, comp)


__all__ = ["BaselineSort", "baseline_sort"]
