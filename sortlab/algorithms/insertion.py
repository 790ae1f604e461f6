"""
Insertion sort.

Each element is walked backward through the already-sorted prefix, swapping
with its neighbour while the neighbour is strictly greater. Quadratic in the
worst case, linear on sorted input, O(1) extra space.
"""

from __future__ import annotations

import operator
from typing import Any, MutableSequence

from sortlab.algorithms.abstract import AbstractSortAlgorithm, Comparator


def insertion_sort(seq: MutableSequence[Any], comp: Comparator = operator.lt) -> None:
    """Sort `seq` in place under the strict-less predicate `comp`."""
    for i in range(1, len(seq)):
        j = i
        while j > 0 and comp(seq[j], seq[j - 1]):
            seq[j - 1], seq[j] = seq[j], seq[j - 1]
            j -= 1


class InsertionSort(AbstractSortAlgorithm):
    name: str = "insertion_sort"
    description: str = "Left-to-right insertion with adjacent swaps (O(n^2), O(1) space)."
    output_tag: str = "insertion"

    def sort(self, seq: MutableSequence[Any], comp: Comparator = operator.lt) -> None:
        insertion_sort(seq, comp)


__all__ = ["InsertionSort", "insertion_sort"]
