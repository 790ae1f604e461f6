"""
Shaker (cocktail) sort: bubble sort alternating direction every sweep.

The active window [left_bound, right_bound] shrinks from both ends: a forward
sweep carries the largest element to the right, a backward sweep carries the
smallest to the left. A sweep without swaps proves the window is ordered and
ends the sort, so sorted input costs a single forward pass.
"""

from __future__ import annotations

import operator
from typing import Any, MutableSequence

from sortlab.algorithms.abstract import AbstractSortAlgorithm, Comparator


def shaker_sort(seq: MutableSequence[Any], comp: Comparator = operator.lt) -> None:
    """Sort `seq` in place under the strict-less predicate `comp`."""
    left_bound = 0
    right_bound = len(seq) - 1

    while left_bound <= right_bound:
        swapped = False
        for i in range(left_bound, right_bound):
            if comp(seq[i + 1], seq[i]):
                seq[i], seq[i + 1] = seq[i + 1], seq[i]
                swapped = True
        left_bound += 1
        if not swapped:
            break

        # Compares down to index left_bound - 1, the slot the minimum belongs in.
        swapped = False
        for i in range(right_bound, left_bound - 1, -1):
            if comp(seq[i], seq[i - 1]):
                seq[i - 1], seq[i] = seq[i], seq[i - 1]
                swapped = True
        right_bound -= 1
        if not swapped:
            break


class ShakerSort(AbstractSortAlgorithm):
    name: str = "shaker_sort"
    description: str = "Bidirectional bubble sort with early exit on a swap-free sweep."
    output_tag: str = "shaker"

    def sort(self, seq: MutableSequence[Any], comp: Comparator = operator.lt) -> None:
        shaker_sort(seq, comp)


__all__ = ["ShakerSort", "shaker_sort"]
