"""
Top-down merge sort.

The range is halved recursively and the sorted halves are merged through a
temporary buffer that is copied back and dropped after each merge, so peak
auxiliary space stays O(n).

Tie-break: `merge` takes from the left half only when the left element is
strictly less than the right one. Equivalent elements are therefore taken from
the right half first. This is deliberate and differs from the usual stable,
left-biased merge.
"""

from __future__ import annotations

import operator
from typing import Any, List, MutableSequence, Optional

from sortlab.algorithms.abstract import AbstractSortAlgorithm, Comparator


def merge(
    seq: MutableSequence[Any],
    first: int,
    mid: int,
    last: int,
    comp: Comparator = operator.lt,
) -> None:
    """
    Merge the sorted runs seq[first:mid] and seq[mid:last] in place.

    Parameters
    ----------
    seq : MutableSequence
        Sequence holding both runs back to back.
    first, mid, last : int
        Run boundaries; the left run is [first, mid), the right run [mid, last).
    comp : Comparator
        Strict-less predicate. Ties are taken from the right run.
    """
    result: List[Any] = []
    i, j = first, mid
    while i < mid and j < last:
        if comp(seq[i], seq[j]):
            result.append(seq[i])
            i += 1
        else:
            result.append(seq[j])
            j += 1

    result.extend(seq[k] for k in range(i, mid))
    result.extend(seq[k] for k in range(j, last))

    for offset, item in enumerate(result):
        seq[first + offset] = item


def merge_sort(
    seq: MutableSequence[Any],
    comp: Comparator = operator.lt,
    first: int = 0,
    last: Optional[int] = None,
) -> None:
    """Sort seq[first:last] in place (the whole sequence by default)."""
    if last is None:
        last = len(seq)
    if last - first <= 1:
        return

    mid = first + (last - first) // 2
    merge_sort(seq, comp, first, mid)
    merge_sort(seq, comp, mid, last)
    merge(seq, first, mid, last, comp)


class MergeSort(AbstractSortAlgorithm):
    name: str = "merge_sort"
    description: str = "Recursive top-down merge sort (O(n log n), O(n) buffer)."
    output_tag: str = "merge"

    def sort(self, seq: MutableSequence[Any], comp: Comparator = operator.lt) -> None:
        merge_sort(seq, comp)


__all__ = ["MergeSort", "merge", "merge_sort"]
