"""
Sorting algorithms package for sortlab.

This module re-exports the abstract interfaces, the concrete algorithm classes
and their plain-function forms so downstream code can import from
`sortlab.algorithms` directly.
"""

from sortlab.algorithms.abstract import AbstractSortAlgorithm, Comparator, SortAlgorithm
from sortlab.algorithms.baseline import BaselineSort, baseline_sort
from sortlab.algorithms.insertion import InsertionSort, insertion_sort
from sortlab.algorithms.merge import MergeSort, merge, merge_sort
from sortlab.algorithms.shaker import ShakerSort, shaker_sort

__all__ = [
    # Abstracts
    "AbstractSortAlgorithm",
    "Comparator",
    "SortAlgorithm",
    # Concrete algorithms
    "BaselineSort",
    "InsertionSort",
    "MergeSort",
    "ShakerSort",
    # Functions
    "baseline_sort",
    "insertion_sort",
    "merge",
    "merge_sort",
    "shaker_sort",
]
