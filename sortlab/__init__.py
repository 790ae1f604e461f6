"""
sortlab - Benchmarking suite for comparison-based sorting algorithms.

This package measures how the running time of several sorting strategies grows
with the size of personnel record datasets, including:

- Insertion sort
- Shaker (cocktail) sort
- Top-down merge sort
- The built-in library sort as a baseline

Every algorithm sorts a caller-owned sequence in place under a strict-less
comparator; the harness times one sort per dataset and produces index-aligned
(size, seconds) series that are charted and archived as JSON.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from sortlab.algorithms import (
    AbstractSortAlgorithm,
    SortAlgorithm,
    baseline_sort,
    insertion_sort,
    merge,
    merge_sort,
    shaker_sort,
)
from sortlab.config import Settings, get_settings
from sortlab.domain import Record, TimingSample, TimingSeries, less
from sortlab.errors import ConfigurationError, DatasetLoadError, DatasetWriteError, SortLabError
from sortlab.harness import RunConfig, available_algorithms, measure_algorithm, run_benchmarks
from sortlab.utils.logging import configure_logging, get_logger
from sortlab.utils.profiler import ProfileStats, profile_block, profile_function

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Domain
    "Record",
    "TimingSample",
    "TimingSeries",
    "less",
    # Algorithms
    "AbstractSortAlgorithm",
    "SortAlgorithm",
    "baseline_sort",
    "insertion_sort",
    "merge",
    "merge_sort",
    "shaker_sort",
    # Harness
    "RunConfig",
    "available_algorithms",
    "measure_algorithm",
    "run_benchmarks",
    # Errors
    "SortLabError",
    "ConfigurationError",
    "DatasetLoadError",
    "DatasetWriteError",
    # Logging
    "configure_logging",
    "get_logger",
    # Profiling
    "ProfileStats",
    "profile_block",
    "profile_function",
]
