"""
Exception hierarchy for sortlab.

All failures surfaced by the harness and its collaborators derive from
SortLabError so the CLI can report them uniformly. None of them are retried.
"""

from __future__ import annotations


class SortLabError(Exception):
    """Base class for all sortlab errors."""


class ConfigurationError(SortLabError, ValueError):
    """Invalid run configuration (unknown algorithm, negative dataset count)."""


class DatasetLoadError(SortLabError):
    """A dataset is missing, unreadable, or malformed."""


class DatasetWriteError(SortLabError):
    """A sorted dataset or output directory could not be written."""


__all__ = [
    "SortLabError",
    "ConfigurationError",
    "DatasetLoadError",
    "DatasetWriteError",
]
