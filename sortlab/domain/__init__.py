"""
Domain package for sortlab.

Exports the record model, its ordering relations, and the timing containers
produced by the benchmark harness.
"""

from sortlab.domain.models import Record, TimingSample, TimingSeries
from sortlab.domain.ordering import greater, greater_or_equal, less, less_or_equal

__all__ = [
    "Record",
    "TimingSample",
    "TimingSeries",
    "less",
    "greater",
    "less_or_equal",
    "greater_or_equal",
]
