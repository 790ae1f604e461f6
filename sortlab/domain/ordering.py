"""
Ordering relations over personnel records.

`less` is the strict weak ordering every algorithm is driven by; the other
three relations are derived from it so they can never disagree.
"""

from __future__ import annotations

from sortlab.domain.models import Record


def less(a: Record, b: Record) -> bool:
    """True iff `a` strictly precedes `b` by (unit, full_name, salary)."""
    return a.sort_key() < b.sort_key()


def greater(a: Record, b: Record) -> bool:
    return less(b, a)


def less_or_equal(a: Record, b: Record) -> bool:
    return not greater(a, b)


def greater_or_equal(a: Record, b: Record) -> bool:
    return not less(a, b)


__all__ = ["less", "greater", "less_or_equal", "greater_or_equal"]
