"""
Abstract sorting interfaces for sortlab.

Concrete algorithms (insertion, shaker, merge, baseline) implement the
SortAlgorithm protocol so the harness can drive them uniformly. Every algorithm
sorts a caller-owned mutable sequence in place under a strict-less comparator
and returns nothing.
"""

from __future__ import annotations

import abc
from typing import Any, Callable, MutableSequence, Protocol, runtime_checkable

Comparator = Callable[[Any, Any], bool]
"""Strict weak ordering predicate: comp(a, b) is True iff a sorts before b."""


@runtime_checkable
class SortAlgorithm(Protocol):
    """
    Common interface all sorting algorithms must implement.

    Attributes
    ----------
    name : str
        A short machine-friendly identifier used on the CLI.
    description : str
        A human-friendly summary of the approach.
    output_tag : str
        Sub-directory the sorted datasets of this algorithm are written to.
    """

    name: str
    description: str
    output_tag: str

    def sort(self, seq: MutableSequence[Any], comp: Comparator) -> None:
        """
        Reorder `seq` in place so it is non-decreasing under `comp`.

        Parameters
        ----------
        seq : MutableSequence
            Sequence borrowed for the duration of the call.
        comp : Comparator
            Strict-less predicate.
        """
        ...


class AbstractSortAlgorithm(abc.ABC):
    """
    Optional ABC helper for class-based implementations.

    Subclasses set `name`, `description` and `output_tag` and implement `sort`.
    """

    name: str
    description: str
    output_tag: str

    @abc.abstractmethod
    def sort(self, seq: MutableSequence[Any], comp: Comparator) -> None:  # pragma: no cover - interface only
        """Sort the sequence in place."""
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


__all__ = [
    "Comparator",
    "SortAlgorithm",
    "AbstractSortAlgorithm",
]
