"""
Domain models for sortlab.

Defines the personnel record being sorted and the timing measurements the
harness produces for every (algorithm, dataset) run.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from pydantic import BaseModel, Field


class Record(BaseModel):
    """
    One personnel entry from a dataset line.

    Records are ordered by (unit, full_name, salary). Sorting only moves
    records around; their fields are never mutated.
    """

    full_name: str = Field(..., description="Full name of the person.")
    job: str = Field(..., description="Job title.")
    unit: str = Field(..., description="Organisational unit.")
    salary: int = Field(..., description="Salary; non-negative by convention, not enforced.")

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "arbitrary_types_allowed": False,
    }

    def sort_key(self) -> Tuple[str, str, int]:
        return (self.unit, self.full_name, self.salary)

    def __lt__(self, other: "Record") -> bool:
        return self.sort_key() < other.sort_key()

    def __gt__(self, other: "Record") -> bool:
        return other.sort_key() < self.sort_key()

    def __le__(self, other: "Record") -> bool:
        return not other.sort_key() < self.sort_key()

    def __ge__(self, other: "Record") -> bool:
        return not self.sort_key() < other.sort_key()


@dataclass(frozen=True)
class TimingSample:
    """A single measurement: how long one sort of one dataset took."""

    size: int
    elapsed_seconds: float
    dataset_id: int
    peak_rss_bytes: Optional[int] = None


@dataclass
class TimingSeries:
    """
    Ordered timing samples of one algorithm.

    `sizes` and `times` are index-aligned views over the samples, suitable for
    plotting directly.
    """

    algorithm: str
    samples: List[TimingSample] = field(default_factory=list)

    def append(self, sample: TimingSample) -> None:
        self.samples.append(sample)

    @property
    def sizes(self) -> List[int]:
        return [s.size for s in self.samples]

    @property
    def times(self) -> List[float]:
        return [s.elapsed_seconds for s in self.samples]

    def as_pair(self) -> Tuple[List[int], List[float]]:
        return self.sizes, self.times

    def __len__(self) -> int:
        return len(self.samples)


__all__ = ["Record", "TimingSample", "TimingSeries"]
