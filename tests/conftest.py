"""
Pytest configuration for sortlab.

Provides fixtures for:
- Record construction and randomised record lists
- On-disk dataset directories in the harness CSV format
- In-memory dataset source/sink doubles
- Settings cache isolation
"""

from __future__ import annotations

import random
from pathlib import Path
from typing import Callable, Dict, List, Sequence, Tuple

import pytest

from sortlab.config import get_settings
from sortlab.domain.models import Record
from sortlab.errors import DatasetLoadError
from sortlab.infrastructure.datasets import write_records

UNITS = ["U1", "U2", "U3"]
NAMES = ["Adams", "Baker", "Clark", "Davis"]


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Each test sees settings built from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def make_record() -> Callable[..., Record]:
    def _make(full_name: str = "A", job: str = "x", unit: str = "U1", salary: int = 0) -> Record:
        return Record(full_name=full_name, job=job, unit=unit, salary=salary)

    return _make


def random_records(count: int, seed: int) -> List[Record]:
    """Records drawn from small pools so equal keys occur often."""
    rng = random.Random(seed)
    return [
        Record(
            full_name=rng.choice(NAMES),
            job=f"job{rng.randint(0, 3)}",
            unit=rng.choice(UNITS),
            salary=rng.randint(0, 5),
        )
        for _ in range(count)
    ]


@pytest.fixture
def dataset_dir(tmp_path: Path) -> Path:
    """Three datasets of 10, 20 and 30 records under tmp_path/in."""
    input_dir = tmp_path / "in"
    input_dir.mkdir()
    for dataset_id in (1, 2, 3):
        write_records(input_dir / f"dataset_{dataset_id}.csv", random_records(10 * dataset_id, seed=dataset_id))
    return input_dir


class MemorySource:
    """DatasetSource double serving fixed record lists; records every load."""

    def __init__(self, datasets: Dict[int, Sequence[Record]]) -> None:
        self._datasets = datasets
        self.loaded: List[int] = []

    def load(self, dataset_id: int) -> List[Record]:
        self.loaded.append(dataset_id)
        if dataset_id not in self._datasets:
            raise DatasetLoadError(f"no dataset {dataset_id}")
        return list(self._datasets[dataset_id])


class MemorySink:
    """DatasetSink double keeping a copy of everything stored."""

    def __init__(self) -> None:
        self.stored: List[Tuple[str, int, List[Record]]] = []

    def store(self, tag: str, dataset_id: int, records: Sequence[Record]) -> None:
        self.stored.append((tag, dataset_id, list(records)))


@pytest.fixture
def memory_source() -> MemorySource:
    return MemorySource({i: random_records(5 * i, seed=100 + i) for i in (1, 2, 3)})


@pytest.fixture
def memory_sink() -> MemorySink:
    return MemorySink()


@pytest.fixture
def records_of() -> Callable[[int, int], List[Record]]:
    """Factory fixture: records_of(count, seed) -> random record list."""
    return random_records


@pytest.fixture
def make_source() -> Callable[[Dict[int, Sequence[Record]]], MemorySource]:
    return MemorySource
