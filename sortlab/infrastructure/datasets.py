"""
Dataset source and sink for sortlab.

Datasets are header-less, comma-delimited files with the columns
`full_name,job,unit,salary`, one record per line, named `dataset_<id>.csv`.
The source parses and validates lines into Records; the sink writes sorted
sequences back out under a per-algorithm tag directory.

Every I/O or parse failure is raised as DatasetLoadError / DatasetWriteError
chained to the underlying exception; nothing here retries or skips data.
"""

from __future__ import annotations

import csv
from pathlib import Path
from typing import Iterable, List, Protocol, Sequence, runtime_checkable

from sortlab.domain.models import Record
from sortlab.errors import DatasetLoadError, DatasetWriteError
from sortlab.utils.logging import get_logger

log = get_logger(__name__)

DEFAULT_PATTERN = "dataset_{id}.csv"
FIELD_COUNT = 4


@runtime_checkable
class DatasetSource(Protocol):
    """Provides the sortable sequence behind a dataset identifier."""

    def load(self, dataset_id: int) -> List[Record]:
        ...


@runtime_checkable
class DatasetSink(Protocol):
    """Durably stores a sorted sequence tagged with the algorithm that produced it."""

    def store(self, tag: str, dataset_id: int, records: Sequence[Record]) -> None:
        ...


def dataset_filename(dataset_id: int, pattern: str = DEFAULT_PATTERN) -> str:
    return pattern.format(id=dataset_id)


def parse_row(row: Sequence[str], path: Path, line_no: int) -> Record:
    """Build a Record from one split CSV row, raising DatasetLoadError if malformed."""
    if len(row) != FIELD_COUNT:
        raise DatasetLoadError(
            f"{path}:{line_no}: expected {FIELD_COUNT} columns, got {len(row)}"
        )
    full_name, job, unit, salary_raw = row
    try:
        salary = int(salary_raw)
    except ValueError as exc:
        raise DatasetLoadError(f"{path}:{line_no}: non-numeric salary {salary_raw!r}") from exc
    return Record(full_name=full_name, job=job, unit=unit, salary=salary)


def read_records(path: Path) -> List[Record]:
    """Read every record of a dataset file."""
    records: List[Record] = []
    try:
        with path.open("r", newline="", encoding="utf-8") as f:
            for line_no, row in enumerate(csv.reader(f), start=1):
                if not row:
                    continue
                records.append(parse_row(row, path, line_no))
    except OSError as exc:
        raise DatasetLoadError(f"Couldn't open dataset {path}: {exc}") from exc
    except (UnicodeDecodeError, csv.Error) as exc:
        raise DatasetLoadError(f"{path}: malformed dataset: {exc}") from exc
    return records


def write_records(path: Path, records: Iterable[Record]) -> int:
    """Write records to `path`, returning how many were written."""
    written = 0
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f, lineterminator="\n")
            for record in records:
                writer.writerow([record.full_name, record.job, record.unit, record.salary])
                written += 1
    except OSError as exc:
        raise DatasetWriteError(f"Couldn't write dataset {path}: {exc}") from exc
    return written


class CsvDatasetSource:
    """Loads `input_dir/dataset_<id>.csv` files."""

    def __init__(self, input_dir: Path | str, pattern: str = DEFAULT_PATTERN) -> None:
        self.input_dir = Path(input_dir)
        self.pattern = pattern

    def path_for(self, dataset_id: int) -> Path:
        return self.input_dir / dataset_filename(dataset_id, self.pattern)

    def load(self, dataset_id: int) -> List[Record]:
        path = self.path_for(dataset_id)
        records = read_records(path)
        log.debug("Dataset loaded", extra={"dataset_id": dataset_id, "path": str(path), "rows": len(records)})
        return records


class CsvDatasetSink:
    """Stores sorted datasets as `output_dir/<tag>/dataset_<id>.csv`."""

    def __init__(self, output_dir: Path | str, pattern: str = DEFAULT_PATTERN) -> None:
        self.output_dir = Path(output_dir)
        self.pattern = pattern

    def path_for(self, tag: str, dataset_id: int) -> Path:
        return self.output_dir / tag / dataset_filename(dataset_id, self.pattern)

    def store(self, tag: str, dataset_id: int, records: Sequence[Record]) -> None:
        path = self.path_for(tag, dataset_id)
        written = write_records(path, records)
        log.debug("Dataset stored", extra={"tag": tag, "dataset_id": dataset_id, "path": str(path), "rows": written})


__all__ = [
    "DatasetSource",
    "DatasetSink",
    "CsvDatasetSource",
    "CsvDatasetSink",
    "dataset_filename",
    "parse_row",
    "read_records",
    "write_records",
]
