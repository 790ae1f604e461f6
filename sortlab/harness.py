"""
Benchmark harness: times sorting algorithms over datasets of increasing size.

Usage (example from CLI):
    from sortlab.harness import RunConfig, run_benchmarks

    series = run_benchmarks(RunConfig(algorithm_names=["merge_sort"], dataset_counts={"merge_sort": 3}))
    sizes, times = series["merge_sort"].as_pair()

For each algorithm, datasets 1..N are loaded, sorted in place under a single
perf_counter timer, and written back sorted. Only the sort call sits between
the two clock reads; loading and persisting happen outside the timed region.

Outputs are saved to `results/` by default:
- `results/latest.json` (last run)
- `results/run-<timestamp>.json` (timestamped archive)
"""

from __future__ import annotations

import json
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Mapping, Optional

from sortlab.algorithms.abstract import Comparator, SortAlgorithm
from sortlab.algorithms.baseline import BaselineSort
from sortlab.algorithms.insertion import InsertionSort
from sortlab.algorithms.merge import MergeSort
from sortlab.algorithms.shaker import ShakerSort
from sortlab.config import get_settings
from sortlab.domain.models import TimingSample, TimingSeries
from sortlab.domain.ordering import less
from sortlab.errors import ConfigurationError
from sortlab.infrastructure.datasets import CsvDatasetSink, CsvDatasetSource, DatasetSink, DatasetSource
from sortlab.infrastructure.workspace import prepare_workspace
from sortlab.utils.logging import get_logger
from sortlab.utils.profiler import profile_block

log = get_logger(__name__)

# Names accepted in addition to the registry keys.
_ALIASES: Dict[str, str] = {"std::sort": "baseline_sort"}


def _round_float(value: float, decimals: int = 6) -> float:
    """Round a float to specified decimal places for human-readable output."""
    return round(value, decimals)


def _algorithm_factories() -> Dict[str, Callable[[], SortAlgorithm]]:
    """Registry of available algorithms."""
    return {
        "insertion_sort": lambda: InsertionSort(),
        "shaker_sort": lambda: ShakerSort(),
        "merge_sort": lambda: MergeSort(),
        "baseline_sort": lambda: BaselineSort(),
    }


def available_algorithms() -> List[str]:
    """List available algorithm names."""
    return sorted(_algorithm_factories().keys())


def _canonical_name(name: str) -> str:
    return _ALIASES.get(name, name)


def resolve_algorithm(name: str) -> SortAlgorithm:
    """Instantiate the algorithm registered under `name` (or one of its aliases)."""
    factories = _algorithm_factories()
    canonical = _canonical_name(name)
    if canonical not in factories:
        raise ConfigurationError(
            f"Unknown algorithm '{name}'. Available: {', '.join(sorted(factories))}"
        )
    return factories[canonical]()


def _timed_sort(
    algorithm: SortAlgorithm,
    records: list,
    comparator: Comparator,
    profile_memory: bool,
) -> tuple[float, Optional[int]]:
    """Run one sort, returning (elapsed seconds, peak RSS or None)."""
    if not profile_memory:
        start = time.perf_counter()
        algorithm.sort(records, comparator)
        return time.perf_counter() - start, None

    with profile_block(algorithm.name, enable_tracemalloc=False) as stats:
        start = time.perf_counter()
        algorithm.sort(records, comparator)
        elapsed = time.perf_counter() - start
    return elapsed, stats.peak_rss_bytes


def measure_algorithm(
    algorithm_name: str,
    dataset_count: int,
    source: DatasetSource,
    sink: DatasetSink,
    comparator: Comparator = less,
    profile_memory: bool = False,
) -> TimingSeries:
    """
    Time one algorithm over datasets 1..dataset_count.

    Parameters
    ----------
    algorithm_name : str
        One of `available_algorithms()` (or the `std::sort` alias).
    dataset_count : int
        Number of datasets to measure; 0 yields an empty series.
    source : DatasetSource
        Provides the records of each dataset.
    sink : DatasetSink
        Receives every sorted dataset under the algorithm's output tag.
    comparator : Comparator
        Strict-less predicate; the record ordering by default.
    profile_memory : bool
        Also record peak RSS of each sort (psutil sampling).

    Returns
    -------
    TimingSeries
        One sample per dataset, in dataset order.

    Raises
    ------
    ConfigurationError
        Unknown algorithm or negative dataset count; raised before any dataset is loaded.
    DatasetLoadError, DatasetWriteError
        Propagated from the collaborators; the run stops at the failing dataset.
    """
    algorithm = resolve_algorithm(algorithm_name)
    if dataset_count < 0:
        raise ConfigurationError(f"dataset_count must be >= 0, got {dataset_count}")

    series = TimingSeries(algorithm=algorithm.name)
    for dataset_id in range(1, dataset_count + 1):
        records = source.load(dataset_id)
        elapsed, peak_rss = _timed_sort(algorithm, records, comparator, profile_memory)
        series.append(
            TimingSample(
                size=len(records),
                elapsed_seconds=elapsed,
                dataset_id=dataset_id,
                peak_rss_bytes=peak_rss,
            )
        )
        sink.store(algorithm.output_tag, dataset_id, records)

        log.info(
            f"{algorithm.name}: dataset_n={dataset_id} size={len(records)} time={elapsed:.6f}",
            extra={
                "algorithm": algorithm.name,
                "dataset_id": dataset_id,
                "size": len(records),
                "elapsed_seconds": elapsed,
            },
        )

    return series


@dataclass(frozen=True)
class RunConfig:
    """
    Parameters of a multi-algorithm benchmark run.

    `None` fields fall back to `Settings`.
    """

    algorithm_names: Optional[Iterable[str]] = None
    dataset_counts: Mapping[str, int] = field(default_factory=dict)
    input_dir: Optional[Path | str] = None
    output_dir: Optional[Path | str] = None
    results_dir: Optional[Path | str] = None
    persist: bool = True
    prepare_workspace: bool = True
    profile_memory: Optional[bool] = None


def _expand_names(names: Optional[Iterable[str]]) -> List[str]:
    expanded = list(names) if names is not None else ["all"]
    if len(expanded) == 1 and expanded[0] == "all":
        return list(_algorithm_factories())
    return [_canonical_name(name) for name in expanded]


def series_to_payload(series: TimingSeries) -> dict:
    """JSON-serialisable view of a series, used by the archive and the reporter."""
    total = sum(series.times)
    return {
        "algorithm": series.algorithm,
        "datasets": len(series),
        "sizes": series.sizes,
        "times": [_round_float(t) for t in series.times],
        "total_seconds": _round_float(total),
        "max_size": max(series.sizes, default=0),
        "peak_rss_bytes": [s.peak_rss_bytes for s in series.samples],
    }


def _persist_results(payload: dict, results_dir: Path) -> None:
    results_dir.mkdir(parents=True, exist_ok=True)
    latest_path = results_dir / "latest.json"
    timestamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%SZ")
    archive_path = results_dir / f"run-{timestamp}.json"

    with latest_path.open("w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2, sort_keys=True)
    with archive_path.open("w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2, sort_keys=True)

    log.info("Results persisted", extra={"latest": str(latest_path), "archive": str(archive_path)})


def run_benchmarks(config: RunConfig | None = None) -> Dict[str, TimingSeries]:
    """
    Measure every selected algorithm in turn and optionally persist the results.

    Parameters
    ----------
    config : RunConfig | None
        Run parameters; defaults to all algorithms with settings-derived counts.

    Returns
    -------
    Dict[str, TimingSeries]
        Series keyed by algorithm name, in execution order.
    """
    config = config or RunConfig()
    settings = get_settings()

    names = _expand_names(config.algorithm_names)
    algorithms = [resolve_algorithm(name) for name in names]

    requested_counts = {_canonical_name(name): count for name, count in config.dataset_counts.items()}
    default_counts = settings.dataset_counts()
    counts: Dict[str, int] = {}
    for algorithm in algorithms:
        count = requested_counts.get(algorithm.name, default_counts[algorithm.name])
        if count < 0:
            raise ConfigurationError(f"dataset count for {algorithm.name} must be >= 0, got {count}")
        counts[algorithm.name] = count

    input_dir = Path(config.input_dir or settings.input_dir)
    output_dir = Path(config.output_dir or settings.output_dir)
    profile_memory = settings.profile_memory if config.profile_memory is None else config.profile_memory

    if config.prepare_workspace:
        prepare_workspace(
            output_dir,
            tags=[algorithm.output_tag for algorithm in algorithms],
            plot_formats=settings.chart_formats,
        )

    source = CsvDatasetSource(input_dir)
    sink = CsvDatasetSink(output_dir)

    results: Dict[str, TimingSeries] = {}
    for algorithm in algorithms:
        log.info(f"{'=' * 60}")
        log.info(f"[ALGORITHM] {algorithm.name.upper()}", extra={"algorithm": algorithm.name})
        log.info(f"{'=' * 60}")
        results[algorithm.name] = measure_algorithm(
            algorithm.name,
            counts[algorithm.name],
            source,
            sink,
            profile_memory=profile_memory,
        )
        log.info(f"[ALGORITHM COMPLETE] {algorithm.name.upper()}", extra={"algorithm": algorithm.name})

    if config.persist:
        payload = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "algorithms": names,
            "dataset_counts": counts,
            "results": [series_to_payload(s) for s in results.values()],
        }
        _persist_results(payload, Path(config.results_dir or settings.results_dir))

    log.info(
        f"[HARNESS COMPLETE] All {len(names)} algorithm(s) measured",
        extra={"algorithms": names, "total_algorithms": len(names)},
    )
    return results


__all__ = [
    "RunConfig",
    "available_algorithms",
    "measure_algorithm",
    "resolve_algorithm",
    "run_benchmarks",
    "series_to_payload",
]
