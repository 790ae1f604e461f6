"""
Profiling utilities for sortlab.

This module provides a context manager and a decorator to measure:
- Wall-clock time (perf_counter)
- CPU usage (psutil)
- Memory usage (RSS via psutil + optional tracemalloc for Python allocations)
- Peak memory via background sampling thread

The harness only wraps a sort in `profile_block` when memory profiling is
requested, and always with tracemalloc disabled: tracemalloc hooks every
allocation and would dominate the timing of the sort being measured.

Usage examples:
    from sortlab.utils.profiler import profile_block

    with profile_block("merge_sort", enable_tracemalloc=False) as stats:
        merge_sort(records)

    print(stats.duration_seconds, stats.peak_rss_bytes)
"""

from __future__ import annotations

import contextlib
import threading
import time
import tracemalloc
from dataclasses import dataclass, field
from typing import Any, Callable, Generator, Optional

import psutil


@dataclass
class ProfileStats:
    """
    Container for profiling measurements.
    """

    label: str
    start_ts: float = field(default=0.0)
    end_ts: float = field(default=0.0)
    duration_seconds: float = field(default=0.0)
    peak_rss_bytes: Optional[int] = field(default=None)
    peak_traced_bytes: Optional[int] = field(default=None)
    cpu_percent: Optional[float] = field(default=None)
    extra: dict[str, Any] = field(default_factory=dict)


@contextlib.contextmanager
def profile_block(
    label: str, sample_interval_ms: int = 50, enable_tracemalloc: bool = True
) -> Generator[ProfileStats, None, None]:
    """
    Context manager to profile a block of code.

    Parameters
    ----------
    label : str
        Human-friendly label for the profiled block.
    sample_interval_ms : int
        Interval in milliseconds for RSS sampling. Lower = more accurate but higher overhead.
    enable_tracemalloc : bool
        Whether to enable tracemalloc for tracking Python-level allocations.

    Notes
    -----
    RSS is sampled by a daemon thread for the lifetime of the block, so the
    reported peak reflects transient buffers (e.g. merge buffers) and not only
    the start/end snapshots.
    """
    stats = ProfileStats(label=label)
    process = psutil.Process()
    peak_rss = process.memory_info().rss
    stop_sampling = threading.Event()

    def _sample_memory() -> None:
        nonlocal peak_rss
        while not stop_sampling.is_set():
            try:
                peak_rss = max(peak_rss, process.memory_info().rss)
            except psutil.Error:
                break
            stop_sampling.wait(timeout=sample_interval_ms / 1000.0)

    tracemalloc_was_running = tracemalloc.is_tracing()
    if enable_tracemalloc and not tracemalloc_was_running:
        tracemalloc.start()

    # CPU percent needs a priming call
    process.cpu_percent(interval=None)

    sampler = threading.Thread(target=_sample_memory, daemon=True)
    sampler.start()

    stats.start_ts = time.perf_counter()
    try:
        yield stats
    finally:
        stats.end_ts = time.perf_counter()
        stats.duration_seconds = stats.end_ts - stats.start_ts

        stop_sampling.set()
        sampler.join(timeout=1.0)

        stats.peak_rss_bytes = peak_rss if peak_rss > 0 else None
        stats.cpu_percent = process.cpu_percent(interval=None)

        if enable_tracemalloc and tracemalloc.is_tracing():
            _, peak_traced = tracemalloc.get_traced_memory()
            stats.peak_traced_bytes = peak_traced
            # Stop tracemalloc only if we started it
            if not tracemalloc_was_running:
                tracemalloc.stop()


def profile_function(
    label: Optional[str] = None,
    sample_interval_ms: int = 50,
    enable_tracemalloc: bool = True,
) -> Callable[[Callable[..., Any]], Callable[..., ProfileStats]]:
    """
    Decorator to profile a function call and return ProfileStats.

    Example
    -------
        @profile_function("sort-dataset-15")
        def run():
            merge_sort(records)

        stats = run()
        print(f"Peak RSS: {stats.peak_rss_bytes} bytes")
    """

    def decorator(func: Callable[..., Any]) -> Callable[..., ProfileStats]:
        def wrapper(*args: Any, **kwargs: Any) -> ProfileStats:
            tag = label or func.__name__
            with profile_block(
                tag, sample_interval_ms=sample_interval_ms, enable_tracemalloc=enable_tracemalloc
            ) as stats:
                func(*args, **kwargs)
            return stats

        return wrapper

    return decorator


__all__ = ["ProfileStats", "profile_block", "profile_function"]
