from __future__ import annotations

from typing import Any, Dict, List, Optional

from rich import box
from rich.console import Console
from rich.table import Table


def _throughput(size: int, seconds: float) -> float:
    return size / seconds if seconds > 0 else 0.0


def print_results(results: List[Dict[str, Any]], console: Optional[Console] = None) -> None:
    """
    Render benchmark results as a rich table.

    Expects the payload dicts produced by `sortlab.harness.series_to_payload`.
    Rows are ordered by time at the largest dataset, fastest first.
    """
    console = console or Console()

    if not results:
        console.print("[yellow]No results to display.[/yellow]")
        return

    table = Table(
        title="Sorting Benchmark Results",
        box=box.ROUNDED,
        caption="Sorted by time at max size (ascending)",
    )

    table.add_column("Algorithm", style="cyan", no_wrap=True)
    table.add_column("Datasets", justify="right", style="blue")
    table.add_column("Max size", justify="right", style="magenta")
    table.add_column("Total time (s)", justify="right", style="green")
    table.add_column("Time @ max size (s)", justify="right", style="bold green")
    table.add_column("Throughput (records/s)", justify="right", style="yellow")

    def last_time(r: Dict[str, Any]) -> float:
        times = r.get("times") or [0.0]
        return times[-1]

    for res in sorted(results, key=last_time):
        sizes = res.get("sizes") or [0]
        max_size = res.get("max_size", sizes[-1])
        max_time = last_time(res)
        table.add_row(
            res.get("algorithm", "Unknown"),
            str(res.get("datasets", 0)),
            f"{max_size:,}",
            f"{res.get('total_seconds', 0.0):.4f}",
            f"{max_time:.4f}",
            f"{_throughput(sizes[-1], max_time):,.0f}",
        )

    console.print(table)


__all__ = ["print_results"]
