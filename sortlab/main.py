from __future__ import annotations

import sys
from pathlib import Path
from typing import List, Optional

import typer

from sortlab.charts import render_default_charts
from sortlab.config import get_settings
from sortlab.errors import SortLabError
from sortlab.harness import RunConfig, available_algorithms, run_benchmarks, series_to_payload
from sortlab.infrastructure.workspace import plots_dir
from sortlab.reporter import print_results
from sortlab.utils.logging import configure_logging

app = typer.Typer(help="Sorting algorithm benchmark CLI.")


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    counts = " ".join(f"{name}={count}" for name, count in settings.dataset_counts().items())
    typer.echo(
        f"in={settings.input_dir} out={settings.output_dir} results={settings.results_dir} | "
        f"datasets: {counts} | charts={','.join(settings.chart_formats)}"
    )


@app.command("list")
def list_algorithms() -> None:
    """
    List the available sorting algorithms.
    """
    typer.echo("Available algorithms: " + ", ".join(available_algorithms()))


@app.command()
def run(
    algorithms: List[str] = typer.Option(
        ["all"],
        "--algorithm",
        "--algorithms",
        "-a",
        help="Algorithm to run (insertion_sort, shaker_sort, merge_sort, baseline_sort, all). Repeatable.",
    ),
    datasets: Optional[int] = typer.Option(
        None,
        "--datasets",
        "-n",
        help="Number of datasets (1..N) for every selected algorithm (default per algorithm from settings).",
    ),
    input_dir: Optional[Path] = typer.Option(None, "--input-dir", help="Directory holding dataset_<i>.csv files."),
    output_dir: Optional[Path] = typer.Option(None, "--output-dir", help="Directory for sorted datasets and plots."),
    charts: bool = typer.Option(True, "--charts/--no-charts", help="Render comparison charts."),
    persist: bool = typer.Option(True, "--persist/--no-persist", help="Write results JSON."),
    profile_memory: bool = typer.Option(False, "--profile-memory", help="Record peak RSS per sort."),
) -> None:
    """
    Time the selected algorithms, persist sorted datasets and render charts.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.json_logs)

    names = ["all"] if "all" in algorithms else algorithms
    dataset_counts = {}
    if datasets is not None:
        selected = available_algorithms() if names == ["all"] else names
        dataset_counts = {name: datasets for name in selected}

    effective_output = output_dir or settings.output_dir
    typer.echo(f"Running algorithms={','.join(names)} in={input_dir or settings.input_dir} out={effective_output}")

    try:
        results = run_benchmarks(
            RunConfig(
                algorithm_names=names,
                dataset_counts=dataset_counts,
                input_dir=input_dir,
                output_dir=output_dir,
                persist=persist,
                profile_memory=profile_memory or None,
            )
        )
        if charts:
            render_default_charts(results, plots_dir(effective_output), settings.chart_formats)
    except SortLabError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    print_results([series_to_payload(s) for s in results.values()])


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
