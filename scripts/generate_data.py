"""
Dataset generation script for sortlab.

Implements deterministic pseudo-random personnel record generation and writes
`dataset_1.csv .. dataset_N.csv`, where dataset i holds `base_size * i` rows,
in the header-less `full_name,job,unit,salary` format the harness reads.
"""

from __future__ import annotations

import csv
import random
import sys
import time
from pathlib import Path

import typer

from sortlab.config import get_settings
from sortlab.infrastructure.datasets import dataset_filename

app = typer.Typer(help="Generate synthetic personnel datasets of increasing size.")

FIRST_NAMES = ["Ivan", "Petr", "Sergey", "Alexey", "Dmitry", "Nikolay", "Andrey", "Mikhail", "Oleg", "Pavel"]
LAST_NAMES = ["Ivanov", "Petrov", "Sidorov", "Smirnov", "Kuznetsov", "Popov", "Volkov", "Sokolov", "Lebedev", "Kozlov"]
PATRONYMICS = ["Ivanovich", "Petrovich", "Sergeevich", "Alexeevich", "Dmitrievich", "Nikolaevich"]
JOBS = ["private", "corporal", "sergeant", "lieutenant", "captain", "major", "colonel", "engineer", "medic", "driver"]
UNITS = [f"unit_{n:03d}" for n in range(1, 51)]


def _random_row(rng: random.Random) -> list[str]:
    full_name = f"{rng.choice(LAST_NAMES)} {rng.choice(FIRST_NAMES)} {rng.choice(PATRONYMICS)}"
    return [
        full_name,
        rng.choice(JOBS),
        rng.choice(UNITS),
        str(rng.randint(20_000, 200_000)),
    ]


def _generate_rows_csv(csv_path: Path, rows: int, batch_size: int, seed: int) -> None:
    rng = random.Random(seed)

    with csv_path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f, lineterminator="\n")

        buffer: list[list[str]] = []
        for _ in range(rows):
            buffer.append(_random_row(rng))
            if len(buffer) >= batch_size:
                writer.writerows(buffer)
                buffer.clear()
        if buffer:
            writer.writerows(buffer)


def _generate_datasets(output_dir: Path, count: int, base_size: int, batch_size: int, seed: int) -> list[Path]:
    output_dir.mkdir(parents=True, exist_ok=True)
    paths: list[Path] = []
    for dataset_id in range(1, count + 1):
        path = output_dir / dataset_filename(dataset_id)
        # Per-dataset seed keeps each file reproducible on its own.
        _generate_rows_csv(path, rows=base_size * dataset_id, batch_size=batch_size, seed=seed + dataset_id)
        paths.append(path)
    return paths


@app.command()
def main(
    count: int = typer.Option(
        15,
        "--count",
        "-n",
        help="Number of datasets to generate (dataset_1 .. dataset_N).",
    ),
    base_size: int | None = typer.Option(
        None,
        "--base-size",
        "-s",
        help="Rows in dataset_1; dataset i holds base_size * i rows (default from settings).",
    ),
    batch_size: int = typer.Option(
        10_000,
        "--batch-size",
        "-b",
        help="Batch size for CSV buffering during generation.",
    ),
    seed: int | None = typer.Option(
        None,
        "--seed",
        help="Deterministic RNG seed (default from settings).",
    ),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Output directory (default: the configured input directory).",
    ),
) -> None:
    """
    Generate synthetic personnel datasets for the benchmark.
    """
    settings = get_settings()
    output_dir = output or settings.input_dir
    rows_step = base_size or settings.dataset_base_size
    rng_seed = settings.dataset_seed if seed is None else seed

    start = time.perf_counter()
    typer.echo(f"Generating {count} datasets (step={rows_step:,} rows) -> {output_dir} (seed={rng_seed})")
    paths = _generate_datasets(output_dir, count, rows_step, batch_size, rng_seed)
    total_rows = rows_step * count * (count + 1) // 2
    duration = time.perf_counter() - start
    typer.echo(
        f"Wrote {len(paths)} files, {total_rows:,} rows in {duration:.2f}s "
        f"({(total_rows / duration) if duration > 0 else 0.0:,.0f} rows/s)."
    )


if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)
