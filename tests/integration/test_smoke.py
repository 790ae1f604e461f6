"""
End-to-end smoke tests for the sortlab CLI.

Generates tiny datasets with the generator script, then drives `sortlab run`
through typer's CliRunner and checks sorted outputs, charts and the results
archive on disk.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from scripts import generate_data
from sortlab.infrastructure.datasets import read_records
from sortlab.main import app
from sortlab.utils.logging import configure_logging

DATASET_COUNT = 2
BASE_SIZE = 6

runner = CliRunner()


@pytest.fixture(autouse=True)
def _restore_logging():
    yield
    # The CLI binds its log handler to the runner's captured stream.
    configure_logging(level="WARNING")


@pytest.fixture
def workspace(tmp_path: Path, monkeypatch) -> dict:
    input_dir = tmp_path / "in"
    output_dir = tmp_path / "out"
    results_dir = tmp_path / "results"
    monkeypatch.setenv("SORTLAB_RESULTS_DIR", str(results_dir))
    monkeypatch.setenv("LOG_LEVEL", "WARNING")

    result = runner.invoke(
        generate_data.app,
        ["--count", str(DATASET_COUNT), "--base-size", str(BASE_SIZE), "--output", str(input_dir)],
    )
    assert result.exit_code == 0, result.output
    return {"in": input_dir, "out": output_dir, "results": results_dir}


def _run(workspace: dict, *extra: str):
    return runner.invoke(
        app,
        [
            "run",
            "--input-dir",
            str(workspace["in"]),
            "--output-dir",
            str(workspace["out"]),
            "--datasets",
            str(DATASET_COUNT),
            *extra,
        ],
    )


def test_list_shows_algorithms():
    result = runner.invoke(app, ["list"])
    assert result.exit_code == 0
    for name in ("insertion_sort", "shaker_sort", "merge_sort", "baseline_sort"):
        assert name in result.output


def test_info_shows_dataset_counts():
    result = runner.invoke(app, ["info"])
    assert result.exit_code == 0
    assert "merge_sort=15" in result.output


def test_run_all_algorithms(workspace: dict):
    result = _run(workspace)

    assert result.exit_code == 0, result.output
    assert "Sorting Benchmark Results" in result.output

    out: Path = workspace["out"]
    for tag in ("insertion", "shaker", "merge", "sort"):
        for dataset_id in range(1, DATASET_COUNT + 1):
            records = read_records(out / tag / f"dataset_{dataset_id}.csv")
            assert len(records) == BASE_SIZE * dataset_id
            keys = [r.sort_key() for r in records]
            assert keys == sorted(keys)

    for stem in ("all", "insertion_shaker", "merge_stdsort"):
        assert (out / "plots" / "svg" / f"{stem}.svg").exists()
        assert (out / "plots" / "jpg" / f"{stem}.jpg").exists()

    latest = json.loads((workspace["results"] / "latest.json").read_text(encoding="utf-8"))
    assert {r["algorithm"] for r in latest["results"]} == {
        "insertion_sort",
        "shaker_sort",
        "merge_sort",
        "baseline_sort",
    }
    for entry in latest["results"]:
        assert entry["sizes"] == [BASE_SIZE, 2 * BASE_SIZE]


def test_run_single_algorithm_without_charts_or_persist(workspace: dict):
    result = _run(workspace, "-a", "std::sort", "--no-charts", "--no-persist")

    assert result.exit_code == 0, result.output
    assert (workspace["out"] / "sort" / "dataset_2.csv").exists()
    assert not (workspace["out"] / "insertion").exists()
    assert not any((workspace["out"] / "plots" / "svg").iterdir())
    assert not workspace["results"].exists()


def test_run_unknown_algorithm_exits_with_error(workspace: dict):
    result = _run(workspace, "-a", "bogo_sort")

    assert result.exit_code == 1
    assert "Unknown algorithm 'bogo_sort'" in result.output
    assert not workspace["out"].exists()


def test_run_missing_datasets_exits_with_error(tmp_path: Path, monkeypatch):
    monkeypatch.setenv("SORTLAB_RESULTS_DIR", str(tmp_path / "results"))
    result = runner.invoke(
        app,
        ["run", "-a", "merge_sort", "--input-dir", str(tmp_path / "missing"), "--output-dir", str(tmp_path / "out")],
    )

    assert result.exit_code == 1
    assert "Couldn't open dataset" in result.output
