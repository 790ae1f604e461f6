"""
Configuration settings for sortlab.

Uses Pydantic Settings to load environment variables for dataset locations,
logging, and per-algorithm benchmark defaults.
"""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Dict, List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Storage layout
    input_dir: Path = Field(Path("data/in"), alias="SORTLAB_INPUT_DIR")
    output_dir: Path = Field(Path("data/out"), alias="SORTLAB_OUTPUT_DIR")
    results_dir: Path = Field(Path("results"), alias="SORTLAB_RESULTS_DIR")

    # Application
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    json_logs: bool = Field(False, alias="LOG_JSON")

    # Benchmark defaults: number of datasets (1..N) measured per algorithm
    insertion_sort_datasets: int = Field(6, alias="INSERTION_SORT_DATASETS", ge=0)
    shaker_sort_datasets: int = Field(6, alias="SHAKER_SORT_DATASETS", ge=0)
    merge_sort_datasets: int = Field(15, alias="MERGE_SORT_DATASETS", ge=0)
    baseline_sort_datasets: int = Field(15, alias="BASELINE_SORT_DATASETS", ge=0)
    profile_memory: bool = Field(False, alias="BENCHMARK_PROFILE_MEMORY")

    # Charts
    chart_formats: List[str] = Field(default_factory=lambda: ["svg", "jpg"], alias="CHART_FORMATS")

    # Dataset generation
    dataset_base_size: int = Field(1_000, alias="DATASET_BASE_SIZE", gt=0)
    dataset_seed: int = Field(42, alias="DATASET_SEED")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    def dataset_counts(self) -> Dict[str, int]:
        """Default dataset count keyed by algorithm name."""
        return {
            "insertion_sort": self.insertion_sort_datasets,
            "shaker_sort": self.shaker_sort_datasets,
            "merge_sort": self.merge_sort_datasets,
            "baseline_sort": self.baseline_sort_datasets,
        }


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["Settings", "get_settings"]
