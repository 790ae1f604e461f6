"""
Infrastructure package for sortlab.

Centralizes storage concerns (dataset CSV source/sink, output workspace).
Keep this layer focused on I/O and decoupled from algorithm/harness logic.
"""

from sortlab.infrastructure.datasets import (
    CsvDatasetSink,
    CsvDatasetSource,
    DatasetSink,
    DatasetSource,
)
from sortlab.infrastructure.workspace import plots_dir, prepare_workspace

__all__ = [
    "CsvDatasetSink",
    "CsvDatasetSource",
    "DatasetSink",
    "DatasetSource",
    "plots_dir",
    "prepare_workspace",
]
