"""
Output workspace preparation.

Resets the output directory before a benchmark run so sorted datasets and plots
from a previous run never mix with the current one.
"""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import Iterable, Sequence

from sortlab.errors import DatasetWriteError
from sortlab.utils.logging import get_logger

log = get_logger(__name__)

PLOTS_DIRNAME = "plots"
DEFAULT_PLOT_FORMATS: Sequence[str] = ("svg", "jpg")


def plots_dir(output_dir: Path | str) -> Path:
    return Path(output_dir) / PLOTS_DIRNAME


def prepare_workspace(
    output_dir: Path | str,
    tags: Iterable[str],
    plot_formats: Iterable[str] = DEFAULT_PLOT_FORMATS,
) -> Path:
    """
    Recreate `output_dir` with one sub-directory per algorithm tag and per plot format.

    Parameters
    ----------
    output_dir : Path | str
        Root of the output tree; removed first if it already exists.
    tags : iterable[str]
        Algorithm output tags (e.g. "insertion", "merge").
    plot_formats : iterable[str]
        Image formats; each gets `plots/<fmt>/`.

    Returns
    -------
    Path
        The prepared output directory.
    """
    root = Path(output_dir)
    try:
        if root.exists():
            shutil.rmtree(root)
        root.mkdir(parents=True)
        for tag in tags:
            (root / tag).mkdir(exist_ok=True)
        for fmt in plot_formats:
            (plots_dir(root) / fmt).mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise DatasetWriteError(f"Couldn't prepare output directory {root}: {exc}") from exc

    log.info("Workspace prepared", extra={"output_dir": str(root)})
    return root


__all__ = ["prepare_workspace", "plots_dir", "PLOTS_DIRNAME", "DEFAULT_PLOT_FORMATS"]
