"""
Chart rendering for benchmark timing series.

Each algorithm is drawn as one "-o" line of elapsed time against its own
dataset sizes, and every chart is saved once per configured image format under
`<plots_dir>/<fmt>/<stem>.<fmt>`.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Sequence, Tuple

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402

from sortlab.domain.models import TimingSeries  # noqa: E402
from sortlab.utils.logging import get_logger  # noqa: E402

log = get_logger(__name__)

# Legend labels keep the names used in the published comparison charts.
LEGEND_LABELS: Dict[str, str] = {
    "insertion_sort": "insertion",
    "shaker_sort": "shaker",
    "merge_sort": "merge",
    "baseline_sort": "std::sort",
}

# (stem, title, algorithms)
DEFAULT_CHARTS: List[Tuple[str, str, Tuple[str, ...]]] = [
    (
        "all",
        "Insertion vs shaker vs merge vs std::sort",
        ("insertion_sort", "shaker_sort", "merge_sort", "baseline_sort"),
    ),
    ("insertion_shaker", "Insertion vs shaker", ("insertion_sort", "shaker_sort")),
    ("merge_stdsort", "merge vs std::sort", ("merge_sort", "baseline_sort")),
]


def render_chart(
    series: Sequence[TimingSeries],
    title: str,
    stem: str,
    plots_dir: Path | str,
    formats: Iterable[str] = ("svg", "jpg"),
) -> List[Path]:
    """
    Plot the given series on one chart and save it in every format.

    Returns
    -------
    List[Path]
        Paths of the written image files.
    """
    fig, ax = plt.subplots(figsize=(10, 6))
    try:
        for s in series:
            ax.plot(s.sizes, s.times, "-o", label=LEGEND_LABELS.get(s.algorithm, s.algorithm))
        ax.set_title(title)
        ax.set_xlabel("Dataset size")
        ax.set_ylabel("Time to sort (s)")
        ax.grid(True, alpha=0.3)
        ax.legend()
        fig.tight_layout()

        written: List[Path] = []
        for fmt in formats:
            target_dir = Path(plots_dir) / fmt
            target_dir.mkdir(parents=True, exist_ok=True)
            path = target_dir / f"{stem}.{fmt}"
            fig.savefig(path, format=fmt, dpi=150)
            written.append(path)
    finally:
        plt.close(fig)

    log.info("Chart saved", extra={"chart": stem, "files": [str(p) for p in written]})
    return written


def render_default_charts(
    results: Mapping[str, TimingSeries],
    plots_dir: Path | str,
    formats: Iterable[str] = ("svg", "jpg"),
) -> List[Path]:
    """
    Render the standard comparison charts for whichever algorithms were measured.

    A chart is skipped unless every algorithm it compares is present in `results`.
    """
    formats = list(formats)
    written: List[Path] = []
    for stem, title, names in DEFAULT_CHARTS:
        if not all(name in results for name in names):
            log.debug("Chart skipped", extra={"chart": stem})
            continue
        written.extend(
            render_chart([results[name] for name in names], title, stem, plots_dir, formats)
        )
    return written


__all__ = ["render_chart", "render_default_charts", "DEFAULT_CHARTS", "LEGEND_LABELS"]
