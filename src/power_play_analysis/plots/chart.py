from __future__ import annotations

from pathlib import Path

import pandas as pd
import matplotlib.pyplot as plt


def _ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def _plot_counts(counts: pd.DataFrame, outdir: Path, key: str, filename: str, *, show: bool) -> None:
    if key not in counts.columns or "count" not in counts.columns or counts.empty:
        return

    if not show:
        _ensure_dir(outdir)

    fig = plt.figure(figsize=(8, 4))
    plt.bar(counts[key].astype(str), counts["count"].astype(int))
    plt.title(f"Grids by {key}")
    plt.xlabel(key)
    plt.ylabel("count")
    plt.xticks(rotation=30, ha="right")

    if show:
        plt.show()
    else:
        fig.savefig(outdir / filename, dpi=200, bbox_inches="tight")
        plt.close(fig)


def plot_winner_bar(counts: pd.DataFrame, outdir: Path, *, show: bool) -> None:
    _plot_counts(counts, outdir, "winner", "bar_winner.png", show=show)


def plot_family_bar(counts: pd.DataFrame, outdir: Path, *, show: bool) -> None:
    _plot_counts(counts, outdir, "family", "bar_family.png", show=show)
