from __future__ import annotations

import argparse
import logging
from pathlib import Path

from power_play.config import LOG_FORMAT

from ..io.load_grids import LoadSpec, load_grids, load_latest_from_dir
from ..metrics.summarize import evaluate_grids, family_counts, winner_counts
from ..plots.chart import plot_family_bar, plot_winner_bar


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="power_play_analysis analyze",
        description="Run the Power Play win check over a CSV of grid snapshots.",
    )
    ap.add_argument("--csv", type=str, default=None, help="Path to a grids CSV (name,grid). If omitted, uses latest in --grids-dir.")
    ap.add_argument("--grids-dir", type=str, default="data/grids", help="Directory containing grids_*.csv")
    ap.add_argument("--pattern", type=str, default="grids_*.csv", help="Glob pattern for selecting latest file")

    ap.add_argument("--outdir", type=str, default="figures", help="Directory for saving plots")
    ap.add_argument("--show", action="store_true", help="Show plots instead of saving")
    ap.add_argument("--no-plots", action="store_true", help="Disable bar chart generation")

    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    return ap


def main(argv: list[str] | None = None) -> int:
    ap = build_argparser()
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format=LOG_FORMAT)

    outdir = Path(args.outdir)

    # Choose CSV
    if args.csv:
        csv_path = Path(args.csv)
    else:
        csv_path = load_latest_from_dir(Path(args.grids_dir), pattern=args.pattern)

    df = load_grids(LoadSpec(csv_path=csv_path))

    print(f"\nLoaded: {csv_path}")
    print(f"Grids: {len(df):,}")

    results = evaluate_grids(df)

    print("\n=== Results ===")
    print(results.to_string(index=False))

    winners = winner_counts(results)
    print("\n=== By winner ===")
    print(winners.to_string(index=False))

    families = family_counts(results)
    print("\n=== By line family ===")
    print(families.to_string(index=False))

    bad = int(results["error"].notna().sum())
    if bad:
        print(f"\n{bad} grid(s) could not be parsed.")

    if not args.no_plots:
        plot_winner_bar(winners, outdir, show=args.show)
        plot_family_bar(families, outdir, show=args.show)

        if not args.show:
            print(f"\nSaved figures to: {outdir.resolve()}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
