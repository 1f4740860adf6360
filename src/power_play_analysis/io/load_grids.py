from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import pandas as pd


REQUIRED_COLS = ("name", "grid")


@dataclass(frozen=True)
class LoadSpec:
    csv_path: Path
    required_cols: tuple[str, ...] = REQUIRED_COLS


def load_grids(spec: LoadSpec) -> pd.DataFrame:
    if not spec.csv_path.exists():
        raise FileNotFoundError(f"CSV not found: {spec.csv_path}")

    # Keep grids as text; "0001/..." must not be read as a number
    df = pd.read_csv(spec.csv_path, dtype=str, keep_default_na=False)

    # Trim whitespace in column names just in case
    df.columns = [c.strip() for c in df.columns]

    missing = [c for c in spec.required_cols if c not in df.columns]
    if missing:
        raise ValueError(f"CSV missing required columns {missing}. Columns: {list(df.columns)}")

    df["name"] = df["name"].astype(str).str.strip()
    df["grid"] = df["grid"].astype(str).str.strip()

    # Drop rows with no grid
    df = df[df["grid"].str.len() > 0].reset_index(drop=True)

    return df


def load_latest_from_dir(grids_dir: Path, pattern: str = "grids_*.csv") -> Path:
    if not grids_dir.exists():
        raise FileNotFoundError(f"Grids directory not found: {grids_dir}")

    files = sorted(grids_dir.glob(pattern))
    if not files:
        raise FileNotFoundError(f"No files matching {pattern} in {grids_dir}")

    # Filenames include timestamp, lexicographic sort works
    return files[-1]
