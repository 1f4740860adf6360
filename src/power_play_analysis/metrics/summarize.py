from __future__ import annotations

import logging

import pandas as pd

from power_play.core.board import InvalidGridError, parse_grid
from power_play.core.lines import FAMILIES
from power_play.core.rules import check_win

logger = logging.getLogger(__name__)

RESULT_COLS = ["name", "won", "winner", "family", "index", "cells", "rows", "cols", "error"]


def _require_cols(df: pd.DataFrame, cols: list[str]) -> None:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}. Present: {list(df.columns)}")


def evaluate_grids(df: pd.DataFrame) -> pd.DataFrame:
    """
    Run the win check on every grid snapshot.

    A malformed grid does not stop the batch: its row gets the error text
    and won=False.
    """
    _require_cols(df, ["name", "grid"])

    records = []
    for name, text in zip(df["name"], df["grid"]):
        rec = {c: None for c in RESULT_COLS}
        rec["name"] = name
        rec["won"] = False

        try:
            board = parse_grid(text)
        except InvalidGridError as e:
            logger.warning("Skipping grid %r: %s", name, e)
            rec["error"] = str(e)
            records.append(rec)
            continue

        res = check_win(board)
        rec.update(
            won=res.won,
            winner=res.winner_name,
            family=res.family,
            index=res.index,
            cells=" ".join(f"{r},{c}" for r, c in res.cells) or None,
            rows=board.rows,
            cols=board.cols,
        )
        records.append(rec)

    return pd.DataFrame.from_records(records, columns=RESULT_COLS)


def winner_counts(results: pd.DataFrame) -> pd.DataFrame:
    _require_cols(results, ["winner", "error"])

    valid = results[results["error"].isna()]
    counts = valid["winner"].fillna("none").value_counts()
    return counts.rename_axis("winner").reset_index(name="count")


def family_counts(results: pd.DataFrame) -> pd.DataFrame:
    _require_cols(results, ["won", "family"])

    won = results[results["won"].astype(bool)]
    counts = won["family"].value_counts().reindex(list(FAMILIES), fill_value=0)
    return counts.rename_axis("family").reset_index(name="count")
