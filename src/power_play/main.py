# src/power_play/main.py

from __future__ import annotations

import argparse
import json
import logging
import sys

from power_play.config import LOG_FORMAT
from power_play.core.board import Board, InvalidGridError, SAMPLE_GRID, parse_grid
from power_play.core.rules import check_win
from power_play.types import WinResult


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="power-play", description="Check a Power Play grid for 4 in a row.")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log which line the scan stopped on")

    sub = ap.add_subparsers(dest="cmd", required=True)

    check = sub.add_parser("check", help="Evaluate one grid")
    check.add_argument(
        "grid",
        type=str,
        help='Rows separated by "/", one digit per cell (0 neutral, 1 gray, 2 white). Use "sample" for the demo grid.',
    )
    check.add_argument("--json", action="store_true", help="Print the result as JSON")

    return ap


def describe(res: WinResult) -> str:
    if not res.won:
        return "No winner yet."
    return f"{res.winner_name} wins ({res.family} {res.index}, cells {list(res.cells)})"


def main(argv: list[str] | None = None) -> int:
    ap = build_argparser()
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, format=LOG_FORMAT)

    try:
        board = Board.from_rows(SAMPLE_GRID) if args.grid == "sample" else parse_grid(args.grid)
    except InvalidGridError as e:
        print(f"Invalid grid: {e}", file=sys.stderr)
        return 2

    res = check_win(board)

    if args.json:
        print(json.dumps(res.to_dict()))
    else:
        print(describe(res))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
