# src/power_play/core/lines.py

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, List, Literal, Tuple

from power_play.core.board import Board
from power_play.types import Coord

Family = Literal[
    "row",
    "column",
    "diag_down_upper",
    "diag_down_lower",
    "diag_up_upper",
    "diag_up_lower",
]

# Scan order. It decides which line is reported when several win at once.
FAMILIES: Tuple[Family, ...] = (
    "row",
    "column",
    "diag_down_upper",
    "diag_down_lower",
    "diag_up_upper",
    "diag_up_lower",
)


@dataclass(frozen=True, slots=True)
class LineRef:
    family: Family
    index: int
    coords: Tuple[Coord, ...]


def walk(board: Board, r: int, c: int, dr: int, dc: int) -> Tuple[Coord, ...]:
    """Coordinates from (r, c) stepping (dr, dc) until leaving the board."""
    out: List[Coord] = []
    while 0 <= r < board.rows and 0 <= c < board.cols:
        out.append((r, c))
        r += dr
        c += dc
    return tuple(out)


def iter_lines(board: Board) -> Iterator[LineRef]:
    """
    Every row, column and diagonal of the board, in scan order.

    Diagonals are split per orientation into the ones starting on the top
    edge and the ones starting on the side edge below row 0, so the corner
    diagonal is read once. Both diagonal halves use one offset per column,
    and short or empty diagonals are yielded too.
    """
    R, C = board.rows, board.cols

    for r in range(R):
        yield LineRef("row", r, walk(board, r, 0, 0, 1))

    for c in range(C):
        yield LineRef("column", c, walk(board, 0, c, 1, 0))

    # Down-right, starting on the top row
    for i in range(C):
        yield LineRef("diag_down_upper", i, walk(board, 0, i, 1, 1))

    # Down-right, starting on the left column below the corner
    for i in range(C):
        yield LineRef("diag_down_lower", i, walk(board, 1 + i, 0, 1, 1))

    # Down-left, starting on the top row from the right corner
    for i in range(C):
        yield LineRef("diag_up_upper", i, walk(board, 0, C - 1 - i, 1, -1))

    # Down-left, starting on the right column below the corner
    for i in range(C):
        yield LineRef("diag_up_lower", i, walk(board, 1 + i, C - 1, 1, -1))
