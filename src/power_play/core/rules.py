# src/power_play/core/rules.py

from __future__ import annotations
import logging
from typing import Any, Optional, Sequence, Union

from power_play.config import CONNECT_N
from power_play.core.board import Board
from power_play.core.lines import iter_lines
from power_play.core.scanner import scan_line
from power_play.types import Cell, WinResult, NOT_WON

logger = logging.getLogger(__name__)

GridLike = Union[Board, Sequence[Sequence[Any]]]


def as_board(grid: GridLike) -> Board:
    if isinstance(grid, Board):
        return grid
    return Board.from_rows(grid)


def check_win(grid: GridLike) -> WinResult:
    """
    Called after every move. Rescans the whole grid and returns the first
    winning line in scan order (rows, columns, then the diagonal halves).

    The grid must have at least one row and one column, and every row the
    same length. Anything else raises InvalidGridError, including an Rx0 grid.
    """
    board = as_board(grid)

    for ref in iter_lines(board):
        res = scan_line(board.values(ref.coords))
        if res.won:
            cells = ref.coords[res.start:res.start + CONNECT_N]
            logger.debug(
                "%s wins on %s %d at %s", res.winner_name, ref.family, ref.index, list(cells)
            )
            return res.located(ref.family, ref.index, cells)

    return NOT_WON


def check_winner(grid: GridLike) -> Optional[Cell]:
    return check_win(grid).winner
