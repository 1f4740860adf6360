# src/power_play/core/scanner.py

from __future__ import annotations
from typing import Any, Optional

from power_play.config import CONNECT_N, PLAYER_ORDER
from power_play.types import Cell, Line, WinResult, NOT_WON


def _owned_by(value: Any, player: Cell) -> bool:
    # True == 1 in Python; a bool is never a piece
    return type(value) is not bool and value == player


def window_start(line: Line, player: Cell) -> Optional[int]:
    """
    Index of the first run of CONNECT_N cells equal to `player`, or None.

    A start is only tried when the whole window fits: i + 3 < len(line),
    so the last start ever checked is len(line) - 4.
    """
    n = len(line)
    for i in range(n):
        if not _owned_by(line[i], player):
            continue
        if i + CONNECT_N - 1 < n:
            if all(_owned_by(line[j], player) for j in range(i, i + CONNECT_N)):
                return i
    return None


def scan_line(line: Line) -> WinResult:
    # Too short to hold a window. Most diagonals near the corners land here.
    if len(line) < CONNECT_N:
        return NOT_WON

    for player in PLAYER_ORDER:
        start = window_start(line, player)
        if start is not None:
            return WinResult(winner=player, start=start)

    return NOT_WON
