# src/power_play/config.py

from __future__ import annotations

from power_play.types import Cell

# Power Play board
ROWS = 7
COLS = 6
CONNECT_N = 4

# Gray is always checked before white on a single line
PLAYER_ORDER = (Cell.GRAY, Cell.WHITE)

# Logging (only the CLIs configure handlers)
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"
