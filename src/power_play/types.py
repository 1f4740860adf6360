# src/power_play/types.py

from __future__ import annotations
from dataclasses import dataclass, replace
from enum import IntEnum
from typing import Any, Dict, Optional, Sequence, Tuple

Coord = Tuple[int, int]  # (row, col)


class Cell(IntEnum):
    NEUTRAL = 0
    GRAY = 1
    WHITE = 2


Line = Sequence[Any]  # cell values; anything but GRAY/WHITE is inert


@dataclass(frozen=True, slots=True)
class WinResult:
    winner: Optional[Cell] = None
    start: Optional[int] = None  # window start inside the scanned line
    family: Optional[str] = None
    index: Optional[int] = None
    cells: Tuple[Coord, ...] = ()

    @property
    def won(self) -> bool:
        return self.winner is not None

    @property
    def winner_name(self) -> Optional[str]:
        return self.winner.name.lower() if self.winner is not None else None

    def located(self, family: str, index: int, cells: Sequence[Coord]) -> "WinResult":
        return replace(self, family=family, index=index, cells=tuple(cells))

    def to_dict(self) -> Dict[str, Any]:
        """
        Same shape the game front-end has always consumed: ``{"won": False}``
        or ``{"winner": "gray", "won": True}``, plus where the line was found.
        """
        if not self.won:
            return {"won": False}
        return {
            "winner": self.winner_name,
            "won": True,
            "family": self.family,
            "index": self.index,
            "cells": [list(rc) for rc in self.cells],
        }


NOT_WON = WinResult()
