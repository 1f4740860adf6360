# src/power_play/core/board.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Iterable, List, Sequence, Tuple

from power_play.config import ROWS, COLS
from power_play.types import Cell, Coord

Grid = Tuple[Tuple[Any, ...], ...]

_NEUTRAL_CHARS = {".", "_"}
_DIGITS = "0123456789"


class InvalidGridError(ValueError):
    """Raised when a grid is empty or not rectangular."""


def _freeze(rows: Iterable[Sequence[Any]]) -> Grid:
    try:
        frozen = tuple(tuple(row) for row in rows)
    except TypeError as e:
        raise InvalidGridError(f"Grid rows must be sequences: {e}") from e

    if not frozen:
        raise InvalidGridError("Grid has no rows.")

    width = len(frozen[0])
    if width == 0:
        raise InvalidGridError("Grid has no columns.")

    for r, row in enumerate(frozen):
        if len(row) != width:
            raise InvalidGridError(
                f"Grid is not rectangular: row {r} has {len(row)} cells, expected {width}."
            )
    return frozen


@dataclass(frozen=True, slots=True)
class Board:
    """
    Read-only snapshot of a Power Play grid, indexed [row][col].

    The game-state owner hands us its grid after every move; we copy it into
    tuples once so nothing downstream can mutate the caller's data. rows and
    cols are always derived from the grid.
    """

    rows: int = ROWS
    cols: int = COLS
    grid: Grid = field(default_factory=tuple)

    def __post_init__(self) -> None:
        grid = self.grid
        if not grid:
            grid = tuple(
                tuple(Cell.NEUTRAL for _ in range(self.cols)) for _ in range(self.rows)
            )
        grid = _freeze(grid)
        object.__setattr__(self, "grid", grid)
        object.__setattr__(self, "rows", len(grid))
        object.__setattr__(self, "cols", len(grid[0]))

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[Any]]) -> "Board":
        grid = _freeze(rows)
        return cls(len(grid), len(grid[0]), grid)

    @classmethod
    def empty(cls, rows: int = ROWS, cols: int = COLS) -> "Board":
        if rows <= 0 or cols <= 0:
            raise InvalidGridError(f"Board size must be positive, got {rows}x{cols}.")
        return cls(rows, cols)

    def cell(self, r: int, c: int) -> Any:
        return self.grid[r][c]

    def row(self, r: int) -> Tuple[Any, ...]:
        return self.grid[r]

    def column(self, c: int) -> Tuple[Any, ...]:
        return tuple(row[c] for row in self.grid)

    def values(self, coords: Iterable[Coord]) -> List[Any]:
        return [self.grid[r][c] for r, c in coords]


def parse_grid(text: str) -> Board:
    """
    Parse the compact notation used by fixtures and the CLI.

    Rows are separated by "/" or newlines, one digit per cell:
    "0001/0010/0100/1000". "." and "_" also mean neutral; spaces are ignored.
    """
    rows: List[List[int]] = []
    for raw in text.replace("\n", "/").split("/"):
        chunk = raw.replace(" ", "").replace("\t", "")
        if not chunk:
            continue

        row: List[int] = []
        for ch in chunk:
            if ch in _NEUTRAL_CHARS:
                row.append(Cell.NEUTRAL)
            elif ch in _DIGITS:
                row.append(int(ch))
            else:
                raise InvalidGridError(f"Unexpected character {ch!r} in grid row {chunk!r}.")
        rows.append(row)

    return Board.from_rows(rows)


def format_grid(board: Board) -> str:
    return "/".join("".join(str(int(v)) if isinstance(v, int) else "?" for v in row) for row in board.grid)


# The position the game has shipped with since the first prototype:
# gray holds the anti-diagonal (3,0) -> (0,3).
SAMPLE_GRID: Grid = (
    (0, 0, 0, 1, 0, 0),
    (0, 0, 1, 0, 0, 0),
    (0, 1, 0, 0, 0, 0),
    (1, 0, 0, 0, 0, 0),
    (0, 0, 0, 0, 0, 0),
    (0, 0, 0, 0, 0, 0),
    (0, 0, 0, 0, 0, 0),
)
