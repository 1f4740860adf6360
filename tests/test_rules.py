"""Tests for whole-grid win detection."""

import copy

import pytest

from power_play.core.board import Board, InvalidGridError, SAMPLE_GRID
from power_play.core.rules import check_win, check_winner
from power_play.types import Cell, NOT_WON


def empty(rows=7, cols=6):
    return [[0] * cols for _ in range(rows)]


def test_all_neutral_grid_is_not_won():
    assert check_win(empty()) == NOT_WON
    assert check_winner(empty(4, 9)) is None


def test_column_win_found_in_column_phase():
    g = empty()
    for r in range(4):
        g[r][0] = 1
    res = check_win(g)
    assert res.winner == Cell.GRAY
    assert res.family == "column"
    assert res.index == 0
    assert res.cells == ((0, 0), (1, 0), (2, 0), (3, 0))


def test_row_win():
    g = empty()
    g[6][1:5] = [2, 2, 2, 2]
    res = check_win(g)
    assert (res.winner, res.family, res.index) == (Cell.WHITE, "row", 6)
    assert res.cells == ((6, 1), (6, 2), (6, 3), (6, 4))


def test_main_descending_diagonal():
    g = empty()
    for k in range(4):
        g[k][k] = 2
    res = check_win(g)
    assert res.winner == Cell.WHITE
    assert res.family == "diag_down_upper"
    assert res.index == 0
    assert res.to_dict()["winner"] == "white"


def test_descending_diagonal_below_corner():
    g = empty()
    for k in range(4):
        g[2 + k][1 + k] = 1
    res = check_win(g)
    assert (res.family, res.index) == ("diag_down_lower", 0)
    assert res.cells[0] == (2, 1)


def test_sample_grid_anti_diagonal():
    res = check_win(SAMPLE_GRID)
    assert res.winner == Cell.GRAY
    assert (res.family, res.index) == ("diag_up_upper", 2)
    assert res.cells == ((0, 3), (1, 2), (2, 1), (3, 0))


def test_ascending_diagonal_below_corner():
    g = empty()
    for k in range(4):
        g[3 + k][5 - k] = 2
    res = check_win(g)
    assert (res.winner, res.family, res.index) == (Cell.WHITE, "diag_up_lower", 2)


def test_only_threes_is_not_won():
    g = empty()
    g[0][0:3] = [1, 1, 1]
    g[6][3:6] = [2, 2, 2]
    for r in range(2, 5):
        g[r][5] = 1
    for k in range(3):
        g[1 + k][k] = 2
    assert check_win(g) == NOT_WON


def test_rows_are_reported_before_columns():
    g = empty()
    g[0][0:4] = [1, 1, 1, 1]
    for r in range(1, 5):
        g[r][5] = 2
    res = check_win(g)
    assert (res.winner, res.family) == (Cell.GRAY, "row")


def test_columns_are_reported_before_diagonals():
    g = empty()
    for k in range(4):
        g[k][k] = 1
    for r in range(2, 6):
        g[r][5] = 2
    res = check_win(g)
    assert (res.winner, res.family, res.index) == (Cell.WHITE, "column", 5)


def test_earlier_row_wins_over_later_row():
    g = empty()
    g[5][0:4] = [1, 1, 1, 1]
    g[2][2:6] = [2, 2, 2, 2]
    res = check_win(g)
    assert (res.winner, res.index) == (Cell.WHITE, 2)


def test_input_grid_is_not_mutated():
    g = empty()
    g[3][0:4] = [2, 2, 2, 2]
    before = copy.deepcopy(g)
    check_win(g)
    assert g == before


def test_accepts_board_instances():
    b = Board.from_rows(SAMPLE_GRID)
    assert check_winner(b) == Cell.GRAY


def test_wide_board_diagonal():
    g = empty(4, 9)
    for k in range(4):
        g[3 - k][4 + k] = 2
    res = check_win(g)
    assert res.winner == Cell.WHITE
    assert res.family == "diag_up_upper"
    assert res.cells[0] == (0, 7)


def test_jagged_grid_fails_fast():
    with pytest.raises(InvalidGridError):
        check_win([[0, 0, 0, 0], [0, 0, 0]])


def test_not_won_to_dict_matches_legacy_shape():
    assert check_win(empty()).to_dict() == {"won": False}


def test_grid_without_columns_fails_fast():
    with pytest.raises(InvalidGridError, match="no columns"):
        check_win([[], []])


def test_bool_cells_never_win():
    g = empty()
    g[0][0:4] = [True, True, True, True]
    assert check_win(g) == NOT_WON
