"""
Tests for the exhaustive-search AI.
"""

import functools
import logging

import numpy as np
import pytest

from logic.ai_player import AIPlayer, GameOutcome, SearchStats, find_best_move, placed
from logic.board import Board
from logic.game_state import Mark

OUTCOME_VALUE = {GameOutcome.WINNING: 1, GameOutcome.DRAW: 0, GameOutcome.LOSING: -1}

LINES = [
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
]


def _has_line(cells, side):
    return any(cells[a] == cells[b] == cells[c] == side for a, b, c in LINES)


@functools.lru_cache(maxsize=None)
def game_value(cells, side):
    """Plain negamax over flat cells: 1 win, 0 draw, -1 loss for `side` to move."""
    best = -1
    for i, value in enumerate(cells):
        if value:
            continue
        child = cells[:i] + (side,) + cells[i + 1:]
        if _has_line(child, side):
            return 1
        if 0 not in child:
            best = max(best, 0)
        else:
            best = max(best, -game_value(child, 3 - side))
    return best


def test_empty_board_is_a_draw():
    board = Board.new()
    _, outcome = find_best_move(board, Mark.X)
    assert outcome == GameOutcome.DRAW


def test_takes_immediate_win():
    board = Board.from_rows(["XX.", "...", "..."])
    assert find_best_move(board, Mark.X) == ((0, 2), GameOutcome.WINNING)


def test_first_winning_move_in_scan_order_is_returned():
    # Both (0, 2) and (1, 2) win for X; the scan stops at the first
    board = Board.from_rows(["XX.", "XX.", "..."])
    assert find_best_move(board, Mark.X) == ((0, 2), GameOutcome.WINNING)


def test_blocks_the_only_threat():
    board = Board.from_rows(["XX.", ".O.", "..."])
    move, outcome = find_best_move(board, Mark.O)
    assert move == (0, 2)
    assert outcome != GameOutcome.LOSING


def test_forced_loss_is_reported():
    # X threatens (0, 2) and (2, 0) at once; O cannot block both
    board = Board.from_rows(["XX.", "XO.", "..O"])
    move, outcome = find_best_move(board, Mark.O)
    assert outcome == GameOutcome.LOSING
    assert move == (0, 0)


def test_ai_resigns_lost_position():
    board = Board.from_rows(["XX.", "XO.", "..O"])
    ai = AIPlayer(Mark.O)
    assert ai.turn(board) is None


def test_last_drawing_move_wins_the_tie():
    # (1, 2) and (2, 2) both draw for X; the later one is kept
    board = Board.from_rows(["XOX", "XO.", "OX."])
    assert find_best_move(board, Mark.X) == ((2, 2), GameOutcome.DRAW)


def test_full_board_returns_fallback_without_searching():
    board = Board.from_rows(["XOX", "XOO", "OXX"])
    stats = SearchStats()
    assert find_best_move(board, Mark.X, stats) == ((0, 0), GameOutcome.LOSING)
    assert stats.positions_evaluated == 0


def test_search_does_not_modify_board():
    board = Board.from_rows(["X..", ".O.", "..."])
    before = board.to_array()

    find_best_move(board, Mark.X)
    AIPlayer(Mark.X).turn(board)

    assert np.array_equal(board.to_array(), before)


def test_placed_restores_cell_on_exit():
    grid = Board.from_rows(["X..", "...", "..."]).snapshot()

    with placed(grid, 1, 1, Mark.O):
        assert grid[1][1] == Mark.O

    assert grid[1][1] == Mark.EMPTY


def test_placed_restores_cell_on_early_return():
    grid = Board.new().snapshot()

    def peek():
        with placed(grid, 0, 0, Mark.X):
            return grid[0][0]

    assert peek() == Mark.X
    assert grid[0][0] == Mark.EMPTY


def test_placed_restores_cell_on_exception():
    grid = Board.new().snapshot()

    with pytest.raises(RuntimeError):
        with placed(grid, 2, 0, Mark.X):
            raise RuntimeError("boom")

    assert grid[2][0] == Mark.EMPTY


def test_search_works_on_a_snapshot_not_board_copies(monkeypatch):
    def no_clone(self):
        raise AssertionError("search should not copy the board")

    monkeypatch.setattr(Board, "clone", no_clone)
    board = Board.new()
    stats = SearchStats()

    _, outcome = find_best_move(board, Mark.X, stats)

    assert outcome == GameOutcome.DRAW
    assert board == Board.new()
    assert stats.positions_evaluated > 9


def test_empty_side_is_rejected():
    with pytest.raises(ValueError):
        find_best_move(Board.new(), Mark.EMPTY)
    with pytest.raises(ValueError):
        AIPlayer(Mark.EMPTY)


def test_ai_turn_logs_search_size(caplog):
    caplog.set_level(logging.DEBUG, logger="logic.ai_player")
    board = Board.from_rows(["X..", "...", "..."])
    ai = AIPlayer(Mark.O)

    move = ai.turn(board)

    assert move is not None
    assert board.cell(*move) == Mark.EMPTY
    assert ai.positions_evaluated > 0
    assert f"evaluated {ai.positions_evaluated} positions" in caplog.text


@pytest.mark.parametrize("ai_mark", [Mark.X, Mark.O])
def test_ai_never_loses_against_any_opponent(ai_mark):
    """Try every move sequence for the opponent."""
    ai = AIPlayer(ai_mark)

    def explore(board, side):
        state = board.get_state()
        if state.is_over:
            assert state.winner != ai_mark.opposite()
            return
        if side == ai_mark:
            move = ai.turn(board)
            assert move is not None
            child = board.clone()
            assert child.apply_move(*move, side)
            explore(child, side.opposite())
            return
        for row, col in board.empty_cells():
            child = board.clone()
            child.apply_move(row, col, side)
            explore(child, side.opposite())

    explore(Board.new(), Mark.X)


@pytest.mark.slow
def test_every_reachable_position(reachable_positions):
    assert len(reachable_positions) == 5478

    for board, side in reachable_positions:
        if board.get_state().is_over:
            continue

        before = board.to_array()
        move, outcome = find_best_move(board, side)
        assert np.array_equal(board.to_array(), before)

        cells = tuple(int(v) for v in before.flatten())
        assert OUTCOME_VALUE[outcome] == game_value(cells, int(side))

        if outcome == GameOutcome.LOSING:
            assert move == (0, 0)
            continue

        assert board.cell(*move) == Mark.EMPTY
        child = board.clone()
        child.apply_move(*move, side)
        state = child.get_state()
        if state.is_over:
            achieved = 1 if state.winner == side else 0
        else:
            child_cells = tuple(int(v) for v in child.to_array().flatten())
            achieved = -game_value(child_cells, int(side.opposite()))
        assert achieved == OUTCOME_VALUE[outcome]
