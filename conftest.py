"""
Shared fixtures for the TicTacToe tests.
"""

import pytest

from logic.board import Board
from logic.game_state import Mark


@pytest.fixture(scope="session")
def reachable_positions():
    """Every position reachable from the empty board, with the side to move."""
    seen = {}

    def visit(board, side):
        key = board.to_array().tobytes()
        if key in seen:
            return
        seen[key] = (board, side)
        if board.get_state().is_over:
            return
        for row, col in board.empty_cells():
            child = board.clone()
            child.apply_move(row, col, side)
            visit(child, side.opposite())

    visit(Board.new(), Mark.X)
    return list(seen.values())
