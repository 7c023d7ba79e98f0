"""
AI player for TicTacToe.
Searches the whole game tree to choose a provably optimal move.
"""

import logging
from contextlib import contextmanager
from enum import Enum
from typing import Iterator, List, Optional, Tuple
from dataclasses import dataclass

from .board import Board
from .config import GameConfig
from .game_state import Mark, Status
from .player import Player, Position
from .win_checker import classify

logger = logging.getLogger(__name__)


class GameOutcome(Enum):
    """Result of a position for the side about to move, under optimal play."""
    WINNING = "winning"
    LOSING = "losing"
    DRAW = "draw"


@dataclass
class SearchStats:
    """Counters collected during one search."""
    positions_evaluated: int = 0


def find_best_move(
    board: Board,
    side: Mark,
    stats: Optional[SearchStats] = None
) -> Tuple[Position, GameOutcome]:
    """
    Find the best move for `side`.

    The search runs on a private snapshot of the cells, so `board` is
    never modified.

    Args:
        board: Position to search from.
        side: The mark about to move (X or O).
        stats: Optional counters to fill in.

    Returns:
        (position, outcome). If every move loses, the position is the
        fallback (0, 0) and the outcome is LOSING.
    """
    if side == Mark.EMPTY:
        raise ValueError("The side to move must be X or O")
    if stats is None:
        stats = SearchStats()
    return _search(board.snapshot(), Mark(side), stats)


@contextmanager
def placed(grid: List[List[int]], row: int, col: int, mark: Mark) -> Iterator[List[List[int]]]:
    """
    Tentatively place a mark for the duration of a with-block.

    The previous cell value is put back when the block exits,
    whether it falls through, returns early or raises.
    """
    previous = grid[row][col]
    grid[row][col] = mark
    try:
        yield grid
    finally:
        grid[row][col] = previous


def _search(grid: List[List[int]], side: Mark, stats: SearchStats) -> Tuple[Position, GameOutcome]:
    """
    Depth-first search over every empty cell in row-major order.

    Returns at the first winning move. Among drawing moves the last one
    found is kept. Losing moves are never recorded.
    """
    best_move = GameConfig.FALLBACK_MOVE
    best_outcome = GameOutcome.LOSING
    size = len(grid)

    for row in range(size):
        for col in range(size):
            if grid[row][col] != Mark.EMPTY:
                continue
            stats.positions_evaluated += 1

            with placed(grid, row, col, side):
                state = classify(grid)

                if state.status == Status.WINNER:
                    if state.winner == side:
                        return (row, col), GameOutcome.WINNING
                    continue

                if state.status == Status.DRAW:
                    best_move, best_outcome = (row, col), GameOutcome.DRAW
                    continue

                _, reply = _search(grid, side.opposite(), stats)

                if reply == GameOutcome.LOSING:
                    return (row, col), GameOutcome.WINNING
                if reply == GameOutcome.DRAW:
                    best_move, best_outcome = (row, col), GameOutcome.DRAW

    return best_move, best_outcome


class AIPlayer(Player):
    """
    An AI that plays TicTacToe with an exhaustive search.

    It takes a win whenever one can be forced, otherwise holds the draw.
    If every move loses against best play it resigns instead of playing on.
    """

    def __init__(self, mark: Mark = Mark.O):
        """
        Initialize the AI player.

        Args:
            mark: Which side the AI plays (default: O)
        """
        super().__init__(mark)

        # Size of the last search (for debugging)
        self.positions_evaluated = 0

    def turn(self, board: Board) -> Optional[Position]:
        """
        Get the best move for the current position.

        Returns:
            (row, col) of the best move, or None to resign.
        """
        stats = SearchStats()
        move, outcome = find_best_move(board, self.mark, stats)
        self.positions_evaluated = stats.positions_evaluated

        logger.debug(
            "AI %s evaluated %d positions. Best move: %s (%s)",
            self.mark.symbol, self.positions_evaluated, move, outcome.value
        )

        if outcome == GameOutcome.LOSING:
            logger.debug("AI %s cannot avoid losing, resigning", self.mark.symbol)
            return None
        return move
