"""
Move validator for TicTacToe.
Same rule as Board.apply_move, but explains why a move is rejected.
"""

from typing import Optional
from dataclasses import dataclass

from .board import Board
from .game_state import Mark


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. The position must be on the board
    2. The cell must be empty
    """

    def validate_move(self, board: Board, row: int, col: int) -> ValidationResult:
        """
        Validate a move.

        Args:
            board: Current board.
            row: Row to place the mark (0-2).
            col: Column to place the mark (0-2).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if not board.in_bounds(row, col):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position ({row}, {col}). Must be 0-{board.size - 1}."
            )

        occupant = board.cell(row, col)
        if occupant != Mark.EMPTY:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell ({row}, {col}) is already occupied by {occupant.symbol}"
            )

        return ValidationResult(is_valid=True)
