"""
Player capability shared by the human and the AI.
"""

from abc import ABC, abstractmethod
from typing import Optional, Tuple

from .board import Board
from .game_state import Mark

Position = Tuple[int, int]


class Player(ABC):
    """Something that can be asked for a move."""

    def __init__(self, mark: Mark):
        if mark == Mark.EMPTY:
            raise ValueError("A player must play X or O")
        self.mark = Mark(mark)

    @abstractmethod
    def turn(self, board: Board) -> Optional[Position]:
        """
        Choose the next move.

        Returns:
            (row, col) to play, or None to surrender.
        """

    def get_mark(self) -> Mark:
        return self.mark
