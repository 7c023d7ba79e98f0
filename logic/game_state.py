"""
Game state values for TicTacToe.
Marks that fill the cells, and the win/draw/ongoing classification of a board.
"""

from enum import Enum, IntEnum
from typing import Optional
from dataclasses import dataclass


class Mark(IntEnum):
    """Content of a single board cell."""
    EMPTY = 0
    X = 1
    O = 2

    def opposite(self) -> "Mark":
        """Get the opposite side. EMPTY has no opposite and stays EMPTY."""
        if self == Mark.X:
            return Mark.O
        if self == Mark.O:
            return Mark.X
        return Mark.EMPTY

    @property
    def symbol(self) -> str:
        """Short name used in messages ("X", "O" or " ")."""
        return " " if self == Mark.EMPTY else self.name


class Status(Enum):
    """Kind of a GameState."""
    ONGOING = "ongoing"
    WINNER = "winner"
    DRAW = "draw"


@dataclass(frozen=True)
class GameState:
    """
    Classification of a board: Ongoing, Winner(mark) or Draw.

    Derived from the board contents every time it is asked for,
    never stored on the board.
    """
    status: Status
    winner: Optional[Mark] = None

    @classmethod
    def ongoing(cls) -> "GameState":
        return cls(Status.ONGOING)

    @classmethod
    def draw(cls) -> "GameState":
        return cls(Status.DRAW)

    @classmethod
    def won_by(cls, mark: Mark) -> "GameState":
        """A state where `mark` has completed a line."""
        if mark == Mark.EMPTY:
            raise ValueError("EMPTY cannot win a game")
        return cls(Status.WINNER, Mark(mark))

    @property
    def is_over(self) -> bool:
        return self.status != Status.ONGOING

    def __str__(self) -> str:
        if self.status == Status.WINNER:
            return f"{self.winner.symbol} is a winner"
        if self.status == Status.DRAW:
            return "Draw"
        return "interrupted"
