"""
Board for TicTacToe.
Owns the 3x3 grid, applies validated moves and reports the game state.
"""

import logging
from typing import List, Optional, Tuple

import numpy as np

from .config import GameConfig
from .game_state import GameState, Mark
from .win_checker import Grid, classify

logger = logging.getLogger(__name__)


class Board:
    """
    The TicTacToe grid.

    Cells are stored as Mark values in a numpy int8 array, row-major.
    The board does not know whose turn it is; the caller tracks that.
    """

    size = GameConfig.BOARD_SIZE

    def __init__(self, data: Optional[np.ndarray] = None):
        """
        Initialize the board.

        Args:
            data: Optional (3, 3) array of Mark values to start from.
                An empty board is created if omitted.
        """
        if data is None:
            self._grid = np.full((self.size, self.size), Mark.EMPTY, dtype=np.int8)
        else:
            self._grid = np.array(data, dtype=np.int8)
            if self._grid.shape != (self.size, self.size):
                raise ValueError(f"Board must be {self.size}x{self.size}, got {self._grid.shape}")

    @classmethod
    def new(cls) -> "Board":
        """Create a board with every cell empty."""
        return cls()

    @classmethod
    def from_rows(cls, rows: List[str]) -> "Board":
        """
        Build a board from text rows, e.g. ["XO.", "...", "..X"].
        "X" is X, "O" or "0" is O, anything else is empty.
        """
        symbols = {"X": Mark.X, "O": Mark.O, "0": Mark.O}
        return cls(np.array(
            [[symbols.get(ch.upper(), Mark.EMPTY) for ch in row] for row in rows],
            dtype=np.int8,
        ))

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def cell(self, row: int, col: int) -> Mark:
        """Read a single cell. Raises IndexError off the board."""
        if not self.in_bounds(row, col):
            raise IndexError(f"Cell ({row}, {col}) is off the board")
        return Mark(int(self._grid[row, col]))

    def apply_move(self, row: int, col: int, mark: Mark) -> bool:
        """
        Place a mark.

        Args:
            row: Row index (0-2).
            col: Column index (0-2).
            mark: The mark to place (X or O).

        Returns:
            True if the mark was placed. False if the mark is not X or O,
            the position is off the board or the cell is occupied; the
            board is left unchanged.
        """
        if mark not in (Mark.X, Mark.O):
            logger.debug("Rejected move (%s, %s): %r is not a side", row, col, mark)
            return False
        if not self.in_bounds(row, col):
            logger.debug("Rejected move (%s, %s): off the board", row, col)
            return False
        if self._grid[row, col] != Mark.EMPTY:
            logger.debug("Rejected move (%s, %s): occupied by %s", row, col, self.cell(row, col).symbol)
            return False

        self._grid[row, col] = mark
        return True

    def get_state(self) -> GameState:
        """Classify the board as Ongoing, Winner(mark) or Draw."""
        return classify(self.snapshot())

    def snapshot(self) -> Grid:
        """Cells as a nested list of ints, row-major. Changing it does not touch the board."""
        return self._grid.tolist()

    def empty_cells(self) -> List[Tuple[int, int]]:
        """All empty cells in row-major order."""
        return [(int(r), int(c)) for r, c in np.argwhere(self._grid == Mark.EMPTY)]

    def is_full(self) -> bool:
        return bool(np.all(self._grid != Mark.EMPTY))

    def clone(self) -> "Board":
        """Create an independent copy of the board."""
        return Board(self._grid.copy())

    def to_array(self) -> np.ndarray:
        """Copy of the cells as an int8 array of Mark values."""
        return self._grid.copy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self._grid, other._grid))

    def __repr__(self) -> str:
        rows = ["".join(Mark(int(v)).symbol.replace(" ", ".") for v in row) for row in self._grid]
        return f"Board({rows!r})"
