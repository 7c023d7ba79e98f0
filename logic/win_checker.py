"""
Win checker for TicTacToe.
Decides whether a board is won, drawn or still ongoing.

The functions are pure functions of a row-major grid of mark values
(a list of rows), so they can be called on the live board or on a
speculative board in the middle of a search. WinChecker applies them
to a Board.
"""

from typing import TYPE_CHECKING, Iterator, List, Optional, Sequence, Tuple

from .game_state import GameState, Mark, Status

if TYPE_CHECKING:
    from .board import Board

Grid = Sequence[Sequence[int]]


def count_equal_run(grid: Grid, row: int, col: int, d_row: int, d_col: int) -> int:
    """
    Count identical non-empty marks starting at (row, col).

    Args:
        grid: The board cells, row-major.
        row: Starting row.
        col: Starting column.
        d_row: Row step of the direction vector.
        d_col: Column step of the direction vector.

    Returns:
        Length of the run, stopping at the board edge or the first
        different cell. 0 if the starting cell is empty.
    """
    size = len(grid)
    initial = grid[row][col]
    if initial == Mark.EMPTY:
        return 0

    length = 0
    while 0 <= row < size and 0 <= col < size and grid[row][col] == initial:
        length += 1
        row += d_row
        col += d_col
    return length


def _line_starts(size: int) -> Iterator[Tuple[int, int, int, int]]:
    """Start cell and direction of every full-length line, in scan order."""
    for i in range(size):
        yield i, 0, 0, 1   # row i
        yield 0, i, 1, 0   # column i
    yield 0, 0, 1, 1            # main diagonal
    yield size - 1, 0, -1, 1    # anti-diagonal


def classify(grid: Grid) -> GameState:
    """
    Classify a board.

    Rows and columns are scanned first (row i, then column i), then the two
    diagonals. The first completed line decides the winner.
    """
    size = len(grid)
    for row, col, d_row, d_col in _line_starts(size):
        if count_equal_run(grid, row, col, d_row, d_col) == size:
            return GameState.won_by(Mark(grid[row][col]))

    if all(cell != Mark.EMPTY for line in grid for cell in line):
        return GameState.draw()
    return GameState.ongoing()


def winning_line(grid: Grid) -> Optional[List[Tuple[int, int]]]:
    """
    Get the completed line, if there is one.

    Returns:
        The cells of the line as (row, col) tuples, in the same scan
        order as classify(), or None.
    """
    size = len(grid)
    for row, col, d_row, d_col in _line_starts(size):
        if count_equal_run(grid, row, col, d_row, d_col) == size:
            return [(row + k * d_row, col + k * d_col) for k in range(size)]
    return None


class WinChecker:
    """
    Checks for win conditions on a Board.

    Win condition: 3 identical marks in a row
    (horizontally, vertically, or diagonally)
    """

    def check_winner(self, board: "Board") -> Optional[Mark]:
        """
        Check if there's a winner.

        Returns:
            The winning Mark, or None if no winner yet.
        """
        return classify(board.snapshot()).winner

    def check_draw(self, board: "Board") -> bool:
        """True if the board is full and nobody has a line."""
        return classify(board.snapshot()).status == Status.DRAW

    def get_winning_line(self, board: "Board") -> Optional[List[Tuple[int, int]]]:
        """
        Get the winning line if there is one.

        Returns:
            The winning line as list of (row, col), or None.
        """
        return winning_line(board.snapshot())
