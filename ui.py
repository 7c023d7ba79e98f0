"""
TicTacToe terminal UI.
Draws the board with box-drawing characters and ANSI colours,
and reads moves for the human player from the keyboard.

Board layout (row and column indexes on the bold edges):

     ║0│1│2│
    ═╬═╪═╪═╡
    0║X│•│•│
    1║•│0│•│
    2║•│•│•│
"""

import logging
from typing import Callable, Optional

from logic.board import Board
from logic.config import GameConfig
from logic.game_state import Mark
from logic.move_validator import MoveValidator
from logic.win_checker import WinChecker
from logic.player import Player, Position

logger = logging.getLogger(__name__)

GLYPHS = {
    Mark.X: GameConfig.GLYPH_X,
    Mark.O: GameConfig.GLYPH_O,
    Mark.EMPTY: GameConfig.GLYPH_EMPTY,
}


def colored_mark(mark: Mark, perspective: Mark = Mark.EMPTY, use_color: bool = True) -> str:
    """
    Glyph for a mark, coloured relative to a side.

    Args:
        mark: The mark to draw.
        perspective: Side the board is shown to. Its own marks are green,
            the opponent's red. EMPTY means no side: marks are just bold.
        use_color: If False, return the bare glyph.
    """
    glyph = GLYPHS[mark]
    if not use_color:
        return glyph

    if mark == Mark.EMPTY:
        return f"{GameConfig.COLOR_EMPTY}{glyph}{GameConfig.COLOR_RESET}"

    if perspective == Mark.EMPTY:
        color = GameConfig.COLOR_NEUTRAL
    elif mark == perspective:
        color = GameConfig.COLOR_OWN
    else:
        color = GameConfig.COLOR_OPPONENT
    return f"{color}{glyph}{GameConfig.COLOR_RESET}"


def render_board(board: Board, perspective: Mark = Mark.EMPTY, use_color: bool = True) -> str:
    """
    Draw the board as text.

    Cells of a completed line are underlined when colours are on.
    """
    size = board.size
    cell_width = len(str(size))
    win_cells = set(WinChecker().get_winning_line(board) or [])
    lines = []

    # Column indexes
    header = " " * cell_width + GameConfig.VERTICAL_BOLD_SEPARATOR
    for col in range(size):
        header += f"{col:>{cell_width}}{GameConfig.VERTICAL_SEPARATOR}"
    lines.append(header)

    rule = GameConfig.HORIZONTAL_BOLD_SEPARATOR * cell_width + GameConfig.CROSS_BOLD_SEPARATOR
    for col in range(size):
        rule += GameConfig.HORIZONTAL_BOLD_SEPARATOR * cell_width
        rule += GameConfig.H_CROSS_BOLD_SEPARATOR if col < size - 1 else GameConfig.BOLD_T_RIGHT_SEPARATOR
    lines.append(rule)

    for row in range(size):
        line = f"{row:>{cell_width}}{GameConfig.VERTICAL_BOLD_SEPARATOR}"
        for col in range(size):
            glyph = colored_mark(board.cell(row, col), perspective, use_color)
            if use_color and (row, col) in win_cells:
                glyph = GameConfig.STYLE_WIN_LINE + glyph
            line += " " * (cell_width - 1) + glyph + GameConfig.VERTICAL_SEPARATOR
        lines.append(line)

    return "\n".join(lines)


def parse_position(text: str) -> Optional[Position]:
    """
    Parse "row col" into a position.

    Returns:
        (row, col), or None if the text is not two integers.
    """
    parts = text.split()
    if len(parts) < 2:
        return None
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        return None


class HumanPlayer(Player):
    """
    A player that types moves in the terminal.
    An empty line (or end of input) surrenders.
    """

    def __init__(
        self,
        mark: Mark,
        input_func: Optional[Callable[[str], str]] = None,
        output: Optional[Callable[[str], None]] = None,
        use_color: bool = True
    ):
        super().__init__(mark)
        self.input_func = input_func or input
        self.output = output or print
        self.use_color = use_color
        self.validator = MoveValidator()

    def turn(self, board: Board) -> Optional[Position]:
        while True:
            self.output("Current board state:")
            self.output(render_board(board, self.mark, self.use_color))
            self.output("Enter the next mark's position (row, column) space-separated")
            self.output("Press ENTER to surrender")

            try:
                line = self.input_func("")
            except EOFError:
                logger.debug("Input closed, %s surrenders", self.mark.symbol)
                return None

            if not line.strip():
                return None

            position = parse_position(line)
            if position is None:
                self.output("Wrong input format! Use two numbers, e.g. '1 2'")
                continue

            result = self.validator.validate_move(board, *position)
            if result.is_valid:
                return position

            logger.debug("Rejected human input %s: %s", position, result.error_message)
            self.output("Entered position is invalid!")
