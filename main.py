"""
Main script for TicTacToe.

This script ties together:
- Logic (board, rules, exhaustive-search AI)
- UI (terminal board and keyboard input)

Run this script to play TicTacToe against the computer!
"""

import argparse
import logging
import os
import sys
from typing import Callable, Optional
from dataclasses import dataclass

from logic.ai_player import AIPlayer
from logic.board import Board
from logic.config import GameConfig
from logic.game_state import GameState, Mark, Status
from logic.player import Player
from ui import HumanPlayer, colored_mark, render_board

logger = logging.getLogger(__name__)


@dataclass
class GameResult:
    """
    How a game ended.

    reason is one of "line", "draw", "surrender" or "illegal_move".
    """
    state: GameState
    winner: Optional[Mark]
    reason: str


class TicTacToeGame:
    """
    Turn coordinator.

    Game flow:
    1. X moves first, then the sides alternate
    2. The side to move is asked for a move
    3. No move means it surrendered; a rejected move gets it banned
    4. Repeat until someone completes a line or the board is full
    """

    def __init__(
        self,
        x_player: Player,
        o_player: Player,
        output: Callable[[str], None] = print,
        use_color: bool = True,
        viewer: Mark = Mark.EMPTY
    ):
        """
        Initialize the game.

        Args:
            x_player: Player for X.
            o_player: Player for O.
            output: Where game messages go.
            use_color: Colour the board and the names of the sides.
            viewer: Side the messages are coloured for (the human side).
        """
        if x_player.get_mark() != Mark.X or o_player.get_mark() != Mark.O:
            raise ValueError("x_player must play X and o_player must play O")

        self.board = Board.new()
        self.players = {Mark.X: x_player, Mark.O: o_player}
        self.output = output
        self.use_color = use_color
        self.viewer = viewer

    def _name(self, mark: Mark) -> str:
        return colored_mark(mark, self.viewer, self.use_color)

    def _show_board(self):
        self.output(render_board(self.board, Mark.EMPTY, self.use_color))

    def play(self) -> GameResult:
        """Play the game to the end."""
        current = Mark.X

        while self.board.get_state() == GameState.ongoing():
            self.output("Current board state:")
            self._show_board()
            self.output(f"Now it is {self._name(current)}'s turn")

            move = self.players[current].turn(self.board)

            if move is None:
                self.output(f"{self._name(current)} was unable to make a turn, assuming it has surrendered!")
                logger.info("%s surrendered", current.symbol)
                return GameResult(self.board.get_state(), current.opposite(), "surrender")

            row, col = move
            if not self.board.apply_move(row, col, current):
                self.output(f"{self._name(current)} just made an illegal move! BANNED!")
                logger.warning("%s played illegal move %s", current.symbol, move)
                return GameResult(self.board.get_state(), current.opposite(), "illegal_move")

            logger.info("%s plays (%d, %d)", current.symbol, row, col)
            current = current.opposite()

        state = self.board.get_state()
        self.output(f"GAME OVER! The result is {state}!")
        self.output("Final board:")
        self._show_board()

        if state.status == Status.WINNER:
            return GameResult(state, state.winner, "line")
        return GameResult(state, None, "draw")


def read_side(
    input_func: Optional[Callable[[str], str]] = None,
    output: Optional[Callable[[str], None]] = None
) -> Optional[Mark]:
    """
    Ask which side the human plays until the answer is X, O or 0.

    Returns:
        The chosen mark, or None if input ended.
    """
    input_func = input_func or input
    output = output or print

    while True:
        try:
            answer = input_func("").strip()
        except EOFError:
            return None

        if answer.upper() == "X":
            return Mark.X
        if answer.upper() == "O" or answer == "0":
            return Mark.O
        output("Wrong input format! Try again")


def setup_logging(level: Optional[str] = None) -> None:
    """
    Configure the root logger to write to stderr.

    Args:
        level: Level name. Falls back to the TICTACTOE_LOG_LEVEL
            environment variable, then to WARNING.
    """
    log_level = (level or os.getenv(GameConfig.LOG_LEVEL_ENV) or GameConfig.DEFAULT_LOG_LEVEL).upper()

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(log_level)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(GameConfig.LOG_FORMAT))
    root.addHandler(handler)


def main(argv=None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="TicTacToe against an unbeatable AI")
    parser.add_argument(
        "--side",
        choices=["X", "O"],
        help="Side you play (asked interactively if omitted)"
    )
    parser.add_argument(
        "--ai-vs-ai",
        action="store_true",
        help="Let the AI play both sides"
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Plain text board without ANSI colours"
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help=f"Logging level (default: ${GameConfig.LOG_LEVEL_ENV} or {GameConfig.DEFAULT_LOG_LEVEL})"
    )

    args = parser.parse_args(argv)
    setup_logging(args.log_level)
    use_color = not args.no_color

    try:
        if args.ai_vs_ai:
            viewer = Mark.EMPTY
            x_player, o_player = AIPlayer(Mark.X), AIPlayer(Mark.O)
        else:
            if args.side:
                human_side = Mark[args.side]
            else:
                print("Choose your side (write 'X' or '0')")
                human_side = read_side()
                if human_side is None:
                    return 0

            viewer = human_side
            human = HumanPlayer(human_side, use_color=use_color)
            ai = AIPlayer(human_side.opposite())
            players = {human_side: human, ai.get_mark(): ai}
            x_player, o_player = players[Mark.X], players[Mark.O]

        game = TicTacToeGame(x_player, o_player, use_color=use_color, viewer=viewer)
        result = game.play()
        logger.info("Game finished: %s (%s)", result.state, result.reason)
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")

    return 0


if __name__ == "__main__":
    sys.exit(main())
