"""
Logic module for TicTacToe.
Handles the board, the game rules and the AI opponent.
"""

from .game_state import GameState, Mark, Status
from .board import Board
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WinChecker
from .player import Player
from .ai_player import AIPlayer, GameOutcome, find_best_move
