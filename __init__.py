"""
TicTacToe
=========
Play 3x3 TicTacToe in the terminal against an AI that searches the
whole game tree. It never loses, and resigns when a position is lost.

X always moves first.
"""

__version__ = "1.0.0"
