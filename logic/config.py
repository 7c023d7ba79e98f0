"""
Configuration for the TicTacToe game.
All the settings for the board, the search and the terminal display.
"""


class GameConfig:
    """
    Configuration class for game settings.
    The board size is fixed: the search is exhaustive and only affordable at 3x3.
    """

    # ==================== BOARD SETTINGS ====================
    BOARD_SIZE = 3

    # ==================== SEARCH SETTINGS ====================
    # Move returned by the search when every candidate loses.
    # Never played: the AI resigns instead.
    FALLBACK_MOVE = (0, 0)

    # ==================== DISPLAY SETTINGS ====================
    VERTICAL_SEPARATOR = "│"
    VERTICAL_BOLD_SEPARATOR = "║"
    HORIZONTAL_BOLD_SEPARATOR = "═"
    H_CROSS_BOLD_SEPARATOR = "╪"
    CROSS_BOLD_SEPARATOR = "╬"
    BOLD_T_RIGHT_SEPARATOR = "╡"

    # Glyphs drawn on the board (O is drawn as a zero)
    GLYPH_X = "X"
    GLYPH_O = "0"
    GLYPH_EMPTY = "•"

    # ANSI escape codes
    COLOR_NEUTRAL = "\x1b[1m"
    COLOR_OWN = "\x1b[32;1m"
    COLOR_OPPONENT = "\x1b[31;1m"
    COLOR_EMPTY = "\x1b[38;5;8m"
    COLOR_RESET = "\x1b[0m"
    STYLE_WIN_LINE = "\x1b[4m"  # underline

    # ==================== LOGGING SETTINGS ====================
    LOG_LEVEL_ENV = "TICTACTOE_LOG_LEVEL"
    DEFAULT_LOG_LEVEL = "WARNING"
    LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
