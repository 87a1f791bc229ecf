"""
Game configuration for TicTacToe.
All the settings for the players, the computer opponent, and the UI.
"""


class GameConfig:
    """
    Configuration class for game settings.
    Change these values to taste!
    """

    # ==================== SEARCH SETTINGS ====================
    # Score of a win found right now. Each ply of search depth takes
    # one point off, so faster wins (and slower losses) score better.
    WIN_SCORE = 10

    # ==================== PLAYER SETTINGS ====================
    # 1 = against the computer, 2 = two humans on one board
    # None = ask at start-up
    DEFAULT_PLAYERS = None

    # In one-player mode, the human plays X (moves first) unless this is False
    HUMAN_FIRST = True

    # ==================== UI SETTINGS ====================
    WINDOW_TITLE = "TicTacToe"
    BACKGROUND = '#1a1a2e'
    CELL_BG = '#16213e'
    CELL_FG = 'white'
    HOVER_FG = '#64748b'       # Preview mark under the pointer
    WIN_BG = '#065f46'         # Winning line highlight
    WIN_FG = '#10b981'
    TITLE_FG = '#00d4ff'
    STATUS_FG = '#ffd700'
    BUTTON_BG = '#6366f1'

    FONT_FAMILY = 'Segoe UI'
    CELL_FONT_SIZE = 28

    # Pause before the computer answers, so its move is visible (ms)
    AI_REPLY_DELAY_MS = 250

    # ==================== LOGGING SETTINGS ====================
    LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
