"""
Game configuration for TicTacToe.
Scoring, board symbols and pacing for the AI opponent.
"""


class GameConfig:
    """
    Configuration class for game settings.
    Change these values to tune how the game looks and feels.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid
    BOARD_SIZE = 3
    NUM_CELLS = BOARD_SIZE * BOARD_SIZE  # 9 cells

    # Symbols used when printing the board
    EMPTY_SYMBOL = " "
    PLAYER_SYMBOL = "X"    # Human
    OPPONENT_SYMBOL = "O"  # AI

    # ==================== AI SETTINGS ====================
    # Score of a win found at the root; each ply of depth costs one point,
    # so faster wins (and slower losses) are preferred
    WIN_SCORE = 10

    # Cell the AI takes on an empty board
    OPENING_MOVE = 4  # center

    # ==================== PACING SETTINGS ====================
    # Delay before the AI's move is revealed (milliseconds, Tkinter UI)
    AI_DELAY_MS = 500

    # Same delay for the console mode (seconds)
    AI_DELAY_S = AI_DELAY_MS / 1000.0
