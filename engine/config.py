"""
Game configuration for the TicTacToe engine.
All the constants for the board, the search scores and the console driver.
"""


class GameConfig:
    """
    Configuration class for game settings.
    Values here are shared by the engine and the console driver.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid, cells indexed row-major 0..8
    BOARD_SIZE = 3
    CELL_COUNT = BOARD_SIZE * BOARD_SIZE

    # Symbol used when printing an empty cell
    EMPTY_SYMBOL = "."

    # Symbols accepted as empty when parsing a board string
    EMPTY_SYMBOLS = (".", "-", "_", " ")

    # ==================== SEARCH SETTINGS ====================
    # Score of a win found at depth 0; depth is subtracted so faster
    # wins (and slower losses) score better
    WIN_SCORE = 10

    # ==================== SIMULATION SETTINGS ====================
    DEFAULT_SIMULATIONS = 100
    DEFAULT_SEED = None

    # ==================== CONSOLE MESSAGES ====================
    RESULT_MESSAGES = {
        "human": "You win!",
        "computer": "AI wins!",
        "draw": "Tie!",
    }
