"""
TicTacToe Game Outcome Engine
=============================
Decides whether a board is finished and picks the computer's move
with minimax search and alpha-beta pruning. The computer plays Circle
and never loses.
"""

from .config import GameConfig
from .board import Board, Mark, InvalidBoardState
from .win_checker import Outcome, OutcomeStatus, WinChecker, evaluate, IN_PROGRESS, DRAW
from .ai_player import AIPlayer, SearchResult, NoLegalMove, select_move
from .game_state import GameState, Move, ScoreTally
from .move_validator import MoveValidator, ValidationResult

__version__ = "1.0.0"
