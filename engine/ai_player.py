"""
AI player for the TicTacToe engine.
Uses the Minimax algorithm with alpha-beta pruning to choose the best move.
"""

import logging
import math
from typing import Dict, Optional
from dataclasses import dataclass

from .board import Board, Mark
from .config import GameConfig
from .win_checker import Outcome, WinChecker

logger = logging.getLogger(__name__)


class NoLegalMove(RuntimeError):
    """Raised when a move is requested on a full or finished board."""


@dataclass
class SearchStats:
    """Counters for a single search."""
    positions_evaluated: int = 0


@dataclass(frozen=True)
class SearchResult:
    """The chosen move and how it was found."""
    move: int
    score: int
    positions_evaluated: int


class AIPlayer:
    """
    An AI that plays TicTacToe using the Minimax algorithm.

    The AI will always play optimally - it will win if possible,
    block the opponent if needed, and never lose (at worst, draw).
    Among equally good results it prefers the fastest win and the
    slowest loss.
    """

    def __init__(self, player: Mark = Mark.CIRCLE, win_checker: Optional[WinChecker] = None):
        """
        Initialize the AI player.

        Args:
            player: Which mark the AI controls (default: CIRCLE)
            win_checker: Evaluator used at every search node.
        """
        self.player = player
        self.opponent = player.opposite()
        self.win_checker = win_checker or WinChecker()

    def get_best_move(self, board: Board) -> int:
        """
        Get the best move for the current position.

        Args:
            board: Current board, with this AI to move.

        Returns:
            Index of the best cell; always an empty cell of `board`.
        """
        return self.search(board).move

    def search(self, board: Board) -> SearchResult:
        """
        Search every empty cell and return the one with the best score.

        Candidates are tried in ascending index order and only a strictly
        better score replaces the current best, so ties go to the lowest
        index.

        Raises:
            NoLegalMove: if the board is full or the game is already over.
        """
        outcome = self.win_checker.evaluate(board)
        if outcome.is_terminal:
            raise NoLegalMove(f"No legal move: game is already over ({outcome})")

        if board.side_to_move() != self.player:
            logger.warning("Asked to move for %s but the board says it is %s's turn",
                           self.player.value, board.side_to_move().value)

        stats = SearchStats()
        valid_moves = board.empty_cells()

        best_score = -math.inf
        best_move = valid_moves[0]
        alpha = -math.inf
        beta = math.inf

        for index in valid_moves:
            new_board = board.place(index, self.player)
            score = self._minimax(new_board, 0, False, alpha, beta, stats)

            if score > best_score:
                best_score = score
                best_move = index
            alpha = max(alpha, best_score)

        logger.debug("AI evaluated %d positions. Best move: %d (score: %s)",
                     stats.positions_evaluated, best_move, best_score)

        return SearchResult(move=best_move, score=int(best_score),
                            positions_evaluated=stats.positions_evaluated)

    def evaluate_moves(self, board: Board) -> Dict[int, int]:
        """
        Exact score of every legal move, searched with a full window.

        Args:
            board: Current board, with this AI to move.

        Returns:
            Mapping of cell index to minimax score.
        """
        outcome = self.win_checker.evaluate(board)
        if outcome.is_terminal:
            raise NoLegalMove(f"No legal move: game is already over ({outcome})")

        stats = SearchStats()
        scores = {}
        for index in board.empty_cells():
            new_board = board.place(index, self.player)
            scores[index] = int(self._minimax(new_board, 0, False, -math.inf, math.inf, stats))
        return scores

    def _score_terminal(self, outcome: Outcome, depth: int) -> int:
        if outcome.winner == self.player:
            return GameConfig.WIN_SCORE - depth  # Win (prefer faster wins)
        elif outcome.winner == self.opponent:
            return depth - GameConfig.WIN_SCORE  # Loss (prefer slower losses)
        return 0  # Draw

    def _minimax(
        self,
        board: Board,
        depth: int,
        is_maximizing: bool,
        alpha: float,
        beta: float,
        stats: SearchStats,
    ) -> float:
        """
        Minimax algorithm with alpha-beta pruning.

        The search always runs to a finished game; depth only breaks ties
        between wins and losses of different lengths.

        Args:
            board: Position to evaluate.
            depth: Plies played since the candidate move.
            is_maximizing: True if it is this AI's turn.
            alpha: Best score the maximizer can already guarantee.
            beta: Best score the minimizer can already guarantee.
            stats: Counters for the current search.

        Returns:
            The score of the position.
        """
        stats.positions_evaluated += 1

        outcome = self.win_checker.evaluate(board)
        if outcome.is_terminal:
            return self._score_terminal(outcome, depth)

        if is_maximizing:
            max_score = -math.inf
            for index in board.empty_cells():
                new_board = board.place(index, self.player)
                score = self._minimax(new_board, depth + 1, False, alpha, beta, stats)
                max_score = max(max_score, score)
                alpha = max(alpha, max_score)
                if beta <= alpha:
                    break  # Prune
            return max_score
        else:
            min_score = math.inf
            for index in board.empty_cells():
                new_board = board.place(index, self.opponent)
                score = self._minimax(new_board, depth + 1, True, alpha, beta, stats)
                min_score = min(min_score, score)
                beta = min(beta, min_score)
                if beta <= alpha:
                    break  # Prune
            return min_score

    def get_move_suggestion(self, board: Board) -> str:
        """
        Get a human-readable move suggestion.

        Args:
            board: Current board.

        Returns:
            A string describing the suggested move.
        """
        if self.win_checker.evaluate(board).is_terminal:
            return "No moves available!"

        move = self.get_best_move(board)
        row, col = divmod(move, GameConfig.BOARD_SIZE)

        return f"Place {self.player.value} in cell {move + 1} (row {row}, col {col})"


_default_player = AIPlayer(Mark.CIRCLE)


def select_move(board: Board) -> int:
    """Best cell for Circle (the computer) to play on `board`."""
    return _default_player.get_best_move(board)
