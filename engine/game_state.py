"""
Game state management for a TicTacToe session.
Tracks the live board, whose turn it is, the move history and the score.
"""

import logging
from typing import Optional, List
from dataclasses import dataclass, field

from .board import Board, Mark
from .win_checker import Outcome, IN_PROGRESS, OutcomeStatus

logger = logging.getLogger(__name__)


@dataclass
class Move:
    """
    A move in the game.
    """
    player: Mark            # Who made the move
    index: int              # Cell (0-8)
    move_number: int        # Ply number in the game (0-8)


@dataclass
class ScoreTally:
    """Wins per side over the session. Draws leave both counters alone."""
    human_wins: int = 0
    computer_wins: int = 0

    def record(self, outcome: Outcome, human: Mark = Mark.CROSS,
               computer: Mark = Mark.CIRCLE) -> None:
        """
        Update the tally with the result of a completed game.

        Args:
            outcome: Final outcome of the game.
            human: The human's mark.
            computer: The computer's mark.
        """
        if outcome.status != OutcomeStatus.WIN:
            return
        if outcome.winner == human:
            self.human_wins += 1
        elif outcome.winner == computer:
            self.computer_wins += 1


@dataclass
class GameState:
    """
    The complete state of one TicTacToe game.

    Tracks:
    - The board (an immutable Board, replaced on every move)
    - Current player
    - Move history
    - Game result (set by WinChecker.update_game_state)
    """

    board: Board = field(default_factory=Board.empty)

    # Cross always moves first
    current_player: Mark = Mark.CROSS

    moves: List[Move] = field(default_factory=list)

    outcome: Outcome = IN_PROGRESS

    @property
    def is_game_over(self) -> bool:
        return self.outcome.is_terminal

    @property
    def winner(self) -> Optional[Mark]:
        return self.outcome.winner

    def make_move(self, index: int) -> bool:
        """
        Make a move at the given cell for the current player.

        Args:
            index: Cell index (0-8).

        Returns:
            True if move was successful, False otherwise.
        """
        if self.is_game_over:
            logger.warning("Game is already over!")
            return False

        try:
            new_board = self.board.place(index, self.current_player)
        except ValueError as e:
            logger.warning("Rejected move: %s", e)
            return False

        self.board = new_board
        self.moves.append(Move(
            player=self.current_player,
            index=index,
            move_number=len(self.moves),
        ))

        # Winner detection is done by an external WinChecker
        self.current_player = self.current_player.opposite()

        return True

    def get_empty_cells(self) -> List[int]:
        return self.board.empty_cells()

    def reset(self) -> None:
        """Start a fresh game."""
        self.board = Board.empty()
        self.current_player = Mark.CROSS
        self.moves = []
        self.outcome = IN_PROGRESS
