"""
Win checker for the TicTacToe engine.
Decides whether a board is won, drawn, or still in progress.
"""

from enum import Enum
from typing import Optional, Tuple, TYPE_CHECKING
from dataclasses import dataclass

from .board import Board, Mark

if TYPE_CHECKING:
    from .game_state import GameState


Line = Tuple[int, int, int]


class OutcomeStatus(Enum):
    """Whether the game is still going, won, or drawn."""
    IN_PROGRESS = "in_progress"
    WIN = "win"
    DRAW = "draw"


@dataclass(frozen=True)
class Outcome:
    """
    The verdict for a board.

    `winner` is set only when `status` is WIN.
    """
    status: OutcomeStatus
    winner: Optional[Mark] = None

    def __post_init__(self):
        if (self.status == OutcomeStatus.WIN) != (self.winner is not None):
            raise ValueError(f"Outcome {self.status.value} cannot have winner {self.winner}")

    @classmethod
    def win(cls, mark: Mark) -> "Outcome":
        return cls(OutcomeStatus.WIN, mark)

    @property
    def is_terminal(self) -> bool:
        """True for a win or a draw."""
        return self.status != OutcomeStatus.IN_PROGRESS

    @property
    def is_draw(self) -> bool:
        return self.status == OutcomeStatus.DRAW

    def __str__(self) -> str:
        if self.status == OutcomeStatus.WIN:
            return f"{self.winner.value} wins"
        return self.status.value.replace("_", " ")


IN_PROGRESS = Outcome(OutcomeStatus.IN_PROGRESS)
DRAW = Outcome(OutcomeStatus.DRAW)


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 identical marks in a row
    (horizontally, vertically, or diagonally)
    """

    # All possible winning lines, checked in this order
    WINNING_LINES: Tuple[Line, ...] = (
        # Rows
        (0, 1, 2),
        (3, 4, 5),
        (6, 7, 8),
        # Columns
        (0, 3, 6),
        (1, 4, 7),
        (2, 5, 8),
        # Diagonals
        (0, 4, 8),
        (2, 4, 6),
    )

    def evaluate(self, board: Board) -> Outcome:
        """
        Work out the outcome of a board.

        A completed line wins even on a full board. Boards that break the
        move-count rules are still evaluated, line by line.

        Args:
            board: The board to evaluate.

        Returns:
            Outcome.win(mark), DRAW, or IN_PROGRESS.
        """
        winner = self.check_winner(board)
        if winner is not None:
            return Outcome.win(winner)

        if board.is_full():
            return DRAW

        return IN_PROGRESS

    def check_winner(self, board: Board) -> Optional[Mark]:
        """
        Check if there's a winner.

        Returns:
            The Mark of the first completed line, or None if no winner yet.
        """
        line = self.get_winning_line(board)
        if line is None:
            return None
        return board[line[0]]

    def get_winning_line(self, board: Board) -> Optional[Line]:
        """
        Get the winning line if there is one.

        Returns:
            The first completed line as a triple of cell indices, or None.
        """
        for line in self.WINNING_LINES:
            a, b, c = line
            if board[a] is not None and board[a] == board[b] == board[c]:
                return line
        return None

    def check_draw(self, board: Board) -> bool:
        """A draw is a full board with no completed line."""
        return self.evaluate(board).is_draw

    def update_game_state(self, game_state: "GameState") -> "GameState":
        """
        Store the verdict for the current board on the game state.

        Args:
            game_state: The game state to update.

        Returns:
            Updated game state.
        """
        game_state.outcome = self.evaluate(game_state.board)
        return game_state


_default_checker = WinChecker()


def evaluate(board: Board) -> Outcome:
    """Outcome of `board`: a win, a draw, or still in progress."""
    return _default_checker.evaluate(board)
