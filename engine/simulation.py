"""
Automated games against the AI.

Used to check that the AI never loses: random opponents, engine
self-play, and an exhaustive walk over every opponent strategy.
"""

import logging
from typing import Callable, Dict, Iterator, List, Optional
from dataclasses import dataclass, field

import numpy as np

from .ai_player import AIPlayer
from .board import Board, Mark
from .config import GameConfig
from .game_state import GameState
from .win_checker import Outcome, OutcomeStatus, WinChecker

logger = logging.getLogger(__name__)

Opponent = Callable[[Board], int]


@dataclass
class GameRecord:
    """A finished game."""
    outcome: Outcome
    moves: List[int]
    board: Board


@dataclass
class SimulationReport:
    """Results of a batch of games, counted from the human's side."""
    games: int = 0
    human_wins: int = 0
    computer_wins: int = 0
    draws: int = 0
    human: Mark = field(default=Mark.CROSS, repr=False)

    def add(self, outcome: Outcome) -> None:
        """Count one finished game."""
        if not outcome.is_terminal:
            raise ValueError(f"Cannot count an unfinished game ({outcome})")

        self.games += 1
        if outcome.status == OutcomeStatus.DRAW:
            self.draws += 1
        elif outcome.winner == self.human:
            self.human_wins += 1
        else:
            self.computer_wins += 1

    @property
    def losses(self) -> int:
        """Games the AI lost."""
        return self.human_wins

    def summary(self) -> str:
        return (f"{self.games} games: AI lost {self.human_wins}, "
                f"won {self.computer_wins}, drew {self.draws}")


def random_opponent(rng: np.random.Generator) -> Opponent:
    """An opponent that picks uniformly among the empty cells."""
    def choose(board: Board) -> int:
        return int(rng.choice(board.empty_cells()))
    return choose


def play_game(opponent: Opponent, ai: Optional[AIPlayer] = None,
              win_checker: Optional[WinChecker] = None) -> GameRecord:
    """
    Play one game: the opponent (Cross) moves first, the AI answers.

    Args:
        opponent: Callable returning a cell index for a board.
        ai: The AI playing Circle (default: a new AIPlayer).
        win_checker: Evaluator used after every move.

    Returns:
        The finished game.
    """
    ai = ai or AIPlayer(Mark.CIRCLE)
    win_checker = win_checker or ai.win_checker
    game = GameState()

    while not game.is_game_over:
        if game.current_player == ai.player:
            index = ai.get_best_move(game.board)
        else:
            index = opponent(game.board)

        if not game.make_move(index):
            raise ValueError(f"{game.current_player.value} played an illegal move {index}")
        win_checker.update_game_state(game)

    return GameRecord(
        outcome=game.outcome,
        moves=[move.index for move in game.moves],
        board=game.board,
    )


def run_simulations(games: int = GameConfig.DEFAULT_SIMULATIONS,
                    seed: Optional[int] = GameConfig.DEFAULT_SEED,
                    ai: Optional[AIPlayer] = None) -> SimulationReport:
    """
    Play the AI against a random opponent.

    Args:
        games: Number of games to play.
        seed: Seed for the random opponent, None for a fresh one.
        ai: The AI playing Circle.

    Returns:
        Counts of wins, losses and draws.
    """
    ai = ai or AIPlayer(Mark.CIRCLE)
    rng = np.random.default_rng(seed)
    opponent = random_opponent(rng)
    report = SimulationReport()

    for _ in range(games):
        record = play_game(opponent, ai)
        report.add(record.outcome)

    logger.info("Random opponent: %s", report.summary())
    return report


def self_play(cross: Optional[AIPlayer] = None,
              circle: Optional[AIPlayer] = None) -> GameRecord:
    """Play the AI against itself, Cross moving first."""
    cross = cross or AIPlayer(Mark.CROSS)
    circle = circle or AIPlayer(Mark.CIRCLE)
    return play_game(cross.get_best_move, circle)


def exhaustive_check(ai: Optional[AIPlayer] = None) -> SimulationReport:
    """
    Play every possible Cross strategy against the AI.

    Cross tries every empty cell at each of its turns; the AI answers
    with its chosen move. Every finished game is counted once.
    """
    ai = ai or AIPlayer(Mark.CIRCLE)
    checker = ai.win_checker
    report = SimulationReport(human=ai.opponent)
    replies: Dict[Board, int] = {}

    def cross_turn(board: Board) -> None:
        for index in board.empty_cells():
            after_cross = board.place(index, ai.opponent)
            outcome = checker.evaluate(after_cross)
            if outcome.is_terminal:
                report.add(outcome)
                continue

            if after_cross not in replies:
                replies[after_cross] = ai.get_best_move(after_cross)
            after_ai = after_cross.place(replies[after_cross], ai.player)
            outcome = checker.evaluate(after_ai)
            if outcome.is_terminal:
                report.add(outcome)
                continue

            cross_turn(after_ai)

    cross_turn(Board.empty())

    logger.info("Exhaustive check: %s (%d distinct positions searched)",
                report.summary(), len(replies))
    return report


def iter_reachable_positions(to_move: Mark = Mark.CIRCLE,
                             win_checker: Optional[WinChecker] = None) -> Iterator[Board]:
    """
    Iterate over every unfinished position reachable in legal play.

    Args:
        to_move: Only yield positions where this mark moves next.
        win_checker: Evaluator used to stop at finished games.

    Yields:
        Each distinct board once, in depth-first order from the empty board.
    """
    win_checker = win_checker or WinChecker()
    seen = set()
    stack = [Board.empty()]

    while stack:
        board = stack.pop()
        if board in seen:
            continue
        seen.add(board)

        if win_checker.evaluate(board).is_terminal:
            continue

        mover = board.side_to_move()
        if mover == to_move:
            yield board

        for index in reversed(board.empty_cells()):
            stack.append(board.place(index, mover))
