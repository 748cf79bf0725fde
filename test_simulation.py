"""
Tests for automated games: the AI must never lose.
"""

import numpy as np

from engine.ai_player import AIPlayer
from engine.board import Board, Mark
from engine.simulation import (
    SimulationReport,
    exhaustive_check,
    iter_reachable_positions,
    play_game,
    random_opponent,
    run_simulations,
    self_play,
)
from engine.win_checker import DRAW, Outcome, evaluate


def test_self_play_is_a_draw():
    record = self_play()
    assert record.outcome == DRAW
    assert record.board.is_full()
    assert len(record.moves) == 9


def test_random_opponent_never_wins():
    report = run_simulations(30, seed=1234)
    assert report.games == 30
    assert report.losses == 0
    assert report.computer_wins + report.draws == 30


def test_simulations_are_reproducible():
    first = run_simulations(10, seed=7)
    second = run_simulations(10, seed=7)
    assert first == second


def test_exhaustive_check_has_no_losses():
    report = exhaustive_check()
    assert report.games > 0
    assert report.losses == 0
    assert report.draws > 0
    assert report.computer_wins > 0


def test_play_game_records_moves():
    # Cross always takes the lowest free cell
    record = play_game(lambda board: board.empty_cells()[0])

    replay = Board.empty()
    mark = Mark.CROSS
    for index in record.moves:
        replay = replay.place(index, mark)
        mark = mark.opposite()

    assert replay == record.board
    assert evaluate(record.board) == record.outcome
    assert record.outcome.winner != Mark.CROSS


def test_suboptimal_opening_is_punished():
    # Cross plays edges while they are free, then the lowest free cell
    preferred = [1, 7, 5, 3]

    def opponent(board):
        for index in preferred:
            if board[index] is None:
                return index
        return board.empty_cells()[0]

    ai = AIPlayer()
    record = play_game(opponent, ai)
    assert record.outcome.is_terminal
    assert record.outcome.winner != Mark.CROSS


def test_random_opponent_picks_empty_cells():
    choose = random_opponent(np.random.default_rng(0))
    board = Board.from_string("XOXOX....")
    for _ in range(20):
        assert choose(board) in (5, 6, 7, 8)


def test_reachable_positions():
    positions = list(iter_reachable_positions(Mark.CIRCLE))

    assert len(positions) == len(set(positions))
    assert Board.from_string("X........") in positions
    for board in positions:
        assert board.side_to_move() == Mark.CIRCLE
        assert board.has_valid_turn_order()
        assert not evaluate(board).is_terminal


def test_report_summary():
    report = SimulationReport()
    report.add(DRAW)
    report.add(Outcome.win(Mark.CIRCLE))
    assert report.summary() == "2 games: AI lost 0, won 1, drew 1"
