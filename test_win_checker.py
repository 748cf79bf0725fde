"""
Tests for the win checker (outcome evaluation).
"""

import itertools

import pytest

from engine.board import Board, Mark
from engine.game_state import GameState
from engine.win_checker import (
    DRAW,
    IN_PROGRESS,
    Outcome,
    OutcomeStatus,
    WinChecker,
    evaluate,
)


@pytest.mark.parametrize("text, winner", [
    ("XXX.O.O..", Mark.CROSS),   # top row
    ("O..OX.OX.", Mark.CIRCLE),  # left column
    ("XO..XO..X", Mark.CROSS),   # main diagonal
    ("XXO.O.OX.", Mark.CIRCLE),  # anti-diagonal
])
def test_completed_line_wins(text, winner):
    assert evaluate(Board.from_string(text)) == Outcome.win(winner)


def test_in_progress_when_cells_remain():
    assert evaluate(Board.from_string("XOXOXO...")) == IN_PROGRESS


def test_full_board_without_line_is_draw():
    outcome = evaluate(Board.from_string("XOXOXOOXO"))
    assert outcome == DRAW
    assert outcome.is_terminal


def test_empty_board_in_progress():
    outcome = evaluate(Board.empty())
    assert outcome.status == OutcomeStatus.IN_PROGRESS
    assert not outcome.is_terminal


def test_line_beats_full_board():
    # Full board where Cross completed the last row
    board = Board.from_string("XOXOOXXXX")
    assert board.is_full()
    assert evaluate(board) == Outcome.win(Mark.CROSS)


def test_first_line_in_declared_order_wins():
    # Unreachable board with both a Circle row and a Cross row
    board = Board.from_string("OOOXXX...")
    assert evaluate(board) == Outcome.win(Mark.CIRCLE)

    # Column checked before diagonal
    board = Board.from_string("X..XX.X.X")
    checker = WinChecker()
    assert checker.get_winning_line(board) == (0, 3, 6)


def test_invariant_violating_board_does_not_crash():
    board = Board.from_string("OOOOOO...")
    assert evaluate(board) == Outcome.win(Mark.CIRCLE)


def test_every_three_in_a_row_is_detected():
    checker = WinChecker()
    for line in checker.WINNING_LINES:
        for mark in Mark:
            cells = [None] * 9
            for index in line:
                cells[index] = mark
            board = Board(tuple(cells))
            assert checker.check_winner(board) == mark
            assert checker.get_winning_line(board) == line


def test_no_line_and_empty_cell_means_in_progress():
    checker = WinChecker()
    symbols = (None, Mark.CROSS, Mark.CIRCLE)
    for cells in itertools.product(symbols, repeat=9):
        board = Board(cells)
        if checker.get_winning_line(board) is not None:
            continue
        expected = DRAW if board.is_full() else IN_PROGRESS
        assert checker.evaluate(board) == expected


def test_check_draw():
    checker = WinChecker()
    assert checker.check_draw(Board.from_string("XOXOXOOXO"))
    assert not checker.check_draw(Board.from_string("XOXOXO..."))
    assert not checker.check_draw(Board.from_string("XOXOOXXXX"))


def test_evaluate_is_idempotent():
    board = Board.from_string("XO.XO....")
    assert evaluate(board) == evaluate(board)


def test_outcome_rejects_inconsistent_winner():
    with pytest.raises(ValueError):
        Outcome(OutcomeStatus.WIN)
    with pytest.raises(ValueError):
        Outcome(OutcomeStatus.DRAW, Mark.CROSS)


def test_outcome_str():
    assert str(Outcome.win(Mark.CIRCLE)) == "O wins"
    assert str(DRAW) == "draw"
    assert str(IN_PROGRESS) == "in progress"


def test_update_game_state():
    checker = WinChecker()
    game = GameState(board=Board.from_string("XX.OO...."), current_player=Mark.CROSS)

    checker.update_game_state(game)
    assert not game.is_game_over

    game.make_move(2)
    checker.update_game_state(game)
    assert game.is_game_over
    assert game.winner == Mark.CROSS
