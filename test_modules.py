"""
Tests for the TicTacToe modules working together:
the engine package wiring and the console driver in main.py.
"""

from engine import (
    AIPlayer,
    Board,
    GameState,
    Mark,
    MoveValidator,
    WinChecker,
    evaluate,
    select_move,
)
from main import TicTacToeGame, main


def test_game_logic():
    """The pieces of the engine play one human and one AI move together."""
    game = GameState()
    validator = MoveValidator()
    checker = WinChecker()
    ai = AIPlayer(Mark.CIRCLE)

    assert validator.validate_move(game, 0).is_valid
    assert game.make_move(0)
    checker.update_game_state(game)
    assert not game.is_game_over

    move = ai.get_best_move(game.board)
    assert move == select_move(game.board)
    assert game.make_move(move)
    assert game.current_player == Mark.CROSS
    assert evaluate(game.board) == game.outcome


def _scripted_game(answers):
    """A console game where the human always takes the lowest free cell."""
    output = []
    replies = iter(answers)
    game = None

    def read(prompt):
        if prompt.strip().startswith("Your move"):
            return str(game.game_state.get_empty_cells()[0] + 1)
        return next(replies)

    game = TicTacToeGame(read, output.append)
    return game, output


def test_console_game_plays_to_the_end():
    game, output = _scripted_game(["n"])
    game.start()

    assert game.game_state.is_game_over
    assert game.game_state.winner != Mark.CROSS
    assert game.tally.human_wins == 0
    assert any("AI wins!" in line or "Tie!" in line for line in output)
    assert output[-1] == "Thanks for playing!"


def test_play_again_keeps_the_score():
    game, output = _scripted_game(["y", "n"])
    game.start()

    results = [line for line in output if "Player:" in line]
    assert len(results) == 2
    assert game.tally.human_wins == 0
    assert game.game_state.is_game_over


def test_console_rejects_bad_input_and_quits():
    output = []
    replies = iter(["abc", "10", "5", "5", "q"])
    game = TicTacToeGame(lambda prompt: next(replies), output.append)
    game.start()

    text = "\n".join(output)
    assert "Invalid input" in text
    assert "Must be 1-9" in text
    assert "already occupied" in text
    assert "Game quit by user." in text
    assert game.game_state.board.count(Mark.CROSS) == 1
    assert game.game_state.board.count(Mark.CIRCLE) == 1


def test_console_highlights_winning_line():
    output = []
    game = TicTacToeGame(lambda prompt: "n", output.append)
    game.game_state.board = Board.from_string("OOOXX.X..")
    game._print_board()

    assert "*O*" in output[-1]
    assert "*X*" not in output[-1]


def test_cli_random_simulations(capsys):
    assert main(["--test", "--sims", "5", "--seed", "3"]) == 0
    assert "5 games: AI lost 0" in capsys.readouterr().out


def test_cli_self_play(capsys):
    assert main(["--self-play"]) == 0
    assert "Result: draw" in capsys.readouterr().out


def test_cli_verify(capsys):
    assert main(["--verify"]) == 0
    assert "AI lost 0" in capsys.readouterr().out
