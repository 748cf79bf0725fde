"""
Main orchestration script for TicTacToe.

This script ties together:
- Game state (board, turn, score tally)
- Logic (move validation, win checking, AI)
- A plain text console for the human player

Run this script to play TicTacToe against the computer!
"""

import logging
import sys
from typing import Callable, Optional

from engine.ai_player import AIPlayer
from engine.board import Mark
from engine.config import GameConfig
from engine.game_state import GameState, ScoreTally
from engine.move_validator import MoveValidator
from engine.simulation import exhaustive_check, run_simulations, self_play
from engine.win_checker import WinChecker

QUIT_WORDS = ("q", "quit", "exit")


class TicTacToeGame:
    """
    Console controller for TicTacToe.

    Game flow:
    1. Human (X) picks a cell
    2. Move is validated and played
    3. Computer (O) calculates the best response and plays it
    4. Repeat until someone wins or it's a draw
    5. Score is updated and the human may play again
    """

    def __init__(
        self,
        input_func: Callable[[str], str] = input,
        output_func: Callable[[str], None] = print,
    ):
        """
        Initialize the game.

        Args:
            input_func: Reads a line from the human.
            output_func: Shows a line to the human.
        """
        self.read = input_func
        self.write = output_func

        self.human_player = Mark.CROSS
        self.computer_player = Mark.CIRCLE

        self.game_state = GameState()
        self.validator = MoveValidator()
        self.win_checker = WinChecker()
        self.ai = AIPlayer(self.computer_player, self.win_checker)
        self.tally = ScoreTally()

        self.is_running = False

    def start(self):
        """Play rounds until the human quits or declines another game."""
        self.write(f"\nTic-Tac-Toe: you are {self.human_player.value} and play first. Type q to quit.")
        self.is_running = True

        while self.is_running:
            self._game_loop()
            if not self.is_running:
                break

            self._show_game_result()

            answer = self.read("\nPlay again? (y/n) > ").strip().lower()
            if answer.startswith("y"):
                self._reset_game()
            else:
                self.is_running = False

        self.write("Thanks for playing!")

    def _game_loop(self):
        """Main game loop for a single round."""
        self._print_board()

        while self.is_running and not self.game_state.is_game_over:
            if self.game_state.current_player == self.human_player:
                index = self._read_human_move()
                if index is None:
                    self.write("\nGame quit by user.")
                    self.is_running = False
                    return
                self._play(index)
            else:
                self._computer_move()

    def _read_human_move(self) -> Optional[int]:
        """
        Ask the human for a cell until a valid one is entered.

        Returns:
            Cell index (0-8), or None if the human quits.
        """
        while True:
            raw = self.read(f"\nYour move (1-{GameConfig.CELL_COUNT}) > ").strip()
            if raw.lower() in QUIT_WORDS:
                return None

            try:
                index = int(raw) - 1
            except ValueError:
                self.write(f"Invalid input. Enter a number between 1 and {GameConfig.CELL_COUNT}.")
                continue

            result = self.validator.validate_move(self.game_state, index)
            if result.is_valid:
                return index
            self.write(result.error_message)

    def _computer_move(self):
        """Let the computer pick and play its move."""
        move = self.ai.get_best_move(self.game_state.board)
        self.write(f"\nAI plays cell {move + 1}")
        self._play(move)

    def _play(self, index: int):
        """Apply a move, then check for a winner."""
        if self.game_state.make_move(index):
            self.win_checker.update_game_state(self.game_state)
            self._print_board()

    def _print_board(self):
        """Show the board; empty cells show their number."""
        board = self.game_state.board
        winning_line = self.win_checker.get_winning_line(board) or ()
        size = GameConfig.BOARD_SIZE

        rows = []
        for r in range(size):
            cells = []
            for c in range(size):
                index = r * size + c
                mark = board[index]
                if mark is None:
                    cells.append(str(index + 1))
                elif index in winning_line:
                    cells.append(f"*{mark.value}*")
                else:
                    cells.append(mark.value)
            rows.append("|".join(f"{cell:^3}" for cell in cells))

        self.write("\n" + ("\n" + "-" * 11 + "\n").join(rows))

    def _show_game_result(self):
        """Show the final result and update the score."""
        outcome = self.game_state.outcome
        self.tally.record(outcome, self.human_player, self.computer_player)

        if outcome.winner == self.human_player:
            message = GameConfig.RESULT_MESSAGES["human"]
        elif outcome.winner == self.computer_player:
            message = GameConfig.RESULT_MESSAGES["computer"]
        else:
            message = GameConfig.RESULT_MESSAGES["draw"]

        self.write("\n" + "=" * 30)
        self.write(f"   {message}")
        self.write(f"   Player: {self.tally.human_wins}  AI: {self.tally.computer_wins}")
        self.write("=" * 30)

    def _reset_game(self):
        """Reset the board for a new round; the score is kept."""
        self.game_state.reset()


def main(argv=None) -> int:
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe against an AI that never loses")
    parser.add_argument(
        "--test",
        action="store_true",
        help="Play the AI against a random opponent and report losses"
    )
    parser.add_argument(
        "--sims",
        type=int,
        default=GameConfig.DEFAULT_SIMULATIONS,
        help="Number of games for --test"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=GameConfig.DEFAULT_SEED,
        help="Random seed for --test"
    )
    parser.add_argument(
        "--self-play",
        action="store_true",
        help="Play the AI against itself"
    )
    parser.add_argument(
        "--verify",
        action="store_true",
        help="Play every possible opponent strategy against the AI"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show search statistics"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.test:
        print(f"Running {args.sims} games against a random opponent...")
        report = run_simulations(args.sims, seed=args.seed)
        print(report.summary())
        return 0 if report.losses == 0 else 1

    if args.self_play:
        record = self_play()
        print(record.board)
        print(f"Moves: {' '.join(str(m + 1) for m in record.moves)}")
        print(f"Result: {record.outcome}")
        return 0 if record.outcome.is_draw else 1

    if args.verify:
        print("Playing every opponent strategy against the AI...")
        report = exhaustive_check()
        print(report.summary())
        return 0 if report.losses == 0 else 1

    game = TicTacToeGame()
    try:
        game.start()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
