"""
Board representation for the TicTacToe engine.
The board is an immutable value: placing a mark returns a new board.
"""

from enum import Enum
from typing import Iterable, List, Optional, Tuple
from dataclasses import dataclass

from .config import GameConfig


class InvalidBoardState(ValueError):
    """Raised when a board is structurally malformed."""


class Mark(Enum):
    """The two marks in the game. Cross is the human, Circle the computer."""
    CROSS = "X"
    CIRCLE = "O"

    def opposite(self) -> "Mark":
        """Get the opposite mark."""
        return Mark.CIRCLE if self == Mark.CROSS else Mark.CROSS


Cell = Optional[Mark]


@dataclass(frozen=True)
class Board:
    """
    A 3x3 TicTacToe board.

    Cells are stored row-major in a tuple of 9 entries:
      0 | 1 | 2
      3 | 4 | 5
      6 | 7 | 8
    None means empty, otherwise the Mark placed there.
    """

    cells: Tuple[Cell, ...]

    def __post_init__(self):
        cells = self.cells
        if not isinstance(cells, tuple):
            try:
                cells = tuple(cells)
            except TypeError:
                raise InvalidBoardState(f"Board cells must be a sequence, got {self.cells!r}")
            object.__setattr__(self, "cells", cells)

        if len(cells) != GameConfig.CELL_COUNT:
            raise InvalidBoardState(
                f"Board must have {GameConfig.CELL_COUNT} cells, got {len(cells)}"
            )

        for index, cell in enumerate(cells):
            if cell is not None and not isinstance(cell, Mark):
                raise InvalidBoardState(f"Invalid value {cell!r} in cell {index}")

    @classmethod
    def empty(cls) -> "Board":
        """Create a board with every cell empty."""
        return cls((None,) * GameConfig.CELL_COUNT)

    @classmethod
    def from_cells(cls, cells: Iterable[Cell]) -> "Board":
        return cls(tuple(cells))

    @classmethod
    def from_string(cls, text: str) -> "Board":
        """
        Parse a board from a string such as "XX..O....".

        Args:
            text: 9 symbols, X and O for marks, '.', '-', '_' or space for
                empty cells. Newlines and '|' separators are ignored.

        Returns:
            The parsed board.
        """
        symbols = [ch for ch in text if ch not in "\n\r|"]
        cells: List[Cell] = []
        for symbol in symbols:
            upper = symbol.upper()
            if symbol in GameConfig.EMPTY_SYMBOLS:
                cells.append(None)
            elif upper == Mark.CROSS.value:
                cells.append(Mark.CROSS)
            elif upper == Mark.CIRCLE.value:
                cells.append(Mark.CIRCLE)
            else:
                raise InvalidBoardState(f"Unknown board symbol {symbol!r}")
        return cls(tuple(cells))

    def __getitem__(self, index: int) -> Cell:
        return self.cells[index]

    def __iter__(self):
        return iter(self.cells)

    def place(self, index: int, mark: Mark) -> "Board":
        """
        Place a mark and return the resulting board.

        Args:
            index: Cell index (0-8).
            mark: The mark to place.

        Returns:
            A new board; this one is left untouched.
        """
        if not 0 <= index < GameConfig.CELL_COUNT:
            raise ValueError(f"Invalid cell index {index}. Must be 0-{GameConfig.CELL_COUNT - 1}.")
        if self.cells[index] is not None:
            raise ValueError(f"Cell {index} is already occupied by {self.cells[index].value}")

        cells = list(self.cells)
        cells[index] = mark
        return Board(tuple(cells))

    def empty_cells(self) -> List[int]:
        """Get all empty cell indices in ascending order."""
        return [i for i, cell in enumerate(self.cells) if cell is None]

    def is_full(self) -> bool:
        return all(cell is not None for cell in self.cells)

    def count(self, mark: Mark) -> int:
        return sum(1 for cell in self.cells if cell == mark)

    def side_to_move(self) -> Mark:
        """Infer the side to move from the mark counts (Cross plays first)."""
        if self.count(Mark.CROSS) == self.count(Mark.CIRCLE):
            return Mark.CROSS
        return Mark.CIRCLE

    def has_valid_turn_order(self) -> bool:
        """Check that Cross has as many marks as Circle, or exactly one more."""
        crosses = self.count(Mark.CROSS)
        circles = self.count(Mark.CIRCLE)
        return crosses == circles or crosses == circles + 1

    def rows(self) -> List[Tuple[Cell, ...]]:
        """Get the board as a list of rows."""
        size = GameConfig.BOARD_SIZE
        return [self.cells[r * size:(r + 1) * size] for r in range(size)]

    def to_string(self) -> str:
        """Compact single-line form, the inverse of from_string."""
        return "".join(
            GameConfig.EMPTY_SYMBOL if cell is None else cell.value
            for cell in self.cells
        )

    def __str__(self) -> str:
        lines = []
        for row in self.rows():
            lines.append(" ".join(
                GameConfig.EMPTY_SYMBOL if cell is None else cell.value
                for cell in row
            ))
        return "\n".join(lines)
