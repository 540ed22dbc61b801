"""
Game state for TicTacToe.
Defines the cells, the immutable 3x3 board, and how moves are applied.

Board layout (index = row * 3 + col):

     0 | 1 | 2
    ---+---+---
     3 | 4 | 5
    ---+---+---
     6 | 7 | 8
"""

from enum import IntEnum
from numbers import Integral
from typing import List, Optional, Tuple
from dataclasses import dataclass, field

import numpy as np

from .config import GameConfig


class InvalidMoveError(ValueError):
    """Raised when a move targets an occupied cell or an index off the board."""


class Cell(IntEnum):
    """Contents of a single board cell."""
    EMPTY = 0
    PLAYER = 1     # Human (X)
    OPPONENT = 2   # AI (O)

    def opposite(self) -> "Cell":
        """Get the other player's mark."""
        if self == Cell.PLAYER:
            return Cell.OPPONENT
        if self == Cell.OPPONENT:
            return Cell.PLAYER
        raise ValueError("An empty cell has no opposite mark")

    @property
    def symbol(self) -> str:
        """Character used to print this cell."""
        return _SYMBOLS[self]


_SYMBOLS = {
    Cell.EMPTY: GameConfig.EMPTY_SYMBOL,
    Cell.PLAYER: GameConfig.PLAYER_SYMBOL,
    Cell.OPPONENT: GameConfig.OPPONENT_SYMBOL,
}

_PARSE = {
    GameConfig.PLAYER_SYMBOL: Cell.PLAYER,
    GameConfig.OPPONENT_SYMBOL: Cell.OPPONENT,
    ".": Cell.EMPTY,
    "_": Cell.EMPTY,
    "-": Cell.EMPTY,
    " ": Cell.EMPTY,
}

MARKS = (Cell.PLAYER, Cell.OPPONENT)


@dataclass(frozen=True)
class Board:
    """
    The 3x3 TicTacToe board.

    Boards are values: applying a move returns a new Board and never
    changes an existing one, so search branches cannot interfere.
    """

    cells: Tuple[Cell, ...] = field(
        default_factory=lambda: (Cell.EMPTY,) * GameConfig.NUM_CELLS
    )

    # Read-only numpy copy of the cells, used by the win checker
    _array: np.ndarray = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        cells = tuple(self.cells)
        if len(cells) != GameConfig.NUM_CELLS:
            raise ValueError(
                f"A board has {GameConfig.NUM_CELLS} cells, got {len(cells)}"
            )
        try:
            cells = tuple(Cell(value) for value in cells)
        except ValueError:
            raise ValueError(f"Invalid cell value in {self.cells!r}") from None

        array = np.array(cells, dtype=np.int8)
        array.flags.writeable = False

        object.__setattr__(self, "cells", cells)
        object.__setattr__(self, "_array", array)

    @classmethod
    def empty(cls) -> "Board":
        """Create a board with all 9 cells empty."""
        return cls()

    @classmethod
    def from_string(cls, text: str) -> "Board":
        """
        Build a board from a 9-character string.

        Args:
            text: Cells in index order, e.g. "XX.OO....". Empty cells
                may be written as '.', '_', '-' or a space.

        Returns:
            The parsed Board.
        """
        if len(text) != GameConfig.NUM_CELLS:
            raise ValueError(f"Expected {GameConfig.NUM_CELLS} characters, got {text!r}")
        try:
            return cls(tuple(_PARSE[ch] for ch in text.upper()))
        except KeyError as e:
            raise ValueError(f"Unknown cell symbol {e.args[0]!r} in {text!r}") from None

    def __getitem__(self, index: int) -> Cell:
        return self.cells[index]

    def __iter__(self):
        return iter(self.cells)

    def __len__(self) -> int:
        return len(self.cells)

    def __str__(self) -> str:
        return "".join(cell.symbol if cell != Cell.EMPTY else "." for cell in self.cells)

    def to_array(self) -> np.ndarray:
        """Get the cells as a read-only int8 vector of length 9."""
        return self._array

    def as_grid(self) -> np.ndarray:
        """Get the cells as a read-only 3x3 array (rows, cols)."""
        return self._array.reshape(GameConfig.BOARD_SIZE, GameConfig.BOARD_SIZE)

    def count(self, mark: Cell) -> int:
        """Count the cells holding the given mark."""
        return int(np.count_nonzero(self._array == mark))

    def is_full(self) -> bool:
        return not (self._array == Cell.EMPTY).any()

    def check_move(self, index, mark: Cell) -> Optional[str]:
        """
        Check whether a mark may be placed at an index.

        Returns:
            None if the move is allowed, otherwise the reason it is not.
        """
        if mark not in MARKS:
            return f"Cannot place {mark!r}, only X or O can be played"
        if isinstance(index, bool) or not isinstance(index, Integral):
            return f"Invalid position {index!r}. Must be an integer 0-8."
        if not 0 <= index < GameConfig.NUM_CELLS:
            return f"Invalid position {index}. Must be 0-8."
        if self.cells[index] != Cell.EMPTY:
            return f"Cell {index} is already occupied by {self.cells[index].symbol}"
        return None

    def render(self) -> str:
        """Render the board as a text grid (row/col labels included)."""
        lines = ["    0   1   2", "  +---+---+---+"]
        for row, cells in enumerate(self.as_grid()):
            symbols = " | ".join(Cell(int(value)).symbol for value in cells)
            lines.append(f"{row} | {symbols} |")
            lines.append("  +---+---+---+")
        return "\n".join(lines)


def apply_move(board: Board, index: int, mark: Cell) -> Board:
    """
    Place a mark on the board.

    Args:
        board: Board to play on. It is not modified.
        index: Cell index (0-8).
        mark: Cell.PLAYER or Cell.OPPONENT.

    Returns:
        A new Board with that one cell set.

    Raises:
        InvalidMoveError: If the index is off the board or the cell is taken.
    """
    error = board.check_move(index, mark)
    if error is not None:
        raise InvalidMoveError(error)

    cells = list(board.cells)
    cells[index] = mark
    return Board(tuple(cells))


def legal_moves(board: Board) -> List[int]:
    """Return the indices of all empty cells, in ascending order."""
    return [i for i, cell in enumerate(board.cells) if cell == Cell.EMPTY]


def side_to_move(board: Board, first: Cell = Cell.PLAYER) -> Cell:
    """Infer whose turn it is from the mark counts."""
    if board.count(first) == board.count(first.opposite()):
        return first
    return first.opposite()
