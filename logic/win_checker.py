"""
Win checker for TicTacToe.
Decides whether a board is won, drawn, or still in progress.
"""

from enum import Enum
from typing import Optional, Tuple
from dataclasses import dataclass, field

import numpy as np

from .game_state import Board, Cell


# All possible winning lines (as cell indices)
LINES = np.array([
    # Rows
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    # Columns
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    # Diagonals
    (0, 4, 8), (2, 4, 6),
], dtype=np.intp)
LINES.flags.writeable = False


class Status(Enum):
    """Where a game stands."""
    IN_PROGRESS = "in_progress"
    WIN = "win"
    DRAW = "draw"


@dataclass(frozen=True)
class Outcome:
    """
    Result of evaluating a board.

    winner is set only for Status.WIN; line holds the completed triple
    so the UI can highlight it.
    """
    status: Status
    winner: Optional[Cell] = None
    line: Optional[Tuple[int, int, int]] = field(default=None, compare=False)

    @property
    def is_terminal(self) -> bool:
        return self.status != Status.IN_PROGRESS

    @property
    def is_draw(self) -> bool:
        return self.status == Status.DRAW

    @classmethod
    def win(cls, winner: Cell, line: Optional[Tuple[int, int, int]] = None) -> "Outcome":
        return cls(Status.WIN, winner, line)


IN_PROGRESS = Outcome(Status.IN_PROGRESS)
DRAW = Outcome(Status.DRAW)


def _completed_lines(board: Board) -> np.ndarray:
    """Indices into LINES of every line holding three equal marks."""
    triples = board.to_array()[LINES]  # shape (8, 3)
    same = (triples[:, 0] == triples[:, 1]) & (triples[:, 1] == triples[:, 2])
    return np.flatnonzero(same & (triples[:, 0] != Cell.EMPTY))


def evaluate_outcome(board: Board) -> Outcome:
    """
    Evaluate a board.

    Win detection comes first: a full board that completes a line is a
    win, not a draw. Lines are scanned in LINES order and the first
    completed one decides the winner.

    Args:
        board: The board to check.

    Returns:
        Outcome with status WIN (and winner), DRAW, or IN_PROGRESS.
    """
    completed = _completed_lines(board)
    if completed.size:
        line = tuple(int(i) for i in LINES[completed[0]])
        return Outcome.win(board[line[0]], line)

    if board.is_full():
        return DRAW

    return IN_PROGRESS


def get_winning_line(board: Board) -> Optional[Tuple[int, int, int]]:
    """Get the completed line as a triple of indices, or None."""
    return evaluate_outcome(board).line
