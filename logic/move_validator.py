"""
Move validator for TicTacToe.
Validates that moves follow the rules.
"""

from typing import Optional, List
from dataclasses import dataclass

from .game_state import Board, Cell, legal_moves
from .win_checker import evaluate_outcome


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Game must not be over
    2. Position must be on the board (0-8)
    3. Can only place on empty cells
    """

    def validate_move(self, board: Board, index: int, mark: Cell) -> ValidationResult:
        """
        Validate a move.

        Args:
            board: Current board.
            index: Cell to place the mark on (0-8).
            mark: The mark being placed.

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if evaluate_outcome(board).is_terminal:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        error = board.check_move(index, mark)
        if error is not None:
            return ValidationResult(is_valid=False, error_message=error)

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, board: Board) -> List[int]:
        """
        Get all valid moves on the board.

        Returns:
            Ascending list of cell indices, empty once the game is over.
        """
        if evaluate_outcome(board).is_terminal:
            return []
        return legal_moves(board)
