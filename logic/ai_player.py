"""
AI player for TicTacToe.
Uses the Minimax algorithm with alpha-beta pruning to choose the best move.
"""

import logging
from typing import Optional, Tuple

from .config import GameConfig
from .game_state import Board, Cell, MARKS, apply_move, legal_moves
from .win_checker import Status, evaluate_outcome

logger = logging.getLogger(__name__)


class NoLegalMoveError(RuntimeError):
    """Raised when the AI is asked to move on a board with no empty cell."""


class AIPlayer:
    """
    An AI that plays TicTacToe using the Minimax algorithm.

    The AI searches the whole game tree, so it always plays optimally:
    it wins if possible, blocks the opponent if needed, and never loses
    (at worst, draw).
    """

    def __init__(self, mark: Cell = Cell.OPPONENT, prune: bool = True):
        """
        Initialize the AI player.

        Args:
            mark: Which mark the AI plays, and maximizes for (default: O).
            prune: Use alpha-beta pruning. Turning it off gives plain
                minimax, which picks the same moves but visits more
                positions.
        """
        if mark not in MARKS:
            raise ValueError(f"AI must play X or O, got {mark!r}")
        self.mark = mark
        self.opponent = mark.opposite()
        self.prune = prune

        # Keep track of how many positions the last search evaluated (for debugging)
        self.positions_evaluated = 0

    def get_best_move(self, board: Board) -> int:
        """
        Get the best move for the current position.

        The board must not be finished; checking that is the caller's job.

        Args:
            board: Current board, with the AI to move.

        Returns:
            Index (0-8) of the best move.

        Raises:
            NoLegalMoveError: If the board has no empty cell.
        """
        self.positions_evaluated = 0

        valid_moves = legal_moves(board)

        if not valid_moves:
            raise NoLegalMoveError(f"No empty cell left on board {board}")

        # Special case: if only one move, just take it
        if len(valid_moves) == 1:
            return valid_moves[0]

        # Special case: on an empty board every move draws, take the center
        if len(valid_moves) == GameConfig.NUM_CELLS:
            return GameConfig.OPENING_MOVE

        best_score, best_move = self._minimax(
            board, depth=0, alpha=float('-inf'), beta=float('inf'), is_maximizing=True
        )

        if best_move is None:
            best_move = valid_moves[0]

        logger.debug(
            "AI evaluated %d positions. Best move: %d (score: %s)",
            self.positions_evaluated, best_move, best_score
        )

        return best_move

    def _minimax(
        self,
        board: Board,
        depth: int,
        alpha: float,
        beta: float,
        is_maximizing: bool
    ) -> Tuple[float, Optional[int]]:
        """
        Minimax algorithm with alpha-beta pruning.

        Args:
            board: Position to evaluate.
            depth: Plies played since the root of this search.
            alpha: Best score the maximizer is already assured of.
            beta: Best score the minimizer is already assured of.
            is_maximizing: True if it is the AI's turn in this position.

        Returns:
            (score, move) where move is the first move reaching the
            score, or None for a finished position.
        """
        self.positions_evaluated += 1

        # Check terminal states
        outcome = evaluate_outcome(board)

        if outcome.status == Status.WIN:
            if outcome.winner == self.mark:
                return GameConfig.WIN_SCORE - depth, None  # Win (prefer faster wins)
            return -GameConfig.WIN_SCORE + depth, None  # Loss (prefer slower losses)
        if outcome.status == Status.DRAW:
            return 0, None

        mark = self.mark if is_maximizing else self.opponent
        best_score = float('-inf') if is_maximizing else float('inf')
        best_move = None

        for index in legal_moves(board):
            score, _ = self._minimax(
                apply_move(board, index, mark), depth + 1, alpha, beta, not is_maximizing
            )

            # Strict comparison: ties keep the lowest index
            if is_maximizing:
                if score > best_score:
                    best_score, best_move = score, index
                alpha = max(alpha, score)
            else:
                if score < best_score:
                    best_score, best_move = score, index
                beta = min(beta, score)

            if self.prune and beta <= alpha:
                break  # Prune

        return best_score, best_move


def select_move(board: Board, side_to_maximize: Cell = Cell.OPPONENT) -> int:
    """
    Choose the optimal move for the side to move.

    Args:
        board: A board that is not finished.
        side_to_maximize: The mark that moves now and that the search
            maximizes for.

    Returns:
        Index (0-8) of the chosen cell.

    Raises:
        NoLegalMoveError: If the board is full.
    """
    return AIPlayer(side_to_maximize).get_best_move(board)
