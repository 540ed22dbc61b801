"""
Game session for TicTacToe.
Tracks one human-vs-AI game: whose turn it is, resets, and AI moves
that are waiting to be revealed.
"""

import logging
from typing import Optional
from dataclasses import dataclass

from .game_state import Board, Cell, apply_move
from .win_checker import Outcome, Status, evaluate_outcome
from .move_validator import MoveValidator
from .ai_player import AIPlayer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PendingMove:
    """
    An AI move that has been computed but not shown yet.

    board and generation are the session state the move was computed
    for; the move is only applied while both still match.
    """
    index: int
    board: Board
    generation: int


class GameSession:
    """
    One game between a human and the AI.

    Game flow:
    1. Human plays a cell (play_human)
    2. Front end asks for the AI's reply (request_ai_move)
    3. After its delay, the front end reveals it (resolve)
    4. Repeat until someone wins or it's a draw, then reset()
    """

    def __init__(
        self,
        human_mark: Cell = Cell.PLAYER,
        ai_first: bool = False,
        ai: Optional[AIPlayer] = None
    ):
        """
        Initialize the session.

        Args:
            human_mark: Which mark the human plays (default: X).
            ai_first: If True, the AI makes the first move of each game.
            ai: AI to use; defaults to an AIPlayer for the other mark.
        """
        self.human_mark = human_mark
        self.ai_mark = human_mark.opposite()
        self.ai_first = ai_first
        self.ai = ai if ai is not None else AIPlayer(self.ai_mark)
        if self.ai.mark != self.ai_mark:
            raise ValueError(f"AI plays {self.ai.mark.symbol}, expected {self.ai_mark.symbol}")

        self.validator = MoveValidator()

        # Bumped on every reset; pending moves from older games are stale
        self.generation = 0
        self.board = Board.empty()
        self.current_player = self._first_player()

    def _first_player(self) -> Cell:
        return self.ai_mark if self.ai_first else self.human_mark

    @property
    def outcome(self) -> Outcome:
        """Outcome of the live board, recomputed on every access."""
        return evaluate_outcome(self.board)

    @property
    def is_game_over(self) -> bool:
        return self.outcome.is_terminal

    @property
    def is_ai_turn(self) -> bool:
        return self.current_player == self.ai_mark and not self.is_game_over

    def play_human(self, index: int) -> bool:
        """
        Play the human's move.

        Moves made out of turn, after the game is over, or on a taken or
        off-board cell are ignored.

        Args:
            index: Cell index (0-8).

        Returns:
            True if the move was played.
        """
        if self.current_player != self.human_mark:
            logger.info("Ignoring move %r: it is not the human's turn", index)
            return False

        result = self.validator.validate_move(self.board, index, self.human_mark)
        if not result.is_valid:
            logger.info("Ignoring move %r: %s", index, result.error_message)
            return False

        self.board = apply_move(self.board, index, self.human_mark)

        self._end_turn()
        return True

    def request_ai_move(self) -> PendingMove:
        """
        Compute the AI's move without applying it.

        Returns:
            The move, tagged with the board and generation it belongs to.

        Raises:
            RuntimeError: If it is not the AI's turn.
        """
        if not self.is_ai_turn:
            raise RuntimeError("AI move requested when it is not the AI's turn")

        index = self.ai.get_best_move(self.board)
        logger.debug("AI chose cell %d for board %s", index, self.board)
        return PendingMove(index=index, board=self.board, generation=self.generation)

    def resolve(self, pending: PendingMove) -> bool:
        """
        Apply a pending AI move if it still belongs to the live game.

        Args:
            pending: Move returned by request_ai_move.

        Returns:
            True if the move was applied, False if it was stale and dropped.
        """
        if pending.generation != self.generation or pending.board != self.board:
            logger.info("Discarding stale AI move %d", pending.index)
            return False

        self.board = apply_move(self.board, pending.index, self.ai_mark)
        self._end_turn()
        return True

    def play_ai(self) -> int:
        """Compute and apply the AI's move at once (no delay)."""
        pending = self.request_ai_move()
        self.resolve(pending)
        return pending.index

    def _end_turn(self):
        """Hand the turn to the other player unless the game just ended."""
        outcome = self.outcome
        if outcome.is_terminal:
            logger.info("Game over: %s", _describe(outcome))
            return
        self.current_player = self.current_player.opposite()

    def reset(self):
        """Start a new game. Pending AI moves from the old game become stale."""
        logger.info("Resetting game")
        self.generation += 1
        self.board = Board.empty()
        self.current_player = self._first_player()

    def status_message(self) -> str:
        """Text shown above the board."""
        outcome = self.outcome
        if outcome.status == Status.WIN:
            return "You Win!" if outcome.winner == self.human_mark else "AI Wins!"
        if outcome.status == Status.DRAW:
            return "It's a Draw!"
        return "Your Turn" if self.current_player == self.human_mark else "AI Thinking..."


def _describe(outcome: Outcome) -> str:
    if outcome.status == Status.WIN:
        return f"{outcome.winner.symbol} wins"
    return outcome.status.value
