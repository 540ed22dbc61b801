"""Shared fixtures for the TicTacToe tests."""

import pytest

from logic.game_state import Board, Cell, apply_move, legal_moves
from logic.win_checker import evaluate_outcome


def _reachable_positions():
    """Every (board, side to move) reachable from the empty board, either side starting."""
    seen = set()
    stack = [(Board.empty(), Cell.PLAYER), (Board.empty(), Cell.OPPONENT)]
    while stack:
        board, to_move = stack.pop()
        if (board, to_move) in seen:
            continue
        seen.add((board, to_move))
        if evaluate_outcome(board).is_terminal:
            continue
        for index in legal_moves(board):
            stack.append((apply_move(board, index, to_move), to_move.opposite()))
    return seen


@pytest.fixture(scope="session")
def reachable_positions():
    return sorted(_reachable_positions(), key=lambda p: (str(p[0]), p[1]))


@pytest.fixture(scope="session")
def open_positions(reachable_positions):
    """Reachable positions that still have a move to play."""
    return [
        (board, to_move) for board, to_move in reachable_positions
        if not evaluate_outcome(board).is_terminal
    ]
