"""Tests for win and draw detection."""

import pytest

from logic.game_state import Board, Cell, apply_move, legal_moves
from logic.win_checker import (
    DRAW,
    IN_PROGRESS,
    LINES,
    Outcome,
    Status,
    evaluate_outcome,
    get_winning_line,
)
from logic.move_validator import MoveValidator


def _board_with_line(line, mark):
    cells = [Cell.EMPTY] * 9
    for index in line:
        cells[index] = mark
    return Board(tuple(cells))


def test_there_are_eight_fixed_lines():
    assert LINES.shape == (8, 3)
    assert {tuple(int(i) for i in line) for line in LINES} == {
        (0, 1, 2), (3, 4, 5), (6, 7, 8),
        (0, 3, 6), (1, 4, 7), (2, 5, 8),
        (0, 4, 8), (2, 4, 6),
    }


@pytest.mark.parametrize("line", [tuple(int(i) for i in line) for line in LINES])
@pytest.mark.parametrize("mark", [Cell.PLAYER, Cell.OPPONENT])
def test_every_line_is_a_win(line, mark):
    outcome = evaluate_outcome(_board_with_line(line, mark))

    assert outcome.status == Status.WIN
    assert outcome.winner == mark
    assert outcome.line == line
    assert outcome.is_terminal


def test_empty_board_is_in_progress():
    outcome = evaluate_outcome(Board.empty())
    assert outcome == IN_PROGRESS
    assert not outcome.is_terminal
    assert outcome.winner is None


def test_mixed_line_is_not_a_win():
    assert evaluate_outcome(Board.from_string("XXO.O....")) == IN_PROGRESS


def test_last_cell_filled_with_o_is_a_draw():
    board = Board.from_string("XOXOXOOX.")
    assert evaluate_outcome(board) == IN_PROGRESS

    outcome = evaluate_outcome(apply_move(board, 8, Cell.OPPONENT))
    assert outcome == DRAW
    assert outcome.is_draw
    assert outcome.winner is None


def test_full_board_with_a_line_is_a_win_not_a_draw():
    # X on the last cell completes the 0-4-8 diagonal
    board = apply_move(Board.from_string("XOXOXOOX."), 8, Cell.PLAYER)

    assert board.is_full()
    outcome = evaluate_outcome(board)
    assert outcome.status == Status.WIN
    assert outcome.winner == Cell.PLAYER
    assert outcome.line == (0, 4, 8)


def test_outcome_equality_ignores_line():
    assert Outcome.win(Cell.OPPONENT, (0, 1, 2)) == Outcome(Status.WIN, Cell.OPPONENT)
    assert Outcome.win(Cell.OPPONENT) != Outcome.win(Cell.PLAYER)


def test_get_winning_line():
    assert get_winning_line(Board.from_string("O..XO.X.O")) == (0, 4, 8)
    assert get_winning_line(Board.from_string("X...O....")) is None


def test_evaluation_does_not_change_the_board():
    board = Board.from_string("XXXOO....")
    before = board.to_array().copy()
    evaluate_outcome(board)
    assert (board.to_array() == before).all()


def test_reachable_boards_have_at_most_one_result(reachable_positions):
    for board, _ in reachable_positions:
        winners = {
            board[int(a)] for a, b, c in LINES
            if board[int(a)] != Cell.EMPTY and board[int(a)] == board[int(b)] == board[int(c)]
        }
        assert len(winners) <= 1, board

        outcome = evaluate_outcome(board)
        if winners:
            assert outcome.status == Status.WIN
            assert outcome.winner in winners
        elif board.is_full():
            assert outcome == DRAW
        else:
            assert outcome == IN_PROGRESS


def test_validator_rejects_moves_after_game_over():
    validator = MoveValidator()
    board = Board.from_string("XXXOO....")

    result = validator.validate_move(board, 5, Cell.OPPONENT)
    assert not result.is_valid
    assert result.error_message == "Game is already over!"
    assert validator.get_valid_moves(board) == []


def test_validator_accepts_and_rejects_cells():
    validator = MoveValidator()
    board = Board.from_string("X........")

    assert validator.validate_move(board, 4, Cell.OPPONENT).is_valid
    assert "occupied" in validator.validate_move(board, 0, Cell.OPPONENT).error_message
    assert "0-8" in validator.validate_move(board, 9, Cell.OPPONENT).error_message
    assert validator.get_valid_moves(board) == legal_moves(board)
