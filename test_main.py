"""Tests for the console front end and the package wiring."""

import itertools

import pytest

import logic
import main
from logic.game_state import Cell


def test_package_exports_the_core_entry_points():
    board = logic.apply_move(logic.Board.empty(), 0, logic.Cell.PLAYER)

    assert logic.evaluate_outcome(board).status == logic.Status.IN_PROGRESS
    assert logic.select_move(board, logic.Cell.OPPONENT) == 4
    assert issubclass(logic.InvalidMoveError, ValueError)
    assert issubclass(logic.NoLegalMoveError, RuntimeError)


def _feed_input(monkeypatch, answers):
    answers = iter(answers)
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))


def test_console_game_plays_to_the_end(monkeypatch, capsys):
    # Garbage and taken cells are retried until a free one comes up
    _feed_input(monkeypatch, itertools.cycle(["abc", "0"] + [str(i) for i in range(1, 10)]))

    game = main.ConsoleGame(delay=0)
    game.start()

    out = capsys.readouterr().out
    assert "Illegal move. Try again." in out
    assert "AI plays at" in out
    assert "You won!" not in out
    assert game.session.is_game_over
    assert game.session.outcome.winner != Cell.PLAYER


def test_console_ai_first_opens_in_the_center(monkeypatch, capsys):
    _feed_input(monkeypatch, itertools.cycle(str(i) for i in range(1, 10)))

    game = main.ConsoleGame(ai_first=True, delay=0)
    game.start()

    out = capsys.readouterr().out
    assert "AI plays at 5" in out
    assert game.session.board[4] == Cell.OPPONENT


def test_play_console_stops_when_declined(monkeypatch, capsys):
    answers = itertools.chain(
        (str(i) for i in range(1, 10)),
        ["n"],
    )
    _feed_input(monkeypatch, answers)

    main.play_console(ai_first=False, delay=0)

    out = capsys.readouterr().out
    assert "It's a draw!" in out or "AI wins!" in out


def test_main_console_mode_handles_end_of_input(monkeypatch, capsys):
    def no_more_input(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", no_more_input)
    monkeypatch.setattr("sys.argv", ["main.py", "--no-ui", "--delay", "0"])

    main.main()

    out = capsys.readouterr().out
    assert "Game interrupted by user." in out
    assert "Goodbye!" in out


@pytest.mark.parametrize("flag", ["--ai-first", "--verbose"])
def test_main_accepts_flags(monkeypatch, capsys, flag):
    def no_more_input(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", no_more_input)
    monkeypatch.setattr("sys.argv", ["main.py", "--no-ui", "--delay", "0", flag])

    main.main()

    assert "Goodbye!" in capsys.readouterr().out
