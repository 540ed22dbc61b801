"""
Main entry point for TicTacToe against the AI.

Launches the Tkinter UI by default, or a console game with --no-ui.
Run this script to play TicTacToe against an AI that never loses!
"""

import logging
import time
from typing import Optional

from logic.config import GameConfig
from logic.session import GameSession
from logic.win_checker import Status

logger = logging.getLogger(__name__)


class ConsoleGame:
    """
    Console version of the game.

    Game flow:
    1. Human types a cell number (1-9)
    2. AI "thinks" for a moment, then shows its reply
    3. Repeat until someone wins or it's a draw
    """

    def __init__(self, ai_first: bool = False, delay: float = GameConfig.AI_DELAY_S):
        self.session = GameSession(ai_first=ai_first)
        self.delay = delay

    def start(self):
        """Play one game."""
        print("\nCells are numbered:\n 1 | 2 | 3\n 4 | 5 | 6\n 7 | 8 | 9\n")
        print(f"You play {self.session.human_mark.symbol}, "
              f"the AI plays {self.session.ai_mark.symbol}.\n")

        while not self.session.is_game_over:
            print(self.session.board.render())
            if self.session.is_ai_turn:
                self._ai_turn()
            else:
                self._human_turn()

        self._show_game_result()

    def _human_turn(self):
        """Read cells from stdin until a legal one is played."""
        while True:
            index = self._read_cell()
            if index is not None and self.session.play_human(index):
                return
            print("Illegal move. Try again.")

    def _read_cell(self) -> Optional[int]:
        raw = input(f"Play {self.session.human_mark.symbol} at [1-9]: ").strip()
        try:
            return int(raw) - 1
        except ValueError:
            return None

    def _ai_turn(self):
        """Compute the AI's move, pause, then reveal it."""
        print("AI Thinking...")
        pending = self.session.request_ai_move()
        time.sleep(self.delay)
        if self.session.resolve(pending):
            print(f"AI plays at {pending.index + 1}")

    def _show_game_result(self):
        """Print the final board and result."""
        print(self.session.board.render())

        outcome = self.session.outcome
        if outcome.status == Status.WIN and outcome.winner == self.session.human_mark:
            print("\nYou won! That shouldn't happen...")
        elif outcome.status == Status.WIN:
            print("\nAI wins! Better luck next time!")
        else:
            print("\nIt's a draw! Good game!")


def play_console(ai_first: bool, delay: float):
    """Play console games until the user stops."""
    game = ConsoleGame(ai_first=ai_first, delay=delay)
    while True:
        game.start()
        if input("\nPlay again? [y/N]: ").strip().lower() != "y":
            return
        game.session.reset()


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe against an unbeatable AI")
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )
    parser.add_argument(
        "--ai-first",
        action="store_true",
        help="Let the AI make the first move"
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=GameConfig.AI_DELAY_S,
        help="Seconds the AI 'thinks' before its move is shown"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log search statistics"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    # Launch UI by default
    if not args.no_ui:
        from ui import TicTacToeUI
        ui = TicTacToeUI(ai_first=args.ai_first, delay_ms=int(args.delay * 1000))
        ui.run()
        return

    print("\n" + "=" * 40)
    print("   TicTacToe - console mode")
    print("=" * 40)

    try:
        play_console(ai_first=args.ai_first, delay=args.delay)
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
