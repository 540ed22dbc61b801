"""
TicTacToe UI
A graphical interface for playing TicTacToe against the AI using Tkinter.

Shows:
- The 3x3 board (X for the human, O for the AI)
- Game status and whose turn it is
- The AI's reply, revealed after a short "thinking" delay
"""

import logging
import tkinter as tk
from tkinter import ttk
from typing import Optional

from logic.config import GameConfig
from logic.game_state import Cell
from logic.session import GameSession, PendingMove

logger = logging.getLogger(__name__)


# Cell colors: (background, foreground)
CELL_COLORS = {
    Cell.EMPTY: ('#16213e', 'white'),
    Cell.PLAYER: ('#065f46', '#10b981'),    # Green for the human
    Cell.OPPONENT: ('#7f1d1d', '#f87171'),  # Red for the AI
}
WIN_HIGHLIGHT = '#b45309'


class TicTacToeUI:
    """
    Main UI class for TicTacToe.
    """

    def __init__(self, ai_first: bool = False, delay_ms: int = GameConfig.AI_DELAY_MS):
        """Initialize the UI."""
        self.session = GameSession(ai_first=ai_first)
        self.delay_ms = delay_ms

        # AI move waiting behind the delay
        self.pending_ai_move: Optional[PendingMove] = None

        # Create UI
        self._create_ui()
        self._refresh()
        self._maybe_schedule_ai()

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title("TicTacToe")
        self.root.configure(bg='#1a1a2e')
        self.root.resizable(False, False)

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=20, pady=20)

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background='#1a1a2e')
        style.configure('TLabel', background='#1a1a2e', foreground='white', font=('Segoe UI', 11))
        style.configure('Title.TLabel', font=('Segoe UI', 16, 'bold'), foreground='#00d4ff')
        style.configure('Status.TLabel', font=('Segoe UI', 12), foreground='#ffd700')

        ttk.Label(main_frame, text="Tic Tac Toe", style='Title.TLabel').pack(pady=(0, 10))

        self.status_label = ttk.Label(main_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=5)

        # Board grid
        board_frame = ttk.Frame(main_frame)
        board_frame.pack(pady=10)

        self.board_cells = []
        for index in range(GameConfig.NUM_CELLS):
            row, col = divmod(index, GameConfig.BOARD_SIZE)
            cell = tk.Button(
                board_frame,
                text="",
                font=('Segoe UI', 24, 'bold'),
                width=3,
                height=1,
                relief='ridge',
                borderwidth=2,
                command=lambda i=index: self._on_cell_click(i)
            )
            cell.grid(row=row, column=col, padx=2, pady=2)
            self.board_cells.append(cell)

        # Legend
        legend_frame = ttk.Frame(main_frame)
        legend_frame.pack(pady=5)
        human, ai = self.session.human_mark.symbol, self.session.ai_mark.symbol
        ttk.Label(legend_frame, text=f"{human} = You  ", foreground='#10b981').pack(side=tk.LEFT)
        ttk.Label(legend_frame, text=f"{ai} = AI", foreground='#f87171').pack(side=tk.LEFT)

        # Control buttons
        ttk.Separator(main_frame, orient='horizontal').pack(fill=tk.X, pady=15)

        control_frame = ttk.Frame(main_frame)
        control_frame.pack()

        tk.Button(
            control_frame,
            text="New Game",
            font=('Segoe UI', 11, 'bold'),
            bg='#6366f1',
            fg='white',
            width=10,
            command=self._reset_game
        ).pack(side=tk.LEFT, padx=5)

        tk.Button(
            control_frame,
            text="Quit",
            font=('Segoe UI', 11, 'bold'),
            bg='#ef4444',
            fg='white',
            width=10,
            command=self._quit
        ).pack(side=tk.LEFT, padx=5)

        # Bind close event
        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _on_cell_click(self, index: int):
        """Handle a click on a board cell."""
        if self.session.play_human(index):
            self._refresh()
            self._maybe_schedule_ai()

    def _maybe_schedule_ai(self):
        """If it's the AI's turn, compute its move and reveal it after the delay."""
        if not self.session.is_ai_turn or self.pending_ai_move is not None:
            return

        pending = self.session.request_ai_move()
        self.pending_ai_move = pending
        self._refresh()
        self.root.after(self.delay_ms, lambda: self._reveal_ai_move(pending))

    def _reveal_ai_move(self, pending: PendingMove):
        """Apply a delayed AI move, unless the game was reset meanwhile."""
        if self.pending_ai_move is pending:
            self.pending_ai_move = None

        if self.session.resolve(pending):
            self._refresh()
            self._maybe_schedule_ai()

    def _refresh(self):
        """Update the board and status from the session."""
        board = self.session.board
        winning_line = self.session.outcome.line or ()
        buttons_enabled = (
            self.session.current_player == self.session.human_mark
            and not self.session.is_game_over
        )

        for index, cell in enumerate(board):
            bg_color, fg_color = CELL_COLORS[cell]
            if index in winning_line:
                bg_color = WIN_HIGHLIGHT
            self.board_cells[index].configure(
                text=cell.symbol,
                bg=bg_color,
                fg=fg_color,
                activebackground=bg_color,
                state=tk.NORMAL if buttons_enabled and cell == Cell.EMPTY else tk.DISABLED,
                disabledforeground=fg_color
            )

        self.status_label.configure(text=self.session.status_message())

    def _reset_game(self):
        """Reset the game. A move still waiting behind the delay is dropped."""
        self.session.reset()
        self.pending_ai_move = None
        self._refresh()
        self._maybe_schedule_ai()

    def _quit(self):
        """Quit the application."""
        logger.info("Quitting")
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()
