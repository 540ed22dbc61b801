"""
Logic module for TicTacToe.
Handles the board, the rules, and the AI opponent.
"""

from .config import GameConfig
from .game_state import Board, Cell, InvalidMoveError, apply_move, legal_moves, side_to_move
from .win_checker import LINES, Outcome, Status, evaluate_outcome, get_winning_line
from .move_validator import MoveValidator, ValidationResult
from .ai_player import AIPlayer, NoLegalMoveError, select_move
from .session import GameSession, PendingMove

__version__ = "1.0.0"
