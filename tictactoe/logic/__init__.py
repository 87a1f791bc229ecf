"""
Logic module for TicTacToe.
Handles game state, rules, and AI opponent.
"""

from .game_state import GameResult, GameSession, Player
from .move_validator import InvalidMove, MoveValidator
from .win_checker import WinChecker
from .ai_player import AIPlayer, NoMovesAvailable
