"""
connect4_search.game - Board engine and game sessions for Connect Four

This package contains the immutable board with its move and win rules, and
the game session used by the command-line interface.
"""

from connect4_search.game.board import Board, MoveOutcome, MoveResult, try_move, turn_count
from connect4_search.game.rules import ConnectFourGame

__all__ = ['Board', 'MoveOutcome', 'MoveResult', 'try_move', 'turn_count', 'ConnectFourGame']
