"""
connect4_search - Connect Four with an exhaustive depth-bounded move search

This package provides an immutable Connect Four board with win detection,
a move search that classifies positions as won, lost or undetermined, and a
small command-line game driver built on both.
"""

from connect4_search.game.board import Board, MoveOutcome, MoveResult, try_move, turn_count
from connect4_search.ai.search import Evaluation, SearchResult, find_next_move

# Version number
__version__ = '0.1.0'

__all__ = ['Board', 'MoveOutcome', 'MoveResult', 'try_move', 'turn_count',
           'Evaluation', 'SearchResult', 'find_next_move']
