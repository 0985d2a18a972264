"""
connect4_search/ai/__init__.py - Move search for Connect Four

This package provides the exhaustive move search and the computer player
that picks among its recommendations.
"""

from connect4_search.ai.search import Evaluation, SearchResult, find_next_move
from connect4_search.ai.picker import SearchPlayer, pick_move, random_seed

__all__ = ['Evaluation', 'SearchResult', 'find_next_move', 'SearchPlayer', 'pick_move', 'random_seed']
