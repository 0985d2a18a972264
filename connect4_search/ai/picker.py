"""
picker.py - Computer player built on the move search

The search returns every column it considers equally good; the player picks
one of them at random. The random generator is seeded explicitly so games can
be replayed.
"""

import os
import random
from typing import Optional, Sequence

from connect4_search.ai.search import SearchResult, find_next_move
from connect4_search.debug import debug
from connect4_search.game.board import Board
from connect4_search.utils import DEFAULT_SEARCH_DEPTH


def random_seed() -> int:
    """Draw a fresh 64-bit seed from the operating system."""
    return int.from_bytes(os.urandom(8), "big")


def pick_move(moves: Sequence[int], rng: random.Random) -> Optional[int]:
    """Uniformly pick one of ``moves``, or None if there are none."""
    if not moves:
        return None
    return moves[rng.randrange(len(moves))]


class SearchPlayer:
    """
    Plays the move search's recommendation.

    Attributes:
        last_result: SearchResult of the most recent get_move call
        last_elapsed: Seconds spent in the most recent search
    """

    def __init__(self, depth: int = DEFAULT_SEARCH_DEPTH, seed: Optional[int] = None,
                 allow_parallel: bool = True, max_workers: Optional[int] = None):
        if depth < 0:
            raise ValueError(f"Search depth must be >= 0, got {depth}")
        self.depth = depth
        self.seed = random_seed() if seed is None else seed
        self.allow_parallel = allow_parallel
        self.max_workers = max_workers
        self.rng = random.Random(self.seed)
        self.last_result: Optional[SearchResult] = None
        self.last_elapsed = 0.0

    def get_move(self, board: Board) -> Optional[int]:
        """
        Choose a column for the player to move.

        Returns:
            Column index, or None if the board has no legal move left
        """
        with debug.timer("get_move", "search") as timer:
            self.last_result = find_next_move(board, self.depth, self.allow_parallel,
                                              max_workers=self.max_workers)
        self.last_elapsed = timer.elapsed

        column = pick_move(self.last_result.moves, self.rng)
        debug.info(f"{board.current_player} picks {column} from {self.last_result.moves} "
                   f"({self.last_result.evaluation.name}, {self.last_elapsed:.3f}s)", "search")
        return column
