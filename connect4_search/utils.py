"""
utils.py - Constants, enumerations and helpers shared by the engine

Board geometry, the winning length and the search defaults live here so the
board, the search and the CLI agree on them.
"""

from enum import Enum, auto
from typing import Iterator, Optional, Tuple

import numpy as np

# Board geometry
ROWS = 6
COLS = 7
CONNECT_N = 4  # pieces in a line needed to win

# Search defaults
DEFAULT_SEARCH_DEPTH = 5
SEARCH_MAX_WORKERS: Optional[int] = None  # None lets the executor use every CPU


class Player(Enum):
    """Players, doubling as cell states (EMPTY marks a free cell)."""
    EMPTY = 0
    ONE = 1    # moves first on an empty board
    TWO = 2

    def other(self) -> 'Player':
        """Get the opponent. EMPTY has no opponent and maps to itself."""
        if self == Player.ONE:
            return Player.TWO
        elif self == Player.TWO:
            return Player.ONE
        return Player.EMPTY

    @property
    def symbol(self) -> str:
        return CELL_SYMBOLS[self.value]

    def __str__(self):
        return self.symbol


CELL_SYMBOLS = {
    Player.EMPTY.value: " ",
    Player.ONE.value: "X",
    Player.TWO.value: "O",
}


class GameResult(Enum):
    """Outcome of a game session."""
    IN_PROGRESS = auto()
    PLAYER_ONE_WIN = auto()
    PLAYER_TWO_WIN = auto()
    DRAW = auto()

    def is_game_over(self) -> bool:
        return self != GameResult.IN_PROGRESS

    @classmethod
    def win_for(cls, player: Player) -> 'GameResult':
        if player == Player.ONE:
            return cls.PLAYER_ONE_WIN
        if player == Player.TWO:
            return cls.PLAYER_TWO_WIN
        raise ValueError(f"No win result for {player!r}")


class Direction(Enum):
    """Line directions checked for a winning run."""
    HORIZONTAL = auto()
    VERTICAL = auto()
    DIAGONAL_UP = auto()    # bottom-left to top-right
    DIAGONAL_DOWN = auto()  # top-left to bottom-right


# (row, col) steps; row 0 is the top of the board
DIRECTION_VECTORS = {
    Direction.HORIZONTAL: (0, 1),
    Direction.VERTICAL: (1, 0),
    Direction.DIAGONAL_UP: (-1, 1),
    Direction.DIAGONAL_DOWN: (1, 1),
}


def is_valid_position(row: int, col: int) -> bool:
    """Check if a position is within the board boundaries."""
    return 0 <= row < ROWS and 0 <= col < COLS


def walk(grid: np.ndarray, row: int, col: int, dr: int, dc: int, value: int) -> Iterator[Tuple[int, int]]:
    """
    Yield the cells holding ``value`` reached by stepping (dr, dc) away from
    (row, col), stopping at the first other value or the board edge. The
    start cell itself is not yielded.
    """
    r, c = row + dr, col + dc
    while is_valid_position(r, c) and grid[r, c] == value:
        yield r, c
        r += dr
        c += dc


def run_length(grid: np.ndarray, row: int, col: int, direction: Direction, value: int) -> int:
    """
    Length of the line of ``value`` cells through (row, col) along ``direction``,
    counting (row, col) as one of them whatever it currently holds.
    """
    dr, dc = DIRECTION_VECTORS[direction]
    forward = sum(1 for _ in walk(grid, row, col, dr, dc, value))
    backward = sum(1 for _ in walk(grid, row, col, -dr, -dc, value))
    return 1 + forward + backward


def landing_row(grid: np.ndarray, column: int) -> Optional[int]:
    """
    Row a piece dropped into ``column`` would land in, or None if it is full.
    """
    empty_rows = np.flatnonzero(grid[:, column] == Player.EMPTY.value)
    if empty_rows.size == 0:
        return None
    return int(empty_rows[-1])


def render_board_ascii(grid: np.ndarray) -> str:
    """
    Render a grid as ASCII art with column numbers underneath.
    """
    border = "|" + "-" * (COLS * 2 - 1) + "|"
    lines = [border]

    for row in range(ROWS):
        cells = " ".join(CELL_SYMBOLS[int(v)] for v in grid[row])
        lines.append(f"|{cells}|")

    lines.append(border)
    lines.append("|" + " ".join(str(i) for i in range(COLS)) + "|")

    return "\n".join(lines)
