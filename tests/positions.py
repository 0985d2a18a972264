"""Move sequences and board helpers shared by the tests."""

import numpy as np

from connect4_search.game.board import Board
from connect4_search.utils import ROWS, COLS, Player

# X holds the bottom of columns 0-2; column 3 wins
WIN_IN_ONE = [0, 0, 1, 1, 2, 2]

# X holds the bottom of columns 1-3; both column 0 and column 4 win
TWO_WINS = [1, 1, 2, 2, 3, 3]

# O holds the bottom of columns 1-3 with both ends open; X cannot stop both
BOXED_IN = [5, 1, 6, 2, 5, 3]

# X can play column 1 or 4 to open a three with two free ends
DOUBLE_THREAT = [2, 2, 3, 3]

# O has three on row 4; playing column 0 or 4 lets O drop the fourth on top
POISONED_COLUMNS = [1, 2, 3, 1, 6, 3, 6, 2]

# Fills the board without anyone connecting four
DRAW_MOVES = (
    [1, 0, 0, 1, 1, 0, 1, 0, 0, 1, 0, 1]
    + [3, 2, 2, 3, 3, 2, 3, 2, 2, 3, 2, 3]
    + [5, 4, 4, 6, 6, 5, 5, 4, 5, 4, 4, 6, 4, 6, 6, 5, 6, 5]
)


def draw_grid() -> np.ndarray:
    """The full board DRAW_MOVES ends on."""
    row_shift = [0, 0, 1, 1, 0, 1]
    grid = np.zeros((ROWS, COLS), dtype=np.int8)
    for row in range(ROWS):
        for col in range(COLS):
            grid[row, col] = Player.ONE.value if (row_shift[row] + col) % 2 == 0 else Player.TWO.value
    return grid


def mirrored(board: Board) -> Board:
    return Board(board.grid[:, ::-1], board.current_player)


def swapped(board: Board) -> Board:
    grid = board.grid
    swapped_grid = np.where(grid == Player.ONE.value, Player.TWO.value,
                            np.where(grid == Player.TWO.value, Player.ONE.value, Player.EMPTY.value))
    return Board(swapped_grid, board.current_player.other())
