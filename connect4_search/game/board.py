"""
board.py - Immutable board representation and move mechanics for Connect Four

A Board is a value: it is never changed after construction. Making a move
produces a MoveOutcome that either rejects the move, reports the win it
completes, or carries the successor Board with the turn passed on. This lets
the search hand boards to worker processes and recurse without undo logic.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterable, List, Optional

import numpy as np

from connect4_search.debug import debug, DebugLevel
from connect4_search.utils import (ROWS, COLS, CONNECT_N, Player, Direction,
                                   landing_row, run_length, render_board_ascii)


class MoveResult(Enum):
    """Kinds of outcome a move attempt can have."""
    REJECTED = auto()   # column is full
    VICTORY = auto()    # the move completes a winning run
    CONTINUES = auto()  # the game goes on with the successor board


@dataclass(frozen=True)
class MoveOutcome:
    """
    Result of trying a move.

    ``board`` is only set for CONTINUES; ``row`` is the landing row for
    VICTORY and CONTINUES. A winning board is never built.
    """
    result: MoveResult
    column: int
    row: Optional[int] = None
    board: Optional['Board'] = None

    @property
    def rejected(self) -> bool:
        return self.result == MoveResult.REJECTED

    @property
    def victory(self) -> bool:
        return self.result == MoveResult.VICTORY

    @property
    def continues(self) -> bool:
        return self.result == MoveResult.CONTINUES


class Board:
    """
    A Connect Four position: the grid plus the player about to move.

    The grid is a read-only ``ROWS x COLS`` numpy array. Row 0 is the top row,
    so pieces settle into the highest-index empty row of a column.
    """

    __slots__ = ('_grid', '_player')

    def __init__(self, grid=None, player: Player = Player.ONE):
        """
        Create a board.

        Args:
            grid: Optional ``ROWS x COLS`` array-like of cell values
                (0 empty, 1 player ONE, 2 player TWO). Omit for an empty board.
            player: The player to move

        Raises:
            ValueError: If the grid or player breaks the board invariants
        """
        if player not in (Player.ONE, Player.TWO):
            raise ValueError(f"Player to move must be ONE or TWO, got {player!r}")

        if grid is None:
            grid = np.zeros((ROWS, COLS), dtype=np.int8)
        else:
            grid = np.array(grid, dtype=np.int8)
            _validate_grid(grid, player)

        grid.flags.writeable = False
        self._grid = grid
        self._player = player

    @classmethod
    def _trusted(cls, grid: np.ndarray, player: Player) -> 'Board':
        """Wrap an already valid grid without copying or checking it."""
        board = cls.__new__(cls)
        grid.flags.writeable = False
        board._grid = grid
        board._player = player
        return board

    @classmethod
    def from_moves(cls, columns: Iterable[int]) -> 'Board':
        """
        Replay a sequence of columns from the empty board.

        Raises:
            ValueError: If a column is out of range, full, or the sequence
                contains a winning move (a won game has no board to return)
        """
        board = cls()
        for index, column in enumerate(columns):
            outcome = board.try_move(column)
            if outcome.rejected:
                raise ValueError(f"Move {index + 1}: column {column} is full")
            if outcome.victory:
                raise ValueError(f"Move {index + 1}: column {column} ends the game")
            board = outcome.board
        return board

    @property
    def grid(self) -> np.ndarray:
        """Read-only view of the cell values."""
        return self._grid

    @property
    def current_player(self) -> Player:
        return self._player

    def cell(self, row: int, column: int) -> Player:
        return Player(int(self._grid[row, column]))

    def turn_count(self) -> int:
        """Number of occupied cells."""
        return int(np.count_nonzero(self._grid))

    def get_valid_moves(self) -> List[int]:
        return [col for col in range(COLS) if self._grid[0, col] == Player.EMPTY.value]

    def is_full(self) -> bool:
        return not np.any(self._grid[0] == Player.EMPTY.value)

    def try_move(self, column: int) -> MoveOutcome:
        """
        Drop a piece for the player to move into ``column``.

        Args:
            column: Column index in ``[0, COLS)``

        Returns:
            REJECTED if the column is full, VICTORY if the piece completes a
            run of CONNECT_N, otherwise CONTINUES with the successor board

        Raises:
            ValueError: If the column index is out of range
        """
        if not 0 <= column < COLS:
            raise ValueError(f"Column {column} out of range [0, {COLS})")

        row = landing_row(self._grid, column)
        if row is None:
            if debug.is_enabled_for(DebugLevel.TRACE, "board"):
                debug.trace(f"Column {column} is full", "board")
            return MoveOutcome(MoveResult.REJECTED, column)

        mover = self._player.value
        for direction in Direction:
            if run_length(self._grid, row, column, direction, mover) >= CONNECT_N:
                if debug.is_enabled_for(DebugLevel.TRACE, "board"):
                    debug.trace(f"{self._player} wins with column {column} ({direction.name})", "board")
                return MoveOutcome(MoveResult.VICTORY, column, row)

        grid = self._grid.copy()
        grid[row, column] = mover
        return MoveOutcome(MoveResult.CONTINUES, column, row,
                           Board._trusted(grid, self._player.other()))

    def render(self) -> str:
        return render_board_ascii(self._grid)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Board(player={self._player.name}, turn_count={self.turn_count()})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._player == other._player and np.array_equal(self._grid, other._grid)

    def __hash__(self) -> int:
        return hash((self._player, self._grid.tobytes()))

    def __reduce__(self):
        # numpy drops the read-only flag when unpickling
        return (_restore_board, (self._grid.copy(), self._player))


def _restore_board(grid: np.ndarray, player: Player) -> Board:
    return Board._trusted(grid, player)


def _validate_grid(grid: np.ndarray, player: Player) -> None:
    if grid.shape != (ROWS, COLS):
        raise ValueError(f"Grid must have shape {(ROWS, COLS)}, got {grid.shape}")

    cell_values = [p.value for p in Player]
    if not np.isin(grid, cell_values).all():
        raise ValueError(f"Grid values must be one of {cell_values}")

    occupied = grid != Player.EMPTY.value
    if np.any(occupied[:-1] & ~occupied[1:]):
        raise ValueError("Grid has a piece floating above an empty cell")

    mover_count = int(np.count_nonzero(grid == player.value))
    other_count = int(np.count_nonzero(grid == player.other().value))
    if not 0 <= other_count - mover_count <= 1:
        raise ValueError(
            f"{player.name} cannot be to move with {mover_count} pieces "
            f"against {other_count}")


def try_move(board: Board, column: int) -> MoveOutcome:
    """Apply ``column`` for the player to move on ``board``."""
    return board.try_move(column)


def turn_count(board: Board) -> int:
    """Number of occupied cells on ``board``."""
    return board.turn_count()
