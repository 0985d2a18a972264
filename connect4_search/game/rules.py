"""
rules.py - Game session management for Connect Four

The Board is immutable, so a running game is tracked here: the current board,
the columns played so far and the game result.
"""

from typing import List, Optional

from connect4_search.debug import debug
from connect4_search.game.board import Board
from connect4_search.utils import GameResult, Player


class ConnectFourGame:
    """
    High-level Connect Four game manager.

    Wraps the immutable Board with move history, undo and a result so the
    CLI can drive human and computer players through one interface.
    """

    def __init__(self, moves: Optional[List[int]] = None):
        """
        Start a new game.

        Args:
            moves: Optional opening columns to replay first

        Raises:
            ValueError: If the opening moves cannot be replayed
        """
        debug.debug("Initializing ConnectFourGame", "game")
        self.board = Board()
        self.history: List[int] = []
        self.result = GameResult.IN_PROGRESS
        self.winner: Optional[Player] = None

        for column in moves or []:
            if not self.make_move(column):
                raise ValueError(f"Cannot replay opening move {column}")

    def reset(self) -> None:
        """Reset the game to the empty board."""
        debug.debug("Resetting game", "game")
        self.board = Board()
        self.history = []
        self.result = GameResult.IN_PROGRESS
        self.winner = None

    def make_move(self, column: int) -> bool:
        """
        Play ``column`` for the current player.

        Returns:
            True if the move was played, False if the game is over, the
            column is out of range or the column is full
        """
        if self.is_game_over():
            debug.debug(f"Move {column} ignored: game is over ({self.result.name})", "game")
            return False

        try:
            outcome = self.board.try_move(column)
        except ValueError as e:
            debug.debug(f"Invalid move: {e}", "game")
            return False

        if outcome.rejected:
            debug.debug(f"Invalid move: column {column} is full", "game")
            return False

        mover = self.board.current_player
        self.history.append(column)

        if outcome.victory:
            self.result = GameResult.win_for(mover)
            self.winner = mover
            debug.info(f"Player {mover} wins with column {column}", "game")
            return True

        self.board = outcome.board
        if self.board.is_full():
            self.result = GameResult.DRAW
            debug.info("Game ends in a draw", "game")
        return True

    def undo_move(self) -> bool:
        """
        Take back the last move by replaying the rest of the history.

        Returns:
            True if a move was undone, False if there was nothing to undo
        """
        if not self.history:
            debug.debug("No moves to undo", "game")
            return False

        moves = self.history[:-1]
        debug.debug(f"Undoing column {self.history[-1]}", "game")
        self.reset()
        for column in moves:
            self.make_move(column)
        return True

    def is_game_over(self) -> bool:
        return self.result.is_game_over()

    def get_winner(self) -> Optional[Player]:
        return self.winner

    def get_current_player(self) -> Player:
        """The player to move. After a win this is still the winner."""
        return self.board.current_player

    def get_valid_moves(self) -> List[int]:
        if self.is_game_over():
            return []
        return self.board.get_valid_moves()

    def turn_count(self) -> int:
        """Number of moves played, including a winning move."""
        return len(self.history)

    def render(self) -> str:
        """
        Render the board. After a win the board is shown as it was before
        the winning move, with the winning column marked below it.
        """
        text = self.board.render()
        if self.winner is not None:
            column = self.history[-1]
            text += "\n " + "  " * column + "^"
        return text
