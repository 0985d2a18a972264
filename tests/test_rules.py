import pytest

from connect4_search.game.board import Board
from connect4_search.game.rules import ConnectFourGame
from connect4_search.utils import COLS, GameResult, Player

from positions import DRAW_MOVES, WIN_IN_ONE


class TestConnectFourGame:
    def test_new_game(self):
        game = ConnectFourGame()
        assert game.result == GameResult.IN_PROGRESS
        assert game.get_current_player() == Player.ONE
        assert game.get_valid_moves() == list(range(COLS))
        assert game.history == []
        assert not game.is_game_over()

    def test_make_move(self):
        game = ConnectFourGame()
        assert game.make_move(3) is True
        assert game.history == [3]
        assert game.get_current_player() == Player.TWO
        assert game.board == Board.from_moves([3])

    def test_opening_moves(self):
        game = ConnectFourGame([3, 3, 4])
        assert game.turn_count() == 3
        assert game.board == Board.from_moves([3, 3, 4])

    def test_bad_opening_moves(self):
        with pytest.raises(ValueError):
            ConnectFourGame([0] * 7)

    def test_full_column(self):
        game = ConnectFourGame([0] * 6)
        assert game.make_move(0) is False
        assert game.history == [0] * 6

    @pytest.mark.parametrize("column", [-1, COLS])
    def test_out_of_range(self, column):
        game = ConnectFourGame()
        assert game.make_move(column) is False
        assert game.history == []

    def test_win(self):
        game = ConnectFourGame(WIN_IN_ONE)
        assert game.make_move(3) is True
        assert game.is_game_over()
        assert game.result == GameResult.PLAYER_ONE_WIN
        assert game.get_winner() == Player.ONE
        assert game.get_valid_moves() == []
        assert game.turn_count() == 7

    def test_second_player_win(self):
        game = ConnectFourGame([6] + WIN_IN_ONE)
        assert game.get_current_player() == Player.TWO
        assert game.make_move(3) is True
        assert game.result == GameResult.PLAYER_TWO_WIN
        assert game.get_winner() == Player.TWO

    def test_no_moves_after_game_over(self):
        game = ConnectFourGame(WIN_IN_ONE + [3])
        assert game.make_move(4) is False
        assert game.turn_count() == 7

    def test_draw(self):
        game = ConnectFourGame(DRAW_MOVES)
        assert game.result == GameResult.DRAW
        assert game.get_winner() is None
        assert game.is_game_over()

    def test_undo(self):
        game = ConnectFourGame(WIN_IN_ONE + [3])
        assert game.undo_move() is True
        assert game.result == GameResult.IN_PROGRESS
        assert game.get_winner() is None
        assert game.history == WIN_IN_ONE
        assert game.board == Board.from_moves(WIN_IN_ONE)

    def test_undo_empty(self):
        game = ConnectFourGame()
        assert game.undo_move() is False

    def test_reset(self):
        game = ConnectFourGame([1, 2, 3])
        game.reset()
        assert game.board == Board()
        assert game.history == []

    def test_render_marks_winning_column(self):
        game = ConnectFourGame(WIN_IN_ONE + [3])
        lines = game.render().split("\n")
        assert lines[-1] == " " + "  " * 3 + "^"
        assert lines[-2] == "|0 1 2 3 4 5 6|"
