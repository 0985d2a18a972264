import pytest

from connect4_search.debug import debug, DebugLevel
from connect4_search.game.board import Board
from connect4_search.utils import Player

from positions import draw_grid


@pytest.fixture(autouse=True)
def quiet_debug():
    """Keep every test at the default debug settings."""
    debug.configure(level=DebugLevel.WARNING, enabled=True, components=[])
    yield
    debug.configure(level=DebugLevel.WARNING, enabled=True, components=[], log_file="")


@pytest.fixture
def full_board() -> Board:
    return Board(draw_grid(), Player.ONE)
