"""
cli.py - Command-line interface for playing Connect Four

Play human against human (pvp), human against the computer (pvc) or let the
computer play both sides (cvc). The computer uses the exhaustive move search;
its random choice between equally good moves is seeded so a cvc game can be
reproduced from the printed seed.
"""

import argparse
import sys
import time
from typing import Callable, List, Optional

from connect4_search.ai.picker import SearchPlayer, random_seed
from connect4_search.debug import debug, DebugLevel
from connect4_search.game.rules import ConnectFourGame
from connect4_search.utils import COLS, DEFAULT_SEARCH_DEPTH, Player

GAME_MODES = ('pvp', 'pvc', 'cvc')

# Special results of a human prompt
QUIT = -1
UNDO = -2


def parse_position(position: str) -> List[int]:
    """
    Parse a comma-separated list of columns, e.g. "3,3,4".

    Raises:
        ValueError: If an entry is not an integer
    """
    position = position.strip()
    if not position:
        return []
    return [int(part) for part in position.split(',')]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='connect4-search',
        description='Play Connect Four against the computer or let the computer play itself.')
    parser.add_argument('mode',
        type=str.lower,
        choices=GAME_MODES,
        help='Game mode: pvp (two humans), pvc (human vs computer), cvc (computer vs computer)')
    parser.add_argument('depth',
        type=int,
        nargs='?',
        default=DEFAULT_SEARCH_DEPTH,
        help=f'Search depth in plies; time grows exponentially with it (default: {DEFAULT_SEARCH_DEPTH})')
    parser.add_argument('seed',
        type=int,
        nargs='?',
        default=None,
        help='Seed for choosing between equally good moves (default: random)')
    parser.add_argument('--no-auto',
        action='store_true',
        help='Wait for Enter before every computer move')
    parser.add_argument('--time',
        action='store_true',
        help='Print the total game time (not with --no-auto)')
    parser.add_argument('--sequential',
        action='store_true',
        help='Search on a single process')
    parser.add_argument('--position',
        type=str,
        default='',
        help='Comma-separated columns to play before the game starts, e.g. "3,3,4"')
    parser.add_argument('--debug',
        action='store_true',
        help='Enable debug mode (equivalent to --debug_level debug)')
    parser.add_argument('--debug_level',
        choices=['none', 'error', 'warning', 'info', 'debug', 'trace'],
        default='warning',
        help='Set debug level: none (silent), error, warning, info, debug, trace (most verbose)')
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.time and args.no_auto:
        parser.error('--time cannot be used with --no-auto')
    if args.depth < 0:
        parser.error('depth must be >= 0')
    return args


def configure_debug(args: argparse.Namespace) -> None:
    """Configure the debug level from --debug or --debug_level."""
    if args.debug:
        debug.configure(level=DebugLevel.DEBUG)
    else:
        debug.set_from_string(args.debug_level)


class GameCLI:
    """Runs one game on the console."""

    def __init__(self, args: argparse.Namespace, input_func: Callable[[str], str] = input):
        self.args = args
        self.input = input_func
        self.seed = random_seed() if args.seed is None else args.seed
        self.game = ConnectFourGame(parse_position(args.position))
        self.computer = SearchPlayer(depth=args.depth, seed=self.seed,
                                     allow_parallel=not args.sequential)

    def is_computer(self, player: Player) -> bool:
        if self.args.mode == 'cvc':
            return True
        if self.args.mode == 'pvc':
            return player == Player.TWO
        return False

    def run(self) -> int:
        """Play until the game ends or a human quits. Returns an exit code."""
        print(f"Mode: {self.args.mode.upper()}, depth: {self.args.depth}, seed: {self.seed}")
        print(self.game.render())

        start = time.perf_counter()
        while not self.game.is_game_over():
            player = self.game.get_current_player()
            if self.is_computer(player):
                column = self.computer_move()
                if column is None:
                    break
            else:
                column = self.human_move()
                if column == QUIT:
                    print("Quitting game.")
                    return 0
                if column == UNDO:
                    self.undo()
                    continue

            print(f"Player {player} plays column {column}")
            self.game.make_move(column)
            if self.game.get_winner() is None:
                print(self.game.render())
        elapsed = time.perf_counter() - start

        self.report_result()
        if self.args.time:
            print(f"Time: {elapsed:.3f}")
        return 0

    def computer_move(self) -> Optional[int]:
        if self.args.no_auto:
            self.input("Press Enter for the computer's move...")
        column = self.computer.get_move(self.game.board)
        result = self.computer.last_result
        debug.info(f"Turn {self.game.turn_count() + 1}: {result.evaluation.name} "
                   f"{result.moves} in {self.computer.last_elapsed:.3f}s", "cli")
        return column

    def human_move(self) -> int:
        """Prompt until the player enters a playable column, q or u."""
        valid_moves = self.game.get_valid_moves()
        player = self.game.get_current_player()
        while True:
            try:
                user_input = self.input(f"Player {player}, your move (columns 0-{COLS - 1}, q/u): ")
            except EOFError:
                return QUIT
            user_input = user_input.strip().lower()
            if user_input == 'q':
                return QUIT
            if user_input == 'u':
                return UNDO

            try:
                column = int(user_input)
            except ValueError:
                print("Invalid input. Please enter a column number or special command.")
                continue

            if column in valid_moves:
                return column
            print(f"Invalid move. Valid options: {valid_moves}")

    def undo(self) -> None:
        """Take back the last human move, and the computer's reply in pvc."""
        steps = 2 if self.args.mode == 'pvc' else 1
        if len(self.game.history) < steps:
            print("No moves to undo.")
            return
        for _ in range(steps):
            self.game.undo_move()
        print("Move undone.")
        print(self.game.render())

    def report_result(self) -> None:
        winner = self.game.get_winner()
        if winner is not None:
            print(self.game.render())
            print(f"Victory! Player {winner} wins.")
        else:
            print("Draw!")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    args = parse_args(argv)
    configure_debug(args)

    try:
        cli = GameCLI(args)
    except ValueError as e:
        print(f"Error parsing position: {e}", file=sys.stderr)
        return 2

    return cli.run()


if __name__ == "__main__":
    sys.exit(main())
