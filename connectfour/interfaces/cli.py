"""
cli.py - Command-line interface for Connect Four

Provides a hot-seat game for two people, a checker that replays a column
sequence and reports the outcome, and a small benchmark of the engine.
"""

import argparse
import random
import sys
from typing import Callable, List, Optional, Sequence

from connectfour.debug import DebugLevel, debug
from connectfour.errors import ConnectFourError
from connectfour.game.board import GameBoard
from connectfour.game.models import Player
from connectfour.game.win import completes_line
from connectfour.utils import (DEFAULT_HEIGHT, DEFAULT_VICTORY_CONDITION, DEFAULT_WIDTH,
                               GameStatus, Mark)

QUIT_COMMANDS = {'q', 'quit', 'exit'}
RESTART_COMMANDS = {'r', 'restart'}


def parse_moves(raw: str) -> List[int]:
    """Parse a comma-separated list of column indices, e.g. "3,3,4"."""
    try:
        return [int(part) for part in raw.split(',') if part.strip()]
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid move list: {raw!r}")


def parse_player(raw: str, mark: Mark) -> Player:
    """Build a Player from "NAME" or "NAME:COLOR"."""
    name, _, color = raw.partition(':')
    name = name.strip()
    if not name:
        raise argparse.ArgumentTypeError(f"player name missing in {raw!r}")
    return Player(mark, name, color.strip() or None)


def _add_board_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument('--width', type=int, default=DEFAULT_WIDTH, help='Number of columns')
    parser.add_argument('--height', type=int, default=DEFAULT_HEIGHT, help='Number of rows')
    parser.add_argument('--connect', type=int, default=DEFAULT_VICTORY_CONDITION,
                        help='Pieces in a row needed to win')


class SimpleCLI:
    """Simple command-line interface for Connect Four."""

    def __init__(self, argv: Optional[Sequence[str]] = None,
                 input_func: Callable[[str], str] = input):
        self.argv = argv
        self.input_func = input_func
        self.args = None

    def build_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(prog='connectfour', description='Connect Four CLI')
        parser.add_argument('--debug-level', default=None,
                            choices=[level.name.lower() for level in DebugLevel],
                            help='Logging level (overrides CONNECTFOUR_DEBUG_LEVEL)')

        subparsers = parser.add_subparsers(dest='command', help='Command to run')

        play_parser = subparsers.add_parser('play', help='Play a two-player game in the terminal')
        _add_board_arguments(play_parser)
        play_parser.add_argument('--player1', default='Player 1',
                                 type=lambda raw: parse_player(raw, Mark.ONE),
                                 help='First player as NAME or NAME:COLOR')
        play_parser.add_argument('--player2', default='Player 2',
                                 type=lambda raw: parse_player(raw, Mark.TWO),
                                 help='Second player as NAME or NAME:COLOR')

        check_parser = subparsers.add_parser('check', help='Replay a column sequence and report the result')
        _add_board_arguments(check_parser)
        check_parser.add_argument('--moves', type=parse_moves, required=True,
                                  help='Comma-separated columns, e.g. 3,3,4,4')

        benchmark_parser = subparsers.add_parser('benchmark', help='Benchmark the engine')
        _add_board_arguments(benchmark_parser)
        benchmark_parser.add_argument('--iterations', type=int, default=1000,
                                      help='Number of iterations for benchmarking')
        benchmark_parser.add_argument('--seed', type=int, default=None, help='Random seed')

        return parser

    def parse_args(self) -> None:
        self.args = self.build_parser().parse_args(self.argv)
        if self.args.debug_level:
            debug.set_from_string(self.args.debug_level)

    def run(self) -> int:
        """Run the selected command and return the process exit status."""
        if self.args is None:
            self.parse_args()

        commands = {
            'play': self.play_game,
            'check': self.check_moves,
            'benchmark': self.benchmark,
        }
        command = commands.get(self.args.command)
        if command is None:
            print("Please specify a command. Use --help for options.")
            return 1

        try:
            return command()
        except ConnectFourError as e:
            debug.error(str(e), "cli")
            print(f"Error: {e}", file=sys.stderr)
            return 2

    def _new_board(self, players: Optional[Sequence[Player]] = None) -> GameBoard:
        return GameBoard(self.args.width, self.args.height, self.args.connect, players)

    def play_game(self) -> int:
        """Play a game between two people at the same terminal."""
        board = self._new_board((self.args.player1, self.args.player2))

        print(f"Starting a new game: connect {board.victory_condition} "
              f"on a {board.width}x{board.height} board.")
        print("Commands: 'q' to quit, 'r' to restart.")
        print(board.render())

        while not board.is_terminal():
            player = board.current_player
            prompt = f"{player} ({player.mark}) move [0-{board.width - 1}]: "
            try:
                command = self.input_func(prompt).strip().lower()
            except EOFError:
                command = 'q'

            if command in QUIT_COMMANDS:
                print("Quitting game.")
                return 0
            if command in RESTART_COMMANDS:
                board.reset()
                print("Game restarted.")
                print(board.render())
                continue

            try:
                column = int(command)
            except ValueError:
                print("Invalid input. Please enter a column number or a command.")
                continue
            if not 0 <= column < board.width:
                print(f"Column must be between 0 and {board.width - 1}.")
                continue

            result = board.drop_piece(column)
            if not result.accepted:
                print(f"Column {column} is full, pick another.")
                continue
            print(board.render())

        print("Game over!")
        print(self._describe(board))
        return 0

    def check_moves(self) -> int:
        """Replay --moves on a fresh board and print the outcome."""
        board = self._new_board()

        for index, column in enumerate(self.args.moves, start=1):
            result = board.drop_piece(column)
            if not result.accepted:
                print(f"Move {index}: column {column} is full, skipped")

        print(board.render())
        print(self._describe(board))
        return 0

    @staticmethod
    def _describe(board: GameBoard) -> str:
        state = board.state
        if state.status is GameStatus.WON:
            color = f" ({state.winner.color})" if state.winner.color else ""
            return f"Result: {state.winner}{color} wins after {board.move_count} moves"
        if state.status is GameStatus.DRAW:
            return f"Result: draw after {board.move_count} moves"
        return f"Result: in progress, {board.current_player} to move"

    def benchmark(self) -> int:
        """Time board creation, random games and win checks."""
        iterations = max(1, self.args.iterations)
        rng = random.Random(self.args.seed)
        print(f"Running benchmark with {iterations} iterations...")

        debug.start_timer("board_init")
        for _ in range(iterations):
            self._new_board()
        board_init_time = debug.end_timer("board_init")
        print(f"Board initialization: {board_init_time:.6f} seconds total, "
              f"{board_init_time / iterations * 1000:.6f} ms per board")

        games = max(1, iterations // 10)
        total_moves = 0
        outcomes = {status: 0 for status in GameStatus}
        board = self._new_board()
        debug.start_timer("game_simulation")
        for _ in range(games):
            board.reset()
            while not board.is_terminal():
                board.drop_piece(rng.choice(board.valid_columns()))
            total_moves += board.move_count
            outcomes[board.state.status] += 1
        simulation_time = debug.end_timer("game_simulation")
        print(f"Played {games} games with {total_moves} total moves: "
              f"{simulation_time:.6f} seconds total, "
              f"{simulation_time / max(1, total_moves) * 1000:.6f} ms per move")
        print(f"Outcomes: {outcomes[GameStatus.WON]} won, {outcomes[GameStatus.DRAW]} drawn")

        checks = 0
        debug.start_timer("win_check")
        for _ in range(iterations):
            for row in range(board.height):
                for column in range(board.width):
                    mark = board.cell_at(column, row)
                    if mark is not Mark.EMPTY:
                        completes_line(board.grid, column, row, mark, board.victory_condition)
                        checks += 1
        win_check_time = debug.end_timer("win_check")
        print(f"Performed {checks} win checks: {win_check_time:.6f} seconds total, "
              f"{win_check_time / max(1, checks) * 1000:.6f} ms per check")
        return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the CLI."""
    cli = SimpleCLI(argv)
    return cli.run()


if __name__ == "__main__":
    sys.exit(main())
