"""
cli.py - Command-line interface for Connect Four

The terminal front end is built only from session events: TerminalRenderer
keeps its own picture of the board, EndGameNotifier announces the result and
offers a restart, and SimpleCLI reads columns from the keyboard.
"""

import argparse
import random
import sys
from typing import Callable, List, Optional

import numpy as np

from connectfour.config import GameConfig
from connectfour.debug import DebugLevel, debug
from connectfour.exceptions import ConfigurationError
from connectfour.game.board import Board
from connectfour.game.events import BoardCleared, GameEnded, MoveRejected, PiecePlaced, TurnChanged
from connectfour.game.session import GameSession
from connectfour.game.win_detector import find_winning_line
from connectfour.utils import COLS, ROWS, Player, render_board_ascii

ANSI_COLORS = {
    "red": "\033[31m",
    "green": "\033[32m",
    "yellow": "\033[33m",
    "blue": "\033[34m",
    "magenta": "\033[35m",
    "cyan": "\033[36m",
    "white": "\033[37m",
}
ANSI_RESET = "\033[0m"

QUIT = "quit"
RESTART = "restart"

REJECTION_MESSAGES = {
    "invalid_column": "Column must be between 0 and {last}.",
    "column_full": "Column {column} is full, pick another.",
    "game_over": "The game is over. Press 'r' to restart.",
}


def format_end_message(event: GameEnded, session: GameSession) -> str:
    """Text shown to the players when a game ends."""
    if event.winner is None:
        return "It's a tie! Would you like to play again?"
    name = session.player_config(event.winner).name
    return f"{name} won! Would you like to play again?"


class TerminalRenderer:
    """Draws the board from PiecePlaced/BoardCleared events."""

    def __init__(self, session: GameSession, output: Callable[[str], None] = print, use_color: bool = True):
        self.session = session
        self.output = output
        self.use_color = use_color
        self.view = np.zeros((session.config.height, session.config.width), dtype=int)
        session.subscribe(PiecePlaced, self.on_piece_placed)
        session.subscribe(BoardCleared, self.on_board_cleared)
        session.subscribe(TurnChanged, self.on_turn_changed)
        session.subscribe(GameEnded, self.on_game_ended)

    def _symbol(self, player: Player) -> str:
        symbol = str(player)
        if player == Player.EMPTY or not self.use_color:
            return symbol
        color = ANSI_COLORS.get(self.session.player_config(player).color.lower())
        return f"{color}{symbol}{ANSI_RESET}" if color else symbol

    def draw(self) -> str:
        symbols = {player.value: self._symbol(player) for player in Player}
        text = render_board_ascii(self.view, symbols)
        self.output(text)
        return text

    def on_piece_placed(self, event: PiecePlaced):
        self.view[event.row, event.column] = event.player.value
        self.draw()

    def on_board_cleared(self, event: BoardCleared):
        self.view.fill(Player.EMPTY.value)
        self.output("New game!")
        self.draw()
        self.on_turn_changed(TurnChanged(self.session.current_player))

    def on_turn_changed(self, event: TurnChanged):
        player = self.session.player_config(event.player)
        self.output(f"{player.name} ({self._symbol(event.player)}) to move.")

    def on_game_ended(self, event: GameEnded):
        if event.winning_line:
            self.output(f"Winning line: {list(event.winning_line)}")


class EndGameNotifier:
    """
    Announces the end of a game and offers a restart.

    The GameEnded event only queues the message; deliver() shows it once the
    caller has finished drawing the final move.
    """

    def __init__(self, session: GameSession, confirm: Callable[[str], bool],
                 output: Callable[[str], None] = print):
        self.session = session
        self.confirm = confirm
        self.output = output
        self.pending: Optional[str] = None
        session.subscribe(GameEnded, self.on_game_ended)

    def on_game_ended(self, event: GameEnded):
        self.pending = format_end_message(event, self.session)

    def deliver(self) -> bool:
        """Show the queued message. Returns True if a restart was requested."""
        if self.pending is None:
            return False
        message, self.pending = self.pending, None
        self.output(message)
        if self.confirm(message):
            self.session.restart()
            return True
        return False


class SimpleCLI:
    """Command-line interface for playing and inspecting Connect Four."""

    def __init__(self, input_func: Callable[[str], str] = input, output: Callable[[str], None] = print):
        self.input_func = input_func
        self.output = output
        self.args = None
        self.session: Optional[GameSession] = None

    @staticmethod
    def build_parser() -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(description='Connect Four')
        parser.add_argument('--debug', action='store_true', help='Enable debug logging')
        parser.add_argument('--debug_level', choices=[level.name.lower() for level in DebugLevel],
                            default='warning', help='Logging level (default: warning)')
        parser.add_argument('--log_file', type=str, default=None, help='Also write logs to this file')
        parser.add_argument('--width', type=int, default=COLS, help=f'Board width (default: {COLS})')
        parser.add_argument('--height', type=int, default=ROWS, help=f'Board height (default: {ROWS})')

        subparsers = parser.add_subparsers(dest='command', help='Command to run')

        play_parser = subparsers.add_parser('play', help='Play a two-player game in the terminal')
        play_parser.add_argument('--p1-name', dest='p1_name', default='Player 1')
        play_parser.add_argument('--p1-color', dest='p1_color', default='red', choices=sorted(ANSI_COLORS))
        play_parser.add_argument('--p2-name', dest='p2_name', default='Player 2')
        play_parser.add_argument('--p2-color', dest='p2_color', default='yellow', choices=sorted(ANSI_COLORS))
        play_parser.add_argument('--first', type=int, choices=[1, 2], default=1, help='Which player moves first')
        play_parser.add_argument('--no-color', dest='no_color', action='store_true', help='Plain symbols only')

        test_parser = subparsers.add_parser('test', help='Analyse a board position')
        test_parser.add_argument('--position', type=str, required=True,
                                 help='Comma-separated cell values (0/1/2), row by row from the top')

        benchmark_parser = subparsers.add_parser('benchmark', help='Benchmark the engine')
        benchmark_parser.add_argument('--iterations', type=int, default=1000,
                                      help='Number of iterations for benchmarking')
        return parser

    def parse_args(self, argv: Optional[List[str]] = None) -> None:
        """Parse command-line arguments and set up logging."""
        self.args = self.build_parser().parse_args(argv)
        level = DebugLevel.DEBUG if self.args.debug else DebugLevel[self.args.debug_level.upper()]
        debug.configure(level=level, log_file=self.args.log_file)

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Run the selected command. Returns a process exit code."""
        if self.args is None:
            self.parse_args(argv)

        try:
            if self.args.command == 'play':
                self.play_game()
            elif self.args.command == 'test':
                self.test_position()
            elif self.args.command == 'benchmark':
                self.benchmark()
            else:
                self.output("Please specify a command. Use --help for options.")
                return 1
        except ConfigurationError as e:
            debug.error(str(e), "cli")
            self.output(f"Error: {e}")
            return 2
        return 0

    # --- play ---

    def play_game(self) -> None:
        """Play a game between two people at the same keyboard."""
        config = GameConfig.from_args(self.args)
        self.session = GameSession(config)
        use_color = not getattr(self.args, 'no_color', False)
        renderer = TerminalRenderer(self.session, self.output, use_color=use_color)
        notifier = EndGameNotifier(self.session, self.ask_yes_no, self.output)
        self.session.subscribe(MoveRejected, self.on_move_rejected)

        self.output("Starting a new Connect Four game!")
        self.output(f"Enter a column number (0-{config.width - 1}), 'r' to restart or 'q' to quit.")
        renderer.draw()
        renderer.on_turn_changed(TurnChanged(self.session.current_player))

        while True:
            command = self.read_command()
            if command is None:
                continue
            if command == QUIT:
                self.output("Quitting game.")
                return
            if command == RESTART:
                self.session.restart()
                continue

            self.session.play_move(command)
            if self.session.is_game_over() and not notifier.deliver():
                self.output("Thanks for playing!")
                return

    def read_command(self):
        """
        Read one line of player input.

        Returns:
            A column index, QUIT, RESTART, or None for unreadable input
        """
        player = self.session.player_config(self.session.current_player)
        try:
            user_input = self.input_func(f"{player.name}, your move: ").strip().lower()
        except EOFError:
            return QUIT

        if user_input == 'q':
            return QUIT
        if user_input == 'r':
            return RESTART
        try:
            return int(user_input)
        except ValueError:
            self.output("Invalid input. Please enter a column number or 'r'/'q'.")
            return None

    def ask_yes_no(self, prompt: str) -> bool:
        try:
            answer = self.input_func("Play again? (y/n): ").strip().lower()
        except EOFError:
            return False
        return answer in ('y', 'yes')

    def on_move_rejected(self, event: MoveRejected):
        template = REJECTION_MESSAGES.get(event.reason, "{message}")
        self.output(template.format(last=self.session.board.width - 1, column=event.column, message=event.message))

    # --- test ---

    def test_position(self) -> None:
        """Report wins, fullness and legal columns for a given position."""
        try:
            values = [int(c) for c in self.args.position.split(',')]
            board = Board.from_position(values, self.args.width, self.args.height)
        except ValueError as e:
            self.output(f"Error parsing position: {e}")
            return

        self.output("Loaded position:")
        self.output(board.render())

        has_win = False
        for player in (Player.ONE, Player.TWO):
            line = find_winning_line(board, player)
            if line:
                self.output(f"Win for {player.name} ({player}) along {line}")
                has_win = True
        if not has_win:
            self.output("No win detected for any player")

        if board.is_full():
            self.output("Board is full")
        else:
            self.output(f"Empty spaces: {board.empty_count()}")
        self.output(f"Valid moves: {board.valid_columns()}")

    # --- benchmark ---

    def benchmark(self) -> None:
        """Time board creation, random games and win scans."""
        iterations = max(1, self.args.iterations)
        width, height = self.args.width, self.args.height
        self.output(f"Running benchmark with {iterations} iterations...")

        debug.start_timer("board_init")
        for _ in range(iterations):
            Board(width, height)
        board_init_time = debug.end_timer("board_init")
        self.output(f"Board initialization: {board_init_time:.6f} seconds total, "
                    f"{board_init_time / iterations * 1000:.6f} ms per board")

        session = GameSession(GameConfig(width=width, height=height))
        games_played = 0
        total_moves = 0
        debug.start_timer("game_simulation")
        for _ in range(max(1, iterations // 10)):
            session.restart()
            while not session.is_game_over():
                session.play_move(random.choice(session.valid_columns()))
                total_moves += 1
            games_played += 1
        simulation_time = debug.end_timer("game_simulation")
        self.output(f"Played {games_played} games with {total_moves} total moves: "
                    f"{simulation_time:.6f} seconds total, "
                    f"{simulation_time / max(1, total_moves) * 1000:.6f} ms per move")

        # Scan the finished board from the last game for both players
        board = session.board
        debug.start_timer("win_check")
        for _ in range(iterations):
            for player in (Player.ONE, Player.TWO):
                find_winning_line(board, player)
        win_check_time = debug.end_timer("win_check")
        self.output(f"Performing {iterations * 2} win checks: {win_check_time:.6f} seconds total, "
                    f"{win_check_time / (iterations * 2) * 1000:.6f} ms per check")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    return SimpleCLI().run(argv)


if __name__ == "__main__":
    sys.exit(main())
