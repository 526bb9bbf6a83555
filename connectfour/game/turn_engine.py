"""
turn_engine.py - Turn state machine for Connect Four

The TurnEngine owns whose turn it is and how the game stands. It validates a
column drop against the board, applies it, and decides the outcome: a win is
checked before a tie, and the turn passes only when the game goes on.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from connectfour.debug import debug
from connectfour.exceptions import ColumnFullError, InvalidColumnError, LogicError, MoveAfterGameEndError
from connectfour.game.board import Board
from connectfour.game.win_detector import find_winning_line
from connectfour.utils import GameResult, Player


@dataclass(frozen=True)
class MoveOutcome:
    """What an accepted move did."""
    row: int
    column: int
    player: Player
    result: GameResult
    next_player: Player
    winning_line: List[Tuple[int, int]] = field(default_factory=list)

    @property
    def ended_game(self) -> bool:
        return self.result.is_game_over()


class TurnEngine:
    """
    Validates and applies moves on a board for two alternating players.

    Once the result is terminal every move is rejected until restart().
    """

    def __init__(self, board: Board, first_player: Player = Player.ONE):
        if first_player not in (Player.ONE, Player.TWO):
            raise LogicError(f"First player must be ONE or TWO, got {first_player!r}")
        self.board = board
        self.first_player = first_player
        self.current_player = first_player
        self.result = GameResult.IN_PROGRESS
        self.moves_made = 0
        self.last_move: Optional[Tuple[int, int]] = None

    def restart(self):
        """Clear the board and return to the opening turn."""
        debug.debug("Restarting turn engine", "engine")
        self.board.reset()
        self.current_player = self.first_player
        self.result = GameResult.IN_PROGRESS
        self.moves_made = 0
        self.last_move = None

    def is_game_over(self) -> bool:
        return self.result.is_game_over()

    def winner(self) -> Optional[Player]:
        return self.result.winner

    def check_move(self, column) -> int:
        """
        Resolve the row a move would land on without applying it.

        Raises:
            MoveAfterGameEndError: the game is already won or tied
            InvalidColumnError: column is not an index into the board
            ColumnFullError: the column has no empty cell
        """
        if self.is_game_over():
            raise MoveAfterGameEndError(column)
        if not self.board.is_valid_column(column):
            raise InvalidColumnError(column, self.board.width)
        row = self.board.lowest_empty_row(column)
        if row is None:
            raise ColumnFullError(column)
        return row

    def play_move(self, column) -> MoveOutcome:
        """
        Drop the current player's piece into a column.

        Either the whole move applies or, when an InvalidMoveError is raised,
        nothing changes.

        Returns:
            The placement and the resulting game state
        """
        row = self.check_move(column)
        column = int(column)
        player = self.current_player

        self.board.place(row, column, player)
        self.moves_made += 1
        self.last_move = (row, column)
        debug.debug(f"{player.name} dropped into column {column}, landed on row {row}", "engine")

        winning_line = find_winning_line(self.board, player)
        if winning_line:
            self.result = GameResult.won_by(player)
            debug.info(f"Player {player.name} wins after move at {self.last_move}", "engine")
        elif self.board.is_full():
            self.result = GameResult.TIE
            debug.info("Game ends in a tie", "engine")
        else:
            self.current_player = player.other()
            debug.debug(f"Switching to player {self.current_player.name}", "engine")

        return MoveOutcome(row=row, column=column, player=player, result=self.result,
                           next_player=self.current_player, winning_line=winning_line)
