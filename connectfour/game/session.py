"""
session.py - A single Connect Four game session

GameSession wires a Board, the win detector and a TurnEngine together. It is
the only entry point the input layer needs (play_move / restart) and the only
source of events for rendering and end-of-game notification.
"""

from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from connectfour.config import GameConfig, PlayerConfig
from connectfour.debug import debug
from connectfour.exceptions import InvalidMoveError
from connectfour.game.board import Board
from connectfour.game.events import (BoardCleared, Event, EventBus, GameEnded, MoveRejected, PiecePlaced,
                                     TurnChanged)
from connectfour.game.turn_engine import MoveOutcome, TurnEngine
from connectfour.utils import GameResult, Player


@dataclass(frozen=True)
class GameSnapshot:
    """Immutable view of a session's state."""
    grid: Tuple[Tuple[int, ...], ...]
    current_player: Player
    result: GameResult
    moves_made: int


class GameSession:
    """
    One independent game: its own board, turn state and event bus.

    Moves that cannot be played are reported through a MoveRejected event and
    a False return value; the session is left exactly as it was.
    """

    def __init__(self, config: Optional[GameConfig] = None):
        self.config = (config or GameConfig()).validate()
        self._board = Board(self.config.width, self.config.height)
        self._engine = TurnEngine(self._board, self.config.first_player)
        self._bus = EventBus()
        self._restarts = 0
        self.last_outcome: Optional[MoveOutcome] = None
        debug.info(f"New {self.config.width}x{self.config.height} session: "
                   f"{self.config.player1.name} vs {self.config.player2.name}", "session")

    @classmethod
    def from_config(cls, config: GameConfig) -> 'GameSession':
        return cls(config)

    # --- Events ---

    def subscribe(self, event_type: type, handler: Callable) -> None:
        self._bus.subscribe(event_type, handler)

    def unsubscribe(self, event_type: type, handler: Callable) -> None:
        self._bus.unsubscribe(event_type, handler)

    def _emit(self, event: Event) -> None:
        debug.trace(f"Publishing {event}", "session")
        self._bus.publish(event)

    # --- Commands ---

    def play_move(self, column) -> bool:
        """
        Drop the current player's piece into a column.

        Args:
            column: Column index chosen by the input layer

        Returns:
            True if the move was applied, False if it was rejected
        """
        player = self._engine.current_player
        try:
            outcome = self._engine.play_move(column)
        except InvalidMoveError as e:
            debug.debug(f"Rejected move by {player.name}: {e}", "session")
            self._emit(MoveRejected(column=column, player=player, reason=e.reason, message=str(e)))
            return False

        self.last_outcome = outcome
        restarts = self._restarts
        self._emit(PiecePlaced(row=outcome.row, column=outcome.column, player=outcome.player))
        if self._restarts != restarts:
            # A handler restarted the game; the rest of this move no longer describes the board
            return True
        if outcome.ended_game:
            # State is already terminal here; listeners may defer their reaction freely
            self._emit(GameEnded(result=outcome.result, winner=outcome.result.winner,
                                 winning_line=tuple(outcome.winning_line)))
        else:
            self._emit(TurnChanged(player=outcome.next_player))
        return True

    def restart(self) -> None:
        """Abandon the current game, whatever its state, and start over."""
        debug.info("Restarting session", "session")
        self._engine.restart()
        self._restarts += 1
        self.last_outcome = None
        self._emit(BoardCleared())

    # --- Queries ---

    @property
    def board(self) -> Board:
        """The session's board. Read it; change it only through play_move/restart."""
        return self._board

    @property
    def current_player(self) -> Player:
        return self._engine.current_player

    @property
    def result(self) -> GameResult:
        return self._engine.result

    @property
    def moves_made(self) -> int:
        return self._engine.moves_made

    @property
    def last_move(self) -> Optional[Tuple[int, int]]:
        return self._engine.last_move

    def is_game_over(self) -> bool:
        return self._engine.is_game_over()

    def winner(self) -> Optional[Player]:
        return self._engine.winner()

    def winning_line(self) -> List[Tuple[int, int]]:
        if self.last_outcome is None or self.last_outcome.result.winner is None:
            return []
        return list(self.last_outcome.winning_line)

    def valid_columns(self) -> List[int]:
        if self.is_game_over():
            return []
        return self._board.valid_columns()

    def player_config(self, player: Player) -> PlayerConfig:
        return self.config.player(player)

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(grid=self._board.snapshot_grid(), current_player=self.current_player,
                            result=self.result, moves_made=self.moves_made)

    def render(self) -> str:
        return self._board.render()


def create_session(width: int, height: int, player1: PlayerConfig, player2: PlayerConfig,
                   first_player: Player = Player.ONE) -> GameSession:
    """
    Start a session for two players.

    Raises:
        InvalidDimensionsError: width or height is not a positive integer
        ConfigurationError: the players cannot be told apart
    """
    return GameSession(GameConfig(width=width, height=height, player1=player1, player2=player2,
                                  first_player=first_player))
