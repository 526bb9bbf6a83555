"""
config.py - Session configuration for Connect Four

Board dimensions and player display metadata are collected by the
presentation layer and handed to the engine as a GameConfig.
"""

import numbers
from dataclasses import dataclass, field
from typing import Optional

from connectfour.debug import debug
from connectfour.exceptions import ConfigurationError, InvalidDimensionsError
from connectfour.utils import COLS, MIN_RECOMMENDED_SIZE, ROWS, Player


@dataclass(frozen=True)
class PlayerConfig:
    """Display metadata for one player."""
    name: str
    color: str = "red"


@dataclass(frozen=True)
class GameConfig:
    """Everything needed to start a session."""
    width: int = COLS
    height: int = ROWS
    player1: PlayerConfig = field(default_factory=lambda: PlayerConfig("Player 1", "red"))
    player2: PlayerConfig = field(default_factory=lambda: PlayerConfig("Player 2", "yellow"))
    first_player: Player = Player.ONE

    def validate(self) -> 'GameConfig':
        """
        Check the configuration and return it.

        Raises:
            InvalidDimensionsError: width or height is not a positive integer
            ConfigurationError: bad first player or indistinguishable players
        """
        validate_dimensions(self.width, self.height)
        if self.first_player not in (Player.ONE, Player.TWO):
            raise ConfigurationError(f"First player must be Player.ONE or Player.TWO, got {self.first_player!r}")
        if self.player1.name == self.player2.name:
            raise ConfigurationError(f"Players must have different names, both are {self.player1.name!r}")
        return self

    def player(self, player: Player) -> PlayerConfig:
        """Metadata for a player identifier."""
        if player == Player.ONE:
            return self.player1
        if player == Player.TWO:
            return self.player2
        raise ConfigurationError(f"No player configured for {player!r}")

    @classmethod
    def from_args(cls, args) -> 'GameConfig':
        """Build a config from parsed command-line arguments."""
        defaults = cls()
        first = getattr(args, 'first', 1)
        return cls(
            width=getattr(args, 'width', defaults.width),
            height=getattr(args, 'height', defaults.height),
            player1=PlayerConfig(getattr(args, 'p1_name', None) or defaults.player1.name,
                                 getattr(args, 'p1_color', None) or defaults.player1.color),
            player2=PlayerConfig(getattr(args, 'p2_name', None) or defaults.player2.name,
                                 getattr(args, 'p2_color', None) or defaults.player2.color),
            first_player=Player.TWO if first == 2 else Player.ONE,
        ).validate()


def check_dimensions(width, height):
    """Raise InvalidDimensionsError unless both sizes are positive integers."""
    for size in (width, height):
        if isinstance(size, bool) or not isinstance(size, numbers.Integral) or size <= 0:
            raise InvalidDimensionsError(width, height)


def validate_dimensions(width, height, component: Optional[str] = "config"):
    """check_dimensions, plus a warning for boards too small to play on."""
    check_dimensions(width, height)
    if width < MIN_RECOMMENDED_SIZE and height < MIN_RECOMMENDED_SIZE:
        debug.warning(f"Board {width}x{height} is too small for anyone to win", component)
    elif width < MIN_RECOMMENDED_SIZE or height < MIN_RECOMMENDED_SIZE:
        debug.warning(f"Board {width}x{height} is smaller than {MIN_RECOMMENDED_SIZE} in one dimension", component)
