"""
utils.py - Constants, enumerations, and helpers for the Connect Four engine

This module provides the board defaults, player identifiers, game results
and scan directions shared by the board, win detector and turn engine.
"""

from enum import Enum, auto
from typing import Dict, Optional, Tuple

import numpy as np

# Game constants
ROWS = 6
COLS = 7
CONNECT_N = 4  # Number of pieces in a row to win
MIN_RECOMMENDED_SIZE = 4


class Player(Enum):
    """Enumeration representing players and cell states."""
    EMPTY = 0
    ONE = 1    # First player
    TWO = 2    # Second player

    def other(self) -> 'Player':
        """Get the other player."""
        if self == Player.ONE:
            return Player.TWO
        elif self == Player.TWO:
            return Player.ONE
        return Player.EMPTY

    def __str__(self):
        if self == Player.EMPTY:
            return " "
        elif self == Player.ONE:
            return "X"
        else:
            return "O"


class GameResult(Enum):
    """Enumeration representing the game outcome."""
    IN_PROGRESS = auto()
    PLAYER_ONE_WIN = auto()
    PLAYER_TWO_WIN = auto()
    TIE = auto()

    def is_game_over(self) -> bool:
        """Check if the game is over."""
        return self != GameResult.IN_PROGRESS

    @property
    def winner(self) -> Optional[Player]:
        """The winning player, or None for a tie or a game in progress."""
        if self == GameResult.PLAYER_ONE_WIN:
            return Player.ONE
        if self == GameResult.PLAYER_TWO_WIN:
            return Player.TWO
        return None

    @staticmethod
    def won_by(player: Player) -> 'GameResult':
        """Result for a win by the given player."""
        if player == Player.ONE:
            return GameResult.PLAYER_ONE_WIN
        if player == Player.TWO:
            return GameResult.PLAYER_TWO_WIN
        raise ValueError(f"No win result for {player!r}")


class Direction(Enum):
    """Enumeration representing directions for win checking."""
    HORIZONTAL = auto()
    VERTICAL = auto()
    DIAGONAL_DOWN_RIGHT = auto()
    DIAGONAL_DOWN_LEFT = auto()


# Direction vectors (row, col) for each direction. Row 0 is the top of the board.
DIRECTION_VECTORS: Dict[Direction, Tuple[int, int]] = {
    Direction.HORIZONTAL: (0, 1),
    Direction.VERTICAL: (1, 0),
    Direction.DIAGONAL_DOWN_RIGHT: (1, 1),
    Direction.DIAGONAL_DOWN_LEFT: (1, -1),
}


def render_board_ascii(grid: np.ndarray, symbols: Optional[Dict[int, str]] = None) -> str:
    """
    Render a board grid as ASCII art.

    Args:
        grid: 2D array of cell values (0 empty, 1/2 players)
        symbols: Optional mapping of cell value to the string drawn for it

    Returns:
        ASCII representation of the board
    """
    if symbols is None:
        symbols = {player.value: str(player) for player in Player}

    height, width = grid.shape
    result = []
    result.append("|" + "-" * (width * 2 - 1) + "|")

    for row in range(height):
        cells = [symbols.get(int(grid[row, col]), "?") for col in range(width)]
        result.append("|" + " ".join(cells) + "|")

    result.append("|" + "-" * (width * 2 - 1) + "|")

    # Column numbers wrap past 9 so wide boards stay aligned
    result.append("|" + " ".join(str(col % 10) for col in range(width)) + "|")

    return "\n".join(result)
