"""
board.py - Board representation for Connect Four

This module implements the Board class which owns the grid of cell occupancy
values. It knows about gravity (where a dropped piece lands) but nothing about
turns or winning; those live in the turn engine and win detector.
"""

from typing import List, Optional, Sequence, Tuple

import numpy as np

from connectfour.config import check_dimensions
from connectfour.debug import debug
from connectfour.exceptions import LogicError
from connectfour.utils import COLS, ROWS, Player, render_board_ascii


class Board:
    """
    Represents a Connect Four game board.

    The grid is a numpy array of shape (height, width). Row 0 is the top row,
    so pieces stack from row height-1 upward.
    """

    def __init__(self, width: int = COLS, height: int = ROWS):
        """
        Create an empty board.

        Raises:
            InvalidDimensionsError: width or height is not a positive integer
        """
        check_dimensions(width, height)
        self.width = int(width)
        self.height = int(height)
        debug.debug(f"Initializing new {self.width}x{self.height} Board", "board")
        self.grid = np.zeros((self.height, self.width), dtype=int)

    def reset(self):
        """Return every cell to empty."""
        debug.debug("Resetting board", "board")
        self.grid.fill(Player.EMPTY.value)

    def copy(self) -> 'Board':
        """
        Create a deep copy of the current board.

        Returns:
            A new Board instance with the same cells
        """
        debug.trace("Creating board copy", "board")
        new_board = Board(self.width, self.height)
        new_board.grid = self.grid.copy()
        return new_board

    @classmethod
    def from_position(cls, values: Sequence[int], width: int = COLS, height: int = ROWS) -> 'Board':
        """
        Build a board from a flat, row-major list of cell values (0, 1 or 2).

        Raises:
            ValueError: wrong number of values or a value that is not a player
        """
        board = cls(width, height)
        if len(values) != width * height:
            raise ValueError(f"Position must have {width * height} values, got {len(values)}")
        allowed = {player.value for player in Player}
        bad = sorted({int(v) for v in values} - allowed)
        if bad:
            raise ValueError(f"Position contains invalid cell values: {bad}")
        board.grid = np.array(values, dtype=int).reshape(height, width)
        return board

    def is_in_bounds(self, row: int, column: int) -> bool:
        """Check if a position is within the board boundaries."""
        return 0 <= row < self.height and 0 <= column < self.width

    def is_valid_column(self, column) -> bool:
        """Check that column is an integer index into the board."""
        if isinstance(column, bool) or not isinstance(column, (int, np.integer)):
            return False
        return 0 <= column < self.width

    def lowest_empty_row(self, column) -> Optional[int]:
        """
        Find where a piece dropped into a column would land.

        Args:
            column: The column to drop into (0-indexed)

        Returns:
            The bottommost empty row, or None if the column is full or out of range
        """
        if not self.is_valid_column(column):
            return None
        for row in range(self.height - 1, -1, -1):
            if self.grid[row, column] == Player.EMPTY.value:
                return row
        return None

    def place(self, row: int, column: int, player: Player):
        """
        Put a player's piece in a cell.

        Callers must resolve the row with lowest_empty_row first.

        Raises:
            LogicError: coordinates out of range, cell occupied, or no player given
        """
        if player not in (Player.ONE, Player.TWO):
            raise LogicError(f"Cannot place {player!r} on the board")
        if not self.is_in_bounds(row, column):
            raise LogicError(f"Cannot place at ({row}, {column}): outside {self.width}x{self.height} board")
        if self.grid[row, column] != Player.EMPTY.value:
            raise LogicError(f"Cannot place at ({row}, {column}): cell already occupied")
        debug.trace(f"Placing {player.name} at ({row}, {column})", "board")
        self.grid[row, column] = player.value

    def occupant_at(self, row: int, column: int) -> Player:
        """Occupant of a cell; Player.EMPTY for empty or out-of-range cells."""
        if not self.is_in_bounds(row, column):
            return Player.EMPTY
        return Player(int(self.grid[row, column]))

    def is_full(self) -> bool:
        """True when no cell is empty."""
        return bool(np.all(self.grid != Player.EMPTY.value))

    def column_height(self, column: int) -> int:
        """Number of pieces stacked in a column."""
        return int(np.count_nonzero(self.grid[:, column]))

    def valid_columns(self) -> List[int]:
        """Columns that still have room for a piece."""
        return [col for col in range(self.width) if self.grid[0, col] == Player.EMPTY.value]

    def empty_count(self) -> int:
        return int(np.sum(self.grid == Player.EMPTY.value))

    def get_state(self) -> np.ndarray:
        """
        Get the current board state as a numpy array.

        Returns:
            A copy of the grid
        """
        return self.grid.copy()

    def snapshot_grid(self) -> Tuple[Tuple[int, ...], ...]:
        """Immutable copy of the grid, suitable for equality checks."""
        return tuple(tuple(int(v) for v in row) for row in self.grid)

    def render(self) -> str:
        return render_board_ascii(self.grid)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Board(width={self.width}, height={self.height}, pieces={self.width * self.height - self.empty_count()})"
