"""
exceptions.py - Error types raised by the Connect Four engine
"""


class GameError(Exception):
    pass


class LogicError(GameError):
    """A caller broke a precondition of the engine (programming error)."""


class ConfigurationError(GameError, ValueError):
    pass


class InvalidDimensionsError(ConfigurationError):
    def __init__(self, width, height):
        super().__init__(f"Board dimensions must be positive integers, got {width}x{height}")
        self.width = width
        self.height = height


class InvalidMoveError(GameError):
    """A move was rejected; the game state is unchanged."""

    reason = "invalid_move"

    def __init__(self, column, message: str):
        super().__init__(message)
        self.column = column


class InvalidColumnError(InvalidMoveError):
    reason = "invalid_column"

    def __init__(self, column, width: int):
        super().__init__(column, f"Column {column!r} is outside 0-{width - 1}")
        self.width = width


class ColumnFullError(InvalidMoveError):
    reason = "column_full"

    def __init__(self, column):
        super().__init__(column, f"Column {column} is full")


class MoveAfterGameEndError(InvalidMoveError):
    reason = "game_over"

    def __init__(self, column):
        super().__init__(column, f"Game is over, move in column {column} rejected")
