"""
win_detector.py - Four-in-a-row detection for Connect Four

Stateless scans over a Board. Every cell is tried as the start of a run in
four directions; a run counts only when all of its cells are on the board and
held by the player being checked.
"""

from typing import List, Optional, Tuple

from connectfour.debug import debug
from connectfour.game.board import Board
from connectfour.utils import CONNECT_N, DIRECTION_VECTORS, Direction, Player

Cell = Tuple[int, int]


def line_cells(row: int, column: int, direction: Direction, length: int = CONNECT_N) -> List[Cell]:
    """
    Coordinates of a run starting at (row, column).

    The result may contain off-board coordinates; callers check bounds.
    """
    dr, dc = DIRECTION_VECTORS[direction]
    return [(row + dr * i, column + dc * i) for i in range(length)]


def _run_belongs_to(board: Board, cells: List[Cell], player: Player) -> bool:
    # Bounds are checked before each lookup so off-board runs never touch the grid
    for row, column in cells:
        if not board.is_in_bounds(row, column):
            return False
        if board.grid[row, column] != player.value:
            return False
    return True


def _find_run(board: Board, player: Player) -> Optional[Tuple[Direction, List[Cell]]]:
    for row in range(board.height):
        for column in range(board.width):
            for direction in DIRECTION_VECTORS:
                cells = line_cells(row, column, direction)
                if _run_belongs_to(board, cells, player):
                    return direction, cells
    return None


def has_winning_line(board: Board, player: Player) -> bool:
    """
    Check whether a player has four in a row anywhere on the board.

    Args:
        board: The board to scan (not modified)
        player: The player to check for

    Returns:
        True on the first complete run found, False otherwise
    """
    if player == Player.EMPTY:
        return False
    found = _find_run(board, player)
    if found is not None:
        debug.trace(f"{player.name} has a {found[0].name.lower()} line at {found[1]}", "engine")
        return True
    return False


def find_winning_line(board: Board, player: Player) -> List[Cell]:
    """
    Cells of the first winning run for a player.

    Returns:
        List of (row, column) positions, or an empty list if there is no win
    """
    if player == Player.EMPTY:
        return []
    found = _find_run(board, player)
    return found[1] if found is not None else []
