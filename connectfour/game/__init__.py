"""
connectfour.game - Core game mechanics for Connect Four

This package contains the board representation, win detection, the turn
state machine and the session that publishes game events.
"""

from connectfour.game.board import Board
from connectfour.game.env import ConnectFourEnv
from connectfour.game.events import (BoardCleared, Event, EventBus, GameEnded, MoveRejected, PiecePlaced,
                                     TurnChanged)
from connectfour.game.session import GameSession, GameSnapshot, create_session
from connectfour.game.turn_engine import MoveOutcome, TurnEngine
from connectfour.game.win_detector import find_winning_line, has_winning_line

__all__ = ['Board', 'BoardCleared', 'ConnectFourEnv', 'Event', 'EventBus', 'GameEnded', 'GameSession', 'GameSnapshot',
           'MoveOutcome', 'MoveRejected', 'PiecePlaced', 'TurnChanged', 'TurnEngine', 'create_session',
           'find_winning_line', 'has_winning_line']
