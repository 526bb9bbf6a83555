import pytest

from connectfour.config import GameConfig, PlayerConfig
from connectfour.debug import DebugLevel, debug
from connectfour.game.events import BoardCleared, GameEnded, MoveRejected, PiecePlaced, TurnChanged
from connectfour.game.session import GameSession

# Column order that fills a 7x6 board with no four-in-a-row when repeated six times
TIE_COLUMNS = [0, 2, 1, 3, 4, 6, 5] * 6

# Player ONE stacks column 3 while Player TWO plays column 0
VERTICAL_WIN_COLUMNS = [3, 0, 3, 0, 3, 0, 3]

# Player ONE finishes the down-right diagonal (2,0),(3,1),(4,2),(5,3) on the last move
DIAGONAL_WIN_COLUMNS = [3, 2, 2, 1, 6, 1, 1, 0, 0, 0, 0]


@pytest.fixture(autouse=True)
def quiet_logging():
    debug.configure(level=DebugLevel.WARNING, enabled=True, components=[])
    yield
    debug.configure(level=DebugLevel.WARNING, enabled=True, components=[], log_file="")


@pytest.fixture
def session():
    return GameSession(GameConfig(player1=PlayerConfig("Alice", "red"), player2=PlayerConfig("Bob", "yellow")))


class EventRecorder:
    def __init__(self, session):
        self.events = []
        for event_type in (PiecePlaced, TurnChanged, GameEnded, BoardCleared, MoveRejected):
            session.subscribe(event_type, self.events.append)

    def of_type(self, event_type):
        return [e for e in self.events if isinstance(e, event_type)]

    def clear(self):
        self.events.clear()


@pytest.fixture
def recorder(session):
    return EventRecorder(session)


def play_all(session, columns):
    for column in columns:
        assert session.play_move(column), f"move in column {column} was rejected"
