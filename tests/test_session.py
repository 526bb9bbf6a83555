import pytest

from connectfour.config import PlayerConfig
from connectfour.exceptions import ConfigurationError, InvalidDimensionsError
from connectfour.game.events import BoardCleared, GameEnded, MoveRejected, PiecePlaced, TurnChanged
from connectfour.game.session import GameSession, create_session
from connectfour.utils import GameResult, Player
from tests.conftest import DIAGONAL_WIN_COLUMNS, TIE_COLUMNS, VERTICAL_WIN_COLUMNS, EventRecorder, play_all


def test_create_session_with_players():
    session = create_session(8, 5, PlayerConfig("Ann", "red"), PlayerConfig("Ben", "blue"))
    assert (session.board.width, session.board.height) == (8, 5)
    assert session.player_config(Player.ONE).name == "Ann"
    assert session.player_config(Player.TWO).color == "blue"
    assert session.current_player == Player.ONE


def test_create_session_rejects_bad_dimensions():
    with pytest.raises(InvalidDimensionsError):
        create_session(0, 6, PlayerConfig("Ann"), PlayerConfig("Ben"))


def test_create_session_rejects_indistinguishable_players():
    with pytest.raises(ConfigurationError):
        create_session(7, 6, PlayerConfig("Ann"), PlayerConfig("Ann"))


def test_accepted_move_publishes_placement_then_turn(session, recorder):
    assert session.play_move(2) is True
    assert recorder.events == [PiecePlaced(row=5, column=2, player=Player.ONE), TurnChanged(player=Player.TWO)]


def test_winning_move_publishes_game_ended_after_state_is_terminal(session, recorder):
    seen = []
    session.subscribe(GameEnded, lambda e: seen.append((session.result, session.is_game_over())))

    play_all(session, VERTICAL_WIN_COLUMNS)

    ended = recorder.of_type(GameEnded)
    assert ended == [GameEnded(result=GameResult.PLAYER_ONE_WIN, winner=Player.ONE,
                               winning_line=((2, 3), (3, 3), (4, 3), (5, 3)))]
    assert seen == [(GameResult.PLAYER_ONE_WIN, True)]
    # The final move is placed, then the game ends; no turn change follows
    assert isinstance(recorder.events[-2], PiecePlaced)
    assert recorder.events[-1] == ended[0]
    assert len(recorder.of_type(TurnChanged)) == len(VERTICAL_WIN_COLUMNS) - 1


def test_diagonal_win_through_session(session, recorder):
    play_all(session, DIAGONAL_WIN_COLUMNS)
    assert session.winner() == Player.ONE
    assert session.winning_line() == [(2, 0), (3, 1), (4, 2), (5, 3)]
    assert recorder.of_type(GameEnded)[0].winner == Player.ONE


def test_tie_through_session(session, recorder):
    play_all(session, TIE_COLUMNS)
    ended = recorder.of_type(GameEnded)
    assert len(ended) == 1
    assert ended[0].is_tie
    assert ended[0].winner is None
    assert session.winning_line() == []
    assert session.valid_columns() == []


def test_full_column_rejected_with_unchanged_snapshot(session, recorder):
    play_all(session, [6] * 6)
    before = session.snapshot()
    recorder.clear()

    assert session.play_move(6) is False

    assert session.snapshot() == before
    assert recorder.events == [MoveRejected(column=6, player=before.current_player, reason="column_full",
                                            message="Column 6 is full")]


def test_invalid_column_reported(session, recorder):
    before = session.snapshot()
    assert session.play_move(7) is False
    assert session.snapshot() == before
    assert [e.reason for e in recorder.events] == ["invalid_column"]


def test_move_after_game_end_reported(session, recorder):
    play_all(session, VERTICAL_WIN_COLUMNS)
    before = session.snapshot()
    recorder.clear()
    assert session.play_move(5) is False
    assert session.snapshot() == before
    assert [e.reason for e in recorder.events] == ["game_over"]


@pytest.mark.parametrize("columns", [[], [0, 1, 2], VERTICAL_WIN_COLUMNS, TIE_COLUMNS])
def test_restart_from_any_state(session, recorder, columns):
    initial = session.snapshot()
    play_all(session, columns)
    recorder.clear()

    session.restart()

    assert session.snapshot() == initial
    assert session.board.empty_count() == 42
    assert session.current_player == Player.ONE
    assert session.result == GameResult.IN_PROGRESS
    assert session.last_outcome is None
    assert recorder.events == [BoardCleared()]
    assert session.play_move(3)


def test_sessions_are_independent():
    first = GameSession()
    second = GameSession()
    first_events = EventRecorder(first)
    first.play_move(0)
    assert second.board.empty_count() == 42
    assert second.current_player == Player.ONE
    second.play_move(1)
    assert len(first_events.of_type(PiecePlaced)) == 1


def test_unsubscribed_handler_not_called(session):
    calls = []
    session.subscribe(PiecePlaced, calls.append)
    session.play_move(0)
    session.unsubscribe(PiecePlaced, calls.append)
    session.play_move(0)
    assert len(calls) == 1


def test_restart_during_placement_stops_stale_events(session, recorder):
    session.subscribe(PiecePlaced, lambda e: session.restart())
    assert session.play_move(0) is True
    assert recorder.events == [PiecePlaced(row=5, column=0, player=Player.ONE), BoardCleared()]
    assert session.current_player == Player.ONE
    assert session.board.empty_count() == 42


def test_restart_during_winning_placement_skips_game_ended(session, recorder):
    play_all(session, VERTICAL_WIN_COLUMNS[:-1])
    session.subscribe(PiecePlaced, lambda e: session.restart())
    recorder.clear()
    assert session.play_move(3) is True
    assert recorder.of_type(GameEnded) == []
    assert isinstance(recorder.events[-1], BoardCleared)
    assert session.result == GameResult.IN_PROGRESS


def test_handler_can_restart_on_game_end(session, recorder):
    session.subscribe(GameEnded, lambda e: session.restart())
    play_all(session, VERTICAL_WIN_COLUMNS)
    assert isinstance(recorder.events[-1], BoardCleared)
    assert session.result == GameResult.IN_PROGRESS
    assert session.board.empty_count() == 42
