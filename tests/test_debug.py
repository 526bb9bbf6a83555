import io
import logging

from connectfour.config import GameConfig
from connectfour.debug import DebugLevel, DebugManager, debug
from connectfour.game.board import Board
from connectfour.game.session import GameSession
from connectfour.game.win_detector import has_winning_line
from connectfour.utils import Player


def test_messages_below_level_are_dropped():
    stream = io.StringIO()
    manager = DebugManager(level=DebugLevel.INFO, stream=stream, name="connectfour.test.levels")
    manager.debug("hidden", "board")
    manager.info("shown", "board")
    output = stream.getvalue()
    assert "[board] shown" in output
    assert "hidden" not in output


def test_component_filter():
    stream = io.StringIO()
    manager = DebugManager(level=DebugLevel.TRACE, stream=stream, name="connectfour.test.components")
    manager.configure(components=["engine"])
    manager.trace("kept", "engine")
    manager.info("dropped", "board")
    output = stream.getvalue()
    assert "TRACE" in output and "kept" in output
    assert "dropped" not in output


def test_level_none_silences_everything():
    stream = io.StringIO()
    manager = DebugManager(level=DebugLevel.NONE, stream=stream, name="connectfour.test.none")
    manager.error("nothing")
    assert stream.getvalue() == ""


def test_set_from_string():
    manager = DebugManager(stream=io.StringIO(), name="connectfour.test.misc")
    assert manager.set_from_string("debug")
    assert manager.level == DebugLevel.DEBUG
    assert not manager.set_from_string("loud")
    assert manager.level == DebugLevel.DEBUG


def test_timers():
    manager = DebugManager(stream=io.StringIO(), name="connectfour.test.misc")
    manager.start_timer("work")
    assert manager.end_timer("work") >= 0
    assert manager.end_timer("work") is None


def test_log_file(tmp_path):
    log_file = tmp_path / "game.log"
    manager = DebugManager(level=DebugLevel.INFO, stream=io.StringIO(), name="connectfour.test.file")
    manager.configure(log_file=str(log_file))
    manager.info("to file", "session")
    manager.configure(log_file="")
    assert "[session] to file" in log_file.read_text()


def test_session_logs_through_shared_logger(caplog):
    debug.configure(level=DebugLevel.INFO)
    with caplog.at_level(logging.INFO, logger="connectfour"):
        session = GameSession()
        session.play_move(0)
        session.restart()
    messages = [record.getMessage() for record in caplog.records]
    assert any("New 7x6 session" in m for m in messages)
    assert any("Restarting session" in m for m in messages)


def test_small_board_warns(caplog):
    with caplog.at_level(logging.WARNING, logger="connectfour"):
        GameSession.from_config(GameConfig(width=3, height=3))
    assert any("too small" in record.getMessage() for record in caplog.records)


def test_small_board_warns_once_per_session(caplog):
    with caplog.at_level(logging.WARNING, logger="connectfour"):
        session = GameSession(GameConfig(width=3, height=3))
        session.board.copy()
    warnings = [record.getMessage() for record in caplog.records if "too small" in record.getMessage()]
    assert warnings == ["[config] Board 3x3 is too small for anyone to win"]


def test_board_alone_does_not_warn(caplog):
    with caplog.at_level(logging.WARNING, logger="connectfour"):
        Board(2, 2)
    assert caplog.records == []


def test_win_scan_logs_under_engine_component():
    stream = io.StringIO()
    debug.configure(level=DebugLevel.TRACE, components=["engine"], stream=stream)
    board = Board(4, 4)
    board.grid[3, :] = Player.ONE.value
    assert has_winning_line(board, Player.ONE)
    assert "[engine] ONE has a horizontal line" in stream.getvalue()
