"""Tests for logging configuration."""

from pathlib import Path

from haunted_campus import logging as game_logging
from haunted_campus.engine.commands import handle_command
from haunted_campus.engine.state import GameState


def test_reconfigure_reaches_module_loggers(state: GameState, tmp_path: Path):
    first = tmp_path / "first.log"
    second = tmp_path / "second.log"

    game_logging.configure_logging(log_level="INFO", log_file=first)
    handle_command(state, "go north")
    assert "room_blocked" in first.read_text()

    game_logging.configure_logging(log_level="INFO", log_file=second)
    handle_command(state, "go north")
    assert first.read_text().count("room_blocked") == 1
    assert "room_blocked" in second.read_text()


def test_reconfigure_closes_previous_file(tmp_path: Path):
    game_logging.configure_logging(log_file=tmp_path / "first.log")
    first_stream = game_logging._log_file
    assert first_stream is not None and not first_stream.closed

    game_logging.configure_logging()
    assert first_stream.closed
    assert game_logging._log_file is None


def test_close_log_file(tmp_path: Path):
    game_logging.configure_logging(log_file=tmp_path / "game.log")
    stream = game_logging._log_file

    game_logging.close_log_file()
    assert stream.closed
    assert game_logging._log_file is None
