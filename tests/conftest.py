"""Shared test fixtures for Haunted Campus."""

import pytest
import structlog

from haunted_campus.engine.entities import Player
from haunted_campus.engine.factory import create_world
from haunted_campus.engine.state import GameState, new_game_state, new_player
from haunted_campus.engine.world import World
from haunted_campus.logging import close_log_file


@pytest.fixture(autouse=True)
def _reset_logging():
    """Undo any logging configuration a test installs."""
    yield
    structlog.reset_defaults()
    close_log_file()


@pytest.fixture
def world() -> World:
    return create_world()


@pytest.fixture
def player() -> Player:
    return new_player("Tester")


@pytest.fixture
def state(world: World, player: Player) -> GameState:
    return new_game_state(world, player)


class ScriptedConsole:
    """Feeds canned lines to a Game and records everything it writes."""

    def __init__(self, lines: list[str]):
        self.lines = list(lines)
        self.prompts: list[str] = []
        self.output: list[str] = []

    def read_line(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)

    def write(self, text: str) -> None:
        self.output.append(text)

    @property
    def text(self) -> str:
        return "\n".join(self.output)


@pytest.fixture
def console_factory():
    return ScriptedConsole
