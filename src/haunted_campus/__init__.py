"""Haunted Campus: a small turn-based text adventure."""

import sys

from .config import Config
from .engine.factory import create_world
from .engine.state import new_game_state, new_player
from .game import Game
from .logging import configure_logging, get_logger

__all__ = ["main", "Config", "Game"]

NAME_PROMPT = "Enter your name, ghost hunter: "
WELCOME_MESSAGE = "Welcome to Haunted RGU Campus. Type 'help' if you feel lost."


def main() -> None:
    """Entry point for the haunted-campus console game."""
    try:
        config = Config.from_env()
    except ValueError as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return

    configure_logging(
        log_level=config.log_level,
        log_file=config.log_file,
        json_logs=config.json_logs,
    )

    logger = get_logger(__name__)

    try:
        name = input(NAME_PROMPT)
    except EOFError:
        name = ""

    player = new_player(
        name,
        health=config.starting_health,
        attack_power=config.attack_power,
    )
    state = new_game_state(create_world(), player)
    logger.info(
        "player_created",
        player=player.name,
        health=player.health,
        attack_power=player.attack_power,
    )

    print()
    print(WELCOME_MESSAGE)
    status = Game(state, input, print).run()
    logger.debug("application_exiting", status=status.value)
