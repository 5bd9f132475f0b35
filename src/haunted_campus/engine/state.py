"""Mutable per-game state.

One GameState exists per game and is passed explicitly to every command.
"""

import enum
from dataclasses import dataclass

from .entities import Player
from .world import Room, World

STARTING_HEALTH = 100
ATTACK_POWER = 10
DEFAULT_PLAYER_NAME = "Unknown"


class GameStatus(enum.Enum):
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"
    QUIT = "quit"


@dataclass
class GameState:
    """The player, where they stand, and whether the game is still running."""

    world: World
    player: Player
    current_room: Room
    status: GameStatus = GameStatus.PLAYING
    turns: int = 0

    @property
    def is_over(self) -> bool:
        return self.status is not GameStatus.PLAYING

    @property
    def in_final_room(self) -> bool:
        return self.current_room.name == self.world.final_room


def new_player(
    name: str | None,
    health: int = STARTING_HEALTH,
    attack_power: int = ATTACK_POWER,
) -> Player:
    """Create a player, falling back to a default name for blank input."""
    name = (name or "").strip() or DEFAULT_PLAYER_NAME
    return Player(name=name, health=health, attack_power=attack_power)


def new_game_state(world: World, player: Player) -> GameState:
    """Create a fresh game state with the player at the world's start room."""
    return GameState(world=world, player=player, current_room=world.start)
