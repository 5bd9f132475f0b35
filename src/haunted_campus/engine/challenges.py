"""Obstacles that must be overcome before a room can be left.

A challenge is either a Puzzle or an EnemyEncounter. Both expose the same
small surface (is_complete, describe, on_enter, handle_input) and return
their feedback as text instead of printing it.
"""

from dataclasses import dataclass, field

from ..logging import get_logger
from .entities import Enemy, Player

logger = get_logger(__name__)

ATTACK_TOKEN = "attack"


@dataclass
class Puzzle:
    """A riddle with a fixed answer and a limited number of attempts."""

    description: str
    answer: str
    attempts_left: int = 3
    is_complete: bool = field(default=False, init=False)

    def __post_init__(self) -> None:
        self.answer = self.answer.strip().lower()

    @property
    def is_exhausted(self) -> bool:
        """True when the puzzle can no longer be solved."""
        return not self.is_complete and self.attempts_left <= 0

    def describe(self) -> str:
        return self.description

    def on_enter(self, player: Player) -> str:
        return f"{self.description}\nType your answer with: solve <answer>"

    def handle_input(self, text: str, player: Player) -> str:
        # Solved and exhausted puzzles ignore further answers.
        if self.is_complete or self.attempts_left <= 0:
            return ""

        self.attempts_left -= 1

        if text.strip().lower() == self.answer:
            self.is_complete = True
            logger.info("puzzle_solved", answer=self.answer, player=player.name)
            return "The puzzle glows... You solved it!"

        if self.attempts_left == 0:
            logger.info("puzzle_exhausted", answer=self.answer, player=player.name)
        return f"Wrong answer...\nAttempts left: {self.attempts_left}"


@dataclass
class EnemyEncounter:
    """A fight against a single enemy. Complete once the enemy is defeated."""

    enemy: Enemy

    @property
    def is_complete(self) -> bool:
        return self.enemy.is_defeated

    def describe(self) -> str:
        return f"An angry {self.enemy.name} blocks your way!"

    def on_enter(self, player: Player) -> str:
        return f"{self.describe()}\nEnemy health: {self.enemy.health}"

    def handle_input(self, text: str, player: Player) -> str:
        if text.strip().lower() != ATTACK_TOKEN:
            return ""

        enemy = self.enemy
        enemy.take_damage(player.attack_power)

        if enemy.is_defeated:
            logger.info("enemy_defeated", enemy=enemy.name, player=player.name)
            return f"You defeated the {enemy.name}!"

        player.take_damage(enemy.damage)
        logger.debug(
            "combat_round",
            enemy=enemy.name,
            enemy_health=enemy.health,
            player_health=player.health,
        )
        return (
            f"You hit the {enemy.name}! Its health is now {enemy.health}.\n"
            f"The {enemy.name} hits back! Your health: {player.health}"
        )


Challenge = Puzzle | EnemyEncounter
