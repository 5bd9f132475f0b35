"""The living things of the campus: the player and the hauntings."""

from dataclasses import dataclass


def _check_stats(owner: str, **stats: int) -> None:
    for stat, value in stats.items():
        if value < 0:
            raise ValueError(f"{owner} {stat} cannot be negative, got {value}")


@dataclass
class Player:
    """The ghost hunter. Health never drops below zero."""

    name: str
    health: int
    attack_power: int

    def __post_init__(self) -> None:
        _check_stats("Player", health=self.health, attack_power=self.attack_power)

    @property
    def is_alive(self) -> bool:
        return self.health > 0

    def take_damage(self, amount: int) -> None:
        self.health = max(0, self.health - max(0, amount))


@dataclass
class Enemy:
    """A haunting that blocks a room until it is beaten."""

    name: str
    health: int
    damage: int

    def __post_init__(self) -> None:
        _check_stats("Enemy", health=self.health, damage=self.damage)

    @property
    def is_defeated(self) -> bool:
        return self.health <= 0

    def take_damage(self, amount: int) -> None:
        self.health = max(0, self.health - max(0, amount))
