"""Data structures for the campus map.

Rooms are built once at start-up and linked to their neighbours. Only the
completion state of their challenges changes during play.
"""

from dataclasses import dataclass, field

from .challenges import Challenge, EnemyEncounter, Puzzle
from .entities import Enemy, Player

DIRECTIONS = ("north", "south", "east", "west")


@dataclass(eq=False)
class Room:
    """A location on the campus, holding one or two challenges."""

    name: str
    description: str
    challenges: list[Challenge] = field(default_factory=list)
    # Neighbour links do not own the rooms they point to.
    north: "Room | None" = field(default=None, repr=False)
    south: "Room | None" = field(default=None, repr=False)
    east: "Room | None" = field(default=None, repr=False)
    west: "Room | None" = field(default=None, repr=False)

    @property
    def is_complete(self) -> bool:
        return all(challenge.is_complete for challenge in self.challenges)

    def neighbour(self, direction: str) -> "Room | None":
        """Return the room in the given direction, or None."""
        if direction not in DIRECTIONS:
            return None
        return getattr(self, direction)

    def exits(self) -> list[str]:
        return [d for d in DIRECTIONS if getattr(self, d) is not None]

    def enter(self, player: Player) -> str:
        """Describe the room and every challenge still standing in it."""
        parts = [f"== {self.name} ==", self.description]
        for challenge in self.challenges:
            if not challenge.is_complete:
                parts.append(challenge.on_enter(player))
        return "\n".join(parts)


def physical_room(name: str, description: str, enemy: Enemy) -> Room:
    """A room guarded by an enemy."""
    return Room(name, description, [EnemyEncounter(enemy)])


def skill_room(name: str, description: str, puzzle: Puzzle) -> Room:
    """A room sealed by a puzzle."""
    return Room(name, description, [puzzle])


def ultimate_room(name: str, description: str, enemy: Enemy, puzzle: Puzzle) -> Room:
    """A room with an enemy to beat and then a puzzle to solve."""
    return Room(name, description, [EnemyEncounter(enemy), puzzle])


def link(south: Room, north: Room) -> None:
    """Join two rooms with a north/south passage in both directions."""
    south.north = north
    north.south = south


@dataclass
class World:
    """The complete campus, keyed by room name in map order."""

    rooms: dict[str, Room] = field(default_factory=dict)
    start_room: str = ""
    final_room: str = ""

    @property
    def start(self) -> Room:
        return self.rooms[self.start_room]

    def cleared_rooms(self) -> int:
        return sum(1 for room in self.rooms.values() if room.is_complete)
