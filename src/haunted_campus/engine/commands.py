"""Command dispatch and handler functions.

handle_command(state, raw_input) -> str is the main entry point.
It tokenizes the input and dispatches to a handler by command name.
All handlers mutate state in place and return descriptive text.
"""

from collections.abc import Callable, Sequence

from ..logging import get_logger
from .challenges import EnemyEncounter, Puzzle
from .state import GameState, GameStatus

logger = get_logger(__name__)

Handler = Callable[[GameState, Sequence[str]], str]

UNKNOWN_COMMAND = "I don't understand that command. Type 'help' to see options."

_DIRECTION_ALIASES = {
    "n": "north",
    "s": "south",
    "e": "east",
    "w": "west",
}

CAMPUS_MAP = (
    "[Entrance] -> [Corridor] -> [Library] -> [Theatre] -> [Lab] "
    "-> [Stairwell] -> [Rooftop]"
)

HELP_TEXT = """Available commands:
- go <direction>   (north, south, east, west)
- attack           (attack an enemy in the room)
- solve <answer>   (answer a puzzle in the room)
- look             (re-describe the current room)
- status           (show your health and progress)
- map              (show a map of the campus)
- help             (show this help text)
- quit             (end the game)"""


def _first_open_enemy(state: GameState) -> EnemyEncounter | None:
    for challenge in state.current_room.challenges:
        match challenge:
            case EnemyEncounter() if not challenge.is_complete:
                return challenge
    return None


def _first_open_puzzle(state: GameState) -> Puzzle | None:
    for challenge in state.current_room.challenges:
        match challenge:
            case Puzzle() if not challenge.is_complete:
                return challenge
    return None


def _cmd_go(state: GameState, args: Sequence[str]) -> str:
    """Handle GO commands."""
    if not args:
        return "Go where? north/south/east/west"

    direction = args[0].lower()
    direction = _DIRECTION_ALIASES.get(direction, direction)
    room = state.current_room

    next_room = room.neighbour(direction)
    if next_room is None:
        return "You can not go that way."

    if not room.is_complete:
        logger.info("room_blocked", room=room.name, direction=direction)
        return (
            "A mysterious force keeps you here... "
            "you must finish the challenges first."
        )

    state.current_room = next_room
    logger.info("room_entered", room=next_room.name, came_from=room.name)
    return next_room.enter(state.player)


def _cmd_attack(state: GameState, args: Sequence[str]) -> str:
    """Handle ATTACK commands."""
    encounter = _first_open_enemy(state)
    if encounter is None:
        return "There is nothing to attack here."

    result = encounter.handle_input("attack", state.player)

    if not state.player.is_alive:
        state.status = GameStatus.LOST
        logger.info(
            "game_over",
            status=state.status.value,
            killed_by=encounter.enemy.name,
            room=state.current_room.name,
        )
        return result + "\nYou collapse... the hauntings consume you. Game over."
    return result


def _cmd_solve(state: GameState, args: Sequence[str]) -> str:
    """Handle SOLVE commands."""
    puzzle = _first_open_puzzle(state)
    if puzzle is None:
        return "There doesn't seem to be any puzzle to solve here."

    if not args:
        return "You must provide an answer. Example: solve 42"

    if puzzle.is_exhausted:
        return "The puzzle has gone dark. You have no attempts left."

    return puzzle.handle_input(" ".join(args), state.player)


def _cmd_look(state: GameState, args: Sequence[str]) -> str:
    """Handle LOOK command."""
    return state.current_room.enter(state.player)


def _cmd_status(state: GameState, args: Sequence[str]) -> str:
    """Handle STATUS command."""
    player = state.player
    world = state.world
    return (
        f"{player.name}: health {player.health}, attack {player.attack_power}\n"
        f"Current room: {state.current_room.name}\n"
        f"Rooms cleared: {world.cleared_rooms()} of {len(world.rooms)}"
    )


def _cmd_help(state: GameState, args: Sequence[str]) -> str:
    """Handle HELP command."""
    return HELP_TEXT


def _cmd_map(state: GameState, args: Sequence[str]) -> str:
    """Handle MAP command."""
    return (
        "Rough map of the haunted campus:\n"
        f"{CAMPUS_MAP}\n"
        f"You are currently in: {state.current_room.name}"
    )


def _cmd_quit(state: GameState, args: Sequence[str]) -> str:
    """Handle QUIT command."""
    state.status = GameStatus.QUIT
    logger.info("game_over", status=state.status.value, turns=state.turns)
    return "You feel a chill as you leave the haunted campus. Goodbye!"


_COMMAND_DISPATCH: dict[str, Handler] = {
    "go": _cmd_go,
    **dict.fromkeys(("attack", "fight"), _cmd_attack),
    "solve": _cmd_solve,
    **dict.fromkeys(("look", "l"), _cmd_look),
    "status": _cmd_status,
    **dict.fromkeys(("help", "?"), _cmd_help),
    "map": _cmd_map,
    **dict.fromkeys(("quit", "q", "exit"), _cmd_quit),
}


def command_names() -> list[str]:
    """Return every registered command name, aliases included."""
    return sorted(_COMMAND_DISPATCH)


def handle_command(state: GameState, raw_input: str) -> str:
    """Process a command line and return the response text.

    Errors raised by a handler are reported back to the player; they never
    end the game.
    """
    words = raw_input.strip().split()
    if not words:
        return UNKNOWN_COMMAND

    name, args = words[0].lower(), words[1:]
    handler = _COMMAND_DISPATCH.get(name)
    if handler is None:
        logger.debug("command_unknown", command=name)
        return UNKNOWN_COMMAND

    state.turns += 1
    try:
        return handler(state, args)
    except ValueError as exc:
        logger.warning("command_failed", command=name, error=str(exc))
        return f"Problem with your command arguments: {exc}"
    except Exception as exc:
        logger.exception("command_failed", command=name)
        return f"Unexpected error running command {name}: {exc}"
