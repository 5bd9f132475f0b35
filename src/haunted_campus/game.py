"""The turn loop bridging the engine and the console."""

from collections.abc import Callable

from .engine.commands import handle_command
from .engine.state import GameState, GameStatus
from .logging import get_logger

logger = get_logger(__name__)

PROMPT = "Command> "

DEFEAT_MESSAGE = "You can no longer continue... the haunting consumes you."
VICTORY_MESSAGE = (
    "A warm light breaks through the fog... "
    "you've cleansed the haunted campus. You win!"
)


class Game:
    """Runs one game to completion against a pair of line I/O callables.

    ``read_line`` takes a prompt and returns the player's line (``input``
    fits); ``write`` emits a block of text (``print`` fits).
    """

    def __init__(
        self,
        state: GameState,
        read_line: Callable[[str], str] = input,
        write: Callable[[str], None] = print,
    ):
        self.state = state
        self.read_line = read_line
        self.write = write

    def check_terminal(self) -> GameStatus:
        """Move the game to LOST or WON when either condition holds."""
        state = self.state
        if state.is_over:
            return state.status

        if not state.player.is_alive:
            state.status = GameStatus.LOST
            self.write(DEFEAT_MESSAGE)
        elif state.in_final_room and state.current_room.is_complete:
            state.status = GameStatus.WON
            self.write(VICTORY_MESSAGE)

        if state.is_over:
            logger.info(
                "game_over",
                status=state.status.value,
                player=state.player.name,
                turns=state.turns,
            )
        return state.status

    def step(self) -> None:
        """Read one command line and write the engine's response."""
        try:
            raw_input = self.read_line(PROMPT)
        except EOFError:
            self.state.status = GameStatus.QUIT
            logger.info("input_closed", turns=self.state.turns)
            return

        response = handle_command(self.state, raw_input)
        if response:
            self.write(response)

    def run(self) -> GameStatus:
        """Play until the game is won, lost or quit."""
        state = self.state
        logger.info(
            "game_started",
            player=state.player.name,
            room=state.current_room.name,
        )
        self.write(state.current_room.enter(state.player))

        while self.check_terminal() is GameStatus.PLAYING:
            self.write("")
            self.step()

        return state.status
