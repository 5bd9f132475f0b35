"""Build the haunted campus.

The map is fixed: seven rooms in a single north/south line from the main
entrance up to the rooftop. Every call returns a fresh, identical world.
"""

from .challenges import Puzzle
from .entities import Enemy
from .world import World, link, physical_room, skill_room, ultimate_room

START_ROOM = "Haunted Main Entrance"
FINAL_ROOM = "Rooftop Tower"

PUZZLE_ATTEMPTS = 3


def create_world() -> World:
    """Create the seven rooms with their enemies and puzzles."""
    ghost_guard = Enemy("Ghost Security Guard", health=30, damage=5)
    shadow_figure = Enemy("Shadow Figure", health=25, damage=4)
    lab_demon = Enemy("Corrupted Lab Demon", health=40, damage=6)
    possessed_student = Enemy("Possessed Student", health=35, damage=5)
    rooftop_boss = Enemy("Warden of the Rooftop", health=60, damage=8)

    library_puzzle = Puzzle(
        "A dusty book glows. On the page: 'What is 6 x 7?'",
        answer="42",
        attempts_left=PUZZLE_ATTEMPTS,
    )
    theatre_puzzle = Puzzle(
        "On the board, a riddle about time: "
        "'I have hands but cannot clap. What am I?'",
        answer="clock",
        attempts_left=PUZZLE_ATTEMPTS,
    )
    lab_puzzle = Puzzle(
        "The lab terminal asks: 'Binary for 5?'",
        answer="101",
        attempts_left=PUZZLE_ATTEMPTS,
    )
    rooftop_puzzle = Puzzle(
        "The final sigil glows: 'Add the digits of 2025.'",
        answer="9",
        attempts_left=PUZZLE_ATTEMPTS,
    )

    rooms = [
        physical_room(
            START_ROOM,
            "Cold air rushes through the shattered doors of RGU. "
            "A spectral guard floats at the turnstiles.",
            ghost_guard,
        ),
        physical_room(
            "Dark Corridor",
            "The corridor lights flicker. "
            "A tall shadow lurches from the end of the hallway.",
            shadow_figure,
        ),
        skill_room(
            "Silent Library",
            "Rows of books watch you silently. "
            "One shelf is glowing with a strange symbol.",
            library_puzzle,
        ),
        skill_room(
            "Cursed Lecture Theatre",
            "Desks are overturned. "
            "Chalk moves by itself across the board, scribbling riddles.",
            theatre_puzzle,
        ),
        ultimate_room(
            "Abandoned IT Lab",
            "Monitors flash error codes. "
            "A corrupted demon crawls out from a broken PC tower.",
            lab_demon,
            lab_puzzle,
        ),
        physical_room(
            "Rooftop Stairwell",
            "Each step echoes unnaturally. "
            "A possessed student blocks your path upwards.",
            possessed_student,
        ),
        ultimate_room(
            FINAL_ROOM,
            "Wind howls across the rooftop. "
            "The Warden of the Rooftop stands before a glowing seal.",
            rooftop_boss,
            rooftop_puzzle,
        ),
    ]

    for lower, upper in zip(rooms, rooms[1:]):
        link(lower, upper)

    return World(
        rooms={room.name: room for room in rooms},
        start_room=START_ROOM,
        final_room=FINAL_ROOM,
    )
