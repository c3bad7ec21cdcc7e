"""Random world generation.

Hazards go into distinct rooms, never the player's starting room. Each
placement redraws until it hits an empty room. Five hazards in twenty rooms
keeps the number of redraws small.
"""

from .cave import ROOM_COUNT
from .rng import RandomSource
from .state import NUM_BATS, NUM_PITS, GameState, Hazard


def generate_unique_room(
    hazards: list[Hazard], player_room: int, rng: RandomSource
) -> int:
    """Draw rooms until one is empty and not the player's."""
    while True:
        room = rng.randrange(ROOM_COUNT)
        if room != player_room and hazards[room] is Hazard.NONE:
            return room


def generate_hazards(player_room: int, rng: RandomSource) -> list[Hazard]:
    """Build a hazard layout: pits first, then bats, then the Wumpus."""
    hazards = [Hazard.NONE] * ROOM_COUNT
    for _ in range(NUM_PITS):
        hazards[generate_unique_room(hazards, player_room, rng)] = Hazard.PITFALL
    for _ in range(NUM_BATS):
        hazards[generate_unique_room(hazards, player_room, rng)] = Hazard.BAT
    hazards[generate_unique_room(hazards, player_room, rng)] = Hazard.WUMPUS
    return hazards


def new_game_state(rng: RandomSource) -> GameState:
    """Create a fresh game with the player in a random room."""
    player_room = rng.randrange(ROOM_COUNT)
    return GameState(
        player_room=player_room,
        hazards=generate_hazards(player_room, rng),
    )
