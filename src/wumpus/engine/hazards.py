"""Player movement, bat transport and the Wumpus's wandering.

These functions report what happened and leave the consequences to the
input state machine. In particular, anything that moves the Wumpus may drop
it on the player. Callers must check ``wumpus_on_player`` afterwards.
"""

from .cave import NEIGHBOR_COUNT, ROOM_COUNT, neighbors
from .rng import RandomSource
from .state import (
    TRANSPORT_TICKS,
    WUMPUS_MOVE_THRESHOLD,
    GameState,
    Hazard,
    Phase,
)


def resolve_move(state: GameState, neighbor_index: int | None) -> Hazard:
    """Move the player through the chosen tunnel and return what is there.

    ``None`` means no tunnel was chosen: the player stays and nothing happens.
    """
    if neighbor_index is None:
        return Hazard.NONE
    state.player_room = neighbors(state.player_room)[neighbor_index]
    return state.hazards[state.player_room]


def find_safe_room(hazards: list[Hazard], rng: RandomSource) -> int:
    """Pick a random room holding neither the Wumpus nor a pit."""
    while True:
        room = rng.randrange(ROOM_COUNT)
        if hazards[room] not in (Hazard.WUMPUS, Hazard.PITFALL):
            return room


def arm_transport(state: GameState, rng: RandomSource) -> None:
    """Have a bat grab the player; the drop happens on a later tick."""
    state.phase = Phase.BAT_TRANSPORT
    state.transport_timer = TRANSPORT_TICKS
    state.transport_destination = find_safe_room(state.hazards, rng)


def wumpus_flee(state: GameState, rng: RandomSource) -> bool:
    """Move the Wumpus to a random neighboring room.

    Whatever occupied the new room is overwritten. Returns False only if
    there is no Wumpus in the cave.
    """
    room = state.wumpus_room
    if room is None:
        return False
    state.hazards[room] = Hazard.NONE
    state.hazards[neighbors(room)[rng.randrange(NEIGHBOR_COUNT)]] = Hazard.WUMPUS
    return True


def wumpus_move(state: GameState, rng: RandomSource) -> bool:
    """Active-mode wandering: flee with a 24% chance."""
    if rng.randrange(100) > WUMPUS_MOVE_THRESHOLD:
        return wumpus_flee(state, rng)
    return False


def wumpus_on_player(state: GameState) -> bool:
    return state.hazards[state.player_room] is Hazard.WUMPUS


def adjacent_hazards(state: GameState) -> list[Hazard]:
    """Hazards in the player's neighboring rooms, in tunnel order."""
    return [
        state.hazards[room]
        for room in neighbors(state.player_room)
        if state.hazards[room] is not Hazard.NONE
    ]


def next_warning(state: GameState) -> Hazard:
    """Return the next adjacent hazard to warn about and advance the cursor.

    Successive calls cycle through the nearby hazards. ``Hazard.NONE`` means
    the neighborhood is clear.
    """
    nearby = adjacent_hazards(state)
    if not nearby:
        return Hazard.NONE
    index = state.hazard_cursor % len(nearby)
    state.hazard_cursor = (index + 1) % len(nearby)
    return nearby[index]
