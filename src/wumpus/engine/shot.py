"""Arrow flight.

The arrow follows the composed path one room at a time. A room that has no
tunnel from the previous one makes a crooked arrow. The arrow then flies
into a random neighbor of the previous room instead. This may be the
archer's own room.
"""

from .cave import NEIGHBOR_COUNT, is_connected, neighbors
from .rng import RandomSource
from .state import MAX_SHOT_LENGTH, GameState, Hazard, Phase


def redirect(previous: int, rng: RandomSource) -> int:
    """Room a crooked arrow veers into after leaving ``previous``."""
    return neighbors(previous)[rng.randrange(NEIGHBOR_COUNT)]


def fire(state: GameState, rng: RandomSource) -> Phase:
    """Loose an arrow along ``state.shot_path``.

    Returns ``Phase.WON`` if the Wumpus is hit, ``Phase.DIED`` if the player
    is out of arrows or shoots themself, otherwise ``Phase.SHOOT`` for a miss.
    Bats in the path are killed. Redirected rooms are written back into the
    path.
    """
    if not 1 <= state.shot_length <= MAX_SHOT_LENGTH:
        raise ValueError(f"shot length {state.shot_length} is not 1-{MAX_SHOT_LENGTH}")
    if len(state.shot_path) != state.shot_length:
        raise ValueError(
            f"shot path has {len(state.shot_path)} rooms, "
            f"expected {state.shot_length}"
        )

    state.arrows -= 1
    if state.arrows < 0:
        state.death_cause = Hazard.ARROW
        return Phase.DIED

    path = state.shot_path
    for i in range(len(path)):
        if i > 0 and not is_connected(path[i - 1], path[i]):
            path[i] = redirect(path[i - 1], rng)

        room = path[i]
        if room == state.player_room:
            state.death_cause = Hazard.ARROW
            return Phase.DIED

        hazard = state.hazards[room]
        if hazard is Hazard.BAT:
            state.hazards[room] = Hazard.NONE
        elif hazard is Hazard.WUMPUS:
            return Phase.WON

    return Phase.SHOOT
