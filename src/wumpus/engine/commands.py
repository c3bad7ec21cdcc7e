"""Button handling: the input state machine.

``cycle(state)`` and ``confirm(state, rng)`` are the entry points for the
two short presses. Each looks up a handler for the current phase. Handlers
mutate state in place, and ``confirm`` returns the phase the game ended up
in. Phases with no handler ignore the button.
"""

from collections.abc import Callable

from .cave import NEIGHBOR_COUNT, ROOM_COUNT, neighbors
from .hazards import (
    arm_transport,
    resolve_move,
    wumpus_flee,
    wumpus_move,
    wumpus_on_player,
)
from .rng import RandomSource
from .shot import fire
from .state import MAX_SHOT_LENGTH, GameState, Hazard, Phase

# --- Cycle (button A) ---


def _cycle_action(state: GameState) -> None:
    state.phase = Phase.GO if state.phase is Phase.SHOOT else Phase.SHOOT
    state.action_visible = True


def _cycle_distance(state: GameState) -> None:
    state.shot_length = state.shot_length % MAX_SHOT_LENGTH + 1
    state.action_visible = True


def _cycle_path_room(state: GameState) -> None:
    state.shot_candidate = (state.shot_candidate + 1) % ROOM_COUNT
    state.action_visible = True


def _cycle_neighbor(state: GameState) -> None:
    """Step through the three tunnels and then "stay put"."""
    if state.selected_neighbor is None:
        state.selected_neighbor = 0
    elif state.selected_neighbor + 1 < NEIGHBOR_COUNT:
        state.selected_neighbor += 1
    else:
        state.selected_neighbor = None


_CYCLE_HANDLERS: dict[Phase, Callable[[GameState], None]] = {
    Phase.SHOOT: _cycle_action,
    Phase.GO: _cycle_action,
    Phase.SHOOT_DISTANCE: _cycle_distance,
    Phase.SHOOT_PATH: _cycle_path_room,
    Phase.CHOOSING_ROOM: _cycle_neighbor,
}


def cycle(state: GameState) -> None:
    """Advance the current selector without committing anything."""
    if not state.accepts_buttons:
        return
    handler = _CYCLE_HANDLERS.get(state.phase)
    if handler:
        handler(state)


# --- Confirm (button B) ---


def _confirm_go(state: GameState, rng: RandomSource) -> Phase:
    state.selected_neighbor = None
    state.digits_visible = False
    state.action_visible = True
    return Phase.CHOOSING_ROOM


def _confirm_shoot(state: GameState, rng: RandomSource) -> Phase:
    state.shot_length = 1
    state.action_visible = True
    return Phase.SHOOT_DISTANCE


def _confirm_distance(state: GameState, rng: RandomSource) -> Phase:
    state.shot_path = []
    state.shot_candidate = neighbors(state.player_room)[0]
    state.action_visible = True
    return Phase.SHOOT_PATH


def _confirm_path_room(state: GameState, rng: RandomSource) -> Phase:
    """Add the candidate to the path and fire once the path is complete."""
    state.shot_path.append(state.shot_candidate)
    state.shot_candidate = 0
    state.action_visible = True
    if state.shots_picked < state.shot_length:
        return Phase.SHOOT_PATH

    result = fire(state, rng)
    if result is Phase.SHOOT and not state.wumpus_active:
        # Stationary Wumpus is startled by a miss
        wumpus_flee(state, rng)
        if wumpus_on_player(state):
            state.death_cause = Hazard.WUMPUS
            return Phase.DIED
    return result


def _confirm_room(state: GameState, rng: RandomSource) -> Phase:
    hazard = resolve_move(state, state.selected_neighbor)
    if hazard is Hazard.BAT:
        arm_transport(state, rng)
        return Phase.BAT_TRANSPORT
    if hazard is Hazard.NONE:
        state.digits_visible = True
        return Phase.GO
    state.death_cause = hazard
    return Phase.DIED


_CONFIRM_HANDLERS: dict[Phase, Callable[[GameState, RandomSource], Phase]] = {
    Phase.GO: _confirm_go,
    Phase.SHOOT: _confirm_shoot,
    Phase.SHOOT_DISTANCE: _confirm_distance,
    Phase.SHOOT_PATH: _confirm_path_room,
    Phase.CHOOSING_ROOM: _confirm_room,
}


def confirm(state: GameState, rng: RandomSource) -> Phase:
    """Commit the current selection and return the resulting phase."""
    if not state.accepts_buttons:
        return state.phase
    handler = _CONFIRM_HANDLERS.get(state.phase)
    if handler is None:
        return state.phase

    state.phase = handler(state, rng)

    if state.wumpus_active and not state.phase.is_terminal:
        if wumpus_move(state, rng) and wumpus_on_player(state):
            state.death_cause = Hazard.WUMPUS
            state.phase = Phase.DIED
    return state.phase


# --- Long presses ---


def toggle_wumpus_mode(state: GameState) -> bool:
    """Switch between a stationary and an active Wumpus; returns the new mode."""
    if not state.phase.is_terminal:
        state.wumpus_active = not state.wumpus_active
    return state.wumpus_active


def toggle_sound(state: GameState) -> bool:
    if not state.phase.is_terminal:
        state.sound_on = not state.sound_on
    return state.sound_on
