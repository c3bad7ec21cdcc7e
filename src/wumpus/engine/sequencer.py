"""Per-tick progress of the game's timed sequences.

Each tick does exactly one thing. The options, in priority order, are to
play the next melody note, count down the end-of-game LED flash, carry the
player along with a bat, or idle. ``advance`` performs the state change and
returns a ``TickReport`` for the presentation layer to act on.
"""

from dataclasses import dataclass
from enum import Enum

from .hazards import arm_transport
from .melody import Melody, Note, is_finished, note_at
from .rng import RandomSource
from .state import LED_FLASH_TICKS, GameState, Hazard, LedColor, Phase

# Melodies that end a game, and the LED flash that follows them
FINALE_COLORS: dict[Melody, LedColor] = {
    Melody.WIN: LedColor.GREEN,
    Melody.LOSE: LedColor.RED,
}


class TickKind(Enum):
    NOTE = "note"
    MELODY_FINISHED = "melody_finished"
    FLASH = "flash"
    RESTART = "restart"
    TRANSPORTING = "transporting"
    REARMED = "rearmed"
    LANDED = "landed"
    IDLE = "idle"


@dataclass(frozen=True)
class TickReport:
    kind: TickKind
    note: Note | None = None
    led: LedColor | None = None


def request_melody(state: GameState, melody: Melody) -> bool:
    """Start ``melody`` unless sound is off or another melody is playing.

    Melodies never queue or interrupt each other. Returns True if it started.
    """
    if not state.sound_on or state.melody is not None:
        return False
    state.melody = melody
    state.melody_step = 0
    return True


def arm_flash(state: GameState, color: LedColor) -> None:
    state.led_countdown = LED_FLASH_TICKS
    state.led_color = color


def toggle_blink(state: GameState) -> None:
    """Flip whichever UI element is currently blinking."""
    if state.phase is Phase.CHOOSING_ROOM:
        state.digits_visible = not state.digits_visible
    elif not state.phase.is_terminal:
        state.action_visible = not state.action_visible


def _advance_melody(state: GameState) -> TickReport:
    melody = state.melody
    if is_finished(melody, state.melody_step):
        state.melody = None
        state.melody_step = 0
        color = FINALE_COLORS.get(melody)
        if color is not None:
            arm_flash(state, color)
        return TickReport(TickKind.MELODY_FINISHED, led=color)

    note = note_at(melody, state.melody_step)
    state.melody_step += 1
    return TickReport(TickKind.NOTE, note=note)


def _advance_flash(state: GameState) -> TickReport:
    state.led_countdown -= 1
    if state.led_countdown == 0:
        state.led_color = None
        return TickReport(TickKind.RESTART)
    return TickReport(TickKind.FLASH, led=state.led_color)


def _advance_transport(state: GameState, rng: RandomSource) -> TickReport:
    if state.transport_timer > 0:
        state.transport_timer -= 1
        return TickReport(TickKind.TRANSPORTING)

    state.player_room = state.transport_destination
    if state.hazards[state.player_room] is Hazard.BAT:
        arm_transport(state, rng)
        return TickReport(TickKind.REARMED)
    state.phase = Phase.GO
    return TickReport(TickKind.LANDED)


def advance(state: GameState, rng: RandomSource) -> TickReport:
    """Run one scheduler tick.

    A ``RESTART`` report means the current game is over and the caller must
    replace the state with a new game.
    """
    if state.melody is not None:
        return _advance_melody(state)
    if state.led_countdown > 0:
        return _advance_flash(state)
    if state.phase is Phase.BAT_TRANSPORT:
        return _advance_transport(state, rng)
    return TickReport(TickKind.IDLE)
