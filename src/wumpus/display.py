"""Text shown in each display zone.

The functions here choose which string goes into which zone. Segment layout
is the host's business. Rooms are numbered 0-19 internally and shown 1-20.
"""

from .engine.cave import neighbors
from .engine.state import GameState, Hazard, Phase
from .host import Host, Indicator, Zone

TITLE = "WMPUS"
BLANK = "  "

HAZARD_CODES: dict[Hazard, str] = {
    Hazard.NONE: BLANK,
    Hazard.WUMPUS: "UU",
    Hazard.BAT: "Bt",
    Hazard.PITFALL: "Pt",
    Hazard.ARROW: "Ar",
}


def room_label(room: int | None) -> str:
    """Two-character, 1-based room number, blank for ``None``."""
    if room is None:
        return BLANK
    return f"{room + 1:2d}"


def render_title(host: Host) -> None:
    host.display_text(Zone.TOP, TITLE)


def render_room(host: Host, room: int | None) -> None:
    host.display_text(Zone.TOP_RIGHT, room_label(room))


def render_selected_room(state: GameState, host: Host) -> None:
    """Show the room the player is about to enter, blinking."""
    if not state.digits_visible:
        render_room(host, None)
    elif state.selected_neighbor is None:
        render_room(host, state.player_room)
    else:
        render_room(host, neighbors(state.player_room)[state.selected_neighbor])


def _split(text: str) -> tuple[str, str]:
    text = f"{text:<4}"
    return text[:2], text[2:4]


def action_text(state: GameState) -> tuple[str, str] | None:
    """Hours and minutes text for the current phase.

    ``None`` means the phase draws those zones itself, or not at all.
    """
    match state.phase:
        case Phase.SHOOT:
            return "SH", "OT"
        case Phase.GO:
            return "GO", BLANK
        case Phase.SHOOT_DISTANCE:
            return _split(f"rn{state.shot_length}")
        case Phase.SHOOT_PATH:
            return _split(f"r{state.shots_picked + 1}{state.shot_candidate + 1}")
        case Phase.BAT_TRANSPORT:
            return "BA", "T "
    return None


def render_action(state: GameState, host: Host) -> None:
    """Draw the current phase in the middle of the display."""
    shot_phase = state.phase in (Phase.SHOOT_DISTANCE, Phase.SHOOT_PATH)
    host.clear_indicator(Indicator.COLON)

    if not state.action_visible:
        if shot_phase:
            host.set_indicator(Indicator.COLON)
            host.display_text(Zone.MINUTES, BLANK)
        elif state.phase in (Phase.SHOOT, Phase.GO):
            host.display_text(Zone.HOURS, BLANK)
            host.display_text(Zone.MINUTES, BLANK)
        return

    if state.phase is Phase.CHOOSING_ROOM:
        render_selected_room(state, host)
        return
    if state.phase in (Phase.SHOOT, Phase.GO) or shot_phase:
        render_room(host, state.player_room)
    if shot_phase:
        host.set_indicator(Indicator.COLON)

    text = action_text(state)
    if text is not None:
        hours, minutes = text
        host.display_text(Zone.HOURS, hours)
        host.display_text(Zone.MINUTES, minutes)


def render_hazard(host: Host, hazard: Hazard) -> None:
    host.display_text(Zone.SECONDS, HAZARD_CODES[hazard])


def render_death(host: Host, cause: Hazard) -> None:
    render_hazard(host, cause)
    host.display_text(Zone.HOURS, "DI")
    host.display_text(Zone.MINUTES, "ED")


def render_won(host: Host) -> None:
    host.display_text(Zone.HOURS, "Gr")
    host.display_text(Zone.MINUTES, "ea")
    host.display_text(Zone.SECONDS, "t ")


def render_indicators(state: GameState, host: Host) -> None:
    """Mirror the two mode flags on their indicators."""
    for indicator, on in (
        (Indicator.WUMPUS_MODE, state.wumpus_active),
        (Indicator.SOUND, state.sound_on),
    ):
        if on:
            host.set_indicator(indicator)
        else:
            host.clear_indicator(indicator)
