"""The game as a watch face: engine state wired to a host device."""

from .display import (
    render_action,
    render_death,
    render_hazard,
    render_indicators,
    render_selected_room,
    render_title,
    render_won,
)
from .engine.commands import confirm, cycle, toggle_sound, toggle_wumpus_mode
from .engine.generator import new_game_state
from .engine.hazards import next_warning
from .engine.melody import (
    BEEP_DURATION_MS,
    NOTE_DURATION_MS,
    SOUND_ON_BEEP,
    WUMPUS_MODE_BEEP,
    Melody,
)
from .engine.rng import RandomSource, make_rng
from .engine.sequencer import (
    FINALE_COLORS,
    TickKind,
    advance,
    arm_flash,
    request_melody,
    toggle_blink,
)
from .engine.state import GameState, Hazard, Phase
from .host import IDLE_TICK_HZ, MELODY_TICK_HZ, Event, Host
from .logging import get_logger

logger = get_logger(__name__)


class WumpusFace:
    """Owns one game at a time and translates events into host output."""

    def __init__(self, host: Host, rng: RandomSource | None = None):
        self.host = host
        self.rng = rng if rng is not None else make_rng()
        self.state: GameState | None = None

    # --- Lifecycle hooks ---

    def setup(self) -> None:
        """One-time setup; the game itself starts on activation."""
        self.state = None

    def activate(self) -> None:
        """Start a fresh game and play the opening tune."""
        self.host.request_tick_frequency(IDLE_TICK_HZ)
        self._new_game()
        self._play(Melody.STARTUP)

    def loop(self, event: Event) -> bool:
        """Handle one event.

        Returns False while a melody or LED flash is running, so the host
        may share the display; True otherwise.
        """
        match event:
            case Event.ACTIVATE:
                render_title(self.host)
                render_action(self.state, self.host)
                self._warn()
            case Event.TICK:
                self._on_tick()
            case Event.CYCLE:
                self._on_cycle()
            case Event.CYCLE_LONG:
                self._on_cycle_long()
            case Event.CONFIRM:
                self._on_confirm()
            case Event.CONFIRM_LONG:
                self._on_confirm_long()
        return self.state.led_countdown == 0 and self.state.melody is None

    def resign(self) -> None:
        """Silence the buzzer and switch off the LED."""
        self.host.led_off()
        self.host.stop_sound()

    # --- Helpers ---

    @property
    def is_busy(self) -> bool:
        return self.state is not None and self.state.is_busy

    def _new_game(self) -> None:
        self.state = new_game_state(self.rng)
        render_indicators(self.state, self.host)
        logger.info(
            "game_started",
            player_room=self.state.player_room,
            wumpus_room=self.state.wumpus_room,
        )

    def _play(self, melody: Melody) -> bool:
        if not request_melody(self.state, melody):
            return False
        self.host.request_tick_frequency(MELODY_TICK_HZ)
        return True

    def _warn(self) -> None:
        """Show the next nearby hazard; bats make themselves heard."""
        hazard = next_warning(self.state)
        render_hazard(self.host, hazard)
        if hazard is Hazard.BAT:
            self._play(Melody.BATS)

    def _finish(self, melody: Melody) -> None:
        """Start the end-of-game fanfare, or go straight to the LED flash."""
        if not self._play(melody):
            color = FINALE_COLORS[melody]
            arm_flash(self.state, color)
            self.host.set_led(color)

    # --- Event handlers ---

    def _on_tick(self) -> None:
        state = self.state
        report = advance(state, self.rng)
        match report.kind:
            case TickKind.NOTE:
                if state.sound_on:
                    self.host.play_note(report.note, NOTE_DURATION_MS)
            case TickKind.MELODY_FINISHED:
                self.host.request_tick_frequency(IDLE_TICK_HZ)
                if report.led is not None:
                    self.host.set_led(report.led)
            case TickKind.RESTART:
                self.host.led_off()
                logger.info("game_restarting")
                self._new_game()
                render_action(self.state, self.host)
                self._warn()
            case TickKind.REARMED:
                logger.info(
                    "bat_transport_armed",
                    room=state.player_room,
                    destination=state.transport_destination,
                )
                self._play(Melody.BATS)
            case TickKind.LANDED:
                logger.info("player_landed", room=state.player_room)
                render_action(state, self.host)
                self._warn()
            case TickKind.IDLE:
                if state.phase is Phase.CHOOSING_ROOM:
                    render_selected_room(state, self.host)
                elif not state.phase.is_terminal:
                    render_action(state, self.host)
                toggle_blink(state)
                if not state.phase.is_terminal:
                    self._warn()

    def _on_cycle(self) -> None:
        if not self.state.accepts_buttons:
            return
        cycle(self.state)
        render_action(self.state, self.host)

    def _on_confirm(self) -> None:
        state = self.state
        if not state.accepts_buttons:
            return
        previous = state.phase
        phase = confirm(state, self.rng)

        if previous is Phase.SHOOT_PATH and phase is not Phase.SHOOT_PATH:
            logger.info(
                "arrow_fired",
                path=list(state.shot_path),
                arrows=state.arrows,
                result=phase.value,
            )

        if phase is Phase.DIED:
            logger.info("player_died", cause=state.death_cause.value)
            render_death(self.host, state.death_cause)
            self._finish(Melody.LOSE)
        elif phase is Phase.WON:
            logger.info("wumpus_killed", arrows=state.arrows)
            render_hazard(self.host, Hazard.NONE)
            render_won(self.host)
            self._finish(Melody.WIN)
        else:
            if previous is Phase.CHOOSING_ROOM:
                logger.info("player_moved", room=state.player_room)
            render_action(state, self.host)
            if phase is Phase.BAT_TRANSPORT:
                logger.info(
                    "bat_transport_armed",
                    room=state.player_room,
                    destination=state.transport_destination,
                )
                self._play(Melody.BATS)
            elif previous is Phase.CHOOSING_ROOM:
                self._warn()

    def _on_cycle_long(self) -> None:
        if self.state.phase.is_terminal:
            return
        active = toggle_wumpus_mode(self.state)
        render_indicators(self.state, self.host)
        logger.info("wumpus_mode_toggled", active=active)
        if self.state.sound_on:
            self.host.play_note(WUMPUS_MODE_BEEP, BEEP_DURATION_MS)

    def _on_confirm_long(self) -> None:
        if self.state.phase.is_terminal:
            return
        sound_on = toggle_sound(self.state)
        render_indicators(self.state, self.host)
        logger.info("sound_toggled", sound_on=sound_on)
        if sound_on:
            self.host.play_note(SOUND_ON_BEEP, BEEP_DURATION_MS)
