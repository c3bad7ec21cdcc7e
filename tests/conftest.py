"""Shared test fixtures for Hunt the Wumpus."""

import random

import pytest

from wumpus.engine.melody import Note
from wumpus.engine.state import GameState, Hazard, LedColor
from wumpus.face import WumpusFace
from wumpus.host import IDLE_TICK_HZ, Indicator, Zone

# Player in room 0; its tunnels lead to a bat (1), a pit (4) and the Wumpus (7)
LAYOUT_DRAWS = [0, 4, 13, 1, 9, 7]


class ScriptedRandom:
    """Replays fixed draws, then falls back to a seeded generator."""

    def __init__(self, draws: list[int] | None = None, seed: int = 0):
        self.draws = list(draws or [])
        self.fallback = random.Random(seed)
        self.calls: list[int] = []

    def randrange(self, stop: int) -> int:
        self.calls.append(stop)
        if self.draws:
            value = self.draws.pop(0)
            assert 0 <= value < stop, f"scripted draw {value} not below {stop}"
            return value
        return self.fallback.randrange(stop)


class FakeHost:
    """Records everything the game asks of the device."""

    def __init__(self):
        self.zones: dict[Zone, str] = {zone: "" for zone in Zone}
        self.indicators: set[Indicator] = set()
        self.notes: list[tuple[Note, int]] = []
        self.led: LedColor | None = None
        self.led_events: list[LedColor | None] = []
        self.tick_rates: list[int] = []
        self.stopped = False

    @property
    def tick_hz(self) -> int:
        return self.tick_rates[-1] if self.tick_rates else IDLE_TICK_HZ

    def request_tick_frequency(self, hz: int) -> None:
        self.tick_rates.append(hz)

    def play_note(self, note: Note, duration_ms: int) -> None:
        self.notes.append((note, duration_ms))

    def stop_sound(self) -> None:
        self.stopped = True

    def set_indicator(self, indicator: Indicator) -> None:
        self.indicators.add(indicator)

    def clear_indicator(self, indicator: Indicator) -> None:
        self.indicators.discard(indicator)

    def display_text(self, zone: Zone, text: str) -> None:
        self.zones[zone] = text

    def set_led(self, color: LedColor) -> None:
        self.led = color
        self.led_events.append(color)

    def led_off(self) -> None:
        self.led = None
        self.led_events.append(None)


def layout_hazards() -> list[Hazard]:
    hazards = [Hazard.NONE] * 20
    hazards[4] = hazards[13] = Hazard.PITFALL
    hazards[1] = hazards[9] = Hazard.BAT
    hazards[7] = Hazard.WUMPUS
    return hazards


@pytest.fixture
def state() -> GameState:
    """Game in room 0 with the standard test layout."""
    return GameState(player_room=0, hazards=layout_hazards())


@pytest.fixture
def host() -> FakeHost:
    return FakeHost()


@pytest.fixture
def face(host: FakeHost) -> WumpusFace:
    """Face whose first game uses the standard test layout."""
    return WumpusFace(host, ScriptedRandom(LAYOUT_DRAWS))
