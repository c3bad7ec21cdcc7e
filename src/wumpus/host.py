"""What the game needs from the device it runs on."""

from enum import Enum
from typing import Protocol

from .engine.melody import Note
from .engine.state import LedColor


class Zone(Enum):
    """Named text areas of the display."""

    TOP = "top"
    TOP_RIGHT = "top_right"
    HOURS = "hours"
    MINUTES = "minutes"
    SECONDS = "seconds"


class Indicator(Enum):
    WUMPUS_MODE = "lap"
    SOUND = "bell"
    COLON = "colon"


class Event(Enum):
    """Events delivered to ``WumpusFace.loop``."""

    ACTIVATE = "activate"
    TICK = "tick"
    CYCLE = "cycle"
    CYCLE_LONG = "cycle_long"
    CONFIRM = "confirm"
    CONFIRM_LONG = "confirm_long"


IDLE_TICK_HZ = 4
MELODY_TICK_HZ = 8


class Host(Protocol):
    """Display, buzzer, LED and scheduler of the device."""

    def request_tick_frequency(self, hz: int) -> None: ...

    def play_note(self, note: Note, duration_ms: int) -> None: ...

    def stop_sound(self) -> None: ...

    def set_indicator(self, indicator: Indicator) -> None: ...

    def clear_indicator(self, indicator: Indicator) -> None: ...

    def display_text(self, zone: Zone, text: str) -> None: ...

    def set_led(self, color: LedColor) -> None: ...

    def led_off(self) -> None: ...
