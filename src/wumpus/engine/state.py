"""Mutable per-game state.

One ``GameState`` lives for exactly one game. It is replaced wholesale when
a game ends and a new one starts, never patched back to its defaults.
"""

from dataclasses import dataclass, field
from enum import Enum

from .melody import Melody

# Hazard counts
NUM_PITS = 2
NUM_BATS = 2

NUM_ARROWS = 5
MAX_SHOT_LENGTH = 5

# Active Wumpus moves when a draw in [0, 100) exceeds this (24% chance)
WUMPUS_MOVE_THRESHOLD = 75

# Countdowns, in ticks
TRANSPORT_TICKS = 4
LED_FLASH_TICKS = 3


class Hazard(Enum):
    """What occupies a room. ARROW only ever appears as a cause of death."""

    NONE = "none"
    WUMPUS = "wumpus"
    BAT = "bat"
    PITFALL = "pitfall"
    ARROW = "arrow"


class Phase(Enum):
    """Where the player is in the button-driven UI."""

    SHOOT = "shoot"
    SHOOT_DISTANCE = "shoot_distance"
    SHOOT_PATH = "shoot_path"
    GO = "go"
    CHOOSING_ROOM = "choosing_room"
    BAT_TRANSPORT = "bat_transport"
    DIED = "died"
    WON = "won"

    @property
    def is_terminal(self) -> bool:
        return self in (Phase.DIED, Phase.WON)


class LedColor(Enum):
    GREEN = "green"
    RED = "red"


@dataclass
class GameState:
    """Everything that changes during one game."""

    player_room: int
    # One entry per room, indexed by room number
    hazards: list[Hazard]
    arrows: int = NUM_ARROWS

    phase: Phase = Phase.SHOOT
    # Neighbor index 0-2 while choosing a room; None means stay put
    selected_neighbor: int | None = None
    death_cause: Hazard | None = None

    # Shot composition
    shot_length: int = 0
    shot_candidate: int = 0
    shot_path: list[int] = field(default_factory=list)

    # Bat transport, valid only in Phase.BAT_TRANSPORT
    transport_timer: int = 0
    transport_destination: int = 0

    # Feedback sequences
    melody: Melody | None = None
    melody_step: int = 0
    led_countdown: int = 0
    led_color: LedColor | None = None

    # Mode flags
    wumpus_active: bool = False
    sound_on: bool = True

    # Blinking and the adjacent-hazard warning cycle
    digits_visible: bool = True
    action_visible: bool = True
    hazard_cursor: int = 0

    @property
    def shots_picked(self) -> int:
        return len(self.shot_path)

    @property
    def wumpus_room(self) -> int | None:
        for room, hazard in enumerate(self.hazards):
            if hazard is Hazard.WUMPUS:
                return room
        return None

    @property
    def is_busy(self) -> bool:
        """True while a melody, LED flash or bat transport is running."""
        return (
            self.melody is not None
            or self.led_countdown > 0
            or self.phase is Phase.BAT_TRANSPORT
        )

    @property
    def accepts_buttons(self) -> bool:
        return not self.phase.is_terminal and not self.is_busy
