"""Terminal front end for Hunt the Wumpus.

``ConsoleHost`` stands in for the watch hardware by keeping the display
zones, indicators, LED and recent notes in memory and rendering them as one
text line. ``ConsoleApp`` reads one command per line and feeds the matching
events to a ``WumpusFace``.
"""

import sys
from typing import TextIO

from .config import Config
from .engine.melody import Note
from .engine.rng import make_rng
from .engine.state import LedColor
from .face import WumpusFace
from .host import IDLE_TICK_HZ, Event, Indicator, Zone
from .logging import get_logger

logger = get_logger(__name__)

HELP = """\
a  cycle            A  toggle Wumpus mode (stationary/active)
b  confirm          B  toggle sound
t [n]  advance n ticks (default 1); an empty line is one tick
?  this help        q  quit"""

BUTTONS: dict[str, Event] = {
    "a": Event.CYCLE,
    "A": Event.CYCLE_LONG,
    "b": Event.CONFIRM,
    "B": Event.CONFIRM_LONG,
}


class ConsoleHost:
    """In-memory device that renders itself as a line of text."""

    def __init__(self):
        self.zones: dict[Zone, str] = {zone: "" for zone in Zone}
        self.indicators: set[Indicator] = set()
        self.led: LedColor | None = None
        self.notes: list[Note] = []
        self.tick_hz = IDLE_TICK_HZ

    def request_tick_frequency(self, hz: int) -> None:
        self.tick_hz = hz

    def play_note(self, note: Note, duration_ms: int) -> None:
        self.notes.append(note)

    def stop_sound(self) -> None:
        self.notes.clear()

    def set_indicator(self, indicator: Indicator) -> None:
        self.indicators.add(indicator)

    def clear_indicator(self, indicator: Indicator) -> None:
        self.indicators.discard(indicator)

    def display_text(self, zone: Zone, text: str) -> None:
        self.zones[zone] = text

    def set_led(self, color: LedColor) -> None:
        self.led = color

    def led_off(self) -> None:
        self.led = None

    def render(self) -> str:
        """Draw the display and clear the notes played since last time."""
        z = self.zones
        colon = ":" if Indicator.COLON in self.indicators else " "
        line = (
            f"{z[Zone.TOP]:<5} {z[Zone.TOP_RIGHT]:>2} | "
            f"{z[Zone.HOURS]:<2}{colon}{z[Zone.MINUTES]:<2} {z[Zone.SECONDS]:<2} |"
        )
        if Indicator.WUMPUS_MODE in self.indicators:
            line += " LAP"
        if Indicator.SOUND in self.indicators:
            line += " BELL"
        if self.led is not None:
            line += f" LED:{self.led.value}"
        if self.notes:
            line += " notes: " + " ".join(note.value for note in self.notes)
            self.notes.clear()
        return line


class ConsoleApp:
    """Line-driven game loop."""

    def __init__(
        self,
        face: WumpusFace,
        host: ConsoleHost,
        config: Config,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ):
        self.face = face
        self.host = host
        self.config = config
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout

    def _write(self, text: str) -> None:
        self.stdout.write(text + "\n")
        self.stdout.flush()

    def _tick(self, count: int = 1) -> None:
        for _ in range(count):
            self.face.loop(Event.TICK)

    def _drain(self) -> None:
        """Tick through melodies, LED flashes and bat flights."""
        for _ in range(self.config.max_drain_ticks):
            if not self.face.is_busy:
                return
            self.face.loop(Event.TICK)
        logger.warning("drain_limit_reached", ticks=self.config.max_drain_ticks)

    def handle(self, command: str) -> str:
        """Execute one command line and return the text to show."""
        if command in BUTTONS:
            self.face.loop(BUTTONS[command])
            self._drain()
            return self.host.render()
        if command == "?":
            return HELP

        words = command.split()
        if not words or words[0] == "t":
            try:
                count = int(words[1]) if len(words) > 1 else 1
            except ValueError:
                return f"Not a tick count: {words[1]!r}"
            self._tick(count)
            return self.host.render()

        return f"Unknown command {command!r}. Type ? for help."

    def run(self) -> None:
        """Play until ``q`` or end of input."""
        self.face.setup()
        self.face.activate()
        self.face.loop(Event.ACTIVATE)
        self._drain()
        self._write(self.host.render())

        for line in self.stdin:
            command = line.strip()
            if command == "q":
                break
            self._write(self.handle(command))

        self.face.resign()
        logger.info("application_stopped")


def create_app(
    config: Config | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> ConsoleApp:
    """Create a console game wired to a fresh face and host."""
    config = config or Config.from_env()
    host = ConsoleHost()
    face = WumpusFace(host, make_rng(config.seed))
    return ConsoleApp(face, host, config, stdin=stdin, stdout=stdout)
