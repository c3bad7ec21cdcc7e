"""Tests for the terminal front end."""

import io

from conftest import LAYOUT_DRAWS, ScriptedRandom

from wumpus.app import HELP, ConsoleApp, ConsoleHost, create_app
from wumpus.config import Config
from wumpus.engine.melody import Note
from wumpus.engine.state import LedColor, Phase
from wumpus.face import WumpusFace
from wumpus.host import Indicator, Zone


def _app(commands: str, draws: list[int] | None = None) -> tuple[ConsoleApp, io.StringIO]:
    host = ConsoleHost()
    face = WumpusFace(host, ScriptedRandom(LAYOUT_DRAWS + (draws or [])))
    stdout = io.StringIO()
    app = ConsoleApp(face, host, Config(), stdin=io.StringIO(commands), stdout=stdout)
    return app, stdout


def test_console_host_render():
    host = ConsoleHost()
    host.display_text(Zone.TOP, "WMPUS")
    host.display_text(Zone.TOP_RIGHT, " 7")
    host.display_text(Zone.HOURS, "rn")
    host.display_text(Zone.MINUTES, "2 ")
    host.display_text(Zone.SECONDS, "Bt")
    host.set_indicator(Indicator.COLON)
    host.set_indicator(Indicator.SOUND)
    host.set_led(LedColor.RED)
    host.play_note(Note.C4, 120)

    assert host.render() == "WMPUS  7 | rn:2  Bt | BELL LED:red notes: C4"
    assert host.notes == []


def test_startup_plays_tune():
    """The first line shows the title and the startup notes."""
    app, stdout = _app("q\n")
    app.run()
    first = stdout.getvalue().splitlines()[0]
    assert first.startswith("WMPUS  1 | SH OT Bt |")
    assert "notes: A3 B3 C4 D4 E4 D4 C4" in first


def test_buttons_drive_the_game():
    app, stdout = _app("b\nb\n")
    app.run()
    lines = stdout.getvalue().splitlines()
    assert "rn:1" in lines[1]
    assert "r1:2" in lines[2]
    assert app.face.state.phase is Phase.SHOOT_PATH


def test_bat_flight_runs_to_completion():
    """After a button press the app ticks until the bat drops the player."""
    app, _ = _app("a\nb\na\nb\n", draws=[12])
    app.run()
    assert app.face.state.phase is Phase.GO
    assert app.face.state.player_room == 12


def test_help_and_unknown_commands():
    app, stdout = _app("?\nxyzzy\nt many\n")
    app.run()
    output = stdout.getvalue()
    assert HELP in output
    assert "Unknown command 'xyzzy'" in output
    assert "Not a tick count: 'many'" in output


def test_ticks_command():
    app, _ = _app("")
    app.face.setup()
    app.face.activate()
    step = app.face.state.melody_step
    app.handle("t 3")
    assert app.face.state.melody_step == step + 3


def test_create_app_uses_seed():
    """The same seed reproduces the same cave."""
    first = create_app(Config(seed=7), stdin=io.StringIO(""), stdout=io.StringIO())
    second = create_app(Config(seed=7), stdin=io.StringIO(""), stdout=io.StringIO())
    first.run()
    second.run()
    assert first.face.state.hazards == second.face.state.hazards
    assert first.face.state.player_room == second.face.state.player_room
