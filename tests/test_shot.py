"""Tests for arrow flight."""

import pytest
from conftest import ScriptedRandom

from wumpus.engine.shot import fire
from wumpus.engine.state import NUM_ARROWS, GameState, Hazard, Phase


def _aim(state: GameState, *rooms: int) -> None:
    state.shot_length = len(rooms)
    state.shot_path = list(rooms)


def test_hit_wumpus(state: GameState):
    """An arrow into the Wumpus's room wins."""
    _aim(state, 7)
    assert fire(state, ScriptedRandom()) is Phase.WON
    assert state.arrows == NUM_ARROWS - 1


def test_bat_is_killed(state: GameState):
    """Bats in the way die; the shot still counts as a miss."""
    _aim(state, 1)
    assert fire(state, ScriptedRandom()) is Phase.SHOOT
    assert state.hazards[1] is Hazard.NONE


def test_arrow_through_two_bats(state: GameState):
    _aim(state, 1, 9)
    assert fire(state, ScriptedRandom()) is Phase.SHOOT
    assert state.hazards[1] is Hazard.NONE
    assert state.hazards[9] is Hazard.NONE


def test_pit_has_no_effect(state: GameState):
    _aim(state, 4)
    assert fire(state, ScriptedRandom()) is Phase.SHOOT
    assert state.hazards[4] is Hazard.PITFALL


def test_shoot_own_room(state: GameState):
    """Aiming at your own room is fatal."""
    _aim(state, 0)
    assert fire(state, ScriptedRandom()) is Phase.DIED
    assert state.death_cause is Hazard.ARROW


def test_connected_path_uses_no_randomness(state: GameState):
    rng = ScriptedRandom()
    _aim(state, 1, 2, 3)
    assert fire(state, rng) is Phase.SHOOT
    assert rng.calls == []
    assert state.shot_path == [1, 2, 3]


def test_crooked_arrow_is_redirected(state: GameState):
    """A room with no tunnel from the previous one is replaced at random."""
    _aim(state, 1, 7)  # room 1 leads to 0, 2 and 9
    assert fire(state, ScriptedRandom([2])) is Phase.SHOOT
    assert state.shot_path == [1, 9]
    assert state.hazards[9] is Hazard.NONE


def test_crooked_arrow_can_kill_archer(state: GameState):
    """The redirected room is checked like any other."""
    _aim(state, 1, 7)
    assert fire(state, ScriptedRandom([0])) is Phase.DIED
    assert state.shot_path == [1, 0]
    assert state.death_cause is Hazard.ARROW


def test_crooked_arrow_can_find_wumpus(state: GameState):
    state.player_room = 10
    _aim(state, 8, 2)  # room 8 leads to 7, 9 and 17
    assert fire(state, ScriptedRandom([0])) is Phase.WON


def test_flight_stops_at_wumpus(state: GameState):
    """Later rooms are never reached once the Wumpus is hit."""
    _aim(state, 7, 0)
    assert fire(state, ScriptedRandom()) is Phase.WON


def test_out_of_arrows(state: GameState):
    """Five shots are allowed; the sixth attempt is fatal before flight."""
    for _ in range(NUM_ARROWS):
        _aim(state, 4)
        assert fire(state, ScriptedRandom()) is Phase.SHOOT

    _aim(state, 7)
    assert fire(state, ScriptedRandom()) is Phase.DIED
    assert state.death_cause is Hazard.ARROW
    assert state.hazards[7] is Hazard.WUMPUS


def test_path_must_match_declared_length(state: GameState):
    state.shot_length = 2
    state.shot_path = [1]
    with pytest.raises(ValueError):
        fire(state, ScriptedRandom())


@pytest.mark.parametrize("rooms", [[], [1, 2, 3, 11, 10, 9]])
def test_shot_length_out_of_range(state: GameState, rooms: list[int]):
    """Lengths outside 1-5 are refused without spending an arrow."""
    _aim(state, *rooms)
    with pytest.raises(ValueError):
        fire(state, ScriptedRandom())
    assert state.arrows == NUM_ARROWS
