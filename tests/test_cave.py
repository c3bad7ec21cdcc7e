"""Tests for the cave map."""

import pytest

from wumpus.engine.cave import ROOM_COUNT, is_connected, neighbors


def test_every_room_has_three_distinct_neighbors():
    """No room repeats a tunnel or leads to itself."""
    for room in range(ROOM_COUNT):
        rooms = neighbors(room)
        assert len(set(rooms)) == 3
        assert room not in rooms
        assert all(0 <= r < ROOM_COUNT for r in rooms)


def test_tunnels_are_symmetric():
    """Every tunnel can be walked back."""
    for room in range(ROOM_COUNT):
        for neighbor in neighbors(room):
            assert room in neighbors(neighbor)


def test_is_connected():
    assert is_connected(0, 7)
    assert is_connected(7, 0)
    assert not is_connected(0, 2)


def test_room_outside_cave():
    """Out-of-range rooms are a programming error."""
    with pytest.raises(ValueError):
        neighbors(ROOM_COUNT)
    with pytest.raises(ValueError):
        neighbors(-1)
