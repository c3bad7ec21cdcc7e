"""The fixed cave layout.

Twenty rooms laid out as the vertices of a dodecahedron. Each room connects
to exactly three others and every tunnel runs both ways. The map is shared
by every game and never changes.
"""

ROOM_COUNT = 20
NEIGHBOR_COUNT = 3

CAVE_MAP: tuple[tuple[int, int, int], ...] = (
    (1, 4, 7),
    (0, 2, 9),
    (1, 3, 11),
    (2, 4, 13),
    (0, 3, 5),
    (4, 6, 14),
    (5, 7, 16),
    (0, 6, 8),
    (7, 9, 17),
    (1, 8, 10),
    (9, 11, 18),
    (2, 10, 12),
    (11, 13, 19),
    (3, 12, 14),
    (5, 13, 15),
    (14, 16, 19),
    (6, 15, 17),
    (8, 16, 18),
    (10, 17, 19),
    (12, 15, 18),
)


def neighbors(room: int) -> tuple[int, int, int]:
    """Return the three rooms connected to ``room``."""
    if not 0 <= room < ROOM_COUNT:
        raise ValueError(f"room {room} is outside the cave")
    return CAVE_MAP[room]


def is_connected(room: int, other: int) -> bool:
    """True when a tunnel leads directly from ``room`` to ``other``."""
    found = False
    for neighbor in neighbors(room):
        if neighbor == other:
            found = True
            break
    return found
