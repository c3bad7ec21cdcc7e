"""Buzzer pitches and the game's melodies.

Each melody is a finite tuple of notes. Playback walks a step index from 0;
once the index reaches the melody's length the melody is finished.
"""

from enum import Enum


class Note(str, Enum):
    """Named buzzer pitch."""

    A3 = "A3"
    B3 = "B3"
    C4 = "C4"
    D4 = "D4"
    E4 = "E4"
    F4 = "F4"
    F4_SHARP = "F#4"
    G4 = "G4"
    G4_SHARP = "G#4"
    A4 = "A4"
    A4_SHARP = "A#4"
    B4 = "B4"
    C5 = "C5"
    E5 = "E5"
    G5 = "G5"
    C6 = "C6"
    B6 = "B6"
    C7 = "C7"


class Melody(Enum):
    STARTUP = "startup"
    WIN = "win"
    LOSE = "lose"
    BATS = "bats"


NOTE_DURATION_MS = 120
BEEP_DURATION_MS = 50

# Beeps confirming a long-press toggle
WUMPUS_MODE_BEEP = Note.C6
SOUND_ON_BEEP = Note.C5

MELODIES: dict[Melody, tuple[Note, ...]] = {
    # "Hall of the Mountain King" intro
    Melody.STARTUP: (
        Note.A3, Note.B3, Note.C4, Note.D4, Note.E4, Note.D4, Note.C4,
    ),
    # Ascending arpeggio
    Melody.WIN: (
        Note.C4, Note.E4, Note.G4, Note.C5, Note.E5, Note.G5, Note.C6,
    ),
    # Descending chromatic run
    Melody.LOSE: (
        Note.B4, Note.A4_SHARP, Note.A4, Note.G4_SHARP,
        Note.G4, Note.F4_SHARP, Note.F4,
    ),
    # Wing flutter
    Melody.BATS: (Note.C7, Note.B6, Note.C7, Note.B6),
}


def melody_length(melody: Melody) -> int:
    return len(MELODIES[melody])


def is_finished(melody: Melody, step: int) -> bool:
    """True once every note of ``melody`` has been played."""
    return step >= melody_length(melody)


def note_at(melody: Melody, step: int) -> Note:
    return MELODIES[melody][step]
