import numpy as np

from .constants import NOTES, NUM_PITCH_CLASSES
from .errors import UnknownNote

# Note name → alphabet position. Exact, case-sensitive spellings only.
_NOTE_TO_POS: dict[str, int] = {name: pos for pos, name in enumerate(NOTES)}


def position_of(note):
    """Map a note name (e.g. 'A', 'C#') to its position (0-11) in the alphabet."""
    pos = _NOTE_TO_POS.get(note)
    if pos is None:
        raise UnknownNote(note)
    return pos


def note_at(index):
    """Return the note name at any integer position, wrapping modulo 12."""
    # Python's modulo is already non-negative for negative indices.
    return NOTES[index % NUM_PITCH_CLASSES]


def pitch_class_vector(notes):
    """
    Build a 12-element multi-hot vector with 1.0 at the position of every
    note in `notes`. Repeated notes set the same slot once.

    Raises UnknownNote on the first name outside the alphabet.
    """
    v = np.zeros(NUM_PITCH_CLASSES, dtype=np.float32)
    for note in notes:
        v[position_of(note)] = 1.0
    return v
