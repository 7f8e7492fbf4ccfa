"""
Realise catalog entries as note names starting from a root.
"""
from .catalog import scale_steps, chord_offsets
from .pitch import position_of, note_at


def build_scale(root, scale_name):
    """
    Walk the step pattern of `scale_name` from `root`.

    Returns one note per step in degree order; index 0 is the root and the
    octave is not repeated at the end.

    >>> build_scale("C", "Major (Ionian)")
    ['C', 'D', 'E', 'F', 'G', 'A', 'B']
    """
    pos = position_of(root)
    steps = scale_steps(scale_name)

    notes = []
    for step in steps:
        notes.append(note_at(pos))
        pos += step
    return notes


def build_chord(root, chord_name):
    """
    Return the notes of `chord_name` on `root`, in catalog offset order.

    Compound offsets wrap onto the alphabet, and notes are not deduplicated.
    """
    pos = position_of(root)
    offsets = chord_offsets(chord_name)
    return [note_at(pos + offset) for offset in offsets]
