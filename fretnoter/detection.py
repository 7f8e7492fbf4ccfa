"""
Reverse chord lookup: which catalog chords are consistent with a note list.

The first note is taken as the chord root. Every other note is turned into
an offset above it, and a chord matches when it contains all of those
offsets. Chords with more notes than the input still match; they are
reported with their full note list so the missing notes are visible.
"""
from .builders import build_chord
from .catalog import chord_names, chord_offsets
from .constants import NUM_PITCH_CLASSES
from .errors import EmptyInput
from .pitch import position_of


def _relative_offsets(positions):
    """Distinct non-root offsets above positions[0], in input order."""
    root_pos = positions[0]
    offsets = []
    for pos in positions[1:]:
        rel = (pos - root_pos + NUM_PITCH_CLASSES) % NUM_PITCH_CLASSES
        if rel != 0 and rel not in offsets:
            offsets.append(rel)
    return offsets


def _label(root, name, used, given):
    """
    Build the display string for one matching chord.

    `used` is the number of distinct pitch classes the match covered
    (root included) and `given` the raw input length.
    """
    size = len(chord_offsets(name))
    label = root + name
    if used < size:
        notes = " ".join(build_chord(root, name))
        prefix = "partial " if size > given else ""
        label += f" ({prefix}{notes})"
    return label


def detect_chord(notes):
    """
    Return the sorted labels of every catalog chord consistent with `notes`.

    >>> detect_chord(["C", "E", "G"])[:2]
    ['C11 (partial C E G A# D F)', 'C7 (partial C E G A#)']

    Raises EmptyInput for an empty list and UnknownNote on the first bad
    note name.
    """
    if not notes:
        raise EmptyInput()

    positions = [position_of(note) for note in notes]
    root = notes[0]
    offsets = _relative_offsets(positions)

    found = []
    for name in chord_names():
        chord = {offset % NUM_PITCH_CLASSES for offset in chord_offsets(name)}
        if len(offsets) > len(chord_offsets(name)):
            continue
        if not all(offset in chord for offset in offsets):
            continue
        found.append(_label(root, name, len(offsets) + 1, len(notes)))

    return sorted(found)
