"""
Read-only lookups into the scale and chord tables.
"""
from .constants import SCALES, CHORDS
from .errors import UnknownScale, UnknownChord


def scale_steps(name):
    """Return the step pattern of a scale, e.g. (2, 2, 1, 2, 2, 2, 1)."""
    try:
        return SCALES[name]
    except KeyError:
        raise UnknownScale(name) from None


def chord_offsets(name):
    """Return the root offsets of a chord, e.g. (0, 4, 7)."""
    try:
        return CHORDS[name]
    except KeyError:
        raise UnknownChord(name) from None


def scale_names():
    return list(SCALES.keys())


def chord_names():
    return list(CHORDS.keys())
