"""
Which catalog chords can be played using only the notes of a scale.

Containment is tested on 12-element pitch-class vectors: a chord fits when
every slot it sets is also set in the scale vector.
"""
import re

import numpy as np

from .builders import build_scale, build_chord
from .catalog import chord_names
from .constants import NOTES
from .pitch import pitch_class_vector


def _fits(chord_vec, scale_vec):
    return bool(np.all(scale_vec >= chord_vec))


def chords_in_scale(root, scale_name):
    """
    Map every chord root to the sorted chord names whose notes all lie in
    the scale `root` `scale_name`.

    All 12 pitch classes are tried as chord roots. Only the chord notes are
    checked, so a root outside the scale still appears if every note of
    one of its chords is in the scale. Roots without any fitting chord are
    left out of the result.

    Raises UnknownNote / UnknownScale for a bad root or scale name.
    """
    scale_vec = pitch_class_vector(build_scale(root, scale_name))

    result = {}
    for chord_root in NOTES:
        fitting = [
            name for name in chord_names()
            if _fits(pitch_class_vector(build_chord(chord_root, name)), scale_vec)
        ]
        if fitting:
            result[chord_root] = sorted(fitting)
    return result


def chord_labels(chords):
    """Flatten a chords_in_scale() map into labels like 'CMajor', roots in alphabet order."""
    return [chord_root + name for chord_root in NOTES for name in chords.get(chord_root, [])]


def filter_chords(labels, pattern):
    """
    Keep the labels matching `pattern` (case-insensitive regex search).

    An empty pattern or one that does not compile leaves the list as is, so
    a half-typed filter never empties the list.
    """
    if not pattern:
        return list(labels)
    try:
        rx = re.compile(pattern, re.IGNORECASE)
    except re.error:
        return list(labels)
    return [label for label in labels if rx.search(label)]
