"""
Fretboard model: which note sits on each string/fret and what role it plays
for a realised scale or chord.

Rendering is left to the caller; this module only produces the grid.
"""
import collections
import re

from .builders import build_scale, build_chord
from .constants import DEFAULT_FRETS, NUM_PITCH_CLASSES, TUNING_TOKEN_PATTERN
from .errors import InvalidFretRange, InvalidTuning
from .pitch import position_of, note_at

_TUNING_RE = re.compile(TUNING_TOKEN_PATTERN)


class NoteRole:
    """Role of a fret position relative to the realised notes."""
    UNVOICED = "unvoiced"
    ROOT = "root"
    TONE = "tone"


FretNote = collections.namedtuple("FretNote", ["string", "fret", "name", "role"])
Fretboard = collections.namedtuple(
    "Fretboard", ["title", "tuning", "starting_fret", "frets", "notes"]
)


def parse_tuning(text: str) -> list[str]:
    """
    Pull open-string notes out of free text, low string first.

    "EADGBE", "e a d g b e" and "D#G#C#F#A#D#" all parse. Letters are
    upper-cased; anything that is not a note letter is skipped.
    """
    tokens = _TUNING_RE.findall(text or "")
    if not tokens:
        raise InvalidTuning(text)

    tuning = [t.strip().upper() for t in tokens]
    for note in tuning:
        position_of(note)   # raises UnknownNote, e.g. for "E#"
    return tuning


def build_fretboard(tuning, root, tones, title="", frets=DEFAULT_FRETS, starting_fret=0):
    """
    Lay out `frets` + 1 positions per string (open string included).

    Positions holding `root` are tagged ROOT, those holding any of `tones`
    TONE, the rest UNVOICED.
    """
    if frets < 0 or starting_fret < 0:
        raise InvalidFretRange(frets, starting_fret)

    root_pos = position_of(root)
    tone_pos = {position_of(t) for t in tones}

    grid = []
    for string, open_note in enumerate(tuning):
        open_pos = position_of(open_note)
        row = []
        for fret in range(starting_fret, starting_fret + frets + 1):
            pos = (open_pos + fret) % NUM_PITCH_CLASSES
            if pos == root_pos:
                role = NoteRole.ROOT
            elif pos in tone_pos:
                role = NoteRole.TONE
            else:
                role = NoteRole.UNVOICED
            row.append(FretNote(string, fret, note_at(pos), role))
        grid.append(row)

    return Fretboard(title, list(tuning), starting_fret, frets, grid)


def _board_title(root, name, kind, tuning, notes):
    return (
        f"{root} {name} {kind}\n"
        f"Tuning: {''.join(tuning)}\n"
        f"Notes: {' '.join(notes)}"
    )


def scale_board(tuning, root, scale_name, frets=DEFAULT_FRETS):
    notes = build_scale(root, scale_name)
    title = _board_title(root, scale_name, "scale", tuning, notes)
    return build_fretboard(tuning, root, notes[1:], title=title, frets=frets)


def chord_board(tuning, root, chord_name, frets=DEFAULT_FRETS):
    notes = build_chord(root, chord_name)
    title = _board_title(root, chord_name, "chord", tuning, notes)
    return build_fretboard(tuning, root, notes[1:], title=title, frets=frets)


def render_text(board):
    """
    Plain-text rendering, highest string on top like a tab. Roots are
    marked '*', tones shown by name, unvoiced positions left blank.
    """
    lines = [board.title] if board.title else []
    last = len(board.notes) - 1
    for i, row in enumerate(reversed(board.notes)):
        cells = []
        for fn in row:
            if fn.role == NoteRole.ROOT:
                cells.append(f"*{fn.name:<2}")
            elif fn.role == NoteRole.TONE:
                cells.append(f" {fn.name:<2}")
            else:
                cells.append("   ")
        lines.append(f"{board.tuning[last - i]:<2}|" + "|".join(cells) + "|")
    return "\n".join(lines)
