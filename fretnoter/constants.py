from types import MappingProxyType

# ── Pitch-class alphabet ──────────────────────────────────────────────────────

# Fixed cyclic order, sharps only. Position arithmetic is modulo 12.
NOTES: tuple[str, ...] = (
    "A", "A#", "B", "C", "C#", "D", "D#", "E", "F", "F#", "G", "G#",
)
NUM_PITCH_CLASSES = len(NOTES)

# ── Scales: semitone steps from each degree to the next ──────────────────────

SCALES = MappingProxyType({
    "Major (Ionian)":          (2, 2, 1, 2, 2, 2, 1),
    "Dorian":                  (2, 1, 2, 2, 2, 1, 2),
    "Phrygian":                (1, 2, 2, 2, 1, 2, 2),
    "Lydian":                  (2, 2, 2, 1, 2, 2, 1),
    "Mixolydian":              (2, 2, 1, 2, 2, 1, 2),
    "Natural Minor (Aeolian)": (2, 1, 2, 2, 1, 2, 2),
    "Locrian":                 (1, 2, 2, 1, 2, 2, 2),
    "Harmonic Minor":          (2, 1, 2, 2, 1, 3, 1),
    "Melodic Minor":           (2, 1, 2, 2, 2, 2, 1),
    "Phrygian Dominant":       (1, 3, 1, 2, 1, 2, 2),
    "Hungarian Minor":         (2, 1, 3, 1, 1, 3, 1),
    "Double Harmonic":         (1, 3, 1, 2, 1, 3, 1),
    "Neapolitan Minor":        (1, 2, 2, 2, 1, 3, 1),
    "Diminished (Whole-Half)": (2, 1, 2, 1, 2, 1, 2, 1),
    "Diminished (Half-Whole)": (1, 2, 1, 2, 1, 2, 1, 2),
    "Pentatonic Major":        (2, 2, 3, 2, 3),
    "Pentatonic Minor":        (3, 2, 2, 3, 2),
    "Metallica":               (1, 1, 1, 2, 1, 1, 1, 2, 2),
})

# ── Chords: semitone offsets from the root ───────────────────────────────────

# Offsets above 11 are compound intervals (9ths, 11ths) and wrap onto the
# alphabet. "7" and "dom7" are the same chord under two names.
CHORDS = MappingProxyType({
    # Triads and dyads
    "Major":      (0, 4, 7),
    "Minor":      (0, 3, 7),
    "Augmented":  (0, 4, 8),
    "Diminished": (0, 4, 6),
    "sus2":       (0, 2, 7),
    "sus4":       (0, 5, 7),
    "Power":      (0, 7),
    # Sevenths
    "7":          (0, 4, 7, 10),
    "m7":         (0, 3, 7, 10),
    "maj7":       (0, 4, 7, 11),
    "dom7":       (0, 4, 7, 10),
    "dim7":       (0, 3, 6, 9),
    "dom7f5":     (0, 4, 6, 10),
    "halfdim7":   (0, 3, 6, 10),
    "majdim7":    (0, 3, 6, 11),
    "minmaj7":    (0, 3, 7, 11),
    "augmaj7":    (0, 4, 8, 11),
    "aug7":       (0, 4, 8, 10),
    "7sus2":      (0, 2, 7, 10),
    # Extended
    "9":          (0, 4, 7, 10, 14),
    "m9":         (0, 3, 7, 10, 14),
    "maj9":       (0, 4, 7, 11, 14),
    "11":         (0, 4, 7, 10, 14, 17),
    "m11":        (0, 3, 7, 10, 14, 17),
})

# ── Fretboard defaults ───────────────────────────────────────────────────────

DEFAULT_TUNING = "EADGBE"   # low to high
DEFAULT_FRETS = 11
TUNING_TOKEN_PATTERN = r"[ABCDEFGabcdefg]#?"
