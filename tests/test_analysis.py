import unittest
from fretnoter.analysis import chords_in_scale, chord_labels, filter_chords
from fretnoter.builders import build_chord, build_scale
from fretnoter.errors import UnknownNote, UnknownScale

C_MAJOR = {"C", "D", "E", "F", "G", "A", "B"}


class TestChordsInScale(unittest.TestCase):
    def setUp(self):
        self.chords = chords_in_scale("C", "Major (Ionian)")

    def test_tonic_chords(self):
        self.assertEqual(
            self.chords["C"],
            ["Major", "Power", "maj7", "maj9", "sus2", "sus4"],
        )

    def test_dominant_chords(self):
        for name in ["Major", "7", "dom7", "9", "11", "7sus2"]:
            self.assertIn(name, self.chords["G"])

    def test_leading_tone_only_half_diminished(self):
        self.assertEqual(self.chords["B"], ["halfdim7"])

    def test_every_listed_chord_fits(self):
        for root, names in self.chords.items():
            for name in names:
                self.assertTrue(set(build_chord(root, name)) <= C_MAJOR, root + name)

    def test_repeat_calls_are_identical(self):
        self.assertEqual(chords_in_scale("C", "Major (Ionian)"), self.chords)
        self.assertEqual(
            chords_in_scale("F#", "Harmonic Minor"), chords_in_scale("F#", "Harmonic Minor")
        )

    def test_lists_are_sorted(self):
        for names in self.chords.values():
            self.assertEqual(names, sorted(names))

    def test_chromatic_roots_absent(self):
        # Every chord contains its own root, so no sharp can qualify here.
        self.assertTrue(set(self.chords) <= C_MAJOR)

    def test_diminished_scale(self):
        chords = chords_in_scale("A", "Diminished (Half-Whole)")
        scale = set(build_scale("A", "Diminished (Half-Whole)"))
        for root, names in chords.items():
            for name in names:
                self.assertTrue(set(build_chord(root, name)) <= scale)
        self.assertIn("dim7", chords["A"])

    def test_errors(self):
        with self.assertRaises(UnknownNote):
            chords_in_scale("H", "Major (Ionian)")
        with self.assertRaises(UnknownScale):
            chords_in_scale("C", "Ionian")


class TestChordLabels(unittest.TestCase):
    def test_labels(self):
        labels = chord_labels(chords_in_scale("C", "Major (Ionian)"))
        self.assertIn("CMajor", labels)
        self.assertIn("Bhalfdim7", labels)
        self.assertTrue(labels[0].startswith("A"))

    def test_labels_empty_map(self):
        self.assertEqual(chord_labels({}), [])

    def test_filter_case_insensitive(self):
        labels = ["CMajor", "Cmaj7", "DMinor", "Bhalfdim7"]
        self.assertEqual(filter_chords(labels, "maj"), ["CMajor", "Cmaj7"])
        self.assertEqual(filter_chords(labels, "^d"), ["DMinor"])

    def test_filter_empty_or_invalid_keeps_all(self):
        labels = ["CMajor", "DMinor"]
        self.assertEqual(filter_chords(labels, ""), labels)
        self.assertEqual(filter_chords(labels, "maj("), labels)

    def test_filter_no_match(self):
        self.assertEqual(filter_chords(["CMajor"], "sus"), [])


if __name__ == "__main__":
    unittest.main()
