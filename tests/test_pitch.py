import unittest
import numpy as np
from fretnoter.pitch import position_of, note_at, pitch_class_vector
from fretnoter.constants import NOTES
from fretnoter.errors import UnknownNote, FretnoterError


class TestPositionOf(unittest.TestCase):
    def test_alphabet_starts_at_a(self):
        self.assertEqual(position_of("A"), 0)
        self.assertEqual(position_of("C"), 3)
        self.assertEqual(position_of("G#"), 11)

    def test_every_note_round_trips(self):
        for i, name in enumerate(NOTES):
            self.assertEqual(position_of(name), i)
            self.assertEqual(note_at(i), name)

    def test_unknown_spellings(self):
        # No flats, no lower case, no German H
        for bad in ["Db", "c", "H", "", "C##"]:
            with self.assertRaises(UnknownNote) as ctx:
                position_of(bad)
            self.assertEqual(ctx.exception.symbol, bad)

    def test_unknown_note_is_value_error(self):
        with self.assertRaises(ValueError):
            position_of("Bb")
        self.assertTrue(issubclass(UnknownNote, FretnoterError))


class TestNoteAt(unittest.TestCase):
    def test_wraps_upwards(self):
        self.assertEqual(note_at(12), "A")
        self.assertEqual(note_at(15), "C")
        self.assertEqual(note_at(3 + 17), "F")  # C + 11th

    def test_wraps_negative(self):
        self.assertEqual(note_at(-1), "G#")
        self.assertEqual(note_at(-12), "A")
        self.assertEqual(note_at(-13), "G#")


class TestPitchClassVector(unittest.TestCase):
    def test_c_major_triad(self):
        vec = pitch_class_vector(["C", "E", "G"])
        expected = np.zeros(12, dtype=np.float32)
        expected[[3, 7, 10]] = 1.0
        np.testing.assert_array_equal(vec, expected)
        self.assertEqual(vec.dtype, np.float32)

    def test_repeats_set_slot_once(self):
        vec = pitch_class_vector(["A", "A", "E"])
        self.assertEqual(vec.sum(), 2.0)

    def test_empty(self):
        np.testing.assert_array_equal(pitch_class_vector([]), np.zeros(12, dtype=np.float32))

    def test_bad_note(self):
        with self.assertRaises(UnknownNote):
            pitch_class_vector(["C", "Eb"])


if __name__ == "__main__":
    unittest.main()
