# shaffuru/tests/test_move.py
import random
import unittest

from shaffuru.core import (
    FACES,
    MODIFIERS,
    Move,
    opposite,
    render,
    sample_face,
    sample_modifier,
    sample_move,
)


class TestMove(unittest.TestCase):
    def test_opposite_pairs(self):
        self.assertEqual(opposite("U"), "D")
        self.assertEqual(opposite("D"), "U")
        self.assertEqual(opposite("R"), "L")
        self.assertEqual(opposite("L"), "R")
        self.assertEqual(opposite("F"), "B")
        self.assertEqual(opposite("B"), "F")

    def test_opposite_is_involution(self):
        for face in FACES:
            with self.subTest(face=face):
                self.assertEqual(opposite(opposite(face)), face)
                self.assertNotEqual(opposite(face), face)

    def test_opposite_rejects_unknown_face(self):
        with self.assertRaises(ValueError):
            opposite("X")

    def test_render(self):
        self.assertEqual(render(Move("U", "'")), "U'")
        self.assertEqual(render(Move("B", "2")), "B2")
        self.assertEqual(render(Move("R", "")), "R")
        self.assertEqual(str(Move("F")), "F")

    def test_structural_equality(self):
        self.assertEqual(Move("U", "'"), Move("U", "'"))
        self.assertNotEqual(Move("U", "'"), Move("U", "2"))

    def test_sampling_uses_only_given_rng(self):
        a = [sample_move(random.Random(7)) for _ in range(5)]
        b = [sample_move(random.Random(7)) for _ in range(5)]
        self.assertEqual(a, b)

    def test_sampling_covers_all_values(self):
        rng = random.Random(123)
        faces = {sample_face(rng) for _ in range(500)}
        modifiers = {sample_modifier(rng) for _ in range(500)}
        moves = {sample_move(rng) for _ in range(2000)}
        self.assertEqual(faces, set(FACES))
        self.assertEqual(modifiers, set(MODIFIERS))
        self.assertEqual(len(moves), 18)


if __name__ == "__main__":
    unittest.main()
