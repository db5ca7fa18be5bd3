"""
Unit tests for cube operations.
"""

import unittest
import numpy as np
from cubular.cube import Cube
from cubular.geometry import Color, Face, FaceRotation
from cubular.moves import Move
from cubular.operations import (
    apply_move,
    equivalence,
    generate_solved,
    get_face,
    is_solved,
    rotate_face,
    transform,
    unapply_move,
)
from cubular.scramble import Scramble
from cubular.utils import piece_classes, sticker_counts

ALL_MOVES = [Move(face, rotation) for face in Face for rotation in FaceRotation]

# (face, rotation) -> (inspected face, row or column selector, expected color)
# for a single turn from the solved cube.
NEIGHBOR_EXPECTATIONS = {
    (Face.TOP, FaceRotation.CLOCKWISE): (Face.FRONT, np.s_[0, :], Color.BLUE),
    (Face.TOP, FaceRotation.COUNTERCLOCKWISE): (Face.FRONT, np.s_[0, :], Color.GREEN),
    (Face.TOP, FaceRotation.DOUBLE): (Face.FRONT, np.s_[0, :], Color.ORANGE),
    (Face.FRONT, FaceRotation.CLOCKWISE): (Face.TOP, np.s_[2, :], Color.GREEN),
    (Face.FRONT, FaceRotation.COUNTERCLOCKWISE): (Face.TOP, np.s_[2, :], Color.BLUE),
    (Face.FRONT, FaceRotation.DOUBLE): (Face.TOP, np.s_[2, :], Color.YELLOW),
    (Face.RIGHT, FaceRotation.CLOCKWISE): (Face.TOP, np.s_[:, 2], Color.RED),
    (Face.RIGHT, FaceRotation.COUNTERCLOCKWISE): (Face.TOP, np.s_[:, 2], Color.ORANGE),
    (Face.RIGHT, FaceRotation.DOUBLE): (Face.TOP, np.s_[:, 2], Color.YELLOW),
    (Face.LEFT, FaceRotation.CLOCKWISE): (Face.FRONT, np.s_[:, 0], Color.WHITE),
    (Face.LEFT, FaceRotation.COUNTERCLOCKWISE): (Face.FRONT, np.s_[:, 0], Color.YELLOW),
    (Face.LEFT, FaceRotation.DOUBLE): (Face.FRONT, np.s_[:, 0], Color.ORANGE),
    (Face.BACK, FaceRotation.CLOCKWISE): (Face.TOP, np.s_[0, :], Color.BLUE),
    (Face.BACK, FaceRotation.COUNTERCLOCKWISE): (Face.TOP, np.s_[0, :], Color.GREEN),
    (Face.BACK, FaceRotation.DOUBLE): (Face.TOP, np.s_[0, :], Color.YELLOW),
    (Face.BOTTOM, FaceRotation.CLOCKWISE): (Face.FRONT, np.s_[2, :], Color.GREEN),
    (Face.BOTTOM, FaceRotation.COUNTERCLOCKWISE): (Face.FRONT, np.s_[2, :], Color.BLUE),
    (Face.BOTTOM, FaceRotation.DOUBLE): (Face.FRONT, np.s_[2, :], Color.ORANGE),
}

# Turning a face by each rotation spins its own stickers by this many
# counterclockwise quarter turns in np.rot90 terms.
FACE_SPIN = {
    FaceRotation.CLOCKWISE: -1,
    FaceRotation.COUNTERCLOCKWISE: 1,
    FaceRotation.DOUBLE: 2,
}


class TestOperations(unittest.TestCase):
    """Test cases for cube operations."""

    def setUp(self):
        """Set up test fixtures."""
        self.cube = Scramble.from_seed(7, 40).apply(generate_solved())

    def test_solved_baseline(self):
        """Test that the solved cube is solved."""
        self.assertTrue(is_solved(generate_solved()))
        self.assertFalse(is_solved(self.cube))

    def test_equivalence(self):
        """Test piece-by-piece comparison."""
        self.assertTrue(equivalence(self.cube, self.cube.copy()))
        self.assertTrue(equivalence(generate_solved(), Cube()))
        self.assertFalse(equivalence(self.cube, generate_solved()))

    def test_get_face(self):
        """Test the functional face accessor."""
        self.assertTrue(np.array_equal(get_face(self.cube, Face.LEFT), self.cube.get_face(Face.LEFT)))
        self.assertTrue(np.all(get_face(generate_solved(), "bottom") == Color.YELLOW))

    def test_rotate_face_returns_same_cube(self):
        """Test that rotate_face mutates in place."""
        cube = generate_solved()
        self.assertIs(rotate_face(cube, Face.RIGHT, FaceRotation.DOUBLE), cube)
        self.assertFalse(is_solved(cube))

    def test_top_clockwise_scenario(self):
        """Test one clockwise top turn from solved, then three more."""
        cube = generate_solved()
        right_top_row = get_face(cube, Face.RIGHT)[0, :].copy()

        rotate_face(cube, Face.TOP, FaceRotation.CLOCKWISE)
        self.assertTrue(np.all(get_face(cube, Face.TOP) == Color.WHITE))
        self.assertTrue(np.array_equal(get_face(cube, Face.FRONT)[0, :], right_top_row))
        self.assertTrue(np.all(get_face(cube, Face.RIGHT)[0, :] == Color.ORANGE))
        self.assertTrue(np.all(get_face(cube, Face.BACK)[0, :] == Color.GREEN))
        self.assertTrue(np.all(get_face(cube, Face.LEFT)[0, :] == Color.RED))
        self.assertTrue(np.all(get_face(cube, Face.FRONT)[1:, :] == Color.RED))

        for _ in range(3):
            rotate_face(cube, Face.TOP, FaceRotation.CLOCKWISE)
        self.assertTrue(equivalence(cube, generate_solved()))

    def test_front_top_row_takes_right_top_row(self):
        """Test the top turn on a scrambled cube."""
        right_top_row = get_face(self.cube, Face.RIGHT)[0, :].copy()
        rotate_face(self.cube, Face.TOP, FaceRotation.CLOCKWISE)
        self.assertTrue(np.array_equal(get_face(self.cube, Face.FRONT)[0, :], right_top_row))

    def test_neighbor_rows_per_face(self):
        """Test which neighbor stickers land next to each turned face."""
        for (face, rotation), (inspected, selector, color) in NEIGHBOR_EXPECTATIONS.items():
            with self.subTest(face=face.name, rotation=rotation.name):
                cube = rotate_face(generate_solved(), face, rotation)
                self.assertTrue(np.all(get_face(cube, face) == get_face(Cube(), face)))
                self.assertTrue(np.all(get_face(cube, inspected)[selector] == color))

    def test_face_stickers_spin_with_the_turn(self):
        """Test every face against a matrix rotation of its own stickers."""
        for face in Face:
            for rotation in FaceRotation:
                with self.subTest(face=face.name, rotation=rotation.name):
                    cube = self.cube.copy()
                    before = get_face(cube, face)
                    rotate_face(cube, face, rotation)
                    expected = np.rot90(before, FACE_SPIN[rotation])
                    self.assertTrue(np.array_equal(get_face(cube, face), expected))

    def test_opposite_face_untouched(self):
        """Test that a turn leaves the opposite face alone."""
        opposites = {
            Face.TOP: Face.BOTTOM, Face.BOTTOM: Face.TOP,
            Face.FRONT: Face.BACK, Face.BACK: Face.FRONT,
            Face.LEFT: Face.RIGHT, Face.RIGHT: Face.LEFT,
        }
        for face, opposite in opposites.items():
            cube = self.cube.copy()
            before = get_face(cube, opposite)
            rotate_face(cube, face, FaceRotation.CLOCKWISE)
            self.assertTrue(np.array_equal(get_face(cube, opposite), before), face.name)

    def test_round_trip(self):
        """Test that unapply_move undoes apply_move for every move."""
        for move in ALL_MOVES:
            with self.subTest(move=str(move)):
                cube = self.cube.copy()
                unapply_move(apply_move(cube, move), move)
                self.assertEqual(cube, self.cube)

    def test_four_fold_closure(self):
        """Test that four quarter turns return to the start."""
        for face in Face:
            for rotation in (FaceRotation.CLOCKWISE, FaceRotation.COUNTERCLOCKWISE):
                cube = self.cube.copy()
                for _ in range(4):
                    rotate_face(cube, face, rotation)
                self.assertEqual(cube, self.cube, f"{face.name} {rotation.name}")

    def test_half_turn_equivalence(self):
        """Test that two quarter turns equal one double turn."""
        for face in Face:
            for rotation in (FaceRotation.CLOCKWISE, FaceRotation.COUNTERCLOCKWISE):
                twice = self.cube.copy()
                rotate_face(twice, face, rotation)
                rotate_face(twice, face, rotation)
                double = rotate_face(self.cube.copy(), face, FaceRotation.DOUBLE)
                self.assertEqual(twice, double, f"{face.name} {rotation.name}")

    def test_quarter_turns_are_distinct(self):
        """Test that clockwise and counterclockwise differ."""
        for face in Face:
            cw = rotate_face(self.cube.copy(), face, FaceRotation.CLOCKWISE)
            ccw = rotate_face(self.cube.copy(), face, FaceRotation.COUNTERCLOCKWISE)
            self.assertNotEqual(cw, ccw, face.name)

    def test_sticker_conservation(self):
        """Test that turns only move stickers around."""
        classes = piece_classes(generate_solved())
        cube = generate_solved()
        for move in ALL_MOVES * 3:
            apply_move(cube, move)
            self.assertEqual(set(sticker_counts(cube).values()), {9})
            self.assertTrue(np.array_equal(piece_classes(cube), classes))
            for face in Face:
                self.assertFalse(np.any(get_face(cube, face) == Color.NULL))

    def test_commutator_order(self):
        """Test that the sexy move (R U R' U') has order 6."""
        sexy = [
            Move(Face.RIGHT, FaceRotation.CLOCKWISE),
            Move(Face.TOP, FaceRotation.CLOCKWISE),
            Move(Face.RIGHT, FaceRotation.COUNTERCLOCKWISE),
            Move(Face.TOP, FaceRotation.COUNTERCLOCKWISE),
        ]
        cube = generate_solved()
        for repetition in range(1, 7):
            for move in sexy:
                apply_move(cube, move)
            if repetition < 6:
                self.assertFalse(is_solved(cube))
        self.assertTrue(is_solved(cube))

    def test_transform_returns_copy(self):
        """Test transform with (face, rotation) pairs."""
        cube = generate_solved()
        result = transform(cube, [("top", "clockwise"), (Face.FRONT, FaceRotation.DOUBLE)])
        self.assertTrue(is_solved(cube))
        expected = generate_solved()
        apply_move(expected, Move(Face.TOP, FaceRotation.CLOCKWISE))
        apply_move(expected, Move(Face.FRONT, FaceRotation.DOUBLE))
        self.assertEqual(result, expected)

    def test_transform_invalid_move(self):
        """Test that malformed moves raise ValueError."""
        with self.assertRaises(ValueError):
            transform(generate_solved(), [("top",)])
        with self.assertRaises(ValueError):
            transform(generate_solved(), [("top", "sideways")])


if __name__ == '__main__':
    unittest.main()
