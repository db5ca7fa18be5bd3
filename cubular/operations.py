"""
Operations that can be performed on cubes.
"""

import numpy as np
from typing import Iterable

from .cube import Cube
from .geometry import FaceRotation
from .moves import Move


def generate_solved() -> Cube:
    """
    Create a solved cube.

    Returns:
        Cube: A new cube with top white, front red, right blue, left green,
        back orange and bottom yellow
    """
    return Cube()


def get_face(cube: Cube, face) -> np.ndarray:
    """
    Get the visible colors of one side of a cube.

    Args:
        cube (Cube): The cube to read
        face: The side to read

    Returns:
        np.ndarray: A (3, 3) array of colors, row-major as seen facing that side

    Raises:
        InvalidFaceError: If face is not one of the 6 faces
    """
    return cube.get_face(face)


def rotate_face(cube: Cube, face, rotation=FaceRotation.CLOCKWISE) -> Cube:
    """
    Turn one side of a cube in place.

    Args:
        cube (Cube): The cube to mutate
        face: The side to turn
        rotation: Clockwise, counterclockwise or double

    Returns:
        Cube: The same cube, for chaining

    Raises:
        InvalidFaceError: If face is not one of the 6 faces
        InvalidRotationError: If rotation is not one of the 3 rotations
    """
    cube.rotate_face(face, rotation)
    return cube


def apply_move(cube: Cube, move: Move) -> Cube:
    """Apply a move to a cube in place."""
    return rotate_face(cube, move.face, move.rotation)


def unapply_move(cube: Cube, move: Move) -> Cube:
    """Apply the inverse of a move to a cube in place."""
    return apply_move(cube, move.inverse())


def equivalence(first: Cube, second: Cube) -> bool:
    """
    Check whether two cubes hold identical colors for every piece.

    Args:
        first (Cube): First cube
        second (Cube): Second cube

    Returns:
        bool: True if every piece of both cubes matches
    """
    return np.array_equal(first.data, second.data)


def is_solved(cube: Cube) -> bool:
    """Check whether a cube matches the solved cube."""
    return equivalence(cube, generate_solved())


def transform(cube: Cube, moves: Iterable) -> Cube:
    """
    Apply a sequence of moves to a copy of a cube.

    Args:
        cube (Cube): The cube to start from; it is not modified
        moves (Iterable): Moves, or (face, rotation) tuples

    Returns:
        Cube: The transformed copy

    Example:
        >>> c = generate_solved()
        >>> result = transform(c, [("top", "clockwise"), ("front", "double")])
    """
    result = cube.copy()

    for move in moves:
        if not isinstance(move, Move):
            if len(move) != 2:
                raise ValueError("Each move must be a Move or a (face, rotation) pair")
            move = Move(*move)
        apply_move(result, move)

    return result
