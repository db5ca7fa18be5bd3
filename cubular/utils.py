"""
Utility functions for the Cubular API.
"""

import numpy as np
from typing import Dict

from .cube import Cube
from .exceptions import InvalidFaceError, InvalidRotationError
from .geometry import (
    COLOR_LETTERS,
    FACE_NAMES,
    ROTATION_NAMES,
    Color,
    coerce_face,
    coerce_rotation,
)


def validate_face(face) -> bool:
    """
    Validate that a value names one of the 6 faces.

    Args:
        face: The value to validate

    Returns:
        bool: True if face is valid, False otherwise
    """
    try:
        coerce_face(face)
    except InvalidFaceError:
        return False
    return True


def validate_rotation(rotation) -> bool:
    """
    Validate that a value names one of the 3 rotations.

    Args:
        rotation: The value to validate

    Returns:
        bool: True if rotation is valid, False otherwise
    """
    try:
        coerce_rotation(rotation)
    except InvalidRotationError:
        return False
    return True


def face_name(face) -> str:
    """Get the English name of a face, e.g. "top"."""
    return FACE_NAMES[coerce_face(face)]


def rotation_name(rotation) -> str:
    """Get the English name of a rotation, e.g. "counterclockwise"."""
    return ROTATION_NAMES[coerce_rotation(rotation)]


def sticker_counts(cube: Cube) -> Dict[Color, int]:
    """
    Count the visible stickers of each color.

    Args:
        cube (Cube): The cube to count

    Returns:
        Dict[Color, int]: Number of stickers per non-null color
    """
    counts = np.bincount(cube.data.ravel(), minlength=len(Color))
    return {color: int(counts[color]) for color in Color if color != Color.NULL}


def piece_classes(cube: Cube) -> np.ndarray:
    """
    Get the number of visible stickers on every piece.

    Corners have 3, edges 2, centers 1 and the hidden core 0.

    Args:
        cube (Cube): The cube to inspect

    Returns:
        np.ndarray: A (3, 9) array of sticker counts
    """
    return np.count_nonzero(cube.data != Color.NULL, axis=2)


def format_piece(piece) -> str:
    """
    Describe the colors of one piece, one entry per side.

    Args:
        piece: Sequence of 6 colors indexed by Face

    Returns:
        str: e.g. "top=W front=R right=. left=G back=. bottom=."
    """
    return " ".join(
        f"{name}={COLOR_LETTERS[Color(int(color))]}"
        for name, color in zip(FACE_NAMES.values(), piece)
    )


def format_face(cube: Cube, face) -> str:
    """
    Render one side of a cube as 3 lines of color letters.

    Args:
        cube (Cube): The cube to render
        face: The side to render

    Returns:
        str: e.g. "WWW\\nWWW\\nWWW"
    """
    squares = cube.get_face(face)
    return "\n".join("".join(COLOR_LETTERS[Color(int(c))] for c in row) for row in squares)
