"""
Fixed geometry of the 3x3x3 cube.

Pieces are addressed as ``(plane, index)``. Plane 0 is the front slice and
plane 2 the back slice; inside a plane the 9 positions are numbered row-major
as seen from the front::

    +--+--+--+
    |0 |1 |2 |
    +--+--+--+
    |3 |4 |5 |
    +--+--+--+
    |6 |7 |8 |
    +--+--+--+

Every piece stores one color per absolute side, indexed by ``Face``.
"""

from enum import IntEnum
from typing import Dict, FrozenSet, Tuple

import numpy as np

from .exceptions import InvalidFaceError, InvalidRotationError


PLANE_COUNT = 3
PIECES_PER_PLANE = 9
SIDE_COUNT = 6


class Face(IntEnum):
    """Absolute side of the cube; also the color slot index inside a piece."""
    TOP = 0
    FRONT = 1
    RIGHT = 2
    LEFT = 3
    BACK = 4
    BOTTOM = 5


class Color(IntEnum):
    NULL = 0
    WHITE = 1
    RED = 2
    BLUE = 3
    GREEN = 4
    ORANGE = 5
    YELLOW = 6


class FaceRotation(IntEnum):
    """Turn amount as seen by an observer facing the rotated side."""
    CLOCKWISE = 0
    COUNTERCLOCKWISE = 1
    DOUBLE = 2


SOLVED_COLORS: Dict[Face, Color] = {
    Face.TOP: Color.WHITE,
    Face.FRONT: Color.RED,
    Face.RIGHT: Color.BLUE,
    Face.LEFT: Color.GREEN,
    Face.BACK: Color.ORANGE,
    Face.BOTTOM: Color.YELLOW,
}

FACE_NAMES: Dict[Face, str] = {
    Face.TOP: "top",
    Face.FRONT: "front",
    Face.RIGHT: "right",
    Face.LEFT: "left",
    Face.BACK: "back",
    Face.BOTTOM: "bottom",
}

ROTATION_NAMES: Dict[FaceRotation, str] = {
    FaceRotation.CLOCKWISE: "clockwise",
    FaceRotation.COUNTERCLOCKWISE: "counterclockwise",
    FaceRotation.DOUBLE: "double",
}

COLOR_LETTERS: Dict[Color, str] = {
    Color.NULL: ".",
    Color.WHITE: "W",
    Color.RED: "R",
    Color.BLUE: "B",
    Color.GREEN: "G",
    Color.ORANGE: "O",
    Color.YELLOW: "Y",
}

# The 9 visible pieces of each face, row-major as seen by an observer facing
# that side. The exposed slot of every listed piece is the face itself.
FACE_SQUARES: Dict[Face, Tuple[Tuple[int, int], ...]] = {
    Face.TOP: (
        (2, 0), (2, 1), (2, 2),
        (1, 0), (1, 1), (1, 2),
        (0, 0), (0, 1), (0, 2),
    ),
    Face.FRONT: (
        (0, 0), (0, 1), (0, 2),
        (0, 3), (0, 4), (0, 5),
        (0, 6), (0, 7), (0, 8),
    ),
    Face.RIGHT: (
        (0, 2), (1, 2), (2, 2),
        (0, 5), (1, 5), (2, 5),
        (0, 8), (1, 8), (2, 8),
    ),
    Face.LEFT: (
        (2, 0), (1, 0), (0, 0),
        (2, 3), (1, 3), (0, 3),
        (2, 6), (1, 6), (0, 6),
    ),
    Face.BACK: (
        (2, 2), (2, 1), (2, 0),
        (2, 5), (2, 4), (2, 3),
        (2, 8), (2, 7), (2, 6),
    ),
    Face.BOTTOM: (
        (0, 6), (0, 7), (0, 8),
        (1, 6), (1, 7), (1, 8),
        (2, 6), (2, 7), (2, 8),
    ),
}

# Quadsets and side cycles are listed clockwise as seen from one fixed
# viewpoint per axis: from the front for FRONT/BACK, from the top for
# TOP/BOTTOM and from the right for RIGHT/LEFT. Position k of a quadset
# moves to position k + 1 in that frame, and a sticker facing SIDE_CYCLES[k]
# ends up facing SIDE_CYCLES[k + 1].
CORNER_QUADSETS: Dict[Face, Tuple[Tuple[int, int], ...]] = {
    Face.TOP: ((2, 0), (2, 2), (0, 2), (0, 0)),
    Face.FRONT: ((0, 0), (0, 2), (0, 8), (0, 6)),
    Face.RIGHT: ((0, 2), (2, 2), (2, 8), (0, 8)),
    Face.LEFT: ((0, 0), (2, 0), (2, 6), (0, 6)),
    Face.BACK: ((2, 0), (2, 2), (2, 8), (2, 6)),
    Face.BOTTOM: ((2, 6), (2, 8), (0, 8), (0, 6)),
}

EDGE_QUADSETS: Dict[Face, Tuple[Tuple[int, int], ...]] = {
    Face.TOP: ((2, 1), (1, 2), (0, 1), (1, 0)),
    Face.FRONT: ((0, 1), (0, 5), (0, 7), (0, 3)),
    Face.RIGHT: ((1, 2), (2, 5), (1, 8), (0, 5)),
    Face.LEFT: ((1, 0), (2, 3), (1, 6), (0, 3)),
    Face.BACK: ((2, 1), (2, 5), (2, 7), (2, 3)),
    Face.BOTTOM: ((2, 7), (1, 8), (0, 7), (1, 6)),
}

SIDE_CYCLES: Dict[Face, Tuple[Face, ...]] = {
    Face.TOP: (Face.RIGHT, Face.FRONT, Face.LEFT, Face.BACK),
    Face.FRONT: (Face.TOP, Face.RIGHT, Face.BOTTOM, Face.LEFT),
    Face.RIGHT: (Face.TOP, Face.BACK, Face.BOTTOM, Face.FRONT),
    Face.LEFT: (Face.TOP, Face.BACK, Face.BOTTOM, Face.FRONT),
    Face.BACK: (Face.TOP, Face.RIGHT, Face.BOTTOM, Face.LEFT),
    Face.BOTTOM: (Face.RIGHT, Face.FRONT, Face.LEFT, Face.BACK),
}

# Faces whose outside observer looks against the axis frame above, so their
# clockwise turn runs backwards through the quadset tables.
MIRRORED_FACES: FrozenSet[Face] = frozenset({Face.BACK, Face.BOTTOM, Face.LEFT})

# Quadset steps per rotation for a face seen in its own axis frame
ROTATION_STEPS: Dict[FaceRotation, int] = {
    FaceRotation.CLOCKWISE: 1,
    FaceRotation.COUNTERCLOCKWISE: -1,
    FaceRotation.DOUBLE: 2,
}

INVERSE_ROTATIONS: Dict[FaceRotation, FaceRotation] = {
    FaceRotation.CLOCKWISE: FaceRotation.COUNTERCLOCKWISE,
    FaceRotation.COUNTERCLOCKWISE: FaceRotation.CLOCKWISE,
    FaceRotation.DOUBLE: FaceRotation.DOUBLE,
}


def _is_integral(value) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, (bool, np.bool_))


def coerce_face(value) -> Face:
    """
    Convert a value to a Face.

    Args:
        value: A Face, an int in 0..5 or a face name such as "top"

    Returns:
        Face: The matching face

    Raises:
        InvalidFaceError: If the value does not name one of the 6 faces
    """
    if isinstance(value, Face):
        return value
    if isinstance(value, str):
        try:
            return Face[value.upper()]
        except KeyError:
            raise InvalidFaceError(f"Invalid face '{value}'", value=value)
    if _is_integral(value):
        try:
            return Face(int(value))
        except ValueError:
            pass
    raise InvalidFaceError(f"Invalid face {value!r}. Must be one of {[f.name for f in Face]}", value=value)


def coerce_rotation(value) -> FaceRotation:
    """
    Convert a value to a FaceRotation.

    Args:
        value: A FaceRotation, an int in 0..2 or a rotation name such as "clockwise"

    Returns:
        FaceRotation: The matching rotation

    Raises:
        InvalidRotationError: If the value does not name one of the 3 rotations
    """
    if isinstance(value, FaceRotation):
        return value
    if isinstance(value, str):
        try:
            return FaceRotation[value.upper()]
        except KeyError:
            raise InvalidRotationError(f"Invalid rotation '{value}'", value=value)
    if _is_integral(value):
        try:
            return FaceRotation(int(value))
        except ValueError:
            pass
    raise InvalidRotationError(
        f"Invalid rotation {value!r}. Must be one of {[r.name for r in FaceRotation]}", value=value
    )


def quadset_steps(face: Face, rotation: FaceRotation) -> int:
    """Number of forward steps through the face's quadset tables for a rotation."""
    steps = ROTATION_STEPS[rotation]
    if face in MIRRORED_FACES:
        steps = -steps
    return steps % 4
