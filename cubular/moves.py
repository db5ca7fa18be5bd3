"""
Moves: one face turned by one rotation amount.
"""

from dataclasses import dataclass
from typing import Optional

import numpy as np

from .geometry import (
    FACE_NAMES,
    INVERSE_ROTATIONS,
    ROTATION_NAMES,
    Face,
    FaceRotation,
    coerce_face,
    coerce_rotation,
)

MOVE_COUNT = len(Face) * len(FaceRotation)

# Process-wide generator for callers that do not bring their own
_default_rng = np.random.default_rng()


def get_default_rng() -> np.random.Generator:
    """Get the process-wide generator used when no generator is passed."""
    return _default_rng


@dataclass(frozen=True)
class Move:
    """
    A face paired with a rotation amount.

    Attributes:
        face (Face): The side being turned
        rotation (FaceRotation): How far it turns
    """

    face: Face
    rotation: FaceRotation = FaceRotation.CLOCKWISE

    def __post_init__(self):
        object.__setattr__(self, "face", coerce_face(self.face))
        object.__setattr__(self, "rotation", coerce_rotation(self.rotation))

    @classmethod
    def from_index(cls, value: int) -> 'Move':
        """
        Map an integer onto the 18 possible moves.

        Face is value mod 6 and rotation is (value // 6) mod 3.
        """
        value = int(value)
        return cls(Face(value % len(Face)), FaceRotation((value // len(Face)) % len(FaceRotation)))

    def inverse(self) -> 'Move':
        """Return the move that undoes this one."""
        return Move(self.face, INVERSE_ROTATIONS[self.rotation])

    def __str__(self) -> str:
        return f"rotate {FACE_NAMES[self.face]} face {ROTATION_NAMES[self.rotation]}"


def generate_random_move(rng: Optional[np.random.Generator] = None) -> Move:
    """
    Draw one of the 18 moves uniformly at random.

    Args:
        rng (np.random.Generator, optional): Random stream to draw from.
            A process-wide default generator is used when omitted.

    Returns:
        Move: The drawn move
    """
    if rng is None:
        rng = get_default_rng()
    return Move.from_index(rng.integers(0, MOVE_COUNT))
