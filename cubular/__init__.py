"""
Cubular Python API
A Python library for simulating a 3x3x3 puzzle cube.
"""

__version__ = "0.2.0"
__author__ = "Domingos97"

from .cube import Cube
from .exceptions import (
    CubularError,
    InvalidCubeError,
    InvalidFaceError,
    InvalidRotationError,
    InvalidSeedError,
)
from .geometry import Color, Face, FaceRotation
from .moves import Move, generate_random_move
from .operations import (
    apply_move,
    equivalence,
    generate_solved,
    get_face,
    is_solved,
    rotate_face,
    transform,
    unapply_move,
)
from .scramble import (
    Scramble,
    apply_scramble,
    generate_moves_from_seed,
    generate_scrambled,
    generate_seed,
    get_default_scramble_intensity,
    unapply_scramble,
)
from .solver import solve_scrambled_from_seed
from .utils import face_name, rotation_name, validate_face, validate_rotation

__all__ = [
    "Cube",
    "Color",
    "Face",
    "FaceRotation",
    "Move",
    "Scramble",
    "CubularError",
    "InvalidCubeError",
    "InvalidFaceError",
    "InvalidRotationError",
    "InvalidSeedError",
    "generate_solved",
    "get_face",
    "rotate_face",
    "apply_move",
    "unapply_move",
    "equivalence",
    "is_solved",
    "transform",
    "generate_random_move",
    "generate_seed",
    "generate_moves_from_seed",
    "generate_scrambled",
    "get_default_scramble_intensity",
    "apply_scramble",
    "unapply_scramble",
    "solve_scrambled_from_seed",
    "face_name",
    "rotation_name",
    "validate_face",
    "validate_rotation",
]
