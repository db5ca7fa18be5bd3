"""
Core Cube class for representing and manipulating a 3x3x3 puzzle cube.
"""

import numpy as np
from typing import Optional

from .exceptions import InvalidCubeError
from .geometry import (
    PLANE_COUNT,
    PIECES_PER_PLANE,
    SIDE_COUNT,
    CORNER_QUADSETS,
    EDGE_QUADSETS,
    FACE_SQUARES,
    SIDE_CYCLES,
    SOLVED_COLORS,
    Color,
    Face,
    FaceRotation,
    coerce_face,
    coerce_rotation,
    quadset_steps,
)


CUBE_SHAPE = (PLANE_COUNT, PIECES_PER_PLANE, SIDE_COUNT)


def _solved_data() -> np.ndarray:
    # Each piece takes the solved color of every outer side it touches.
    data = np.zeros(CUBE_SHAPE, dtype=np.int8)
    for plane in range(PLANE_COUNT):
        for index in range(PIECES_PER_PLANE):
            row, column = divmod(index, 3)
            piece = data[plane, index]
            if row == 0:
                piece[Face.TOP] = SOLVED_COLORS[Face.TOP]
            if row == 2:
                piece[Face.BOTTOM] = SOLVED_COLORS[Face.BOTTOM]
            if column == 0:
                piece[Face.LEFT] = SOLVED_COLORS[Face.LEFT]
            if column == 2:
                piece[Face.RIGHT] = SOLVED_COLORS[Face.RIGHT]
            if plane == 0:
                piece[Face.FRONT] = SOLVED_COLORS[Face.FRONT]
            if plane == 2:
                piece[Face.BACK] = SOLVED_COLORS[Face.BACK]
    data.setflags(write=False)
    return data


SOLVED_DATA = _solved_data()


def _as_index_arrays(pairs):
    planes, indices = zip(*pairs)
    return np.array(planes), np.array(indices)


_FACE_INDEX = {face: _as_index_arrays(pairs) for face, pairs in FACE_SQUARES.items()}
_QUADSET_INDEX = {
    face: (_as_index_arrays(CORNER_QUADSETS[face]), _as_index_arrays(EDGE_QUADSETS[face]))
    for face in Face
}
_SIDE_CYCLE_INDEX = {face: np.array(cycle) for face, cycle in SIDE_CYCLES.items()}


class Cube:
    """
    Represents a 3x3x3 puzzle cube as 3 planes of 9 pieces.

    Attributes:
        data (np.ndarray): Array of shape (3, 9, 6) holding one Color per
            (plane, index, side). Plane 0 is the front slice.
    """

    def __init__(self, data: Optional[np.ndarray] = None):
        """
        Initialize a Cube.

        Args:
            data (np.ndarray, optional): Initial piece colors. The solved
                cube is used when omitted.

        Raises:
            InvalidCubeError: If data has the wrong shape or holds values
                that are not colors
        """
        if data is None:
            self.data = SOLVED_DATA.copy()
            return

        data = np.asarray(data)
        if data.shape != CUBE_SHAPE:
            raise InvalidCubeError(
                f"Data shape {data.shape} doesn't match cube shape {CUBE_SHAPE}",
                details={"shape": data.shape},
            )
        if not np.issubdtype(data.dtype, np.integer):
            raise InvalidCubeError(f"Cube data must hold integer colors, got {data.dtype}")
        if data.min() < min(Color) or data.max() > max(Color):
            raise InvalidCubeError("Cube data holds values that are not colors")
        self.data = data.astype(np.int8)

    def get_piece(self, plane: int, index: int) -> np.ndarray:
        """
        Get a copy of the 6 side colors of one piece.

        Args:
            plane, index: Position of the piece

        Returns:
            np.ndarray: Colors indexed by Face
        """
        return self.data[plane, index].copy()

    def set_piece(self, plane: int, index: int, colors):
        """
        Replace the 6 side colors of one piece.

        Args:
            plane, index: Position of the piece
            colors: Sequence of 6 colors indexed by Face
        """
        colors = np.asarray(colors)
        if colors.shape != (SIDE_COUNT,):
            raise InvalidCubeError(f"A piece needs {SIDE_COUNT} colors, got shape {colors.shape}")
        if not np.issubdtype(colors.dtype, np.integer):
            raise InvalidCubeError(f"Piece colors must be integers, got {colors.dtype}")
        if colors.min() < min(Color) or colors.max() > max(Color):
            raise InvalidCubeError("Piece holds values that are not colors")
        self.data[plane, index] = colors

    def get_face(self, face) -> np.ndarray:
        """
        Get the visible 3x3 colors of one side, as seen facing that side.

        Args:
            face: The side to read

        Returns:
            np.ndarray: A new (3, 3) array of colors
        """
        face = coerce_face(face)
        planes, indices = _FACE_INDEX[face]
        return self.data[planes, indices, face].reshape(3, 3)

    def rotate_face(self, face, rotation=FaceRotation.CLOCKWISE):
        """
        Turn one side of the cube in place.

        The 4 corners and the 4 edges around the face are each cycled as one
        group, and every moved piece is re-oriented about the face axis so
        its stickers keep facing the right way. The center is untouched.

        Args:
            face: The side to turn
            rotation: Clockwise, counterclockwise or double (180 degrees),
                as seen facing that side

        Raises:
            InvalidFaceError: If face is not one of the 6 faces
            InvalidRotationError: If rotation is not one of the 3 rotations
        """
        face = coerce_face(face)
        rotation = coerce_rotation(rotation)
        steps = quadset_steps(face, rotation)
        cycle = _SIDE_CYCLE_INDEX[face]
        # Sticker facing cycle[k] moves to cycle[k + steps].
        targets = np.roll(cycle, -steps)

        for planes, indices in _QUADSET_INDEX[face]:
            # Fancy indexing copies, so every quadset reads pre-move values.
            moved = np.roll(self.data[planes, indices], steps, axis=0)
            reoriented = moved.copy()
            reoriented[:, targets] = moved[:, cycle]
            self.data[planes, indices] = reoriented

    def is_solved(self) -> bool:
        """Check whether every piece matches the solved cube."""
        return np.array_equal(self.data, SOLVED_DATA)

    def copy(self) -> 'Cube':
        """
        Create a deep copy of the cube.

        Returns:
            A new Cube instance with copied data
        """
        return Cube(self.data.copy())

    def __repr__(self) -> str:
        """String representation of the cube."""
        return f"Cube(solved={self.is_solved()})"

    def __str__(self) -> str:
        """Detailed string representation."""
        lines = [repr(self)]
        for face in Face:
            lines.append(f"{face.name.lower()}:\n{self.get_face(face)}")
        return "\n".join(lines)

    def __eq__(self, other: 'Cube') -> bool:
        """Check equality with another cube."""
        if not isinstance(other, Cube):
            return False
        return np.array_equal(self.data, other.data)
