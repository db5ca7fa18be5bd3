"""
Basic usage examples for the Cubular API.
"""

from cubular import (
    Face,
    FaceRotation,
    Move,
    Scramble,
    apply_scramble,
    generate_scrambled,
    generate_solved,
    is_solved,
    rotate_face,
    solve_scrambled_from_seed,
    unapply_scramble,
)
from cubular.logging import configure_logging
from cubular.utils import format_face, format_piece, sticker_counts


def example_basic_cube():
    """Create a solved cube and look at it."""
    print("=== Basic Cube Example ===")

    cube = generate_solved()
    print(f"Created cube: {cube!r}")
    for face in Face:
        print(f"{face.name.lower()}:\n{format_face(cube, face)}")

    print(f"\nPiece at plane 0, index 0: {format_piece(cube.get_piece(0, 0))}")
    print()


def example_rotations():
    """Demonstrate face rotations."""
    print("=== Rotation Example ===")

    cube = generate_solved()
    rotate_face(cube, Face.TOP, FaceRotation.CLOCKWISE)
    print(f"After turning the top face clockwise, front:\n{format_face(cube, Face.FRONT)}")

    for _ in range(3):
        rotate_face(cube, Face.TOP, FaceRotation.CLOCKWISE)
    print(f"After three more turns the cube is solved: {is_solved(cube)}")
    print()


def example_scramble():
    """Demonstrate scrambling and unscrambling."""
    print("=== Scramble Example ===")

    scramble = Scramble.from_seed(2019, 5)
    print(f"{scramble!r}:\n{scramble}")

    cube = apply_scramble(generate_solved(), scramble)
    print(f"\nFront after scrambling:\n{format_face(cube, Face.FRONT)}")
    counts = {color.name: count for color, count in sticker_counts(cube).items()}
    print(f"Sticker counts: {counts}")

    unapply_scramble(cube, scramble)
    print(f"Solved after unapplying: {is_solved(cube)}")

    scramble.append(Move(Face.LEFT, FaceRotation.DOUBLE))
    print(f"Grown scramble: {scramble!r}")
    print()


def example_seed_replay():
    """Demonstrate restoring a cube from its seed."""
    print("=== Seed Replay Example ===")

    seed = 42
    cube = generate_scrambled(seed)
    print(f"Scrambled from seed {seed}: solved={is_solved(cube)}")

    solve_scrambled_from_seed(cube, seed)
    print(f"After replaying seed {seed}: solved={is_solved(cube)}")
    print()


if __name__ == "__main__":
    configure_logging("debug")

    example_basic_cube()
    example_rotations()
    example_scramble()
    example_seed_replay()

    print("=== All examples completed! ===")
