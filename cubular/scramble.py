"""
Seeded scrambles: reproducible move sequences and the cubes they produce.
"""

from typing import Iterable, Iterator, List, Optional

import numpy as np

from .config import settings
from .cube import Cube
from .exceptions import InvalidSeedError
from .logging import get_logger
from .moves import MOVE_COUNT, Move, get_default_rng
from .operations import apply_move, generate_solved, unapply_move

logger = get_logger(__name__)

SEED_LIMIT = 2 ** 64


def get_default_scramble_intensity() -> int:
    """Number of moves used to scramble a cube by default."""
    return settings.scramble_intensity


def validate_seed(seed) -> int:
    """
    Check that a seed is an unsigned 64-bit integer.

    Raises:
        InvalidSeedError: If seed is not an integer in [0, 2**64)
    """
    if isinstance(seed, (bool, np.bool_)) or not isinstance(seed, (int, np.integer)):
        logger.debug("invalid_seed", seed=repr(seed))
        raise InvalidSeedError(f"Seed must be an integer, got {type(seed).__name__}", value=seed)
    seed = int(seed)
    if not 0 <= seed < SEED_LIMIT:
        logger.debug("invalid_seed", seed=seed)
        raise InvalidSeedError(f"Seed {seed} is outside [0, 2**64)", value=seed)
    return seed


def generate_seed(rng: Optional[np.random.Generator] = None) -> int:
    """
    Draw a random seed.

    Args:
        rng (np.random.Generator, optional): Random stream to draw from.
            A process-wide default generator is used when omitted.

    Returns:
        int: A seed in [0, 2**64)
    """
    if rng is None:
        rng = get_default_rng()
    return int(rng.integers(0, SEED_LIMIT, dtype=np.uint64))


def generate_moves_from_seed(seed: int, number_of_moves: int) -> List[Move]:
    """
    Generate the first moves of the sequence belonging to a seed.

    The same seed always yields the same moves, and a shorter request is a
    prefix of a longer one.

    Args:
        seed (int): Unsigned 64-bit seed
        number_of_moves (int): How many moves to generate

    Returns:
        List[Move]: The generated moves in order

    Raises:
        InvalidSeedError: If seed is not an unsigned 64-bit integer
        ValueError: If number_of_moves is negative
    """
    seed = validate_seed(seed)
    if isinstance(number_of_moves, (bool, np.bool_)) or not isinstance(number_of_moves, (int, np.integer)):
        raise ValueError(f"number_of_moves must be an integer, got {type(number_of_moves).__name__}")
    if number_of_moves < 0:
        raise ValueError(f"number_of_moves must be non-negative, got {number_of_moves}")

    rng = np.random.default_rng(seed)
    return [Move.from_index(rng.integers(0, MOVE_COUNT)) for _ in range(number_of_moves)]


class Scramble:
    """
    An ordered, growable sequence of moves.

    Attributes:
        moves (List[Move]): The moves in the order they are applied
        seed (int, optional): Seed the moves were generated from, or None
            when the scramble was assembled by hand
    """

    def __init__(self, moves: Optional[Iterable[Move]] = None, seed: Optional[int] = None):
        self.moves: List[Move] = []
        self.seed = None if seed is None else validate_seed(seed)
        if moves is not None:
            self.extend(moves)

    @classmethod
    def from_seed(cls, seed: int, number_of_moves: Optional[int] = None) -> 'Scramble':
        """
        Build the scramble belonging to a seed.

        Args:
            seed (int): Unsigned 64-bit seed
            number_of_moves (int, optional): Defaults to the scramble intensity
        """
        if number_of_moves is None:
            number_of_moves = get_default_scramble_intensity()
        scramble = cls(generate_moves_from_seed(seed, number_of_moves), seed=seed)
        logger.debug("scramble_generated", seed=scramble.seed, number_of_moves=number_of_moves)
        return scramble

    def append(self, move: Move):
        """Add a move to the end of the scramble."""
        if not isinstance(move, Move):
            move = Move(*move)
        self.moves.append(move)

    def extend(self, moves: Iterable[Move]):
        for move in moves:
            self.append(move)

    def inverse(self) -> 'Scramble':
        """Return the hand-assembled scramble that undoes this one."""
        return Scramble(move.inverse() for move in reversed(self.moves))

    def apply(self, cube: Cube) -> Cube:
        """Apply every move to a cube in place, in order."""
        for move in self.moves:
            apply_move(cube, move)
        return cube

    def unapply(self, cube: Cube) -> Cube:
        """Undo every move on a cube in place, in reverse order."""
        for move in reversed(self.moves):
            unapply_move(cube, move)
        return cube

    def __len__(self) -> int:
        return len(self.moves)

    def __iter__(self) -> Iterator[Move]:
        return iter(self.moves)

    def __getitem__(self, index):
        return self.moves[index]

    def __eq__(self, other: 'Scramble') -> bool:
        if not isinstance(other, Scramble):
            return False
        return self.seed == other.seed and self.moves == other.moves

    def __repr__(self) -> str:
        return f"Scramble(seed={self.seed}, moves={len(self.moves)})"

    def __str__(self) -> str:
        return "\n".join(str(move) for move in self.moves)


def apply_scramble(cube: Cube, scramble: Scramble) -> Cube:
    """Apply all moves of a scramble to a cube in place."""
    logger.debug("scramble_applied", seed=scramble.seed, number_of_moves=len(scramble))
    return scramble.apply(cube)


def unapply_scramble(cube: Cube, scramble: Scramble) -> Cube:
    """Undo all moves of a scramble on a cube in place."""
    logger.debug("scramble_unapplied", seed=scramble.seed, number_of_moves=len(scramble))
    return scramble.unapply(cube)


def generate_scrambled(seed: Optional[int] = None) -> Cube:
    """
    Create a cube scrambled by the default number of moves from a seed.

    The number of moves is the scramble_intensity setting (50 unless
    CUBULAR_SCRAMBLE_INTENSITY is set in the environment or in a .env file
    in the working directory), so the cube for a given seed is only
    reproducible under the same setting. solve_scrambled_from_seed() reads
    the same setting.

    Args:
        seed (int, optional): Unsigned 64-bit seed; a random one is drawn
            when omitted

    Returns:
        Cube: A new scrambled cube
    """
    if seed is None:
        seed = generate_seed()
    return apply_scramble(generate_solved(), Scramble.from_seed(seed))
