"""
Seed replay: restore a cube scrambled by generate_scrambled().
"""

from .cube import Cube
from .logging import get_logger
from .scramble import Scramble, unapply_scramble

logger = get_logger(__name__)


def solve_scrambled_from_seed(cube: Cube, seed: int) -> Cube:
    """
    Undo the default scramble of a seed on a cube in place.

    The moves are regenerated from the seed and their inverses replayed in
    reverse order. This only restores cubes scrambled by generate_scrambled()
    with the same seed and scramble intensity; no search is performed.

    Args:
        cube (Cube): The scrambled cube
        seed (int): Seed the cube was scrambled with

    Returns:
        Cube: The same cube, for chaining
    """
    scramble = Scramble.from_seed(seed)
    unapply_scramble(cube, scramble)
    logger.debug("seed_replay_finished", seed=seed, solved=cube.is_solved())
    return cube
