"""
Random scrambles and a few well-known patterns.
"""

import numpy as np

from MoveTables import MOVES

SUPERFLIP = "UR2FBRB2RU2LB2RU'D'R2FR'LB2U2F2"


def random_moves(move_count, seed=None):
    """`move_count` operators drawn uniformly from the 12 (reproducible with `seed`)."""
    if move_count < 0:
        raise ValueError(f"move_count must be >= 0, got {move_count}")
    rng = np.random.default_rng(seed)
    return [MOVES[i] for i in rng.integers(0, len(MOVES), size=move_count)]


def scramble(cube, move_count, seed=None):
    """Apply `move_count` random moves to `cube` in place and return them."""
    moves = random_moves(move_count, seed)
    cube.apply_moves(moves)
    return moves


def superflip(cube):
    """Copy of `cube` with every edge flipped in place."""
    flipped = cube.clone()
    flipped.apply_moves(SUPERFLIP)
    return flipped
