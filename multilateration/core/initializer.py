import numpy as np

from .position import Position

INITIAL_GUESS_SEED = 0x6D6C6174
COORDINATE_RANGE = (-100.0, 100.0)
VARIANCE_RANGE = (0.0, 100.0)


def initial_guess(seed: int = INITIAL_GUESS_SEED) -> Position:
    """Seeded starting estimate, only used to break symmetry.

    The same seed always yields the same Position.
    """
    rng = np.random.default_rng(seed)
    x, y, z = rng.uniform(COORDINATE_RANGE[0], COORDINATE_RANGE[1], size=3)
    xy_var, z_var = rng.uniform(VARIANCE_RANGE[0], VARIANCE_RANGE[1], size=2)
    return Position(float(x), float(y), float(z), float(xy_var), float(z_var))
