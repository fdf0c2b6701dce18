from dataclasses import dataclass, field
import math

import numpy as np


@dataclass(frozen=True)
class Position:
    """A point with horizontal and vertical variance (squared 1-sigma).

    Used both for reference points and for estimates.
    """
    x: float
    y: float
    z: float
    xy_variance: float
    z_variance: float

    def __sub__(self, other: "Position") -> "Position":
        # variances of a difference are the right-hand operand's
        return Position(
            x=self.x - other.x,
            y=self.y - other.y,
            z=self.z - other.z,
            xy_variance=other.xy_variance,
            z_variance=other.z_variance,
        )

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=float)

    def distance_to(self, other: "Position") -> float:
        d = self - other
        return math.sqrt(d.x * d.x + d.y * d.y + d.z * d.z)


@dataclass
class Measurement:
    position: Position
    distance: float
    # likelihood weight, overwritten by the estimator on every iteration
    weight: float = field(default=1.0, compare=False)
