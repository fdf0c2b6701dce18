import logging
from dataclasses import dataclass
from typing import Iterable, Optional

import numpy as np

from multilateration import config
from .initializer import initial_guess
from .position import Measurement, Position

logger = logging.getLogger("mlat.estimator")


@dataclass(frozen=True)
class EstimatorConfig:
    max_iterations: int = config.MAX_ITERATIONS
    tolerance: float = config.TOLERANCE
    min_likelihood: float = config.MIN_LIKELIHOOD
    distance_sigma: float = config.DISTANCE_SIGMA
    position_learning_rate: float = config.POSITION_LEARNING_RATE
    variance_learning_rate: float = config.VARIANCE_LEARNING_RATE

    def __post_init__(self):
        if self.max_iterations < 1:
            raise ValueError("max_iterations must be at least 1")
        if self.tolerance < 0:
            raise ValueError("tolerance must not be negative")
        if self.min_likelihood < 0:
            raise ValueError("min_likelihood must not be negative")
        if not self.distance_sigma > 0:
            raise ValueError("distance_sigma must be positive")
        for name in ("position_learning_rate", "variance_learning_rate"):
            rate = getattr(self, name)
            if not 0.0 < rate <= 1.0:
                raise ValueError(f"{name} must be in (0, 1], got {rate}")


@dataclass
class EstimationResult:
    position: Position
    iterations: int
    converged: bool


def _scale_factors(observed: np.ndarray, estimated: np.ndarray) -> np.ndarray:
    # an estimate sitting exactly on a reference gets no correction from it
    scale = np.zeros_like(estimated)
    nonzero = estimated != 0.0
    scale[nonzero] = observed[nonzero] / estimated[nonzero]
    return scale


def _axis_weights(likelihood: np.ndarray, variance: np.ndarray) -> np.ndarray:
    # non-positive variance: no influence on that axis
    weights = np.zeros_like(likelihood)
    usable = variance > 0.0
    weights[usable] = likelihood[usable] / variance[usable]
    return weights


def multilaterate(measurements: Iterable[Measurement], estimator_config: Optional[EstimatorConfig] = None) -> EstimationResult:
    """Robust EM-style multilateration.

    Each iteration scores every measurement with a Gaussian likelihood of its
    range residual (floored at ``min_likelihood``), moves the estimate towards
    the likelihood and variance weighted mean of the points implied by the
    measured distances, then re-estimates the horizontal and vertical variance
    from the remaining residuals. Stops once every axis update is below
    ``tolerance`` or after ``max_iterations``.

    measurements: non-empty sequence of Measurement; their ``weight`` fields are
    overwritten in place
    raises ValueError for an empty sequence
    """
    cfg = estimator_config or EstimatorConfig()
    measurements = list(measurements)
    if not measurements:
        raise ValueError("multilateration needs at least one measurement")

    refs = np.array([m.position.as_array() for m in measurements], dtype=float)  # N x 3
    observed = np.array([m.distance for m in measurements], dtype=float)
    xy_var = np.array([m.position.xy_variance for m in measurements], dtype=float)
    z_var = np.array([m.position.z_variance for m in measurements], dtype=float)

    start = initial_guess()
    x = start.as_array()
    xy_variance = start.xy_variance
    z_variance = start.z_variance

    converged = False
    iterations = 0
    for it in range(cfg.max_iterations):
        iterations = it + 1

        # expectation: likelihood of each range under the current estimate
        diff = x - refs
        estimated = np.linalg.norm(diff, axis=1)
        residual = estimated - observed
        likelihood = np.exp(-0.5 * residual ** 2 / cfg.distance_sigma ** 2)
        likelihood = np.maximum(likelihood, cfg.min_likelihood)
        for m, w in zip(measurements, likelihood):
            m.weight = float(w)

        # maximization: weighted pull towards each implied position
        pull = diff * (_scale_factors(observed, estimated) - 1.0)[:, None]
        w_xy = _axis_weights(likelihood, xy_var)
        w_z = _axis_weights(likelihood, z_var)
        total_xy = w_xy.sum()
        total_z = w_z.sum()

        delta = np.zeros(3)
        if total_xy != 0.0:
            delta[:2] = (w_xy[:, None] * pull[:, :2]).sum(axis=0) / total_xy
        if total_z != 0.0:
            delta[2] = (w_z * pull[:, 2]).sum() / total_z
        x = x + cfg.position_learning_rate * delta

        # variance from residual offsets to the updated estimate
        diff_new = x - refs
        estimated_new = np.linalg.norm(diff_new, axis=1)
        offsets = diff_new * (1.0 - _scale_factors(observed, estimated_new))[:, None]
        total_likelihood = likelihood.sum()
        if total_likelihood != 0.0:
            fresh_xy = (likelihood * (offsets[:, 0] ** 2 + offsets[:, 1] ** 2) / 2.0).sum() / total_likelihood
            fresh_z = (likelihood * offsets[:, 2] ** 2).sum() / total_likelihood
            xy_variance += cfg.variance_learning_rate * (fresh_xy - xy_variance)
            z_variance += cfg.variance_learning_rate * (fresh_z - z_variance)

        if np.all(np.abs(delta) < cfg.tolerance):
            converged = True
            break

    position = Position(float(x[0]), float(x[1]), float(x[2]), float(xy_variance), float(z_variance))
    if not converged:
        logger.info("iteration cap of %d reached without convergence (%d measurements)", cfg.max_iterations, len(measurements))
    logger.debug("multilateration: n=%d iterations=%d converged=%s position=%s", len(measurements), iterations, converged, position)
    return EstimationResult(position=position, iterations=iterations, converged=converged)


def estimate_position(measurements: Iterable[Measurement], estimator_config: Optional[EstimatorConfig] = None) -> Position:
    return multilaterate(measurements, estimator_config).position
