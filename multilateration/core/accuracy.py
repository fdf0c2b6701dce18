import math

from scipy.stats import chi2

XY_DEGREES_OF_FREEDOM = 2
Z_DEGREES_OF_FREEDOM = 1


def chi_squared_value(confidence_level: float, degrees_of_freedom: float) -> float:
    if not 0.0 < confidence_level < 1.0:
        raise ValueError("confidence level must be between 0 and 1 (exclusive)")
    return float(chi2.ppf(confidence_level, degrees_of_freedom))


def accuracy_radius(variance: float, confidence_level: float, degrees_of_freedom: float = XY_DEGREES_OF_FREEDOM) -> float:
    """Radius containing the true position with ``confidence_level`` probability."""
    # negative variance is clamped to zero
    return math.sqrt(max(variance, 0.0) * chi_squared_value(confidence_level, degrees_of_freedom))
