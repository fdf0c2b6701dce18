import math

import pytest

from multilateration.core.accuracy import Z_DEGREES_OF_FREEDOM, accuracy_radius, chi_squared_value


def test_two_dof_closed_form():
    # chi-squared with 2 dof has quantile -2 ln(1 - p)
    for p in (0.5, 0.68, 0.95):
        assert abs(chi_squared_value(p, 2) - (-2.0 * math.log(1.0 - p))) < 1e-9


def test_one_dof_radius():
    r = accuracy_radius(4.0, 0.95, Z_DEGREES_OF_FREEDOM)
    assert abs(r - 2.0 * 1.959964) < 1e-5


def test_zero_and_negative_variance():
    assert accuracy_radius(0.0, 0.9) == 0.0
    assert accuracy_radius(-3.0, 0.9) == 0.0


@pytest.mark.parametrize("level", [0.0, 1.0, -0.5, 2.0])
def test_bad_confidence_level(level):
    with pytest.raises(ValueError):
        accuracy_radius(1.0, level)
