import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from .accuracy import XY_DEGREES_OF_FREEDOM, Z_DEGREES_OF_FREEDOM, accuracy_radius, chi_squared_value
from .estimator import EstimatorConfig, multilaterate
from .geo import EnuPoint, GeoPoint, enu_to_geo_point, geo_point_to_enu
from .position import Measurement, Position
from .ranging import rssi_to_distance, rssi_variance_to_distance_variance

logger = logging.getLogger("mlat.locator")

DEFAULT_PATH_LOSS_EXPONENT = 3.0


@dataclass
class AccessPointObservation:
    """One scanned access point: its surveyed location and the received signal."""
    latitude: float
    longitude: float
    rssi: float
    xy_variance: float
    altitude: Optional[float] = None
    z_variance: Optional[float] = None
    path_loss_exponent: float = DEFAULT_PATH_LOSS_EXPONENT


@dataclass
class LocateResult:
    location: GeoPoint
    xy_accuracy_radius: float
    z_accuracy_radius: Optional[float]
    iterations: int
    converged: bool


def _has_altitude(o: AccessPointObservation) -> bool:
    return o.altitude is not None and o.z_variance is not None


def observations_to_measurements(observations: Sequence[AccessPointObservation], ref: GeoPoint, compute_z: bool) -> List[Measurement]:
    out = []
    for o in observations:
        enu = geo_point_to_enu(GeoPoint(o.latitude, o.longitude, o.altitude if compute_z else None), ref)
        distance = rssi_to_distance(o.rssi, o.path_loss_exponent)
        distance_variance = rssi_variance_to_distance_variance(o.rssi, o.path_loss_exponent)
        if compute_z:
            z = enu.z
            z_variance = o.z_variance + distance_variance
        else:
            # no altitudes: every reference sits on the z=0 plane
            z = 0.0
            z_variance = o.xy_variance + distance_variance
        position = Position(enu.x, enu.y, z, o.xy_variance + distance_variance, z_variance)
        out.append(Measurement(position=position, distance=distance))
    return out


def locate(observations: Sequence[AccessPointObservation], confidence_level: float, estimator_config: Optional[EstimatorConfig] = None) -> LocateResult:
    """Estimate a geodetic location from access point scans.

    Positions are projected to a local ENU frame anchored at the first
    observation. Altitude is only estimated when every observation carries
    one, otherwise the result has no altitude and no z radius. A single
    observation is reported at the access point itself without iterating.
    """
    if not observations:
        raise ValueError("locate needs at least one observation")
    chi_squared_value(confidence_level, XY_DEGREES_OF_FREEDOM)  # raises on a bad level

    compute_z = all(_has_altitude(o) for o in observations)
    first = observations[0]
    ref = GeoPoint(first.latitude, first.longitude, first.altitude if compute_z else None)

    if len(observations) == 1:
        # a single range fixes no bearing: report the access point itself,
        # uncertain by its own variance plus that of the range
        distance_variance = rssi_variance_to_distance_variance(first.rssi, first.path_loss_exponent)
        xy_radius = accuracy_radius(first.xy_variance + distance_variance, confidence_level, XY_DEGREES_OF_FREEDOM)
        z_radius = accuracy_radius(first.z_variance, confidence_level, Z_DEGREES_OF_FREEDOM) if compute_z else None
        return LocateResult(location=ref, xy_accuracy_radius=xy_radius, z_accuracy_radius=z_radius, iterations=0, converged=False)

    measurements = observations_to_measurements(observations, ref, compute_z)
    result = multilaterate(measurements, estimator_config)
    p = result.position

    location = enu_to_geo_point(EnuPoint(p.x, p.y, p.z if compute_z else None), ref)
    xy_radius = accuracy_radius(p.xy_variance, confidence_level, XY_DEGREES_OF_FREEDOM)
    z_radius = accuracy_radius(p.z_variance, confidence_level, Z_DEGREES_OF_FREEDOM) if compute_z else None
    logger.debug("located %d access points: %s xy_radius=%.2f", len(observations), location, xy_radius)
    return LocateResult(location=location, xy_accuracy_radius=xy_radius, z_accuracy_radius=z_radius, iterations=result.iterations, converged=result.converged)
