import math
from dataclasses import dataclass
from typing import Optional

# WGS84 semi-major axis (meters)
EARTH_RADIUS = 6378137.0


@dataclass(frozen=True)
class GeoPoint:
    latitude: float
    longitude: float
    altitude: Optional[float] = None


@dataclass(frozen=True)
class EnuPoint:
    x: float
    y: float
    z: Optional[float] = None


def geo_point_to_enu(point: GeoPoint, ref: GeoPoint) -> EnuPoint:
    """East-North-Up offset of ``point`` from ``ref`` in meters.

    Equirectangular approximation: the Earth is treated as flat around the
    reference point, fine for access-point distances but degrading with range.
    z is only known when both altitudes are.
    """
    d_lat = math.radians(point.latitude - ref.latitude)
    d_lon = math.radians(point.longitude - ref.longitude)
    lat_rad = math.radians(ref.latitude)

    x = EARTH_RADIUS * d_lon * math.cos(lat_rad)
    y = EARTH_RADIUS * d_lat
    z = None
    if point.altitude is not None and ref.altitude is not None:
        z = point.altitude - ref.altitude
    return EnuPoint(x, y, z)


def enu_to_geo_point(point: EnuPoint, ref: GeoPoint) -> GeoPoint:
    lat_rad = math.radians(ref.latitude)
    d_lat = point.y / EARTH_RADIUS
    d_lon = point.x / (EARTH_RADIUS * math.cos(lat_rad))

    altitude = None
    if point.z is not None and ref.altitude is not None:
        altitude = ref.altitude + point.z
    return GeoPoint(ref.latitude + math.degrees(d_lat), ref.longitude + math.degrees(d_lon), altitude)
