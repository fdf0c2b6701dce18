import math

from multilateration.core.geo import EARTH_RADIUS, EnuPoint, GeoPoint, enu_to_geo_point, geo_point_to_enu


def test_one_degree_north():
    ref = GeoPoint(0.0, 0.0, 10.0)
    p = geo_point_to_enu(GeoPoint(1.0, 0.0, 15.0), ref)
    assert abs(p.y - EARTH_RADIUS * math.pi / 180.0) < 1e-6
    assert abs(p.x) < 1e-9
    assert p.z == 5.0


def test_east_offset_shrinks_with_latitude():
    at_equator = geo_point_to_enu(GeoPoint(0.0, 0.001), GeoPoint(0.0, 0.0))
    at_sixty = geo_point_to_enu(GeoPoint(60.0, 0.001), GeoPoint(60.0, 0.0))
    assert abs(at_sixty.x - at_equator.x / 2.0) < 1e-6


def test_altitude_unknown():
    p = geo_point_to_enu(GeoPoint(47.0, 8.0, 400.0), GeoPoint(47.0, 8.0))
    assert p.z is None
    g = enu_to_geo_point(EnuPoint(1.0, 1.0, 3.0), GeoPoint(47.0, 8.0))
    assert g.altitude is None


def test_enu_back_to_geo():
    ref = GeoPoint(47.3769, 8.5417, 408.0)
    g = enu_to_geo_point(EnuPoint(120.0, -45.0, 7.5), ref)
    back = geo_point_to_enu(g, ref)
    assert abs(back.x - 120.0) < 1e-6
    assert abs(back.y + 45.0) < 1e-6
    assert abs(back.z - 7.5) < 1e-9
