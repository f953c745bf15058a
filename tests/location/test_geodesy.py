import pytest

from geo_attendance.location.geodesy import haversine_m, normalize_longitude_delta


def test_same_point_is_zero():
    assert haversine_m(40.7128, -74.006, 40.7128, -74.006) == 0.0


def test_new_york_to_los_angeles():
    distance = haversine_m(40.7128, -74.0060, 34.0522, -118.2437)

    assert distance == pytest.approx(3_936_000, rel=0.01)


def test_distance_is_symmetric():
    a = haversine_m(51.5074, -0.1278, 48.8566, 2.3522)
    b = haversine_m(48.8566, 2.3522, 51.5074, -0.1278)

    assert a == pytest.approx(b)


def test_antimeridian_takes_the_short_way():
    distance = haversine_m(0.0, 179.9, 0.0, -179.9)

    assert distance == pytest.approx(22_239, abs=1)


def test_longitude_delta_is_wrapped():
    assert normalize_longitude_delta(359.8) == pytest.approx(-0.2)
    assert normalize_longitude_delta(-359.8) == pytest.approx(0.2)
    assert normalize_longitude_delta(180.0) == 180.0
    assert normalize_longitude_delta(-180.0) == -180.0
    assert normalize_longitude_delta(10.0) == 10.0
