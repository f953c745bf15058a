from __future__ import annotations

from math import atan2, cos, radians, sin, sqrt

from ..core.constants import EARTH_MEAN_RADIUS_M


def normalize_longitude_delta(delta: float) -> float:
    """Wrap a longitude difference into [-180, 180] degrees."""
    wrapped = (delta + 180.0) % 360.0 - 180.0
    if wrapped == -180.0 and delta > 0:
        return 180.0
    return wrapped


def haversine_m(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance in metres between two points given in degrees."""
    phi1 = radians(lat1)
    phi2 = radians(lat2)
    d_phi = radians(lat2 - lat1)
    d_lambda = radians(normalize_longitude_delta(lon2 - lon1))

    a = sin(d_phi / 2) ** 2 + cos(phi1) * cos(phi2) * sin(d_lambda / 2) ** 2
    a = min(1.0, max(0.0, a))
    c = 2 * atan2(sqrt(a), sqrt(1 - a))
    return EARTH_MEAN_RADIUS_M * c
