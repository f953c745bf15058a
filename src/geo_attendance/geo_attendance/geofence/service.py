from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, Union

from ..common.validators import finite_number
from ..core.constants import DEFAULT_GEOFENCE_RADIUS_M
from ..location.geodesy import haversine_m
from .model import GeofenceResult, WorkLocation

logger = logging.getLogger(__name__)


class GeofenceService:
    """Checks a fix against the nearest of an employee's work locations."""

    def __init__(self, *, default_radius_m: float = DEFAULT_GEOFENCE_RADIUS_M):
        self._default_radius_m = float(default_radius_m)

    def _locations(self, raw: Iterable[Union[WorkLocation, Mapping[str, Any]]]) -> list[WorkLocation]:
        out: list[WorkLocation] = []
        for item in raw:
            if isinstance(item, WorkLocation):
                out.append(item)
                continue
            location = WorkLocation.from_mapping(item) if isinstance(item, Mapping) else None
            if location is None:
                logger.debug("Skipping work location without a usable centre: %r", item)
                continue
            out.append(location)
        return out

    def evaluate(
        self,
        latitude: Any,
        longitude: Any,
        work_locations: Iterable[Union[WorkLocation, Mapping[str, Any]]],
        *,
        default_radius_m: float | None = None,
    ) -> GeofenceResult:
        lat = finite_number(latitude)
        lon = finite_number(longitude)
        if lat is None or lon is None or not (-90.0 <= lat <= 90.0 and -180.0 <= lon <= 180.0):
            return GeofenceResult(is_valid=False, distance=None, message="No location provided")

        locations = self._locations(work_locations or [])
        if not locations:
            return GeofenceResult(is_valid=False, distance=None, message="No work locations assigned")

        nearest = min(locations, key=lambda wl: haversine_m(lat, lon, wl.latitude, wl.longitude))
        exact = haversine_m(lat, lon, nearest.latitude, nearest.longitude)
        distance = round(exact)
        radius = nearest.radius or default_radius_m or self._default_radius_m
        is_valid = exact <= radius

        if is_valid:
            message = f"Location verified! You are {distance}m from {nearest.name}."
        else:
            message = f"You are {distance}m from {nearest.name}. Must be within {radius:g}m."

        return GeofenceResult(
            is_valid=is_valid,
            distance=distance,
            message=message,
            work_location_name=nearest.name,
            nearest_location=nearest,
        )
