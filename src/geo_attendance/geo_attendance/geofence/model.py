from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..common.validators import finite_number


@dataclass(frozen=True)
class WorkLocation:
    """An assigned check-in site (centre + radius in metres)."""

    name: str
    latitude: float
    longitude: float
    radius: Optional[float] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Optional["WorkLocation"]:
        """Return None when the entry has no usable centre."""
        latitude = finite_number(data.get("latitude"))
        longitude = finite_number(data.get("longitude"))
        if latitude is None or longitude is None:
            return None
        if not (-90.0 <= latitude <= 90.0 and -180.0 <= longitude <= 180.0):
            return None
        radius = finite_number(data.get("radius"))
        name = data.get("name")
        return cls(
            name=str(name) if name else "Work Location",
            latitude=latitude,
            longitude=longitude,
            radius=radius if radius and radius > 0 else None,
        )

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "radius": self.radius,
        }


@dataclass(frozen=True)
class GeofenceResult:
    is_valid: bool
    distance: Optional[int]
    message: str
    work_location_name: Optional[str] = None
    nearest_location: Optional[WorkLocation] = None

    def to_dict(self) -> dict:
        return {
            "isValid": self.is_valid,
            "distance": self.distance,
            "message": self.message,
            "workLocationName": self.work_location_name,
            "nearestLocation": self.nearest_location.to_dict() if self.nearest_location else None,
        }
