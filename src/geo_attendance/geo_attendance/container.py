from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .core.constants import DEFAULT_GEOFENCE_RADIUS_M
from .geofence.service import GeofenceService
from .location.factory import LocationRuleFactory
from .location.model import LocationThresholds
from .location.service import LocationIntegrityService


@dataclass(frozen=True)
class Container:
    thresholds: LocationThresholds

    location_service: LocationIntegrityService
    geofence_service: GeofenceService


def build_container(
    *,
    location_rules: Optional[Mapping[str, Any]] = None,
    default_radius_m: float = DEFAULT_GEOFENCE_RADIUS_M,
) -> Container:
    thresholds = LocationThresholds.from_mapping(location_rules)

    location_service = LocationIntegrityService(
        thresholds,
        rule_factory=LocationRuleFactory(thresholds),
    )
    geofence_service = GeofenceService(default_radius_m=default_radius_m)

    return Container(
        thresholds=thresholds,
        location_service=location_service,
        geofence_service=geofence_service,
    )
