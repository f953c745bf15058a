"""Example: use the service layer directly (without Flask).

Controllers are a thin layer; the scoring lives in LocationIntegrityService.
"""

import importlib

from config import get_settings_module

from geo_attendance.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(location_rules=getattr(settings, "LOCATION_RULES", {}))

    result = container.location_service.validate(
        {
            "latitude": 40.7128,
            "longitude": -74.006,
            "accuracy": 0.1,
            "previousLocations": [
                {"latitude": 34.0522, "longitude": -118.2437, "timestamp": "2026-01-01T08:00:00Z"},
            ],
        }
    )
    print(result.to_dict())

    print(container.geofence_service.evaluate(
        40.7128, -74.006, [{"name": "HQ", "latitude": 40.7130, "longitude": -74.0060, "radius": 150}]
    ).to_dict())


if __name__ == "__main__":
    main()
