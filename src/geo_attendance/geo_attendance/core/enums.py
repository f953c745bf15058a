from __future__ import annotations

from enum import Enum


class LocationIssue(str, Enum):
    """Issue messages reported by the integrity rules (shown to users as-is)."""

    LATITUDE_MISSING = "Latitude is missing or not a number"
    LATITUDE_OUT_OF_RANGE = "Invalid latitude value"
    LONGITUDE_MISSING = "Longitude is missing or not a number"
    LONGITUDE_OUT_OF_RANGE = "Invalid longitude value"
    ACCURACY_TOO_PRECISE = "Suspiciously high GPS accuracy"
    ACCURACY_TOO_POOR = "GPS accuracy is too low to verify location"
    ACCURACY_MALFORMED = "GPS accuracy value is invalid"
    MANUAL_ENTRY = "Coordinates appear to be manually entered"
    TIMESTAMP_IN_FUTURE = "Location timestamp is in the future"
    TIMESTAMP_TOO_OLD = "Location timestamp is too old"
    TIMESTAMP_MALFORMED = "Location timestamp could not be read"
    HISTORY_MALFORMED = "Location history is malformed"
    IMPOSSIBLE_SPEED = "Impossible travel speed detected"


class Recommendation(str, Enum):
    """User-facing follow-up advice paired with issues."""

    ENABLE_GPS = "Please ensure GPS is enabled and working properly"
    VERIFY_LOCATION_SERVICES = "GPS accuracy seems unusually high. Please verify location services"
    IMPROVE_SIGNAL = "Move to an open area to get a stronger GPS signal and try again"
    USE_ACTUAL_GPS = "Location appears to be manually set. Please use actual GPS location"
    CHECK_DEVICE_CLOCK = "Please check that your device date and time are set automatically"
    VERIFY_LOCATION = "Please verify your location is accurate"


RECOMMENDATIONS: dict[LocationIssue, Recommendation] = {
    LocationIssue.LATITUDE_MISSING: Recommendation.ENABLE_GPS,
    LocationIssue.LATITUDE_OUT_OF_RANGE: Recommendation.ENABLE_GPS,
    LocationIssue.LONGITUDE_MISSING: Recommendation.ENABLE_GPS,
    LocationIssue.LONGITUDE_OUT_OF_RANGE: Recommendation.ENABLE_GPS,
    LocationIssue.ACCURACY_TOO_PRECISE: Recommendation.VERIFY_LOCATION_SERVICES,
    LocationIssue.ACCURACY_TOO_POOR: Recommendation.IMPROVE_SIGNAL,
    LocationIssue.ACCURACY_MALFORMED: Recommendation.ENABLE_GPS,
    LocationIssue.MANUAL_ENTRY: Recommendation.USE_ACTUAL_GPS,
    LocationIssue.TIMESTAMP_IN_FUTURE: Recommendation.CHECK_DEVICE_CLOCK,
    LocationIssue.TIMESTAMP_TOO_OLD: Recommendation.CHECK_DEVICE_CLOCK,
    LocationIssue.TIMESTAMP_MALFORMED: Recommendation.CHECK_DEVICE_CLOCK,
    LocationIssue.HISTORY_MALFORMED: Recommendation.VERIFY_LOCATION,
    LocationIssue.IMPOSSIBLE_SPEED: Recommendation.VERIFY_LOCATION,
}
