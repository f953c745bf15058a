"""Map JSON of unknown shape to typed coordinate samples.

Nothing here raises for bad values: a missing or wrong-typed coordinate becomes
None on the sample, and the integrity rules report it as a hard-invalid fix.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from ..common.datetime_utils import parse_instant
from ..common.validators import finite_number, is_missing
from .model import CoordinateSample

logger = logging.getLogger(__name__)

LATITUDE_KEYS = ("latitude", "lat")
LONGITUDE_KEYS = ("longitude", "lng", "lon", "long")
TIMESTAMP_KEYS = ("timestamp", "captured_at", "time")


def _first(payload: Mapping[str, Any], keys: tuple[str, ...]) -> Any:
    for key in keys:
        if key in payload:
            return payload[key]
    return None


def sample_from_values(latitude: Any, longitude: Any, accuracy: Any = None, timestamp: Any = None) -> CoordinateSample:
    accuracy_value: Optional[float] = None
    accuracy_malformed = False
    if not is_missing(accuracy):
        accuracy_value = finite_number(accuracy)
        if accuracy_value is None or accuracy_value < 0:
            accuracy_value = None
            accuracy_malformed = True

    timestamp_value = None
    timestamp_malformed = False
    if not is_missing(timestamp):
        timestamp_value = parse_instant(timestamp)
        timestamp_malformed = timestamp_value is None

    return CoordinateSample(
        latitude=finite_number(latitude),
        longitude=finite_number(longitude),
        accuracy=accuracy_value,
        timestamp=timestamp_value,
        accuracy_malformed=accuracy_malformed,
        timestamp_malformed=timestamp_malformed,
    )


def sample_from_payload(payload: Mapping[str, Any]) -> CoordinateSample:
    return sample_from_values(
        _first(payload, LATITUDE_KEYS),
        _first(payload, LONGITUDE_KEYS),
        payload.get("accuracy"),
        _first(payload, TIMESTAMP_KEYS),
    )


def samples_from_history(raw: Any) -> tuple[list[CoordinateSample], bool]:
    """Parse a previousLocations array.

    Returns (samples, malformed). malformed is True when the history is present
    but not a list; entries that are not objects are dropped.
    """
    if raw is None:
        return [], False
    if not isinstance(raw, list):
        return [], True

    samples: list[CoordinateSample] = []
    for index, item in enumerate(raw):
        if not isinstance(item, Mapping):
            logger.debug("Skipping history entry %s: not an object", index)
            continue
        samples.append(sample_from_payload(item))
    return samples, False
