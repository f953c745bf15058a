import pytest

from config import GPS_RULE_ENV, location_rules_from_env
from geo_attendance.core.exceptions import ValidationError
from geo_attendance.location.model import LocationThresholds


def test_empty_mapping_gives_defaults():
    assert LocationThresholds.from_mapping(None) == LocationThresholds()
    assert LocationThresholds.from_mapping({}) == LocationThresholds()


def test_string_values_are_converted():
    thresholds = LocationThresholds.from_mapping({"max_speed_kmh": "120", "risk_threshold": "40"})

    assert thresholds.max_speed_kmh == 120.0
    assert thresholds.risk_threshold == 40
    assert isinstance(thresholds.risk_threshold, int)


@pytest.mark.parametrize(
    "values",
    [
        {"risk_threshold": "abc"},
        {"risk_threshold": 40.5},
        {"max_speed_kmh": 0},
        {"min_jump_m": -1},
        {"min_accuracy_m": 50, "max_accuracy_m": 10},
        {"no_such_setting": 1},
    ],
)
def test_bad_values_are_rejected(values):
    with pytest.raises(ValidationError):
        LocationThresholds.from_mapping(values)


def test_rules_are_read_from_environment(monkeypatch):
    for name in GPS_RULE_ENV:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("GPS_MAX_SPEED_KMH", "120")
    monkeypatch.setenv("GPS_RISK_THRESHOLD", " ")

    rules = location_rules_from_env()

    assert rules == {"max_speed_kmh": "120"}
    assert LocationThresholds.from_mapping(rules).max_speed_kmh == 120.0
