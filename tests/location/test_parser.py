from datetime import datetime, timezone

from geo_attendance.location.parser import sample_from_payload, sample_from_values, samples_from_history


def test_payload_aliases_are_accepted():
    sample = sample_from_payload({"lat": 1.5, "lng": 2.5, "captured_at": "2026-01-01T12:00:00Z"})

    assert sample.latitude == 1.5
    assert sample.longitude == 2.5
    assert sample.timestamp == datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)


def test_integers_are_numbers_but_strings_are_not():
    sample = sample_from_values(40, "-74.0")

    assert sample.latitude == 40.0
    assert sample.longitude is None
    assert sample.has_coordinates is False


def test_blank_optional_fields_are_missing_not_malformed():
    sample = sample_from_values(1.5, 2.5, "", "  ")

    assert sample.accuracy is None
    assert sample.accuracy_malformed is False
    assert sample.timestamp is None
    assert sample.timestamp_malformed is False


def test_out_of_range_values_are_kept_for_the_rules():
    sample = sample_from_values(999.999, -74.006)

    assert sample.latitude == 999.999
    assert sample.in_range is False


def test_history_shapes():
    assert samples_from_history(None) == ([], False)
    assert samples_from_history("x") == ([], True)
    assert samples_from_history({"latitude": 1}) == ([], True)

    samples, malformed = samples_from_history([1, {"latitude": 1.5, "longitude": 2.5}])

    assert malformed is False
    assert len(samples) == 1
    assert samples[0].latitude == 1.5
