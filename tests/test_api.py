from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from geo_attendance.main import create_app


@pytest.fixture
def app(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    return create_app()


@pytest.fixture
def client(app):
    return app.test_client()


def _now_iso(delta: timedelta = timedelta(0)) -> str:
    return (datetime.now(timezone.utc) + delta).isoformat()


def test_valid_fix_passes(client):
    resp = client.post(
        "/api/attendance/gps-validation",
        json={"latitude": 40.7128, "longitude": -74.006, "accuracy": 5, "timestamp": _now_iso()},
    )

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["success"] is True
    validation = body["validation"]
    assert validation["isValid"] is True
    assert validation["riskScore"] == 0
    assert validation["issues"] == []
    assert validation["gpsValidation"]["isValid"] is True
    assert validation["consistencyValidation"] == {
        "isValid": True,
        "riskScore": 0,
        "issues": [],
        "recommendations": [],
    }


def test_invalid_latitude_is_reported_in_result(client):
    resp = client.post(
        "/api/attendance/gps-validation",
        json={"latitude": 999.999, "longitude": -74.006, "accuracy": 5, "timestamp": _now_iso()},
    )

    assert resp.status_code == 200
    validation = resp.get_json()["validation"]
    assert validation["isValid"] is False
    assert validation["riskScore"] == 100
    assert "Invalid latitude value" in validation["issues"]


def test_missing_latitude_is_hard_invalid_not_an_error(client):
    resp = client.post("/api/attendance/gps-validation", json={"longitude": -74.006})

    assert resp.status_code == 200
    validation = resp.get_json()["validation"]
    assert validation["isValid"] is False
    assert "Latitude is missing or not a number" in validation["issues"]


def test_teleport_history_is_rejected(client):
    resp = client.post(
        "/api/attendance/gps-validation",
        json={
            "latitude": 40.7128,
            "longitude": -74.006,
            "accuracy": 5,
            "timestamp": _now_iso(),
            "previousLocations": [
                {"latitude": 36.2162, "longitude": -74.006, "timestamp": _now_iso(-timedelta(seconds=60))},
            ],
        },
    )

    validation = resp.get_json()["validation"]
    assert validation["isValid"] is False
    assert validation["riskScore"] == 100
    assert validation["gpsValidation"]["isValid"] is True
    assert validation["consistencyValidation"]["riskScore"] == 100
    assert validation["recommendations"] == ["Please verify your location is accurate"]


def test_risk_from_both_checks_is_summed(client):
    resp = client.post(
        "/api/attendance/gps-validation",
        json={
            "latitude": 40.7128,
            "longitude": -74.006,
            "accuracy": 0.1,
            "timestamp": _now_iso(),
            "previousLocations": "yesterday",
        },
    )

    validation = resp.get_json()["validation"]
    assert validation["gpsValidation"]["riskScore"] == 20
    assert validation["riskScore"] == 100
    assert validation["issues"] == ["Suspiciously high GPS accuracy", "Location history is malformed"]


def test_body_must_be_a_json_object(client):
    as_list = client.post("/api/attendance/gps-validation", json=[1, 2])
    as_text = client.post("/api/attendance/gps-validation", data="hello", content_type="text/plain")

    assert as_list.status_code == 400
    assert as_list.get_json()["success"] is False
    assert as_text.status_code == 400


def test_unexpected_failure_returns_500(app, client, monkeypatch):
    def boom(*args, **kwargs):
        raise RuntimeError("db down")

    monkeypatch.setattr(app.extensions["geo_attendance"].location_service, "validate", boom)

    resp = client.post("/api/attendance/gps-validation", json={"latitude": 1.5, "longitude": 2.5})

    assert resp.status_code == 500
    assert resp.get_json() == {"success": False, "error": "Failed to validate GPS coordinates"}


def test_geofence_check_inside(client):
    resp = client.post(
        "/api/attendance/geofence-check",
        json={
            "latitude": 40.7128,
            "longitude": -74.006,
            "workLocations": [{"name": "HQ", "latitude": 40.7130, "longitude": -74.0060, "radius": 150}],
        },
    )

    assert resp.status_code == 200
    geofence = resp.get_json()["geofence"]
    assert geofence["isValid"] is True
    assert geofence["distance"] == 22
    assert geofence["workLocationName"] == "HQ"


def test_geofence_check_validates_request_shape(client):
    no_sites = client.post("/api/attendance/geofence-check", json={"latitude": 1.5, "longitude": 2.5})
    bad_radius = client.post(
        "/api/attendance/geofence-check",
        json={"latitude": 1.5, "longitude": 2.5, "workLocations": [], "defaultRadius": -5},
    )

    assert no_sites.status_code == 400
    assert bad_radius.status_code == 400
    assert bad_radius.get_json()["error"] == "defaultRadius must be a positive number"


def test_oversized_json_number_is_hard_invalid(client):
    resp = client.post(
        "/api/attendance/gps-validation",
        data='{"latitude": 1' + "0" * 400 + ', "longitude": -74.006, "accuracy": 5}',
        content_type="application/json",
    )

    assert resp.status_code == 200
    validation = resp.get_json()["validation"]
    assert validation["isValid"] is False
    assert "Latitude is missing or not a number" in validation["issues"]
