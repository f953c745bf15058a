from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..common.http import json_object_body
from ..common.validators import finite_number, is_missing
from ..container import Container
from ..core.exceptions import ValidationError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance/geofence-check", methods=["POST"], endpoint="api_geofence_check")
    def api_geofence_check():
        try:
            data = json_object_body()

            work_locations = data.get("workLocations")
            if not isinstance(work_locations, list):
                raise ValidationError("workLocations must be a list")

            default_radius = None
            if not is_missing(data.get("defaultRadius")):
                default_radius = finite_number(data.get("defaultRadius"))
                if default_radius is None or default_radius <= 0:
                    raise ValidationError("defaultRadius must be a positive number")

            result = container.geofence_service.evaluate(
                data.get("latitude"),
                data.get("longitude"),
                work_locations,
                default_radius_m=default_radius,
            )
            return jsonify({"success": True, "geofence": result.to_dict()}), 200
        except ValidationError as e:
            return jsonify({"success": False, "error": str(e)}), 400
        except Exception:
            logger.exception("Geofence check error")
            return jsonify({"success": False, "error": "Failed to check work location"}), 500
