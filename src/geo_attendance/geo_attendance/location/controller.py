from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..common.http import json_object_body
from ..container import Container
from ..core.exceptions import ValidationError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance/gps-validation", methods=["POST"], endpoint="api_gps_validation")
    def api_gps_validation():
        """Score a reported fix (and optional history) for spoofing.

        Missing or wrong-typed coordinates are reported inside the validation
        result; only a body that is not a JSON object is rejected with 400.
        """
        try:
            data = json_object_body()
            result = container.location_service.validate(data)
            return jsonify({"success": True, "validation": result.to_dict()}), 200
        except ValidationError as e:
            return jsonify({"success": False, "error": str(e)}), 400
        except Exception:
            logger.exception("GPS validation error")
            return jsonify({
                "success": False,
                "error": "Failed to validate GPS coordinates",
            }), 500
