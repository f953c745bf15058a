from __future__ import annotations

from typing import Any

from flask import request

from ..core.exceptions import ValidationError


def json_object_body() -> dict[str, Any]:
    """Return the request JSON body, which must be an object."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data
