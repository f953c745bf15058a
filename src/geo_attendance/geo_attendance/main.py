from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import build_container
from .core.constants import DEFAULT_GEOFENCE_RADIUS_M
from .geofence.controller import register as register_geofence
from .location.controller import register as register_location


def create_app() -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    location_rules = dict(getattr(settings, "LOCATION_RULES", {}))
    default_radius_m = float(getattr(settings, "GEOFENCE_DEFAULT_RADIUS_M", DEFAULT_GEOFENCE_RADIUS_M))

    if app.config["DEBUG"]:
        logging.basicConfig(level=logging.DEBUG)
        app.logger.info(
            "[geo-attendance] settings=%s overrides=%s default_radius=%sm",
            settings_module, sorted(location_rules), default_radius_m,
        )

    container = build_container(location_rules=location_rules, default_radius_m=default_radius_m)
    app.extensions["geo_attendance"] = container

    register_location(app, container)
    register_geofence(app, container)

    return app
