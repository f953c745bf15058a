import os

from config import location_rules_from_env

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False

LOCATION_RULES = location_rules_from_env()
GEOFENCE_DEFAULT_RADIUS_M = float(os.getenv("GEOFENCE_DEFAULT_RADIUS_M", "100"))
