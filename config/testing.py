SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True

# Fixed values so tests do not depend on the shell environment
LOCATION_RULES = {
    "risk_threshold": 50,
    "max_speed_kmh": 250,
}
GEOFENCE_DEFAULT_RADIUS_M = 100.0
