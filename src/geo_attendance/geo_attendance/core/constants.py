"""Constants and defaults.

Note: Keep heuristic thresholds here; settings modules may override them.
"""

EARTH_MEAN_RADIUS_M = 6_371_008.8

DEFAULT_RISK_THRESHOLD = 50
MAX_RISK_SCORE = 100

DEFAULT_MIN_ACCURACY_M = 1.0
DEFAULT_MAX_ACCURACY_M = 1000.0
DEFAULT_ROUND_DECIMALS = 3
DEFAULT_MAX_FUTURE_SKEW_SECONDS = 5 * 60
DEFAULT_MAX_FIX_AGE_SECONDS = 24 * 60 * 60

DEFAULT_MAX_SPEED_KMH = 250.0
DEFAULT_MIN_JUMP_M = 1000.0

DEFAULT_INVALID_COORDINATE_WEIGHT = 100
DEFAULT_PRECISE_ACCURACY_WEIGHT = 20
DEFAULT_POOR_ACCURACY_WEIGHT = 15
DEFAULT_ROUND_COORDINATE_WEIGHT = 30
DEFAULT_FUTURE_TIMESTAMP_WEIGHT = 40
DEFAULT_STALE_TIMESTAMP_WEIGHT = 25
DEFAULT_SPEED_WEIGHT = 50

DEFAULT_GEOFENCE_RADIUS_M = 100.0
