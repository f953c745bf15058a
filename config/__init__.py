import os

# Environment variable -> LocationThresholds field
GPS_RULE_ENV = {
    "GPS_RISK_THRESHOLD": "risk_threshold",
    "GPS_MIN_ACCURACY_M": "min_accuracy_m",
    "GPS_MAX_ACCURACY_M": "max_accuracy_m",
    "GPS_ROUND_DECIMALS": "round_decimals",
    "GPS_MAX_FUTURE_SKEW_SECONDS": "max_future_skew_seconds",
    "GPS_MAX_FIX_AGE_SECONDS": "max_fix_age_seconds",
    "GPS_MAX_SPEED_KMH": "max_speed_kmh",
    "GPS_MIN_JUMP_M": "min_jump_m",
}


def get_settings_module() -> str:
    # APP_ENV selects the settings module, default 'development'
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "config.production"

    if env in {"test", "testing"}:
        return "config.testing"

    return "config.development"


def location_rules_from_env() -> dict:
    """Collect threshold overrides from GPS_* variables that are set."""
    rules = {}
    for env_name, field_name in GPS_RULE_ENV.items():
        value = os.getenv(env_name)
        if value is not None and value.strip():
            rules[field_name] = value
    return rules
