from __future__ import annotations

from dataclasses import dataclass, field, fields
from datetime import datetime
from typing import Any, Mapping, Optional

from ..common.validators import require_non_negative
from ..core import constants
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class CoordinateSample:
    """A single reported GPS fix.

    latitude/longitude are None when the raw input was missing or not a finite
    number. accuracy_malformed/timestamp_malformed mark optional fields that
    were present but unreadable.
    """

    latitude: Optional[float]
    longitude: Optional[float]
    accuracy: Optional[float] = None
    timestamp: Optional[datetime] = None
    accuracy_malformed: bool = False
    timestamp_malformed: bool = False

    @property
    def has_coordinates(self) -> bool:
        return self.latitude is not None and self.longitude is not None

    @property
    def in_range(self) -> bool:
        return (
            self.has_coordinates
            and -90.0 <= self.latitude <= 90.0
            and -180.0 <= self.longitude <= 180.0
        )


@dataclass(frozen=True)
class RuleOutcome:
    """What a single rule found: issues plus its risk contribution."""

    issues: tuple[str, ...] = ()
    risk: int = 0
    hard_invalid: bool = False
    recommendations: tuple[str, ...] = ()

    @property
    def triggered(self) -> bool:
        return bool(self.issues)


@dataclass(frozen=True)
class ValidationResult:
    is_valid: bool
    risk_score: int
    issues: list[str] = field(default_factory=list)
    recommendations: list[str] = field(default_factory=list)

    @classmethod
    def clean(cls) -> "ValidationResult":
        return cls(is_valid=True, risk_score=0, issues=[], recommendations=[])

    def to_dict(self) -> dict:
        return {
            "isValid": self.is_valid,
            "riskScore": self.risk_score,
            "issues": list(self.issues),
            "recommendations": list(self.recommendations),
        }


@dataclass(frozen=True)
class CombinedValidation:
    """Read-model returned by the gps-validation endpoint."""

    gps: ValidationResult
    consistency: ValidationResult
    is_valid: bool
    risk_score: int
    issues: list[str]
    recommendations: list[str]

    def to_dict(self) -> dict:
        return {
            "isValid": self.is_valid,
            "riskScore": self.risk_score,
            "issues": list(self.issues),
            "recommendations": list(self.recommendations),
            "gpsValidation": self.gps.to_dict(),
            "consistencyValidation": self.consistency.to_dict(),
        }


@dataclass(frozen=True)
class LocationThresholds:
    """Heuristic constants used by the rules.

    These are configuration, not invariants; override them per environment.
    """

    risk_threshold: int = constants.DEFAULT_RISK_THRESHOLD
    min_accuracy_m: float = constants.DEFAULT_MIN_ACCURACY_M
    max_accuracy_m: float = constants.DEFAULT_MAX_ACCURACY_M
    round_decimals: int = constants.DEFAULT_ROUND_DECIMALS
    max_future_skew_seconds: float = constants.DEFAULT_MAX_FUTURE_SKEW_SECONDS
    max_fix_age_seconds: float = constants.DEFAULT_MAX_FIX_AGE_SECONDS
    max_speed_kmh: float = constants.DEFAULT_MAX_SPEED_KMH
    min_jump_m: float = constants.DEFAULT_MIN_JUMP_M

    invalid_coordinate_weight: int = constants.DEFAULT_INVALID_COORDINATE_WEIGHT
    precise_accuracy_weight: int = constants.DEFAULT_PRECISE_ACCURACY_WEIGHT
    poor_accuracy_weight: int = constants.DEFAULT_POOR_ACCURACY_WEIGHT
    round_coordinate_weight: int = constants.DEFAULT_ROUND_COORDINATE_WEIGHT
    future_timestamp_weight: int = constants.DEFAULT_FUTURE_TIMESTAMP_WEIGHT
    stale_timestamp_weight: int = constants.DEFAULT_STALE_TIMESTAMP_WEIGHT
    speed_weight: int = constants.DEFAULT_SPEED_WEIGHT

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any] | None) -> "LocationThresholds":
        """Build thresholds from a settings mapping (unknown keys rejected)."""
        if not values:
            return cls()

        known = {f.name: f for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, raw in values.items():
            if key not in known:
                raise ValidationError(f"Unknown location rule setting: {key}")
            number = require_non_negative(raw, key)
            if known[key].type == "int":
                if number != int(number):
                    raise ValidationError(f"{key} must be a whole number")
                number = int(number)
            kwargs[key] = number

        thresholds = cls(**kwargs)
        if thresholds.max_speed_kmh <= 0:
            raise ValidationError("max_speed_kmh must be positive")
        if thresholds.min_accuracy_m > thresholds.max_accuracy_m:
            raise ValidationError("min_accuracy_m must not exceed max_accuracy_m")
        return thresholds
