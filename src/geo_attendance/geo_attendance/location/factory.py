from __future__ import annotations

from dataclasses import dataclass

from .model import LocationThresholds
from .rules.accuracy_rule import AccuracyRule
from .rules.base import IntegrityRule
from .rules.coordinate_rule import CoordinateRangeRule
from .rules.roundness_rule import RoundCoordinateRule
from .rules.speed_rule import TravelSpeedRule
from .rules.timestamp_rule import TimestampRule


@dataclass
class LocationRuleFactory:
    """Factory Pattern: build the configured rule set from thresholds."""

    thresholds: LocationThresholds

    def for_integrity(self) -> tuple[IntegrityRule, ...]:
        t = self.thresholds
        return (
            CoordinateRangeRule(weight=t.invalid_coordinate_weight),
            AccuracyRule(
                min_accuracy_m=t.min_accuracy_m,
                max_accuracy_m=t.max_accuracy_m,
                precise_weight=t.precise_accuracy_weight,
                poor_weight=t.poor_accuracy_weight,
            ),
            RoundCoordinateRule(decimals=t.round_decimals, weight=t.round_coordinate_weight),
            TimestampRule(
                max_future_skew_seconds=t.max_future_skew_seconds,
                max_fix_age_seconds=t.max_fix_age_seconds,
                future_weight=t.future_timestamp_weight,
                stale_weight=t.stale_timestamp_weight,
            ),
        )

    def for_consistency(self) -> TravelSpeedRule:
        t = self.thresholds
        return TravelSpeedRule(max_speed_kmh=t.max_speed_kmh, min_jump_m=t.min_jump_m, weight=t.speed_weight)
