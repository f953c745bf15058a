from __future__ import annotations

import math

from ...core.constants import MAX_RISK_SCORE
from ...core.enums import LocationIssue
from ..geodesy import haversine_m
from ..model import CoordinateSample, RuleOutcome
from .base import PASS, flag


class TravelSpeedRule:
    """Teleportation check between two consecutive fixes.

    Contribution grows with how far the implied speed exceeds the ceiling:
    speed_weight at the ceiling, capped at the maximum risk score.
    """

    def __init__(self, *, max_speed_kmh: float, min_jump_m: float, weight: int):
        self._max_speed_kmh = max_speed_kmh
        self._min_jump_m = min_jump_m
        self._weight = weight

    def distance_and_speed(self, previous: CoordinateSample, current: CoordinateSample) -> tuple[float, float]:
        distance_m = haversine_m(previous.latitude, previous.longitude, current.latitude, current.longitude)
        elapsed = (current.timestamp - previous.timestamp).total_seconds()
        if elapsed <= 0:
            return distance_m, math.inf if distance_m > 0 else 0.0
        return distance_m, (distance_m / 1000.0) / (elapsed / 3600.0)

    def evaluate_pair(self, previous: CoordinateSample, current: CoordinateSample) -> RuleOutcome:
        distance_m, speed_kmh = self.distance_and_speed(previous, current)
        if distance_m <= self._min_jump_m or speed_kmh <= self._max_speed_kmh:
            return PASS

        if math.isinf(speed_kmh):
            risk = MAX_RISK_SCORE
            speed_text = "instantaneous"
        else:
            risk = min(MAX_RISK_SCORE, round(self._weight * speed_kmh / self._max_speed_kmh))
            speed_text = f"{speed_kmh:.0f} km/h"
        detail = f"{speed_text} over {distance_m / 1000.0:.1f} km"
        return flag(LocationIssue.IMPOSSIBLE_SPEED, risk, detail=detail)
