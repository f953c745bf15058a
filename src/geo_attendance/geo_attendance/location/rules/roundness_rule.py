from __future__ import annotations

from datetime import datetime

from ...core.enums import LocationIssue
from ..model import CoordinateSample, RuleOutcome
from .base import PASS, IntegrityRule, flag


class RoundCoordinateRule(IntegrityRule):
    """Real fixes carry many decimals of noise; typed-in coordinates do not."""

    def __init__(self, *, decimals: int, weight: int):
        self._decimals = decimals
        self._weight = weight

    def _is_round(self, value: float) -> bool:
        return round(value, self._decimals) == value

    def evaluate(self, *, sample: CoordinateSample, now: datetime) -> RuleOutcome:
        if not sample.has_coordinates:
            return PASS
        if self._is_round(sample.latitude) and self._is_round(sample.longitude):
            return flag(LocationIssue.MANUAL_ENTRY, self._weight)
        return PASS
