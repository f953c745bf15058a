from __future__ import annotations

from datetime import datetime

from ...core.enums import LocationIssue
from ..model import CoordinateSample, RuleOutcome
from .base import IntegrityRule, flag, merge


class CoordinateRangeRule(IntegrityRule):
    """Missing, non-numeric or out-of-range coordinates make the fix hard invalid."""

    def __init__(self, *, weight: int):
        self._weight = weight

    def evaluate(self, *, sample: CoordinateSample, now: datetime) -> RuleOutcome:
        found = []

        if sample.latitude is None:
            found.append(flag(LocationIssue.LATITUDE_MISSING, self._weight, hard_invalid=True))
        elif not -90.0 <= sample.latitude <= 90.0:
            found.append(flag(LocationIssue.LATITUDE_OUT_OF_RANGE, self._weight, hard_invalid=True))

        if sample.longitude is None:
            found.append(flag(LocationIssue.LONGITUDE_MISSING, self._weight, hard_invalid=True))
        elif not -180.0 <= sample.longitude <= 180.0:
            found.append(flag(LocationIssue.LONGITUDE_OUT_OF_RANGE, self._weight, hard_invalid=True))

        return merge(found)
