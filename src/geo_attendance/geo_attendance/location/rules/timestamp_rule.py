from __future__ import annotations

from datetime import datetime, timedelta

from ...core.enums import LocationIssue
from ..model import CoordinateSample, RuleOutcome
from .base import PASS, IntegrityRule, flag


class TimestampRule(IntegrityRule):
    """Fix time must sit near the evaluation time."""

    def __init__(self, *, max_future_skew_seconds: float, max_fix_age_seconds: float, future_weight: int, stale_weight: int):
        self._future_skew = timedelta(seconds=max_future_skew_seconds)
        self._max_age = timedelta(seconds=max_fix_age_seconds)
        self._future_weight = future_weight
        self._stale_weight = stale_weight

    def evaluate(self, *, sample: CoordinateSample, now: datetime) -> RuleOutcome:
        if sample.timestamp_malformed:
            return flag(LocationIssue.TIMESTAMP_MALFORMED, self._stale_weight)
        if sample.timestamp is None:
            return PASS
        # Compare differences; now +/- skew can leave the datetime range
        offset = sample.timestamp - now
        if offset > self._future_skew:
            return flag(LocationIssue.TIMESTAMP_IN_FUTURE, self._future_weight)
        if -offset > self._max_age:
            return flag(LocationIssue.TIMESTAMP_TOO_OLD, self._stale_weight)
        return PASS
