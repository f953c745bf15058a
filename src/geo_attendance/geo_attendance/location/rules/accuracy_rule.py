from __future__ import annotations

from datetime import datetime

from ...core.enums import LocationIssue
from ..model import CoordinateSample, RuleOutcome
from .base import PASS, IntegrityRule, flag


class AccuracyRule(IntegrityRule):
    """Flag reported accuracy that is implausibly precise or too poor to trust.

    Emulators and mock-location apps tend to report sub-metre accuracy.
    """

    def __init__(self, *, min_accuracy_m: float, max_accuracy_m: float, precise_weight: int, poor_weight: int):
        self._min = min_accuracy_m
        self._max = max_accuracy_m
        self._precise_weight = precise_weight
        self._poor_weight = poor_weight

    def evaluate(self, *, sample: CoordinateSample, now: datetime) -> RuleOutcome:
        if sample.accuracy_malformed:
            return flag(LocationIssue.ACCURACY_MALFORMED, self._precise_weight)
        if sample.accuracy is None:
            return PASS
        if sample.accuracy < self._min:
            return flag(LocationIssue.ACCURACY_TOO_PRECISE, self._precise_weight)
        if sample.accuracy > self._max:
            return flag(LocationIssue.ACCURACY_TOO_POOR, self._poor_weight)
        return PASS
