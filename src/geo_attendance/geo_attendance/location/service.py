from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime
from typing import Any, Iterable, Mapping, Optional, Sequence, Union

from ..common.datetime_utils import as_utc, now_utc
from ..core.constants import MAX_RISK_SCORE
from ..core.enums import LocationIssue
from .factory import LocationRuleFactory
from .model import CombinedValidation, CoordinateSample, LocationThresholds, RuleOutcome, ValidationResult
from .parser import sample_from_payload, sample_from_values, samples_from_history
from .rules.base import flag, merge

logger = logging.getLogger(__name__)

SampleLike = Union[CoordinateSample, Mapping[str, Any]]


def _dedupe(items: Iterable[str]) -> list[str]:
    seen: set[str] = set()
    out: list[str] = []
    for item in items:
        if item not in seen:
            seen.add(item)
            out.append(item)
    return out


def _normalized(sample: CoordinateSample) -> CoordinateSample:
    """Bring a caller-built sample's timestamp to aware UTC like parsed ones."""
    if sample.timestamp is None:
        return sample
    try:
        return replace(sample, timestamp=as_utc(sample.timestamp))
    except OverflowError:
        return replace(sample, timestamp=None, timestamp_malformed=True)


def _as_sample(value: Any) -> Optional[CoordinateSample]:
    if isinstance(value, CoordinateSample):
        return _normalized(value)
    if isinstance(value, Mapping):
        return sample_from_payload(value)
    return None


class LocationIntegrityService:
    """Scores reported GPS fixes for spoofing and manual entry.

    Stateless apart from its immutable thresholds; every call is independent.
    """

    def __init__(self, thresholds: LocationThresholds | None = None, *, rule_factory: LocationRuleFactory | None = None):
        self._thresholds = thresholds or LocationThresholds()
        factory = rule_factory or LocationRuleFactory(self._thresholds)
        self._integrity_rules = factory.for_integrity()
        self._speed_rule = factory.for_consistency()

    @property
    def thresholds(self) -> LocationThresholds:
        return self._thresholds

    def _to_result(self, outcome: RuleOutcome) -> ValidationResult:
        risk = min(MAX_RISK_SCORE, outcome.risk)
        return ValidationResult(
            is_valid=risk < self._thresholds.risk_threshold and not outcome.hard_invalid,
            risk_score=risk,
            issues=list(outcome.issues),
            recommendations=_dedupe(outcome.recommendations),
        )

    def _malformed_history(self) -> ValidationResult:
        return self._to_result(
            flag(LocationIssue.HISTORY_MALFORMED, self._thresholds.invalid_coordinate_weight, hard_invalid=True)
        )

    def validate_sample(self, sample: CoordinateSample, *, now: datetime | None = None) -> ValidationResult:
        now = as_utc(now) if now else now_utc()
        sample = _normalized(sample)
        outcome = merge(rule.evaluate(sample=sample, now=now) for rule in self._integrity_rules)
        return self._to_result(outcome)

    def validate_gps_integrity(
        self,
        latitude: Any,
        longitude: Any,
        accuracy: Any = None,
        timestamp: Any = None,
        *,
        now: datetime | None = None,
    ) -> ValidationResult:
        """Evaluate a single fix. Never raises for bad values; they become issues."""
        sample = sample_from_values(latitude, longitude, accuracy, timestamp)
        return self.validate_sample(sample, now=now)

    def validate_location_consistency(
        self,
        current: SampleLike,
        previous_samples: Optional[Sequence[SampleLike]],
        *,
        now: datetime | None = None,
    ) -> ValidationResult:
        """Check the implied travel speed along the fix history.

        Previous samples may come in any order; they are sorted by timestamp.
        Samples without usable coordinates or timestamps are ignored.
        """
        if not previous_samples:
            return ValidationResult.clean()
        if isinstance(previous_samples, (str, bytes, Mapping)) or not isinstance(previous_samples, Sequence):
            return self._malformed_history()

        current_sample = _as_sample(current)
        if current_sample is None or not current_sample.in_range:
            return ValidationResult.clean()
        if current_sample.timestamp is None:
            now = as_utc(now) if now else now_utc()
            current_sample = CoordinateSample(
                latitude=current_sample.latitude,
                longitude=current_sample.longitude,
                accuracy=current_sample.accuracy,
                timestamp=now,
            )

        history = []
        for item in previous_samples:
            sample = _as_sample(item)
            if sample is not None and sample.in_range and sample.timestamp is not None:
                history.append(sample)
            else:
                logger.debug("Ignoring unusable history sample: %r", sample)
        if not history:
            return ValidationResult.clean()

        chain = sorted(history, key=lambda s: s.timestamp) + [current_sample]
        outcome = merge(
            self._speed_rule.evaluate_pair(previous, following)
            for previous, following in zip(chain, chain[1:])
        )
        return self._to_result(outcome)

    def validate(self, payload: Mapping[str, Any], *, now: datetime | None = None) -> CombinedValidation:
        """Run both checks for a gps-validation request body."""
        now = as_utc(now) if now else now_utc()
        sample = sample_from_payload(payload)
        gps = self.validate_sample(sample, now=now)

        history, history_malformed = samples_from_history(payload.get("previousLocations"))
        if history_malformed:
            consistency = self._malformed_history()
        else:
            consistency = self.validate_location_consistency(sample, history, now=now)

        combined = CombinedValidation(
            gps=gps,
            consistency=consistency,
            is_valid=gps.is_valid and consistency.is_valid,
            risk_score=min(MAX_RISK_SCORE, gps.risk_score + consistency.risk_score),
            issues=[*gps.issues, *consistency.issues],
            recommendations=_dedupe([*gps.recommendations, *consistency.recommendations]),
        )
        if not combined.is_valid:
            logger.info("Location rejected (risk=%s): %s", combined.risk_score, "; ".join(combined.issues))
        return combined


_default_service = LocationIntegrityService()


def validate_gps_integrity(latitude: Any, longitude: Any, accuracy: Any = None, timestamp: Any = None, *, now: datetime | None = None) -> ValidationResult:
    return _default_service.validate_gps_integrity(latitude, longitude, accuracy, timestamp, now=now)


def validate_location_consistency(current: SampleLike, previous_samples: Optional[Sequence[SampleLike]], *, now: datetime | None = None) -> ValidationResult:
    return _default_service.validate_location_consistency(current, previous_samples, now=now)
