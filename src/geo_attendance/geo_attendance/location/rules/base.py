from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Iterable, Optional

from ...core.enums import RECOMMENDATIONS, LocationIssue
from ..model import CoordinateSample, RuleOutcome


def flag(issue: LocationIssue, risk: int, *, hard_invalid: bool = False, detail: Optional[str] = None) -> RuleOutcome:
    text = f"{issue.value} ({detail})" if detail else issue.value
    recommendation = RECOMMENDATIONS.get(issue)
    return RuleOutcome(
        issues=(text,),
        risk=max(0, int(risk)),
        hard_invalid=hard_invalid,
        recommendations=(recommendation.value,) if recommendation else (),
    )


def merge(outcomes: Iterable[RuleOutcome]) -> RuleOutcome:
    issues: list[str] = []
    recommendations: list[str] = []
    risk = 0
    hard_invalid = False
    for outcome in outcomes:
        issues.extend(outcome.issues)
        recommendations.extend(outcome.recommendations)
        risk += outcome.risk
        hard_invalid = hard_invalid or outcome.hard_invalid
    return RuleOutcome(
        issues=tuple(issues),
        risk=risk,
        hard_invalid=hard_invalid,
        recommendations=tuple(recommendations),
    )


PASS = RuleOutcome()


class IntegrityRule(ABC):
    """Strategy Pattern: one independent check over a single GPS fix."""

    @abstractmethod
    def evaluate(self, *, sample: CoordinateSample, now: datetime) -> RuleOutcome:
        raise NotImplementedError
