"""
Transaction risk scoring.

A fixed rule set, not a statistical model:

    amount > 10000      → 8.5
    type == "grants"    → 6.0
    anything else       → 2.0

Scores above ANOMALY_THRESHOLD raise an anomaly; above HIGH_SEVERITY_THRESHOLD
the anomaly is graded "high", otherwise "medium".
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

LARGE_AMOUNT_LIMIT = Decimal("10000")

LARGE_AMOUNT_SCORE = Decimal("8.5")
GRANT_SCORE = Decimal("6.0")
BASELINE_SCORE = Decimal("2.0")

ANOMALY_THRESHOLD = Decimal("7.0")
HIGH_SEVERITY_THRESHOLD = Decimal("8.0")

MAX_RISK_SCORE = Decimal("10")


@dataclass(frozen=True)
class RiskAssessment:
    score: Decimal
    severity: Optional[str]  # None when no anomaly is warranted

    @property
    def is_anomalous(self) -> bool:
        return self.severity is not None


def score_transaction(amount: Decimal, type: str) -> Decimal:
    """Pure, total scoring function of (amount, type)."""
    if Decimal(amount) > LARGE_AMOUNT_LIMIT:
        return LARGE_AMOUNT_SCORE
    if type == "grants":
        return GRANT_SCORE
    return BASELINE_SCORE


def severity_for(score: Decimal) -> Optional[str]:
    if score <= ANOMALY_THRESHOLD:
        return None
    return "high" if score > HIGH_SEVERITY_THRESHOLD else "medium"


def assess_transaction(amount: Decimal, type: str) -> RiskAssessment:
    score = score_transaction(amount, type)
    return RiskAssessment(score=score, severity=severity_for(score))
