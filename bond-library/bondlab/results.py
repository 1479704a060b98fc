"""
Result types produced by the decision pipelines.

Every pipeline returns its own frozen dataclass so the decision vocabulary of
each pipeline is a closed enum rather than a free-form string. Checkpoints and
scored steps are immutable once created.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class Status(str, Enum):
    PASS = "pass"
    CAUTION = "caution"
    FAIL = "fail"


@dataclass(frozen=True)
class Checkpoint:
    """Single pass/fail gate: the metric it looked at and a readable detail."""

    passed: bool
    value: float
    detail: str


@dataclass(frozen=True)
class ScoredStep:
    """Step of a weighted-score pipeline (score is 0..2 before weighting)."""

    status: Status
    score: float
    value: str
    detail: str
    formula: Optional[str] = None


@dataclass(frozen=True)
class RiskAssessment:
    name: str
    status: Status
    detail: str


# --- Decision vocabularies ---


class ScreenerDecision(str, Enum):
    BUY = "BUY"
    REJECT = "REJECT"


class ScreenerProRecommendation(str, Enum):
    GOOD_BUY = "GOOD BUY"
    HOLD_WATCH = "HOLD / WATCH"
    REJECT_AVOID = "REJECT / AVOID"


class ValuationRecommendation(str, Enum):
    BUY = "BUY"
    HOLD_WATCH = "HOLD / WATCH"
    AVOID = "AVOID"


class CompleteDecision(str, Enum):
    BUY = "BUY"
    AVOID = "AVOID"


class FlowchartDecision(str, Enum):
    EXECUTE = "EXECUTE"
    EXECUTE_WITH_CAUTION = "EXECUTE WITH CAUTION"
    STOP = "STOP"


class SmartRecommendation(str, Enum):
    STRONG_BUY = "STRONG BUY"
    HOLD_WATCH = "HOLD / WATCH"
    AVOID_SELL = "AVOID / SELL"


# --- Screener ---


@dataclass(frozen=True)
class ScreenerMetrics:
    current_yield: float
    ytm: float
    real_yield: Optional[float] = None
    duration: Optional[float] = None
    credit_spread: Optional[float] = None
    price_sensitivity: Optional[float] = None
    home_real_return: Optional[float] = None


@dataclass(frozen=True)
class ScreenerResult:
    metrics: ScreenerMetrics
    decision: ScreenerDecision
    checkpoints: dict[str, Checkpoint] = field(default_factory=dict)
    rejection_reason: Optional[str] = None

    @property
    def immediate_reject(self) -> bool:
        """True when the bond was rejected before the checkpoints ran."""
        return self.rejection_reason is not None


# --- Screener Pro ---


@dataclass(frozen=True)
class ScreenerProMetrics:
    price_vs_par: float
    real_yield: float
    credit_spread: float


@dataclass(frozen=True)
class ScreenerProResult:
    total_score: float
    scores: dict[str, float]
    recommendation: ScreenerProRecommendation
    metrics: ScreenerProMetrics


# --- Valuation ---


@dataclass(frozen=True)
class ValuationMetrics:
    fair_price: float
    price_vs_fair: float
    current_yield: float
    annual_coupon: float
    period_coupon: float


@dataclass(frozen=True)
class ValuationResult:
    metrics: ValuationMetrics
    risks: tuple[RiskAssessment, ...]
    meets_return: bool
    is_cheap: bool
    recommendation: ValuationRecommendation


# --- Complete evaluation ---


@dataclass(frozen=True)
class CompleteResult:
    results: dict[str, Checkpoint]
    decision: CompleteDecision


# --- Flowchart ---


@dataclass(frozen=True)
class FlowchartMetrics:
    fair_price: float
    price_vs_fair: float
    is_cheap: bool
    current_yield: float
    real_yield: float


@dataclass(frozen=True)
class FlowchartGates:
    gate1a: Status
    gate1b: Status
    phase1_pass: bool
    gate2a: Status
    gate2b: Status
    phase2_pass: bool
    gate3a: Status
    gate3b: Status
    gate3c: Status


@dataclass(frozen=True)
class FlowchartResult:
    metrics: FlowchartMetrics
    gates: FlowchartGates
    risk_flags: int
    decision: FlowchartDecision


# --- Smart evaluator ---


@dataclass(frozen=True)
class SmartEvaluatorResult:
    total_score: float
    results: dict[str, ScoredStep]
    breakdown: dict[str, float]
    recommendation: SmartRecommendation
