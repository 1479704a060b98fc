"""
Threshold tables for the decision pipelines.

Each policy is a frozen dataclass with the production defaults baked in, so a
pipeline can be built with `ScreenerPipeline()` and tests (or callers with a
different risk appetite) can pass a modified copy via `dataclasses.replace`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, Mapping, TypeVar

from bondlab.enums import CreditRating, PercentileBasis
from bondlab.results import (
    ScreenerProRecommendation,
    SmartRecommendation,
)

D = TypeVar("D")


def _default_minimum_spreads() -> dict[CreditRating, float]:
    return {CreditRating.BBB: 0.015, CreditRating.BB: 0.04}


@dataclass(frozen=True)
class CreditSpreadPolicy:
    """Minimum spread over the risk-free rate, looked up by rating tier."""

    minimum_by_rating: Mapping[CreditRating, float] = field(
        default_factory=_default_minimum_spreads
    )
    default_minimum: float = 0.008

    def minimum_spread(self, rating: CreditRating) -> float:
        return self.minimum_by_rating.get(rating, self.default_minimum)


@dataclass(frozen=True)
class CallabilityPolicy:
    """A callable bond only compensates for call risk above `min_ytm`."""

    min_ytm: float = 0.05

    def passes(self, is_callable: bool, ytm: float) -> bool:
        return not is_callable or ytm > self.min_ytm


@dataclass(frozen=True)
class ScoreTiers(Generic[D]):
    """Ordered (threshold, decision) pairs; first threshold met wins."""

    tiers: tuple[tuple[float, D], ...]
    floor: D

    def classify(self, score: float) -> D:
        for threshold, decision in self.tiers:
            if score >= threshold:
                return decision
        return self.floor


@dataclass(frozen=True)
class ScreenerPolicy:
    min_real_yield: float = 0.015
    max_duration_fraction: float = 0.5
    min_trading_volume: float = 1.0
    rate_shock: float = 0.01
    credit_spreads: CreditSpreadPolicy = field(default_factory=CreditSpreadPolicy)
    callability: CallabilityPolicy = field(default_factory=CallabilityPolicy)


def _screener_pro_tiers() -> ScoreTiers[ScreenerProRecommendation]:
    return ScoreTiers(
        tiers=(
            (12.0, ScreenerProRecommendation.GOOD_BUY),
            (8.0, ScreenerProRecommendation.HOLD_WATCH),
        ),
        floor=ScreenerProRecommendation.REJECT_AVOID,
    )


@dataclass(frozen=True)
class ScreenerProPolicy:
    max_par_deviation: float = 0.15
    strong_real_yield: float = 0.01
    callable_min_ytm: float = 0.05
    min_trading_volume: float = 1.0
    credit_spreads: CreditSpreadPolicy = field(default_factory=CreditSpreadPolicy)
    tiers: ScoreTiers[ScreenerProRecommendation] = field(default_factory=_screener_pro_tiers)


@dataclass(frozen=True)
class ValuationPolicy:
    # Price may sit this many percent above fair value and still pass.
    max_premium_pct: float = 2.0


@dataclass(frozen=True)
class CompletePolicy:
    min_real_yield: float = 0.015
    max_duration_fraction: float = 0.5
    min_trading_volume: float = 1.0
    credit_spreads: CreditSpreadPolicy = field(default_factory=CreditSpreadPolicy)
    callability: CallabilityPolicy = field(default_factory=CallabilityPolicy)


@dataclass(frozen=True)
class FlowchartPolicy:
    frequency: int = 2
    assumed_inflation: float = 0.025
    min_credit_spread: float = 0.01


def _smart_weights() -> dict[str, float]:
    return {
        "step1": 0.25,
        "step2": 0.40,
        "step3": 0.15,
        "step4": 0.10,
        "step5": 0.05,
        "step6": 0.05,
    }


def _smart_tiers() -> ScoreTiers[SmartRecommendation]:
    return ScoreTiers(
        tiers=(
            (1.6, SmartRecommendation.STRONG_BUY),
            (1.2, SmartRecommendation.HOLD_WATCH),
        ),
        floor=SmartRecommendation.AVOID_SELL,
    )


@dataclass(frozen=True)
class SmartEvaluatorPolicy:
    percentile_basis: PercentileBasis = PercentileBasis.PRICE
    weights: Mapping[str, float] = field(default_factory=_smart_weights)
    tiers: ScoreTiers[SmartRecommendation] = field(default_factory=_smart_tiers)
    # Step 1 (buy): percentile position within the 52-week range.
    cheap_position: float = 0.2
    fair_position: float = 0.6
    max_intraday_spread: float = 0.02
    # Step 1 (hold): P&L percent bands.
    profit_pct: float = 5.0
    breakeven_floor_pct: float = -3.0
    # Step 2
    min_real_yield: float = 0.02
    min_spread: float = 0.015
    # Step 3: modified duration bands in years.
    low_duration: float = 4.0
    high_duration: float = 7.0
    # Step 6: years to maturity bands.
    short_maturity: float = 5.0
    medium_maturity: float = 10.0
