"""Bond screener pro: eight 0-2 scores summed and mapped to a recommendation tier."""

from __future__ import annotations

from bondlab.enums import CouponType
from bondlab.interfaces import EvaluationRequest
from bondlab.pipelines.base import BasePipeline
from bondlab.policies import ScreenerProPolicy
from bondlab.requests.screener_pro import ScreenerProRequest
from bondlab.results import ScreenerProMetrics, ScreenerProResult


class ScreenerProPipeline(BasePipeline):
    """Scores quoted analytics; nothing is solved here."""

    name = "screener-pro"

    def __init__(self, policy: ScreenerProPolicy | None = None) -> None:
        self.policy = policy or ScreenerProPolicy()

    def can_evaluate(self, request: EvaluationRequest) -> bool:
        return isinstance(request, ScreenerProRequest)

    def evaluate(self, request: EvaluationRequest) -> ScreenerProResult:
        assert isinstance(request, ScreenerProRequest)
        r = request
        p = self.policy

        price_vs_par = (r.bond_price - r.face_value) / r.face_value
        real_yield = r.ytm - r.inflation
        spread = r.ytm - r.treasury_ytm
        min_spread = p.credit_spreads.minimum_spread(r.credit_rating)

        if real_yield > p.strong_real_yield:
            real_yield_score = 2
        elif real_yield > 0:
            real_yield_score = 1
        else:
            real_yield_score = 0

        if spread >= min_spread:
            spread_score = 2
        elif spread > 0:
            spread_score = 1
        else:
            spread_score = 0

        if not r.is_callable:
            call_score = 2
        elif r.ytm >= p.callable_min_ytm:
            call_score = 1
        else:
            call_score = 0

        scores: dict[str, float] = {
            "step2": 2 if abs(price_vs_par) < p.max_par_deviation else 1,
            "step3a": 2 if r.coupon_type is CouponType.FIXED else 1,
            "step3b": 2 if r.current_yield <= r.ytm else 1,
            "step4": real_yield_score,
            "step5a": 2 if r.duration <= r.holding_period else 1,
            "step5b": spread_score,
            "step5c": call_score,
            "step6a": 2 if r.trading_volume >= p.min_trading_volume else 1,
        }
        total = sum(scores.values())

        return ScreenerProResult(
            total_score=total,
            scores=scores,
            recommendation=p.tiers.classify(total),
            metrics=ScreenerProMetrics(
                price_vs_par=price_vs_par,
                real_yield=real_yield,
                credit_spread=spread,
            ),
        )
