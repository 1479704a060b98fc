"""Valuation screener: fair price at the required yield plus a qualitative risk list."""

from __future__ import annotations

from bondlab.bond_math import calculate_fair_price, price_vs_fair_pct
from bondlab.enums import CouponType, CurrencyRisk, HoldingPlan, Liquidity
from bondlab.interfaces import EvaluationRequest
from bondlab.pipelines.base import BasePipeline
from bondlab.policies import ValuationPolicy
from bondlab.requests.valuation import ValuationRequest
from bondlab.results import (
    RiskAssessment,
    Status,
    ValuationMetrics,
    ValuationRecommendation,
    ValuationResult,
)

_COUPON_STATUS = {
    CouponType.FIXED: Status.PASS,
    CouponType.FLOATING: Status.CAUTION,
    CouponType.ZERO: Status.FAIL,
}
_LIQUIDITY_STATUS = {
    Liquidity.TIGHT: Status.PASS,
    Liquidity.MODERATE: Status.CAUTION,
    Liquidity.WIDE: Status.FAIL,
}
_CURRENCY_STATUS = {
    CurrencyRisk.NONE: Status.PASS,
    CurrencyRisk.LOW: Status.CAUTION,
    CurrencyRisk.HIGH: Status.FAIL,
}


class ValuationPipeline(BasePipeline):
    """
    BUY when the bond meets the required return, no risk fails and the price
    is at most a small premium to fair value. AVOID when return or risk fails;
    HOLD / WATCH when only the valuation is stretched.
    """

    name = "valuation"

    def __init__(self, policy: ValuationPolicy | None = None) -> None:
        self.policy = policy or ValuationPolicy()

    def can_evaluate(self, request: EvaluationRequest) -> bool:
        return isinstance(request, ValuationRequest)

    def evaluate(self, request: EvaluationRequest) -> ValuationResult:
        assert isinstance(request, ValuationRequest)
        r = request
        F, c, m = r.face_value, r.coupon_rate, r.frequency

        fair_price = calculate_fair_price(F, c, r.required_yield, r.years_to_maturity, m)
        premium = price_vs_fair_pct(r.bond_price, fair_price)
        annual_coupon = F * c

        rating = r.credit_rating
        grade = "Investment Grade" if rating.is_investment_grade else "Junk"
        risks = (
            RiskAssessment(
                "Credit Risk",
                Status.PASS if rating.is_investment_grade else Status.CAUTION,
                f"{rating.value} - {grade}",
            ),
            RiskAssessment("Coupon Type", _COUPON_STATUS[r.coupon_type], r.coupon_type.value),
            RiskAssessment(
                "Callability",
                Status.CAUTION if r.is_callable else Status.PASS,
                "Callable" if r.is_callable else "Non-Callable",
            ),
            RiskAssessment("Liquidity", _LIQUIDITY_STATUS[r.liquidity], r.liquidity.value),
            RiskAssessment("Currency Risk", _CURRENCY_STATUS[r.currency_risk], r.currency_risk.value),
            RiskAssessment(
                "Holding Plan",
                Status.PASS if r.holding_plan is HoldingPlan.MATURITY else Status.CAUTION,
                r.holding_plan.value,
            ),
        )

        meets_return = r.ytm >= r.required_yield
        no_risk_fails = all(risk.status is not Status.FAIL for risk in risks)
        is_cheap = r.bond_price < fair_price
        main_criteria = meets_return and no_risk_fails
        valuation_ok = is_cheap or premium <= self.policy.max_premium_pct

        if main_criteria and valuation_ok:
            recommendation = ValuationRecommendation.BUY
        elif not main_criteria:
            recommendation = ValuationRecommendation.AVOID
        else:
            recommendation = ValuationRecommendation.HOLD_WATCH

        return ValuationResult(
            metrics=ValuationMetrics(
                fair_price=fair_price,
                price_vs_fair=premium,
                current_yield=annual_coupon / r.bond_price * 100,
                annual_coupon=annual_coupon,
                period_coupon=annual_coupon / m,
            ),
            risks=risks,
            meets_return=meets_return,
            is_cheap=is_cheap,
            recommendation=recommendation,
        )
