"""
Smart evaluator: six weighted steps scored 0-2, folded into a 0-2 total.

| step | weight | looks at |
| --- | --- | --- |
| step1 | 25% | entry price (buy) or position P&L (hold) |
| step2 | 40% | real yield and spread over risk-free |
| step3 | 15% | modified duration |
| step4 | 10% | credit rating |
| step5 | 5% | coupon structure |
| step6 | 5% | time to maturity |

In buy mode the valuation signal is the position within a 52-week range. The
policy's `percentile_basis` selects whether that range is of prices (low price
is a good entry) or of yields (high yield is a good entry).
"""

from __future__ import annotations

from datetime import date
from typing import Callable

from bondlab.bond_math import real_yield, years_between
from bondlab.enums import CouponType, EvaluationMode, PercentileBasis
from bondlab.errors import InvalidInputError
from bondlab.interfaces import EvaluationRequest
from bondlab.pipelines.base import BasePipeline
from bondlab.policies import SmartEvaluatorPolicy
from bondlab.requests.smart_evaluator import SmartEvaluatorRequest
from bondlab.results import ScoredStep, SmartEvaluatorResult, Status

_COUPON_STEP = {
    CouponType.FIXED: (Status.PASS, 2, "Predictable cash flow."),
    CouponType.FLOATING: (Status.CAUTION, 1, "Variable cash flow."),
    CouponType.ZERO: (Status.CAUTION, 1, "No interim cash flow."),
}


def _range_position(value: float, low: float, high: float) -> float:
    span = high - low
    return 0.5 if span == 0 else (value - low) / span


class SmartEvaluatorPipeline(BasePipeline):
    name = "smart-evaluator"

    def __init__(
        self,
        policy: SmartEvaluatorPolicy | None = None,
        today: Callable[[], date] = date.today,
    ) -> None:
        self.policy = policy or SmartEvaluatorPolicy()
        self._today = today

    def can_evaluate(self, request: EvaluationRequest) -> bool:
        return isinstance(request, SmartEvaluatorRequest)

    def evaluate(self, request: EvaluationRequest) -> SmartEvaluatorResult:
        assert isinstance(request, SmartEvaluatorRequest)
        r = request
        p = self.policy

        if r.mode is EvaluationMode.BUY:
            step1 = self._entry_step(r)
        else:
            step1 = self._position_step(r)

        results = {
            "step1": step1,
            "step2": self._yield_step(r),
            "step3": self._duration_step(r),
            "step4": self._credit_step(r),
            "step5": self._coupon_step(r),
            "step6": self._maturity_step(r),
        }
        breakdown = {
            key: round(step.score * p.weights[key], 2) for key, step in results.items()
        }
        total = round(sum(step.score * p.weights[key] for key, step in results.items()), 2)

        return SmartEvaluatorResult(
            total_score=total,
            results=results,
            breakdown=breakdown,
            recommendation=p.tiers.classify(total),
        )

    # --- step 1 ---

    def _valuation_position(self, r: SmartEvaluatorRequest) -> float:
        """0 = cheapest point of the 52-week range, 1 = richest."""
        if self.policy.percentile_basis is PercentileBasis.YIELD:
            if r.year_yield_high is None or r.year_yield_low is None:
                raise InvalidInputError(
                    "year_yield_high and year_yield_low are required for yield-percentile valuation"
                )
            return 1 - _range_position(r.ytm, r.year_yield_low, r.year_yield_high)
        if r.year_price_high is None or r.year_price_low is None:
            raise InvalidInputError(
                "year_price_high and year_price_low are required for price-percentile valuation"
            )
        return _range_position(r.dirty_price, r.year_price_low, r.year_price_high)

    def _entry_step(self, r: SmartEvaluatorRequest) -> ScoredStep:
        p = self.policy
        day_high = r.day_high or 0.0
        day_low = r.day_low or 0.0
        day_spread = (day_high - day_low) / day_low if day_low > 0 else 0.0
        volatile = day_spread > p.max_intraday_spread

        position = self._valuation_position(r)
        if position < p.cheap_position:
            status, score = Status.PASS, 2.0
            detail = f"Price ${r.dirty_price:g} is near the 52-week low. Strong Value Entry."
        elif position < p.fair_position:
            status = Status.CAUTION
            score = 0.5 if volatile else 1.0
            detail = "Price is moderate. " + (
                "Warning: High Intraday Volatility." if volatile else "Acceptable entry."
            )
        else:
            status, score = Status.FAIL, 0.0
            detail = f"Price ${r.dirty_price:g} is near the 52-week high. Overvalued."

        clean_price = r.dirty_price - r.accrued_interest
        capital_gain = r.face_value - clean_price
        extras = []
        if r.accrued_interest > 0:
            extras.append(f"+${r.accrued_interest:.2f} Accrued")
        if capital_gain > 0:
            extras.append(f"Guaranteed Capital Gain: ${capital_gain:.2f}")
        if extras:
            detail += f" ({', '.join(extras)})"

        return ScoredStep(status, score, f"Clean: ${clean_price:.2f}", detail)

    def _position_step(self, r: SmartEvaluatorRequest) -> ScoredStep:
        p = self.policy
        assert r.purchase_price is not None
        pnl = (r.dirty_price - r.purchase_price) / r.purchase_price * 100

        if pnl > p.profit_pct:
            status, score = Status.PASS, 2.0
            detail = f"Position is profitable (+{pnl:.2f}%). Hold for gains."
        elif pnl > p.breakeven_floor_pct:
            status, score = Status.CAUTION, 1.0
            detail = f"Position near breakeven ({pnl:.2f}%). Watch closely."
        else:
            status, score = Status.FAIL, 0.0
            detail = f"Position underwater ({pnl:.2f}%). Consider stop-loss."

        if r.current_investment:
            detail += f" Unrealised P&L: ${r.current_investment * pnl / 100:,.2f}."

        sign = "+" if pnl > 0 else ""
        return ScoredStep(status, score, f"P&L: {sign}{pnl:.2f}%", detail)

    # --- steps 2-6 ---

    def _yield_step(self, r: SmartEvaluatorRequest) -> ScoredStep:
        p = self.policy
        ry = real_yield(r.ytm, r.inflation_rate, r.currency_dev)
        spread = r.ytm - r.risk_free_rate

        if ry > p.min_real_yield and spread > p.min_spread:
            status, score = Status.PASS, 2.0
            detail = "Returns beat inflation. Healthy spread vs Risk Free Rate."
        elif ry > 0:
            status = Status.CAUTION
            if spread < p.min_spread:
                score = 0.5
                detail = (
                    f"Yield positive, but Spread < {p.min_spread * 100:.1f}% (Risk not justified)."
                )
            else:
                score = 1.0
                detail = "Returns barely cover inflation."
        else:
            status, score = Status.FAIL, 0.0
            detail = "Returns do not cover inflation/currency loss."

        annual_income = r.face_value * r.coupon_rate
        if annual_income > 0:
            detail += f" Pays ${annual_income:.2f}/yr."

        return ScoredStep(
            status,
            score,
            f"Real: {ry * 100:.2f}%",
            detail,
            formula=(
                f"Spread: {spread * 100:.2f}% | "
                "Real Yield: ((1 + YTM) / ((1 + Inflation) * (1 + FX))) - 1"
            ),
        )

    def _duration_step(self, r: SmartEvaluatorRequest) -> ScoredStep:
        p = self.policy
        d = r.modified_duration
        if d < p.low_duration:
            status, score = Status.PASS, 2.0
        elif d < p.high_duration:
            status, score = Status.CAUTION, 1.0
        else:
            status, score = Status.FAIL, 0.0
        # Modified duration is the % price move for a 1% parallel rate move.
        return ScoredStep(
            status,
            score,
            f"{d:.2f} years",
            f"If rates rise 1%, price drops ~{d:.2f}%.",
        )

    def _credit_step(self, r: SmartEvaluatorRequest) -> ScoredStep:
        rating = r.fitch_rating
        if rating.is_investment_grade:
            return ScoredStep(Status.PASS, 2.0, rating.value, "Investment Grade.")
        if rating.is_high_yield:
            return ScoredStep(
                Status.CAUTION, 1.0, rating.value, "High Yield / Non-Investment Grade."
            )
        return ScoredStep(Status.FAIL, 0.0, rating.value, "High Risk / Unrated.")

    def _coupon_step(self, r: SmartEvaluatorRequest) -> ScoredStep:
        status, score, detail = _COUPON_STEP[r.coupon_type]
        return ScoredStep(status, float(score), r.coupon_type.value.upper(), detail)

    def _maturity_step(self, r: SmartEvaluatorRequest) -> ScoredStep:
        p = self.policy
        as_of = r.as_of or self._today()
        years = years_between(as_of, r.maturity_date)
        if years < p.short_maturity:
            status, score, detail = Status.PASS, 2.0, "Short duration, lower risk."
        elif years < p.medium_maturity:
            status, score, detail = Status.CAUTION, 1.0, "Medium duration."
        else:
            status, score, detail = Status.CAUTION, 1.0, "Long duration, higher uncertainty."
        return ScoredStep(status, score, f"{years:.1f} years", detail)
