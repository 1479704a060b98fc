"""Bond screener: nine pass/fail checkpoints, BUY only if all pass."""

from __future__ import annotations

from bondlab.bond_math import (
    calculate_duration,
    current_yield,
    home_real_return,
    real_yield,
    solve_ytm,
)
from bondlab.interfaces import EvaluationRequest
from bondlab.pipelines.base import BasePipeline
from bondlab.policies import ScreenerPolicy
from bondlab.requests.screener import ScreenerRequest
from bondlab.results import Checkpoint, ScreenerDecision, ScreenerMetrics, ScreenerResult

NON_POSITIVE_YTM_REASON = "YTM <= 0%. You would be paying to lend money."


class ScreenerPipeline(BasePipeline):
    """Solves YTM from price, then gates real yield, duration, credit and liquidity."""

    name = "screener"

    def __init__(self, policy: ScreenerPolicy | None = None) -> None:
        self.policy = policy or ScreenerPolicy()

    def can_evaluate(self, request: EvaluationRequest) -> bool:
        return isinstance(request, ScreenerRequest)

    def evaluate(self, request: EvaluationRequest) -> ScreenerResult:
        assert isinstance(request, ScreenerRequest)
        r = request
        p = self.policy
        F, P, c, n = r.face_value, r.market_price, r.coupon_rate, r.years_to_maturity

        cy = current_yield(F, c, P)
        ytm = solve_ytm(P, F, c, n)
        if ytm <= 0:
            return ScreenerResult(
                metrics=ScreenerMetrics(current_yield=cy, ytm=ytm),
                decision=ScreenerDecision.REJECT,
                rejection_reason=NON_POSITIVE_YTM_REASON,
            )

        ry = real_yield(ytm, r.inflation)
        duration = calculate_duration(F, c, ytm, n, P)
        spread = ytm - r.risk_free_ytm
        home_return = home_real_return(ytm, r.currency_depreciation, r.home_inflation)

        max_duration = n * p.max_duration_fraction
        min_spread = p.credit_spreads.minimum_spread(r.bond_rating)

        checkpoints = {
            "cy": Checkpoint(True, cy, f"CY = {cy * 100:.2f}%"),
            "ytm": Checkpoint(ytm > 0, ytm, f"YTM = {ytm * 100:.2f}%"),
            "ry": Checkpoint(
                ry > p.min_real_yield,
                ry,
                f"RY = {ry * 100:.2f}% (Threshold: > {p.min_real_yield * 100:.1f}%)",
            ),
            "duration": Checkpoint(
                duration < max_duration,
                duration,
                f"Duration = {duration:.2f} yrs (Threshold: < {max_duration:.1f})",
            ),
            "holding_period": Checkpoint(
                duration <= r.holding_period,
                r.holding_period,
                f"Holding Period ({r.holding_period:g} yrs) vs Duration ({duration:.2f} yrs)",
            ),
            "credit_spread": Checkpoint(
                spread > min_spread,
                spread,
                f"Spread = {spread * 100:.2f}% "
                f"(Needed for {r.bond_rating.value}: {min_spread * 100:.1f}%)",
            ),
            "currency_risk": Checkpoint(
                home_return > 0,
                home_return,
                f"Real Return (Home) = {home_return * 100:.2f}%",
            ),
            "callability": Checkpoint(
                p.callability.passes(r.is_callable, ytm),
                r.is_callable,
                "Bond is callable" if r.is_callable else "Not callable",
            ),
            "liquidity": Checkpoint(
                r.trading_volume >= p.min_trading_volume,
                r.trading_volume,
                f"Daily Volume = ${r.trading_volume:.1f}M",
            ),
        }

        all_pass = all(cp.passed for cp in checkpoints.values())
        return ScreenerResult(
            metrics=ScreenerMetrics(
                current_yield=cy,
                ytm=ytm,
                real_yield=ry,
                duration=duration,
                credit_spread=spread,
                price_sensitivity=-duration * p.rate_shock,
                home_real_return=home_return,
            ),
            checkpoints=checkpoints,
            decision=ScreenerDecision.BUY if all_pass else ScreenerDecision.REJECT,
        )
